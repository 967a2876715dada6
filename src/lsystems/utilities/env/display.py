import os

from lsystems.display.color import Color
from lsystems.utilities.env.parsing import _env_int, _env_optional_int

DEFAULT_DRAW_COLOR = "#000000"
DEFAULT_BACKGROUND_COLOR = "#ffffff"
DEFAULT_FPS = 60


class DisplayConfiguration:
    @classmethod
    def default_color(cls) -> Color:
        return cls._color("LSYSTEMS_DEFAULT_COLOR", DEFAULT_DRAW_COLOR)

    @classmethod
    def background_color(cls) -> Color:
        return cls._color("LSYSTEMS_BACKGROUND_COLOR", DEFAULT_BACKGROUND_COLOR)

    @classmethod
    def canvas_size(cls) -> int | None:
        return _env_optional_int("LSYSTEMS_CANVAS_SIZE", minimum=1)

    @classmethod
    def fps(cls) -> int:
        return _env_int("LSYSTEMS_FPS", default=DEFAULT_FPS, minimum=1)

    @staticmethod
    def _color(env_var: str, default: str) -> Color:
        raw = os.environ.get(env_var, default)
        try:
            return Color.parse(raw)
        except ValueError as exc:
            raise ValueError(f"{env_var} must be a #rrggbb colour") from exc
