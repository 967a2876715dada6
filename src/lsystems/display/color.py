from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Color:
    r: int
    g: int
    b: int

    @staticmethod
    def black() -> "Color":
        return Color(r=0, g=0, b=0)

    @staticmethod
    def white() -> "Color":
        return Color(r=255, g=255, b=255)

    def __post_init__(self) -> None:
        for variant in self._as_tuple():
            if not 0 <= variant <= 255:
                raise ValueError(
                    f"Expected all color values to be between 0 and 255. Found {self._as_tuple()}"
                )

    @classmethod
    def parse(cls, value: "str | Color | tuple[int, int, int]") -> "Color":
        """Build a colour from ``#rrggbb``/``rrggbb`` text, an RGB tuple or a Color."""
        if isinstance(value, Color):
            return value
        if isinstance(value, tuple):
            r, g, b = value
            return Color(r=int(r), g=int(g), b=int(b))

        text = value.strip().lstrip("#")
        if len(text) == 3:
            text = "".join(ch * 2 for ch in text)
        if len(text) != 6:
            raise ValueError(f"Cannot parse colour {value!r}; expected #rrggbb")
        try:
            channels = bytes.fromhex(text)
        except ValueError as exc:
            raise ValueError(f"Cannot parse colour {value!r}; expected #rrggbb") from exc
        return Color(r=channels[0], g=channels[1], b=channels[2])

    def tuple(self) -> tuple[int, int, int]:
        return self._as_tuple()

    def _as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
