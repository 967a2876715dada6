from lsystems.utilities.env.parsing import _env_float, _env_int

DEFAULT_TIME_UNIT_MS = 1.0
DEFAULT_ANIMATION_MAX_WORKERS = 64


class AnimationConfiguration:
    @classmethod
    def animation_time_unit_ms(cls) -> float:
        return _env_float(
            "LSYSTEMS_ANIMATION_TIME_UNIT_MS",
            default=DEFAULT_TIME_UNIT_MS,
            minimum=0.0,
        )

    @classmethod
    def animation_max_workers(cls) -> int:
        return _env_int(
            "LSYSTEMS_ANIMATION_MAX_WORKERS",
            default=DEFAULT_ANIMATION_MAX_WORKERS,
            minimum=1,
        )
