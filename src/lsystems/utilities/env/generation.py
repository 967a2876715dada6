import os

from lsystems.generation.families import Family
from lsystems.utilities.env.parsing import _env_int, _env_optional_int

DEFAULT_FAMILY = Family.ORIGINAL
DEFAULT_STROKE_SIZE = 5
MIN_STROKE_SIZE = 1
MAX_STROKE_SIZE = 10
DEFAULT_MAX_NODES_PER_RUN = 200_000


class GenerationConfiguration:
    @classmethod
    def default_family(cls) -> Family:
        raw = os.environ.get("LSYSTEMS_DEFAULT_FAMILY")
        if raw is None:
            return DEFAULT_FAMILY
        return Family.parse(raw)

    @classmethod
    def default_stroke_size(cls) -> int:
        return _env_int(
            "LSYSTEMS_DEFAULT_STROKE_SIZE",
            default=DEFAULT_STROKE_SIZE,
            minimum=MIN_STROKE_SIZE,
            maximum=MAX_STROKE_SIZE,
        )

    @classmethod
    def max_nodes_per_run(cls) -> int:
        return _env_int(
            "LSYSTEMS_MAX_NODES_PER_RUN",
            default=DEFAULT_MAX_NODES_PER_RUN,
            minimum=1,
        )

    @classmethod
    def random_seed(cls) -> int | None:
        return _env_optional_int("LSYSTEMS_SEED")
