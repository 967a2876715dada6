from lsystems.utilities.env.animation import AnimationConfiguration
from lsystems.utilities.env.display import DisplayConfiguration
from lsystems.utilities.env.generation import GenerationConfiguration


class Configuration(
    GenerationConfiguration,
    AnimationConfiguration,
    DisplayConfiguration,
):
    """Aggregate environment configuration helpers."""
