from lsystems.rendering.canvas import Canvas  # noqa: F401
from lsystems.rendering.scheduler import (  # noqa: F401
    AnimationScheduler, ThreadPoolAnimationScheduler)
from lsystems.rendering.stroke import (AnimatedStrokeRenderer,  # noqa: F401
                                       ImmediateStrokeRenderer,
                                       StrokeAnimation)
