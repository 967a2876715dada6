from lsystems.generation.errors import (GenerationAborted,  # noqa: F401
                                        UnbalancedBracketError,
                                        UnknownFamilyError)
from lsystems.generation.families import Family  # noqa: F401
from lsystems.generation.geometry import (DrawInterpreter,  # noqa: F401
                                          StrokeRequest, StrokeSink)
from lsystems.generation.node import Node, Point, WorkQueue  # noqa: F401
