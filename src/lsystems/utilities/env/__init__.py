"""Environment configuration helpers."""

from lsystems.utilities.env.config import Configuration as Configuration
from lsystems.utilities.env.generation import MAX_STROKE_SIZE as MAX_STROKE_SIZE
from lsystems.utilities.env.generation import MIN_STROKE_SIZE as MIN_STROKE_SIZE
