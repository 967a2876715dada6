import os
import random
import tempfile

os.environ.setdefault("LSYSTEMS_LOG_DIR", tempfile.mkdtemp(prefix="lsystems-logs-"))
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest
from hypothesis import HealthCheck, settings

from lsystems.display.color import Color
from lsystems.generation import DrawInterpreter
from tests.helpers.recording import RecordingCanvas, RecordingSink
from tests.helpers.time import ManualScheduler

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
settings.load_profile("default")

LSYSTEMS_ENV_VARS = (
    "LSYSTEMS_DEFAULT_FAMILY",
    "LSYSTEMS_DEFAULT_STROKE_SIZE",
    "LSYSTEMS_DEFAULT_COLOR",
    "LSYSTEMS_BACKGROUND_COLOR",
    "LSYSTEMS_ANIMATION_TIME_UNIT_MS",
    "LSYSTEMS_ANIMATION_MAX_WORKERS",
    "LSYSTEMS_MAX_NODES_PER_RUN",
    "LSYSTEMS_SEED",
    "LSYSTEMS_CANVAS_SIZE",
    "LSYSTEMS_FPS",
)


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield


@pytest.fixture(autouse=True)
def clean_lsystems_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test from the built-in defaults."""

    for name in LSYSTEMS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def interpreter(sink: RecordingSink) -> DrawInterpreter:
    return DrawInterpreter(sink)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas.create(64, Color.white())


@pytest.fixture
def manual_scheduler() -> ManualScheduler:
    return ManualScheduler()
