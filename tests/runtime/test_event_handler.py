from __future__ import annotations

import random

import pygame
import pytest

from lsystems.display.color import Color
from lsystems.engine import EngineSettings, LSystemEngine
from lsystems.generation import Family
from lsystems.runtime.pygame_event_handler import PygameEventHandler


@pytest.fixture
def engine(canvas, sink) -> LSystemEngine:
    return LSystemEngine(
        canvas,
        sink,
        settings=EngineSettings(family=Family.ORIGINAL, color=Color.black(), stroke_size=5),
        rng=random.Random(3),
    )


@pytest.fixture
def handler(engine) -> PygameEventHandler:
    return PygameEventHandler(engine)


def key(code: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=code)


class TestPygameEventHandler:
    def test_primary_button_press_and_release(self, handler, engine, sink) -> None:
        assert handler.handle_event(
            pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(20, 30))
        )
        assert len(engine.history) == 1
        drawn = len(sink.requests)

        assert handler.handle_event(
            pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(20, 30))
        )
        assert len(engine.history) == 0
        assert len(sink.requests) == 2 * drawn

    def test_other_buttons_are_ignored(self, handler, engine, sink) -> None:
        handler.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(5, 5)))

        assert sink.requests == []
        assert len(engine.history) == 0

    @pytest.mark.parametrize(
        ("code", "family"),
        [(pygame.K_2, Family.BARNSLEY), (pygame.K_4, Family.LICHTENBERG), (pygame.K_6, Family.PORPITA)],
    )
    def test_number_keys_pick_a_family(self, handler, engine, code, family) -> None:
        handler.handle_event(key(code))

        assert engine.settings.family is family

    def test_size_keys_clamp_to_range(self, handler, engine) -> None:
        for _ in range(8):
            handler.handle_event(key(pygame.K_EQUALS))
        assert engine.settings.stroke_size == 10

        for _ in range(12):
            handler.handle_event(key(pygame.K_MINUS))
        assert engine.settings.stroke_size == 1

    def test_clear_key(self, handler, canvas) -> None:
        clears = canvas.clears

        handler.handle_event(key(pygame.K_c))

        assert canvas.clears == clears + 1

    @pytest.mark.parametrize(
        "event",
        [
            pygame.event.Event(pygame.QUIT),
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q),
        ],
    )
    def test_quit_events_stop_the_loop(self, handler, event) -> None:
        assert handler.handle_event(event) is False
