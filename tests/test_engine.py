"""Tests for the press/release facade."""

from __future__ import annotations

import random

import pytest

from lsystems.display.color import Color
from lsystems.engine import EngineSettings, LSystemEngine, validate_stroke_size
from lsystems.generation import Family, UnknownFamilyError
from tests.helpers.recording import RecordingSink

GREEN = Color(0, 160, 0)


@pytest.fixture
def engine(canvas, sink) -> LSystemEngine:
    return LSystemEngine(
        canvas,
        sink,
        settings=EngineSettings(family=Family.ORIGINAL, color=GREEN, stroke_size=3),
        rng=random.Random(99),
    )


class TestLSystemEngine:
    def test_release_before_any_press_does_nothing(self, engine, sink) -> None:
        assert engine.on_release() is None
        assert sink.requests == []

    def test_press_grows_and_release_erases(self, engine, sink, canvas) -> None:
        root = engine.on_press_at(32, 32)
        drawn = list(sink.requests)

        assert root.symbol == "A"
        assert root.start == (32.0, 32.0)
        assert drawn and {request.color for request in drawn} == {GREEN}
        assert len(engine.history) == 1

        assert engine.on_release() is root

        erased = sink.requests[len(drawn):]
        assert sorted(r.start + r.end for r in erased) == sorted(r.start + r.end for r in drawn)
        assert {request.color for request in erased} == {canvas.background}

    def test_settings_are_read_when_a_press_starts(self, engine, sink) -> None:
        engine.on_press_at(10, 10)
        first = len(sink.requests)

        engine.set_family("L")
        engine.set_color("#ff0000")
        engine.set_stroke_size(2)
        root = engine.on_press_at(50, 50)

        assert root.symbol == "L"
        assert root.branch_size == 2
        assert {r.color for r in sink.requests[first:]} == {Color(255, 0, 0)}
        assert {r.color for r in sink.requests[:first]} == {GREEN}

    def test_unknown_family_is_rejected(self, engine) -> None:
        with pytest.raises(UnknownFamilyError):
            engine.set_family("dragon")

        assert engine.settings.family is Family.ORIGINAL

    @pytest.mark.parametrize("size", [0, 11, -3, 2.5, True])
    def test_invalid_stroke_size_is_rejected(self, engine, size) -> None:
        with pytest.raises(ValueError):
            engine.set_stroke_size(size)

        assert engine.settings.stroke_size == 3

    @pytest.mark.parametrize("size", [1, 5, 10])
    def test_valid_stroke_sizes(self, size: int) -> None:
        assert validate_stroke_size(size) == size

    def test_clear_repaints_background_and_keeps_history(self, engine, canvas) -> None:
        engine.on_press_at(32, 32)
        clears = canvas.clears

        engine.clear()

        assert canvas.clears == clears + 1
        assert len(engine.history) == 1

    def test_aborted_run_can_still_be_erased(self, canvas) -> None:
        sink = RecordingSink()
        engine = LSystemEngine(
            canvas,
            sink,
            settings=EngineSettings(family=Family.ORIGINAL, color=GREEN, stroke_size=8),
            rng=random.Random(5),
            max_nodes=10,
        )

        root = engine.on_press_at(32, 32)
        drawn = len(sink.requests)

        assert drawn == 10
        assert len(engine.history) == 1
        assert engine.on_release() is root
        assert len(sink.requests) == 2 * drawn

    def test_settings_default_from_environment(self, monkeypatch, canvas, sink) -> None:
        monkeypatch.setenv("LSYSTEMS_DEFAULT_FAMILY", "porpita")
        monkeypatch.setenv("LSYSTEMS_DEFAULT_STROKE_SIZE", "2")

        engine = LSystemEngine(canvas, sink, rng=random.Random(0))

        assert engine.settings.family is Family.PORPITA
        assert engine.settings.stroke_size == 2
        assert engine.on_press_at(32, 32).symbol == "C"
