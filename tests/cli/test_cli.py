from __future__ import annotations

from typer.testing import CliRunner

from lsystems.loop import app

runner = CliRunner()

GROW_ARGS = ["grow", "--family", "L", "--size", "3", "--seed", "11", "--canvas-size", "120"]


def _report(output: str) -> dict[str, str]:
    fields = {}
    for line in output.strip().splitlines():
        name, _, value = line.partition(":")
        fields[name.strip()] = value.strip()
    return fields


class TestCli:
    def test_families_lists_every_family(self) -> None:
        result = runner.invoke(app, ["families"])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 6
        assert lines[0].split()[:2] == ["original", "A"]
        assert "Porpita porpita" in result.output

    def test_grow_reports_the_figure(self) -> None:
        result = runner.invoke(app, GROW_ARGS)

        assert result.exit_code == 0, result.output
        report = _report(result.output)
        assert report["family"] == "Lichtenberg Figure"
        assert int(report["segments"]) >= 1
        assert int(report["segments"]) <= int(report["nodes"])
        assert report["extent"].startswith("(")

    def test_grow_is_reproducible_with_a_seed(self) -> None:
        first = runner.invoke(app, GROW_ARGS)
        second = runner.invoke(app, GROW_ARGS)

        assert first.output == second.output

    def test_structural_symbols_are_not_segments(self) -> None:
        result = runner.invoke(app, ["grow", "--family", "cracked_earth", "--size", "2", "--seed", "4"])

        assert result.exit_code == 0, result.output
        report = _report(result.output)
        assert int(report["segments"]) < int(report["nodes"])

    def test_unknown_family_exits_with_error(self) -> None:
        result = runner.invoke(app, ["grow", "--family", "koch"])

        assert result.exit_code == 1

    def test_out_of_range_size_exits_with_error(self) -> None:
        result = runner.invoke(app, ["grow", "--size", "12"])

        assert result.exit_code == 1
