"""Tests for the zoetrope CLI."""

from pathlib import Path

from PIL import Image
from typer.testing import CliRunner

from zoetrope.cli import app

runner = CliRunner()

START = "2024-01-01T00:00:00+00:00"


def flat(output: str) -> str:
    """Collapse rich line wrapping so messages can be matched whole."""
    return " ".join(output.split())


def test_frame_at_instant():
    result = runner.invoke(app, ["frame", "--delays", "1,2,3", "--start", START, "--at", "2024-01-01T00:00:04+00:00"])

    assert result.exit_code == 0
    assert "2024-01-01T00:00:04+00:00: 2" in result.output


def test_naive_instants_are_utc():
    result = runner.invoke(
        app,
        ["frame", "--frames", "3", "--duration", "6", "--start", "2024-01-01T00:00:00", "--at", "2024-01-01T00:00:02"],
    )

    assert result.exit_code == 0
    assert "2024-01-01T00:00:02+00:00: 1" in result.output


def test_start_from_environment():
    """ZOETROPE_START provides the loop anchor when --start is omitted."""
    result = runner.invoke(
        app,
        ["frame", "--delays", "1,2,3", "--at", "2024-01-01T00:00:01"],
        env={"ZOETROPE_START": "2024-01-01T00:00:00.500000"},
    )

    assert result.exit_code == 0
    assert "2024-01-01T00:00:01+00:00: 0" in result.output


def test_schedule_lists_upcoming_changes():
    result = runner.invoke(
        app,
        [
            "schedule",
            "--frames", "3",
            "--duration", "6",
            "--start", START,
            "--from", "2024-01-01T00:00:05+00:00",
            "--count", "2",
        ],
    )

    assert result.exit_code == 0
    assert "2024-01-01T00:00:06+00:00" in result.output
    assert "2024-01-01T00:00:08+00:00" in result.output
    assert "2024-01-01T00:00:10+00:00" not in result.output


def test_schedule_after_loop_limit_is_empty():
    result = runner.invoke(
        app,
        ["schedule", "--delays", "1,2,3", "--start", START, "--loops", "1", "--from", "2024-01-01T00:00:07+00:00"],
    )

    assert result.exit_code == 0
    assert "No upcoming frame changes" in flat(result.output)


def test_inspect_prints_frame_table(tmp_path: Path):
    path = tmp_path / "anim.gif"
    frames = [Image.new("RGB", (8, 8), color) for color in ("red", "green", "blue")]
    frames[0].save(path, save_all=True, append_images=frames[1:], duration=[100, 200, 300], loop=0)

    result = runner.invoke(app, ["inspect", str(path)])

    assert result.exit_code == 0
    assert "variable" in result.output
    assert "0.600s" in result.output
    assert "0.300" in result.output


def test_play_unanimatable_timing_prints_one_frame():
    result = runner.invoke(app, ["play", "--frames", "1", "--duration", "1"])

    assert result.exit_code == 0
    assert result.output.count("frame 0") == 1


def test_requires_exactly_one_timing_source():
    result = runner.invoke(app, ["frame", "--delays", "1,2", "--frames", "2", "--duration", "1"])

    assert result.exit_code == 1
    assert "Specify exactly one" in flat(result.output)


def test_invalid_delay_is_reported():
    result = runner.invoke(app, ["frame", "--delays=-1,2"])

    assert result.exit_code == 1
    assert "invalid delay" in flat(result.output)


def test_invalid_instant_is_reported():
    result = runner.invoke(app, ["frame", "--delays", "1,2", "--at", "yesterday"])

    assert result.exit_code == 1
    assert "Invalid --at instant" in flat(result.output)


def test_missing_image_is_reported(tmp_path: Path):
    result = runner.invoke(app, ["inspect", str(tmp_path / "missing.gif")])

    assert result.exit_code == 1
    assert "not found" in flat(result.output)
