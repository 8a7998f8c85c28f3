"""Tests for the command-line interface."""

import pytest
from typer.testing import CliRunner

from lottie_to_png import cli
from lottie_to_png.animation_pipeline import convert_animation
from lottie_to_png.cli import app

runner = CliRunner()


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "anim.json"
    path.write_text('{"v": "5.7.0"}', encoding="utf-8")
    return path


@pytest.fixture
def fake_convert(monkeypatch, fake_loader):
    """Route the CLI through the fake decoder."""
    calls = []

    def _convert(*args, **kwargs):
        calls.append(kwargs)
        return convert_animation(*args, loader=fake_loader, **kwargs)

    monkeypatch.setattr(cli, "convert_animation", _convert)
    return calls


def test_renders_into_default_directory(source_file, fake_convert):
    result = runner.invoke(app, [str(source_file), "-w", "4", "-h", "4", "-t", "2"])

    assert result.exit_code == 0, result.output
    assert "30 frames" in result.stdout
    assert (source_file.parent / "anim.png" / "000.png").is_file()
    assert fake_convert[0]["workers"] == 2


def test_options_are_forwarded(tmp_path, source_file, fake_convert):
    frames_dir = tmp_path / "out"
    gif_path = tmp_path / "anim.gif"

    result = runner.invoke(
        app,
        [str(source_file), str(frames_dir), "--fps", "10", "--output", str(gif_path), "--quality", "70"],
    )

    assert result.exit_code == 0, result.output
    assert fake_convert[0]["fps"] == 10.0
    assert fake_convert[0]["quality"] == 70
    assert gif_path.is_file()
    assert "GIF saved" in result.stdout


def test_environment_supplies_defaults(tmp_path, source_file, fake_convert, monkeypatch):
    monkeypatch.setenv("WIDTH", "6")
    monkeypatch.setenv("HEIGHT", "5")

    result = runner.invoke(app, [str(source_file), str(tmp_path / "out"), "-t", "1"])

    assert result.exit_code == 0, result.output
    assert fake_convert[0]["width"] == 6
    assert fake_convert[0]["height"] == 5


def test_missing_source_is_an_error(tmp_path):
    result = runner.invoke(app, [str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "File not found" in (result.stdout + result.stderr)


def test_non_positive_size_is_an_error(source_file):
    result = runner.invoke(app, [str(source_file), "--width", "0"])

    assert result.exit_code == 1
    assert "must be positive" in (result.stdout + result.stderr)


def test_render_failure_exits_with_error(source_file, fake_convert, fake_loader):
    fake_loader.fail_load = True

    result = runner.invoke(app, [str(source_file), "-t", "1"])

    assert result.exit_code == 1
    assert "Failed to convert" in (result.stdout + result.stderr)


def test_format_environment_builds_animation_next_to_source(source_file, fake_convert, monkeypatch):
    monkeypatch.setenv("FORMAT", "gif")

    result = runner.invoke(app, [str(source_file), "-w", "4", "-h", "4", "-t", "1"])

    assert result.exit_code == 0, result.output
    assert fake_convert[0]["output_path"] == str(source_file.with_suffix(".gif"))
    assert source_file.with_suffix(".gif").is_file()


def test_explicit_output_wins_over_format(tmp_path, source_file, fake_convert):
    webp_path = tmp_path / "explicit.webp"

    result = runner.invoke(
        app, [str(source_file), "-w", "4", "-h", "4", "-t", "1", "--format", "gif", "-o", str(webp_path)]
    )

    assert result.exit_code == 0, result.output
    assert fake_convert[0]["output_path"] == str(webp_path)
    assert not source_file.with_suffix(".gif").exists()


def test_unknown_format_is_an_error(source_file):
    result = runner.invoke(app, [str(source_file), "--format", "mp4"])

    assert result.exit_code == 1
    assert "Invalid format" in (result.stdout + result.stderr)


def test_infinite_fps_is_an_error(source_file, fake_convert):
    result = runner.invoke(app, [str(source_file), "--fps", "inf", "-t", "1"])

    assert result.exit_code == 1
    assert "Failed to convert" in (result.stdout + result.stderr)
