from __future__ import annotations

from pathlib import Path
import sys

from click.testing import CliRunner
import pytest

from fakes import RecordingDevice
from fouriersynth import __main__ as cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def device(monkeypatch: pytest.MonkeyPatch) -> RecordingDevice:
    recording = RecordingDevice()
    monkeypatch.setattr(cli, "open_device", lambda cfg: recording)
    return recording


def test_make_config(runner: CliRunner) -> None:
    result = runner.invoke(cli.main, ["--make-config"])
    assert result.exit_code == 0
    assert "[labels]" in result.output
    assert "cos-name = Cosinus:" in result.output


def test_table_with_labels(runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "custom.ini"
    config.write_text("[labels]\ncos-name = Cosine:\nsin-name = Sine:\n")
    result = runner.invoke(cli.main, ["--config", str(config), "a1=10", "b3=-5"])
    assert result.exit_code == 0, result.output
    assert "Cosine:" in result.output
    assert "a1: 1.0" in result.output
    assert "b3: -0.5" in result.output
    assert "b0" not in result.output


def test_dump(runner: CliRunner) -> None:
    result = runner.invoke(cli.main, ["--dump", "a0=20"])
    assert result.exit_code == 0, result.output
    assert " 0 +1.000000" in result.output
    assert "79 +1.000000" in result.output
    assert " ".join(["df"] * 40) in result.output


def test_clamps_on_the_command_line(runner: CliRunner) -> None:
    result = runner.invoke(cli.main, ["a2=900"])
    assert result.exit_code == 0, result.output
    assert "a2: 5.0" in result.output


def test_bad_assignment(runner: CliRunner) -> None:
    result = runner.invoke(cli.main, ["b0=3"])
    assert result.exit_code == 2
    assert "no b0" in result.output


def test_bad_config(runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "bad.ini"
    config.write_text("[audio-out]\nbuffer-msec = -1\n")
    result = runner.invoke(cli.main, ["--config", str(config)])
    assert result.exit_code == 2
    assert "buffer-msec" in result.output


def test_interactive(runner: CliRunner, device: RecordingDevice) -> None:
    result = runner.invoke(
        cli.main,
        ["-i"],
        input="a1=10\nplay\nb2 -20\nnonsense\nplay\nreset\nquit\n",
    )
    assert result.exit_code == 0, result.output
    assert "Audio ON" in result.output
    assert "Audio OFF" in result.output
    assert "b2: -2.0" in result.output
    assert "not a coefficient assignment" in result.output
    assert device.events == ["start", "stop", "start", "stop"]
    assert device.closed


def test_interactive_ends_on_eof(runner: CliRunner, device: RecordingDevice) -> None:
    result = runner.invoke(cli.main, ["-i", "--play"], input="a0=10\n")
    assert result.exit_code == 0, result.output
    assert device.events == ["start", "stop", "start", "stop"]
    assert device.closed


def test_autoplay(runner: CliRunner, device: RecordingDevice, tmp_path: Path) -> None:
    config = tmp_path / "autoplay.ini"
    config.write_text("[audio-out]\nautoplay = yes\n")
    result = runner.invoke(cli.main, ["--config", str(config)], input="x")
    assert result.exit_code == 0, result.output
    assert device.events == ["start", "stop"]


@pytest.fixture
def no_matplotlib(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "matplotlib", None)
    monkeypatch.setitem(sys.modules, "matplotlib.pyplot", None)


@pytest.mark.usefixtures("no_matplotlib")
def test_show_without_matplotlib_keeps_prompting(
    runner: CliRunner, device: RecordingDevice
) -> None:
    result = runner.invoke(cli.main, ["-i"], input="show\na1=10\nquit\n")
    assert result.exit_code == 0, result.output
    assert "fouriersynth[plot]" in result.output
    assert "a1: 1.0" in result.output
    assert device.closed


@pytest.mark.usefixtures("no_matplotlib")
def test_plot_option_without_matplotlib(runner: CliRunner) -> None:
    result = runner.invoke(cli.main, ["--plot", "a1=10"])
    assert result.exit_code == 2
    assert "fouriersynth[plot]" in result.output
