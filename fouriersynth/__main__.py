#!/usr/bin/env python3
"""See the docstring to main()."""

from __future__ import annotations

import logging
import sys
from typing import Iterable, List, Tuple

import click
import structlog

from .coefficients import HARMONIC_COUNT, Kind
from .commands import CommandError, parse_assignment, parse_command
from .config import CONFIG, Config, ConfigError, load_config
from .device import MiniaudioDevice, NullDevice, find_playback
from .engine import FourierEngine
from .playback import PlaybackState
from . import render


QUIT = {"q", "quit", "exit"}
SHOW = {"s", "show"}
NO_PLOT = "matplotlib is not installed, install fouriersynth[plot] to plot"


def configure_logging(debug: bool) -> None:
    if not debug:
        structlog.configure(
            wrapper_class=structlog.make_filtering_bound_logger(logging.INFO)
        )
    if not sys.stdout.isatty():
        structlog.configure(
            [
                structlog.processors.TimeStamper(),
                structlog.processors.dict_tracebacks,
                structlog.processors.JSONRenderer(),
            ]
        )


def coefficient_table(engine: FourierEngine, cfg: Config) -> List[str]:
    c = engine.coefficients
    width = 20
    lines = [f"{cfg.labels.cos_name:<{width}} {cfg.labels.sin_name}"]
    for i in range(HARMONIC_COUNT):
        a = c.label(i, Kind.COSINE)
        b = c.label(i, Kind.SINE) if i else ""
        lines.append(f"{a:<{width}} {b}".rstrip())
    return lines


def print_dump(engine: FourierEngine) -> None:
    for i, sample in enumerate(engine.get_samples()):
        click.echo(f"{i:2d} {sample:+.6f}")
    click.echo(engine.get_audio_frame().hex(" "))


def apply_assignments(engine: FourierEngine, assignments: Iterable[str]) -> None:
    for text in assignments:
        try:
            command = parse_assignment(text)
        except CommandError as ce:
            raise click.BadParameter(str(ce), param_hint="COEFF=VALUE")
        engine.dispatch(command)


def open_device(cfg: Config) -> MiniaudioDevice:
    audio_out = cfg.audio_out
    try:
        device_id = find_playback(audio_out.out_name, audio_out.backend)
    except LookupError:
        raise click.UsageError(f"No audio out available called {audio_out.out_name}")
    return MiniaudioDevice(device_id=device_id, buffer_msec=audio_out.buffer_msec)


def prompt_loop(engine: FourierEngine, cfg: Config) -> None:
    click.echo("Commands: a3=25, b1=-10, play, reset, show, quit")
    while True:
        try:
            text = click.prompt(">", prompt_suffix=" ", default="", show_default=False)
        except (click.Abort, EOFError):
            click.echo()
            return

        word = text.strip().lower()
        if not word:
            continue
        if word in QUIT:
            return
        if word in SHOW:
            try:
                render.plot(engine.get_samples(), cfg.labels)
            except ImportError:
                click.secho(NO_PLOT, fg="red", err=True)
            continue

        try:
            command = parse_command(text)
        except CommandError as ce:
            click.secho(str(ce), fg="red", err=True)
            continue

        engine.dispatch(command)
        if engine.playback_state is PlaybackState.PLAYING:
            click.secho("Audio ON", fg="green")
        else:
            click.secho("Audio OFF", fg="blue")
        for line in coefficient_table(engine, cfg):
            click.echo(line)


@click.command()
@click.option(
    "--config",
    help="Read configuration from this file",
    default=str(CONFIG),
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    show_default=True,
)
@click.option(
    "--make-config",
    help="Write a new configuration file to standard output",
    is_flag=True,
)
@click.option("--play/--no-play", default=None, help="Start with audio on or off")
@click.option("--plot", is_flag=True, help="Show the waveform in a window")
@click.option("--dump", is_flag=True, help="Print the samples and the audio frame")
@click.option("-i", "--interactive", is_flag=True, help="Read commands from a prompt")
@click.option("--debug", is_flag=True, help="Log every recompute")
@click.argument("assignments", metavar="[COEFF=VALUE]...", nargs=-1)
def main(
    config: str,
    make_config: bool,
    play: bool | None,
    plot: bool,
    dump: bool,
    interactive: bool,
    debug: bool,
    assignments: Tuple[str, ...],
) -> None:
    """
    Fourier synthesis.  Shapes one period of a waveform from the amplitudes of
    its first seven harmonics and plays it back in a loop.

    Coefficients are a0..a6 for the cosine terms and b1..b6 for the sine terms,
    integers between -50 and 50 standing for amplitudes between -5.0 and 5.0.
    Set them on the command line like `a1=10 b3=-5`, or interactively with `-i`.

    You can customize the audio device and the column labels by creating a
    config file.  Use `--make-config` to output a new config to stdout.

    Then run `python -m fouriersynth --config=PATH_TO_YOUR_CONFIG_FILE`.
    """
    if make_config:
        with open(CONFIG) as f:
            print(f.read())
        return

    configure_logging(debug)
    try:
        cfg = load_config(config)
    except ConfigError as ce:
        raise click.UsageError(str(ce))

    if play is None:
        play = cfg.audio_out.autoplay
    device = open_device(cfg) if play or interactive else NullDevice()
    engine = FourierEngine(device=device)
    try:
        apply_assignments(engine, assignments)
        for line in coefficient_table(engine, cfg):
            click.echo(line)
        if dump:
            print_dump(engine)
        if play:
            engine.start()
        if plot:
            try:
                render.plot(engine.get_samples(), cfg.labels)
            except ImportError:
                raise click.UsageError(NO_PLOT)
        if interactive:
            prompt_loop(engine, cfg)
        elif play:
            click.pause("Playing, press any key to stop...")
    except KeyboardInterrupt:
        pass
    finally:
        engine.close()


if __name__ == "__main__":
    main()
