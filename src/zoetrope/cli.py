"""CLI interface for zoetrope."""

import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from itertools import islice
from typing import Iterator

import typer
from dotenv import load_dotenv
from rich.console import Console

from .animator import FrameAnimator
from .clock import utc_now
from .console_printer import TimingConsolePrinter
from .constants import DEFAULT_SCHEDULE_COUNT, EPOCH, SCHEDULE_COUNT_ENV_VAR, START_ENV_VAR
from .image_timing import AnimationInfo, AnimationReadError, read_animation_info
from .playback import iter_playback
from .timing import ConstantFrameTiming, FrameTiming, InvalidFrameDelayError, timing_for_delays

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(help="Wall-clock synchronized frame timing for animated images.")


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


IMAGE_OPTION = typer.Option(None, "--image", "-i", help="Read frame delays from an animated GIF, WebP or APNG")
DELAYS_OPTION = typer.Option(
    None,
    "--delays",
    "-d",
    help="Comma separated per-frame delays in seconds, e.g. 0.1,0.2,0.1",
)
FRAMES_OPTION = typer.Option(None, "--frames", "-n", help="Frame count for a constant frame rate")
DURATION_OPTION = typer.Option(None, "--duration", help="Loop duration in seconds for a constant frame rate")
START_OPTION = typer.Option(
    None,
    "--start",
    envvar=START_ENV_VAR,
    help="ISO 8601 instant the first loop began (default: Unix epoch)",
)
LOOPS_OPTION = typer.Option(None, "--loops", help="Stop on the last frame after this many loops")


@app.command()
def inspect(
    image: str = typer.Argument(..., help="Animated image to inspect"),
) -> None:
    """Show the frame timing of an animated image."""
    with _cli_errors():
        info = _read_image(image)
        printer = TimingConsolePrinter(console)
        printer.display_stats(info.timing, info.loops)
        printer.display_frame_table(info.timing)


@app.command()
def frame(
    image: str = IMAGE_OPTION,
    delays: str = DELAYS_OPTION,
    frames: int = FRAMES_OPTION,
    duration: float = DURATION_OPTION,
    start: str = START_OPTION,
    loops: int = LOOPS_OPTION,
    at: str = typer.Option(None, "--at", help="ISO 8601 instant to sample (default: now)"),
) -> None:
    """Print the frame index visible at an instant."""
    with _cli_errors():
        animator = _build_animator(image, delays, frames, duration, start, loops)
        instant = _parse_instant(at, "--at") if at else utc_now()
        console.print(f"[bold]Frame at {instant.isoformat()}:[/bold] {animator.frame_index(instant)}")


@app.command()
def schedule(
    image: str = IMAGE_OPTION,
    delays: str = DELAYS_OPTION,
    frames: int = FRAMES_OPTION,
    duration: float = DURATION_OPTION,
    start: str = START_OPTION,
    loops: int = LOOPS_OPTION,
    from_: str = typer.Option(None, "--from", help="ISO 8601 instant to list changes after (default: now)"),
    count: int = typer.Option(
        DEFAULT_SCHEDULE_COUNT,
        "--count",
        "-c",
        envvar=SCHEDULE_COUNT_ENV_VAR,
        help="Number of upcoming frame changes to list",
    ),
) -> None:
    """List the next instants at which the visible frame changes."""
    with _cli_errors():
        if count < 0:
            raise CLIError("--count must not be negative")
        animator = _build_animator(image, delays, frames, duration, start, loops)
        now = _parse_instant(from_, "--from") if from_ else utc_now()
        instants = list(islice(animator.schedule(now), count))
        console.print(f"[bold]Frame at {now.isoformat()}:[/bold] {animator.frame_index(now)}")
        TimingConsolePrinter(console).display_schedule(animator, instants)


@app.command()
def play(
    image: str = IMAGE_OPTION,
    delays: str = DELAYS_OPTION,
    frames: int = FRAMES_OPTION,
    duration: float = DURATION_OPTION,
    start: str = START_OPTION,
    loops: int = LOOPS_OPTION,
    updates: int = typer.Option(20, "--updates", "-u", help="Stop after this many frame updates"),
) -> None:
    """Follow playback in real time, printing each frame as it becomes visible."""
    with _cli_errors():
        animator = _build_animator(image, delays, frames, duration, start, loops)
        for update in iter_playback(animator, max_updates=updates):
            console.print(f"{update.instant.isoformat()}  [bold cyan]frame {update.frame_index}[/bold cyan]")


@contextmanager
def _cli_errors() -> Iterator[None]:
    try:
        yield
    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _build_animator(
    image: str | None,
    delays: str | None,
    frames: int | None,
    duration: float | None,
    start: str | None,
    loops: int | None,
) -> FrameAnimator:
    """Build an animator from exactly one timing source plus playback options."""
    sources = [image is not None, delays is not None, frames is not None or duration is not None]
    if sum(sources) != 1:
        raise CLIError("Specify exactly one of --image, --delays, or --frames with --duration")

    timing: FrameTiming
    if image is not None:
        info = _read_image(image)
        timing = info.timing
        if loops is None:
            loops = info.loops
    elif delays is not None:
        timing = _timing_from_delays(delays)
    else:
        if frames is None or duration is None:
            raise CLIError("--frames and --duration must be given together")
        timing = ConstantFrameTiming(frame_count=frames, duration=duration)

    if loops is not None and loops <= 0:
        raise CLIError("--loops must be a positive number")

    anchor = _parse_instant(start, "--start") if start else EPOCH
    return FrameAnimator(timing, start=anchor, loops=loops)


def _read_image(path: str) -> AnimationInfo:
    console.print(f"[bold blue]Reading frame delays from {path}...[/bold blue]")
    try:
        return read_animation_info(path)
    except AnimationReadError as e:
        raise CLIError(str(e))


def _timing_from_delays(text: str) -> FrameTiming:
    try:
        values = [float(part) for part in text.split(",") if part.strip()]
    except ValueError:
        raise CLIError(f"Invalid delay list '{text}': expected comma separated seconds")
    try:
        return timing_for_delays(values)
    except InvalidFrameDelayError as e:
        raise CLIError(str(e))


def _parse_instant(text: str, option: str) -> datetime:
    """Parse an ISO 8601 instant; naive values are taken as UTC."""
    try:
        instant = datetime.fromisoformat(text)
    except ValueError:
        raise CLIError(f"Invalid {option} instant '{text}': expected ISO 8601")
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant


if __name__ == "__main__":
    app()
