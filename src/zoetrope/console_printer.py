"""Rich console rendering of frame timings and schedules."""

from datetime import datetime
from typing import Iterable

from rich.console import Console
from rich.table import Table

from .animator import FrameAnimator
from .timing import ConstantFrameTiming, FrameTiming, VariableFrameTiming


class TimingConsolePrinter:
    """Prints timing statistics and frame tables to the terminal."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def display_stats(self, timing: FrameTiming, loops: int | None = None) -> None:
        """Print a summary of a timing."""
        kind = "variable" if isinstance(timing, VariableFrameTiming) else "constant"
        self.console.print(f"\n[bold]Timing:[/bold] {kind}")
        self.console.print(f"[bold]Frames:[/bold] {timing.frame_count}")
        self.console.print(f"[bold]Loop duration:[/bold] {timing.duration:.3f}s")
        if isinstance(timing, ConstantFrameTiming) and timing.frame_duration is not None:
            self.console.print(f"[bold]Frame duration:[/bold] {timing.frame_duration:.3f}s")
        self.console.print(f"[bold]Loops:[/bold] {loops if loops is not None else 'forever'}")
        if not timing.can_animate:
            self.console.print("[yellow]Not animatable:[/yellow] only the first frame is shown")

    def display_frame_table(self, timing: FrameTiming) -> None:
        """Print the start offset and display time of every frame."""
        table = Table(title="Frames")
        table.add_column("Frame", justify="right")
        table.add_column("Offset (s)", justify="right")
        table.add_column("Delay (s)", justify="right")

        for index, (offset, delay) in enumerate(_frame_rows(timing)):
            table.add_row(str(index), f"{offset:.3f}", f"{delay:.3f}")
        self.console.print(table)

    def display_schedule(self, animator: FrameAnimator, instants: Iterable[datetime]) -> None:
        """Print upcoming frame changes and the frame each one shows."""
        table = Table(title="Upcoming frame changes")
        table.add_column("#", justify="right")
        table.add_column("Instant")
        table.add_column("Frame", justify="right")

        rows = 0
        for rows, instant in enumerate(instants, start=1):
            table.add_row(str(rows), instant.isoformat(), str(animator.frame_index(instant)))

        if rows == 0:
            self.console.print("[yellow]No upcoming frame changes[/yellow]")
        else:
            self.console.print(table)


def _frame_rows(timing: FrameTiming) -> list[tuple[float, float]]:
    if isinstance(timing, VariableFrameTiming):
        return list(zip(timing.frame_offsets, timing.frame_delays))
    frame_duration = timing.duration / timing.frame_count if timing.frame_count else 0.0
    return [(index * frame_duration, frame_duration) for index in range(timing.frame_count)]
