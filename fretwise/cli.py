"""Command-line interface for fretwise.

Provides commands for:
- fretboard: Show note names across a fret window
- scale / chord: Spell a scale or chord and show it on the fretboard
- progression: Resolve roman numerals in a key
- intervals / interval: Interval definitions and naming
- quiz: Print seeded practice exercises
"""

import typer
from typing import List, Optional
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core import TheoryConfig, TheoryError, resolve_root
from .instrument import Fretboard
from .theory import (
    IntervalNamer,
    COMMON_PROGRESSIONS,
    build_scale,
    build_chord,
    build_progression,
    progression_from_preset,
)
from .practice import ExerciseGenerator, EXERCISE_KINDS

app = typer.Typer(
    name="fretwise",
    help="Music theory on the guitar fretboard",
    rich_markup_mode="markdown",
)
console = Console()


@app.command()
def fretboard(
    start: int = typer.Option(0, "--start", "-s", help="First fret to show"),
    end: Optional[int] = typer.Option(
        None, "--end", "-e", help="Last fret to show (default: 12, or the last fret if lower)"
    ),
    frets: int = typer.Option(24, "--frets", "-f", help="Number of frets on the board"),
):
    """Show the note at every string and fret.

    **Examples:**

        fretwise fretboard

        fretwise fretboard --start 12 --end 24
    """
    if end is None:
        end = min(12, frets)
    try:
        board = Fretboard.from_config(TheoryConfig(num_frets=frets))
        _show_fretboard(board, start, end)
    except (TheoryError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def scale(
    root: str = typer.Argument(..., help="Root note, e.g. C, F#, Bb"),
    kind: str = typer.Option("major", "--type", "-t", help="Scale type, e.g. major, blues, dorian"),
    show_board: bool = typer.Option(True, "--board/--no-board", help="Highlight on the fretboard"),
):
    """Spell a scale and show its positions on the fretboard."""
    try:
        result = build_scale(resolve_root(root), kind)
    except TheoryError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]{result.name} Scale:[/bold] {' '.join(result.note_names())}")
    if show_board:
        console.print("\n[cyan]Scale positions on fretboard:[/cyan]")
        _show_fretboard(Fretboard.standard(), 0, 12, targets=result.notes())


@app.command()
def chord(
    root: str = typer.Argument(..., help="Root note, e.g. C, F#, Bb"),
    kind: str = typer.Option("major", "--type", "-t", help="Chord type, e.g. major, minor7"),
    show_board: bool = typer.Option(True, "--board/--no-board", help="Highlight on the fretboard"),
):
    """Spell a chord and show its positions on the fretboard."""
    try:
        result = build_chord(resolve_root(root), kind)
    except TheoryError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]{result.name} Chord:[/bold] {' '.join(result.note_names())}")
    if show_board:
        console.print("\n[cyan]Chord positions on fretboard:[/cyan]")
        _show_fretboard(Fretboard.standard(), 0, 12, targets=result.notes())


@app.command()
def progression(
    key: str = typer.Argument(..., help="Key root, e.g. C, F#, Bb"),
    preset: Optional[str] = typer.Option(
        None, "--preset", "-p", help=f"One of: {', '.join(COMMON_PROGRESSIONS)}"
    ),
    numerals: Optional[List[str]] = typer.Option(
        None, "--numeral", "-n", help="Roman numeral (repeatable), e.g. -n ii -n V7 -n I"
    ),
    mode: str = typer.Option("major", "--mode", "-m", help="Scale used with --numeral"),
):
    """Resolve a chord progression in a key.

    **Examples:**

        fretwise progression G --preset pop

        fretwise progression C -n ii -n V7 -n I
    """
    try:
        root = resolve_root(key)
        if numerals:
            result = build_progression(build_scale(root, mode), numerals)
        else:
            result = progression_from_preset(root, preset or "I-IV-V")
    except TheoryError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"{result.name} Progression")
    table.add_column("#", style="dim")
    table.add_column("Numeral", style="green")
    table.add_column("Chord", style="cyan")
    table.add_column("Notes", style="yellow")

    for i, (numeral, item) in enumerate(zip(result.numerals, result.chords), start=1):
        table.add_row(str(i), numeral, item.name, " ".join(item.note_names()))

    console.print(table)


@app.command()
def intervals():
    """List the interval names and their sizes."""
    table = Table(title="Common Intervals")
    table.add_column("Interval", style="cyan")
    table.add_column("Semitones", style="magenta")

    for name, semitones in IntervalNamer().definitions():
        table.add_row(name, str(semitones))

    console.print(table)


@app.command()
def interval(
    semitones: int = typer.Argument(..., help="Distance in semitones"),
    octave: bool = typer.Option(
        False, "--octave", help="Name multiples of 12 'Octave' instead of 'Unknown interval'"
    ),
):
    """Name the interval for a semitone distance."""
    namer = IntervalNamer(TheoryConfig(octave_as_interval=octave))
    console.print(f"{semitones} semitones: [green]{namer.name_of(semitones)}[/green]")


@app.command()
def quiz(
    kind: str = typer.Argument(..., help=f"One of: {', '.join(EXERCISE_KINDS)}"),
    count: int = typer.Option(5, "--count", "-c", help="Number of exercises"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for repeatable quizzes"),
    answers: bool = typer.Option(False, "--answers", "-a", help="Show the answers"),
):
    """Print practice exercises (with --answers for the solutions)."""
    generator = ExerciseGenerator(TheoryConfig(seed=seed))
    try:
        exercises = generator.session(kind, count=count)
    except (TheoryError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    for i, exercise in enumerate(exercises, start=1):
        console.print(f"Exercise {i}: {exercise.prompt}")
        if answers:
            console.print(f"   [green]Answer: {exercise.answer}[/green]")


def _show_fretboard(board: Fretboard, start: int, end: int, targets=None):
    """Display the fretboard, optionally marking target notes."""
    names = board.names((start, end))
    marks = board.highlight(targets, (start, end)) if targets is not None else None

    table = Table(show_lines=False)
    table.add_column("String", style="bold")
    for fret in range(start, end + 1):
        table.add_column(str(fret), justify="center")

    for string, label in enumerate(board.string_labels):
        cells = []
        for offset, name in enumerate(names[string]):
            if marks is None:
                cells.append(name)
            elif marks[string, offset]:
                cells.append(f"[green]{escape(f'[{name}]')}[/green]")
            else:
                cells.append("[dim].[/dim]")
        table.add_row(label, *cells)

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
