"""scoretally CLI entry point."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from scoretally import __version__
from scoretally.analyzer import ScoreAnalyzer
from scoretally.beat_counter import BeatCounter
from scoretally.errors import ScoreParseError
from scoretally.note_types import BeatMode, NoteType

REFERENCE_CHOICES = [note_type.value for note_type in NoteType]


_reference_option = click.option(
    "--reference",
    "-r",
    type=click.Choice(REFERENCE_CHOICES, case_sensitive=False),
    default=BeatCounter.DEFAULT_REFERENCE.value,
    show_default=True,
    help="Note type counted as one beat.",
)

_score_file = click.argument(
    "score_file", type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path)
)


def _to_note_type(label: str) -> NoteType:
    note_type = NoteType.from_label(label)
    if note_type is None:
        raise click.BadParameter(f"Unknown note type '{label}'.", param_hint="--reference")
    return note_type


def _fail(exc: Exception) -> NoReturn:
    click.echo(f"  ERROR: {exc}", err=True)
    sys.exit(1)


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="scoretally")
@click.option("--verbose", "-v", is_flag=True, help="Log parsing details to stderr.")
def main(verbose: bool) -> None:
    """scoretally: measure, beat and accidental analysis for MusicXML."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# ── bars subcommand ────────────────────────────────────────────────────────────

@main.command()
@_score_file
def bars(score_file: Path) -> None:
    """
    Count the measures (bars) in a MusicXML file.

    Measures are counted across all parts.

    \b
    Examples:
      scoretally bars song.musicxml
    """
    try:
        count = ScoreAnalyzer().count_measures(score_file)
    except ScoreParseError as exc:
        _fail(exc)
    click.echo(f"{count} bars")


# ── beats subcommand ───────────────────────────────────────────────────────────

@main.command()
@_score_file
@_reference_option
@click.option(
    "--include-rests",
    is_flag=True,
    help="Count rests as well as sounding notes.",
)
def beats(score_file: Path, reference: str, include_rests: bool) -> None:
    """
    Count the beats in a MusicXML file.

    Tuplets are scaled by their time modification (3 eighths in a 3:2
    triplet count as one quarter).

    \b
    Examples:
      scoretally beats song.musicxml
      scoretally beats song.musicxml --reference eighth --include-rests
    """
    note_type = _to_note_type(reference)
    mode = BeatMode.ALL if include_rests else BeatMode.PLAYED
    try:
        total = ScoreAnalyzer(reference=note_type).count_beats(score_file, mode)
    except ScoreParseError as exc:
        _fail(exc)
    click.echo(f"{total:g} {note_type.value} beats")


# ── accidentals subcommand ─────────────────────────────────────────────────────

@main.command()
@_score_file
@click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Destination file. Defaults to standard output.",
)
def accidentals(score_file: Path, output: Path | None) -> None:
    """
    Write key-signature accidentals explicitly onto every affected note.

    Notes that already carry an accidental are left as they are.

    \b
    Examples:
      scoretally accidentals song.musicxml
      scoretally accidentals song.musicxml -o song_explicit.musicxml
    """
    try:
        annotated = ScoreAnalyzer().add_explicit_accidentals(score_file)
    except ScoreParseError as exc:
        _fail(exc)

    if output is None:
        click.echo(annotated, nl=False)
        return

    try:
        output.write_text(annotated, encoding="utf-8")
    except OSError as exc:
        click.echo(f"  ERROR: Could not write output file: {exc}", err=True)
        sys.exit(1)
    click.echo(f"Done!  Wrote '{output}'.")


# ── analyze subcommand ─────────────────────────────────────────────────────────

@main.command()
@_score_file
@_reference_option
def analyze(score_file: Path, reference: str) -> None:
    """
    Summarise the measures and beats of a MusicXML file.

    \b
    Examples:
      scoretally analyze song.musicxml
      scoretally analyze song.musicxml -r half
    """
    note_type = _to_note_type(reference)

    click.echo(f"scoretally v{__version__}")
    click.echo(f"  File      : {score_file}")
    click.echo(f"  Reference : {note_type.value}")
    click.echo()

    try:
        report = ScoreAnalyzer(reference=note_type).analyze(score_file)
    except ScoreParseError as exc:
        _fail(exc)

    click.echo(f"  Bars         : {report.measures}")
    click.echo(f"  Played beats : {report.played_beats:g}")
    click.echo(f"  All beats    : {report.all_beats:g}")
    click.echo(f"  Silent beats : {report.silent_beats:g}")
