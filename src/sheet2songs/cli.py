import logging
import sys
from pathlib import Path

import click

from .exceptions import FetchError, MalformedLineError, SourceError, UnsupportedSourceError
from .log import setup_logging
from .models import Song
from .registry import get_source
from .songs import SongsFormatter

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "songs"


def make_filename_safe(text: str) -> str:
    """Convert *text* to CamelCase, keeping only ASCII letters, digits and ``-``.

    Every dropped character (and every ``-``) starts a new word:
    ``"Grateful Dead-Dark Star"`` → ``"GratefulDead-DarkStar"``.
    """
    result = []
    capitalize_next = True
    for ch in text:
        if ch.isascii() and ch.isalnum():
            result.append(ch.upper() if capitalize_next else ch.lower())
            capitalize_next = False
        else:
            if ch == "-":
                result.append(ch)
            capitalize_next = True
    return "".join(result)


def _default_path(output_dir: str, artist: str, title: str) -> Path:
    return Path(output_dir) / f"{make_filename_safe(f'{artist}-{title}')}.tex"


def _include_line(dest: Path) -> str:
    """Return the ``\\input`` line a songbook master file uses to pull in *dest*."""
    target = dest.with_suffix("") if dest.suffix == ".tex" else dest
    return f"\\input{{{target.as_posix()}}}"


@click.command()
@click.argument("source")
@click.argument("artist")
@click.argument("title")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Output file path (default: <output-dir>/<Artist>-<Title>.tex)")
@click.option("-d", "--output-dir", default=DEFAULT_OUTPUT_DIR, show_default=True,
              metavar="DIR", help="Directory for the generated .tex file.")
@click.option("--stdout", is_flag=True, default=False,
              help="Print to stdout instead of writing a file.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log every classified line and the final result.")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None,
              help="Also write log messages to this file.")
def main(
    source: str,
    artist: str,
    title: str,
    output_path: str | None,
    output_dir: str,
    stdout: bool,
    verbose: bool,
    log_file: str | None,
) -> None:
    """Convert a plain-text chord sheet to a LaTeX songs package song.

    \b
    SOURCE is a local file or an http(s) URL.  Chord lines written above
    lyric lines are merged into the lyrics as \\[chord] markers, and
    [Section] lines become verse boundaries.
    """
    setup_logging(
        level="DEBUG" if verbose else "INFO",
        log_file=Path(log_file) if log_file else None,
        verbose=verbose,
    )

    # --- Resolve source ---
    try:
        sheet_source = get_source(source)
    except UnsupportedSourceError as exc:
        click.echo(f"Error: {exc}", err=True)
        click.echo("Supported sources: local files, http:// and https:// URLs", err=True)
        sys.exit(1)

    # --- Read ---
    try:
        lines = sheet_source.read(source)
    except FetchError as exc:
        msg = f"Error: Could not fetch {exc.url}"
        if exc.status_code:
            msg += f" (HTTP {exc.status_code})"
        click.echo(msg, err=True)
        sys.exit(1)
    except SourceError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    logger.debug("Read %d lines from %s", len(lines), source)
    song = Song(title=title, artist=artist, lines=lines, source=source)

    # --- Convert ---
    try:
        text = SongsFormatter().render(song)
    except MalformedLineError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    logger.debug("RESULT:\n%s", text)

    # --- Output ---
    if stdout:
        click.echo(text, nl=False)
        return

    dest = Path(output_path) if output_path else _default_path(output_dir, artist, title)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(text, encoding="utf-8")
    logger.info("Written to %s", dest)
    click.echo(_include_line(dest))
