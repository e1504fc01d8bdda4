"""LaTeX ``songs`` package formatter.

Assembles the classified lines of a chord sheet into a ``songs`` document.

Line kind → output mapping
--------------------------

+-----------------+-------------------------------------------------------+
| Kind            | Output                                                |
+=================+=======================================================+
| ``EMPTY``       | dropped                                               |
+-----------------+-------------------------------------------------------+
| ``SECTION``     | ``\\endverse`` then ``\\beginverse``; label discarded   |
+-----------------+-------------------------------------------------------+
| ``CHORD``       | spliced into the following lyric line, or collapsed   |
|                 | to ``\\[C]\\[G]...`` when no lyric follows              |
+-----------------+-------------------------------------------------------+
| ``LYRIC``       | unchanged                                             |
+-----------------+-------------------------------------------------------+

The whole body is wrapped in ``\\beginsong{<title>}[by={<artist>}]`` /
``\\beginverse`` ... ``\\endverse`` / ``\\endsong``.  The opening
``\\beginverse`` is unconditional, so a sheet that starts with a section
marker produces an empty first verse.

Usage::

    from sheet2songs.songs import SongsFormatter
    text = SongsFormatter().render(song)
    Path("songs/ArtistTitle.tex").write_text(text)
"""

import logging

from .exceptions import MalformedLineError
from .models import LineKind, Song, Spliced
from .parsing import classify_line, merge_chord_line

logger = logging.getLogger(__name__)

BEGIN_VERSE = "\\beginverse"
END_VERSE = "\\endverse"
END_SONG = "\\endsong"


def begin_song(title: str, artist: str) -> str:
    return f"\\beginsong{{{title}}}[by={{{artist}}}]"


class SongsFormatter:
    """Render a :class:`~sheet2songs.models.Song` to ``songs`` LaTeX."""

    def render(self, song: Song) -> str:
        """Return the ``songs`` document for *song*, one directive or lyric per line.

        The returned string ends with a single newline.

        Raises:
            MalformedLineError: if a chord line cannot be tokenized.
        """
        return "\n".join(assemble(song.lines, song.artist, song.title)) + "\n"


def assemble(lines: list[str], artist: str, title: str) -> list[str]:
    """Convert raw chord-sheet *lines* into the lines of a ``songs`` document.

    Single forward pass with one line of lookahead.  Output is collected in a
    fresh list; nothing is returned if a line turns out to be malformed.

    Raises:
        MalformedLineError: with ``index`` set to the offending line's
            0-based position in *lines*.
    """
    kinds = [classify_line(line) for line in lines]
    body: list[str] = []

    i = 0
    while i < len(lines):
        line, kind = lines[i], kinds[i]

        if kind is LineKind.EMPTY:
            i += 1
            continue

        if kind is LineKind.SECTION:
            logger.debug("SECTION: %s", line)
            body.extend([END_VERSE, BEGIN_VERSE])
            i += 1
            continue

        if kind is LineKind.CHORD:
            has_next = i + 1 < len(lines)
            try:
                result = merge_chord_line(
                    line,
                    lines[i + 1] if has_next else None,
                    kinds[i + 1] if has_next else None,
                )
            except MalformedLineError as exc:
                raise MalformedLineError(exc.line, exc.token, index=i) from exc

            body.append(result.line)
            if isinstance(result, Spliced):
                logger.debug("CHORD_L: %s\nLYRICS: %s", line, lines[i + 1])
                i += 2  # lyric line already consumed
            else:
                logger.debug("CHORD_X: %s", line)
                i += 1
            continue

        # LineKind.LYRIC — lyric with no chord line above it
        logger.debug("LYRIC: %s", line)
        body.append(line)
        i += 1

    return [begin_song(title, artist), BEGIN_VERSE, *body, END_VERSE, END_SONG]
