"""Line classification and chord merging for plain-text chord sheets.

Implements the chord-above-lyric → inline ``songs`` marker pipeline:

  1. classify_line()    — EMPTY / SECTION / CHORD / LYRIC
  2. tokenize()         — whitespace-delimited tokens with column offsets
  3. merge_chord_line() — splice chords into the following lyric line, or
                          collapse a lone chord line into chord markers

Chord markers use the LaTeX ``songs`` package syntax ``\\[Am7]``, spliced
directly into the lyric text at the column the chord stood over::

    C       G
    Amazing grace   →   \\[C]Amazing \\[G]grace
"""

import re

from .exceptions import MalformedLineError
from .models import LineKind, MergeResult, Spliced, Standalone, Token

# ---------------------------------------------------------------------------
# Regexes
# ---------------------------------------------------------------------------

# One chord symbol: root, accidental, quality, single-digit extension, bass.
# Handles: C, Am, Am7, Cmaj7, F#m, Bbsus4, Cadd9, G/B, D/F#
_CHORD_PAT = (
    r"[A-G][#b]?"
    r"(?:maj|min|m|dim|aug|sus|add)?"
    r"\d?"
    r"(?:/[A-G][#b]?)?"
)

# A whole line made of chord symbols separated by whitespace
CHORD_LINE_RE = re.compile(rf"{_CHORD_PAT}(?:\s+{_CHORD_PAT})*")

# Section marker: [Verse 1], [Chorus], [ Bridge ]
SECTION_RE = re.compile(r"\[.*\]\s*")

# Leading/trailing horizontal whitespace only
_HSPACE = " \t"


# ---------------------------------------------------------------------------
# Line classification
# ---------------------------------------------------------------------------


def classify_line(line: str) -> LineKind:
    """Classify a single line of a chord sheet.

    The chord grammar is tried before the section grammar, so a line that
    could match both is a chord line.  Anything else is a lyric.
    """
    trimmed = line.strip(_HSPACE)
    if not trimmed:
        return LineKind.EMPTY
    if CHORD_LINE_RE.fullmatch(trimmed):
        return LineKind.CHORD
    if SECTION_RE.fullmatch(trimmed):
        return LineKind.SECTION
    return LineKind.LYRIC


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------


def tokenize(line: str) -> list[Token]:
    """Return the whitespace-delimited tokens of *line* with their offsets.

    Each token is searched for starting at the end of the previous one, so a
    chord that repeats (``C  G  C``) gets its own column rather than the
    column of its first occurrence.

    Raises:
        MalformedLineError: if a token cannot be found at or after the
            current search position.
    """
    tokens: list[Token] = []
    position = 0
    for word in line.split():
        offset = line.find(word, position)
        if offset < 0:
            raise MalformedLineError(line, word)
        tokens.append(Token(text=word, offset=offset))
        position = offset + len(word)
    return tokens


# ---------------------------------------------------------------------------
# Merge algorithm
# ---------------------------------------------------------------------------


def chord_marker(chord: str) -> str:
    return f"\\[{chord}]"


def splice_chords(chord_line: str, lyric_line: str) -> str:
    """Insert the chords of *chord_line* into *lyric_line* at their columns.

    Every inserted marker lengthens the line, so later columns are shifted
    right by the total length inserted so far.  A chord whose shifted column
    is at or past the end of the line is appended after a single space.

    Example::

        chord_line = "C       Em"
        lyric_line = "Hello   world"
        result     = "\\[C]Hello   \\[Em]world"
    """
    result = lyric_line
    inserted = 0  # total characters inserted so far (adjusts all future offsets)

    for token in tokenize(chord_line):
        marker = chord_marker(token.text)
        pos = token.offset + inserted
        if pos < len(result):
            result = result[:pos] + marker + result[pos:]
        else:
            result += " " + marker
        inserted += len(marker)

    return result


def standalone_chords(chord_line: str) -> str:
    """Collapse a chord line into adjacent markers, discarding its spacing.

    ``"Am F C G"`` → ``"\\[Am]\\[F]\\[C]\\[G]"``
    """
    return "".join(chord_marker(token.text) for token in tokenize(chord_line))


def merge_chord_line(
    chord_line: str,
    next_line: str | None = None,
    next_kind: LineKind | None = None,
) -> MergeResult:
    """Merge a CHORD line with the line that follows it.

    Args:
        chord_line: A CHORD-classified line.
        next_line:  The line immediately after *chord_line*, or ``None`` at
                    the end of input.
        next_kind:  The kind of *next_line*; classified here when omitted.

    Returns:
        :class:`Spliced` when *next_line* is a lyric, otherwise
        :class:`Standalone`.
    """
    if next_line is not None and next_kind is None:
        next_kind = classify_line(next_line)
    if next_line is not None and next_kind is LineKind.LYRIC:
        return Spliced(splice_chords(chord_line, next_line))
    return Standalone(standalone_chords(chord_line))
