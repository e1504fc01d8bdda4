from dataclasses import dataclass, field
from enum import Enum, auto


class LineKind(Enum):
    EMPTY = auto()  # empty or whitespace only
    SECTION = auto()  # section marker: [Verse 1], [Chorus]
    CHORD = auto()  # chord-only line: C   G   Am7
    LYRIC = auto()  # everything else


@dataclass(frozen=True)
class Token:
    """A whitespace-delimited word and the column it starts at.

    ``offset`` is the 0-based character index of the first character of
    ``text`` in the original, untrimmed line.
    """

    text: str
    offset: int


@dataclass(frozen=True)
class Spliced:
    """Merge result when a lyric line follows the chord line.

    Example: "\\[C]Hello   \\[Em]world"
    """

    line: str


@dataclass(frozen=True)
class Standalone:
    """Merge result for a chord line with no lyric to align against.

    Example: "\\[Am]\\[F]\\[C]\\[G]"
    """

    line: str


MergeResult = Spliced | Standalone


@dataclass
class Song:
    """A chord sheet as read from its source, plus the songbook metadata."""

    title: str
    artist: str
    lines: list[str] = field(default_factory=list)
    source: str = ""  # path or URL the lines were read from
