import dataclasses

import pytest

from sheet2songs.models import LineKind, Song, Spliced, Standalone, Token


def test_token_stores_text_and_offset():
    token = Token(text="Am7", offset=4)
    assert token.text == "Am7"
    assert token.offset == 4


def test_token_is_immutable():
    token = Token(text="C", offset=0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.offset = 3


def test_merge_results_are_distinct():
    assert Spliced(r"\[C]la") != Standalone(r"\[C]la")


def test_line_kinds():
    assert {k.name for k in LineKind} == {"EMPTY", "SECTION", "CHORD", "LYRIC"}


def test_song_defaults():
    song = Song(title="Dark Star", artist="Grateful Dead")
    assert song.lines == []
    assert song.source == ""
