"""Data models for chord sheets.

A chord sheet is a sequence of rows; each row is a run of segments, and
each segment is one chord name (or none) written above a run of lyric
columns. The dict form matches the JSON served for a song page.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Literal

from chordbook.keys import NO_CAPO, ORIGINAL_KEY, is_valid_capo, is_valid_song_key, shift_between

if TYPE_CHECKING:
    from chordbook.models import ChordPattern


TokenKind = Literal["chord", "marker", "word", "punct", "other"]


@dataclass(frozen=True)
class Token:
    """A token of a plain-text line with its column span.

    Parameters
    ----------
    text : str
        The token text.
    start : int
        Inclusive start column (0-indexed).
    end : int
        Exclusive end column.
    kind : TokenKind
        The token classification.

    Examples
    --------
    >>> token = Token(text="Am7", start=4, end=7, kind="chord")
    >>> token.end - token.start
    3
    """

    text: str
    start: int
    end: int
    kind: TokenKind = "other"


def to_cols(text: str) -> tuple[str, ...]:
    """Split lyric text into columns, blanks becoming empty strings.

    Examples
    --------
    >>> to_cols("a b")
    ('a', '', 'b')
    """
    return tuple("" if ch.isspace() else ch for ch in text)


@dataclass(frozen=True)
class SheetChord:
    """One chord name over a run of lyric columns.

    Parameters
    ----------
    chord_name : str | None
        The chord written above the columns, or None for plain lyrics.
    cols : tuple[str, ...]
        One entry per column; an empty string is a blank column.
    """

    chord_name: str | None
    cols: tuple[str, ...] = ()

    @property
    def lyric(self) -> str:
        """The columns joined back into text."""
        return "".join(col or " " for col in self.cols)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SheetChord:
        try:
            chord_name = data["chordName"]
            cols = data["cols"]
        except KeyError as e:
            msg = f"Missing chord field: {e.args[0]}"
            raise ValueError(msg) from e
        return cls(chord_name=chord_name or None, cols=tuple(cols))

    def to_dict(self) -> dict[str, Any]:
        return {"chordName": self.chord_name, "cols": list(self.cols), "lyric": self.lyric}


@dataclass(frozen=True)
class ChordRow:
    """One line of a chord sheet."""

    chords: tuple[SheetChord, ...]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChordRow:
        if "chords" not in data:
            msg = "Missing row field: chords"
            raise ValueError(msg)
        return cls(chords=tuple(SheetChord.from_dict(chord) for chord in data["chords"]))

    def to_dict(self) -> dict[str, Any]:
        return {"chords": [chord.to_dict() for chord in self.chords]}


@dataclass(frozen=True)
class Song:
    """A song page: metadata plus the chord sheet body.

    Parameters
    ----------
    title : str
        Song title.
    artist : str
        Artist name.
    credit : str
        Lyricist/composer credit line.
    capo : int
        Current capo offset (see :data:`chordbook.keys.CAPO_OPTIONS`).
    key : int
        Current song-key offset (see :data:`chordbook.keys.SONG_KEY_OPTIONS`).
    body : tuple[ChordRow, ...]
        The chord sheet.
    """

    title: str
    artist: str
    credit: str = ""
    capo: int = 0
    key: int = 0
    body: tuple[ChordRow, ...] = ()

    def __post_init__(self) -> None:
        if not is_valid_capo(self.capo):
            msg = f"Invalid capo value: {self.capo!r}"
            raise ValueError(msg)
        if not is_valid_song_key(self.key):
            msg = f"Invalid song key value: {self.key!r}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Song:
        """Build a Song from its JSON form.

        A missing or out-of-range ``capo`` or ``key`` falls back to no
        capo and the original key.

        Raises
        ------
        ValueError
            If a required field is missing.

        Examples
        --------
        >>> Song.from_dict({"title": "t", "artist": "a", "capo": None, "body": []}).capo
        0
        """
        try:
            title = data["title"]
            artist = data["artist"]
            body = data["body"]
        except KeyError as e:
            msg = f"Missing song field: {e.args[0]}"
            raise ValueError(msg) from e

        capo = data.get("capo")
        key = data.get("key")
        return cls(
            title=title,
            artist=artist,
            credit=data.get("credit", ""),
            capo=capo if is_valid_capo(capo) else NO_CAPO,
            key=key if is_valid_song_key(key) else ORIGINAL_KEY,
            body=tuple(ChordRow.from_dict(row) for row in body),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "artist": self.artist,
            "credit": self.credit,
            "capo": self.capo,
            "key": self.key,
            "body": [row.to_dict() for row in self.body],
        }

    def transposed(self, semitones: int) -> Song:
        """Return a copy with every chord shifted by ``semitones``."""
        from chordbook.sheet.transpose import transpose_rows

        return replace(self, body=transpose_rows(self.body, semitones))

    def with_capo(self, capo: int) -> Song:
        """Return a copy played with another capo offset.

        Raises
        ------
        ValueError
            If ``capo`` is not a valid capo offset.
        """
        if not is_valid_capo(capo):
            msg = f"Invalid capo value: {capo!r}"
            raise ValueError(msg)
        return replace(self.transposed(shift_between(self.capo, capo)), capo=capo)

    def with_key(self, key: int) -> Song:
        """Return a copy moved to another song-key offset.

        Raises
        ------
        ValueError
            If ``key`` is not a valid song-key offset.
        """
        if not is_valid_song_key(key):
            msg = f"Invalid song key value: {key!r}"
            raise ValueError(msg)
        return replace(self.transposed(shift_between(self.key, key)), key=key)

    def chord_patterns(self) -> list[ChordPattern]:
        """Fingerings for every chord used in the song."""
        from chordbook.sheet.transpose import chord_patterns

        return chord_patterns(self.body)
