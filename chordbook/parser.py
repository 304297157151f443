"""Chord name parsing.

Splits a chord name such as "C#m7/G#" into key note, modifier and bass
note using the spellings of the note table.
"""

from __future__ import annotations

from chordbook.models import ParsedChord
from chordbook.notes import SPELLINGS_BY_LENGTH


def match_key_note(text: str) -> str | None:
    """Return the longest note spelling that prefixes ``text``.

    Examples
    --------
    >>> match_key_note("C#m")
    'C#'
    >>> match_key_note("Cm")
    'C'
    >>> match_key_note("N.C.") is None
    True
    """
    for note in SPELLINGS_BY_LENGTH:
        if text.startswith(note):
            return note
    return None


def parse_chord(text: str) -> ParsedChord | None:
    """Parse a chord name into key note, modifier and bass note.

    Parameters
    ----------
    text : str
        Chord name (e.g., "Cm/G", "B♭7", "F#sus4").

    Returns
    -------
    ParsedChord | None
        The parsed chord, or None if the text is empty or does not start
        with a note spelling. The modifier is passed through verbatim and
        the bass note (everything after the first "/") is not validated.

    Examples
    --------
    >>> parse_chord("C#m/G#")
    ParsedChord(key_note='C#', modifier='m', bass_note='G#')
    >>> parse_chord("Esus4")
    ParsedChord(key_note='E', modifier='sus4', bass_note='')
    >>> parse_chord("N.C.") is None
    True
    """
    if not text:
        return None

    main_part, _, bass_part = text.partition("/")

    key_note = match_key_note(main_part)
    if key_note is None:
        return None

    return ParsedChord(
        key_note=key_note,
        modifier=main_part[len(key_note) :],
        bass_note=bass_part,
    )
