"""Note table for the 12-tone chromatic circle.

This module holds the fixed table of pitch-class spellings used by the
parser, the transposer and the fingering deriver. Index 0 is A and each
slot lists its natural/sharp spelling first and, for five slots, the
flat spelling second.
"""

from __future__ import annotations

# Chromatic circle starting at A, with enharmonic flat spellings
NOTE_MAPPINGS: tuple[tuple[str, ...], ...] = (
    ("A",),
    ("A#", "B♭"),
    ("B",),
    ("C",),
    ("C#", "D♭"),
    ("D",),
    ("D#", "E♭"),
    ("E",),
    ("F",),
    ("F#", "G♭"),
    ("G",),
    ("G#", "A♭"),
)

NOTE_COUNT = len(NOTE_MAPPINGS)

FLAT_SIGN = "♭"
SHARP_SIGN = "#"

NOTE_SPELLINGS: tuple[str, ...] = tuple(note for notes in NOTE_MAPPINGS for note in notes)

# Longest spellings first so "C#" is tried before "C" (sort is stable)
SPELLINGS_BY_LENGTH: tuple[str, ...] = tuple(sorted(NOTE_SPELLINGS, key=len, reverse=True))

NOTE_TO_INDEX: dict[str, int] = {
    note: index for index, notes in enumerate(NOTE_MAPPINGS) for note in notes
}


def note_index(note: str) -> int | None:
    """Return the table index of a note spelling.

    Parameters
    ----------
    note : str
        Note spelling (e.g., "C#", "E♭").

    Returns
    -------
    int | None
        Index in ``0..11`` or None if the spelling is not in the table.

    Examples
    --------
    >>> note_index("A")
    0
    >>> note_index("B♭")
    1
    >>> note_index("Bb") is None
    True
    """
    return NOTE_TO_INDEX.get(note)


def normalize_index(index: int) -> int:
    """Wrap any integer onto the chromatic circle.

    Examples
    --------
    >>> normalize_index(13)
    1
    >>> normalize_index(-1)
    11
    """
    return ((index % NOTE_COUNT) + NOTE_COUNT) % NOTE_COUNT


def note_by_index(index: int, prefer_flat: bool = False) -> str:
    """Return the spelling for a (possibly out of range) index.

    Parameters
    ----------
    index : int
        Position on the circle; wrapped with :func:`normalize_index`.
    prefer_flat : bool
        Use the flat spelling when the slot has one.

    Returns
    -------
    str
        The natural or sharp spelling, or the flat one if requested and
        available.

    Examples
    --------
    >>> note_by_index(4)
    'C#'
    >>> note_by_index(4, prefer_flat=True)
    'D♭'
    >>> note_by_index(-11, prefer_flat=True)
    'B♭'
    >>> note_by_index(3, prefer_flat=True)
    'C'
    """
    notes = NOTE_MAPPINGS[normalize_index(index)]
    if prefer_flat and len(notes) > 1:
        return notes[1]
    return notes[0]


def is_flat_spelling(note: str) -> bool:
    """Check whether a spelling carries the flat glyph."""
    return FLAT_SIGN in note


def is_valid_note(note: str) -> bool:
    """Check whether a string is exactly one of the table spellings.

    Matching is case-sensitive with no whitespace tolerance; ASCII "b"
    is not accepted as a flat.

    Examples
    --------
    >>> is_valid_note("B♭")
    True
    >>> is_valid_note("Bb")
    False
    >>> is_valid_note("Cm")
    False
    """
    return note in NOTE_TO_INDEX
