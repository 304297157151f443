"""Chord transposition around the chromatic circle.

Each note keeps the accidental style of its own spelling before the
shift: a flat spelling stays flat where the target slot has one, and
anything else comes out natural or sharp.
"""

from __future__ import annotations

from chordbook.notes import is_flat_spelling, note_by_index, note_index
from chordbook.parser import parse_chord


def transpose_note(note: str, semitones: int) -> str:
    """Shift a single note spelling by a number of semitones.

    Parameters
    ----------
    note : str
        Note spelling. Unknown spellings are returned unchanged.
    semitones : int
        Number of semitones (positive = up), any magnitude.

    Returns
    -------
    str
        The transposed spelling.

    Examples
    --------
    >>> transpose_note("E♭", -1)
    'D'
    >>> transpose_note("E♭", 2)
    'F'
    >>> transpose_note("E♭", 7)
    'B♭'
    >>> transpose_note("D", -1)
    'C#'
    >>> transpose_note("H", 3)
    'H'
    """
    index = note_index(note)
    if index is None:
        return note
    return note_by_index(index + semitones, prefer_flat=is_flat_spelling(note))


def transpose_chord(chord: str | None, semitones: int) -> str | None:
    """Transpose a chord name by a number of semitones.

    Parameters
    ----------
    chord : str | None
        Chord name (e.g., "Cm/G"). None is passed through.
    semitones : int
        Number of semitones (positive = up, negative = down).

    Returns
    -------
    str | None
        The transposed chord name. Text that cannot be parsed as a chord
        (e.g., "N.C.") is returned unchanged. The modifier is never
        altered.

    Examples
    --------
    >>> transpose_chord("C/G", 1)
    'C#/G#'
    >>> transpose_chord("B♭m", 2)
    'Cm'
    >>> transpose_chord("Dm", 24)
    'Dm'
    >>> transpose_chord("N.C.", 5)
    'N.C.'
    """
    if chord is None:
        return None

    parsed = parse_chord(chord)
    if parsed is None:
        return chord

    result = transpose_note(parsed.key_note, semitones) + parsed.modifier
    if parsed.bass_note:
        result = f"{result}/{transpose_note(parsed.bass_note, semitones)}"
    return result
