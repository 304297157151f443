"""Fingering derivation for any key.

Combines the open position of a chord, if the catalog has one, with
barre chords derived by sliding every movable open form up the neck to
the requested key.
"""

from __future__ import annotations

from chordbook.fingering.catalog import (
    A_FORM_PRIORITY_NOTES,
    A_FORM_ROOT,
    E_FORM_ROOT,
    OPEN_POSITIONS,
    modifier_bucket,
    open_position,
)
from chordbook.models import OPEN, Barre, ChordPattern, FingerPosition
from chordbook.notes import NOTE_COUNT, note_index
from chordbook.parser import parse_chord


def note_offset(from_note: str, to_note: str) -> int:
    """Return how many semitones ``to_note`` lies above ``from_note``.

    Unknown spellings give 0.

    Examples
    --------
    >>> note_offset("A", "C")
    3
    >>> note_offset("E", "C")
    8
    >>> note_offset("E", "E")
    0
    """
    from_index = note_index(from_note)
    to_index = note_index(to_note)
    if from_index is None or to_index is None:
        return 0
    return (to_index - from_index + NOTE_COUNT) % NOTE_COUNT


def shift_position(position: FingerPosition, offset: int) -> FingerPosition:
    """Move an open form up the neck as a barre chord.

    Fretted strings move one fret higher so the shape sits behind the bar,
    open and muted strings are left as they are, and each bar is placed
    at ``offset``.

    Parameters
    ----------
    position : FingerPosition
        A movable open form.
    offset : int
        Semitones between the form's root and the target key.

    Returns
    -------
    FingerPosition
        The derived barre shape.

    Examples
    --------
    >>> from chordbook.fingering.catalog import OPEN_POSITIONS
    >>> shifted = shift_position(OPEN_POSITIONS["major"]["A"], 3)
    >>> shifted.frets
    (0, 3, 3, 3, 0, -1)
    >>> shifted.barres[0].fret
    3
    """
    return FingerPosition(
        frets=tuple(fret + 1 if fret > OPEN else fret for fret in position.frets),
        barres=tuple(Barre(fret=barre.fret + offset, strings=barre.strings) for barre in position.barres),
    )


def get_chord_positions(chord: str) -> list[FingerPosition]:
    """Return candidate fingerings for a chord name.

    Parameters
    ----------
    chord : str
        Chord name (e.g., "C", "Am7", "F#m").

    Returns
    -------
    list[FingerPosition]
        The open position first when there is one, then shapes derived
        from the E form and the A form (A form first for keys in
        :data:`A_FORM_PRIORITY_NOTES`), then shapes derived from other
        roots. Duplicates are kept. Unparseable chords and modifiers
        without catalog data give an empty list.

    Examples
    --------
    >>> positions = get_chord_positions("G")
    >>> positions[0].frets
    (3, 0, 0, 0, 2, 3)
    >>> positions[1].barres[0].fret
    3
    >>> get_chord_positions("Invalid")
    []
    """
    parsed = parse_chord(chord)
    if parsed is None:
        return []

    bucket = modifier_bucket(parsed.modifier)
    positions_per_note = OPEN_POSITIONS.get(bucket)
    if not positions_per_note:
        return []

    first_positions: list[FingerPosition] = []
    opened = open_position(bucket, parsed.key_note)
    if opened is not None:
        first_positions.append(opened)

    e_form_positions: list[FingerPosition] = []
    a_form_positions: list[FingerPosition] = []
    other_positions: list[FingerPosition] = []

    for note, position in positions_per_note.items():
        if not position.is_movable:
            continue
        offset = note_offset(note, parsed.key_note)
        # Never derived onto its own root
        if offset <= 0:
            continue
        shifted = shift_position(position, offset)
        if note == E_FORM_ROOT:
            e_form_positions.append(shifted)
        elif note == A_FORM_ROOT:
            a_form_positions.append(shifted)
        else:
            other_positions.append(shifted)

    if parsed.key_note in A_FORM_PRIORITY_NOTES:
        return first_positions + a_form_positions + e_form_positions + other_positions
    return first_positions + e_form_positions + a_form_positions + other_positions


def get_chord_pattern(chord: str) -> ChordPattern:
    """Bundle a chord name with its fingerings.

    Examples
    --------
    >>> pattern = get_chord_pattern("Am")
    >>> pattern.name
    'Am'
    >>> len(pattern.positions) > 0
    True
    """
    return ChordPattern(name=chord, positions=tuple(get_chord_positions(chord)))
