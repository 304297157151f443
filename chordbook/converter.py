"""Interop with pychord's ASCII chord notation.

Chord sheets spell flats with the "♭" glyph, while pychord expects an
ASCII "b" (e.g., "B♭m7" vs. "Bbm7"). This module converts between the
two and uses pychord to validate chord names and list chord tones.
"""

from __future__ import annotations

from chordbook.models import ParsedChord
from chordbook.notes import FLAT_SIGN, is_flat_spelling, is_valid_note, note_by_index, note_index
from chordbook.parser import parse_chord

ASCII_FLAT = "b"

# pychord counts pitch values from C
PYCHORD_ORIGIN = "C"


def _to_ascii(text: str) -> str:
    return text.replace(FLAT_SIGN, ASCII_FLAT)


def _from_ascii(note: str) -> str:
    """Re-spell an ASCII note name with the flat glyph.

    Examples
    --------
    >>> _from_ascii("Bb")
    'B♭'
    >>> _from_ascii("F#")
    'F#'
    """
    if len(note) == 2 and note[1] == ASCII_FLAT:
        return note[0] + FLAT_SIGN
    return note


def _coerce(chord: str | ParsedChord) -> ParsedChord:
    if isinstance(chord, ParsedChord):
        return chord
    parsed = parse_chord(chord)
    if parsed is None:
        msg = f"Unknown chord: {chord!r}"
        raise ValueError(msg)
    return parsed


def to_pychord(chord: str | ParsedChord) -> str:
    """Convert a chord name to pychord notation.

    Parameters
    ----------
    chord : str | ParsedChord
        Chord name (e.g., "B♭m7/F") or an already parsed chord.

    Returns
    -------
    str
        The same chord spelled with ASCII flats (e.g., "Bbm7/F").

    Raises
    ------
    ValueError
        If the chord name cannot be parsed.

    Examples
    --------
    >>> to_pychord("B♭m7/A♭")
    'Bbm7/Ab'
    >>> to_pychord("C#")
    'C#'
    """
    parsed = _coerce(chord)
    result = _to_ascii(parsed.key_note) + _to_ascii(parsed.modifier)
    if parsed.bass_note:
        result = f"{result}/{_to_ascii(parsed.bass_note)}"
    return result


def _load_pychord(chord_str: str):
    from pychord import Chord as PyChord

    try:
        return PyChord(chord_str)
    except ValueError as e:
        msg = f"Unknown chord: {chord_str!r}"
        raise ValueError(msg) from e


def _load_parsed(parsed: ParsedChord):
    """Load a parsed chord into pychord, checking both agree on its root.

    An ASCII "b" right after the root is a modifier for the note table but
    a flat for pychord (e.g., "Bb"), so such names are rejected.
    """
    chord_str = to_pychord(parsed)
    pc = _load_pychord(chord_str)
    if _from_ascii(pc.root) != parsed.key_note:
        msg = f"Unknown chord: {chord_str!r}"
        raise ValueError(msg)
    return pc


def from_pychord(chord_str: str) -> ParsedChord:
    """Parse a pychord notation string into a ParsedChord.

    Parameters
    ----------
    chord_str : str
        Chord in pychord notation (e.g., "Bbm7", "F#dim/A").

    Returns
    -------
    ParsedChord
        The chord with flats spelled using the table glyph.

    Raises
    ------
    ValueError
        If pychord rejects the chord or its root is not in the note table
        (e.g., "Cb").

    Examples
    --------
    >>> from_pychord("Bbm7")
    ParsedChord(key_note='B♭', modifier='m7', bass_note='')
    """
    pc = _load_pychord(chord_str)

    root = _from_ascii(pc.root)
    if not is_valid_note(root):
        msg = f"Unknown note: {pc.root}"
        raise ValueError(msg)

    return ParsedChord(
        key_note=root,
        modifier=str(pc.quality),
        bass_note=_from_ascii(pc.on) if pc.on else "",
    )


def chord_components(chord: str | ParsedChord) -> list[str]:
    """List the tones of a chord, spelled from the note table.

    Flat spellings are used when the key note is spelled flat.

    Parameters
    ----------
    chord : str | ParsedChord
        Chord name (e.g., "B♭7").

    Returns
    -------
    list[str]
        Note spellings in pychord's component order.

    Raises
    ------
    ValueError
        If the chord cannot be parsed or pychord does not know its
        modifier.

    Examples
    --------
    >>> chord_components("Am")
    ['A', 'C', 'E']
    >>> chord_components("B♭7")
    ['B♭', 'D', 'F', 'A♭']
    """
    parsed = _coerce(chord)
    pc = _load_parsed(parsed)

    origin = note_index(PYCHORD_ORIGIN)
    prefer_flat = is_flat_spelling(parsed.key_note)
    return [note_by_index(origin + value, prefer_flat=prefer_flat) for value in pc.components(visible=False)]


def is_known_chord(text: str) -> bool:
    """Check that both the note table and pychord accept a chord name.

    Examples
    --------
    >>> is_known_chord("Gm7")
    True
    >>> is_known_chord("B♭m")
    True
    >>> is_known_chord("Hello")
    False
    """
    parsed = parse_chord(text)
    if parsed is None:
        return False
    try:
        _load_parsed(parsed)
    except ValueError:
        return False
    return True
