"""Chord names, transposition and guitar fingerings for chord sheets.

This library parses chord names as written on chord sheets (flats use the
"♭" glyph), transposes them while keeping each note's accidental style,
and lists guitar fingerings for a chord, open position first.

Examples
--------
>>> from chordbook import parse_chord, transpose_chord, get_chord_positions

>>> parse_chord("C#m/G#")
ParsedChord(key_note='C#', modifier='m', bass_note='G#')

>>> transpose_chord("E♭", 1)
'E'
>>> transpose_chord("D", -1)
'C#'

>>> get_chord_positions("C")[0].frets
(0, 1, 0, 2, 3, -1)
"""

from chordbook.fingering import get_chord_pattern, get_chord_positions
from chordbook.models import MUTED, Barre, ChordPattern, FingerPosition, ParsedChord
from chordbook.notes import is_valid_note, note_by_index, note_index
from chordbook.parser import parse_chord
from chordbook.transposer import transpose_chord, transpose_note

__all__ = [
    "MUTED",
    "Barre",
    "ChordPattern",
    "FingerPosition",
    "ParsedChord",
    "get_chord_pattern",
    "get_chord_positions",
    "is_valid_note",
    "note_by_index",
    "note_index",
    "parse_chord",
    "transpose_chord",
    "transpose_note",
]
