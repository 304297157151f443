"""Chord sheets: parsing, rendering and whole-sheet transposition.

This package turns plain chord-over-lyric text and scraped song JSON into
chord rows, and shifts every chord of a sheet when the key or capo changes.
"""

from chordbook.sheet.models import ChordRow, SheetChord, Song, Token
from chordbook.sheet.parser import parse_sheet, render_sheet
from chordbook.sheet.transpose import chord_patterns, transpose_rows, used_chords

__all__ = [
    "ChordRow",
    "SheetChord",
    "Song",
    "Token",
    "chord_patterns",
    "parse_sheet",
    "render_sheet",
    "transpose_rows",
    "used_chords",
]
