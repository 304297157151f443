"""Transposition and chord lookup over whole chord sheets."""

from __future__ import annotations

from dataclasses import replace

from chordbook.fingering import get_chord_pattern
from chordbook.models import ChordPattern
from chordbook.parser import parse_chord
from chordbook.sheet.models import ChordRow
from chordbook.transposer import transpose_chord


def transpose_rows(rows: tuple[ChordRow, ...] | list[ChordRow], semitones: int) -> tuple[ChordRow, ...]:
    """Shift every chord name in ``rows`` by ``semitones``.

    Lyrics are untouched and segments without a chord or with text that
    is not a chord (e.g., "N.C.") are kept as they are.

    Examples
    --------
    >>> from chordbook.sheet.models import SheetChord
    >>> rows = (ChordRow(chords=(SheetChord("C/G"), SheetChord("N.C."))),)
    >>> [c.chord_name for c in transpose_rows(rows, 1)[0].chords]
    ['C#/G#', 'N.C.']
    """
    return tuple(
        ChordRow(chords=tuple(replace(chord, chord_name=transpose_chord(chord.chord_name, semitones)) for chord in row.chords))
        for row in rows
    )


def used_chords(rows: tuple[ChordRow, ...] | list[ChordRow]) -> list[str]:
    """List the distinct chord names of a sheet in order of first use.

    Examples
    --------
    >>> from chordbook.sheet.models import SheetChord
    >>> rows = (
    ...     ChordRow(chords=(SheetChord("Am"), SheetChord("F"), SheetChord(None))),
    ...     ChordRow(chords=(SheetChord("N.C."), SheetChord("Am"), SheetChord("G"))),
    ... )
    >>> used_chords(rows)
    ['Am', 'F', 'G']
    """
    seen: dict[str, None] = {}
    for row in rows:
        for chord in row.chords:
            name = chord.chord_name
            if name and name not in seen and parse_chord(name) is not None:
                seen[name] = None
    return list(seen)


def chord_patterns(rows: tuple[ChordRow, ...] | list[ChordRow]) -> list[ChordPattern]:
    """Fingerings for every chord used in ``rows``."""
    return [get_chord_pattern(name) for name in used_chords(rows)]
