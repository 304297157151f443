"""Guitar fingerings for chord names.

This package holds the catalog of open-position shapes and the logic that
derives barre-chord forms for every key from the movable open shapes.
"""

from chordbook.fingering.catalog import (
    A_FORM_PRIORITY_NOTES,
    OPEN_POSITIONS,
    modifier_bucket,
    open_position,
)
from chordbook.fingering.deriver import (
    get_chord_pattern,
    get_chord_positions,
    note_offset,
    shift_position,
)

__all__ = [
    "A_FORM_PRIORITY_NOTES",
    "OPEN_POSITIONS",
    "get_chord_pattern",
    "get_chord_positions",
    "modifier_bucket",
    "note_offset",
    "open_position",
    "shift_position",
]
