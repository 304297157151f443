"""Open-position fingering catalog.

Hand-curated open shapes keyed by modifier bucket and key note. Frets run
from string 1 (highest) to string 6 (lowest). A shape held by a single
bar at fret 0 is an open form that can be moved up the neck as a barre
chord; the bar marks the strings the index finger covers once shifted.
"""

from __future__ import annotations

from chordbook.models import MUTED, Barre, FingerPosition

X = MUTED

# Modifiers that select a bucket under a different name
MODIFIER_BUCKETS: dict[str, str] = {
    "": "major",
    "m": "minor",
    "M7": "maj7",
}

# Roots of the two standard movable barre forms
E_FORM_ROOT = "E"
A_FORM_ROOT = "A"

# Keys whose A-form barre sits lower on the neck than the E-form one
A_FORM_PRIORITY_NOTES: frozenset[str] = frozenset(
    {"A#", "B♭", "B", "C", "C#", "D♭", "D", "D#", "E♭"}
)


def _position(*frets: int, barre: tuple[int, int] | None = None) -> FingerPosition:
    barres = (Barre(fret=0, strings=barre),) if barre is not None else ()
    return FingerPosition(frets=frets, barres=barres)


# Entries are listed chromatically from C; that order is kept when
# deriving shapes from roots other than E and A.
OPEN_POSITIONS: dict[str, dict[str, FingerPosition]] = {
    "major": {
        "C": _position(0, 1, 0, 2, 3, X, barre=(1, 5)),
        "D": _position(2, 3, 2, 0, X, X, barre=(4, 4)),
        "E": _position(0, 0, 1, 2, 2, 0, barre=(1, 6)),
        "G": _position(3, 0, 0, 0, 2, 3),
        "A": _position(0, 2, 2, 2, 0, X, barre=(1, 5)),
    },
    "minor": {
        "D": _position(1, 3, 2, 0, X, X),
        "E": _position(0, 0, 0, 2, 2, 0, barre=(1, 6)),
        "A": _position(0, 1, 2, 2, 0, X, barre=(1, 5)),
    },
    "7": {
        "D": _position(2, 1, 2, 0, X, X),
        "E": _position(0, 0, 1, 0, 2, 0, barre=(1, 6)),
        "G": _position(1, 0, 0, 0, 2, 3),
        "A": _position(0, 2, 0, 2, 0, X, barre=(1, 5)),
    },
    "m7": {
        "D": _position(1, 1, 2, 0, X, X),
        "E": _position(0, 0, 0, 0, 2, 0, barre=(1, 6)),
        "A": _position(0, 1, 0, 2, 0, X, barre=(1, 5)),
    },
    "maj7": {
        "C": _position(0, 0, 0, 2, 3, 0),
        "E": _position(0, 0, 1, 1, 2, 0, barre=(1, 6)),
        "G": _position(2, 0, 0, 0, 2, 3),
        "A": _position(0, 2, 1, 2, 0, X, barre=(1, 5)),
    },
}


def modifier_bucket(modifier: str) -> str:
    """Return the catalog bucket name for a chord modifier.

    Examples
    --------
    >>> modifier_bucket("")
    'major'
    >>> modifier_bucket("M7")
    'maj7'
    >>> modifier_bucket("m7")
    'm7'
    """
    return MODIFIER_BUCKETS.get(modifier, modifier)


def open_position(bucket: str, key_note: str) -> FingerPosition | None:
    """Look up the open-position entry for a bucket and key note."""
    return OPEN_POSITIONS.get(bucket, {}).get(key_note)
