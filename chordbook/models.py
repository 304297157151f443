"""Data models for chord names and guitar fingerings.

This module defines the immutable values passed between the parser, the
transposer and the fingering deriver.
"""

from __future__ import annotations

from dataclasses import dataclass, field

STRING_COUNT = 6

# Fret value for a string that is not played
MUTED = -1
OPEN = 0


@dataclass(frozen=True)
class ParsedChord:
    """A chord name split into its parts.

    Parameters
    ----------
    key_note : str
        The key (root) note spelling, always a table spelling.
    modifier : str
        Everything after the key note, kept verbatim (e.g., "m7", "sus4").
    bass_note : str
        The text after "/" or an empty string. Not validated.

    Examples
    --------
    >>> ParsedChord(key_note="C#", modifier="m", bass_note="G#").name
    'C#m/G#'
    >>> ParsedChord(key_note="E♭", modifier="7").name
    'E♭7'
    """

    key_note: str
    modifier: str = ""
    bass_note: str = ""

    @property
    def name(self) -> str:
        """Reassemble the chord name."""
        result = f"{self.key_note}{self.modifier}"
        if self.bass_note:
            result = f"{result}/{self.bass_note}"
        return result

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Barre:
    """A single finger pressing a range of strings at one fret.

    Parameters
    ----------
    fret : int
        Fret the bar lies on; 0 marks the nut of an open shape.
    strings : tuple[int, int]
        Inclusive ``(start, end)`` string range, 1 being the highest string.
    """

    fret: int
    strings: tuple[int, int]

    def __post_init__(self) -> None:
        if self.fret < 0:
            msg = f"Barre fret must be non-negative, got {self.fret}"
            raise ValueError(msg)
        if len(self.strings) != 2:
            msg = f"Barre strings must be a (start, end) pair, got {self.strings!r}"
            raise ValueError(msg)
        start, end = self.strings
        if not 1 <= start <= end <= STRING_COUNT:
            msg = f"Invalid barre string range: {self.strings!r}"
            raise ValueError(msg)
        object.__setattr__(self, "strings", (start, end))


@dataclass(frozen=True)
class FingerPosition:
    """Fingering for one chord diagram.

    Parameters
    ----------
    frets : tuple[int, ...]
        Six fret numbers from string 1 (highest) to string 6 (lowest);
        0 is an open string and :data:`MUTED` a string not played.
    barres : tuple[Barre, ...]
        Bars laid across several strings, possibly empty.

    Examples
    --------
    >>> pos = FingerPosition(frets=(0, 2, 2, 2, 0, MUTED), barres=(Barre(0, (1, 5)),))
    >>> pos.is_movable
    True
    >>> pos.fretted_strings
    (2, 3, 4)
    """

    frets: tuple[int, ...]
    barres: tuple[Barre, ...] = field(default=())

    def __post_init__(self) -> None:
        frets = tuple(self.frets)
        if len(frets) != STRING_COUNT:
            msg = f"Expected {STRING_COUNT} frets, got {len(frets)}"
            raise ValueError(msg)
        for fret in frets:
            if fret < 0 and fret != MUTED:
                msg = f"Invalid fret value: {fret}"
                raise ValueError(msg)
        object.__setattr__(self, "frets", frets)
        object.__setattr__(self, "barres", tuple(self.barres))

    @property
    def is_movable(self) -> bool:
        """True for an open shape held by exactly one bar at the nut."""
        return len(self.barres) == 1 and self.barres[0].fret == OPEN

    @property
    def fretted_strings(self) -> tuple[int, ...]:
        """String numbers pressed by a finger (not open, not muted)."""
        return tuple(i for i, fret in enumerate(self.frets, start=1) if fret > OPEN)

    @property
    def muted_strings(self) -> tuple[int, ...]:
        return tuple(i for i, fret in enumerate(self.frets, start=1) if fret == MUTED)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dict."""
        result: dict = {"frets": list(self.frets)}
        if self.barres:
            result["barres"] = [
                {"fret": barre.fret, "strings": list(barre.strings)} for barre in self.barres
            ]
        return result


@dataclass(frozen=True)
class ChordPattern:
    """A chord name together with its candidate fingerings.

    Parameters
    ----------
    name : str
        The chord name as given.
    positions : tuple[FingerPosition, ...]
        Fingerings, most preferred first.
    """

    name: str
    positions: tuple[FingerPosition, ...]

    def to_dict(self) -> dict:
        return {"name": self.name, "positions": [p.to_dict() for p in self.positions]}
