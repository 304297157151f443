"""Song key and capo offsets.

A chord sheet can be shifted two ways: by changing the song key, or by
changing the capo (or tuning) it is played with. Both are semitone
offsets relative to the sheet as published; moving from one offset to
another transposes every chord by the difference.
"""

from __future__ import annotations

from chordbook.notes import FLAT_SIGN, SHARP_SIGN

# Offsets relative to the original key, from highest to lowest
SONG_KEY_OPTIONS: tuple[int, ...] = (5, 4, 3, 2, 1, 0, -1, -2, -3, -4, -5, -6)

# 2 and 1 are whole-step and half-step down tunings, negative values a capo fret
CAPO_OPTIONS: tuple[int, ...] = (2, 1, 0, -1, -2, -3, -4, -5, -6, -7, -8, -9)

WHOLE_STEP_DOWN = 2
HALF_STEP_DOWN = 1
NO_CAPO = 0
ORIGINAL_KEY = 0


def is_valid_song_key(value: object) -> bool:
    """Check whether a value is one of :data:`SONG_KEY_OPTIONS`.

    Examples
    --------
    >>> is_valid_song_key(-6)
    True
    >>> is_valid_song_key(6)
    False
    """
    return isinstance(value, int) and not isinstance(value, bool) and value in SONG_KEY_OPTIONS


def is_valid_capo(value: object) -> bool:
    """Check whether a value is one of :data:`CAPO_OPTIONS`."""
    return isinstance(value, int) and not isinstance(value, bool) and value in CAPO_OPTIONS


def song_key_text(value: int) -> str:
    """Return the label for a song-key offset.

    Examples
    --------
    >>> song_key_text(0)
    'Original key'
    >>> song_key_text(3)
    '+3'
    >>> song_key_text(-2)
    '-2'
    """
    if value == ORIGINAL_KEY:
        return "Original key"
    if value > 0:
        return f"+{value}"
    return str(value)


def song_key_badge(value: int) -> str | None:
    """Return the short badge for a song-key offset, None for the original key.

    Examples
    --------
    >>> song_key_badge(2)
    '#2'
    >>> song_key_badge(-3)
    '♭3'
    """
    if value == ORIGINAL_KEY:
        return None
    if value > 0:
        return f"{SHARP_SIGN}{abs(value)}"
    return f"{FLAT_SIGN}{abs(value)}"


def capo_text(value: int) -> str:
    """Return the label for a capo offset.

    Examples
    --------
    >>> capo_text(1)
    'Half-step down tuning'
    >>> capo_text(-3)
    'Capo 3'
    """
    if value == WHOLE_STEP_DOWN:
        return "Whole-step down tuning"
    if value == HALF_STEP_DOWN:
        return "Half-step down tuning"
    if value == NO_CAPO:
        return "No capo"
    return f"Capo {abs(value)}"


def capo_badge(value: int) -> str | None:
    """Return the short badge for a capo offset, None without capo."""
    if value == WHOLE_STEP_DOWN:
        return "Whole-step down"
    if value == HALF_STEP_DOWN:
        return "Half-step down"
    if value == NO_CAPO:
        return None
    return f"Capo {abs(value)}"


def shift_between(current: int, new: int) -> int:
    """Semitones to transpose by when an offset changes from ``current`` to ``new``.

    Examples
    --------
    >>> shift_between(0, -3)
    -3
    >>> shift_between(-3, 2)
    5
    """
    return new - current
