"""Chord detection and line classification for plain-text sheets.

A token is a chord when it looks like one (regex pre-filter) and both the
note table and pychord accept it.
"""

from __future__ import annotations

import re
from typing import Literal

from chordbook.converter import is_known_chord
from chordbook.sheet.models import Token
from chordbook.sheet.tokenizer import tokenize_line

MAX_CHORD_LENGTH = 15
CHORD_LINE_THRESHOLD = 0.6

# Root, optional accidental, anything but a slash, optional slash bass
CHORD_RE = re.compile(r"^[A-G][#♭]?[^/\s]*(?:/[A-G][#♭]?)?$")

# Tokens written on chord lines that are not chords
NO_CHORD_MARKERS: frozenset[str] = frozenset({"N.C.", "N.C", "NC", "-"})

SECTION_HEADER_RE = re.compile(r"^\s*\[(.+?)\]\s*$")
COMMENT_RE = re.compile(r"^\s*\(.+?\)\s*$")

LineType = Literal["chord", "lyric", "empty", "comment", "section_header"]


def is_chord(text: str) -> bool:
    """Check whether a token is a chord name.

    Examples
    --------
    >>> is_chord("B♭m7")
    True
    >>> is_chord("F#/C#")
    True
    >>> is_chord("Hello")
    False
    >>> is_chord("N.C.")
    False
    """
    if not text or len(text) > MAX_CHORD_LENGTH:
        return False
    if not CHORD_RE.match(text):
        return False
    return is_known_chord(text)


def classify_token(token: Token) -> Token:
    """Return a copy of ``token`` with its kind set.

    Examples
    --------
    >>> classify_token(Token(text="Gm7", start=0, end=3)).kind
    'chord'
    >>> classify_token(Token(text="N.C.", start=0, end=4)).kind
    'marker'
    >>> classify_token(Token(text="love", start=0, end=4)).kind
    'word'
    """
    text = token.text

    if is_chord(text):
        kind = "chord"
    elif text in NO_CHORD_MARKERS:
        kind = "marker"
    elif all(not c.isalnum() for c in text):
        kind = "punct"
    elif any(c.isalpha() for c in text):
        kind = "word"
    else:
        return token

    return Token(text=text, start=token.start, end=token.end, kind=kind)


def classify_tokens(tokens: list[Token]) -> list[Token]:
    return [classify_token(t) for t in tokens]


def tokenize_and_classify(line: str) -> list[Token]:
    return classify_tokens(tokenize_line(line))


def classify_line(line: str, tokens: list[Token] | None = None) -> LineType:
    """Classify a line of a plain-text sheet.

    A chord line holds at least one chord and no words, and chords or
    no-chord markers make up most of its non-punctuation tokens.

    Examples
    --------
    >>> classify_line("")
    'empty'
    >>> classify_line("[Chorus]")
    'section_header'
    >>> classify_line("(x2)")
    'comment'
    >>> classify_line("C   G/B   Am")
    'chord'
    >>> classify_line("Let it be")
    'lyric'
    """
    if not line.strip():
        return "empty"

    if SECTION_HEADER_RE.match(line):
        return "section_header"

    if COMMENT_RE.match(line):
        return "comment"

    if tokens is None:
        tokens = tokenize_and_classify(line)

    chord_count = sum(1 for t in tokens if t.kind == "chord")
    marker_count = sum(1 for t in tokens if t.kind == "marker")
    word_count = sum(1 for t in tokens if t.kind == "word")
    counted = sum(1 for t in tokens if t.kind != "punct")

    if chord_count == 0 or word_count > 0:
        return "lyric"

    if (chord_count + marker_count) / counted >= CHORD_LINE_THRESHOLD:
        return "chord"
    return "lyric"
