"""Column-aware tokenizer for plain-text chord sheets."""

from __future__ import annotations

import re

from chordbook.sheet.models import Token

TOKEN_RE = re.compile(r"\S+")


def tokenize_line(line: str) -> list[Token]:
    """Split a line on whitespace, keeping each token's column span.

    Parameters
    ----------
    line : str
        The line to tokenize, without its newline.

    Returns
    -------
    list[Token]
        Tokens with kind "other"; classification happens in the detector.

    Examples
    --------
    >>> [(t.text, t.start, t.end) for t in tokenize_line("Am   F/A")]
    [('Am', 0, 2), ('F/A', 5, 8)]
    """
    return [Token(text=m.group(), start=m.start(), end=m.end()) for m in TOKEN_RE.finditer(line)]
