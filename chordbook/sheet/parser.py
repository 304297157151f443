"""Plain-text chord sheet parsing and rendering.

Converts chord-over-lyric text into chord rows, where each chord owns the
lyric columns from its own column up to the next chord, and lays rows back
out as text.
"""

from __future__ import annotations

from chordbook.sheet.detector import classify_line, tokenize_and_classify
from chordbook.sheet.models import ChordRow, SheetChord, to_cols

ANCHOR_KINDS = ("chord", "marker")


def preprocess(text: str) -> list[str]:
    """Split text into lines, normalizing line endings."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.split("\n")


def create_row(chord_line: str, lyric_line: str = "") -> ChordRow:
    """Build a row from a chord line and the lyric line below it.

    Parameters
    ----------
    chord_line : str
        The raw chord line.
    lyric_line : str
        The raw lyric line; empty for a chord line on its own.

    Returns
    -------
    ChordRow
        One segment per chord, plus a leading chordless segment when the
        lyrics start before the first chord.

    Examples
    --------
    >>> row = create_row("G      C", "Hello  world")
    >>> [(c.chord_name, c.lyric) for c in row.chords]
    [('G', 'Hello  '), ('C', 'world')]
    """
    width = max(len(chord_line), len(lyric_line))
    lyric_padded = lyric_line.ljust(width)

    anchors = [t for t in tokenize_and_classify(chord_line) if t.kind in ANCHOR_KINDS]
    if not anchors:
        return ChordRow(chords=(SheetChord(chord_name=None, cols=to_cols(lyric_line.rstrip())),))

    chords: list[SheetChord] = []
    if anchors[0].start > 0:
        chords.append(SheetChord(chord_name=None, cols=to_cols(lyric_padded[: anchors[0].start])))

    for i, anchor in enumerate(anchors):
        if i + 1 < len(anchors):
            segment = lyric_padded[anchor.start : anchors[i + 1].start]
        else:
            segment = lyric_padded[anchor.start :].rstrip()
        chords.append(SheetChord(chord_name=anchor.text, cols=to_cols(segment)))

    return ChordRow(chords=tuple(chords))


def parse_sheet(text: str) -> tuple[ChordRow, ...]:
    """Parse a plain-text chord sheet into rows.

    A chord line followed by a lyric line becomes one row. Chord lines
    and lyric lines on their own become their own rows, section headers
    and comments become lyric-only rows, and blank lines are dropped.

    Parameters
    ----------
    text : str
        The raw sheet text.

    Returns
    -------
    tuple[ChordRow, ...]
        The parsed rows.

    Examples
    --------
    >>> rows = parse_sheet('''[Verse]
    ... Am     F
    ... Hello  world
    ... ''')
    >>> len(rows)
    2
    >>> [c.chord_name for c in rows[1].chords]
    ['Am', 'F']
    """
    lines = preprocess(text)
    rows: list[ChordRow] = []
    i = 0
    n = len(lines)

    while i < n:
        line = lines[i]
        tokens = tokenize_and_classify(line)
        line_type = classify_line(line, tokens)

        if line_type == "empty":
            i += 1
            continue

        if line_type == "chord":
            if i + 1 < n and classify_line(lines[i + 1]) == "lyric":
                rows.append(create_row(line, lines[i + 1]))
                i += 2
                continue
            rows.append(create_row(line))
            i += 1
            continue

        # Lyrics, section headers and comments
        rows.append(ChordRow(chords=(SheetChord(chord_name=None, cols=to_cols(line.strip())),)))
        i += 1

    return tuple(rows)


def render_row(row: ChordRow) -> list[str]:
    """Lay out one row as a chord line over a lyric line.

    A chord whose name would run into the next one pushes the next
    segment to the right, padding the lyrics with blanks.

    Examples
    --------
    >>> row = ChordRow(chords=(
    ...     SheetChord(chord_name="G#m7", cols=to_cols("Hi ")),
    ...     SheetChord(chord_name="C", cols=to_cols("there")),
    ... ))
    >>> render_row(row)
    ['G#m7 C', 'Hi   there']
    """
    chord_line = ""
    lyric_line = ""

    for entry in row.chords:
        if entry.chord_name:
            start = len(lyric_line)
            if chord_line:
                start = max(start, len(chord_line) + 1)
            lyric_line = lyric_line.ljust(start)
            chord_line = chord_line.ljust(start) + entry.chord_name
        lyric_line += entry.lyric

    lines: list[str] = []
    if chord_line:
        lines.append(chord_line.rstrip())
    if lyric_line.strip():
        lines.append(lyric_line.rstrip())
    return lines


def render_sheet(rows: tuple[ChordRow, ...] | list[ChordRow]) -> str:
    """Lay out rows as plain chord-over-lyric text.

    Examples
    --------
    >>> print(render_sheet(parse_sheet("Gm     C\\nHello  world")))
    Gm     C
    Hello  world
    """
    lines: list[str] = []
    for row in rows:
        lines.extend(render_row(row))
    return "\n".join(lines)
