"""Command-line interface for chordbook.

Examples
--------
    chordbook transpose "C/G" 2
    chordbook positions Am --json
    chordbook sheet song.txt --semitones -3
    chordbook song song.json --capo -2
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from chordbook.converter import chord_components
from chordbook.fingering import get_chord_pattern
from chordbook.keys import capo_text, song_key_text
from chordbook.models import MUTED, FingerPosition
from chordbook.sheet import Song, parse_sheet, render_sheet, transpose_rows
from chordbook.transposer import transpose_chord


def format_position(position: FingerPosition) -> str:
    """Format a fingering as a tab-style string, lowest string first.

    Examples
    --------
    >>> from chordbook.fingering import get_chord_positions
    >>> format_position(get_chord_positions("C")[0])
    'x-3-2-0-1-0 (barre 0: 1-5)'
    >>> format_position(get_chord_positions("G")[0])
    '3-2-0-0-0-3'
    """
    frets = "-".join("x" if fret == MUTED else str(fret) for fret in reversed(position.frets))
    if not position.barres:
        return frets
    barres = ", ".join(f"barre {b.fret}: {b.strings[0]}-{b.strings[1]}" for b in position.barres)
    return f"{frets} ({barres})"


def cmd_transpose(args: argparse.Namespace) -> int:
    print(transpose_chord(args.chord, args.semitones))
    return 0


def cmd_positions(args: argparse.Namespace) -> int:
    pattern = get_chord_pattern(args.chord)
    if args.json:
        print(json.dumps(pattern.to_dict(), ensure_ascii=False, indent=2))
        return 0

    if not pattern.positions:
        print(f"No fingerings for {args.chord}", file=sys.stderr)
        return 1

    try:
        tones = " ".join(chord_components(args.chord))
        print(f"{pattern.name}: {tones}")
    except ValueError:
        print(pattern.name)
    for i, position in enumerate(pattern.positions, start=1):
        print(f"  {i}. {format_position(position)}")
    return 0


def cmd_sheet(args: argparse.Namespace) -> int:
    rows = parse_sheet(Path(args.file).read_text(encoding="utf-8"))
    print(render_sheet(transpose_rows(rows, args.semitones)))
    return 0


def cmd_song(args: argparse.Namespace) -> int:
    with open(args.file, encoding="utf-8") as f:
        song = Song.from_dict(json.load(f))

    if args.capo is not None:
        song = song.with_capo(args.capo)
    if args.key is not None:
        song = song.with_key(args.key)

    if args.json:
        print(json.dumps(song.to_dict(), ensure_ascii=False, indent=2))
        return 0

    print(f"{song.title} / {song.artist}")
    print(f"[{capo_text(song.capo)}, {song_key_text(song.key)}]")
    print()
    print(render_sheet(song.body))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chordbook",
        description="Transpose chord names and chord sheets, and list guitar fingerings",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    transpose = subparsers.add_parser("transpose", help="Transpose a chord name")
    transpose.add_argument("chord", help='Chord name (e.g., "C#m/G#")')
    transpose.add_argument("semitones", type=int, help="Semitones to shift (negative = down)")
    transpose.set_defaults(func=cmd_transpose)

    positions = subparsers.add_parser("positions", help="List fingerings for a chord")
    positions.add_argument("chord", help='Chord name (e.g., "Am7")')
    positions.add_argument("--json", action="store_true", help="Output JSON")
    positions.set_defaults(func=cmd_positions)

    sheet = subparsers.add_parser("sheet", help="Transpose a plain-text chord sheet")
    sheet.add_argument("file", help="Path to a chord-over-lyrics text file")
    sheet.add_argument("--semitones", type=int, default=0, help="Semitones to shift (default: 0)")
    sheet.set_defaults(func=cmd_sheet)

    song = subparsers.add_parser("song", help="Render a song JSON file")
    song.add_argument("file", help="Path to a song JSON file")
    song.add_argument("--capo", type=int, default=None, help="Capo offset to play with")
    song.add_argument("--key", type=int, default=None, help="Song key offset")
    song.add_argument("--json", action="store_true", help="Output JSON")
    song.set_defaults(func=cmd_song)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the chordbook command line."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return args.func(args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
