#!/usr/bin/env python3
"""Generate fingerings for every key and catalog modifier and write to JSON.

One entry per chord name: every note spelling of the table combined with
the modifier of each bucket in the open-position catalog.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from chordbook.fingering import get_chord_pattern
from chordbook.fingering.catalog import MODIFIER_BUCKETS, OPEN_POSITIONS
from chordbook.models import ChordPattern
from chordbook.notes import NOTE_SPELLINGS

# Bucket name back to the modifier written in a chord name
BUCKET_MODIFIERS = {bucket: modifier for modifier, bucket in MODIFIER_BUCKETS.items()}


def generate_patterns(notes: tuple[str, ...] = NOTE_SPELLINGS) -> list[ChordPattern]:
    """Derive fingerings for each note spelling and catalog bucket."""
    patterns: list[ChordPattern] = []
    for bucket in OPEN_POSITIONS:
        modifier = BUCKET_MODIFIERS.get(bucket, bucket)
        for note in notes:
            patterns.append(get_chord_pattern(f"{note}{modifier}"))
    return patterns


def write_json(path: Path, patterns: list[ChordPattern]) -> None:
    payload = {
        "count": len(patterns),
        "chords": [pattern.to_dict() for pattern in patterns],
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def main() -> None:
    """Generate the fingering catalogue and write to JSON."""
    parser = argparse.ArgumentParser(description="Write derived fingerings for all catalog chords")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(__file__).parent.parent / "testdata" / "fingering_catalogue.json",
        help="Output JSON path",
    )
    args = parser.parse_args()

    patterns = generate_patterns()
    write_json(args.output, patterns)
    print(f"Wrote {len(patterns)} chord fingerings to {args.output.resolve()}")


if __name__ == "__main__":
    main()
