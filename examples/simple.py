import sys

from chordbook import sheet
from chordbook.cli import format_position

text = """[Verse]
Gm     C
Hello  world
"""
rows = sheet.parse_sheet(text)

# Move the sheet up a whole step
rows = sheet.transpose_rows(rows, 2)
sys.stdout.write(sheet.render_sheet(rows) + "\n")

# Fingerings for every chord the sheet uses
for pattern in sheet.chord_patterns(rows):
    if not pattern.positions:
        continue
    sys.stdout.write(f"{pattern.name}: {format_position(pattern.positions[0])}\n")
