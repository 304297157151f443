"""Tests for chord sheet parsing, rendering and transposition."""

import pytest

from chordbook.sheet import (
    ChordRow,
    SheetChord,
    Song,
    chord_patterns,
    parse_sheet,
    render_sheet,
    transpose_rows,
    used_chords,
)
from chordbook.sheet.models import to_cols
from chordbook.sheet.parser import create_row, render_row

SHEET = """[Verse]
Am         F
Hello my   friend

C      G/B    Am
We meet again
(x2)
"""


@pytest.fixture
def song_data() -> dict:
    return {
        "title": "Test Song",
        "artist": "Test Artist",
        "credit": "Words and music: Someone",
        "capo": -2,
        "body": [
            {
                "chords": [
                    {"chordName": None, "cols": ["I", "n"], "lyric": "In"},
                    {"chordName": "C", "cols": ["t", "h", "e", ""], "lyric": "the "},
                    {"chordName": "G/B", "cols": ["t", "o", "w", "n"], "lyric": "town"},
                ]
            },
            {"chords": [{"chordName": "N.C.", "cols": [], "lyric": ""}]},
        ],
    }


class TestSheetChord:
    def test_lyric_fills_blank_columns(self) -> None:
        assert SheetChord(chord_name="C", cols=("a", "", "b")).lyric == "a b"

    def test_to_cols(self) -> None:
        assert to_cols("we  go") == ("w", "e", "", "", "g", "o")


class TestCreateRow:
    def test_chords_own_columns_up_to_next_chord(self) -> None:
        row = create_row("Am         F", "Hello my   friend")
        assert [(c.chord_name, c.lyric) for c in row.chords] == [
            ("Am", "Hello my   "),
            ("F", "friend"),
        ]

    def test_lyrics_before_first_chord(self) -> None:
        row = create_row("   G", "In the town")
        assert [(c.chord_name, c.lyric) for c in row.chords] == [(None, "In "), ("G", "the town")]

    def test_chord_line_longer_than_lyrics(self) -> None:
        row = create_row("C   G   D", "Oh")
        assert [c.chord_name for c in row.chords] == ["C", "G", "D"]
        assert row.chords[0].lyric == "Oh  "
        assert row.chords[2].lyric == ""

    def test_no_chord_marker_is_kept(self) -> None:
        row = create_row("N.C.  E♭", "Stop  go")
        assert [c.chord_name for c in row.chords] == ["N.C.", "E♭"]


class TestParseSheet:
    def test_rows(self) -> None:
        rows = parse_sheet(SHEET)
        assert len(rows) == 4
        assert rows[0].chords[0].chord_name is None
        assert rows[0].chords[0].lyric == "[Verse]"
        assert [c.chord_name for c in rows[1].chords] == ["Am", "F"]
        assert [c.chord_name for c in rows[2].chords] == ["C", "G/B", "Am"]
        assert rows[3].chords[0].lyric == "(x2)"

    def test_lone_chord_line(self) -> None:
        rows = parse_sheet("C   G\n\nLa la la")
        assert [c.chord_name for c in rows[0].chords] == ["C", "G"]
        assert rows[1].chords[0].chord_name is None
        assert rows[1].chords[0].lyric == "La la la"

    def test_windows_line_endings(self) -> None:
        rows = parse_sheet("Am     F\r\nHello  world\r\n")
        assert len(rows) == 1

    def test_empty_text(self) -> None:
        assert parse_sheet("") == ()


class TestRender:
    def test_round_trip(self) -> None:
        text = "Gm     C\nHello  world"
        assert render_sheet(parse_sheet(text)) == text

    def test_longer_chord_pushes_next_segment(self) -> None:
        row = ChordRow(chords=(SheetChord("C#m7", to_cols("I ")), SheetChord("E", to_cols("go"))))
        assert render_row(row) == ["C#m7 E", "I    go"]

    def test_chord_only_row(self) -> None:
        row = create_row("C   G")
        assert render_row(row) == ["C   G"]

    def test_lyric_only_row(self) -> None:
        row = ChordRow(chords=(SheetChord(None, to_cols("just words")),))
        assert render_row(row) == ["just words"]


class TestTransposeRows:
    def test_chords_shift_lyrics_stay(self) -> None:
        rows = transpose_rows(parse_sheet(SHEET), 2)
        assert [c.chord_name for c in rows[1].chords] == ["Bm", "G"]
        assert [c.chord_name for c in rows[2].chords] == ["D", "A/C#", "Bm"]
        assert rows[1].chords[0].lyric == "Hello my   "

    def test_round_trip_text(self) -> None:
        rows = transpose_rows(transpose_rows(parse_sheet(SHEET), 5), -5)
        assert rows == parse_sheet(SHEET)

    def test_rendered_transposition(self) -> None:
        rows = transpose_rows(parse_sheet("Am     F\nHello  world"), 1)
        assert render_sheet(rows) == "A#m    F#\nHello  world"


class TestUsedChords:
    def test_first_use_order(self) -> None:
        assert used_chords(parse_sheet(SHEET)) == ["Am", "F", "C", "G/B"]

    def test_patterns(self) -> None:
        patterns = chord_patterns(parse_sheet(SHEET))
        assert [p.name for p in patterns] == ["Am", "F", "C", "G/B"]
        assert all(p.positions for p in patterns)

    def test_chord_without_fingerings_has_empty_pattern(self) -> None:
        patterns = chord_patterns(parse_sheet("Csus4  G\nHold   on"))
        assert [p.name for p in patterns] == ["Csus4", "G"]
        assert patterns[0].positions == ()
        assert patterns[1].positions


class TestSong:
    def test_from_dict(self, song_data: dict) -> None:
        song = Song.from_dict(song_data)
        assert song.title == "Test Song"
        assert song.capo == -2
        assert song.key == 0
        assert len(song.body) == 2
        assert song.body[0].chords[1].lyric == "the "

    def test_to_dict_round_trip(self, song_data: dict) -> None:
        song = Song.from_dict(song_data)
        assert Song.from_dict(song.to_dict()) == song
        assert song.to_dict()["body"] == song_data["body"]

    def test_missing_field_raises(self, song_data: dict) -> None:
        del song_data["body"]
        with pytest.raises(ValueError, match="Missing song field: body"):
            Song.from_dict(song_data)

    def test_missing_chord_field_raises(self, song_data: dict) -> None:
        del song_data["body"][0]["chords"][0]["cols"]
        with pytest.raises(ValueError, match="Missing chord field: cols"):
            Song.from_dict(song_data)

    @pytest.mark.parametrize("value", [None, -10, 3, "2", True])
    def test_invalid_capo_falls_back_to_no_capo(self, song_data: dict, value: object) -> None:
        song_data["capo"] = value
        song = Song.from_dict(song_data)
        assert song.capo == 0
        assert song.body[0].chords[1].chord_name == "C"

    def test_missing_capo_is_no_capo(self, song_data: dict) -> None:
        del song_data["capo"]
        assert Song.from_dict(song_data).capo == 0

    @pytest.mark.parametrize("value", [None, 6, -7, "1"])
    def test_invalid_key_falls_back_to_original_key(self, song_data: dict, value: object) -> None:
        song_data["key"] = value
        assert Song.from_dict(song_data).key == 0

    def test_direct_construction_still_validates(self) -> None:
        with pytest.raises(ValueError, match="Invalid capo value"):
            Song(title="t", artist="a", capo=3)
        with pytest.raises(ValueError, match="Invalid song key value"):
            Song(title="t", artist="a", key=6)

    def test_transposed(self, song_data: dict) -> None:
        song = Song.from_dict(song_data).transposed(2)
        names = [c.chord_name for c in song.body[0].chords]
        assert names == [None, "D", "A/C#"]
        assert song.body[1].chords[0].chord_name == "N.C."

    def test_with_capo_shifts_by_difference(self, song_data: dict) -> None:
        song = Song.from_dict(song_data).with_capo(0)
        assert song.capo == 0
        assert song.body[0].chords[1].chord_name == "D"

    def test_with_key_then_back(self, song_data: dict) -> None:
        song = Song.from_dict(song_data)
        moved = song.with_key(-3)
        assert moved.key == -3
        assert moved.body[0].chords[1].chord_name == "A"
        assert moved.with_key(0) == song

    @pytest.mark.parametrize("value", [3, -10])
    def test_with_invalid_capo_raises(self, song_data: dict, value: int) -> None:
        with pytest.raises(ValueError, match="Invalid capo value"):
            Song.from_dict(song_data).with_capo(value)

    def test_with_invalid_key_raises(self, song_data: dict) -> None:
        with pytest.raises(ValueError, match="Invalid song key value"):
            Song.from_dict(song_data).with_key(6)

    def test_chord_patterns(self, song_data: dict) -> None:
        patterns = Song.from_dict(song_data).chord_patterns()
        assert [p.name for p in patterns] == ["C", "G/B"]
