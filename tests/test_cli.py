"""Tests for the chordbook command line."""

import json
from pathlib import Path

import pytest

from chordbook.cli import main


@pytest.fixture
def song_file(tmp_path: Path) -> Path:
    path = tmp_path / "song.json"
    data = {
        "title": "Test Song",
        "artist": "Test Artist",
        "capo": 0,
        "body": [
            {
                "chords": [
                    {"chordName": "C", "cols": ["H", "i", ""]},
                    {"chordName": "G", "cols": ["t", "h", "e", "r", "e"]},
                ]
            }
        ],
    }
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestTranspose:
    def test_slash_chord(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["transpose", "C/G", "2"]) == 0
        assert capsys.readouterr().out == "D/A\n"

    def test_flat_spelling_kept(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["transpose", "B♭m", "-1"]) == 0
        assert capsys.readouterr().out == "Am\n"

    def test_unparseable_passes_through(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["transpose", "N.C.", "3"]) == 0
        assert capsys.readouterr().out == "N.C.\n"


class TestPositions:
    def test_text_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["positions", "C"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "C: C E G"
        assert lines[1] == "  1. x-3-2-0-1-0 (barre 0: 1-5)"
        assert lines[2] == "  2. x-0-3-3-3-0 (barre 3: 1-5)"

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["positions", "Am", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["name"] == "Am"
        assert data["positions"][0] == {"frets": [0, 1, 2, 2, 0, -1], "barres": [{"fret": 0, "strings": [1, 5]}]}

    def test_no_positions(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["positions", "Csus4"]) == 1
        assert "No fingerings for Csus4" in capsys.readouterr().err


class TestSheet:
    def test_transposes_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "song.txt"
        path.write_text("[Chorus]\nAm     F\nHello  world\n", encoding="utf-8")
        assert main(["sheet", str(path), "--semitones", "2"]) == 0
        assert capsys.readouterr().out == "[Chorus]\nBm     G\nHello  world\n"

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["sheet", str(tmp_path / "missing.txt")]) == 1
        assert capsys.readouterr().err.startswith("Error:")


class TestSong:
    def test_render(self, song_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["song", str(song_file)]) == 0
        out = capsys.readouterr().out
        assert out == "Test Song / Test Artist\n[No capo, Original key]\n\nC  G\nHi there\n"

    def test_capo_transposes(self, song_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["song", str(song_file), "--capo", "-2"]) == 0
        out = capsys.readouterr().out
        assert "[Capo 2, Original key]" in out
        assert "A# F\nHi there" in out

    def test_json_output(self, song_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["song", str(song_file), "--key", "2", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["key"] == 2
        assert [c["chordName"] for c in data["body"][0]["chords"]] == ["D", "A"]

    def test_invalid_capo(self, song_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["song", str(song_file), "--capo", "5"]) == 1
        assert "Invalid capo value" in capsys.readouterr().err
