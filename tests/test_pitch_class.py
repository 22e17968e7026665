"""Tests for note-name and pitch-class helpers."""

import pytest

from chord_shapes.models import Chord
from chord_shapes.pitch_class import (
    NOTE_TO_PC,
    chord_to_pitch_classes,
    note_to_pc,
    pc_to_note,
    transpose_chord,
)


class TestNoteToPc:
    @pytest.mark.parametrize(
        ("note", "expected"),
        [("C", 0), ("C#", 1), ("Db", 1), ("E", 4), ("Fb", 4), ("E#", 5), ("Bb", 10), ("Cb", 11), ("B#", 0)],
    )
    def test_spellings(self, note: str, expected: int) -> None:
        assert note_to_pc(note) == expected

    def test_unknown_note_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown note"):
            note_to_pc("H")

    def test_every_pitch_class_is_spelled(self) -> None:
        assert set(NOTE_TO_PC.values()) == set(range(12))


class TestPcToNote:
    def test_sharps(self) -> None:
        assert [pc_to_note(pc) for pc in range(12)] == [
            "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B",
        ]

    def test_wraps(self) -> None:
        assert pc_to_note(13) == "C#"
        assert pc_to_note(-1) == "B"


class TestChordToPitchClasses:
    def test_minor_seventh(self) -> None:
        assert chord_to_pitch_classes(Chord(root="A", quality="m7")) == frozenset({9, 0, 4, 7})

    def test_slash_bass_added(self) -> None:
        assert chord_to_pitch_classes(Chord(root="C", quality="", bass="D")) == frozenset({0, 2, 4, 7})

    def test_alias_quality(self) -> None:
        assert chord_to_pitch_classes(Chord(root="C", quality="ø7")) == frozenset({0, 3, 6, 10})


class TestTransposeChord:
    def test_up(self) -> None:
        assert transpose_chord(Chord(root="A", quality="m7", bass="E"), 3) == Chord(root="C", quality="m7", bass="G")

    def test_down_wraps(self) -> None:
        assert transpose_chord(Chord(root="C", quality="maj7"), -1) == Chord(root="B", quality="maj7")

    def test_flats_respelled_as_sharps(self) -> None:
        assert transpose_chord(Chord(root="Bb", quality=""), 0).root == "A#"
