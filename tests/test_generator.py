"""Tests for the slash chord fingering generator."""

import logging

import pytest

from chord_shapes.fretboard.generator import (
    bass_fret_for,
    generate_from_slash_label,
    generate_slash_chord_fingerings,
)
from chord_shapes.fretboard.instrument import MAX_FRET, MAX_RESULTS, OPEN_STRING_PITCH_CLASSES, STRING_COUNT
from chord_shapes.fretboard.models import Barre, FingeringSearch, GeneratedFingering
from chord_shapes.fretboard.search import greedy_search, search_window
from chord_shapes.fretboard.shape import realized_intervals
from chord_shapes.pitch_class import PC_TO_NOTE
from chord_shapes.theory.intervals import normalize_to_pitch_class
from chord_shapes.theory.slash_chords import SLASH_CHORD_PATTERNS


class TestBassFret:
    def test_fretted_position(self) -> None:
        assert bass_fret_for(4, 4) == 7

    def test_open_string_replaced_by_twelfth_fret(self) -> None:
        assert bass_fret_for(4, 5) == 12
        assert bass_fret_for(9, 4) == 12

    def test_never_zero(self) -> None:
        for pitch_class in range(12):
            for string in (4, 5):
                assert 1 <= bass_fret_for(pitch_class, string) <= 12


class TestSearchWindow:
    def test_middle_of_neck(self) -> None:
        assert list(search_window(7)) == [5, 6, 7, 8, 9, 10]

    def test_clamped_at_first_fret(self) -> None:
        assert list(search_window(1)) == [1, 2, 3, 4]

    def test_clamped_at_last_fret(self) -> None:
        assert list(search_window(14)) == [12, 13, 14, 15]


class TestGreedySearch:
    def test_open_string_preferred_for_uncovered_tone(self) -> None:
        result = greedy_search(
            FingeringSearch(
                bass_string=5,
                bass_fret=3,
                bass_pitch_class=7,
                root_pitch_class=0,
                required=(0, 4),
                bass_is_chord_tone=True,
            )
        )
        assert result is not None
        assert result.frets == (0, 1, 5, 2, 3, 3)

    def test_strings_below_bass_are_muted(self) -> None:
        result = greedy_search(
            FingeringSearch(
                bass_string=4,
                bass_fret=7,
                bass_pitch_class=4,
                root_pitch_class=0,
                required=(0, 7),
                bass_is_chord_tone=True,
            )
        )
        assert result is not None
        assert result.frets[5] is None

    def test_discards_when_root_missing_and_bass_foreign(self, caplog) -> None:
        search = FingeringSearch(
            bass_string=1,
            bass_fret=3,
            bass_pitch_class=2,
            root_pitch_class=0,
            required=(0, 4, 7),
            bass_is_chord_tone=False,
        )
        with caplog.at_level(logging.DEBUG, logger="chord_shapes.fretboard.search"):
            assert greedy_search(search) is None
        assert "Discarding shape" in caplog.text


class TestGenerateSlashChordFingerings:
    def test_c_over_e(self) -> None:
        fingerings = generate_slash_chord_fingerings("C", "", 4)
        assert [f.shape for f in fingerings] == ["x-7-5-5-8-8", "12-10-10-12-13-15"]

        first = fingerings[0]
        assert first.id == "slash-C-0"
        assert first.frets == (8, 8, 5, 5, 7, None)
        assert first.bass_string == 4
        assert first.bass_fret == 7
        assert first.difficulty == "medium"
        assert first.fingers == (3, 3, 1, 1, 2, None)
        assert first.barre == Barre(fret=5, strings=(2, 3))
        assert first.has_multiple_barres
        assert first.base_fret == 5
        assert first.muted == (False, False, False, False, False, True)
        assert first.intervals == (0, 4, 7)

        second = fingerings[1]
        assert second.id == "slash-C-1"
        assert second.frets == (15, 13, 12, 10, 10, 12)
        assert second.bass_fret == 12
        assert second.difficulty == "hard"
        assert second.fingers == (4, 3, 2, 1, 1, 2)
        assert second.barre == Barre(fret=10, strings=(3, 4))

    def test_c_over_g_keeps_bass_string_order_on_ties(self) -> None:
        fingerings = generate_slash_chord_fingerings("C", "", 7)
        assert [f.frets for f in fingerings] == [(0, 1, 5, 2, 3, 3), (0, 13, 9, 10, 10, None)]
        assert [f.difficulty for f in fingerings] == ["hard", "hard"]

        first = fingerings[0]
        assert first.fingers == (None, 1, 4, 2, 3, 3)
        assert first.barre == Barre(fret=3, strings=(4, 5))
        assert not first.has_multiple_barres
        assert first.base_fret == 1

    def test_c_over_f_open_strings_keep_shape_easy(self) -> None:
        fingerings = generate_slash_chord_fingerings("C", "", 5)
        assert [f.shape for f in fingerings] == ["1-3-2-0-1-0", "x-8-10-9-8-0"]
        assert [f.difficulty for f in fingerings] == ["easy", "medium"]

    def test_bass_fret_is_fretted_and_in_range(self) -> None:
        for fingering in generate_slash_chord_fingerings("C", "", 4):
            open_pc = OPEN_STRING_PITCH_CLASSES[fingering.bass_string]
            expected = normalize_to_pitch_class(4 - open_pc) or 12
            assert fingering.bass_fret == expected
            assert len(fingering.frets) == STRING_COUNT
            assert fingering.difficulty in {"easy", "medium", "hard"}

    def test_unknown_quality_treated_as_major(self) -> None:
        assert [f.frets for f in generate_slash_chord_fingerings("C", "garbage", 4)] == [
            f.frets for f in generate_slash_chord_fingerings("C", "", 4)
        ]

    def test_unknown_root(self) -> None:
        assert generate_slash_chord_fingerings("H", "", 4) == []

    def test_limit(self) -> None:
        assert len(generate_slash_chord_fingerings("C", "", 4, limit=1)) == 1

    def test_custom_search_fn(self) -> None:
        calls: list[FingeringSearch] = []

        def bass_only(search: FingeringSearch) -> GeneratedFingering:
            calls.append(search)
            frets = tuple(search.bass_fret if s == search.bass_string else None for s in range(STRING_COUNT))
            return GeneratedFingering(
                frets=frets,
                bass_string=search.bass_string,
                bass_fret=search.bass_fret,
                intervals=(4,),
                difficulty="easy",
            )

        fingerings = generate_slash_chord_fingerings("C", "", 4, search_fn=bass_only)
        assert [call.bass_string for call in calls] == [5, 4]
        assert calls[0].required == (0, 7)
        assert calls[0].bass_pitch_class == 4
        assert calls[0].bass_is_chord_tone
        assert [f.shape for f in fingerings] == ["12-x-x-x-x-x", "x-7-x-x-x-x"]

    def test_search_fn_rejecting_everything(self) -> None:
        assert generate_slash_chord_fingerings("C", "", 4, search_fn=lambda search: None) == []

    @pytest.mark.parametrize("root", PC_TO_NOTE)
    def test_curated_patterns_on_every_root(self, root: str) -> None:
        for definition in SLASH_CHORD_PATTERNS.values():
            fingerings = generate_slash_chord_fingerings(root, definition.quality, definition.bass_interval)
            assert len(fingerings) <= MAX_RESULTS
            for fingering in fingerings:
                assert len(fingering.frets) == STRING_COUNT
                assert 1 <= fingering.bass_fret <= MAX_FRET
                assert fingering.frets[fingering.bass_string] == fingering.bass_fret
                assert all(fret is None for fret in fingering.frets[fingering.bass_string + 1 :])
                assert all(fret is None or 0 <= fret <= MAX_FRET for fret in fingering.frets)
                root_pc = PC_TO_NOTE.index(root)
                assert list(fingering.intervals) == realized_intervals(fingering.frets, root_pc)
                assert 0 in fingering.intervals or definition.bass_interval in fingering.intervals
                assert fingering.base_fret >= 1


class TestGenerateFromSlashLabel:
    def test_label(self) -> None:
        assert [f.shape for f in generate_from_slash_label("C/E")] == ["x-7-5-5-8-8", "12-10-10-12-13-15"]

    def test_keyword_arguments_forwarded(self) -> None:
        assert len(generate_from_slash_label("C/E", limit=1)) == 1

    def test_search_fn_forwarded(self) -> None:
        seen: list[FingeringSearch] = []

        def reject(search: FingeringSearch) -> None:
            seen.append(search)

        assert generate_from_slash_label("Am7/G", search_fn=reject) == []
        assert [search.bass_pitch_class for search in seen] == [7, 7]
        assert seen[0].root_pitch_class == 9

    def test_unknown_keyword_rejected(self) -> None:
        with pytest.raises(TypeError):
            generate_from_slash_label("C/E", bass_interval=4)  # type: ignore[call-arg]

    @pytest.mark.parametrize("label", ["C", "Am7", "H/E", ""])
    def test_unparseable_label(self, label: str) -> None:
        assert generate_from_slash_label(label) == []
