"""Tests for chord formulas."""

import dataclasses

import pytest

from chord_shapes.theory.formulas import ChordFormula, formula_to_intervals, formula_to_string
from chord_shapes.theory.intervals import normalize_interval_set
from chord_shapes.theory.registry import CANONICAL_FORMULAS


class TestBaseIntervals:
    @pytest.mark.parametrize(
        ("base", "expected"),
        [
            ("major", [0, 4, 7]),
            ("minor", [0, 3, 7]),
            ("diminished", [0, 3, 6]),
            ("augmented", [0, 4, 8]),
            ("sus2", [0, 2, 7]),
            ("sus4", [0, 5, 7]),
            ("power", [0, 7]),
        ],
    )
    def test_triads(self, base, expected) -> None:
        assert formula_to_intervals(ChordFormula(base=base)) == expected


class TestModifiers:
    def test_dominant_sharp_five(self) -> None:
        formula = ChordFormula(base="major", seventh="dominant", alterations=("sharp-fifth",))
        assert formula_to_intervals(formula) == [0, 4, 8, 10]

    def test_flat_five(self) -> None:
        formula = ChordFormula(base="major", seventh="dominant", alterations=("flat-fifth",))
        assert formula_to_intervals(formula) == [0, 4, 6, 10]

    def test_alteration_without_perfect_fifth_is_noop(self) -> None:
        formula = ChordFormula(base="diminished", alterations=("flat-fifth",))
        assert formula_to_intervals(formula) == [0, 3, 6]

    def test_second_alteration_finds_no_fifth(self) -> None:
        formula = ChordFormula(base="major", alterations=("flat-fifth", "sharp-fifth"))
        assert formula_to_intervals(formula) == [0, 4, 6]

    def test_sevenths(self) -> None:
        assert formula_to_intervals(ChordFormula(base="major", seventh="major")) == [0, 4, 7, 11]
        assert formula_to_intervals(ChordFormula(base="diminished", seventh="diminished")) == [0, 3, 6, 9]

    def test_sixth(self) -> None:
        assert formula_to_intervals(ChordFormula(base="minor", has_sixth=True)) == [0, 3, 7, 9]

    def test_extensions_keep_raw_values(self) -> None:
        formula = ChordFormula(base="major", seventh="dominant", extensions=("9", "13"))
        assert formula_to_intervals(formula) == [0, 4, 7, 10, 14, 21]

    def test_add_extensions(self) -> None:
        assert formula_to_intervals(ChordFormula(base="major", extensions=("add9",))) == [0, 4, 7, 14]
        assert formula_to_intervals(ChordFormula(base="major", extensions=("add11",))) == [0, 4, 7, 17]

    def test_sixth_and_thirteenth_are_not_deduplicated(self) -> None:
        formula = ChordFormula(base="major", has_sixth=True, extensions=("13",))
        intervals = formula_to_intervals(formula)
        assert intervals == [0, 4, 7, 9, 21]
        assert normalize_interval_set(intervals) == [0, 4, 7, 9]


class TestCustomIntervals:
    def test_custom_intervals_replace_everything(self) -> None:
        formula = ChordFormula(base="major", seventh="major", custom_intervals=(0, 2, 6, 10))
        assert formula_to_intervals(formula) == [0, 2, 6, 10]

    def test_custom_intervals_are_returned_verbatim(self) -> None:
        formula = ChordFormula(base="sus4", custom_intervals=(10, 0, 5))
        assert formula_to_intervals(formula) == [10, 0, 5]

    def test_returns_a_copy(self) -> None:
        formula = ChordFormula(base="sus4", custom_intervals=(0, 5, 10))
        intervals = formula_to_intervals(formula)
        intervals.append(99)
        assert formula_to_intervals(formula) == [0, 5, 10]


class TestThirdsSurviveModifiers:
    @pytest.mark.parametrize(
        "quality",
        [
            q
            for q, f in CANONICAL_FORMULAS.items()
            if f.base in ("major", "minor", "diminished", "augmented") and f.custom_intervals is None
        ],
    )
    def test_third_matches_base(self, quality: str) -> None:
        formula = CANONICAL_FORMULAS[quality]
        intervals = formula_to_intervals(formula)
        if formula.base in ("major", "augmented"):
            assert 4 in intervals
            assert 3 not in intervals
        else:
            assert 3 in intervals
            assert 4 not in intervals


class TestFormulaValue:
    def test_formula_is_immutable(self) -> None:
        formula = ChordFormula(base="major")
        with pytest.raises(dataclasses.FrozenInstanceError):
            formula.base = "minor"  # type: ignore[misc]

    def test_formulas_compare_by_value(self) -> None:
        assert ChordFormula(base="minor", seventh="dominant") == ChordFormula(base="minor", seventh="dominant")

    def test_formula_to_string(self) -> None:
        formula = ChordFormula(base="major", seventh="dominant", alterations=("sharp-fifth",))
        assert formula_to_string(formula) == "major + dominant + sharp-fifth"
        assert formula_to_string(ChordFormula(base="sus4", custom_intervals=(0, 5, 10))) == "custom [0, 5, 10]"
