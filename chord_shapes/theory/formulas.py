"""Chord formulas: a triad base plus optional modifiers.

A formula is a declarative description of a chord type. The interval
array is derived from it by ``formula_to_intervals``; formulas themselves
are frozen and safe to share between registry entries.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Literal

from chord_shapes.theory.intervals import EXTENDED_INTERVALS, INTERVALS

if TYPE_CHECKING:
    from collections.abc import Mapping


ChordBase = Literal["major", "minor", "diminished", "augmented", "sus2", "sus4", "power"]
SeventhType = Literal["dominant", "major", "diminished"]
Extension = Literal["b9", "9", "#9", "11", "#11", "b13", "13", "add9", "add11"]
Alteration = Literal["flat-fifth", "sharp-fifth"]

BASE_INTERVALS: Mapping[str, tuple[int, ...]] = MappingProxyType(
    {
        "major": (INTERVALS["R"], INTERVALS["M3"], INTERVALS["P5"]),
        "minor": (INTERVALS["R"], INTERVALS["m3"], INTERVALS["P5"]),
        "diminished": (INTERVALS["R"], INTERVALS["m3"], INTERVALS["d5"]),
        "augmented": (INTERVALS["R"], INTERVALS["M3"], INTERVALS["A5"]),
        "sus2": (INTERVALS["R"], INTERVALS["M2"], INTERVALS["P5"]),
        "sus4": (INTERVALS["R"], INTERVALS["P4"], INTERVALS["P5"]),
        "power": (INTERVALS["R"], INTERVALS["P5"]),
    }
)

SEVENTH_INTERVALS: Mapping[str, int] = MappingProxyType(
    {
        "dominant": INTERVALS["m7"],
        "major": INTERVALS["M7"],
        "diminished": INTERVALS["d7"],
    }
)

# add9/add11 sound the same tension as 9/11; the name only records intent
EXTENSION_INTERVALS: Mapping[str, int] = MappingProxyType(
    {
        "b9": EXTENDED_INTERVALS["b9"],
        "9": EXTENDED_INTERVALS["9"],
        "add9": EXTENDED_INTERVALS["9"],
        "#9": EXTENDED_INTERVALS["#9"],
        "11": EXTENDED_INTERVALS["11"],
        "add11": EXTENDED_INTERVALS["11"],
        "#11": EXTENDED_INTERVALS["#11"],
        "b13": EXTENDED_INTERVALS["b13"],
        "13": EXTENDED_INTERVALS["13"],
    }
)

ALTERED_FIFTHS: Mapping[str, int] = MappingProxyType(
    {
        "flat-fifth": INTERVALS["d5"],
        "sharp-fifth": INTERVALS["A5"],
    }
)


@dataclass(frozen=True)
class ChordFormula:
    """Structural definition of a chord quality.

    Parameters
    ----------
    base : ChordBase
        The underlying triad (or dyad for ``"power"``).
    seventh : SeventhType | None
        Seventh to add, if any.
    has_sixth : bool
        Whether a major sixth is added.
    extensions : tuple[Extension, ...]
        Tensions appended in order, at their raw (unreduced) values.
    alterations : tuple[Alteration, ...]
        Fifth alterations applied in order to the base.
    custom_intervals : tuple[int, ...] | None
        Explicit interval list. When set, every other field is ignored.

    Examples
    --------
    >>> formula = ChordFormula(base="minor", seventh="dominant")
    >>> formula_to_intervals(formula)
    [0, 3, 7, 10]
    """

    base: ChordBase
    seventh: SeventhType | None = None
    has_sixth: bool = False
    extensions: tuple[Extension, ...] = ()
    alterations: tuple[Alteration, ...] = ()
    custom_intervals: tuple[int, ...] | None = None


def formula_to_intervals(formula: ChordFormula) -> list[int]:
    """Expand a formula into its interval array.

    The result is sorted by raw value but not deduplicated: a sixth (9)
    and a 13th (21) are both kept even though they share a pitch class.

    Parameters
    ----------
    formula : ChordFormula
        The formula to expand.

    Returns
    -------
    list[int]
        A new list of semitone offsets from the root.

    Examples
    --------
    >>> formula_to_intervals(
    ...     ChordFormula(base="major", seventh="dominant", alterations=("sharp-fifth",))
    ... )
    [0, 4, 8, 10]
    """
    if formula.custom_intervals is not None:
        return list(formula.custom_intervals)

    intervals = list(BASE_INTERVALS[formula.base])

    perfect_fifth = INTERVALS["P5"]
    for alteration in formula.alterations:
        # No perfect fifth (e.g. diminished base) means nothing to alter
        if perfect_fifth in intervals:
            intervals[intervals.index(perfect_fifth)] = ALTERED_FIFTHS[alteration]

    if formula.has_sixth:
        intervals.append(INTERVALS["M6"])

    if formula.seventh is not None:
        intervals.append(SEVENTH_INTERVALS[formula.seventh])

    intervals.extend(EXTENSION_INTERVALS[extension] for extension in formula.extensions)

    return sorted(intervals)


def formula_to_string(formula: ChordFormula) -> str:
    """Render a formula for debugging.

    Examples
    --------
    >>> formula_to_string(ChordFormula(base="major", seventh="dominant", extensions=("9",)))
    'major + dominant + 9'
    """
    if formula.custom_intervals is not None:
        return f"custom {list(formula.custom_intervals)}"
    parts: list[str] = [formula.base]
    if formula.seventh is not None:
        parts.append(formula.seventh)
    if formula.has_sixth:
        parts.append("6th")
    parts.extend(formula.alterations)
    parts.extend(formula.extensions)
    return " + ".join(parts)
