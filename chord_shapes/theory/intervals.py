"""Interval tables and pitch-class normalization.

Intervals are semitone offsets from a chord root. Basic intervals cover
one octave (0-11); extended tensions (9ths, 11ths, 13ths) keep their raw
values above the octave so a 9th stays distinguishable from a 2nd until a
caller normalizes explicitly.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

# Basic intervals within one octave
INTERVALS: Mapping[str, int] = MappingProxyType(
    {
        "R": 0,
        "m2": 1,
        "M2": 2,
        "m3": 3,
        "M3": 4,
        "P4": 5,
        "A4": 6,
        "d5": 6,
        "P5": 7,
        "A5": 8,
        "m6": 8,
        "M6": 9,
        "d7": 9,
        "m7": 10,
        "M7": 11,
    }
)

# Tensions above the octave (not reduced mod 12)
EXTENDED_INTERVALS: Mapping[str, int] = MappingProxyType(
    {
        "b9": 13,
        "9": 14,
        "#9": 15,
        "11": 17,
        "#11": 18,
        "b13": 20,
        "13": 21,
    }
)

INTERVAL_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "R": "root",
        "m2": "minor 2nd",
        "M2": "major 2nd",
        "m3": "minor 3rd",
        "M3": "major 3rd",
        "P4": "perfect 4th",
        "A4": "augmented 4th",
        "d5": "diminished 5th",
        "P5": "perfect 5th",
        "A5": "augmented 5th",
        "m6": "minor 6th",
        "M6": "major 6th",
        "d7": "diminished 7th",
        "m7": "minor 7th",
        "M7": "major 7th",
        "b9": "minor 9th",
        "9": "major 9th",
        "#9": "augmented 9th",
        "11": "perfect 11th",
        "#11": "augmented 11th",
        "b13": "minor 13th",
        "13": "major 13th",
    }
)


class UnknownIntervalError(ValueError):
    """Raised when an interval name is in neither interval table."""


def interval_semitones(name: str) -> int:
    """Look up the semitone count of a named interval.

    Parameters
    ----------
    name : str
        Basic (``"M3"``, ``"P5"``) or extended (``"9"``, ``"#11"``) name.

    Returns
    -------
    int
        Semitones above the root. Extended intervals are not reduced.

    Raises
    ------
    UnknownIntervalError
        If the name is not in either table.

    Examples
    --------
    >>> interval_semitones("m7")
    10
    >>> interval_semitones("13")
    21
    """
    if name in INTERVALS:
        return INTERVALS[name]
    if name in EXTENDED_INTERVALS:
        return EXTENDED_INTERVALS[name]
    msg = f"Unknown interval: {name}"
    raise UnknownIntervalError(msg)


def normalize_to_pitch_class(semitones: int) -> int:
    """Reduce a semitone count to a pitch class (0-11).

    Works for negative input and is idempotent.

    Examples
    --------
    >>> normalize_to_pitch_class(14)
    2
    >>> normalize_to_pitch_class(-5)
    7
    """
    return (semitones % 12 + 12) % 12


def normalize_interval_set(intervals: Iterable[int]) -> list[int]:
    """Normalize intervals to pitch classes, deduplicated and sorted.

    Examples
    --------
    >>> normalize_interval_set([0, 4, 7, 9, 21])
    [0, 4, 7, 9]
    """
    return sorted({normalize_to_pitch_class(i) for i in intervals})


def semitone_name(semitones: int) -> str | None:
    """Return the first basic interval name matching a semitone count.

    The count is normalized first, so ``14`` yields ``"M2"``.
    """
    normalized = normalize_to_pitch_class(semitones)
    for name, value in INTERVALS.items():
        if value == normalized:
            return name
    return None
