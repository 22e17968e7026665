"""Chord quality registry and alias resolution.

Every chord quality has exactly one canonical token (``CanonicalQuality``)
with one formula in ``CANONICAL_FORMULAS``. Alternative spellings live in
``QUALITY_ALIASES`` and are only ever used to map a spelling onto its
canonical token; ``CHORD_REGISTRY`` is derived from both tables.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Literal, get_args

from chord_shapes.theory.formulas import ChordFormula, formula_to_intervals

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

CanonicalQuality = Literal[
    "",
    "m",
    "dim",
    "aug",
    "sus2",
    "sus4",
    "5",
    "6",
    "m6",
    "7",
    "M7",
    "m7",
    "mM7",
    "dim7",
    "m7b5",
    "aug7",
    "augM7",
    "9",
    "M9",
    "m9",
    "add9",
    "madd9",
    "11",
    "m11",
    "add11",
    "13",
    "M13",
    "m13",
    "7(13)",
    "m7(13)",
    "69",
    "m69",
    "7sus4",
    "7sus2",
    "9sus4",
    "7b5",
    "7#5",
    "m7+5",
    "-5",
    "m-5",
    "M7b5",
    "M7#5",
    "7b9",
    "7#9",
    "7#11",
    "M7#11",
    "7b13",
    "7b5b9",
    "7#5b9",
    "7#5#9",
    "augM7#11",
    "4.4",
    "blk",
]

CANONICAL_QUALITIES: tuple[CanonicalQuality, ...] = get_args(CanonicalQuality)

MAJOR_TRIAD: tuple[int, ...] = (0, 4, 7)

CANONICAL_FORMULAS: Mapping[CanonicalQuality, ChordFormula] = MappingProxyType(
    {
        # Triads
        "": ChordFormula(base="major"),
        "m": ChordFormula(base="minor"),
        "dim": ChordFormula(base="diminished"),
        "aug": ChordFormula(base="augmented"),
        "sus2": ChordFormula(base="sus2"),
        "sus4": ChordFormula(base="sus4"),
        "5": ChordFormula(base="power"),
        # Sixths
        "6": ChordFormula(base="major", has_sixth=True),
        "m6": ChordFormula(base="minor", has_sixth=True),
        # Sevenths
        "7": ChordFormula(base="major", seventh="dominant"),
        "M7": ChordFormula(base="major", seventh="major"),
        "m7": ChordFormula(base="minor", seventh="dominant"),
        "mM7": ChordFormula(base="minor", seventh="major"),
        "dim7": ChordFormula(base="diminished", seventh="diminished"),
        "m7b5": ChordFormula(base="diminished", seventh="dominant"),
        "aug7": ChordFormula(base="augmented", seventh="dominant"),
        "augM7": ChordFormula(base="augmented", seventh="major"),
        # Ninths
        "9": ChordFormula(base="major", seventh="dominant", extensions=("9",)),
        "M9": ChordFormula(base="major", seventh="major", extensions=("9",)),
        "m9": ChordFormula(base="minor", seventh="dominant", extensions=("9",)),
        "add9": ChordFormula(base="major", extensions=("add9",)),
        "madd9": ChordFormula(base="minor", extensions=("add9",)),
        # Elevenths
        "11": ChordFormula(base="major", seventh="dominant", extensions=("9", "11")),
        "m11": ChordFormula(base="minor", seventh="dominant", extensions=("9", "11")),
        "add11": ChordFormula(base="major", extensions=("add11",)),
        # Thirteenths
        "13": ChordFormula(base="major", seventh="dominant", extensions=("9", "13")),
        "M13": ChordFormula(base="major", seventh="major", extensions=("9", "13")),
        "m13": ChordFormula(base="minor", seventh="dominant", extensions=("9", "13")),
        "7(13)": ChordFormula(base="major", seventh="dominant", extensions=("13",)),
        "m7(13)": ChordFormula(base="minor", seventh="dominant", extensions=("13",)),
        # Six-nine
        "69": ChordFormula(base="major", has_sixth=True, extensions=("add9",)),
        "m69": ChordFormula(base="minor", has_sixth=True, extensions=("add9",)),
        # Suspended sevenths
        "7sus4": ChordFormula(base="sus4", seventh="dominant"),
        "7sus2": ChordFormula(base="sus2", seventh="dominant"),
        "9sus4": ChordFormula(base="sus4", seventh="dominant", extensions=("9",)),
        # Altered fifths
        "7b5": ChordFormula(base="major", seventh="dominant", alterations=("flat-fifth",)),
        "7#5": ChordFormula(base="major", seventh="dominant", alterations=("sharp-fifth",)),
        "m7+5": ChordFormula(base="minor", seventh="dominant", alterations=("sharp-fifth",)),
        "-5": ChordFormula(base="major", alterations=("flat-fifth",)),
        "m-5": ChordFormula(base="minor", alterations=("flat-fifth",)),
        "M7b5": ChordFormula(base="major", seventh="major", alterations=("flat-fifth",)),
        "M7#5": ChordFormula(base="major", seventh="major", alterations=("sharp-fifth",)),
        # Altered tensions
        "7b9": ChordFormula(base="major", seventh="dominant", extensions=("b9",)),
        "7#9": ChordFormula(base="major", seventh="dominant", extensions=("#9",)),
        "7#11": ChordFormula(base="major", seventh="dominant", extensions=("#11",)),
        "M7#11": ChordFormula(base="major", seventh="major", extensions=("#11",)),
        "7b13": ChordFormula(base="major", seventh="dominant", extensions=("b13",)),
        "7b5b9": ChordFormula(
            base="major", seventh="dominant", alterations=("flat-fifth",), extensions=("b9",)
        ),
        "7#5b9": ChordFormula(
            base="major", seventh="dominant", alterations=("sharp-fifth",), extensions=("b9",)
        ),
        "7#5#9": ChordFormula(
            base="major", seventh="dominant", alterations=("sharp-fifth",), extensions=("#9",)
        ),
        "augM7#11": ChordFormula(base="augmented", seventh="major", extensions=("#11",)),
        # Non-tertian
        "4.4": ChordFormula(base="sus4", custom_intervals=(0, 5, 10)),
        "blk": ChordFormula(base="major", custom_intervals=(0, 2, 6, 10)),
    }
)

# Spelling variants -> canonical token
QUALITY_ALIASES: Mapping[str, CanonicalQuality] = MappingProxyType(
    {
        # Major
        "maj": "",
        "M": "",
        "major": "",
        # Minor
        "min": "m",
        "mi": "m",
        "minor": "m",
        "-": "m",
        # Diminished / augmented
        "o": "dim",
        "°": "dim",
        "+": "aug",
        # Suspended
        "sus": "sus4",
        "suspended4": "sus4",
        "suspended2": "sus2",
        # Sixths
        "M6": "6",
        "maj6": "6",
        "add6": "6",
        "min6": "m6",
        "-6": "m6",
        # Sevenths
        "maj7": "M7",
        "Maj7": "M7",
        "ma7": "M7",
        "major7": "M7",
        "Δ": "M7",
        "Δ7": "M7",
        "min7": "m7",
        "mi7": "m7",
        "minor7": "m7",
        "-7": "m7",
        "minMaj7": "mM7",
        "mMaj7": "mM7",
        "mmaj7": "mM7",
        "m(M7)": "mM7",
        "m/M7": "mM7",
        "min/maj7": "mM7",
        "minmaj7": "mM7",
        "mΔ7": "mM7",
        "-Δ7": "mM7",
        "°7": "dim7",
        "o7": "dim7",
        "m7-5": "m7b5",
        "min7b5": "m7b5",
        "-7b5": "m7b5",
        "ø": "m7b5",
        "ø7": "m7b5",
        "Ø": "m7b5",
        "Ø7": "m7b5",
        "+7": "aug7",
        "aug(M7)": "augM7",
        "+M7": "augM7",
        # Ninths
        "maj9": "M9",
        "M79": "M9",
        "M7(9)": "M9",
        "min9": "m9",
        "m79": "m9",
        "m7(9)": "m9",
        "add2": "add9",
        # Elevenths
        "add4": "add11",
        # Thirteenths
        "maj13": "M13",
        "min13": "m13",
        # Suspended sevenths
        "7sus": "7sus4",
        "9sus": "9sus4",
        # Altered
        "7-5": "7b5",
        "7+5": "7#5",
        "m7#5": "m7+5",
        "M7-5": "M7b5",
        "maj7#5": "M7#5",
        "7+9": "7#9",
        "7(#11)": "7#11",
        "maj7#11": "M7#11",
        "M7(#11)": "M7#11",
        "7(b13)": "7b13",
        "augM7(#11)": "augM7#11",
    }
)

CHORD_REGISTRY: Mapping[str, ChordFormula] = MappingProxyType(
    {
        **CANONICAL_FORMULAS,
        **{alias: CANONICAL_FORMULAS[canonical] for alias, canonical in QUALITY_ALIASES.items()},
    }
)


def normalize_quality_token(token: str) -> str:
    """Map a quality spelling onto its canonical token.

    Unknown tokens are returned unchanged.

    Examples
    --------
    >>> normalize_quality_token("maj7")
    'M7'
    >>> normalize_quality_token("ø7")
    'm7b5'
    >>> normalize_quality_token("m7")
    'm7'
    """
    return QUALITY_ALIASES.get(token, token)


def lookup_formula(token: str) -> ChordFormula | None:
    """Return the formula for a quality spelling, or None if unknown."""
    return CANONICAL_FORMULAS.get(normalize_quality_token(token))  # type: ignore[call-overload]


def is_registered(token: str) -> bool:
    """Check whether a quality spelling resolves without falling back."""
    return lookup_formula(token) is not None


@lru_cache(maxsize=256)
def _resolve(token: str) -> tuple[int, ...]:
    formula = lookup_formula(token)
    if formula is None:
        logger.debug("Unknown chord quality %r, falling back to major triad", token)
        return MAJOR_TRIAD
    return tuple(formula_to_intervals(formula))


def resolve_quality_to_intervals(token: str) -> list[int]:
    """Resolve a quality spelling to its interval array.

    Never raises: unknown spellings resolve to the major triad. Use
    ``is_registered`` to tell the two cases apart.

    Parameters
    ----------
    token : str
        Any quality spelling (``"m7"``, ``"min7"``, ``"-7"``, ...).

    Returns
    -------
    list[int]
        A new list of raw intervals (tensions not reduced).

    Examples
    --------
    >>> resolve_quality_to_intervals("min7")
    [0, 3, 7, 10]
    >>> resolve_quality_to_intervals("not-a-chord")
    [0, 4, 7]
    """
    return list(_resolve(token))


def all_registered_qualities() -> list[str]:
    """Return every spelling the registry accepts."""
    return list(CHORD_REGISTRY)


def all_aliases() -> dict[str, str]:
    """Return a copy of the spelling-to-canonical-token table."""
    return dict(QUALITY_ALIASES)
