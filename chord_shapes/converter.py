"""Chord notation conversion.

This module maps quality tokens to Harte notation (e.g., "m7" ->
"min7") and parses arbitrary chord symbols with pychord, mapping their
quality onto the canonical quality space.
"""

from types import MappingProxyType

from chord_shapes.models import Chord
from chord_shapes.theory.formulas import formula_to_intervals
from chord_shapes.theory.registry import is_registered, lookup_formula, normalize_quality_token


def _normalize_bass(bass: str | None) -> str | None:
    """Normalize bass note, converting empty strings to None."""
    return bass if bass else None


# Canonical quality token -> Harte shorthand
QUALITY_TO_HARTE = MappingProxyType(
    {
        "": "maj",
        "m": "min",
        "dim": "dim",
        "aug": "aug",
        "sus2": "sus2",
        "sus4": "sus4",
        "5": "5",
        "6": "maj6",
        "m6": "min6",
        "7": "7",
        "M7": "maj7",
        "m7": "min7",
        "mM7": "minmaj7",
        "dim7": "dim7",
        "m7b5": "hdim7",
        "9": "9",
        "M9": "maj9",
        "m9": "min9",
        "add9": "maj(9)",
        "madd9": "min(9)",
        "11": "11",
        "m11": "min11",
        "13": "13",
        "M13": "maj13",
        "m13": "min13",
        "7sus4": "sus4(b7)",
        "7sus2": "sus2(b7)",
    }
)

# Raw interval (semitones) -> Harte degree, for qualities without a shorthand
HARTE_DEGREES = MappingProxyType(
    {
        0: "1",
        1: "b2",
        2: "2",
        3: "b3",
        4: "3",
        5: "4",
        6: "b5",
        7: "5",
        8: "#5",
        9: "6",
        10: "b7",
        11: "7",
        13: "b9",
        14: "9",
        15: "#9",
        17: "11",
        18: "#11",
        20: "b13",
        21: "13",
    }
)


def quality_to_harte(quality: str) -> str:
    """Convert a quality token to Harte notation.

    Qualities with a Harte shorthand use it; the others are written as an
    explicit degree list. Unknown tokens convert like a major triad.

    Parameters
    ----------
    quality : str
        Quality token in any accepted spelling.

    Returns
    -------
    str
        Harte shorthand or degree list.

    Examples
    --------
    >>> quality_to_harte("min7")
    'min7'
    >>> quality_to_harte("ø7")
    'hdim7'
    >>> quality_to_harte("7#5")
    '(1,3,#5,b7)'
    """
    canonical = normalize_quality_token(quality)
    if canonical in QUALITY_TO_HARTE:
        return QUALITY_TO_HARTE[canonical]

    formula = lookup_formula(canonical)
    if formula is None:
        return QUALITY_TO_HARTE[""]
    degrees = ",".join(HARTE_DEGREES[interval] for interval in formula_to_intervals(formula))
    return f"({degrees})"


def from_pychord(chord_str: str) -> Chord:
    """Parse a chord symbol with pychord into a Chord.

    The quality is stored as its canonical token.

    Parameters
    ----------
    chord_str : str
        Chord symbol (e.g., "Gm7", "C/E", "F#m7-5").

    Returns
    -------
    Chord
        Parsed chord.

    Raises
    ------
    ValueError
        If pychord cannot parse the symbol or its quality is not registered.

    Examples
    --------
    >>> from_pychord("Cmaj7/E")
    Chord(root='C', quality='M7', bass='E')
    """
    from pychord import Chord as PyChord

    pc = PyChord(chord_str)
    quality_name = str(pc.quality)
    if not is_registered(quality_name):
        msg = f"Unknown pychord quality: {quality_name}"
        raise ValueError(msg)

    return Chord(
        root=pc.root,
        quality=normalize_quality_token(quality_name),
        bass=_normalize_bass(pc.on),
    )
