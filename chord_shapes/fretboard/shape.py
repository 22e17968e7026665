"""Analysis of a fret assignment: sounded notes, difficulty, fingers, barres.

Every function here works purely from a fret array, so the results are
ground truth for whatever shape the search produced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_shapes.fretboard.instrument import (
    FRETTING_FINGERS,
    HIGH_POSITION_FRET,
    MAX_EASY_STRINGS,
    OPEN_STRING_PITCH_CLASSES,
    UNASSIGNED_FINGER,
)
from chord_shapes.fretboard.models import Barre
from chord_shapes.theory.intervals import normalize_to_pitch_class

if TYPE_CHECKING:
    from chord_shapes.fretboard.models import Difficulty, Frets


def sounded_pitch_classes(frets: Frets) -> list[int]:
    """Return the absolute pitch classes sounded by a fret array, sorted.

    Examples
    --------
    >>> sounded_pitch_classes((0, 1, 0, 2, 3, None))
    [0, 4, 7]
    """
    return sorted(
        {
            normalize_to_pitch_class(OPEN_STRING_PITCH_CLASSES[string] + fret)
            for string, fret in enumerate(frets)
            if fret is not None
        }
    )


def realized_intervals(frets: Frets, root_pitch_class: int) -> list[int]:
    """Return the root-relative pitch classes sounded by a fret array.

    Examples
    --------
    >>> realized_intervals((0, 1, 0, 2, 3, None), 0)
    [0, 4, 7]
    >>> realized_intervals((0, 1, 0, 2, 3, None), 9)
    [3, 7, 10]
    """
    return sorted(
        {normalize_to_pitch_class(pc - root_pitch_class) for pc in sounded_pitch_classes(frets)}
    )


def fretted_frets(frets: Frets) -> list[int]:
    """Return the frets of strings that are neither open nor muted."""
    return [fret for fret in frets if fret is not None and fret > 0]


def difficulty_score(frets: Frets, bass_fret: int) -> int:
    """Compute the additive difficulty score of a shape.

    +1 for a bass above the 7th fret; +2 for a stretch over 3 frets or +1
    for a stretch of exactly 3; +1 for more than four fretted strings.
    Open strings count toward neither the stretch nor the string count,
    and a shape with no fretted string scores 0.

    Examples
    --------
    >>> difficulty_score((0, 1, 0, 2, 3, 1), 1)
    0
    """
    used = fretted_frets(frets)
    if not used:
        return 0

    score = 1 if bass_fret > HIGH_POSITION_FRET else 0

    stretch = max(used) - min(used)
    if stretch > 3:
        score += 2
    elif stretch > 2:
        score += 1

    if len(used) > MAX_EASY_STRINGS:
        score += 1

    return score


def score_difficulty(frets: Frets, bass_fret: int) -> Difficulty:
    """Bucket a shape into easy (0), medium (1-2) or hard (3+).

    Examples
    --------
    >>> score_difficulty((None, None, None, None, None, 3), 3)
    'easy'
    >>> score_difficulty((8, 8, 5, 5, 7, None), 7)
    'medium'
    """
    score = difficulty_score(frets, bass_fret)
    if score >= 3:
        return "hard"
    if score >= 1:
        return "medium"
    return "easy"


def estimate_fingers(frets: Frets) -> tuple[int | None, ...]:
    """Estimate which finger stops each string.

    Fretted strings are taken in ascending fret order and given fingers
    1-4; a repeated fret reuses the previous finger (a barre). Positions
    past the fourth distinct fret get ``UNASSIGNED_FINGER``. Open and
    muted strings get None.

    Examples
    --------
    >>> estimate_fingers((0, 1, 5, 2, 3, 3))
    (None, 1, 4, 2, 3, 3)
    >>> estimate_fingers((1, 2, 3, 4, 5, None))
    (1, 2, 3, 4, 0, None)
    """
    fingers: list[int | None] = [None] * len(frets)
    positions = sorted(
        ((fret, string) for string, fret in enumerate(frets) if fret is not None and fret > 0),
        key=lambda position: position[0],
    )

    next_finger = 0
    last_fret: int | None = None
    last_finger = UNASSIGNED_FINGER
    for fret, string in positions:
        if fret != last_fret:
            last_fret = fret
            if next_finger < len(FRETTING_FINGERS):
                last_finger = FRETTING_FINGERS[next_finger]
                next_finger += 1
            else:
                last_finger = UNASSIGNED_FINGER
        fingers[string] = last_finger

    return tuple(fingers)


def detect_barres(frets: Frets, fingers: tuple[int | None, ...]) -> list[Barre]:
    """Find every finger that stops two or more strings at one fret.

    Barres are returned in ascending finger order. Unassigned positions
    never form a barre.

    Examples
    --------
    >>> detect_barres((8, 8, 5, 5, 7, None), (3, 3, 1, 1, 2, None))
    [Barre(fret=5, strings=(2, 3)), Barre(fret=8, strings=(0, 1))]
    """
    groups: dict[tuple[int, int], list[int]] = {}
    for string, (fret, finger) in enumerate(zip(frets, fingers)):
        if fret is None or fret == 0 or finger is None or finger == UNASSIGNED_FINGER:
            continue
        groups.setdefault((finger, fret), []).append(string)

    return [
        Barre(fret=fret, strings=(min(strings), max(strings)))
        for (finger, fret), strings in sorted(groups.items())
        if len(strings) >= 2
    ]


def display_base_fret(frets: Frets, bass_fret: int) -> int:
    """Return the first fret a diagram should show (at least 1)."""
    used = fretted_frets(frets)
    return max(1, min(used) if used else bass_fret)
