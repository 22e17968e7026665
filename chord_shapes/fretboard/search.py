"""Per-bass-string fingering search.

A search function receives a ``FingeringSearch`` (bass placement plus the
chord tones to cover) and returns a ``GeneratedFingering`` or None when
no acceptable shape exists. ``greedy_search`` is the default strategy;
any callable matching ``SearchFn`` can replace it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from chord_shapes.fretboard.instrument import (
    MAX_FRET,
    MAX_STRETCH,
    OPEN_STRING_PITCH_CLASSES,
    STRING_COUNT,
    WINDOW_BELOW_BASS,
)
from chord_shapes.fretboard.models import FingeringSearch, GeneratedFingering
from chord_shapes.fretboard.shape import realized_intervals, score_difficulty
from chord_shapes.theory.intervals import normalize_to_pitch_class

logger = logging.getLogger(__name__)

# Type alias for search strategies
SearchFn = Callable[[FingeringSearch], GeneratedFingering | None]


def search_window(bass_fret: int) -> range:
    """Return the frets the search may use around a bass fret.

    Examples
    --------
    >>> search_window(7)
    range(5, 11)
    >>> search_window(1)
    range(1, 5)
    >>> search_window(14)
    range(12, 16)
    """
    low = max(1, bass_fret - WINDOW_BELOW_BASS)
    high = min(MAX_FRET, bass_fret + MAX_STRETCH - 1)
    return range(low, high + 1)


def _pick_fret(
    open_pitch_class: int, window: range, required: tuple[int, ...], covered: set[int]
) -> int | None:
    """First-fit fret choice for one string.

    The open string wins if it sounds a required, uncovered tone. Otherwise
    the first fret in the window giving an uncovered required tone is
    taken, else the first giving any required tone.
    """
    if open_pitch_class in required and open_pitch_class not in covered:
        return 0

    fallback: int | None = None
    for fret in window:
        pitch_class = normalize_to_pitch_class(open_pitch_class + fret)
        if pitch_class not in required:
            continue
        if pitch_class not in covered:
            return fret
        if fallback is None:
            fallback = fret
    return fallback


def greedy_search(search: FingeringSearch) -> GeneratedFingering | None:
    """Fill the strings above the bass greedily, highest string first.

    Strings below the bass string are always muted so the bass is the
    lowest sounding note. There is no backtracking: each string takes
    its first acceptable fret and the result is not globally optimal.

    Parameters
    ----------
    search : FingeringSearch
        Bass placement and chord tones.

    Returns
    -------
    GeneratedFingering | None
        The shape, or None if it covers neither the root nor a bass that
        belongs to the chord.
    """
    frets: list[int | None] = [None] * STRING_COUNT
    frets[search.bass_string] = search.bass_fret

    window = search_window(search.bass_fret)
    covered = {search.bass_pitch_class}

    # Lower index = higher pitched string
    for string in range(search.bass_string):
        open_pitch_class = OPEN_STRING_PITCH_CLASSES[string]
        fret = _pick_fret(open_pitch_class, window, search.required, covered)
        if fret is None:
            continue
        frets[string] = fret
        covered.add(normalize_to_pitch_class(open_pitch_class + fret))

    if search.root_pitch_class not in covered and not search.bass_is_chord_tone:
        logger.debug(
            "Discarding shape on string %d: root %d not covered and bass %d is not a chord tone",
            search.bass_string + 1,
            search.root_pitch_class,
            search.bass_pitch_class,
        )
        return None

    result = tuple(frets)
    return GeneratedFingering(
        frets=result,
        bass_string=search.bass_string,
        bass_fret=search.bass_fret,
        intervals=tuple(realized_intervals(result, search.root_pitch_class)),
        difficulty=score_difficulty(result, search.bass_fret),
    )
