"""Slash chord fingering generator.

For each candidate bass string the bass note is placed on an explicitly
fretted position, the strings above it are filled by a search strategy,
and the surviving shapes are ranked by difficulty.
"""

from __future__ import annotations

import logging

from chord_shapes.fretboard.instrument import (
    BASS_STRING_ORDER,
    MAX_FRET,
    MAX_RESULTS,
    OPEN_BASS_REPLACEMENT_FRET,
    OPEN_STRING_PITCH_CLASSES,
)
from chord_shapes.fretboard.models import (
    DIFFICULTY_ORDER,
    Fingering,
    FingeringSearch,
    GeneratedFingering,
)
from chord_shapes.fretboard.search import SearchFn, greedy_search
from chord_shapes.fretboard.shape import detect_barres, display_base_fret, estimate_fingers
from chord_shapes.pitch_class import NOTE_TO_PC
from chord_shapes.theory.intervals import normalize_to_pitch_class
from chord_shapes.theory.slash_chords import (
    bass_interval,
    chord_pitch_classes,
    parse_slash_label,
    slash_chord_pitch_classes,
)

logger = logging.getLogger(__name__)


def bass_fret_for(bass_pitch_class: int, bass_string: int) -> int:
    """Return the fret sounding the bass on a string, never an open string.

    Examples
    --------
    >>> bass_fret_for(4, 4)
    7
    >>> bass_fret_for(4, 5)
    12
    """
    fret = normalize_to_pitch_class(bass_pitch_class - OPEN_STRING_PITCH_CLASSES[bass_string])
    return fret if fret != 0 else OPEN_BASS_REPLACEMENT_FRET


def to_fingering(generated: GeneratedFingering, fingering_id: str) -> Fingering:
    """Attach finger numbers, barre and display data to a search result."""
    fingers = estimate_fingers(generated.frets)
    barres = detect_barres(generated.frets, fingers)
    return Fingering(
        id=fingering_id,
        frets=generated.frets,
        fingers=fingers,
        barre=barres[0] if barres else None,
        has_multiple_barres=len(barres) > 1,
        base_fret=display_base_fret(generated.frets, generated.bass_fret),
        muted=tuple(fret is None for fret in generated.frets),
        difficulty=generated.difficulty,
        intervals=generated.intervals,
        bass_string=generated.bass_string,
        bass_fret=generated.bass_fret,
    )


def generate_slash_chord_fingerings(
    root: str,
    quality: str,
    bass_interval: int,
    *,
    search_fn: SearchFn = greedy_search,
    limit: int = MAX_RESULTS,
) -> list[Fingering]:
    """Generate playable fingerings for a slash chord.

    Parameters
    ----------
    root : str
        Root note name (e.g., "C", "F#", "Bb").
    quality : str
        Quality token in any accepted spelling. Unknown tokens are
        treated as a major triad.
    bass_interval : int
        Semitones from the root up to the bass.
    search_fn : SearchFn
        Strategy filling the strings above the bass.
    limit : int
        Maximum number of results.

    Returns
    -------
    list[Fingering]
        Up to ``limit`` fingerings, easiest first. Ties keep the bass
        string preference order. Empty if the root is unknown or no
        shape survives.

    Examples
    --------
    >>> [f.shape for f in generate_slash_chord_fingerings("C", "", 4)]
    ['x-7-5-5-8-8', '12-10-10-12-13-15']
    """
    root_pitch_class = NOTE_TO_PC.get(root)
    if root_pitch_class is None:
        logger.debug("Unknown root note %r", root)
        return []

    pitch_classes = slash_chord_pitch_classes(root_pitch_class, quality, bass_interval)
    bass_pitch_class, required = pitch_classes[0], tuple(pitch_classes[1:])
    bass_is_chord_tone = bass_pitch_class in chord_pitch_classes(root_pitch_class, quality)

    candidates: list[GeneratedFingering] = []
    for bass_string in BASS_STRING_ORDER:
        bass_fret = bass_fret_for(bass_pitch_class, bass_string)
        if bass_fret > MAX_FRET:
            logger.debug("Bass fret %d on string %d is out of range", bass_fret, bass_string + 1)
            continue

        generated = search_fn(
            FingeringSearch(
                bass_string=bass_string,
                bass_fret=bass_fret,
                bass_pitch_class=bass_pitch_class,
                root_pitch_class=root_pitch_class,
                required=required,
                bass_is_chord_tone=bass_is_chord_tone,
            )
        )
        if generated is not None:
            candidates.append(generated)

    # sorted() is stable, so equal difficulties keep bass string order
    ranked = sorted(candidates, key=lambda c: DIFFICULTY_ORDER[c.difficulty])[:limit]
    return [to_fingering(c, f"slash-{root}{quality}-{index}") for index, c in enumerate(ranked)]


def generate_from_slash_label(
    label: str,
    *,
    search_fn: SearchFn = greedy_search,
    limit: int = MAX_RESULTS,
) -> list[Fingering]:
    """Generate fingerings from a slash chord label such as "Am7/E".

    Returns an empty list when the label does not parse. ``search_fn``
    and ``limit`` are passed to ``generate_slash_chord_fingerings``.

    Examples
    --------
    >>> fingerings = generate_from_slash_label("C/E")
    >>> fingerings[0].difficulty
    'medium'
    """
    chord = parse_slash_label(label)
    if chord is None or chord.bass is None:
        return []
    return generate_slash_chord_fingerings(
        chord.root,
        chord.quality,
        bass_interval(chord.root, chord.bass),
        search_fn=search_fn,
        limit=limit,
    )
