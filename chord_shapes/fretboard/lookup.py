"""Fingering lookup with generator fallback.

Applications normally keep a hand-authored catalogue of chord shapes.
``find_fingerings`` asks that catalogue first and only generates shapes
when it has nothing for the requested slash chord.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from chord_shapes.fretboard.generator import generate_slash_chord_fingerings
from chord_shapes.fretboard.models import Fingering
from chord_shapes.models import Chord
from chord_shapes.theory.slash_chords import bass_interval, parse_slash_label

logger = logging.getLogger(__name__)

# Type alias for static catalogues: parsed chord -> shapes (None or empty if absent)
CatalogueFn = Callable[[Chord], Sequence[Fingering] | None]


def find_fingerings(label: str, catalogue: CatalogueFn | None = None) -> list[Fingering]:
    """Look up fingerings for a slash chord label.

    Parameters
    ----------
    label : str
        Slash chord label (e.g., "Am7/G").
    catalogue : CatalogueFn | None
        Primary source of hand-authored shapes.

    Returns
    -------
    list[Fingering]
        Catalogue shapes if any, otherwise generated ones. Empty if the
        label does not parse.
    """
    chord = parse_slash_label(label)
    if chord is None or chord.bass is None:
        return []

    if catalogue is not None:
        found = catalogue(chord)
        if found:
            return list(found)
        logger.debug("No catalogue entry for %s, generating", chord)

    return generate_slash_chord_fingerings(chord.root, chord.quality, bass_interval(chord.root, chord.bass))
