"""
chord_shapes.fretboard.instrument
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Constants describing the six-string instrument and the search limits.
Strings are indexed 0-5 from string 1 (highest pitched) to string 6
(lowest pitched), matching chord diagram order.
"""

from typing import Final

# ── Tuning ───────────────────────────────────────────────────────────
OPEN_STRING_PITCH_CLASSES: Final[tuple[int, ...]] = (4, 11, 7, 2, 9, 4)
"""Open-string pitch classes in standard tuning: E B G D A E."""

STRING_COUNT: Final[int] = len(OPEN_STRING_PITCH_CLASSES)
"""Number of strings."""

# ── Search limits ────────────────────────────────────────────────────
MAX_FRET: Final[int] = 15
"""Highest fret the generator will place a note on."""

MAX_STRETCH: Final[int] = 4
"""Hand span in frets; bounds the search window above the bass fret."""

WINDOW_BELOW_BASS: Final[int] = 2
"""Frets the search window extends below the bass fret."""

BASS_STRING_ORDER: Final[tuple[int, ...]] = (5, 4)
"""Candidate bass strings in preference order: string 6, then string 5."""

OPEN_BASS_REPLACEMENT_FRET: Final[int] = 12
"""Fret used when the bass would otherwise fall on an open string."""

MAX_RESULTS: Final[int] = 3
"""Maximum number of fingerings returned per chord."""

# ── Difficulty heuristics ────────────────────────────────────────────
HIGH_POSITION_FRET: Final[int] = 7
"""Bass frets above this count as a high (harder) position."""

MAX_EASY_STRINGS: Final[int] = 4
"""Fretting more strings than this adds difficulty (open strings excluded)."""

# ── Fingers ──────────────────────────────────────────────────────────
FRETTING_FINGERS: Final[tuple[int, ...]] = (1, 2, 3, 4)
"""Index, middle, ring and little finger."""

UNASSIGNED_FINGER: Final[int] = 0
"""Marker for a fretted position left without a finger (past the fourth fret)."""

# ── Playability ──────────────────────────────────────────────────────
DIAGRAM_FRET_SPAN: Final[int] = 4
"""Frets one hand position covers, starting at the diagram base fret."""
