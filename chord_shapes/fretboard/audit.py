"""Chord-tone and playability verification for fingerings.

``verify_fingering`` checks that a fret array sounds exactly the tones
its chord label promises. An omitted perfect fifth is accepted, as is
common in voicings of extended chords. ``check_playability`` checks that
a fingering fits one hand: at most four fingered positions, all frets
inside the four-fret diagram window, and only fingers 1-4.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from chord_shapes.fretboard.instrument import DIAGRAM_FRET_SPAN, FRETTING_FINGERS
from chord_shapes.fretboard.shape import fretted_frets, sounded_pitch_classes
from chord_shapes.models import Chord
from chord_shapes.pitch_class import chord_to_pitch_classes, note_to_pc
from chord_shapes.theory.intervals import INTERVALS, normalize_to_pitch_class

if TYPE_CHECKING:
    from chord_shapes.fretboard.models import Fingering, Frets

PlayabilityIssue = Literal["too_many_fingers", "fret_range_exceeded", "invalid_finger_value"]


@dataclass(frozen=True)
class ToneCheck:
    """Result of comparing sounded tones against expected chord tones.

    Parameters
    ----------
    expected : tuple[int, ...]
        Absolute pitch classes the chord should sound, sorted.
    actual : tuple[int, ...]
        Absolute pitch classes the frets sound, sorted.
    missing : tuple[int, ...]
        Expected tones not sounded (an omitted fifth is not listed).
    extra : tuple[int, ...]
        Sounded tones that are not chord tones.
    """

    expected: tuple[int, ...]
    actual: tuple[int, ...]
    missing: tuple[int, ...]
    extra: tuple[int, ...]

    @property
    def ok(self) -> bool:
        """True if nothing required is missing and nothing foreign sounds."""
        return not self.missing and not self.extra


def verify_fingering(frets: Frets, root: str, quality: str, bass: str | None = None) -> ToneCheck:
    """Check a fret array against the chord it is supposed to voice.

    Parameters
    ----------
    frets : Frets
        Fret per string, ``None`` for muted.
    root : str
        Root note name.
    quality : str
        Quality token in any accepted spelling.
    bass : str | None
        Bass note name for slash chords.

    Returns
    -------
    ToneCheck
        The comparison.

    Raises
    ------
    ValueError
        If a note name is not recognized.

    Examples
    --------
    >>> verify_fingering((0, 1, 0, 2, 3, None), "C", "").ok
    True
    >>> verify_fingering((0, 1, 0, 2, 3, None), "C", "7").missing
    (10,)
    """
    expected = chord_to_pitch_classes(Chord(root=root, quality=quality, bass=bass))
    actual = set(sounded_pitch_classes(frets))
    fifth = normalize_to_pitch_class(note_to_pc(root) + INTERVALS["P5"])

    return ToneCheck(
        expected=tuple(sorted(expected)),
        actual=tuple(sorted(actual)),
        missing=tuple(sorted(pc for pc in expected - actual if pc != fifth)),
        extra=tuple(sorted(actual - expected)),
    )


@dataclass(frozen=True)
class PlayabilityCheck:
    """Result of checking whether a fingering fits one hand position.

    Parameters
    ----------
    issues : tuple[PlayabilityIssue, ...]
        Problems found, in a fixed order; empty when playable.
    finger_positions : int
        Strings stopped by one of the fingers 1-4 (a barre counts per string).
    span : int
        Distance between the lowest and highest fretted (non-open) fret.
    outside_window : tuple[int, ...]
        Fretted frets below ``base_fret`` or above ``base_fret + 3``.
    invalid_fingers : tuple[int, ...]
        Finger values outside 1-4 (e.g. ``UNASSIGNED_FINGER``).
    """

    issues: tuple[PlayabilityIssue, ...]
    finger_positions: int
    span: int
    outside_window: tuple[int, ...]
    invalid_fingers: tuple[int, ...]

    @property
    def ok(self) -> bool:
        """True if no issue was found."""
        return not self.issues


def check_playability(fingering: Fingering) -> PlayabilityCheck:
    """Check a fingering for positions one hand cannot hold.

    Three issues are reported:

    - ``too_many_fingers``: more than four strings stopped by fingers 1-4;
    - ``fret_range_exceeded``: fretted frets span four or more frets, or a
      fret lies outside the diagram window ``base_fret .. base_fret + 3``;
    - ``invalid_finger_value``: a finger number other than 1-4.

    Parameters
    ----------
    fingering : Fingering
        The fingering to check.

    Returns
    -------
    PlayabilityCheck
        The issues found and the measurements behind them.

    Examples
    --------
    >>> from chord_shapes.fretboard.generator import generate_slash_chord_fingerings
    >>> check_playability(generate_slash_chord_fingerings("C", "", 7)[0]).issues
    ('too_many_fingers', 'fret_range_exceeded')
    """
    issues: list[PlayabilityIssue] = []

    finger_positions = sum(1 for finger in fingering.fingers if finger in FRETTING_FINGERS)
    if finger_positions > len(FRETTING_FINGERS):
        issues.append("too_many_fingers")

    used = fretted_frets(fingering.frets)
    span = max(used) - min(used) if used else 0
    last_window_fret = fingering.base_fret + DIAGRAM_FRET_SPAN - 1
    outside_window = tuple(fret for fret in used if fret < fingering.base_fret or fret > last_window_fret)
    if used and (outside_window or span >= DIAGRAM_FRET_SPAN):
        issues.append("fret_range_exceeded")

    invalid_fingers = tuple(
        finger for finger in fingering.fingers if finger is not None and finger not in FRETTING_FINGERS
    )
    if invalid_fingers:
        issues.append("invalid_finger_value")

    return PlayabilityCheck(
        issues=tuple(issues),
        finger_positions=finger_positions,
        span=span,
        outside_window=outside_window,
        invalid_fingers=invalid_fingers,
    )
