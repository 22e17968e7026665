#!/usr/bin/env python3
"""Audit generated slash chord fingerings for chord tones and playability, write a JSON report.

Every curated slash chord pattern is generated on all 12 roots; each
resulting shape is checked for missing and foreign tones and for
positions one hand cannot hold (too many fingers, too wide a fret
range, unassigned fingers).
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict, dataclass
from itertools import product
from pathlib import Path
from typing import TYPE_CHECKING

from chord_shapes.fretboard import check_playability, generate_slash_chord_fingerings, verify_fingering
from chord_shapes.pitch_class import PC_TO_NOTE, pc_to_note
from chord_shapes.theory.slash_chords import all_slash_chord_patterns

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuditEntry:
    """One generated shape with its tone and playability checks."""

    label: str
    pattern: str
    shape: str
    difficulty: str
    missing: list[str]
    extra: list[str]
    playability_issues: list[str]
    tones_ok: bool
    playable: bool
    ok: bool


def audit_fingerings() -> tuple[list[AuditEntry], list[str]]:
    """Generate every curated pattern on every root and verify the shapes.

    Returns
    -------
    tuple[list[AuditEntry], list[str]]
        Audited shapes, and the labels for which nothing was generated.
    """
    entries: list[AuditEntry] = []
    empty: list[str] = []

    for root, definition in product(PC_TO_NOTE, all_slash_chord_patterns()):
        bass = pc_to_note(PC_TO_NOTE.index(root) + definition.bass_interval)
        label = f"{root}{definition.quality}/{bass}"
        fingerings = generate_slash_chord_fingerings(root, definition.quality, definition.bass_interval)
        if not fingerings:
            logger.info("No fingerings generated for %s", label)
            empty.append(label)
            continue

        for fingering in fingerings:
            check = verify_fingering(fingering.frets, root, definition.quality, bass)
            playability = check_playability(fingering)
            entries.append(
                AuditEntry(
                    label=label,
                    pattern=definition.display_name,
                    shape=fingering.shape,
                    difficulty=fingering.difficulty,
                    missing=[pc_to_note(pc) for pc in check.missing],
                    extra=[pc_to_note(pc) for pc in check.extra],
                    playability_issues=list(playability.issues),
                    tones_ok=check.ok,
                    playable=playability.ok,
                    ok=check.ok and playability.ok,
                )
            )

    return entries, empty


def write_json(path: Path, entries: Iterable[AuditEntry], empty: list[str]) -> None:
    """Write the audit report to a JSON file."""
    shapes = [asdict(entry) for entry in entries]
    payload: dict[str, object] = {
        "schema": "slash-fingering-audit/v2",
        "count": len(shapes),
        "failed": sum(1 for shape in shapes if not shape["ok"]),
        "tone_problems": sum(1 for shape in shapes if not shape["tones_ok"]),
        "unplayable": sum(1 for shape in shapes if not shape["playable"]),
        "empty": empty,
        "shapes": shapes,
    }
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")


def main() -> None:
    """Run the audit and write the report."""
    parser = argparse.ArgumentParser(description="Audit generated slash chord fingerings")
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("slash_fingering_audit.json"),
        help="Output JSON file (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log generator decisions to stderr",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    entries, empty = audit_fingerings()
    write_json(args.output, entries, empty)

    tone_problems = sum(1 for entry in entries if not entry.tones_ok)
    unplayable = sum(1 for entry in entries if not entry.playable)
    print(
        f"Audited {len(entries)} shapes ({tone_problems} with tone problems, "
        f"{unplayable} unplayable, {len(empty)} chords without shapes)"
    )
    print(f"Wrote report to {args.output.resolve()}")


if __name__ == "__main__":
    main()
