#!/usr/bin/env python3
"""CLI tool to generate slash chord fingerings and export to JSON.

Usage:
    python examples/slash_fingerings.py <label> [<label> ...] [-o output_file]

Examples:
    python examples/slash_fingerings.py C/E
    python examples/slash_fingerings.py Am7/G D/F# --pretty -o shapes.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from chord_shapes import Fingering, generate_from_slash_label, slash_chord_display_info


def fingering_to_dict(fingering: Fingering) -> dict[str, Any]:
    """Convert a Fingering to a JSON-serializable dict."""
    result = asdict(fingering)
    result["shape"] = fingering.shape
    return result


def label_to_dict(label: str) -> dict[str, Any]:
    """Describe a slash chord label and its generated fingerings."""
    info = slash_chord_display_info(label)
    if info is None:
        return {"label": label, "error": "not a slash chord label"}

    return {
        "label": label,
        "root": info.root,
        "quality": info.quality,
        "bass": info.bass,
        "bass_interval": info.bass_interval,
        "intervals": list(info.intervals),
        "pattern": info.pattern_key,
        "display_name": info.display_name,
        "fingerings": [fingering_to_dict(f) for f in generate_from_slash_label(label)],
    }


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Generate guitar fingerings for slash chords and export to JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s C/E
  %(prog)s Am7/G D/F# -o shapes.json
  %(prog)s Cm7/Bb --pretty --verbose
        """,
    )
    parser.add_argument(
        "labels",
        nargs="+",
        help="Slash chord labels (e.g. Am7/G)",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output JSON file (default: stdout)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log search decisions to stderr",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    data = [label_to_dict(label) for label in args.labels]
    failed = [entry["label"] for entry in data if "error" in entry]
    for label in failed:
        print(f"Error: not a slash chord label: {label}", file=sys.stderr)

    indent = 2 if args.pretty else None
    json_output = json.dumps(data, indent=indent, ensure_ascii=False)

    if args.output:
        args.output.write_text(json_output, encoding="utf-8")
        print(f"Wrote output to {args.output}")
    else:
        print(json_output)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
