#!/usr/bin/env python3
"""
isohex - Lumatone isomorphic mapping generator

Computes the note of every key for a tuning, layout and fill, and writes a
Lumatone .ltn file plus a PNG diagram for each run.

Usage:
    python -m isohex.main [options]

Options:
    --tuning TUNING     Tuning: edo12, edo19, edo31 (default: edo12)
    --layout LAYOUT     Layout: wicki-hayden, harmonic-table (default: wicki-hayden)
    --fill FILL         Fill: wide, split (default: wide)
    --spelling SPELLING Label spelling: sharp, flat, directional (default: sharp)
    --name NAME         Base name for the output files of a single run
    --all               Generate every tuning/layout/fill combination
    --plan FILE         Generate the runs listed in a JSON plan file
    --out DIR           Output directory
    --check             Warn about layouts that cannot reach every step
    --no-diagram        Only write the .ltn files
    --verbose, -v       Show debug logging
    --list              List the available presets and exit
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from .builder import build_mapping
from .config import (
    DEFAULT_OUTPUT_DIR,
    FILL_NAMES,
    LAYOUT_NAMES,
    SPELLING_NAMES,
    TUNING_NAMES,
    RunPlan,
    RunSpec,
    default_plan,
    load_plan,
)
from .diagram import render_diagram
from .errors import MappingError
from .ltn import write_ltn


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="isohex",
        description="isohex - Lumatone isomorphic mapping generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Layouts:
  wicki-hayden     Rows in whole tones; up-left a fourth, up-right a fifth
  harmonic-table   Right a minor third; up-left a major third, up-right a fifth

Fills:
  wide             One Middle C near the centre, every key filled
  split            Two halves, each with its own Middle C

Examples:
  python -m isohex.main --tuning edo19 --layout harmonic-table --fill split
  python -m isohex.main --all --out mappings
  python -m isohex.main --plan my_plan.json --check
        """
    )

    parser.add_argument(
        "--tuning", type=str, default="edo12",
        help=f"Tuning, one of {', '.join(TUNING_NAMES)} (default: edo12)"
    )
    parser.add_argument(
        "--layout", type=str, default="wicki-hayden",
        help=f"Layout, one of {', '.join(LAYOUT_NAMES)} (default: wicki-hayden)"
    )
    parser.add_argument(
        "--fill", type=str, default="wide",
        help=f"Fill, one of {', '.join(FILL_NAMES)} (default: wide)"
    )
    parser.add_argument(
        "--spelling", type=str, default="sharp", choices=SPELLING_NAMES,
        help="Enharmonic spelling of key labels (default: sharp)"
    )
    parser.add_argument(
        "--name", type=str, default=None,
        help="Base name for the output files of a single run"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--all", action="store_true",
        help="Generate every tuning/layout/fill combination"
    )
    source.add_argument(
        "--plan", type=str, default=None,
        help="JSON file listing the runs to generate"
    )
    parser.add_argument(
        "--out", type=str, default=None,
        help=f"Output directory (default: the plan's, or {DEFAULT_OUTPUT_DIR})"
    )
    parser.add_argument(
        "--check", action="store_true",
        help="Warn about layouts that cannot reach every step of the tuning"
    )
    parser.add_argument(
        "--no-diagram", action="store_true",
        help="Only write the .ltn files"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show debug logging"
    )
    parser.add_argument(
        "--list", action="store_true",
        help="List the available presets and exit"
    )

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def print_presets():
    """Print the names accepted by --tuning, --layout, --fill and --spelling."""
    print("\nTunings:   " + ", ".join(TUNING_NAMES))
    print("Layouts:   " + ", ".join(LAYOUT_NAMES))
    print("Fills:     " + ", ".join(FILL_NAMES))
    print("Spellings: " + ", ".join(SPELLING_NAMES))


def select_plan(args: argparse.Namespace) -> RunPlan:
    """
    Build the run plan the arguments ask for.

    Raises:
        ValueError: If a preset name is unknown or the plan file is invalid.
        OSError: If the plan file cannot be read.
    """
    if args.plan:
        plan = load_plan(args.plan)
    elif args.all:
        plan = default_plan()
    else:
        run = RunSpec(
            tuning=args.tuning,
            layout=args.layout,
            fill=args.fill,
            spelling=args.spelling,
            name=args.name,
        )
        plan = RunPlan(runs=[run])
    if args.out:
        plan = plan.model_copy(update={"output_dir": args.out})
    return plan


def run_one(run: RunSpec, output_dir: Path, check: bool = False, diagram: bool = True) -> list[Path]:
    """
    Build one mapping and write its files.

    Returns:
        The paths written.
    """
    tuning, layout, fill, spelling = run.resolve()
    mapping = build_mapping(tuning, layout, fill, spelling=spelling, check=check)
    written = [write_ltn(output_dir / f"{run.output_name}.ltn", mapping)]
    if diagram:
        written.append(render_diagram(mapping, output_dir / f"{run.output_name}.png"))
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for isohex."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        print_presets()
        return 0

    try:
        plan = select_plan(args)
    except ValidationError as e:
        print(f"Error: invalid run selection\n{e}")
        return 1
    except (ValueError, OSError) as e:
        print(f"Error: {e}")
        return 1

    output_dir = Path(plan.output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"Error: cannot create {output_dir}: {e}")
        return 1

    failed = 0
    for run in plan.runs:
        try:
            written = run_one(run, output_dir, check=args.check, diagram=not args.no_diagram)
        except (MappingError, ValueError, OSError) as e:
            # One bad combination must not stop the rest of the batch
            print(f"Failed {run.output_name}: {e}")
            failed += 1
            continue
        for path in written:
            print(f"Wrote {path}")

    if failed:
        print(f"{failed} of {len(plan.runs)} runs failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
