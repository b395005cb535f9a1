"""
Command-line interface for the roll-hoop body hole offset calculator.
"""

import argparse
import logging
import sys
from pathlib import Path

from ..io import load_hoop_design_json, save_hoop_design_json
from ..logging_config import setup_logging
from ..rollhoop import (
    DEFAULT_DATASET,
    get_dataset,
    list_datasets,
    resolve_design,
    to_json,
    to_markdown,
    to_summary,
    validate_configuration,
)

logger = logging.getLogger(__name__)

FORMATTERS = {
    'summary': to_summary,
    'markdown': to_markdown,
    'json': to_json,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='engcalcs-hoop',
        description="Convert measured roll-hoop leg angles into body hole offsets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Offsets for the built-in GD427 measurements
  engcalcs-hoop

  # Offsets from your own measurements
  engcalcs-hoop --design hoop.json

  # Markdown drilling sheet and a plot of the hole positions
  engcalcs-hoop --format markdown -o offsets.md --plot holes.png

  # Different height to hole for the outer leg
  engcalcs-hoop --outer-height 250

  # Fail (exit 2) if any angle is unusable
  engcalcs-hoop --design hoop.json --strict
        """
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        '--design',
        type=str,
        default=None,
        help='JSON file with measured angles (full design or bare nearside/offside tree)'
    )
    source.add_argument(
        '--dataset',
        type=str,
        default=None,
        help=f'Built-in measurement set (default: {DEFAULT_DATASET})'
    )
    source.add_argument(
        '--list-datasets',
        action='store_true',
        help='List built-in measurement sets and exit'
    )

    parser.add_argument(
        '--outer-height',
        type=float,
        default=None,
        help='Outer leg height to hole in mm (overrides design)'
    )
    parser.add_argument(
        '--inner-height',
        type=float,
        default=None,
        help='Inner leg height to hole in mm (overrides design)'
    )
    parser.add_argument(
        '--rear-height',
        type=float,
        default=None,
        help='Rear leg height to hole in mm (overrides design)'
    )

    parser.add_argument(
        '--format',
        choices=sorted(FORMATTERS),
        default='summary',
        help='Output format (default: summary)'
    )
    parser.add_argument(
        '-o', '--output',
        type=str,
        default=None,
        help='Write output to this file instead of stdout'
    )
    parser.add_argument(
        '--save-json',
        type=str,
        default=None,
        help='Save the resolved design as JSON'
    )
    parser.add_argument(
        '--plot',
        type=str,
        default=None,
        help='Save a plan-view plot of the hole positions (PNG, SVG or PDF)'
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Exit with status 2 if validation finds errors'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Debug logging (every resolved offset)'
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.list_datasets:
        for name in list_datasets():
            print(name)
        return 0

    # Load measurements
    try:
        if args.design:
            logger.info(f"Loading design from {args.design}")
            design = load_hoop_design_json(args.design)
        else:
            design = get_dataset(args.dataset or DEFAULT_DATASET)
    except Exception as e:
        print(f"Error loading design: {e}", file=sys.stderr)
        return 1

    overrides = {
        'outer_leg': args.outer_height,
        'inner_leg': args.inner_height,
        'rear_leg': args.rear_height,
    }
    overrides = {leg: height for leg, height in overrides.items() if height is not None}
    if overrides:
        if any(height <= 0 for height in overrides.values()):
            print("Error: heights to hole must be positive", file=sys.stderr)
            return 1
        design = design.model_copy(update={'heights': design.heights.model_copy(update=overrides)})

    resolved = resolve_design(design)
    validation = validate_configuration(resolved.configuration, resolved.geometry)

    for msg in validation.errors:
        logger.error(f"{msg.code}: {msg.message}")
    for msg in validation.warnings:
        logger.warning(f"{msg.code}: {msg.message}")

    text = FORMATTERS[args.format](resolved, validation)

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(text + "\n", encoding='utf-8')
        logger.info(f"Wrote {args.format} output to {output_path}")
    else:
        print(text)

    try:
        if args.save_json:
            save_hoop_design_json(resolved, args.save_json)
            logger.info(f"Saved resolved design: {args.save_json}")

        if args.plot:
            from ..rollhoop.plot import save_plot
            save_plot(resolved, args.plot)
    except Exception as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1

    if args.strict and not validation.valid:
        return 2

    return 0


if __name__ == '__main__':
    sys.exit(main())
