"""
Command-line interface for the beam deflection calculator.
"""

import argparse
import json
import logging
import sys

from ..beam import (
    beam_calc,
    get_section,
    kg_to_newtons,
    kn_per_m_to_n_per_mm,
    list_sections,
    pretty_print,
    to_json,
    to_summary,
)
from ..constants import ALLOWABLE_DEFLECTION_RATIO
from ..enums import Material
from ..logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='engcalcs-beam',
        description="Deflection check for a simply supported steel or timber beam",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 1000 kg at midspan of a 2.5 m UB127x76x13
  engcalcs-beam --section UB127x76x13 --point-load-kg 1000 --length 2500

  # Timber joist under a distributed load
  engcalcs-beam --section 47x200 --udl-kn-per-m 1.5 --length 3600

  # Tighter deflection limit, JSON output
  engcalcs-beam --section UB152x89x16 --point-load-kg 800 --length 3000 --ratio 500 --format json
        """
    )

    parser.add_argument(
        '--section',
        type=str,
        default='UB127x76x13',
        help="Universal beam name or timber size '<width>x<depth>' (default: UB127x76x13)"
    )
    parser.add_argument(
        '--material',
        choices=[m.value for m in Material],
        default=None,
        help='Beam material (default: steel for universal beams, timber for timber sizes)'
    )
    parser.add_argument(
        '--point-load-kg',
        type=float,
        default=0.0,
        help='Central point load in kg (default: 0)'
    )
    parser.add_argument(
        '--udl-kn-per-m',
        type=float,
        default=0.0,
        help='Uniformly distributed load in kN/m (default: 0)'
    )
    parser.add_argument(
        '--length',
        type=float,
        default=2500.0,
        help='Span between supports in mm (default: 2500)'
    )
    parser.add_argument(
        '--ratio',
        type=float,
        default=ALLOWABLE_DEFLECTION_RATIO,
        help=f'Allowable deflection ratio, limit = span / ratio (default: {ALLOWABLE_DEFLECTION_RATIO:g})'
    )
    parser.add_argument(
        '--format',
        choices=['summary', 'pretty', 'json'],
        default='summary',
        help='Output format (default: summary)'
    )
    parser.add_argument(
        '--list-sections',
        action='store_true',
        help='List known sections and exit'
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Exit with status 2 if deflection is unsafe'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Debug logging'
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.list_sections:
        for name in list_sections():
            print(name)
        return 0

    try:
        section = get_section(args.section)
        result = beam_calc(
            section,
            length_mm=args.length,
            point_load_n=kg_to_newtons(args.point_load_kg),
            udl_n_per_mm=kn_per_m_to_n_per_mm(args.udl_kn_per_m),
            material=args.material,
            ratio=args.ratio,
        )
    except (KeyError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.format == 'json':
        print(to_json(result))
    elif args.format == 'pretty':
        print(json.dumps(pretty_print(result), indent=2, ensure_ascii=False))
    else:
        print(to_summary(result))

    if args.strict and not result.is_deflection_safe:
        return 2

    return 0


if __name__ == '__main__':
    sys.exit(main())
