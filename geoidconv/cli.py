# -*- coding: utf-8 -*-
"""
Command Line - ``geoid-to-ellipsoid`` and ``ellipsoid-to-geoid``.

Both commands share one parser and one run loop and differ only in the
conversion direction.

Usage:
  geoid-to-ellipsoid heights.xyz converted.xyz
  cat heights.xyz | ellipsoid-to-geoid - > converted.xyz
  geoid-to-ellipsoid --geoid egm96-15.pgm heights.xyz
  geoid-to-ellipsoid --info

Author
------
geoidconv contributors

License
-------
MIT License
Copyright (c) 2026 geoidconv contributors
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import argparse
import logging
import sys
from typing import List, Optional

# geoidconv internal
from geoidconv import __version__
from geoidconv.convert import DEFAULT_PRECISION, convert
from geoidconv.exceptions import GeoidConvError
from geoidconv.grid import describe_grid, load_grid
from geoidconv.grid.resources import GEOID_ENV_VAR
from geoidconv.IO.streams import open_input, open_output
from geoidconv.vocabulary import Direction

_DESCRIPTIONS = {
    Direction.GEOID_TO_ELLIPSOID:
        'Convert elevations from the geoid to the ellipsoid.',
    Direction.ELLIPSOID_TO_GEOID:
        'Convert elevations from the ellipsoid to the geoid.',
}


def build_parser(direction: Direction, prog: Optional[str] = None
                 ) -> argparse.ArgumentParser:
    """Build the argument parser for one conversion direction."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description=_DESCRIPTIONS[direction],
        epilog=(f'The geoid grid is taken from --geoid, then from the '
                f'{GEOID_ENV_VAR} environment variable, then from the grid '
                f'bundled with the package. Use --info to describe it.'),
    )
    parser.add_argument(
        'input', nargs='?',
        help="An input file in XYZ format. Each line in the file must have "
             "a coordinate consisting of three floating point numbers "
             "separated by spaces: latitude and longitude in degrees and "
             "elevation in meters. If the name is '-', the input is read "
             "from stdin.",
    )
    parser.add_argument(
        'output', nargs='?',
        help='An XYZ output file where the elevations have been converted. '
             'Defaults to stdout.',
    )
    parser.add_argument(
        '--geoid', metavar='PATH',
        help='Geoid grid file (GeoTIFF or any GDAL raster, or PGM).',
    )
    parser.add_argument(
        '--precision', type=int, default=DEFAULT_PRECISION, metavar='N',
        help=f'Significant digits of output elevations '
             f'(default: {DEFAULT_PRECISION}).',
    )
    parser.add_argument(
        '--info', action='store_true',
        help='Print rows, columns and extent of the geoid grid and exit.',
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Log debug messages to stderr.',
    )
    parser.add_argument(
        '--version', action='version', version=f'%(prog)s {__version__}',
    )
    return parser


def run(direction: Direction, argv: Optional[List[str]] = None,
        prog: Optional[str] = None) -> int:
    """Parse arguments, convert, and return the process exit status."""
    parser = build_parser(direction, prog=prog)
    args = parser.parse_args(argv)
    if args.input is None and not args.info:
        parser.error('the following arguments are required: input')
    if args.precision < 1:
        parser.error('--precision must be at least 1')

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        grid = load_grid(args.geoid)
        if args.info:
            sys.stdout.write(describe_grid(grid))
            return 0

        with open_input(args.input) as source, \
                open_output(args.output) as sink:
            convert(grid, source, sink, direction=direction,
                    precision=args.precision)
    except (GeoidConvError, OSError) as e:
        print(e, file=sys.stderr)
        return 1
    return 0


def geoid_to_ellipsoid() -> None:
    """Console entry point for geoid to ellipsoid conversion."""
    sys.exit(run(Direction.GEOID_TO_ELLIPSOID))


def ellipsoid_to_geoid() -> None:
    """Console entry point for ellipsoid to geoid conversion."""
    sys.exit(run(Direction.ELLIPSOID_TO_GEOID))


if __name__ == '__main__':
    geoid_to_ellipsoid()
