# -*- coding: utf-8 -*-
"""
Elevation Conversion - Stream XYZ records through a geoid correction grid.

Each input line holds ``latitude longitude elevation`` as whitespace
separated decimals (degrees, degrees, meters). Each output line repeats the
latitude and longitude exactly as written in the input and replaces the
elevation with the converted one. Lines are processed one at a time, so
memory use does not grow with the input.

Processing stops at the first line that is malformed or falls outside the
grid's coverage. Lines converted before it have already been written.

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
import logging
import math
import re
from dataclasses import dataclass
from typing import Iterable, TextIO

# geoidconv internal
from geoidconv.exceptions import InvalidRecordError, NoGeoidDataError
from geoidconv.grid.model import Grid, elevation_at, model_to_grid_coordinate
from geoidconv.vocabulary import Direction

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 10

# Plain ASCII decimal with optional exponent, e.g. "59.9", "-.5", "1e2"
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


@dataclass(frozen=True)
class CoordinateRecord:
    """One parsed input line.

    Attributes
    ----------
    latitude : float
        Degrees north.
    longitude : float
        Degrees east.
    elevation : float
        Meters above the source datum.
    latitude_text : str
        Latitude token as it appeared in the input.
    longitude_text : str
        Longitude token as it appeared in the input.
    """

    latitude: float
    longitude: float
    elevation: float
    latitude_text: str
    longitude_text: str


def parse_record(line: str, line_number: int) -> CoordinateRecord:
    """Split a line into a ``CoordinateRecord``.

    Tokens after the third are ignored.

    Raises
    ------
    InvalidRecordError
        If the line has fewer than three tokens or one of the first three
        is not a finite decimal number.
    """
    tokens = line.split()
    if len(tokens) < 3 or not all(_DECIMAL.fullmatch(t) for t in tokens[:3]):
        raise InvalidRecordError(line_number)
    lat, lon, elevation = (float(t) for t in tokens[:3])
    if not all(math.isfinite(v) for v in (lat, lon, elevation)):
        raise InvalidRecordError(line_number)
    return CoordinateRecord(lat, lon, elevation, tokens[0], tokens[1])


def correction_at(grid: Grid, longitude: float, latitude: float) -> float:
    """Grid correction at a position, NaN where the grid has no data."""
    grid_pos = model_to_grid_coordinate(grid, (longitude, latitude, 0.0))
    return elevation_at(grid, grid_pos)


def format_record(
    record: CoordinateRecord,
    elevation: float,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """Render an output line: input lat/lon tokens and the new elevation."""
    return (f"{record.latitude_text} {record.longitude_text} "
            f"{elevation:.{precision}g}\n")


def convert(
    grid: Grid,
    source: Iterable[str],
    sink: TextIO,
    direction: Direction = Direction.GEOID_TO_ELLIPSOID,
    precision: int = DEFAULT_PRECISION,
) -> int:
    """Convert every record of ``source`` and write it to ``sink``.

    Parameters
    ----------
    grid : Grid
        Correction grid, loaded once by the caller.
    source : Iterable[str]
        Lines of input, e.g. an open text file or ``sys.stdin``.
    sink : TextIO
        Destination for converted lines.
    direction : Direction
        ``GEOID_TO_ELLIPSOID`` adds the correction,
        ``ELLIPSOID_TO_GEOID`` subtracts it.
    precision : int
        Significant digits of the output elevation.

    Returns
    -------
    int
        Number of records converted.

    Raises
    ------
    InvalidRecordError
        On the first malformed line.
    NoGeoidDataError
        On the first line where the grid yields no correction.
    """
    count = 0
    for line_number, line in enumerate(source, start=1):
        record = parse_record(line, line_number)
        correction = correction_at(grid, record.longitude, record.latitude)
        elevation = direction.apply(record.elevation, correction)

        # NaN from the grid propagates into the result
        if not math.isfinite(elevation):
            raise NoGeoidDataError(line_number)

        sink.write(format_record(record, elevation, precision))
        count += 1

    logger.debug("Converted %d records (%s)", count, direction.value)
    return count
