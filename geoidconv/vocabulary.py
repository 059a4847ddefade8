# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for geoidconv.

Defines the controlled vocabularies shared by the grid decoder, the
conversion pipeline and the command line: the conversion direction and the
grid file types the decoder understands.

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

from enum import Enum
from pathlib import Path
from typing import Union


class Direction(Enum):
    """Vertical datum conversion direction.

    The grid stores the height of the geoid above the ellipsoid, so
    ``h_ellipsoid = H_geoid + N`` and ``H_geoid = h_ellipsoid - N``.
    """

    GEOID_TO_ELLIPSOID = "geoid_to_ellipsoid"
    ELLIPSOID_TO_GEOID = "ellipsoid_to_geoid"

    def apply(self, elevation: float, correction: float) -> float:
        """Combine an elevation with the grid correction at its position."""
        if self is Direction.GEOID_TO_ELLIPSOID:
            return elevation + correction
        return elevation - correction


class GridFileType(Enum):
    """Encodings accepted by ``geoidconv.grid.decode.decode_grid``.

    ``GEOTIFF`` is decoded by rasterio/GDAL, so in practice any raster
    format GDAL can sniff from the bytes (GTX, BYN, ASCII grid) works too.
    """

    GEOTIFF = "geotiff"
    PGM = "pgm"

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> 'GridFileType':
        """Pick a file type from a file name suffix."""
        if Path(path).suffix.lower() == '.pgm':
            return cls.PGM
        return cls.GEOTIFF
