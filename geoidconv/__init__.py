# -*- coding: utf-8 -*-
"""
geoidconv - Convert point elevations between a geoid and an ellipsoid.

Looks up a correction (geoid undulation / height anomaly) in a correction
grid and adds it to, or subtracts it from, each elevation in a stream of
``latitude longitude elevation`` records.

Dependencies
------------
numpy
rasterio
affine
pyproj

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

__version__ = "0.1.0"

from geoidconv.exceptions import (
    GeoidConvError,
    InvalidRecordError,
    NoGeoidDataError,
    StreamOpenError,
    GridDecodeError,
    DependencyError,
)
from geoidconv.vocabulary import Direction, GridFileType

__all__ = [
    'GeoidConvError',
    'InvalidRecordError',
    'NoGeoidDataError',
    'StreamOpenError',
    'GridDecodeError',
    'DependencyError',
    'Direction',
    'GridFileType',
]
