# -*- coding: utf-8 -*-
"""
Grid Module - Correction grids, their decoders and coordinate lookups.

Key Classes
-----------
- Grid: Immutable geo-referenced grid of corrections

Key Functions
-------------
- decode_grid: Decode a GeoTIFF or PGM grid from a binary stream
- load_grid: Resolve and load the grid to use for a run
- model_to_grid_coordinate / grid_to_model_coordinate: Position mapping
- elevation_at: Bilinear correction lookup (NaN outside coverage)
- describe_grid: Size and extent summary

Usage
-----
    >>> from geoidconv.grid import load_grid, model_to_grid_coordinate
    >>> from geoidconv.grid import elevation_at
    >>> grid = load_grid('/data/egm96-15.pgm')
    >>> n = elevation_at(grid, model_to_grid_coordinate(grid, (10.7, 59.9)))

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

from geoidconv.grid.model import (
    Grid,
    describe_grid,
    elevation_at,
    grid_bounds,
    grid_to_model_coordinate,
    model_to_grid_coordinate,
)
from geoidconv.grid.decode import decode_grid
from geoidconv.grid.resources import load_bundled_grid, load_grid, \
    load_grid_file

__all__ = [
    'Grid',
    'decode_grid',
    'describe_grid',
    'elevation_at',
    'grid_bounds',
    'grid_to_model_coordinate',
    'load_bundled_grid',
    'load_grid',
    'load_grid_file',
    'model_to_grid_coordinate',
]
