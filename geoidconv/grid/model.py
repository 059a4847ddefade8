# -*- coding: utf-8 -*-
"""
Correction Grid - Geo-referenced grid of geoid corrections and its lookups.

Holds a 2D array of correction samples (geoid undulation or height anomaly,
in meters) together with the affine transform that places it in model
space, and provides the three lookups the converter needs: model to grid
coordinate, grid to model coordinate, and interpolated value at a grid
coordinate.

Coordinate Conventions
----------------------
- **Model coordinates:** ``(lon, lat)`` in degrees on the grid's geodetic
  datum. Projected grids are reached through pyproj.
- **Grid coordinates:** fractional ``(row, col)`` in the rasterio
  convention: ``(0, 0)`` is the top-left corner of the top-left cell and
  cell centers sit at half-integer positions.
- **No data:** NaN samples; lookups touching them return NaN.

Dependencies
------------
affine
pyproj (projected grids only)

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
from typing import Any, Optional, Sequence, Tuple

# Third-party
import numpy as np
from affine import Affine

# geoidconv internal
from geoidconv.exceptions import GridDecodeError
from geoidconv.grid._backend import require_pyproj

logger = logging.getLogger(__name__)


class Grid:
    """Immutable correction grid.

    Parameters
    ----------
    data : np.ndarray
        2D correction samples in meters, shape ``(rows, cols)``. Copied to
        float64 and made read-only. NaN marks missing data.
    transform : Affine
        Maps ``(col, row)`` grid coordinates to ``(x, y)`` model
        coordinates in the grid's CRS.
    crs : Any, optional
        Grid CRS as anything ``pyproj.CRS.from_user_input`` accepts
        (rasterio ``CRS``, ``'EPSG:4258'``, WKT). ``None`` means plain
        geographic lon/lat.
    wraps_longitude : bool
        True for global grids whose columns wrap around the antimeridian.

    Raises
    ------
    GridDecodeError
        If ``data`` is not a non-empty 2D array.
    """

    def __init__(
        self,
        data: np.ndarray,
        transform: Affine,
        crs: Optional[Any] = None,
        wraps_longitude: bool = False,
    ) -> None:
        data = np.array(data, dtype=np.float64)
        if data.ndim != 2 or data.size == 0:
            raise GridDecodeError(
                f"Expected a non-empty 2D grid, got shape {data.shape}"
            )
        data.setflags(write=False)

        self._data = data
        self._transform = transform
        self._inv_transform = ~transform
        self._crs = crs
        self._wraps_longitude = wraps_longitude

        # Lon/lat <-> grid CRS transformers, only for projected grids
        self._to_crs = None
        self._from_crs = None
        if crs is not None:
            require_pyproj()
            import pyproj
            grid_crs = pyproj.CRS.from_user_input(crs)
            if not grid_crs.is_geographic:
                self._to_crs = pyproj.Transformer.from_crs(
                    grid_crs.geodetic_crs, grid_crs, always_xy=True
                )
                self._from_crs = pyproj.Transformer.from_crs(
                    grid_crs, grid_crs.geodetic_crs, always_xy=True
                )

        logger.debug("Grid %dx%d, transform %r, crs %s",
                     self.row_count, self.col_count, transform, crs)

    @property
    def data(self) -> np.ndarray:
        """Read-only correction samples, shape ``(rows, cols)``."""
        return self._data

    @property
    def transform(self) -> Affine:
        return self._transform

    @property
    def crs(self) -> Optional[Any]:
        return self._crs

    @property
    def wraps_longitude(self) -> bool:
        return self._wraps_longitude

    @property
    def row_count(self) -> int:
        return self._data.shape[0]

    @property
    def col_count(self) -> int:
        return self._data.shape[1]

    @property
    def is_projected(self) -> bool:
        return self._to_crs is not None

    def __repr__(self) -> str:
        return (f"Grid(rows={self.row_count}, cols={self.col_count}, "
                f"crs={self._crs}, wraps_longitude={self._wraps_longitude})")


def model_to_grid_coordinate(
    grid: Grid, model_coordinate: Sequence[float]
) -> Tuple[float, float]:
    """Map a model position to a fractional grid position.

    Parameters
    ----------
    grid : Grid
        The correction grid.
    model_coordinate : sequence of float
        ``(lon, lat)`` or ``(lon, lat, height)`` in degrees. Height is
        ignored.

    Returns
    -------
    Tuple[float, float]
        ``(row, col)``.
    """
    lon, lat = float(model_coordinate[0]), float(model_coordinate[1])
    if grid._to_crs is not None:
        x, y = grid._to_crs.transform(lon, lat)
    else:
        x, y = lon, lat
        if grid.wraps_longitude:
            # Shift into [west, west + 360) before inverting the transform
            west = grid.transform.c
            x = west + (x - west) % 360.0
    col, row = grid._inv_transform @ (x, y)
    return float(row), float(col)


def grid_to_model_coordinate(
    grid: Grid, grid_coordinate: Sequence[float]
) -> Tuple[float, float]:
    """Map a fractional grid position back to ``(lon, lat)`` degrees."""
    row, col = float(grid_coordinate[0]), float(grid_coordinate[1])
    x, y = grid.transform @ (col, row)
    if grid._from_crs is not None:
        x, y = grid._from_crs.transform(x, y)
    return float(x), float(y)


def elevation_at(grid: Grid, grid_coordinate: Sequence[float]) -> float:
    """Bilinear interpolation of the correction at a grid position.

    Interpolates between the four surrounding cell centers. Positions
    inside the grid area but closer to the border than half a cell use
    the edge cells. Corners with zero weight are ignored, so a position
    exactly on a valid cell center is valid even when a neighbor is NaN.

    Parameters
    ----------
    grid : Grid
        The correction grid.
    grid_coordinate : sequence of float
        ``(row, col)`` as returned by ``model_to_grid_coordinate``.

    Returns
    -------
    float
        Correction in meters, or NaN outside the grid or where a
        contributing sample is missing.
    """
    row, col = float(grid_coordinate[0]), float(grid_coordinate[1])
    nrows, ncols = grid.row_count, grid.col_count
    if not (math.isfinite(row) and math.isfinite(col)):
        return math.nan
    if not 0.0 <= row <= nrows:
        return math.nan

    # Row indices and weight, clamped to the edge cells
    r = min(max(row - 0.5, 0.0), nrows - 1.0)
    r0 = int(math.floor(r))
    r1 = min(r0 + 1, nrows - 1)
    dr = r - r0

    if grid.wraps_longitude:
        c = (col - 0.5) % ncols
        c0 = int(math.floor(c)) % ncols
        c1 = (c0 + 1) % ncols
        dc = c - math.floor(c)
    else:
        if not 0.0 <= col <= ncols:
            return math.nan
        c = min(max(col - 0.5, 0.0), ncols - 1.0)
        c0 = int(math.floor(c))
        c1 = min(c0 + 1, ncols - 1)
        dc = c - c0

    data = grid.data
    total = 0.0
    for rr, cc, weight in (
        (r0, c0, (1.0 - dr) * (1.0 - dc)),
        (r0, c1, (1.0 - dr) * dc),
        (r1, c0, dr * (1.0 - dc)),
        (r1, c1, dr * dc),
    ):
        if weight == 0.0:
            continue
        value = data[rr, cc]
        if math.isnan(value):
            return math.nan
        total += weight * value
    return float(total)


def grid_bounds(grid: Grid) -> Tuple[float, float, float, float]:
    """Return ``(min_lon, min_lat, max_lon, max_lat)`` of the grid area."""
    lon0, lat0 = grid_to_model_coordinate(grid, (0.0, 0.0))
    lon1, lat1 = grid_to_model_coordinate(
        grid, (float(grid.row_count), float(grid.col_count))
    )
    return (min(lon0, lon1), min(lat0, lat1),
            max(lon0, lon1), max(lat0, lat1))


def describe_grid(grid: Grid) -> str:
    """Human-readable summary of the grid's size and extent."""
    min_lon, min_lat, max_lon, max_lat = grid_bounds(grid)
    return (
        "INFO ABOUT THE GEOID\n"
        f"  rows:    {grid.row_count}\n"
        f"  columns: {grid.col_count}\n"
        f"  min. latitude:  {min_lat:g}\n"
        f"  max. latitude:  {max_lat:g}\n"
        f"  min. longitude: {min_lon:g}\n"
        f"  max. longitude: {max_lon:g}\n"
    )
