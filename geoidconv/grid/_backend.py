# -*- coding: utf-8 -*-
"""
Grid Backend Detection - Detect available raster and projection libraries.

Probes for rasterio and pyproj at import time. Provides boolean flags and
helper functions that the grid decoder and the coordinate mapping use to
verify required packages are installed before touching them.

Dependencies
------------
rasterio
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

# geoidconv internal
from geoidconv.exceptions import DependencyError

_HAS_RASTERIO = False
_HAS_PYPROJ = False

try:
    import rasterio  # noqa: F401
    _HAS_RASTERIO = True
except ImportError:
    pass

try:
    import pyproj  # noqa: F401
    _HAS_PYPROJ = True
except ImportError:
    pass


def require_rasterio() -> None:
    """Verify that rasterio is installed for GDAL grid decoding.

    Raises
    ------
    DependencyError
        If rasterio is not installed. The message includes installation
        instructions.
    """
    if not _HAS_RASTERIO:
        raise DependencyError(
            "Decoding GeoTIFF grids requires rasterio. "
            "Install with: pip install rasterio"
        )


def require_pyproj() -> None:
    """Verify that pyproj is installed for grids in a projected CRS.

    Raises
    ------
    DependencyError
        If pyproj is not installed.
    """
    if not _HAS_PYPROJ:
        raise DependencyError(
            "Grids in a projected CRS require pyproj. "
            "Install with: pip install pyproj"
        )
