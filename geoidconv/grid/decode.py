# -*- coding: utf-8 -*-
"""
Grid Decoder - Build a correction ``Grid`` from a binary stream.

Two encodings are supported:

- **GeoTIFF** (and any other raster GDAL can identify from its bytes, such
  as GTX or BYN) decoded by rasterio from the stream. Band 1 is used; its
  nodata value becomes NaN.
- **PGM** global geoid grids, as distributed for EGM96/EGM2008 by
  GeographicLib and NGA. Row 0 is 90N and column 0 is Greenwich; rows run
  south and columns east at equal spacing, covering the whole globe.

PGM Value Encoding
------------------
Raw unsigned samples are converted with ``value = offset + scale * raw``.
``# Offset`` and ``# Scale`` header comments set the constants; without
them the EGM96 convention applies: centimeters offset by 32768, i.e.
``offset = -327.68`` and ``scale = 0.01`` meters.

Dependencies
------------
rasterio (GeoTIFF only)

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
from typing import BinaryIO, List, Tuple

# Third-party
import numpy as np
from affine import Affine

# geoidconv internal
from geoidconv.exceptions import GridDecodeError
from geoidconv.grid._backend import require_rasterio
from geoidconv.grid.model import Grid
from geoidconv.vocabulary import GridFileType

logger = logging.getLogger(__name__)

# EGM96 PGM convention: centimeters offset by 32768
_PGM_DEFAULT_OFFSET = -327.68
_PGM_DEFAULT_SCALE = 0.01


def decode_grid(stream: BinaryIO, file_type: GridFileType) -> Grid:
    """Decode a correction grid from a readable, seekable binary stream.

    Parameters
    ----------
    stream : BinaryIO
        Binary stream positioned at the start of the encoded grid, e.g.
        an open file or a ``ReadOnlyBuffer``.
    file_type : GridFileType
        Encoding of the stream.

    Returns
    -------
    Grid
        The decoded grid.

    Raises
    ------
    GridDecodeError
        If the bytes are not a valid grid of the given type.
    DependencyError
        If the decoder's backing library is not installed.
    """
    if file_type is GridFileType.GEOTIFF:
        return _decode_gdal(stream)
    if file_type is GridFileType.PGM:
        return _decode_pgm(stream)
    raise GridDecodeError(f"Unsupported grid file type: {file_type!r}")


def _decode_gdal(stream: BinaryIO) -> Grid:
    """Decode band 1 of any GDAL raster with rasterio."""
    require_rasterio()

    import rasterio
    from rasterio.errors import RasterioError

    try:
        with rasterio.open(stream) as ds:
            band = ds.read(1, masked=True)
            transform = ds.transform
            crs = ds.crs
            driver = ds.driver
    except RasterioError as e:
        raise GridDecodeError(f"Could not decode grid: {e}") from e

    if transform.is_identity:
        raise GridDecodeError("Grid is not georeferenced.")

    data = band.astype(np.float64).filled(np.nan)
    nrows, ncols = data.shape
    geographic = crs is None or crs.is_geographic
    wraps = geographic and math.isclose(abs(transform.a) * ncols, 360.0)

    logger.debug("Decoded %s grid %dx%d (crs=%s, wraps=%s)",
                 driver, nrows, ncols, crs, wraps)
    return Grid(data, transform, crs=crs, wraps_longitude=wraps)


def _decode_pgm(stream: BinaryIO) -> Grid:
    """Decode a global geoid grid stored as binary (P5) or ASCII (P2) PGM."""
    magic, ncols, nrows, maxval, offset, scale, leftover = (
        _read_pgm_header(stream)
    )

    if ncols < 1 or nrows < 2:
        raise GridDecodeError(f"Invalid PGM grid size {ncols}x{nrows}.")
    step = 360.0 / ncols
    if not math.isclose((nrows - 1) * step, 180.0):
        raise GridDecodeError(
            f"PGM grid {ncols}x{nrows} does not cover the globe at "
            f"equal spacing."
        )

    expected = nrows * ncols
    if magic == b'P5':
        if leftover:
            raise GridDecodeError("Unexpected data in binary PGM header.")
        dtype = np.dtype('>u2') if maxval > 255 else np.dtype('u1')
        payload = stream.read(expected * dtype.itemsize)
        if len(payload) < expected * dtype.itemsize:
            raise GridDecodeError(
                f"Expected {expected} pixel values, got "
                f"{len(payload) // dtype.itemsize}."
            )
        raw = np.frombuffer(payload, dtype=dtype).astype(np.float64)
    else:
        tokens = leftover + stream.read().split()
        if len(tokens) < expected:
            raise GridDecodeError(
                f"Expected {expected} pixel values, got {len(tokens)}."
            )
        try:
            raw = np.array([int(t) for t in tokens[:expected]],
                           dtype=np.float64)
        except ValueError as e:
            raise GridDecodeError(f"Invalid ASCII PGM pixel value: {e}") \
                from e

    data = offset + scale * raw.reshape((nrows, ncols))

    # Samples are grid nodes; make them cell centers
    transform = Affine(step, 0.0, -step / 2.0,
                       0.0, -step, 90.0 + step / 2.0)

    logger.debug("Decoded PGM geoid %dx%d (offset=%g, scale=%g)",
                 nrows, ncols, offset, scale)
    return Grid(data, transform, crs=None, wraps_longitude=True)


def _read_pgm_header(
    stream: BinaryIO,
) -> Tuple[bytes, int, int, int, float, float, List[bytes]]:
    """Parse the PGM header up to and including the max value.

    Returns
    -------
    tuple
        ``(magic, ncols, nrows, maxval, offset, scale, leftover)`` where
        ``leftover`` holds tokens that followed the max value on its line.
    """
    tokens = stream.readline().split()
    if not tokens or tokens[0] not in (b'P5', b'P2'):
        magic = tokens[0] if tokens else b''
        raise GridDecodeError(
            f"Invalid PGM magic number: {magic!r}. "
            f"Expected 'P5' (binary) or 'P2' (ASCII)."
        )
    magic = tokens.pop(0)

    offset = _PGM_DEFAULT_OFFSET
    scale = _PGM_DEFAULT_SCALE
    while len(tokens) < 3:
        line = stream.readline()
        if not line:
            raise GridDecodeError("Insufficient header data in PGM file.")
        if line.startswith(b'#'):
            fields = line[1:].split()
            try:
                if len(fields) >= 2 and fields[0] == b'Offset':
                    offset = float(fields[1])
                elif len(fields) >= 2 and fields[0] == b'Scale':
                    scale = float(fields[1])
            except ValueError as e:
                raise GridDecodeError(f"Invalid PGM header comment: {e}") \
                    from e
            continue
        tokens.extend(line.split())

    try:
        ncols, nrows, maxval = (int(t) for t in tokens[:3])
    except ValueError as e:
        raise GridDecodeError(f"Invalid PGM header: {e}") from e
    return magic, ncols, nrows, maxval, offset, scale, tokens[3:]
