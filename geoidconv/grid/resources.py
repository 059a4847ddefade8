# -*- coding: utf-8 -*-
"""
Grid Resources - Locate and load the correction grid once per process.

The grid is resolved in this order:

1. an explicit path (``--geoid`` on the command line),
2. the ``GEOIDCONV_GEOID`` environment variable,
3. the grid bundled as package data of ``geoidconv.data``.

The bundled grid is read into memory and decoded through a
``ReadOnlyBuffer``, exactly as a file on disk would be. The caller keeps the
returned ``Grid`` and passes it to every conversion; nothing is cached at
module level.

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
import os
from importlib import resources
from pathlib import Path
from typing import Optional, Union

# geoidconv internal
from geoidconv.exceptions import GridDecodeError, StreamOpenError
from geoidconv.grid.decode import decode_grid
from geoidconv.grid.model import Grid
from geoidconv.IO.buffer import ReadOnlyBuffer
from geoidconv.vocabulary import GridFileType

logger = logging.getLogger(__name__)

GEOID_ENV_VAR = "GEOIDCONV_GEOID"
BUNDLED_PACKAGE = "geoidconv.data"
BUNDLED_GEOID = "geoid.tif"


def load_grid(path: Optional[Union[str, Path]] = None) -> Grid:
    """Load the correction grid.

    Parameters
    ----------
    path : str or Path, optional
        Grid file to load. Falls back to ``$GEOIDCONV_GEOID`` and then to
        the bundled grid.

    Returns
    -------
    Grid
        The decoded grid.

    Raises
    ------
    StreamOpenError
        If a named grid file cannot be opened.
    GridDecodeError
        If the grid cannot be decoded or no bundled grid is installed.
    """
    if not path:
        path = os.environ.get(GEOID_ENV_VAR, "")
    if path:
        return load_grid_file(path)
    return load_bundled_grid()


def load_grid_file(path: Union[str, Path]) -> Grid:
    """Decode a grid file, picking the decoder from its suffix."""
    file_type = GridFileType.from_path(path)
    try:
        stream = open(path, 'rb')
    except OSError as e:
        raise StreamOpenError(
            f"Could not open geoid file: '{path}'", str(path)
        ) from e

    logger.debug("Loading %s grid from %s", file_type.value, path)
    with stream:
        return decode_grid(stream, file_type)


def load_bundled_grid(
    name: str = BUNDLED_GEOID, package: str = BUNDLED_PACKAGE
) -> Grid:
    """Decode a grid shipped as package data.

    Parameters
    ----------
    name : str
        Resource file name inside ``package``.
    package : str
        Dotted name of the package holding the resource.

    Raises
    ------
    GridDecodeError
        If the resource is not installed or cannot be decoded.
    """
    try:
        payload = resources.files(package).joinpath(name).read_bytes()
    except (FileNotFoundError, ModuleNotFoundError) as e:
        raise GridDecodeError(
            f"Bundled geoid grid '{name}' is not installed in '{package}'. "
            f"Pass a grid file with --geoid or set {GEOID_ENV_VAR}."
        ) from e

    logger.debug("Loading bundled grid %s (%d bytes)", name, len(payload))
    with ReadOnlyBuffer(payload) as buffer:
        return decode_grid(buffer, GridFileType.from_path(name))
