# -*- coding: utf-8 -*-
"""
geoidconv Exception Hierarchy - Domain-specific exceptions for conversions.

Every exception subclasses both ``GeoidConvError`` and the appropriate
built-in exception, so callers can either catch everything the converter
raises in one place or keep catching ``ValueError`` / ``OSError`` as usual.

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


class GeoidConvError(Exception):
    """Base exception for all geoidconv errors."""


class InvalidRecordError(GeoidConvError, ValueError):
    """A line of input is not three whitespace separated decimal numbers.

    Parameters
    ----------
    line_number : int
        1-based number of the offending line.
    """

    def __init__(self, line_number: int) -> None:
        super().__init__(f"Invalid input format on line {line_number}.")
        self.line_number = line_number


class NoGeoidDataError(GeoidConvError, RuntimeError):
    """The correction grid has no data at the position of a record.

    Parameters
    ----------
    line_number : int
        1-based number of the offending line.
    """

    def __init__(self, line_number: int) -> None:
        super().__init__(f"No geoid data for point on line {line_number}.")
        self.line_number = line_number


class StreamOpenError(GeoidConvError, OSError):
    """A named input, output or grid file could not be opened.

    Parameters
    ----------
    message : str
        Full diagnostic, including the quoted path.
    path : str
        The path that failed to open.
    """

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class GridDecodeError(GeoidConvError, ValueError):
    """Grid bytes could not be decoded into a correction grid."""


class DependencyError(GeoidConvError, ImportError):
    """Missing optional dependency required for a specific grid format.

    Raised when decoding or reprojecting requires a package (rasterio,
    pyproj) that is not installed.
    """
