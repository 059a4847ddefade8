# -*- coding: utf-8 -*-
"""
Stream Selection - Open named files or fall back to standard streams.

Input is read from a named text file or, for ``None``/``''``/``'-'``, from
standard input. Output goes to a named file or, when no name is given, to
standard output. Standard streams are never closed. All streams are UTF-8
with ``surrogateescape``, so bytes that are not UTF-8 never abort a read.

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
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

# geoidconv internal
from geoidconv.exceptions import StreamOpenError

logger = logging.getLogger(__name__)

STDIN_TOKEN = '-'

# Undecodable bytes pass through as lone surrogates and are written back
# unchanged, so a stray Latin-1 byte fails only the line that holds it
ERRORS = 'surrogateescape'


def _escape_undecodable(stream: TextIO) -> None:
    reconfigure = getattr(stream, 'reconfigure', None)
    if reconfigure is not None:
        reconfigure(errors=ERRORS)


@contextmanager
def open_input(path: Optional[Union[str, Path]]) -> Iterator[TextIO]:
    """Open the input stream of records.

    Parameters
    ----------
    path : str, Path or None
        File to read. ``None``, ``''`` or ``'-'`` selects stdin.

    Yields
    ------
    TextIO
        Line-iterable text stream.

    Raises
    ------
    StreamOpenError
        If the named file cannot be opened.
    """
    if path is None or str(path) in ('', STDIN_TOKEN):
        logger.debug("Reading records from stdin")
        _escape_undecodable(sys.stdin)
        yield sys.stdin
        return

    try:
        stream = open(path, 'r', encoding='utf-8', errors=ERRORS)
    except OSError as e:
        raise StreamOpenError(
            f"Could not open input file: '{path}'", str(path)
        ) from e

    logger.debug("Reading records from %s", path)
    with stream:
        yield stream


@contextmanager
def open_output(path: Optional[Union[str, Path]]) -> Iterator[TextIO]:
    """Open the output stream for converted records.

    Parameters
    ----------
    path : str, Path or None
        File to create or truncate. ``None`` or ``''`` selects stdout.

    Yields
    ------
    TextIO
        Writable text stream.

    Raises
    ------
    StreamOpenError
        If the named file cannot be created.
    """
    if path is None or str(path) == '':
        _escape_undecodable(sys.stdout)
        try:
            yield sys.stdout
        finally:
            sys.stdout.flush()
        return

    try:
        stream = open(path, 'w', encoding='utf-8', errors=ERRORS,
                      newline='\n')
    except OSError as e:
        raise StreamOpenError(
            f"Could not create output file: '{path}'", str(path)
        ) from e

    logger.debug("Writing converted records to %s", path)
    with stream:
        yield stream
