# -*- coding: utf-8 -*-
"""
IO Module - Byte and text streams used by the converter.

Key Classes
-----------
- ReadOnlyBuffer: Seekable read-only raw stream over an in-memory block

Key Functions
-------------
- open_input: Named text file or stdin
- open_output: Named text file or stdout

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

from geoidconv.IO.buffer import ReadOnlyBuffer
from geoidconv.IO.streams import open_input, open_output

__all__ = [
    'ReadOnlyBuffer',
    'open_input',
    'open_output',
]
