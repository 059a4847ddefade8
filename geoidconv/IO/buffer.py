# -*- coding: utf-8 -*-
"""
Read-Only Buffer - Seekable binary stream over an in-memory byte block.

Presents a fixed block of bytes (typically a grid resource shipped inside
the package) through Python's raw stream protocol, so that decoders which
expect an open binary file can consume it unchanged. The bytes are viewed,
never copied or modified; the buffer owns only its cursor.

Seeking never fails: targets outside ``[0, size]`` are clamped to the
nearest end.

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
import io
from operator import index
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


class ReadOnlyBuffer(io.RawIOBase):
    """Read-only, seekable raw stream over a bytes-like object.

    Parameters
    ----------
    data : bytes, bytearray or memoryview
        The byte block to expose. It is accessed through a read-only
        ``memoryview`` and must outlive the buffer.

    Examples
    --------
    >>> buf = ReadOnlyBuffer(b'abcdef')
    >>> buf.read(4)
    b'abcd'
    >>> buf.seek(100)
    6
    >>> buf.read()
    b''
    """

    def __init__(self, data: BytesLike) -> None:
        super().__init__()
        self._view = memoryview(data).cast('B').toreadonly()
        self._size = len(self._view)
        self._pos = 0

    @property
    def size(self) -> int:
        """Total number of bytes in the block."""
        return self._size

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def writable(self) -> bool:
        return False

    def write(self, b) -> int:
        raise io.UnsupportedOperation("write")

    def readinto(self, b) -> int:
        """Copy up to ``len(b)`` bytes from the cursor into ``b``.

        Returns
        -------
        int
            Number of bytes copied; 0 at end of stream.
        """
        self._checkClosed()
        with memoryview(b) as dest:
            dest = dest.cast('B')
            n = min(len(dest), self._size - self._pos)
            dest[:n] = self._view[self._pos:self._pos + n]
        self._pos += n
        return n

    def readall(self) -> bytes:
        """Read everything from the cursor to the end of the block."""
        self._checkClosed()
        data = self._view[self._pos:].tobytes()
        self._pos = self._size
        return data

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """Move the cursor and return its new absolute position.

        Parameters
        ----------
        offset : int
            Byte offset relative to ``whence``.
        whence : int
            ``io.SEEK_SET`` (start), ``io.SEEK_CUR`` (cursor) or
            ``io.SEEK_END`` (end of block).

        Returns
        -------
        int
            The new position, clamped into ``[0, size]``.

        Raises
        ------
        ValueError
            If ``whence`` is not one of the three origins, or the buffer
            is closed.
        """
        self._checkClosed()
        offset = index(offset)
        if whence == io.SEEK_SET:
            target = offset
        elif whence == io.SEEK_CUR:
            target = self._pos + offset
        elif whence == io.SEEK_END:
            target = self._size + offset
        else:
            raise ValueError(f"Invalid whence ({whence}, should be 0, 1 or 2)")
        self._pos = min(max(target, 0), self._size)
        return self._pos

    def close(self) -> None:
        """Release the view of the wrapped bytes and close the stream."""
        self._view.release()
        super().close()

    def tell(self) -> int:
        self._checkClosed()
        return self._pos

    def __repr__(self) -> str:
        state = 'closed' if self.closed else f'pos={self._pos}'
        return f"ReadOnlyBuffer(size={self._size}, {state})"
