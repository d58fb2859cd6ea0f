"""Binary file handles whose failures are reported as errno-carrying errors."""

from __future__ import annotations

import errno
import os
from typing import Any, BinaryIO, Union

from aklib.errors import Error

_CHUNK_SIZE = 4096


def _error_from(exc: OSError) -> Error:
    return Error.from_errno(exc.errno or errno.EIO)


class File:
    """An open file for reading or writing raw bytes."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    @classmethod
    def _open(cls, path: Union[str, os.PathLike], mode: str) -> "File":
        try:
            stream = open(path, mode)
        except OSError as exc:
            raise _error_from(exc) from exc
        return cls(stream)

    @classmethod
    def open_for_reading(cls, path: Union[str, os.PathLike]) -> "File":
        return cls._open(path, "rb")

    @classmethod
    def open_for_writing(cls, path: Union[str, os.PathLike]) -> "File":
        """Open for writing, creating the file or truncating it."""
        return cls._open(path, "wb")

    def read(self, size: int) -> bytes:
        """Up to ``size`` bytes; empty at end of file."""
        if size < 0:
            raise ValueError("size must not be negative")
        try:
            return self._stream.read(size)
        except OSError as exc:
            raise _error_from(exc) from exc

    def write(self, data: Any) -> int:
        """Write the bytes of data and return how many were written."""
        content = memoryview(data).tobytes()
        if not content:
            return 0
        try:
            written = self._stream.write(content)
        except OSError as exc:
            raise _error_from(exc) from exc
        if not written:
            raise Error.from_errno(errno.EIO)
        return written

    def read_all(self) -> bytes:
        """Everything from the current position to end of file."""
        chunks = []
        while True:
            chunk = self.read(_CHUNK_SIZE)
            if not chunk:
                return b"".join(chunks)
            chunks.append(chunk)

    def close(self) -> None:
        self._stream.close()

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def __enter__(self) -> "File":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()