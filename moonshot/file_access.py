"""Read-only file access with block-oriented reads."""

from __future__ import annotations

import os
from typing import BinaryIO

PAGE_SIZE = 4096


class FileAccess:
    """A read-only file that supports sequential and fixed-size block reads."""

    def __init__(self, file_name: str | os.PathLike[str]) -> None:
        self.file_name = os.fspath(file_name)
        self._file: BinaryIO | None = None

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def open(self) -> None:
        """Open the file for reading; raises OSError if it cannot be opened."""
        if self._file is None:
            self._file = open(self.file_name, "rb")

    def _handle(self) -> BinaryIO:
        if self._file is None:
            raise ValueError(f"file {self.file_name!r} is not open")
        return self._file

    def read(self, num_bytes: int) -> bytes:
        """Read up to ``num_bytes`` from the current position."""
        if num_bytes < 0:
            raise ValueError("num_bytes must not be negative")
        return self._handle().read(num_bytes)

    def read_block(self, block_seq: int, block_size: int = PAGE_SIZE) -> bytes:
        """Read exactly one block of ``block_size`` bytes at index ``block_seq``.

        Raises EOFError if the file does not hold the whole block.
        """
        if block_seq < 0:
            raise ValueError("block_seq must not be negative")
        if block_size <= 0:
            raise ValueError("block_size must be positive")
        handle = self._handle()
        handle.seek(block_seq * block_size)
        data = handle.read(block_size)
        if len(data) != block_size:
            raise EOFError(
                f"block {block_seq} of size {block_size} is incomplete: "
                f"read {len(data)} bytes"
            )
        return data

    def seek(self, position: int) -> None:
        """Move the read position to an absolute byte offset."""
        if position < 0:
            raise ValueError("position must not be negative")
        self._handle().seek(position)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> FileAccess:
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()