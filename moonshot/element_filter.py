"""A single-hash membership filter over a page-aligned byte buffer."""

from __future__ import annotations

from moonshot.file_access import PAGE_SIZE
from moonshot.hashing import murmur3_x86_32


def page_aligned_buffer(size: int) -> bytearray:
    """Return a zeroed buffer of at least ``size`` bytes, rounded up to whole pages."""
    if size < 0:
        raise ValueError("size must not be negative")
    pages = -(-size // PAGE_SIZE)
    return bytearray(pages * PAGE_SIZE)


class ElementFilter:
    """Membership filter that marks one slot per element.

    Lookups may report false positives but never false negatives.
    """

    def __init__(self, size: int = 24, memory: bytearray | memoryview | None = None) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        if memory is None:
            memory = page_aligned_buffer(size)
        elif len(memory) < size:
            raise ValueError(
                f"memory holds {len(memory)} bytes, filter needs {size}"
            )
        self.size = size
        self._space = memory

    def _slot(self, element: str | bytes) -> int:
        return murmur3_x86_32(element) % self.size

    def add(self, element: str | bytes) -> None:
        self._space[self._slot(element)] = 1

    def __contains__(self, element: str | bytes) -> bool:
        return self._space[self._slot(element)] != 0