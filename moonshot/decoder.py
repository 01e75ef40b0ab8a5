"""Decoder for delta-compressed posting lists stored as varint pairs."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


class UnifiedDecoder:
    """Walks a posting list of (document-id delta, term frequency) varint pairs.

    A zero byte at the read position, or the end of the data, marks the end
    of the list.
    """

    def __init__(self) -> None:
        self._data = b""
        self._pos = 0
        self._doc = 0
        self._tf = 0

    def open(self, data: bytes | bytearray | memoryview, last_doc_id: int = 0) -> None:
        """Start decoding ``data``; document ids are deltas from ``last_doc_id``."""
        self._data = bytes(data)
        self._pos = 0
        self._doc = last_doc_id & _MASK64
        self._tf = 0

    def is_end(self) -> bool:
        return self._pos >= len(self._data) or self._data[self._pos] == 0

    def _read_varint(self) -> int:
        value = 0
        shift = 0
        while True:
            if self._pos >= len(self._data):
                raise ValueError("posting data ends inside a varint")
            byte = self._data[self._pos]
            self._pos += 1
            value |= (byte & 0x7F) << shift
            if not byte & 0x80:
                return value
            shift += 7

    def go_next(self) -> None:
        """Advance to the next posting; does nothing at the end of the list."""
        if self.is_end():
            return
        self._doc = (self._doc + self._read_varint()) & _MASK64
        self._tf = self._read_varint() & _MASK32

    def go_until(self, target: int) -> None:
        """Advance until the current document id is at least ``target``."""
        while not self.is_end() and self._doc < target:
            self.go_next()

    @property
    def document_id(self) -> int:
        return self._doc

    @property
    def term_frequency(self) -> int:
        return self._tf