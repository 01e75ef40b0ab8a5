"""Index blocks, their cache, and the table that finds a term's blocks."""

from __future__ import annotations

import functools
import struct
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from moonshot.element_filter import ElementFilter
from moonshot.file_access import PAGE_SIZE, FileAccess

BLOCK_SIZE = 0x1000
NUM_BLOCKS = 50
DATA_BYTES = (BLOCK_SIZE - 26) * 8
_HEADER = struct.Struct(f"<Q{NUM_BLOCKS}I")
INDEX_BLOCK_BYTES = _HEADER.size + DATA_BYTES

MAX_DOCID = 0xFFFFFFFFFFFFFFFF
MAX_BLOCK_SIZE = 4096


@dataclass(frozen=True)
class IndexBlock:
    """One index block: a header word, a skip table and posting data."""

    header: int = 0
    skip: tuple[int, ...] = (0,) * NUM_BLOCKS
    data: bytes = b""

    def __post_init__(self) -> None:
        if len(self.skip) != NUM_BLOCKS:
            raise ValueError(f"skip table must hold {NUM_BLOCKS} entries")
        if len(self.data) > DATA_BYTES:
            raise ValueError(f"block data exceeds {DATA_BYTES} bytes")
        object.__setattr__(self, "skip", tuple(self.skip))
        object.__setattr__(self, "data", bytes(self.data).ljust(DATA_BYTES, b"\x00"))

    @classmethod
    def from_bytes(cls, raw: bytes) -> IndexBlock:
        """Parse a block; shorter input is zero-padded to the full block size."""
        if len(raw) > INDEX_BLOCK_BYTES:
            raise ValueError(f"block is larger than {INDEX_BLOCK_BYTES} bytes")
        raw = bytes(raw).ljust(INDEX_BLOCK_BYTES, b"\x00")
        header, *skip = _HEADER.unpack_from(raw)
        return cls(header=header, skip=tuple(skip), data=raw[_HEADER.size :])

    def to_bytes(self) -> bytes:
        return _HEADER.pack(self.header, *self.skip) + self.data


class RWLock:
    """A readers-writer lock: many readers or one writer at a time."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._readers = 0
        self._writer = False

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        with self._cond:
            self._cond.wait_for(lambda: not self._writer)
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                self._cond.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        with self._cond:
            self._cond.wait_for(lambda: not self._writer and self._readers == 0)
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


@dataclass
class _CacheSlot:
    lock: RWLock = field(default_factory=RWLock)
    block_seq: int | None = None
    block: IndexBlock | None = None


class BlockCache:
    """A direct-mapped cache of index blocks keyed by block sequence number."""

    def __init__(self, slot_count: int) -> None:
        if slot_count <= 0:
            raise ValueError("slot_count must be positive")
        self._slots = [_CacheSlot() for _ in range(slot_count)]

    def __len__(self) -> int:
        return len(self._slots)

    def _slot(self, block_seq: int) -> _CacheSlot:
        return self._slots[block_seq % len(self._slots)]

    def lookup(self, block_seq: int) -> IndexBlock | None:
        """Return the cached block for ``block_seq``, or None if not loaded."""
        slot = self._slot(block_seq)
        with slot.lock.read_locked():
            return slot.block if slot.block_seq == block_seq else None

    def add(self, block: IndexBlock, block_seq: int) -> None:
        """Store ``block``, replacing whatever shared its slot."""
        slot = self._slot(block_seq)
        with slot.lock.write_locked():
            slot.block_seq = block_seq
            slot.block = block


@dataclass
class TermToBlock:
    """Maps terms to the sequence number of their first block."""

    blocks: dict[str, int] = field(default_factory=dict)

    def lookup(self, word: str) -> int:
        """Return the block of ``word``; unknown terms map to block 0."""
        return self.blocks.get(word, 0)


class FileBlockManager:
    """Reads fixed-size blocks from an index file."""

    def __init__(self, block_size: int = PAGE_SIZE) -> None:
        if block_size <= 0:
            raise ValueError("block_size must be positive")
        self.block_size = block_size
        self._file: FileAccess | None = None

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def open(self, filename) -> None:
        """Open ``filename``; raises OSError if it cannot be opened."""
        self.close()
        access = FileAccess(filename)
        access.open()
        self._file = access

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def read(self, block_seq: int) -> bytes:
        """Return block ``block_seq``; raises EOFError if the file lacks it."""
        if self._file is None:
            raise ValueError("no index file is open")
        return self._file.read_block(block_seq, self.block_size)

    def __enter__(self) -> FileBlockManager:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class IndexBlockTable:
    """Finds the index blocks of a term, through the cache and the index file."""

    def __init__(
        self,
        file_manager: FileBlockManager | None = None,
        term_to_block: TermToBlock | None = None,
        element_filter: ElementFilter | None = None,
    ) -> None:
        self.file_manager = file_manager
        self.term_to_block = term_to_block
        self.element_filter = element_filter
        self.cache = BlockCache(100)

    def get_blocks(self, block_seq: int, number: int) -> list[IndexBlock]:
        """Return up to ``number`` consecutive blocks starting at ``block_seq``."""
        blocks = []
        for seq in range(block_seq, block_seq + number):
            block = self.cache.lookup(seq)
            if block is None:
                if self.file_manager is None or not self.file_manager.is_open:
                    break
                try:
                    block = IndexBlock.from_bytes(self.file_manager.read(seq))
                except EOFError:
                    break
                self.cache.add(block, seq)
            blocks.append(block)
        return blocks

    def get_index_block(self, word: str) -> IndexBlock | None:
        """Return the first block of ``word``, or None if it has none.

        Terms held by the element filter are excluded from lookup.
        """
        if self.element_filter is not None and word in self.element_filter:
            return None
        block_seq = self.term_to_block.lookup(word) if self.term_to_block else 0
        blocks = self.get_blocks(block_seq, 4)
        return blocks[0] if blocks else None


@functools.lru_cache(maxsize=None)
def default_block_table() -> IndexBlockTable:
    """Return the process-wide block table."""
    return IndexBlockTable()