import threading

import pytest

from moonshot.block_table import (
    BLOCK_SIZE,
    DATA_BYTES,
    INDEX_BLOCK_BYTES,
    NUM_BLOCKS,
    BlockCache,
    FileBlockManager,
    IndexBlock,
    IndexBlockTable,
    RWLock,
    TermToBlock,
    default_block_table,
)
from moonshot.element_filter import ElementFilter


def _block(tag):
    return IndexBlock(header=tag, data=bytes([tag, 1]))


def _index_file(tmp_path, blocks):
    path = tmp_path / "index.bin"
    path.write_bytes(b"".join(b.to_bytes() for b in blocks))
    return path


def test_block_layout_matches_constants():
    assert BLOCK_SIZE == 4096
    assert NUM_BLOCKS == 50
    assert len(IndexBlock().to_bytes()) == INDEX_BLOCK_BYTES
    assert INDEX_BLOCK_BYTES == 8 + 4 * NUM_BLOCKS + DATA_BYTES


def test_block_round_trip():
    block = IndexBlock(header=7, skip=tuple(range(NUM_BLOCKS)), data=b"\x05\x02")
    assert IndexBlock.from_bytes(block.to_bytes()) == block


def test_short_input_is_zero_padded():
    block = IndexBlock.from_bytes(IndexBlock(header=9, data=b"ab").to_bytes()[:300])
    assert block.header == 9
    assert block.data[:2] == b"ab"
    assert len(block.data) == DATA_BYTES


def test_oversized_input_rejected():
    with pytest.raises(ValueError):
        IndexBlock.from_bytes(bytes(INDEX_BLOCK_BYTES + 1))


def test_bad_skip_table_rejected():
    with pytest.raises(ValueError):
        IndexBlock(skip=(0, 1))


def test_readers_share_the_lock():
    lock = RWLock()
    cache = BlockCache(4)
    first = _block(1)
    cache.add(first, 0)
    reader_seen = []
    acquired = threading.Event()

    def reader():
        with lock.read_locked():
            reader_seen.append(cache.lookup(0))
            acquired.set()

    with lock.read_locked():
        thread = threading.Thread(target=reader)
        thread.start()
        shared = acquired.wait(2)
        main_seen = cache.lookup(0)
    thread.join(5)
    assert shared
    assert reader_seen == [first]
    assert main_seen is first


def test_writer_excludes_readers():
    lock = RWLock()
    cache = BlockCache(4)
    block = _block(3)
    reader_seen = []
    acquired = threading.Event()

    def reader():
        with lock.read_locked():
            reader_seen.append(cache.lookup(0))
            acquired.set()

    with lock.write_locked():
        thread = threading.Thread(target=reader)
        thread.start()
        entered_early = acquired.wait(0.1)
        cache.add(block, 0)
    thread.join(5)
    assert not entered_early
    assert reader_seen == [block]


def test_cache_lookup_and_slot_replacement():
    cache = BlockCache(2)
    first, second = _block(1), _block(2)
    assert cache.lookup(0) is None
    cache.add(first, 0)
    assert cache.lookup(0) is first
    cache.add(second, 2)
    assert cache.lookup(0) is None
    assert cache.lookup(2) is second


def test_cache_needs_slots():
    with pytest.raises(ValueError):
        BlockCache(0)


def test_term_to_block_defaults_to_zero():
    mapping = TermToBlock({"fox": 3})
    assert mapping.lookup("fox") == 3
    assert mapping.lookup("dog") == 0


def test_file_block_manager_reads_blocks(tmp_path):
    path = tmp_path / "blocks.bin"
    path.write_bytes(b"a" * 16 + b"b" * 16 + b"c" * 4)
    manager = FileBlockManager(16)
    manager.open(path)
    assert manager.read(1) == b"b" * 16
    with pytest.raises(EOFError):
        manager.read(2)
    manager.close()
    with pytest.raises(ValueError):
        manager.read(0)


def test_file_block_manager_missing_file(tmp_path):
    with pytest.raises(OSError):
        FileBlockManager().open(tmp_path / "absent.bin")


def test_table_reads_block_of_term(tmp_path):
    blocks = [_block(0), _block(1), _block(2)]
    manager = FileBlockManager(INDEX_BLOCK_BYTES)
    manager.open(_index_file(tmp_path, blocks))
    table = IndexBlockTable(manager, TermToBlock({"fox": 1}))
    assert table.get_index_block("fox") == blocks[1]
    assert table.get_index_block("other") == blocks[0]
    assert table.cache.lookup(2) == blocks[2]
    manager.close()


def test_get_blocks_stops_at_end_of_file(tmp_path):
    blocks = [_block(0), _block(1)]
    manager = FileBlockManager(INDEX_BLOCK_BYTES)
    manager.open(_index_file(tmp_path, blocks))
    table = IndexBlockTable(manager)
    assert table.get_blocks(0, 4) == blocks
    assert table.get_blocks(5, 4) == []
    manager.close()


def test_filtered_term_has_no_block(tmp_path):
    manager = FileBlockManager(INDEX_BLOCK_BYTES)
    manager.open(_index_file(tmp_path, [_block(0)]))
    element_filter = ElementFilter()
    element_filter.add("the")
    table = IndexBlockTable(manager, element_filter=element_filter)
    assert table.get_index_block("the") is None
    manager.close()


def test_default_table_is_shared_and_empty():
    table = default_block_table()
    assert default_block_table() is table
    assert table.get_index_block("fox") is None