# moonshot

Building blocks for an inverted search index:

- `moonshot.tokenizer.SmartTokenizer` splits text on Unicode word boundaries. It applies NFC normalisation first, drops spaces and punctuation, and lower-cases each word. The locales `tr` and `az` get dotless-i lower-casing.
- `moonshot.hashing` provides MurmurHash3 as `murmur3_x86_32`, `murmur3_x86_128` and `murmur3_x64_128`, along with the `fmix32` and `fmix64` finalizers.
- `moonshot.element_filter.ElementFilter` is a single-hash membership filter over a page-aligned buffer. It supports `add` and `in`.
- `moonshot.decoder.UnifiedDecoder` decodes posting lists stored as varint pairs of document-id delta and term frequency.
- `moonshot.block_table` provides `IndexBlock`, `BlockCache`, `TermToBlock`, `FileBlockManager` and `IndexBlockTable`. Together they map a term to its index blocks and read those blocks from a file through a cache.
- `moonshot.file_access.FileAccess` is a read-only file with fixed-size block reads. It can be used as a context manager.
- `moonshot.reader.AdvancedIndexReader` and `moonshot.writer.AdvancedIndexWriter` read and write postings.
- `moonshot.executor.IndexSearchExecutor` runs a search.
- `moonshot.context.IndexContext` hands out readers, writers and executors.

## Installation

```
pip install .
pip install .[test]   # with pytest
```

## Usage

Tokenize text and pass the tokens to a writer:

```python
from moonshot.context import IndexContext
from moonshot.tokenizer import SmartTokenizer

context = IndexContext("", "")
tokenizer = SmartTokenizer()
writer = context.get_writer()

tokens = writer.write(tokenizer.tokenize("The QUICK Brown Fox"), 1, "Body")
# tokens == ['brown', 'fox', 'quick', 'the']
```

`AdvancedIndexWriter.write` sorts the words. It prints them with the document id and posting type, to standard output or to the `out` stream given to the writer, and returns the sorted list.

Decode a posting list:

```python
from moonshot.decoder import UnifiedDecoder

decoder = UnifiedDecoder()
decoder.open(bytes([5, 1, 3, 2, 0]), 0)
decoder.go_next()
decoder.document_id      # 5
decoder.go_next()
decoder.document_id      # 8
decoder.term_frequency   # 2
decoder.is_end()         # True
```

Run a reader to the end with an executor:

```python
from moonshot.executor import IndexSearchExecutor

reader = context.get_reader("fox")
reader.open("fox")
ids = IndexSearchExecutor().execute(reader)   # document ids other than 0
```

Hash a key (either `str` or bytes):

```python
from moonshot.hashing import murmur3_x86_32

murmur3_x86_32(b"hello", 0)
```

## Command line

```
moonshot
```

This command prints `Service Started` and exits with status 0.

## What this package does not do

- The `moonshot` command does not open a network port and does not answer queries.
- Writers do not store postings. `IndexContext` does not load an index from its `index_file`, and it reads no settings from `config_file`. A reader therefore finds blocks only when its `IndexBlockTable` is given an open `FileBlockManager`.
- `IndexSearchCompiler.compile` and `compile_to_vector` return `None`. `IndexContext.get_reader` returns no reader for an `EvalTree` or for `Embeddings`.
- `AdvancedIndexReader.go_until` ignores its `limit` argument.