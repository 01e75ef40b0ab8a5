"""Tokenizer, hashing, posting decoder, block table, readers and writers for an inverted search index."""

__version__ = "0.1.0"