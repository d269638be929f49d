"""Huffman encoding and decoding of files and byte strings, with a round-trip command."""

__version__ = "0.1.0"