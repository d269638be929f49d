"""Decoding of Huffman bitstreams through a trie of symbol codes."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Optional, Union

__all__ = ["DecodingError", "CodeTrie", "HuffmanDecoder"]

_HEADER = struct.Struct("<i")
_MAX_SYMBOL = 255

PathLike = Union[str, "os.PathLike[str]"]
Labels = Union[Mapping[int, str], Iterable[str]]


class DecodingError(Exception):
    """Raised when codes or encoded data cannot be decoded."""


@dataclass(eq=False)
class _TrieNode:
    symbol: int = 0
    left: Optional["_TrieNode"] = None
    right: Optional["_TrieNode"] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _check_symbol(symbol: int) -> None:
    if not 0 <= symbol <= _MAX_SYMBOL:
        raise ValueError(f"symbol {symbol} is not a byte value")


def _check_code(code: str) -> None:
    if any(bit not in "01" for bit in code):
        raise ValueError(f"code {code!r} may only contain '0' and '1'")


class CodeTrie:
    """A binary trie mapping bit codes to symbols: '0' goes left, '1' right."""

    def __init__(self) -> None:
        self.root: Optional[_TrieNode] = None

    def __repr__(self) -> str:
        return f"CodeTrie(empty={self.root is None})"

    def add(self, code: str, symbol: int) -> None:
        """Store ``symbol`` at the node reached by following ``code``."""
        _check_code(code)
        _check_symbol(symbol)
        if self.root is None:
            self.root = _TrieNode()
        node = self.root
        for bit in code:
            if bit == "1":
                if node.right is None:
                    node.right = _TrieNode()
                node = node.right
            else:
                if node.left is None:
                    node.left = _TrieNode()
                node = node.left
        node.symbol = symbol


class HuffmanDecoder:
    """Rebuilds data from a Huffman code table and a packed bitstream.

    Decoded output accumulates across calls in :attr:`decoded`.
    """

    def __init__(self) -> None:
        self.trie = CodeTrie()
        self.is_tree_ready = False
        self._decoded = bytearray()

    def __repr__(self) -> str:
        return (
            f"HuffmanDecoder(ready={self.is_tree_ready}, "
            f"decoded_length={len(self._decoded)})"
        )

    @property
    def decoded(self) -> bytes:
        """All bytes decoded so far."""
        return bytes(self._decoded)

    def load_codes(self, path: PathLike) -> None:
        """Read ``<symbol> <code>`` lines from a file into the trie."""
        with open(path, "r", encoding="ascii") as source:
            for line_number, line in enumerate(source, start=1):
                fields = line.split()
                if not fields:
                    continue
                if len(fields) > 2:
                    raise DecodingError(f"line {line_number}: too many fields")
                try:
                    symbol = int(fields[0])
                except ValueError as exc:
                    raise DecodingError(
                        f"line {line_number}: symbol {fields[0]!r} is not an integer"
                    ) from exc
                code = fields[1] if len(fields) == 2 else ""
                try:
                    self.trie.add(code, symbol)
                except ValueError as exc:
                    raise DecodingError(f"line {line_number}: {exc}") from exc
        self.is_tree_ready = True

    def load_labels(self, labels: Labels) -> None:
        """Add codes given per symbol; empty codes mark unused symbols."""
        if isinstance(labels, Mapping):
            items = sorted(labels.items())
        else:
            items = list(enumerate(labels))
        for symbol, code in items:
            if code:
                self.trie.add(code, symbol)
        self.is_tree_ready = True

    def decode_bytes(self, data: Union[bytes, bytearray, memoryview], bit_count: int) -> bytes:
        """Decode the first ``bit_count`` bits of ``data``, most significant bit first."""
        if bit_count < 0:
            raise ValueError(f"bit count must be non-negative, got {bit_count}")
        data = bytes(data)
        if len(data) * 8 < bit_count:
            raise DecodingError(
                f"{bit_count} bits requested but only {len(data) * 8} are available"
            )
        return self._decode(data, bit_count)

    def decode_file(self, path: PathLike) -> bytes:
        """Decode a file holding a 4-byte little-endian bit count and a bitstream."""
        with open(path, "rb") as source:
            header = source.read(_HEADER.size)
            payload = source.read()
        if len(header) < _HEADER.size:
            raise DecodingError("encoded file is too short to hold its bit count")
        (bit_count,) = _HEADER.unpack(header)
        return self._decode(payload, bit_count)

    def write_decoded(self, path: PathLike) -> None:
        """Write everything decoded so far to a file."""
        with open(path, "wb") as out:
            out.write(self._decoded)

    def _decode(self, data: bytes, bit_count: int) -> bytes:
        if not self.is_tree_ready:
            raise DecodingError("Huffman codes have not been loaded")
        root = self.trie.root
        if bit_count > 0 and root is None:
            raise DecodingError("Huffman tree is empty")
        out = bytearray()
        node = root
        remaining = bit_count
        for byte in data:
            if remaining <= 0:
                break
            for shift in range(7, -1, -1):
                if remaining <= 0:
                    break
                node = node.right if (byte >> shift) & 1 else node.left
                if node is None:
                    raise DecodingError("invalid path in Huffman trie")
                if node.is_leaf():
                    out.append(node.symbol)
                    node = root
                remaining -= 1
        self._decoded.extend(out)
        return bytes(out)