"""Huffman tree construction, code assignment and bit-packed encoding."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterable, Mapping
from typing import Optional, Union

from huffpack.heap import HuffmanNode, PriorityQueue

__all__ = ["EncodingError", "build_tree", "assign_codes", "HuffmanEncoder"]

DEFAULT_ALPHABET_SIZE = 256
_HEADER = struct.Struct("<i")
_MAX_BIT_COUNT = 2**31 - 1

PathLike = Union[str, "os.PathLike[str]"]
Frequencies = Union[Mapping[int, int], Iterable[int]]


class EncodingError(Exception):
    """Raised when input cannot be encoded or encoder state is incomplete."""


def _frequency_items(frequencies: Frequencies) -> list[tuple[int, int]]:
    if isinstance(frequencies, Mapping):
        items = sorted(frequencies.items())
    else:
        items = list(enumerate(frequencies))
    for symbol, count in items:
        if count < 0:
            raise ValueError(f"negative frequency {count} for symbol {symbol}")
    return [(symbol, count) for symbol, count in items if count]


def build_tree(frequencies: Frequencies) -> Optional[HuffmanNode]:
    """Build a Huffman tree from symbol frequencies.

    ``frequencies`` is either a mapping of symbol to count or a sequence of
    counts indexed by symbol. Leaves are queued in ascending symbol order and
    the two lowest-frequency nodes become the left and right children of each
    new internal node. Returns None when no symbol has a non-zero count.
    """
    items = _frequency_items(frequencies)
    if not items:
        return None
    queue = PriorityQueue(len(items))
    for symbol, count in items:
        queue.push(HuffmanNode(freq=count, symbol=symbol))
    while len(queue) >= 2:
        left = queue.pop()
        right = queue.pop()
        queue.push(HuffmanNode(freq=left.freq + right.freq, left=left, right=right))
    return queue.pop()


def assign_codes(root: Optional[HuffmanNode]) -> dict[int, str]:
    """Map each leaf symbol to its code: '0' for a left branch, '1' for right.

    A tree consisting of a single leaf gives that symbol the empty code.
    """
    codes: dict[int, str] = {}
    if root is None:
        return codes
    stack: list[tuple[HuffmanNode, str]] = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf():
            codes[node.symbol] = prefix
            continue
        if node.right is not None:
            stack.append((node.right, prefix + "1"))
        if node.left is not None:
            stack.append((node.left, prefix + "0"))
    return codes


class HuffmanEncoder:
    """Encodes byte data with a Huffman code built from the data itself."""

    def __init__(self, alphabet_size: int = DEFAULT_ALPHABET_SIZE) -> None:
        if alphabet_size <= 0:
            raise ValueError(f"alphabet size must be positive, got {alphabet_size}")
        self.alphabet_size = alphabet_size
        self.frequencies: list[int] = [0] * alphabet_size
        self.codes: dict[int, str] = {}
        self.bit_count = 0
        self.encoded = b""
        self.is_labeled = False
        self.is_encoded = False

    def __repr__(self) -> str:
        return (
            f"HuffmanEncoder(alphabet_size={self.alphabet_size}, "
            f"symbols={len(self.codes)}, bit_count={self.bit_count})"
        )

    @property
    def labels(self) -> list[str]:
        """Codes indexed by symbol, with an empty string for unused symbols."""
        table = [""] * self.alphabet_size
        for symbol, code in self.codes.items():
            table[symbol] = code
        return table

    def _count(self, data: bytes) -> list[int]:
        frequencies = [0] * self.alphabet_size
        for byte in data:
            if byte >= self.alphabet_size:
                raise EncodingError(
                    f"byte value {byte} is outside the alphabet of size {self.alphabet_size}"
                )
            frequencies[byte] += 1
        return frequencies

    def encode_bytes(self, data: Union[bytes, bytearray, memoryview, str]) -> bytes:
        """Encode ``data`` and return the packed bitstream, most significant bit first.

        Strings are encoded as UTF-8 first. The final byte is padded with
        zero bits; ``bit_count`` records how many bits are meaningful.
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        data = bytes(data)

        self.is_labeled = False
        self.is_encoded = False
        self.frequencies = self._count(data)
        self.codes = assign_codes(build_tree(self.frequencies))
        bit_count = sum(
            self.frequencies[symbol] * len(code) for symbol, code in self.codes.items()
        )
        if bit_count > _MAX_BIT_COUNT:
            raise EncodingError(f"encoded size of {bit_count} bits is too large")
        self.bit_count = bit_count
        self.is_labeled = True

        bits = "".join(self.codes[byte] for byte in data)
        if bits:
            byte_length = (len(bits) + 7) // 8
            bits = bits.ljust(byte_length * 8, "0")
            self.encoded = int(bits, 2).to_bytes(byte_length, "big")
        else:
            self.encoded = b""
        self.is_encoded = True
        return self.encoded

    def encode_file(self, path: PathLike) -> bytes:
        """Read a file and encode its contents."""
        with open(path, "rb") as source:
            data = source.read()
        return self.encode_bytes(data)

    def write_codes(self, path: PathLike) -> None:
        """Write one ``<symbol> <code>`` line per used symbol, in symbol order."""
        if not self.is_labeled:
            raise EncodingError("cannot write Huffman codes: nothing has been encoded")
        with open(path, "w", encoding="ascii", newline="\n") as out:
            for symbol, count in enumerate(self.frequencies):
                if count > 0:
                    out.write(f"{symbol} {self.codes[symbol]}\n")

    def write_encoded(self, path: PathLike) -> None:
        """Write the bit count as a 4-byte little-endian integer, then the bitstream."""
        if not self.is_encoded:
            raise EncodingError("cannot write encoded data: encoding not complete")
        with open(path, "wb") as out:
            out.write(_HEADER.pack(self.bit_count))
            out.write(self.encoded)