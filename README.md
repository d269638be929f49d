# huffpack

Huffman coding for files and in-memory byte strings.

huffpack counts how often each byte value occurs, builds a Huffman tree
from those counts, gives every byte a prefix-free code of `0`s and `1`s,
and packs the encoded bits into bytes. A matching decoder rebuilds a
code trie from the code table and recovers the original data.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
huffpack [INPUT] [--codes PATH] [--encoded PATH] [--decoded PATH]
         [--string TEXT] [--print]
```

With no arguments the command runs the full round trip in the current
directory:

1. reads `input.txt` and encodes it,
2. writes the code table to `HuffmanCode.txt`,
3. writes the encoded data to `output.bin`,
4. reads both files back, decodes them and writes the result to
   `decoded.txt`.

Options:

- `INPUT` – the file to encode (default `input.txt`).
- `--codes PATH` – where the code table goes (default `HuffmanCode.txt`).
- `--encoded PATH` – where the encoded data goes (default `output.bin`).
- `--decoded PATH` – where the decoded data goes (default `decoded.txt`).
- `--string TEXT` – encode `TEXT` (as UTF-8) and decode it again in
  memory; no code table or encoded file is written.
- `--print` – print the decoded text to standard output instead of
  writing it to a file.

The command exits with status 0 on success. If a file cannot be read or
written, or encoding or decoding fails, it prints `Error: ...` to
standard error and exits with status 1.

## Library use

Encoding and decoding through files:

```python
from huffpack.encoder import HuffmanEncoder
from huffpack.decoder import HuffmanDecoder

encoder = HuffmanEncoder()            # alphabet of 256 byte values
encoder.encode_file("input.txt")
encoder.write_codes("HuffmanCode.txt")
encoder.write_encoded("output.bin")

decoder = HuffmanDecoder()
decoder.load_codes("HuffmanCode.txt")
decoder.decode_file("output.bin")
decoder.write_decoded("decoded.txt")
```

In memory:

```python
encoder = HuffmanEncoder()
packed = encoder.encode_bytes(b"hello world")   # str input is encoded as UTF-8

decoder = HuffmanDecoder()
decoder.load_labels(encoder.labels)
assert decoder.decode_bytes(packed, encoder.bit_count) == b"hello world"
```

`HuffmanEncoder` keeps the results of the last encoding: `frequencies`
(counts indexed by byte value), `codes` (a dict of byte value to code),
`labels` (codes indexed by byte value, empty for unused values),
`encoded` (the packed bytes) and `bit_count` (how many of those bits are
meaningful). `HuffmanEncoder(alphabet_size)` restricts the accepted byte
values to `0 .. alphabet_size - 1`.

`HuffmanDecoder.decode_bytes` and `decode_file` return the bytes decoded
by that call; the `decoded` property holds everything the decoder has
decoded so far, across calls, and `write_decoded` writes that.
`load_labels` accepts either a sequence of codes indexed by byte value or
a mapping of byte value to code.

The lower-level pieces are available too: `huffpack.heap` provides the
`HuffmanNode` tree node and the min-heap `PriorityQueue` used to build
the tree; `huffpack.encoder` offers `build_tree(frequencies)` and
`assign_codes(root)` on their own; `huffpack.decoder.CodeTrie` is the
binary trie the decoder walks bit by bit (`'0'` goes left, `'1'` right).

Problems are reported as exceptions: `EncodingError` from the encoder
(for instance a byte outside the alphabet, or writing before anything was
encoded) and `DecodingError` from the decoder (for instance a malformed
code table, too few bits for the requested bit count, or bits that lead
down a path no code describes). Invalid arguments such as a negative bit
count or a code containing characters other than `0` and `1` raise
`ValueError`.

## File formats

**Code table** (`HuffmanCode.txt`): one line per byte value that occurs
in the input, in ascending order of value:

```
<byte value> <code>
```

for example `97 010` gives byte `a` the code `010`.

**Encoded data** (`output.bin`): a 4-byte little-endian signed integer
holding the number of encoded bits, followed by the bits packed most
significant bit first. The last byte is padded with zero bits; the bit
count tells the decoder where to stop.

## Limitations

- The encoded file stores only the bitstream; the code table must be
  kept alongside it to decode.
- Input made of a single distinct byte value (for example `b"aaaa"`)
  gives that value the empty code, so it encodes to zero bits and decodes
  to nothing. The original length is not recorded.
- The decoder handles byte values 0–255 only.