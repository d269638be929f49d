"""Command-line entry point: encode a file or string, then decode it back."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional

from huffpack.decoder import DecodingError, HuffmanDecoder
from huffpack.encoder import EncodingError, HuffmanEncoder

__all__ = ["main"]

DEFAULT_INPUT = "input.txt"
DEFAULT_CODES = "HuffmanCode.txt"
DEFAULT_ENCODED = "output.bin"
DEFAULT_DECODED = "decoded.txt"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="huffpack",
        description=(
            "Huffman-encode a file (or a string), write the code table and "
            "the encoded bitstream, then decode the result back."
        ),
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"file to encode (default: {DEFAULT_INPUT})",
    )
    parser.add_argument(
        "--codes",
        default=DEFAULT_CODES,
        help=f"where to write the code table (default: {DEFAULT_CODES})",
    )
    parser.add_argument(
        "--encoded",
        default=DEFAULT_ENCODED,
        help=f"where to write the encoded data (default: {DEFAULT_ENCODED})",
    )
    parser.add_argument(
        "--decoded",
        default=DEFAULT_DECODED,
        help=f"where to write the decoded data (default: {DEFAULT_DECODED})",
    )
    parser.add_argument(
        "--string",
        metavar="TEXT",
        help="encode and decode TEXT in memory instead of reading a file",
    )
    parser.add_argument(
        "--print",
        dest="print_decoded",
        action="store_true",
        help="print the decoded text instead of writing it to a file",
    )
    return parser


def _emit(decoder: HuffmanDecoder, print_decoded: bool, decoded_path: str) -> None:
    if print_decoded:
        print("Decoded String:")
        print(decoder.decoded.decode("utf-8", errors="replace"))
    else:
        decoder.write_decoded(decoded_path)
        print(f"Decoding complete. Output: {decoded_path}")


def _run_string(args: argparse.Namespace) -> None:
    encoder = HuffmanEncoder()
    encoder.encode_bytes(args.string)
    print("String encoding complete.")
    decoder = HuffmanDecoder()
    decoder.load_labels(encoder.labels)
    decoder.decode_bytes(encoder.encoded, encoder.bit_count)
    _emit(decoder, args.print_decoded, args.decoded)


def _run_file(args: argparse.Namespace) -> None:
    encoder = HuffmanEncoder()
    encoder.encode_file(args.input)
    encoder.write_codes(args.codes)
    encoder.write_encoded(args.encoded)
    print(f"Encoding complete. Output: {args.codes}, {args.encoded}")
    decoder = HuffmanDecoder()
    decoder.load_codes(args.codes)
    decoder.decode_file(args.encoded)
    _emit(decoder, args.print_decoded, args.decoded)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the encode/decode round trip; return a process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.string is not None:
            _run_string(args)
        else:
            _run_file(args)
    except (OSError, EncodingError, DecodingError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())