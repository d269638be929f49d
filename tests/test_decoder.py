import pytest

from huffpack.decoder import CodeTrie, DecodingError, HuffmanDecoder
from huffpack.encoder import HuffmanEncoder


def _decoder_with(codes):
    decoder = HuffmanDecoder()
    decoder.load_labels(codes)
    return decoder


def test_trie_add_builds_paths():
    trie = CodeTrie()
    trie.add("0", ord("a"))
    trie.add("1", ord("b"))
    assert trie.root.left.symbol == ord("a")
    assert trie.root.right.symbol == ord("b")
    assert trie.root.left.is_leaf()


def test_trie_rejects_bad_code():
    with pytest.raises(ValueError):
        CodeTrie().add("012", 1)


def test_trie_rejects_bad_symbol():
    with pytest.raises(ValueError):
        CodeTrie().add("0", 300)


def test_decode_worked_example():
    decoder = _decoder_with({ord("a"): "0", ord("b"): "1"})
    # 0x40 is 0b01000000: bits 0, 1 -> "a", "b"
    assert decoder.decode_bytes(b"\x40", 2) == b"ab"


def test_padding_bits_are_ignored():
    decoder = _decoder_with({ord("a"): "0", ord("b"): "1"})
    assert decoder.decode_bytes(b"\x40", 1) == b"a"


@pytest.mark.parametrize(
    "text",
    [b"Hello world", b"abracadabra", b"Hello world, this is a test string for Huffman encoding!", b"ab"],
)
def test_round_trip_in_memory(text):
    encoder = HuffmanEncoder()
    encoded = encoder.encode_bytes(text)
    decoder = HuffmanDecoder()
    decoder.load_labels(encoder.labels)
    assert decoder.decode_bytes(encoded, encoder.bit_count) == text
    assert decoder.decoded == text


def test_round_trip_through_files(tmp_path):
    original = bytes(range(256)) + b"the quick brown fox" * 5
    source = tmp_path / "input.txt"
    source.write_bytes(original)
    encoder = HuffmanEncoder()
    encoder.encode_file(source)
    encoder.write_codes(tmp_path / "codes.txt")
    encoder.write_encoded(tmp_path / "output.bin")

    decoder = HuffmanDecoder()
    decoder.load_codes(tmp_path / "codes.txt")
    assert decoder.decode_file(tmp_path / "output.bin") == original
    decoder.write_decoded(tmp_path / "decoded.txt")
    assert (tmp_path / "decoded.txt").read_bytes() == original


def test_empty_input_round_trip(tmp_path):
    encoder = HuffmanEncoder()
    encoder.encode_bytes(b"")
    encoder.write_codes(tmp_path / "codes.txt")
    encoder.write_encoded(tmp_path / "output.bin")
    decoder = HuffmanDecoder()
    decoder.load_codes(tmp_path / "codes.txt")
    assert decoder.decode_file(tmp_path / "output.bin") == b""


def test_output_accumulates_across_calls():
    decoder = _decoder_with({ord("x"): "0", ord("y"): "1"})
    first = decoder.decode_bytes(b"\x00", 1)
    second = decoder.decode_bytes(b"\x80", 1)
    assert decoder.decoded == first + second


def test_decode_without_codes_fails():
    with pytest.raises(DecodingError):
        HuffmanDecoder().decode_bytes(b"\x00", 1)


def test_invalid_path_fails():
    decoder = _decoder_with({ord("a"): "00", ord("b"): "01"})
    with pytest.raises(DecodingError):
        decoder.decode_bytes(b"\x80", 2)
    assert decoder.decoded == b""


def test_insufficient_data_fails():
    decoder = _decoder_with({ord("a"): "0", ord("b"): "1"})
    with pytest.raises(DecodingError):
        decoder.decode_bytes(b"\x00", 9)


def test_negative_bit_count_fails():
    decoder = _decoder_with({ord("a"): "0", ord("b"): "1"})
    with pytest.raises(ValueError):
        decoder.decode_bytes(b"\x00", -1)


def test_empty_tree_with_bits_fails():
    decoder = _decoder_with({})
    with pytest.raises(DecodingError):
        decoder.decode_bytes(b"\x00", 1)


def test_malformed_code_file_fails(tmp_path):
    path = tmp_path / "codes.txt"
    path.write_text("abc 010\n", encoding="ascii")
    with pytest.raises(DecodingError):
        HuffmanDecoder().load_codes(path)


def test_code_file_with_bad_bits_fails(tmp_path):
    path = tmp_path / "codes.txt"
    path.write_text("97 012\n", encoding="ascii")
    with pytest.raises(DecodingError):
        HuffmanDecoder().load_codes(path)


def test_truncated_header_fails(tmp_path):
    decoder = _decoder_with({ord("a"): "0", ord("b"): "1"})
    path = tmp_path / "output.bin"
    path.write_bytes(b"\x01\x00")
    with pytest.raises(DecodingError):
        decoder.decode_file(path)


def test_truncated_file_decodes_available_bits(tmp_path):
    encoder = HuffmanEncoder()
    text = b"aaaabbbbccccdddd"
    encoder.encode_bytes(text)
    encoder.write_encoded(tmp_path / "output.bin")
    full = (tmp_path / "output.bin").read_bytes()
    (tmp_path / "short.bin").write_bytes(full[:-1])
    decoder = HuffmanDecoder()
    decoder.load_labels(encoder.labels)
    result = decoder.decode_file(tmp_path / "short.bin")
    assert text.startswith(result)
    assert len(result) < len(text)