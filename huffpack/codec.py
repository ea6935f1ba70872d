"""Encoding and decoding of .huff files."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import List, Tuple, Union

from .frequency_tree import FrequencyTree
from .huffman_tree import HuffmanTree
from .node import SymbolCount

MAGIC = b"HUFF"
ENCODED_SUFFIX = ".huff"
DECODED_SUFFIX = ".test"
_HEADER = struct.Struct("<4s256I")

PathLike = Union[str, Path]


class NotHuffmanFileError(ValueError):
    """Raised when input does not start with a valid header."""


def build_frequency_tree(data: bytes) -> FrequencyTree:
    """Count every byte of data in a FrequencyTree."""
    tree = FrequencyTree()
    for byte in data:
        tree.insert(byte)
    return tree


def make_header(tree: FrequencyTree) -> bytes:
    """Return the magic number followed by 256 little-endian 32-bit counts."""
    frequencies = [0] * 256
    for item in tree.inorder():
        frequencies[item.symbol] = item.freq
    return _HEADER.pack(MAGIC, *frequencies)


def _parse_header(blob: bytes) -> Tuple[List[SymbolCount], bytes]:
    if blob[: len(MAGIC)] != MAGIC:
        raise NotHuffmanFileError("Not a compressed file!")
    if len(blob) < _HEADER.size:
        raise NotHuffmanFileError("truncated frequency table")
    _, *frequencies = _HEADER.unpack_from(blob)
    counts = [SymbolCount(freq, symbol) for symbol, freq in enumerate(frequencies) if freq]
    return sorted(counts), blob[_HEADER.size :]


def encode_bytes(data: bytes, tree: HuffmanTree) -> bytes:
    """Pack the codes of data MSB first, zero-padding the last byte."""
    bits = "".join(tree.find_path(byte) for byte in data)
    if not bits:
        return b""
    bits += "0" * (-len(bits) % 8)
    return int(bits, 2).to_bytes(len(bits) // 8, "big")


def decode_bytes(data: bytes, tree: HuffmanTree) -> bytes:
    """Walk the tree over every bit of data, padding bits included."""
    root = tree.root
    if root.is_leaf():
        if data:
            raise ValueError("cannot decode bits with a single-symbol tree")
        return b""
    out = bytearray()
    walk = root
    for byte in data:
        for shift in range(7, -1, -1):
            walk = walk.right if (byte >> shift) & 1 else walk.left
            if walk.is_leaf():
                out.append(walk.data.symbol)
                walk = root
    return bytes(out)


def make_encoded_file(path: PathLike) -> Path:
    """Compress path into path + '.huff' and return the output path."""
    source = Path(path)
    data = source.read_bytes()
    freq_tree = build_frequency_tree(data)
    huff_tree = HuffmanTree(sorted(freq_tree.inorder()))
    target = Path(str(path) + ENCODED_SUFFIX)
    target.write_bytes(make_header(freq_tree) + encode_bytes(data, huff_tree))
    return target


def make_decoded_file(path: PathLike) -> Path:
    """Expand a .huff file into a sibling '.test' file and return its path."""
    blob = Path(path).read_bytes()
    counts, body = _parse_header(blob)
    huff_tree = HuffmanTree(counts)
    name = str(path)
    target = Path(name[: len(name) - len(ENCODED_SUFFIX)] + DECODED_SUFFIX)
    target.write_bytes(decode_bytes(body, huff_tree))
    return target