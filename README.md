# huffpack

A small tool for compressing files with static Huffman coding and restoring
them again.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

Encode a file:

```
huffpack -f notes.txt -e
```

This writes `notes.txt.huff` next to the input. The compressed file begins
with the four bytes `HUFF`, followed by a table of 256 little-endian 32-bit
byte frequencies, followed by the packed bit stream (most significant bit
first, the last byte padded with zero bits).

Decode it again:

```
huffpack -f notes.txt.huff -d
```

The decoded output is written to `notes.txt.test`: the last five characters
of the name (the `.huff` suffix) are dropped and `.test` is appended, so the
result can be compared with the original.

The command exits with status 0 on success and 1 otherwise:

- any other arguments print
  `Usage: huffman -f [FILENAME] -[e(encode), d(decode)]`;
- a missing input file prints `File doesn't exist!`;
- a file to decode that does not start with `HUFF`, or whose frequency table
  is cut short, prints `Not a compressed file!`;
- other value errors (for example encoding an empty file, which has no
  symbols to build a tree from) print their message.

## Library use

```python
from huffpack.codec import (
    build_frequency_tree,
    decode_bytes,
    encode_bytes,
    make_header,
)
from huffpack.huffman_tree import HuffmanTree

data = b"abracadabra"
freq = build_frequency_tree(data)
tree = HuffmanTree(sorted(freq.inorder()))
packed = make_header(freq) + encode_bytes(data, tree)
body = packed[4 + 256 * 4:]
restored = decode_bytes(body, tree)
```

The modules:

- `huffpack.node` — `SymbolCount` (a frozen `freq`/`symbol` pair ordered by
  frequency) and `Node` (a tree node with `data`, `left`, `right` and
  `is_leaf()`).
- `huffpack.frequency_tree` — `FrequencyTree`, a binary search tree that
  counts byte values: `insert(symbol)`, `len(tree)` for the number of
  distinct symbols, `inorder()` for the counts in symbol order and
  `format_inorder()` for a `[s:f]->[s:f]` rendering. Symbols outside 0–255
  raise `ValueError`.
- `huffpack.huffman_tree` — `HuffmanTree(counts)` builds the code tree from
  counts sorted by frequency (an empty input raises `ValueError`);
  `find_path(symbol)` returns the symbol's code as a string of `0` and `1`
  and raises `KeyError` for an unknown symbol. The tree's `root` is exposed.
- `huffpack.codec` — `build_frequency_tree`, `make_header`, `encode_bytes`,
  `decode_bytes`, and the whole-file helpers `make_encoded_file(path)` and
  `make_decoded_file(path)`, which return the path they wrote.
  `make_decoded_file` raises `NotHuffmanFileError` (a `ValueError`) when the
  input lacks the `HUFF` marker or a full frequency table.
- `huffpack.cli` — `main(argv=None)`, the command described above.

## Limitations

- Because the final byte is padded with zero bits and every bit is decoded,
  decoding may append extra symbols at the end when a short code of zeros
  fits into the padding.
- A file made of a single distinct byte value gets an empty code, so its
  encoded body is empty and it decodes to an empty file.
- The table stores frequencies only; the tree is rebuilt from it when
  decoding, and no checksum or original length is kept.