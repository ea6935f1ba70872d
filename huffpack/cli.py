"""Command line entry point: huffman -f FILE -e|-d."""

from __future__ import annotations

import sys
from typing import List, Optional

from .codec import NotHuffmanFileError, make_decoded_file, make_encoded_file

USAGE = "Usage: huffman -f [FILENAME] -[e(encode), d(decode)]"


def main(argv: Optional[List[str]] = None) -> int:
    """Encode or decode a file; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3 or args[0] != "-f" or args[2] not in ("-e", "-d"):
        print(USAGE)
        return 1
    _, filename, mode = args
    try:
        if mode == "-e":
            make_encoded_file(filename)
        else:
            make_decoded_file(filename)
    except FileNotFoundError:
        print("File doesn't exist!")
        return 1
    except NotHuffmanFileError:
        print("Not a compressed file!")
        return 1
    except ValueError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())