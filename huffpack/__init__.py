"""Static Huffman coding for compressing and restoring files."""

__version__ = "0.1.0"
__all__ = ["node", "frequency_tree", "huffman_tree", "codec", "cli"]