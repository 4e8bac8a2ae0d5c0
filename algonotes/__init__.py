"""Compact implementations of bit tricks, hashes, sketches, determinants, samplers, search trees, Huffman coding and CSV reading."""

__version__ = "0.1.0"