"""A toy 32-bit substitution-permutation block cipher working on nibbles, with a command-line tool."""

__version__ = "0.1.0"