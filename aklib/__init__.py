"""Runtime building blocks: bit tricks, checked and fixed-point integers, hash tables, byte buffers, atomics."""

__version__ = "0.1.0"