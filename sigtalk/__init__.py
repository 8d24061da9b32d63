"""Bit-by-bit messaging between processes over SIGUSR1 and SIGUSR2, with small string, memory and list helpers."""

__version__ = "0.1.0"