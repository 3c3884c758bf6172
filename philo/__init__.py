"""Threaded dining philosophers simulation, with formatting, line-reading and string helpers."""

__version__ = "0.1.0"