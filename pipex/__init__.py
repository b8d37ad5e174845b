"""Run two commands joined by a pipe between an input file and an output file, plus small text, number, sorting, line-reading and printf helpers."""

__version__ = "0.1.0"