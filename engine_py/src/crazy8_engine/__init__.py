"""Crazy Eights rules engine: one human against greedy AI players."""

__version__ = "1.0.0"
