"""Enfrendados, a two-player dice game for the terminal, with its screens and helpers."""

__version__ = "0.1.0"
__all__ = ["__version__"]