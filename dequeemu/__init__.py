"""A double-ended queue emulator with an iterator, standard algorithms and a line-based command."""

__version__ = "0.1.0"

__all__ = ["__version__"]