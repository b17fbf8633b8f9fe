"""Typo- and diacritic-tolerant prefix search, with an interactive terminal demo."""

__version__ = "0.1.0"
__all__ = ["cli", "lookalikes", "tree"]