"""
Language-specific code generators.

Go is the only target language.
"""

from .go import DataclassGenerator

__all__ = ["DataclassGenerator"]
