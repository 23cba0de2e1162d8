"""Dictionary data for the word grid engine."""

from .dictionary import Dictionary, load_dictionary, default_dictionary

__all__ = ["Dictionary", "load_dictionary", "default_dictionary"]
