"""Command-line front-end for generating Nano IDs."""

from .generator import DEFAULT_ALPHABET, DEFAULT_LENGTH, Generator, GeneratorConfig, new_generator

__all__ = ["DEFAULT_ALPHABET", "DEFAULT_LENGTH", "Generator", "GeneratorConfig", "new_generator"]
