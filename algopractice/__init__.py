"""Classic data-structure and algorithm exercises as small Python functions."""

__version__ = "0.1.0"