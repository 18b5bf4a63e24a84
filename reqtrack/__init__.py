"""reqtrack: a colourised summary of a personal markdown requirements file."""

__version__ = "0.1.0"
