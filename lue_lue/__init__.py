"""Backend for the lue-lue card game."""

__version__ = "0.1.0"
