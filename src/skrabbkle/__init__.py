"""SkraBBKle: a two-player tile-placement word game."""

__version__ = "0.1.0"
