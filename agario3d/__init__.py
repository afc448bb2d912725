"""A small three-dimensional cell-eating arcade game, with a windowless game core."""

__version__ = "0.1.0"