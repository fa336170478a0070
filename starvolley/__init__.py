"""A small fixed-shooter arcade game with its logic kept apart from pygame."""

__version__ = "0.1.0"