"""A side-scrolling sword-fighting platformer with tile-based levels, enemies and menus."""

__version__ = "0.1.0"