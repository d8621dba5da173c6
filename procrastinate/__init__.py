"""An interactive to-do list manager backed by SQLite: storage and menus."""

__version__ = "0.1.0"
__all__ = ["cli", "store"]