"""recents - basic recent files management from the terminal."""

__version__ = "0.2.0"
