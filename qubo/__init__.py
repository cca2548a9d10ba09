"""Question bank loaded from a text file, with console menus for choosing a subject and chapter."""

__version__ = "0.1.0"