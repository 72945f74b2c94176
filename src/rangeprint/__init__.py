"""rangeprint: print a character-table range in descending order."""

__version__ = "0.1.0"
