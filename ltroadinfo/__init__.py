"""Lithuanian road restrictions and speed control sections as GPX tracks."""

__version__ = "0.1.0"