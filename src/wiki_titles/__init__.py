"""wiki-titles: unique wiki page titles for game entities."""

__version__ = "0.1.0"
