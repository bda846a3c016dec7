"""Read, change and print JSON configuration files using dotted key paths."""

__version__ = "0.1.0"