"""Open a new Yakuake terminal session from the command line."""

__version__ = "0.1.0"
