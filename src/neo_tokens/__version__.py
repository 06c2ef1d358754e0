"""Version information for neo-tokens."""

__version__ = "0.1.0"
