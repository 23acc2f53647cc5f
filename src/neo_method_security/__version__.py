"""Version information for neo-method-security."""

__version__ = "0.1.0"
