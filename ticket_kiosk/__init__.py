"""City metro ticket kiosk."""

__version__ = "1.0.0"
