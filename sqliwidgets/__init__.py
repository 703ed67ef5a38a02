"""Input-driven widget state for a terminal SQL client."""

__version__ = "1.0.3"