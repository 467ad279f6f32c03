"""ReviewDesk - offline-first document review tracking."""

__version__ = "0.1.0"
