"""Console desk applications: hotel reservations and student grades."""

__version__ = "1.0.0"
