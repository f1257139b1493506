"""Scheduled departure and arrival boards for simulated transport stations."""

__version__ = "0.1.0"
