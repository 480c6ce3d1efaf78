"""Personal dashboard API proxy."""

__version__ = "0.1.0"
