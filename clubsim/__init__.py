"""Event-driven simulation of a computer club's working day: parsing, queueing, usage tracking and revenue accounting."""

__version__ = "0.1.0"