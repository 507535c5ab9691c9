"""taskkeeper - in-memory task tracking with work and personal task variants."""

__version__ = "0.1.0"
