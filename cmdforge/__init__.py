"""cmdforge — build shell command lines from a declarative tool catalogue."""

__version__ = "0.1.0"
