"""tusk - a typed facade over the git command line."""

__version__ = "0.3.0"
