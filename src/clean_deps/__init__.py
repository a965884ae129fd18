"""Find and remove build and dependency directories of a chosen ecosystem."""

__version__ = "0.1.0"
