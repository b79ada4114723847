"""Describe whether an integer is even or odd."""

__version__ = "0.1.0"
__all__ = ["check_number"]