"""Quantity, serving and unit normalization for meal planning."""

__version__ = "0.1.0"
