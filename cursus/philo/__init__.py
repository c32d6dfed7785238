"""Dining-philosophers simulation with threads and a monitor."""

__all__ = ["cli", "table", "timing"]