"""Polymorphic animal classes: plain, with a brain, and with an abstract base."""

__all__ = ["abstract", "basic", "thinking"]