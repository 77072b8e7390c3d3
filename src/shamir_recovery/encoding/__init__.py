from .base import DIGITS, MAX_BASE, MIN_BASE, convert, encode

__all__ = ["DIGITS", "MAX_BASE", "MIN_BASE", "convert", "encode"]
