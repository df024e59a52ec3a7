"""Semantic identities for the elementary kinds.

Python has a single ``int`` and a single ``float``. Sized variants are
expressed as ``NewType``s so they can be used both as annotations and as
registry keys.
"""

from typing import NewType

Int64 = NewType("Int64", int)
Int16 = NewType("Int16", int)
Int8 = NewType("Int8", int)
Float32 = NewType("Float32", float)
Char = NewType("Char", str)

PRIMITIVE_TYPES = (int, Int64, Int16, Int8, float, Float32, str, Char, bool)

__all__ = ["Int64", "Int16", "Int8", "Float32", "Char", "PRIMITIVE_TYPES"]
