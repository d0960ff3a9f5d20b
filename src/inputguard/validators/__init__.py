"""
Value validators exposed at the package level.
"""

from .bitwise import Bitwise
from .identical import Identical, loose_equals, strict_equals

__all__ = ["Bitwise", "Identical", "loose_equals", "strict_equals"]
