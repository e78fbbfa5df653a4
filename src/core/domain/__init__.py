"""
Domain models and value objects.

Contains the immutable SD59x18 fixed-point value object.
"""

from src.core.domain.sd59x18 import DECIMALS, SD59x18

__all__ = [
    "DECIMALS",
    "SD59x18",
]
