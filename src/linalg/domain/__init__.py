"""
Domain models.

Contains the Matrix container and its Dimensions value pair.
"""

from src.linalg.domain.matrix import Dimensions, Matrix

__all__ = [
    "Dimensions",
    "Matrix",
]
