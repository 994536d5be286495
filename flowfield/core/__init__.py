"""
Core value types and vector math shared by every field.

This module provides the small building blocks used throughout the library:
- 2D and 3D value-typed vectors
- Length, normalization and perpendicular helpers
- Single precision float limits used by the overflow clamp
"""

from . import vectors, utils

from .vectors import Vector2, Vector3
from .utils import MAX_FLOAT, MIN_FLOAT, length, normalize, perpendicular
