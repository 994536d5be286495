__all__ = ['MAX_FLOAT', 'MIN_FLOAT', 'length', 'normalize', 'perpendicular']

import numpy as np

from flowfield.core.vectors import Vector2

### Limits ###

MAX_FLOAT = np.finfo(np.float32).max
MIN_FLOAT = np.finfo(np.float32).min

##############

### Math ###

def length(vec: Vector2) -> np.float32:
	"""Euclidean length of a 2D vector, computed in float32."""
	# clamped forces square to inf in float32
	with np.errstate(over='ignore', invalid='ignore'):
		x, y = np.float32(vec[0]), np.float32(vec[1])
		return np.sqrt(x * x + y * y)

def normalize(vec: Vector2) -> Vector2:
	"""
	Scale a vector to unit length.

	A vector of length exactly zero has no direction, so the zero vector is
	returned in place of a division by zero.

	Args:
		vec (Vector2): the vector to normalize, any 2-sequence is accepted.

	Returns:
		Vector2: the unit vector with the same direction, or (0, 0).
	"""
	norm = length(vec)
	if norm == 0.0:
		return Vector2.of(0.0, 0.0)

	with np.errstate(over='ignore', invalid='ignore'):
		return Vector2(np.float32(vec[0]) / norm, np.float32(vec[1]) / norm)

def perpendicular(vec: Vector2) -> Vector2:
	"""Rotate a vector by 90 degrees clockwise: (x, y) -> (y, -x)."""
	with np.errstate(over='ignore'):
		return Vector2(np.float32(vec[1]), -np.float32(vec[0]))

##############
