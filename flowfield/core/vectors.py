__all__ = ['Vector2', 'Vector3']

import numpy as np

from numpy.typing import NDArray
from typing import NamedTuple


class Vector2(NamedTuple):
	"""A 2D vector, stored as a fixed (x, y) pair of float32 components."""

	x: np.float32
	y: np.float32

	@classmethod
	def of(cls, x, y) -> 'Vector2':
		"""Build a vector casting both components to float32."""
		with np.errstate(over='ignore'):
			return cls(np.float32(x), np.float32(y))

	def to_array(self) -> NDArray:
		return np.array([self.x, self.y], dtype=np.float32)


class Vector3(NamedTuple):
	"""A 3D vector. No field uses it yet."""

	x: np.float32
	y: np.float32
	z: np.float32

	@classmethod
	def of(cls, x, y, z) -> 'Vector3':
		with np.errstate(over='ignore'):
			return cls(np.float32(x), np.float32(y), np.float32(z))

	def to_array(self) -> NDArray:
		return np.array([self.x, self.y, self.z], dtype=np.float32)
