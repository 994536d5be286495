"""
Pole-based field implementations.

This module contains the point sources (poles) and the fields built by
superposing them. Every computation runs in single precision, so that the
overflow clamp and the accumulation saturate exactly as float32 does.
"""
__all__ = ['Pole2D', 'BoundedFlowField2D', 'DEFAULT_COEFFICIENT']

import logging

import numpy as np

from typing import List, Tuple

from flowfield.core.vectors import Vector2
from flowfield.fields.base import FlowField2D
from flowfield.fields.utils import clamp_overflow

DEFAULT_COEFFICIENT = 6.67


class Pole2D:
    """This class represents a point source exerting a force on the plane around it.

    The sign of `mass` decides whether the force points away from the pole
    or toward it; zero and negative masses are accepted as they are.
    """

    __slots__ = ('_location', '_mass')

    def __init__(self, x: float, y: float, mass: float):
        self._location = Vector2.of(x, y)
        with np.errstate(over='ignore'):
            self._mass = np.float32(mass)

    @property
    def location(self) -> Vector2:
        return self._location

    @property
    def mass(self) -> np.float32:
        return self._mass

    def get_force_vector(self, coefficient: float, point: Vector2) -> Vector2:
        """
        Compute the force this pole exerts at `point`, scaled by `coefficient`.

        Each axis is divided by the square of its own displacement only, so the
        two components do not share a denominator:

            fx = coefficient * mass / dx**2
            fy = coefficient * mass / dy**2

        A zero displacement divides by zero: the infinite result is clamped to
        the finite float32 bounds, while 0/0 stays NaN. No warning or error
        is ever raised.

        Args:
            coefficient: global scale of the field (any sign or magnitude)
            point: query point, any (x, y) sequence

        Returns:
            Vector2: the force components [fx, fy]
        """
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            dx = np.float32(point[0]) - self._location.x
            dy = np.float32(point[1]) - self._location.y

            num = np.float32(coefficient) * self._mass

            fx = num / (dx * dx)
            fy = num / (dy * dy)

        return Vector2(clamp_overflow(fx), clamp_overflow(fy))

    def __eq__(self, other):
        if not isinstance(other, Pole2D):
            return NotImplemented
        return self._location == other._location and self._mass == other._mass

    def __hash__(self):
        return hash((self._location, self._mass))

    def __repr__(self):
        return f"Pole2D(loc:({self._location.x}, {self._location.y}) mass:{self._mass})"


class BoundedFlowField2D(FlowField2D):
    """This class represents a flow field generated by a finite set of poles.

    The field is sampled at a point by summing the force of every pole, all
    scaled by the same `coefficient`. Nothing is cached: the result is always
    a function of the current poles and coefficient only.
    """

    def __init__(self, coefficient: float = DEFAULT_COEFFICIENT):
        self._poles: List[Pole2D] = []
        with np.errstate(over='ignore'):
            self._coefficient = np.float32(coefficient)

    @classmethod
    def default(cls) -> 'BoundedFlowField2D':
        """An empty field with the default coefficient."""
        return cls(DEFAULT_COEFFICIENT)

    @property
    def coefficient(self) -> np.float32:
        return self._coefficient

    @property
    def poles(self) -> Tuple[Pole2D, ...]:
        return tuple(self._poles)

    def get_vec(self, x: float, y: float) -> Vector2:
        """Sum the force of every pole at (x, y)."""

        point = Vector2.of(x, y)
        cur_x = np.float32(0.0)
        cur_y = np.float32(0.0)

        # sums of clamped forces may overflow again
        with np.errstate(over='ignore', invalid='ignore'):
            for pole in self._poles:
                fx, fy = pole.get_force_vector(self._coefficient, point)
                cur_x += fx
                cur_y += fy

        return Vector2(cur_x, cur_y)

    def add_pole(self, pole: Pole2D) -> None:
        assert isinstance(pole, Pole2D), f"object {pole} should be a Pole2D, found instead {pole.__class__.__name__}"

        self._poles.append(pole)
        logging.debug(f"Added {pole} to field, {len(self._poles)} poles in total")

    def __len__(self):
        return len(self._poles)

    def __repr__(self):
        return f"BoundedFlowField2D(coeff:{self._coefficient} poles:{len(self._poles)})"
