"""
Abstract base classes for flow field definitions.

This module contains only the core abstraction that all flow fields must implement.
No concrete implementations are included here to keep the interface clean.
"""

from abc import ABC, abstractmethod
from typing import Iterable, TYPE_CHECKING

from flowfield.core.vectors import Vector2
from flowfield.core.utils import normalize, perpendicular

if TYPE_CHECKING:
    from flowfield.fields.implementations.pole_fields import Pole2D


class FlowField2D(ABC):
    """
    Abstract base class for all 2D flow fields.

    A flow field maps a point of the plane to a force vector, obtained by
    superposing the contribution of every pole it holds. Besides the raw
    vector, it exposes the normalized and perpendicular variants used to steer
    agents along field lines instead of toward or away from the sources.

    Subclasses implement `get_vec` and `add_pole`; the derived queries are
    built on top of them.
    """

    @abstractmethod
    def get_vec(self, x: float, y: float) -> Vector2:
        """
        Compute the field vector at a given point.

        Args:
            x, y: coordinates of the query point

        Returns:
            Vector2: the sum of the force of every pole at (x, y)
        """
        pass

    @abstractmethod
    def add_pole(self, pole: 'Pole2D') -> None:
        """Append a pole to the field."""
        pass

    def add_poles(self, poles: Iterable['Pole2D']) -> None:
        """Append every pole of `poles`, in order."""
        for pole in poles:
            self.add_pole(pole)

    def get_normalized_vec(self, x: float, y: float) -> Vector2:
        """Unit vector of the field at (x, y), or (0, 0) where the field vanishes."""
        return normalize(self.get_vec(x, y))

    def get_perp_vec(self, x: float, y: float) -> Vector2:
        """Field vector rotated 90 degrees clockwise. Not normalized."""
        return perpendicular(self.get_vec(x, y))

    def get_perp_normalized_vec(self, x: float, y: float) -> Vector2:
        """Unit vector perpendicular to the field at (x, y), or (0, 0) where the field vanishes."""
        return normalize(self.get_perp_vec(x, y))

    def __call__(self, x: float, y: float) -> Vector2:
        """Sample the field at (x, y)."""
        return self.get_vec(x, y)
