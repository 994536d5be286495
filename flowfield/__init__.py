"""
Flowfield: 2D vector fields generated by point-like poles.

Each pole exerts an inverse-square force, as a mass or a charge would, and a
field superposes the force of all its poles at a query point.
Besides the raw force, a field gives its normalized direction and the
perpendicular variants: an agent following the perpendicular circles around
the poles along the field lines, instead of falling toward them or fleeing.

Limitations: the force law is evaluated independently along each axis, and every
query costs one evaluation per pole (no spatial acceleration structure).
"""

from . import core, fields

__all__ = ["core", "fields"]
