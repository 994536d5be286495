"""
Flow fields generated by point-like poles.

This module defines 2D vector fields through the superposition of poles:
- Poles exerting an inverse-square force along each axis
- Fields summing the contribution of every pole at a query point
- Normalized and perpendicular variants for flow-following behaviors

Main user interface:
    from flowfield.fields import get_field, Pole2D

    field = get_field("bounded", {"coefficient": 6.67})
    field.add_pole(Pole2D(0.0, 0.0, 10.0))
    heading = field.get_perp_normalized_vec(1.0, 2.0)

Available field types:
    - "bounded": Field generated by a finite set of poles
"""

# Main user-facing interface
from .factory import get_field

# Abstract base class (for advanced users extending the library)
from .base import FlowField2D

from .implementations.pole_fields import Pole2D, BoundedFlowField2D, DEFAULT_COEFFICIENT
from .utils import sample_grid
