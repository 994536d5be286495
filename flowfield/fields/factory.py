"""
Field factory and user-facing interface.

This module provides the main entry point for creating fields. Users should
import `get_field` from this module to create field instances without needing
to know about the internal implementation details.

Example usage:
    from flowfield.fields.factory import get_field

    # An empty field with the default coefficient
    field = get_field("bounded")

    # A field with two opposite poles and a custom coefficient
    field = get_field("bounded", {
        "coefficient": 1.0,
        "poles": [(-1.0, 0.0, 5.0), (1.0, 0.0, -5.0)]
    })
"""

import logging

from typing import Dict, Optional

from flowfield.fields.base import FlowField2D
from flowfield.fields.implementations.pole_fields import Pole2D, BoundedFlowField2D, DEFAULT_COEFFICIENT


def _as_pole(pole) -> Pole2D:
    if isinstance(pole, Pole2D):
        return pole

    try:
        x, y, mass = pole
    except (TypeError, ValueError):
        raise ValueError(f"A pole must be a Pole2D or an (x, y, mass) triple, found {pole!r}")

    return Pole2D(x, y, mass)


def get_field(field_type: str, params: Optional[Dict] = None) -> FlowField2D:
    """
    Factory function to create field instances based on type and parameters.

    This is the main user-facing interface for creating fields. It handles
    parameter processing and returns configured field instances.

    Args:
        field_type: String identifying the field type. Supported types:
            - "bounded": Field generated by a finite set of poles

        params: Dictionary of field parameters:
            - coefficient: Global scale of every pole force (default 6.67)
            - poles: Sequence of Pole2D or (x, y, mass) triples, added in order

    Returns:
        FlowField2D: Configured field instance ready for use

    Raises:
        ValueError: If field_type is not recognized, or a pole is malformed
    """

    params = dict(params) if params is not None else {}  # Don't modify original

    if field_type == "bounded":
        field = BoundedFlowField2D(coefficient=params.pop("coefficient", DEFAULT_COEFFICIENT))
    else:
        raise ValueError(f"Unknown field type: {field_type}. "
                         f"Supported types: bounded")

    field.add_poles(_as_pole(p) for p in params.pop("poles", ()))

    if params:
        logging.warning(f"Ignoring unknown field parameters: {', '.join(params)}")

    logging.debug(f"Created {field}")
    return field
