"""
Concrete field implementations.

This package contains all the concrete field implementations, organized by type:
- pole_fields: Point sources and the fields obtained by superposing them

These implementations are not meant to be imported directly by users.
Use the factory interface in the parent module instead.
"""

from .pole_fields import *
