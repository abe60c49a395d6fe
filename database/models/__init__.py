"""
Database models package
"""

from .schema import (
    Base,
    PermittedRoute,
    Segment
)

__all__ = [
    'Base',
    'PermittedRoute',
    'Segment'
]
