"""
Recurso Cargos.
"""

from .entities import JobPosition
from .ports import JobPositionRepository, InMemoryJobPositionRepository

__all__ = [
    "JobPosition",
    "JobPositionRepository",
    "InMemoryJobPositionRepository",
]
