"""
Recurso Faixas Salariais.
"""

from .entities import CompensationBand
from .ports import CompensationBandRepository, InMemoryCompensationBandRepository

__all__ = [
    "CompensationBand",
    "CompensationBandRepository",
    "InMemoryCompensationBandRepository",
]
