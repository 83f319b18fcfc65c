"""
Ports (Interfaces) do recurso Faixa Salarial.
"""

from typing import Protocol, runtime_checkable

from src.core.shared.interfaces import InMemoryRepository, Repository

from .dtos import BAND_SHAPE
from .entities import CompensationBand


@runtime_checkable
class CompensationBandRepository(Repository[CompensationBand], Protocol):
    """Persistência de faixas salariais."""


class InMemoryCompensationBandRepository(InMemoryRepository[CompensationBand]):
    """Implementação em memória (testes e prototipagem)."""

    shape = BAND_SHAPE
