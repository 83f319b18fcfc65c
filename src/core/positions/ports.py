"""
Ports (Interfaces) do recurso Cargo.

Além do contrato genérico, o repositório de cargos expõe a verificação
de unicidade do código, consumida pelos validadores de entrada.
"""

from dataclasses import replace
from typing import Optional, Protocol, runtime_checkable

from src.core.bands.ports import InMemoryCompensationBandRepository
from src.core.shared.interfaces import InMemoryRepository, Repository
from src.core.units.ports import InMemoryOrganizationalUnitRepository

from .dtos import POSITION_SHAPE
from .entities import JobPosition


@runtime_checkable
class JobPositionRepository(Repository[JobPosition], Protocol):
    """Persistência de cargos."""

    async def is_unique_position_number(self, number: str) -> bool:
        """
        Verifica se nenhum cargo usa o código informado.

        Args:
            number: Código do cargo

        Returns:
            True se o código está livre
        """
        ...


class InMemoryJobPositionRepository(InMemoryRepository[JobPosition]):
    """
    Implementação em memória.

    Recebe opcionalmente os repositórios de unidades e faixas para
    preencher as navegações unit e band.

    Example:
        units = InMemoryOrganizationalUnitRepository()
        repo = InMemoryJobPositionRepository(unit_repository=units)
    """

    shape = POSITION_SHAPE

    def __init__(
        self,
        unit_repository: Optional[InMemoryOrganizationalUnitRepository] = None,
        band_repository: Optional[InMemoryCompensationBandRepository] = None,
    ):
        super().__init__()
        self.unit_repository = unit_repository
        self.band_repository = band_repository

    def _hydrate(self, entity: JobPosition) -> JobPosition:
        unit = entity.unit
        band = entity.band
        if self.unit_repository is not None:
            unit = self.unit_repository.peek(entity.unit_id)
        if self.band_repository is not None:
            band = self.band_repository.peek(entity.band_id)
        return replace(entity, unit=unit, band=band)

    async def is_unique_position_number(self, number: str) -> bool:
        return all(p.number != number for p in self._items.values())
