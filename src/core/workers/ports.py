"""
Ports (Interfaces) do recurso Trabalhador.

Além do contrato genérico, o repositório de trabalhadores expõe a
verificação de unicidade da matrícula, consumida pelos validadores.
"""

from dataclasses import replace
from typing import Optional, Protocol, runtime_checkable

from src.core.positions.ports import InMemoryJobPositionRepository
from src.core.shared.interfaces import InMemoryRepository, Repository

from .dtos import WORKER_SHAPE
from .entities import Worker


@runtime_checkable
class WorkerRepository(Repository[Worker], Protocol):
    """Persistência de trabalhadores."""

    async def is_unique_worker_number(self, number: str) -> bool:
        """
        Verifica se nenhum trabalhador usa a matrícula informada.

        Args:
            number: Matrícula

        Returns:
            True se a matrícula está livre
        """
        ...


class InMemoryWorkerRepository(InMemoryRepository[Worker]):
    """
    Implementação em memória.

    Com um repositório de cargos, a navegação position é preenchida a
    partir de position_id.
    """

    shape = WORKER_SHAPE

    def __init__(self, position_repository: Optional[InMemoryJobPositionRepository] = None):
        super().__init__()
        self.position_repository = position_repository

    def _hydrate(self, entity: Worker) -> Worker:
        if self.position_repository is None:
            return entity
        return replace(entity, position=self.position_repository.peek(entity.position_id))

    async def is_unique_worker_number(self, number: str) -> bool:
        return all(w.worker_number != number for w in self._items.values())
