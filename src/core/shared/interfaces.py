"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define a interface genérica de repositório que os Adapters
devem implementar. É o "Port" de persistência da Arquitetura Hexagonal.

Todas as operações são assíncronas. Cancelamento
(asyncio.CancelledError) e falhas de armazenamento propagam sem
tratamento para o chamador.

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Protocol, Tuple, TypeVar

from .dtos import QuerySpecification
from .query.engine import execute_query
from .query.fields import OutputShape
from .query.filters import Predicate
from .query.paging import RecordsCount

logger = logging.getLogger(__name__)


# Type variable para entidades genéricas
T = TypeVar("T")


class Repository(Protocol[T]):
    """
    Interface genérica de repositório assíncrono.

    Implementações:
    - DjangoRepository (ORM assíncrono do Django)
    - InMemoryRepository (para testes)

    Methods:
        get_by_id: Busca por ID (None se não existe)
        add: Insere nova entidade
        update: Persiste alterações de entidade existente
        delete: Remove entidade
        get_all: Lista todas as entidades
        count: Conta entidades que satisfazem um predicado
        get_response: Executa consulta paginada e projetada
    """

    async def get_by_id(self, entity_id: str) -> Optional[T]:
        ...

    async def add(self, entity: T) -> T:
        ...

    async def update(self, entity: T) -> None:
        ...

    async def delete(self, entity: T) -> None:
        ...

    async def get_all(self) -> List[T]:
        ...

    async def count(self, predicate: Optional[Predicate] = None) -> int:
        ...

    async def get_response(
        self, spec: QuerySpecification
    ) -> Tuple[List[Dict[str, Any]], RecordsCount]:
        """
        Executa a consulta.

        Returns:
            (registros projetados da página, contagens total/filtrado)
        """
        ...


class InMemoryRepository(Generic[T]):
    """
    Implementação em memória do Repository.

    Útil para:
    - Testes unitários
    - Prototipagem
    - Desenvolvimento local

    Não usar em produção!

    Subclasses definem `shape` (formato de saída do recurso) e podem
    sobrescrever `_hydrate` para preencher navegações.

    Example:
        repo = InMemoryUnitRepository()
        await repo.add(unit)
        rows, counts = await repo.get_response(spec)
    """

    shape: OutputShape

    def __init__(self):
        self._items: Dict[str, T] = {}

    def _hydrate(self, entity: T) -> T:
        """
        Cópia da entidade armazenada, com navegações preenchidas.

        Quem recebe a entidade pode alterá-la sem afetar o armazenamento
        até chamar update().
        """
        return replace(entity)

    def peek(self, entity_id: Optional[str]) -> Optional[T]:
        """Acesso síncrono, usado para compor navegações entre repositórios em memória."""
        if entity_id is None:
            return None
        return self._items.get(entity_id)

    async def get_by_id(self, entity_id: str) -> Optional[T]:
        entity = self._items.get(entity_id)
        if entity is None:
            logger.debug(f"{self.shape.name} {entity_id} não encontrado em memória")
            return None
        return self._hydrate(entity)

    async def add(self, entity: T) -> T:
        self._items[entity.id] = entity
        return entity

    async def update(self, entity: T) -> None:
        """Substitui o registro e atualiza last_modified_at, como o banco."""
        entity.last_modified_at = datetime.now(timezone.utc)
        self._items[entity.id] = entity

    async def delete(self, entity: T) -> None:
        self._items.pop(entity.id, None)

    async def get_all(self) -> List[T]:
        return [self._hydrate(e) for e in self._items.values()]

    async def count(self, predicate: Optional[Predicate] = None) -> int:
        entities = await self.get_all()
        if predicate is None:
            return len(entities)
        return sum(1 for e in entities if predicate(e))

    async def get_response(
        self, spec: QuerySpecification
    ) -> Tuple[List[Dict[str, Any]], RecordsCount]:
        return execute_query(await self.get_all(), spec, self.shape)
