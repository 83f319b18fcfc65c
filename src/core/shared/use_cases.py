"""
Use Cases genéricos de recurso.

Cada recurso (unidades, trabalhadores, cargos, faixas salariais) expõe o
mesmo conjunto de operações. Os services daqui implementam o fluxo uma
única vez; as subclasses de cada recurso apenas configuram atributos de
classe:

- resource_name: nome usado nas mensagens ("Worker Not Found.")
- shape: OutputShape do recurso
- entity_class: classe da entidade (Create)
- search_fields: campos da busca livre (PagedTable)
- table_columns / default_order: ordenação por índice de coluna (PagedTable)

Use Cases implementados:
- GetByIdService: Obtém registro projetado pelos campos canônicos
- CreateService: Cria entidade a partir do comando
- UpdateService: Sobrescreve campos mutáveis de entidade existente
- DeleteService: Remove entidade existente
- ListService: Listagem filtrada (AND), ordenada, paginada e projetada
- PagedTableService: Listagem para grid com busca livre (OR)
- CountService: Contagem de registros filtrados

Princípios:
- Um Use Case = Uma operação
- Dependências injetadas (DI)
- Fluxo linear, sem retries
- asyncio.CancelledError e erros de armazenamento propagam sem tratamento
"""

import logging
from dataclasses import fields as dataclass_fields
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from .dtos import ListQueryDTO, QuerySpecification, TableQueryDTO
from .exceptions import EntityNotFoundError
from .interfaces import Repository
from .query.fields import OutputShape, resolve_fields, validate_fields
from .query.filters import search_predicate
from .query.paging import PageWindow
from .query.shaping import shape_record
from .responses import PagedResponse, PagedTableResponse, Response

logger = logging.getLogger(__name__)

T = TypeVar("T")


def command_values(command: Any) -> Dict[str, Any]:
    """Campos do comando, exceto o identificador."""
    return {
        f.name: getattr(command, f.name)
        for f in dataclass_fields(command)
        if f.name != "id"
    }


class ResourceService(Generic[T]):
    """Base dos services: guarda o repositório injetado."""

    resource_name: str = ""
    shape: OutputShape

    def __init__(self, repository: Repository[T]):
        self.repository = repository

    async def _require(self, entity_id: str) -> T:
        """Busca a entidade ou levanta EntityNotFoundError."""
        entity = await self.repository.get_by_id(entity_id)
        if entity is None:
            logger.debug(f"{self.resource_name} {entity_id} não encontrado")
            raise EntityNotFoundError.for_resource(self.resource_name, entity_id)
        return entity


# =============================================================================
# Operações por ID
# =============================================================================

class GetByIdService(ResourceService[T]):
    """
    Use Case: Obter um registro por ID.

    Retorna a projeção canônica (todos os campos do shape) como dicionário.
    Chamadas repetidas sem escrita intermediária retornam resultados iguais.

    Raises:
        EntityNotFoundError: Se o ID não existe
    """

    async def execute(self, entity_id: str) -> Response[Dict[str, Any]]:
        entity = await self._require(entity_id)
        return Response.ok(shape_record(entity, self.shape))


class CreateService(ResourceService[T]):
    """
    Use Case: Criar registro.

    Copia campo a campo o comando para uma nova entidade (ID gerado pela
    entidade) e persiste via repositório.

    Example:
        service = CreateWorkerService(worker_repo)
        response = await service.execute(CreateWorkerCommand(first_name="John", ...))
        response.data  # ID do novo registro
    """

    entity_class: Type[T]

    async def execute(self, command: Any) -> Response[str]:
        entity = self.entity_class.create(**command_values(command))
        await self.repository.add(entity)
        logger.info(f"{self.resource_name} criado: {entity.id}")
        return Response.ok(entity.id)


class UpdateService(ResourceService[T]):
    """
    Use Case: Atualizar registro.

    Fluxo:
    1. Buscar entidade pelo ID do comando
    2. Se não existe, EntityNotFoundError (nenhuma escrita é feita)
    3. Sobrescrever campos mutáveis
    4. Persistir

    Raises:
        EntityNotFoundError: Se o ID não existe
    """

    async def execute(self, command: Any) -> Response[str]:
        entity = await self._require(command.id)

        for name, value in command_values(command).items():
            setattr(entity, name, value)

        await self.repository.update(entity)
        logger.info(f"{self.resource_name} atualizado: {entity.id}")
        return Response.ok(entity.id)


class DeleteService(ResourceService[T]):
    """
    Use Case: Remover registro.

    Raises:
        EntityNotFoundError: Se o ID não existe (delete não é chamado)
    """

    async def execute(self, entity_id: str) -> Response[str]:
        entity = await self._require(entity_id)
        await self.repository.delete(entity)
        logger.info(f"{self.resource_name} removido: {entity_id}")
        return Response.ok(entity_id)


# =============================================================================
# Consultas (leitura)
# =============================================================================

class ListService(ResourceService[T]):
    """
    Use Case: Listagem filtrada e paginada.

    Fluxo:
    1. Validar campos pedidos (fallback: campos canônicos)
    2. Validar order_by (tokens inválidos são descartados)
    3. Montar predicado AND a partir dos filtros do DTO
    4. Consultar o repositório com a especificação
    5. Envelopar com metadados de paginação
    """

    async def execute(self, query: ListQueryDTO) -> PagedResponse[List[Dict[str, Any]]]:
        window = PageWindow.normalize(query.page_number, query.page_size)
        spec = QuerySpecification(
            predicate=query.to_predicate(),
            fields=resolve_fields(self.shape, query.fields),
            order_by=validate_fields(self.shape, query.order_by),
            window=window,
        )

        data, counts = await self.repository.get_response(spec)
        return PagedResponse.build(data, window, counts)


class PagedTableService(ResourceService[T]):
    """
    Use Case: Listagem para grid.

    Mesmo pipeline do ListService, mas o filtro é a busca livre (OR sobre
    search_fields). A ordenação por índice de coluna usa table_columns e,
    sem ordenação válida, cai em default_order.
    """

    search_fields: Sequence[str] = ()
    table_columns: Sequence[str] = ()
    default_order: Optional[str] = None

    def _order_expression(self, query: TableQueryDTO) -> str:
        if query.order:
            columns = [
                f"{self.table_columns[o.column]} {o.direction}"
                for o in query.order
                if 0 <= o.column < len(self.table_columns)
            ]
            validated = validate_fields(self.shape, ",".join(columns))
            if validated:
                return validated

        validated = validate_fields(self.shape, query.order_by)
        return validated or validate_fields(self.shape, self.default_order)

    async def execute(self, query: TableQueryDTO) -> PagedTableResponse[Dict[str, Any]]:
        spec = QuerySpecification(
            predicate=search_predicate(query.search_value, self.search_fields),
            fields=resolve_fields(self.shape, query.fields),
            order_by=self._order_expression(query),
            window=query.window(),
        )

        data, counts = await self.repository.get_response(spec)
        return PagedTableResponse.build(data, query.draw, counts)


class CountService(ResourceService[T]):
    """Use Case: Contar registros que satisfazem os filtros do DTO."""

    async def execute(self, query: ListQueryDTO) -> Response[int]:
        total = await self.repository.count(query.to_predicate())
        return Response.ok(total)
