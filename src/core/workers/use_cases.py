"""
Use Cases de Trabalhadores.

Use Cases implementados:
- GetWorkerByIdService: Obtém trabalhador (projeção canônica)
- CreateWorkerService: Cria trabalhador
- UpdateWorkerService: Atualiza trabalhador existente
- DeleteWorkerService: Remove trabalhador existente
- ListWorkersService: Listagem com filtros por campo
- PagedWorkersService: Grid com busca livre
- CountWorkersService: Contagem com filtros por campo
"""

from src.core.shared.use_cases import (
    CountService,
    CreateService,
    DeleteService,
    GetByIdService,
    ListService,
    PagedTableService,
    UpdateService,
)

from .dtos import RESOURCE_NAME, SEARCH_FIELDS, WORKER_SHAPE
from .entities import Worker


class _WorkerService:
    resource_name = RESOURCE_NAME
    shape = WORKER_SHAPE


class GetWorkerByIdService(_WorkerService, GetByIdService[Worker]):
    pass


class CreateWorkerService(_WorkerService, CreateService[Worker]):
    entity_class = Worker


class UpdateWorkerService(_WorkerService, UpdateService[Worker]):
    pass


class DeleteWorkerService(_WorkerService, DeleteService[Worker]):
    pass


class ListWorkersService(_WorkerService, ListService[Worker]):
    pass


class PagedWorkersService(_WorkerService, PagedTableService[Worker]):
    search_fields = SEARCH_FIELDS
    table_columns = ("lastName", "firstName", "email", "workerNumber", "positionTitle")
    default_order = "lastName"


class CountWorkersService(_WorkerService, CountService[Worker]):
    pass
