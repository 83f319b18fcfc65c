"""
Use Cases de Cargos.
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

from .dtos import POSITION_SHAPE, RESOURCE_NAME, SEARCH_FIELDS
from .entities import JobPosition


class _PositionService:
    resource_name = RESOURCE_NAME
    shape = POSITION_SHAPE


class GetJobPositionByIdService(_PositionService, GetByIdService[JobPosition]):
    pass


class CreateJobPositionService(_PositionService, CreateService[JobPosition]):
    entity_class = JobPosition


class UpdateJobPositionService(_PositionService, UpdateService[JobPosition]):
    pass


class DeleteJobPositionService(_PositionService, DeleteService[JobPosition]):
    pass


class ListJobPositionsService(_PositionService, ListService[JobPosition]):
    pass


class PagedJobPositionsService(_PositionService, PagedTableService[JobPosition]):
    search_fields = SEARCH_FIELDS
    table_columns = ("title", "number", "unitName", "bandName")
    default_order = "title"


class CountJobPositionsService(_PositionService, CountService[JobPosition]):
    pass
