"""
Use Cases de Faixas Salariais.

A listagem para grid ordena por nome quando nenhuma coluna é informada.
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

from .dtos import BAND_SHAPE, RESOURCE_NAME, SEARCH_FIELDS
from .entities import CompensationBand


class _BandService:
    resource_name = RESOURCE_NAME
    shape = BAND_SHAPE


class GetCompensationBandByIdService(_BandService, GetByIdService[CompensationBand]):
    pass


class CreateCompensationBandService(_BandService, CreateService[CompensationBand]):
    entity_class = CompensationBand


class UpdateCompensationBandService(_BandService, UpdateService[CompensationBand]):
    pass


class DeleteCompensationBandService(_BandService, DeleteService[CompensationBand]):
    pass


class ListCompensationBandsService(_BandService, ListService[CompensationBand]):
    pass


class PagedCompensationBandsService(_BandService, PagedTableService[CompensationBand]):
    search_fields = SEARCH_FIELDS
    table_columns = ("name", "minSalary", "maxSalary")
    default_order = "name"


class CountCompensationBandsService(_BandService, CountService[CompensationBand]):
    pass
