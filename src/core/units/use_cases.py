"""
Use Cases de Unidades Organizacionais.

Configuração dos services genéricos para o recurso:
- GetOrganizationalUnitByIdService
- CreateOrganizationalUnitService
- UpdateOrganizationalUnitService
- DeleteOrganizationalUnitService
- ListOrganizationalUnitsService
- PagedOrganizationalUnitsService
- CountOrganizationalUnitsService
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

from .dtos import RESOURCE_NAME, SEARCH_FIELDS, UNIT_SHAPE
from .entities import OrganizationalUnit


class _UnitService:
    resource_name = RESOURCE_NAME
    shape = UNIT_SHAPE


class GetOrganizationalUnitByIdService(_UnitService, GetByIdService[OrganizationalUnit]):
    pass


class CreateOrganizationalUnitService(_UnitService, CreateService[OrganizationalUnit]):
    entity_class = OrganizationalUnit


class UpdateOrganizationalUnitService(_UnitService, UpdateService[OrganizationalUnit]):
    pass


class DeleteOrganizationalUnitService(_UnitService, DeleteService[OrganizationalUnit]):
    pass


class ListOrganizationalUnitsService(_UnitService, ListService[OrganizationalUnit]):
    pass


class PagedOrganizationalUnitsService(_UnitService, PagedTableService[OrganizationalUnit]):
    search_fields = SEARCH_FIELDS
    table_columns = ("name",)
    default_order = "name"


class CountOrganizationalUnitsService(_UnitService, CountService[OrganizationalUnit]):
    pass
