"""
DTOs de Unidades Organizacionais.

- Comandos de criação/atualização (imutáveis)
- Query de listagem com filtro por nome
- Formato de saída (UNIT_SHAPE) e campos da busca livre
"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared.dtos import ListQueryDTO
from src.core.shared.query import OutputShape, Predicate, ShapeField, all_of, contains


RESOURCE_NAME = "OrganizationalUnit"

UNIT_SHAPE = OutputShape(RESOURCE_NAME, [
    ShapeField("id", "id"),
    ShapeField("name", "name"),
    ShapeField("created", "created_at"),
    ShapeField("lastModified", "last_modified_at"),
])

SEARCH_FIELDS = ("name",)


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CreateOrganizationalUnitCommand:
    name: str


@dataclass(frozen=True)
class UpdateOrganizationalUnitCommand:
    id: str
    name: str


# =============================================================================
# QUERY DTOs (Listagem)
# =============================================================================

@dataclass(frozen=True)
class OrganizationalUnitListQueryDTO(ListQueryDTO):
    """
    Listagem de unidades.

    Attributes:
        name: Substring do nome (sem diferenciar maiúsculas/minúsculas)
    """

    name: Optional[str] = None

    def to_predicate(self) -> Predicate:
        return all_of(contains("name", self.name))
