"""
DTOs de Cargos.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared.dtos import ListQueryDTO
from src.core.shared.query import OutputShape, Predicate, ShapeField, all_of, contains, exact


RESOURCE_NAME = "JobPosition"

POSITION_SHAPE = OutputShape(RESOURCE_NAME, [
    ShapeField("id", "id"),
    ShapeField("title", "title"),
    ShapeField("number", "number"),
    ShapeField("description", "description"),
    ShapeField("unitId", "unit_id"),
    ShapeField("unitName", "unit.name"),
    ShapeField("bandId", "band_id"),
    ShapeField("bandName", "band.name"),
    ShapeField("created", "created_at"),
    ShapeField("lastModified", "last_modified_at"),
])

SEARCH_FIELDS = ("title", "number", "unit.name", "band.name")


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CreateJobPositionCommand:
    """
    Attributes:
        title: Título do cargo
        number: Código do cargo
        description: Descrição
        unit_id: ID da unidade
        band_id: ID da faixa salarial
    """

    title: str
    number: str
    description: str
    unit_id: str
    band_id: str


@dataclass(frozen=True)
class UpdateJobPositionCommand:
    id: str
    title: str
    number: str
    description: str
    unit_id: str
    band_id: str


# =============================================================================
# QUERY DTOs (Listagem)
# =============================================================================

@dataclass(frozen=True)
class JobPositionListQueryDTO(ListQueryDTO):
    """
    Listagem de cargos.

    Attributes:
        title: Substring do título
        number: Substring do código
        unit_name: Substring do nome da unidade
        unit_id: Unidade exata
        band_id: Faixa salarial exata
    """

    title: Optional[str] = None
    number: Optional[str] = None
    unit_name: Optional[str] = None
    unit_id: Optional[str] = None
    band_id: Optional[str] = None

    def to_predicate(self) -> Predicate:
        return all_of(
            contains("title", self.title),
            contains("number", self.number),
            contains("unit.name", self.unit_name),
            exact("unit_id", self.unit_id),
            exact("band_id", self.band_id),
        )
