"""
DTOs de Faixas Salariais.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from src.core.shared.dtos import ListQueryDTO
from src.core.shared.query import OutputShape, Predicate, ShapeField, all_of, between, contains


RESOURCE_NAME = "CompensationBand"

BAND_SHAPE = OutputShape(RESOURCE_NAME, [
    ShapeField("id", "id"),
    ShapeField("name", "name"),
    ShapeField("minSalary", "min_salary"),
    ShapeField("maxSalary", "max_salary"),
    ShapeField("created", "created_at"),
    ShapeField("lastModified", "last_modified_at"),
])

SEARCH_FIELDS = ("name",)


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CreateCompensationBandCommand:
    name: str
    min_salary: Decimal
    max_salary: Decimal


@dataclass(frozen=True)
class UpdateCompensationBandCommand:
    id: str
    name: str
    min_salary: Decimal
    max_salary: Decimal


# =============================================================================
# QUERY DTOs (Listagem)
# =============================================================================

@dataclass(frozen=True)
class CompensationBandListQueryDTO(ListQueryDTO):
    """
    Listagem de faixas salariais.

    Attributes:
        name: Substring do nome
        salary_from: Limite inferior para min_salary (inclusivo)
        salary_to: Limite superior para max_salary (inclusivo)
    """

    name: Optional[str] = None
    salary_from: Optional[Decimal] = None
    salary_to: Optional[Decimal] = None

    def to_predicate(self) -> Predicate:
        return all_of(
            contains("name", self.name),
            between("min_salary", lower=self.salary_from),
            between("max_salary", upper=self.salary_to),
        )
