"""
DTOs de Trabalhadores.

fullName é calculado e, por isso, não é ordenável.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from src.core.shared.dtos import ListQueryDTO
from src.core.shared.query import (
    OutputShape,
    Predicate,
    ShapeField,
    all_of,
    between,
    contains,
    equals,
    exact,
)

from .entities import Gender


RESOURCE_NAME = "Worker"

WORKER_SHAPE = OutputShape(RESOURCE_NAME, [
    ShapeField("id", "id"),
    ShapeField("prefix", "prefix"),
    ShapeField("firstName", "first_name"),
    ShapeField("middleName", "middle_name"),
    ShapeField("lastName", "last_name"),
    ShapeField("fullName", "full_name", orderable=False),
    ShapeField("workerNumber", "worker_number"),
    ShapeField("email", "email"),
    ShapeField("phone", "phone"),
    ShapeField("gender", "gender"),
    ShapeField("birthday", "birthday"),
    ShapeField("salary", "salary"),
    ShapeField("positionId", "position_id"),
    ShapeField("positionTitle", "position.title"),
    ShapeField("created", "created_at"),
    ShapeField("lastModified", "last_modified_at"),
])

SEARCH_FIELDS = ("last_name", "first_name", "email", "worker_number", "position.title")


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CreateWorkerCommand:
    """
    Dados de um novo trabalhador.

    Imutável (frozen=True) para garantir que dados validados
    não sejam alterados acidentalmente.
    """

    first_name: str
    last_name: str
    email: str
    worker_number: str
    position_id: str
    salary: Decimal
    birthday: date
    gender: Gender
    middle_name: Optional[str] = None
    prefix: Optional[str] = None
    phone: Optional[str] = None


@dataclass(frozen=True)
class UpdateWorkerCommand:
    id: str
    first_name: str
    last_name: str
    email: str
    worker_number: str
    position_id: str
    salary: Decimal
    birthday: date
    gender: Gender
    middle_name: Optional[str] = None
    prefix: Optional[str] = None
    phone: Optional[str] = None


# =============================================================================
# QUERY DTOs (Listagem)
# =============================================================================

@dataclass(frozen=True)
class WorkerListQueryDTO(ListQueryDTO):
    """
    Listagem de trabalhadores.

    Filtros de texto usam substring sem diferenciar maiúsculas/minúsculas;
    faixas de salário e nascimento são inclusivas.

    Example:
        query = WorkerListQueryDTO(first_name="John", page_size=20)
        response = await ListWorkersService(repo).execute(query)
    """

    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    worker_number: Optional[str] = None
    phone: Optional[str] = None
    prefix: Optional[str] = None
    position_title: Optional[str] = None
    position_id: Optional[str] = None
    gender: Optional[Gender] = None
    salary_min: Optional[Decimal] = None
    salary_max: Optional[Decimal] = None
    birthday_from: Optional[date] = None
    birthday_to: Optional[date] = None

    def to_predicate(self) -> Predicate:
        return all_of(
            contains("first_name", self.first_name),
            contains("middle_name", self.middle_name),
            contains("last_name", self.last_name),
            contains("email", self.email),
            contains("worker_number", self.worker_number),
            contains("phone", self.phone),
            contains("prefix", self.prefix),
            contains("position.title", self.position_title),
            exact("position_id", self.position_id),
            equals("gender", self.gender),
            between("salary", self.salary_min, self.salary_max),
            between("birthday", self.birthday_from, self.birthday_to),
        )
