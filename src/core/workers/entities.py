"""
Entidade Trabalhador.

Entidades:
- Worker: trabalhador vinculado a um cargo
- Gender: gênero declarado
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from src.core.positions.entities import JobPosition
from src.core.shared.entities import AuditedEntity


class Gender(Enum):
    """Gênero declarado do trabalhador."""

    MALE = "Male"
    FEMALE = "Female"


@dataclass
class Worker(AuditedEntity):
    """
    Trabalhador.

    Attributes:
        first_name: Primeiro nome
        middle_name: Nome do meio
        last_name: Sobrenome
        position_id: ID do cargo
        salary: Salário
        birthday: Data de nascimento
        email: E-mail
        gender: Gênero
        worker_number: Matrícula (única)
        prefix: Tratamento (ex: "Mr.")
        phone: Telefone
        position: Navegação para o cargo (somente leitura)
    """

    first_name: str = ""
    middle_name: Optional[str] = None
    last_name: str = ""
    position_id: Optional[str] = None
    salary: Decimal = Decimal("0")
    birthday: Optional[date] = None
    email: str = ""
    gender: Gender = Gender.MALE
    worker_number: str = ""
    prefix: Optional[str] = None
    phone: Optional[str] = None
    position: Optional[JobPosition] = field(default=None, repr=False, compare=False)

    @property
    def full_name(self) -> str:
        """Nome completo (primeiro, meio e sobrenome)."""
        parts = (self.first_name, self.middle_name, self.last_name)
        return " ".join(p for p in parts if p)
