"""
Entidade Faixa Salarial.

Faixa de remuneração associada a cargos. A regra min_salary < max_salary
é validada antes do core.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.core.shared.entities import AuditedEntity


@dataclass
class CompensationBand(AuditedEntity):
    """
    Faixa salarial.

    Attributes:
        name: Nome da faixa (ex: "Level 3")
        min_salary: Salário mínimo
        max_salary: Salário máximo
    """

    name: str = ""
    min_salary: Decimal = Decimal("0")
    max_salary: Decimal = Decimal("0")

    def contains_salary(self, salary: Decimal) -> bool:
        """Verifica se um salário está dentro da faixa (inclusivo)."""
        return self.min_salary <= salary <= self.max_salary
