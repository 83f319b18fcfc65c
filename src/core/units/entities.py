"""
Entidade Unidade Organizacional.

Unidade (departamento) à qual os cargos pertencem.
"""

from dataclasses import dataclass

from src.core.shared.entities import AuditedEntity


@dataclass
class OrganizationalUnit(AuditedEntity):
    """
    Unidade organizacional.

    Attributes:
        name: Nome da unidade
    """

    name: str = ""
