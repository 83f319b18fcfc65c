"""
Recurso Unidades Organizacionais.
"""

from .entities import OrganizationalUnit
from .ports import OrganizationalUnitRepository, InMemoryOrganizationalUnitRepository

__all__ = [
    "OrganizationalUnit",
    "OrganizationalUnitRepository",
    "InMemoryOrganizationalUnitRepository",
]
