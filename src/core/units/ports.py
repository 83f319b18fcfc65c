"""
Ports (Interfaces) do recurso Unidade Organizacional.
"""

from typing import Protocol, runtime_checkable

from src.core.shared.interfaces import InMemoryRepository, Repository

from .dtos import UNIT_SHAPE
from .entities import OrganizationalUnit


@runtime_checkable
class OrganizationalUnitRepository(Repository[OrganizationalUnit], Protocol):
    """Persistência de unidades organizacionais."""


class InMemoryOrganizationalUnitRepository(InMemoryRepository[OrganizationalUnit]):
    """Implementação em memória (testes e prototipagem)."""

    shape = UNIT_SHAPE
