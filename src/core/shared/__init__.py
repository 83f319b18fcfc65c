"""
Shared Domain Components.

Contém componentes compartilhados entre todos os recursos:
- Exceções de domínio
- Interfaces (Ports)
- Envelopes de resposta
- Motor genérico de consulta (campos, filtros, paginação, projeção)
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
)
from .interfaces import Repository, InMemoryRepository
from .responses import Response, PagedResponse, PagedTableResponse

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "Repository",
    "InMemoryRepository",
    "Response",
    "PagedResponse",
    "PagedTableResponse",
]
