"""
Base das entidades de domínio.

Todas as entidades possuem ID imutável (UUID em string) e metadados de
auditoria. Os metadados são escritos apenas pela camada de persistência.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
import uuid


def new_id() -> str:
    """Gera novo identificador."""
    return str(uuid.uuid4())


@dataclass
class AuditedEntity:
    """
    Entidade com identidade e auditoria.

    Attributes:
        id: Identificador único (UUID)
        created_at: Data/hora de criação (persistência)
        created_by: Usuário criador (persistência)
        last_modified_at: Data/hora da última alteração (persistência)
        last_modified_by: Usuário da última alteração (persistência)
    """

    id: str = field(default_factory=new_id)
    created_at: Optional[datetime] = None
    created_by: Optional[str] = None
    last_modified_at: Optional[datetime] = None
    last_modified_by: Optional[str] = None

    @classmethod
    def create(cls, **values):
        """Factory: nova entidade com ID gerado."""
        return cls(id=new_id(), **values)
