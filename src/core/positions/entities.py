"""
Entidade Cargo.

Um cargo pertence a uma unidade organizacional e a uma faixa salarial.
As referências são IDs opacos; as navegações (unit, band) são apenas
leitura e preenchidas pelo repositório.
"""

from dataclasses import dataclass, field
from typing import Optional

from src.core.bands.entities import CompensationBand
from src.core.shared.entities import AuditedEntity
from src.core.units.entities import OrganizationalUnit


@dataclass
class JobPosition(AuditedEntity):
    """
    Cargo.

    Attributes:
        title: Título do cargo
        number: Código do cargo (único)
        description: Descrição das atribuições
        unit_id: ID da unidade organizacional
        band_id: ID da faixa salarial
        unit: Navegação para a unidade (somente leitura)
        band: Navegação para a faixa (somente leitura)
    """

    title: str = ""
    number: str = ""
    description: str = ""
    unit_id: Optional[str] = None
    band_id: Optional[str] = None
    unit: Optional[OrganizationalUnit] = field(default=None, repr=False, compare=False)
    band: Optional[CompensationBand] = field(default=None, repr=False, compare=False)
