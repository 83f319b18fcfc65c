"""
DTOs compartilhados de consulta.

- ListQueryDTO: base das requisições de listagem (filtros AND por campo)
- TableQueryDTO: requisição de grid (busca livre OR, start/length, draw)
- QuerySpecification: consulta já validada, entregue ao repositório
"""

from dataclasses import dataclass, field
from typing import Optional

from .query.filters import Predicate
from .query.paging import DEFAULT_PAGE_SIZE, PageWindow


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class ListQueryDTO:
    """
    Parâmetros comuns de listagem.

    Cada recurso estende com seus filtros e implementa to_predicate().

    Attributes:
        page_number: Página (>= 1; valores menores viram 1)
        page_size: Tamanho (>= 1; valores menores viram o padrão)
        fields: Campos separados por vírgula (None = todos)
        order_by: "<campo> [asc|desc], ..."
    """

    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    fields: Optional[str] = None
    order_by: Optional[str] = None

    def to_predicate(self) -> Predicate:
        """Filtros AND do recurso; a base não filtra nada."""
        return Predicate()


@dataclass(frozen=True)
class TableOrder:
    """Ordenação de grid por índice de coluna."""

    column: int
    direction: str = "asc"


@dataclass(frozen=True)
class TableQueryDTO:
    """
    Requisição de grid.

    A janela pode vir como page_number/page_size ou como start/length
    (offset de linhas); start/length prevalece quando informado.
    A ordenação pode vir como order_by ou como índice de coluna (order).

    Attributes:
        draw: Contador ecoado na resposta
        search_value: Termo de busca livre
        order: Ordenação por coluna do grid
    """

    draw: int = 0
    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    start: Optional[int] = None
    length: Optional[int] = None
    fields: Optional[str] = None
    order_by: Optional[str] = None
    order: tuple = field(default_factory=tuple)
    search_value: Optional[str] = None

    def window(self) -> PageWindow:
        if self.start is not None or self.length is not None:
            return PageWindow.from_start(self.start, self.length)
        return PageWindow.normalize(self.page_number, self.page_size)


# =============================================================================
# QUERY (uso interno)
# =============================================================================

@dataclass(frozen=True)
class QuerySpecification:
    """
    Consulta validada.

    fields e order_by já passaram por validate_fields; predicate é puro.
    """

    predicate: Predicate = field(default_factory=Predicate)
    fields: str = ""
    order_by: str = ""
    window: PageWindow = field(default_factory=PageWindow)
