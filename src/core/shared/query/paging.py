"""
Paginação e Ordenação.

- PageWindow: normaliza (page_number, page_size) e calcula offset/limit
- parse_order / apply_ordering: expressão "<campo> [asc|desc]" aplicada
  sobre os acessores do OutputShape
- paginate: recorta a janela da página
- RecordsCount: total antes do filtro e total após o filtro
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Sequence

from .fields import OutputShape, split_tokens


DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class PageWindow:
    """Janela de página normalizada (1-based)."""

    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def normalize(cls, page_number: Optional[int], page_size: Optional[int]) -> "PageWindow":
        """
        Página < 1 vira 1; tamanho < 1 (ou ausente) vira DEFAULT_PAGE_SIZE.
        """
        page = page_number if page_number and page_number >= 1 else 1
        size = page_size if page_size and page_size >= 1 else DEFAULT_PAGE_SIZE
        return cls(page_number=page, page_size=size)

    @classmethod
    def from_start(cls, start: Optional[int], length: Optional[int]) -> "PageWindow":
        """Converte start/length (offset de linhas) em janela de página."""
        size = length if length and length >= 1 else DEFAULT_PAGE_SIZE
        offset = start if start and start > 0 else 0
        return cls(page_number=offset // size + 1, page_size=size)

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class RecordsCount:
    """Contagens de uma consulta: antes e depois do filtro."""

    records_total: int = 0
    records_filtered: int = 0


@dataclass(frozen=True)
class OrderKey:
    """Chave de ordenação já resolvida para um campo do shape."""

    field: str
    descending: bool = False


def parse_order(expression: Optional[str]) -> List[OrderKey]:
    """
    Interpreta "campo [asc|desc], ...".

    Direção ausente ou diferente de "desc" é ascendente.
    """
    keys = []
    for token in split_tokens(expression):
        parts = token.split()
        descending = len(parts) > 1 and parts[1].lower() == "desc"
        keys.append(OrderKey(field=parts[0], descending=descending))
    return keys


def _sort_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def apply_ordering(records: Sequence[Any], keys: Sequence[OrderKey], shape: OutputShape) -> List[Any]:
    """
    Ordenação estável com múltiplas chaves.

    Valores None ficam por último em ordem ascendente. Chaves de campos
    desconhecidos ou não ordenáveis são ignoradas.
    """
    ordered = list(records)

    # Ordena da última chave para a primeira; sort() é estável.
    for key in reversed(keys):
        field = shape.find(key.field)
        if field is None or not field.orderable:
            continue

        present = [r for r in ordered if field.read(r) is not None]
        missing = [r for r in ordered if field.read(r) is None]
        present.sort(key=lambda r, f=field: _sort_value(f.read(r)), reverse=key.descending)
        ordered = present + missing if not key.descending else missing + present

    return ordered


def paginate(records: Sequence[Any], window: PageWindow) -> List[Any]:
    """Retorna os registros da janela (no máximo page_size)."""
    return list(records[window.offset:window.offset + window.limit])
