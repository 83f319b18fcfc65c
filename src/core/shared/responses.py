"""
Envelopes de Resposta.

Todas as operações do serviço retornam um destes envelopes:

- Response: sucesso/falha, mensagem, erros e dado
- PagedResponse: Response + metadados de paginação
- PagedTableResponse: formato para grids (draw, contagens, dados)

to_dict() produz as chaves usadas no fio (camelCase para paginação).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

from .exceptions import DomainException, ValidationError
from .query.paging import PageWindow, RecordsCount


T = TypeVar("T")


def _serialize(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


@dataclass
class Response(Generic[T]):
    """
    Envelope padrão.

    Example:
        return Response.ok(worker.id)
        return Response.fail("Worker Not Found.")
    """

    succeeded: bool = False
    message: Optional[str] = None
    errors: Optional[List[str]] = None
    data: Optional[T] = None

    @classmethod
    def ok(cls, data: T = None, message: Optional[str] = None) -> "Response[T]":
        return cls(succeeded=True, message=message, errors=None, data=data)

    @classmethod
    def fail(cls, message: str, errors: Optional[List[str]] = None) -> "Response[T]":
        return cls(succeeded=False, message=message, errors=list(errors) if errors else None)

    @classmethod
    def from_exception(cls, exc: DomainException) -> "Response[T]":
        """Converte uma exceção de domínio em resposta de falha."""
        errors = exc.errors if isinstance(exc, ValidationError) else None
        return cls.fail(exc.message, errors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "succeeded": self.succeeded,
            "message": self.message,
            "errors": self.errors,
            "data": _serialize(self.data),
        }


@dataclass
class PagedResponse(Response[T]):
    """Resposta de listagem paginada."""

    page_number: int = 1
    page_size: int = 0
    records_total: int = 0
    records_filtered: int = 0

    @classmethod
    def build(
        cls,
        data: T,
        window: PageWindow,
        counts: RecordsCount,
        message: Optional[str] = None,
    ) -> "PagedResponse[T]":
        return cls(
            succeeded=True,
            message=message,
            errors=None,
            data=data,
            page_number=window.page_number,
            page_size=window.page_size,
            records_total=counts.records_total,
            records_filtered=counts.records_filtered,
        )

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result.update({
            "pageNumber": self.page_number,
            "pageSize": self.page_size,
            "recordsTotal": self.records_total,
            "recordsFiltered": self.records_filtered,
        })
        return result


@dataclass
class PagedTableResponse(Generic[T]):
    """Resposta para grids: ecoa o draw recebido."""

    draw: int = 0
    records_total: int = 0
    records_filtered: int = 0
    data: List[T] = field(default_factory=list)

    @classmethod
    def build(cls, data: List[T], draw: int, counts: RecordsCount) -> "PagedTableResponse[T]":
        return cls(
            draw=draw,
            records_total=counts.records_total,
            records_filtered=counts.records_filtered,
            data=data,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "draw": self.draw,
            "recordsTotal": self.records_total,
            "recordsFiltered": self.records_filtered,
            "data": [_serialize(item) for item in self.data],
        }
