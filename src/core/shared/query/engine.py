"""
Pipeline de consulta em memória.

Ordem fixa das etapas:
    1. records_total   (coleção completa)
    2. filtro          (Predicate)
    3. records_filtered
    4. ordenação       (order_by validado)
    5. janela          (offset/limit)
    6. projeção        (fields validados)

Usado pelo InMemoryRepository; o adapter Django reproduz as mesmas
etapas no banco e reaproveita apenas a projeção.
"""

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Tuple

from .fields import OutputShape
from .paging import RecordsCount, apply_ordering, paginate, parse_order
from .shaping import shape_data

if TYPE_CHECKING:
    from ..dtos import QuerySpecification


def execute_query(
    records: Iterable[Any],
    spec: "QuerySpecification",
    shape: OutputShape,
) -> Tuple[List[Dict[str, Any]], RecordsCount]:
    """
    Executa filtro, contagem, ordenação, janela e projeção.

    Args:
        records: Coleção completa do recurso
        spec: Especificação já validada
        shape: Formato de saída do recurso

    Returns:
        (registros projetados da página, contagens)
    """
    collection = list(records)
    total = len(collection)

    filtered = [r for r in collection if spec.predicate(r)]
    counts = RecordsCount(records_total=total, records_filtered=len(filtered))

    ordered = apply_ordering(filtered, parse_order(spec.order_by), shape)
    page = paginate(ordered, spec.window)

    return shape_data(page, shape, spec.fields), counts
