"""
Motor genérico de consulta: campos, filtros, paginação e projeção.
"""

from .fields import (
    OutputShape,
    ShapeField,
    canonical_fields,
    resolve_fields,
    resolve_path,
    select_fields,
    validate_fields,
)
from .filters import (
    Condition,
    Predicate,
    all_of,
    between,
    contains,
    equals,
    exact,
    search_predicate,
)
from .paging import (
    DEFAULT_PAGE_SIZE,
    OrderKey,
    PageWindow,
    RecordsCount,
    apply_ordering,
    paginate,
    parse_order,
)
from .shaping import shape_data, shape_record

__all__ = [
    "OutputShape",
    "ShapeField",
    "canonical_fields",
    "resolve_fields",
    "resolve_path",
    "select_fields",
    "validate_fields",
    "Condition",
    "Predicate",
    "all_of",
    "between",
    "contains",
    "equals",
    "exact",
    "search_predicate",
    "DEFAULT_PAGE_SIZE",
    "OrderKey",
    "PageWindow",
    "RecordsCount",
    "apply_ordering",
    "paginate",
    "parse_order",
    "shape_data",
    "shape_record",
]
