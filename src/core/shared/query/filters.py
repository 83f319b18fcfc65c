"""
Construção de Predicados de Filtro.

Converte filtros tipados de uma requisição em um predicado composto,
puro e imutável, avaliável sobre os registros de uma coleção.

Tipos de filtro suportados:
- exact: igualdade exata (identificadores, enums)
- contains: substring sem diferenciar maiúsculas/minúsculas (nomes, títulos)
- gte / lte: limites inclusivos de faixa (números e datas)

Dois modos de composição, mutuamente exclusivos por requisição:
- all_of: filtros por campo combinados com AND
- search_predicate: busca livre combinada com OR sobre uma lista fixa
  de campos de texto

O mesmo Predicate é avaliado em memória (InMemoryRepository) e
compilado para Q pelo adapter Django.

Example:
    predicate = all_of(
        contains("first_name", "John"),
        between("salary", Decimal("1000"), None),
        equals("gender", Gender.MALE),
    )
    matching = [w for w in workers if predicate(w)]
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional, Sequence, Tuple, Union

from .fields import resolve_path


EXACT = "exact"
CONTAINS = "contains"
GTE = "gte"
LTE = "lte"

OPERATORS = (EXACT, CONTAINS, GTE, LTE)


@dataclass(frozen=True)
class Condition:
    """
    Condição sobre um único campo.

    Attributes:
        source: Caminho do atributo no registro (ex: "position.title")
        operator: Um de exact, contains, gte, lte
        value: Valor de comparação (já normalizado)
    """

    source: str
    operator: str
    value: Any

    def __post_init__(self):
        if self.operator not in OPERATORS:
            raise ValueError(f"Operador inválido: {self.operator}")

    def matches(self, record: Any) -> bool:
        """Avalia a condição sobre um registro."""
        actual = resolve_path(record, self.source)
        if actual is None:
            return False

        if self.operator == CONTAINS:
            return self.value.lower() in str(actual).lower()
        if self.operator == EXACT:
            return _comparable(actual) == _comparable(self.value)
        if self.operator == GTE:
            return actual >= self.value
        return actual <= self.value


def _comparable(value: Any) -> Any:
    """Enums comparam pelo valor, para aceitar tanto Gender.MALE quanto "Male"."""
    return value.value if isinstance(value, Enum) else value


@dataclass(frozen=True)
class Predicate:
    """
    Conjunto de condições combinadas com AND (padrão) ou OR.

    Um predicado sem condições aceita todos os registros.
    """

    conditions: Tuple[Condition, ...] = ()
    match_any: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.conditions

    def __call__(self, record: Any) -> bool:
        if not self.conditions:
            return True
        test = any if self.match_any else all
        return test(condition.matches(record) for condition in self.conditions)


ConditionPart = Union[Condition, Sequence[Condition], None]


# =============================================================================
# Builders (retornam None quando o filtro está ausente)
# =============================================================================

def exact(source: str, value: Any) -> Optional[Condition]:
    """Igualdade exata; ignora None e strings vazias."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, str):
        value = value.strip()
    return Condition(source, EXACT, value)


def equals(source: str, value: Optional[Enum]) -> Optional[Condition]:
    """Igualdade de enum."""
    if value is None:
        return None
    return Condition(source, EXACT, value)


def contains(source: str, value: Optional[str]) -> Optional[Condition]:
    """Substring sem diferenciar maiúsculas/minúsculas; valor é aparado."""
    if value is None or not value.strip():
        return None
    return Condition(source, CONTAINS, value.strip())


def between(source: str, lower: Any = None, upper: Any = None) -> Tuple[Condition, ...]:
    """Faixa inclusiva; cada limite é opcional."""
    conditions = []
    if lower is not None:
        conditions.append(Condition(source, GTE, lower))
    if upper is not None:
        conditions.append(Condition(source, LTE, upper))
    return tuple(conditions)


def _flatten(parts: Iterable[ConditionPart]) -> Tuple[Condition, ...]:
    flat = []
    for part in parts:
        if part is None:
            continue
        if isinstance(part, Condition):
            flat.append(part)
        else:
            flat.extend(c for c in part if c is not None)
    return tuple(flat)


# =============================================================================
# Composição
# =============================================================================

def all_of(*parts: ConditionPart) -> Predicate:
    """
    Combina filtros por campo com AND.

    Filtros ausentes (None) não impõem restrição.
    """
    return Predicate(conditions=_flatten(parts))


def search_predicate(term: Optional[str], sources: Sequence[str]) -> Predicate:
    """
    Busca livre: substring em qualquer um dos campos da lista (OR).

    Termo vazio ou None resulta em predicado que aceita tudo.
    """
    if term is None or not term.strip():
        return Predicate()
    needle = term.strip()
    return Predicate(
        conditions=tuple(Condition(source, CONTAINS, needle) for source in sources),
        match_any=True,
    )
