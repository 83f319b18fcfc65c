"""
Catálogo de Campos - formatos de saída dos recursos.

Cada recurso declara explicitamente um OutputShape: a lista ordenada de
campos que a sua saída pode expor, com o caminho do atributo na entidade
de onde cada valor é lido. Não há reflexão em tempo de execução.

Operações:
- canonical_fields: conjunto completo e ordenado de campos do shape
- validate_fields: filtra uma lista de campos (ou tokens de ordenação)
  enviada pelo cliente, descartando silenciosamente o que não existe

Example:
    shape = OutputShape("OrganizationalUnit", [
        ShapeField("id", "id"),
        ShapeField("name", "name"),
    ])

    validate_fields(shape, "NAME,salary,id")   # "name,id"
    validate_fields(shape, "name desc")        # "name desc"
    validate_fields(shape, "salary")           # "" → usar canonical_fields
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence


def resolve_path(record: Any, source: str) -> Any:
    """
    Lê um atributo por caminho pontilhado ("position.title").

    Retorna None se qualquer etapa intermediária for None.
    """
    value = record
    for attr in source.split("."):
        if value is None:
            return None
        value = getattr(value, attr, None)
    return value


@dataclass(frozen=True)
class ShapeField:
    """
    Campo exposto por um formato de saída.

    Attributes:
        name: Nome público do campo (usado em fields e order_by)
        source: Caminho do atributo na entidade (ex: "unit.name")
        orderable: Se o campo pode ser usado em ordenação
    """

    name: str
    source: str
    orderable: bool = True

    def read(self, record: Any) -> Any:
        """Lê o valor do campo no registro."""
        return resolve_path(record, self.source)


@dataclass(frozen=True)
class OutputShape:
    """
    Registro explícito de campos de saída de um recurso.

    A ordem de declaração é a ordem canônica.
    """

    name: str
    fields: Sequence[ShapeField]
    _index: Dict[str, ShapeField] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))
        object.__setattr__(
            self,
            "_index",
            {f.name.lower(): f for f in self.fields},
        )

    def find(self, name: str) -> Optional[ShapeField]:
        """Busca campo pelo nome, sem diferenciar maiúsculas/minúsculas."""
        return self._index.get(name.strip().lower())

    def __iter__(self):
        return iter(self.fields)


def split_tokens(candidates: Optional[str]) -> List[str]:
    """Divide uma lista separada por vírgulas, ignorando entradas vazias."""
    if not candidates:
        return []
    return [token.strip() for token in candidates.split(",") if token.strip()]


def canonical_fields(shape: OutputShape) -> List[str]:
    """Retorna os nomes de todos os campos do shape, na ordem declarada."""
    return [f.name for f in shape.fields]


def validate_fields(shape: OutputShape, candidates: Optional[str]) -> str:
    """
    Restringe uma lista de campos aos campos conhecidos do shape.

    - Comparação sem diferenciar maiúsculas/minúsculas
    - Preserva a ordem enviada pelo cliente
    - Emite o nome canônico do campo
    - Entradas desconhecidas são descartadas sem erro
    - Um sufixo após o nome (ex: "desc") é repassado sem validação

    Args:
        shape: Formato de saída do recurso
        candidates: Lista separada por vírgulas (pode ser None ou vazia)

    Returns:
        Lista validada separada por vírgulas; "" se nada sobrou, o que
        sinaliza ao chamador que deve usar canonical_fields.
    """
    accepted: List[str] = []

    for token in split_tokens(candidates):
        parts = token.split(None, 1)
        match = shape.find(parts[0])
        if match is None:
            continue
        if len(parts) > 1:
            accepted.append(f"{match.name} {parts[1]}")
        else:
            accepted.append(match.name)

    return ",".join(accepted)


def resolve_fields(shape: OutputShape, candidates: Optional[str]) -> str:
    """
    Valida a seleção de campos ou, se vazia, devolve os campos canônicos.
    Na seleção só o nome do campo importa: sufixos como "desc" são
    descartados.

    Este é o passo usado pelos handlers de listagem antes de consultar
    o repositório.
    """
    names = [token.split()[0] for token in split_tokens(validate_fields(shape, candidates))]
    return ",".join(names or canonical_fields(shape))


def select_fields(shape: OutputShape, fields: Optional[str]) -> List[ShapeField]:
    """Converte uma lista de campos em ShapeFields (canônicos se vazia)."""
    names = split_tokens(fields)
    if not names:
        return list(shape.fields)
    return [f for f in (shape.find(name.split()[0]) for name in names) if f is not None]
