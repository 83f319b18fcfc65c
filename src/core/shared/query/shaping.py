"""
Shaper - projeção parcial de registros.

Cada registro vira um dicionário novo contendo exatamente os campos
pedidos, na ordem pedida, com a grafia canônica do shape.
"""

from typing import Any, Dict, Iterable, List, Optional

from .fields import OutputShape, select_fields


def shape_record(record: Any, shape: OutputShape, fields: Optional[str] = None) -> Dict[str, Any]:
    """Projeta um único registro; fields vazio usa os campos canônicos."""
    return {f.name: f.read(record) for f in select_fields(shape, fields)}


def shape_data(records: Iterable[Any], shape: OutputShape, fields: Optional[str] = None) -> List[Dict[str, Any]]:
    """Projeta uma sequência de registros, preservando a ordem."""
    selected = select_fields(shape, fields)
    return [{f.name: f.read(record) for f in selected} for record in records]
