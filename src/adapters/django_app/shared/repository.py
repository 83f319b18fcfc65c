"""
Repository Base - Implementação base de repositórios com Django ORM.

Fornece funcionalidades comuns para todos os repositórios de recursos:
- CRUD básico (assíncrono)
- Compilação de Predicate do core para Q
- Ordenação a partir dos campos do OutputShape
- Consulta paginada com contagens total/filtrado
- Otimização de queries (select_related)

Princípios:
- Repositórios são stateless
- Não contêm lógica de negócio
- Apenas persistência e queries
- Erros do banco (DatabaseError) e cancelamento propagam sem tratamento

Usa a API assíncrona do ORM (aget, acount, asave, adelete, aupdate e
iteração com async for).
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar
import logging

from django.db import models
from django.db.models import F, Q, QuerySet
from django.utils import timezone

from src.core.shared.dtos import QuerySpecification
from src.core.shared.query.fields import OutputShape
from src.core.shared.query.filters import CONTAINS, EXACT, GTE, LTE, Predicate
from src.core.shared.query.paging import RecordsCount, parse_order
from src.core.shared.query.shaping import shape_data

logger = logging.getLogger(__name__)

# Type variables
T = TypeVar("T")  # Entity type
M = TypeVar("M", bound=models.Model)  # Model type


LOOKUP_SUFFIXES = {
    EXACT: "",
    CONTAINS: "__icontains",
    GTE: "__gte",
    LTE: "__lte",
}


def to_lookup(source: str) -> str:
    """Converte caminho pontilhado ("unit.name") em lookup do ORM ("unit__name")."""
    return source.replace(".", "__")


def to_q(predicate: Optional[Predicate]) -> Q:
    """
    Compila um Predicate do core para Q.

    - contains vira icontains
    - enums são comparados pelo valor
    - AND ou OR conforme predicate.match_any

    Predicado vazio vira Q() (sem restrição).
    """
    combined = Q()
    if predicate is None or predicate.is_empty:
        return combined

    for condition in predicate.conditions:
        value = condition.value
        if isinstance(value, Enum):
            value = value.value
        lookup = to_lookup(condition.source) + LOOKUP_SUFFIXES[condition.operator]
        q = Q(**{lookup: value})
        combined = (combined | q) if predicate.match_any else (combined & q)

    return combined


def order_expressions(order_by: Optional[str], shape: OutputShape) -> List[Any]:
    """
    Traduz order_by validado em expressões do ORM.

    Nulos ficam por último em ordem ascendente e primeiro em descendente,
    como na ordenação em memória. Campos não ordenáveis são ignorados.
    """
    expressions = []
    for key in parse_order(order_by):
        field = shape.find(key.field)
        if field is None or not field.orderable:
            continue
        expr = F(to_lookup(field.source))
        if key.descending:
            expressions.append(expr.desc(nulls_first=True))
        else:
            expressions.append(expr.asc(nulls_last=True))
    return expressions


class DjangoRepository(ABC, Generic[T, M]):
    """
    Classe base abstrata para repositórios Django.

    Fornece implementação padrão do contrato Repository do core,
    permitindo que repositórios específicos sobrescrevam apenas o
    necessário.

    Type Parameters:
        T: Tipo da entidade de domínio
        M: Tipo do Model Django

    Example:
        class DjangoWorkerRepository(DjangoRepository[Worker, WorkerModel]):
            model_class = WorkerModel
            shape = WORKER_SHAPE
            select_related_fields = ["position"]

            def to_entity(self, model):
                return WorkerMapper.to_entity(model)

            def to_model(self, entity):
                return WorkerMapper.to_model(entity)
    """

    # Classe do model Django (definir na subclasse)
    model_class: Type[M]

    # Formato de saída do recurso
    shape: OutputShape

    # Campos para select_related (navegações)
    select_related_fields: List[str] = []

    # Campos que nunca são sobrescritos em update
    immutable_fields = ("id", "created_at", "created_by")

    @abstractmethod
    def to_entity(self, model: M) -> T:
        """
        Converte Model Django para Entity de domínio.

        Args:
            model: Model Django

        Returns:
            Entity de domínio
        """
        raise NotImplementedError

    @abstractmethod
    def to_model(self, entity: T) -> M:
        """
        Converte Entity de domínio para Model Django.

        Args:
            entity: Entity de domínio

        Returns:
            Model Django (não salvo)
        """
        raise NotImplementedError

    def _get_base_queryset(self) -> QuerySet[M]:
        """
        Retorna queryset base com otimizações.

        Aplica select_related para carregar as navegações em uma query.
        """
        qs = self.model_class.objects.all()

        if self.select_related_fields:
            qs = qs.select_related(*self.select_related_fields)

        return qs

    async def get_by_id(self, entity_id: str) -> Optional[T]:
        """
        Busca entidade por ID.

        Returns:
            Entidade encontrada ou None
        """
        try:
            model = await self._get_base_queryset().aget(id=entity_id)
        except self.model_class.DoesNotExist:
            logger.debug(f"{self.model_class.__name__} not found: {entity_id}")
            return None
        return self.to_entity(model)

    async def add(self, entity: T) -> T:
        """
        Insere nova entidade.

        Os campos de auditoria preenchidos pelo banco são copiados de
        volta para a entidade.
        """
        model = self.to_model(entity)
        await model.asave(force_insert=True)

        entity.created_at = model.created_at
        entity.last_modified_at = model.last_modified_at

        logger.info(f"{self.model_class.__name__} created: {entity.id}")
        return entity

    async def update(self, entity: T) -> None:
        """
        Persiste alterações de entidade existente.

        Atualiza last_modified_at; id e campos de criação não mudam.
        """
        model = self.to_model(entity)
        values: Dict[str, Any] = {}
        for field in model._meta.concrete_fields:
            if field.primary_key or field.name in self.immutable_fields:
                continue
            values[field.attname] = getattr(model, field.attname)

        values["last_modified_at"] = timezone.now()
        await self.model_class.objects.filter(id=entity.id).aupdate(**values)
        entity.last_modified_at = values["last_modified_at"]

        logger.info(f"{self.model_class.__name__} updated: {entity.id}")

    async def delete(self, entity: T) -> None:
        """Remove entidade."""
        await self.model_class.objects.filter(id=entity.id).adelete()
        logger.info(f"{self.model_class.__name__} deleted: {entity.id}")

    async def get_all(self) -> List[T]:
        """
        Lista todas as entidades.

        Warning:
            Use com cuidado em produção - sem paginação!
        """
        return [self.to_entity(m) async for m in self._get_base_queryset().order_by("pk")]

    async def count(self, predicate: Optional[Predicate] = None) -> int:
        """Conta entidades que satisfazem o predicado (todas se None)."""
        return await self.model_class.objects.filter(to_q(predicate)).acount()

    async def get_response(
        self, spec: QuerySpecification
    ) -> Tuple[List[Dict[str, Any]], RecordsCount]:
        """
        Consulta paginada e projetada.

        Etapas:
        1. records_total na coleção completa
        2. filtro (Predicate → Q) e records_filtered
        3. ordenação pelas fontes do shape (pk como desempate)
        4. janela offset/limit
        5. projeção dos registros pelo Shaper do core
        """
        qs = self._get_base_queryset()
        records_total = await qs.acount()

        if not spec.predicate.is_empty:
            qs = qs.filter(to_q(spec.predicate))
        records_filtered = await qs.acount()

        qs = qs.order_by(*order_expressions(spec.order_by, self.shape), "pk")

        window = spec.window
        page = qs[window.offset:window.offset + window.limit]
        entities = [self.to_entity(m) async for m in page]

        logger.debug(
            f"{self.model_class.__name__} query: total={records_total} "
            f"filtered={records_filtered} page={window.page_number}"
        )

        return shape_data(entities, self.shape, spec.fields), RecordsCount(
            records_total=records_total,
            records_filtered=records_filtered,
        )
