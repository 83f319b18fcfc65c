"""
Repositórios Django do serviço de RH.

Implementam os Ports definidos em src/core/<recurso>/ports.py.
São DRIVEN ADAPTERS - acionados pelo Core em resposta a operações.

Toda a mecânica (CRUD, filtros, ordenação, paginação) vem de
DjangoRepository; aqui ficam apenas model, shape, navegações e as
verificações de unicidade.
"""

import logging

from src.core.bands.dtos import BAND_SHAPE
from src.core.bands.entities import CompensationBand
from src.core.positions.dtos import POSITION_SHAPE
from src.core.positions.entities import JobPosition
from src.core.units.dtos import UNIT_SHAPE
from src.core.units.entities import OrganizationalUnit
from src.core.workers.dtos import WORKER_SHAPE
from src.core.workers.entities import Worker

from ..shared.repository import DjangoRepository
from .mappers import (
    CompensationBandMapper,
    JobPositionMapper,
    OrganizationalUnitMapper,
    WorkerMapper,
)
from .models import (
    CompensationBandModel,
    JobPositionModel,
    OrganizationalUnitModel,
    WorkerModel,
)

logger = logging.getLogger(__name__)


class DjangoOrganizationalUnitRepository(DjangoRepository[OrganizationalUnit, OrganizationalUnitModel]):
    """Unidades organizacionais."""

    model_class = OrganizationalUnitModel
    shape = UNIT_SHAPE

    def to_entity(self, model):
        return OrganizationalUnitMapper.to_entity(model)

    def to_model(self, entity):
        return OrganizationalUnitMapper.to_model(entity)


class DjangoCompensationBandRepository(DjangoRepository[CompensationBand, CompensationBandModel]):
    """Faixas salariais."""

    model_class = CompensationBandModel
    shape = BAND_SHAPE

    def to_entity(self, model):
        return CompensationBandMapper.to_entity(model)

    def to_model(self, entity):
        return CompensationBandMapper.to_model(entity)


class DjangoJobPositionRepository(DjangoRepository[JobPosition, JobPositionModel]):
    """Cargos, com unidade e faixa carregadas via select_related."""

    model_class = JobPositionModel
    shape = POSITION_SHAPE
    select_related_fields = ["unit", "band"]

    def to_entity(self, model):
        return JobPositionMapper.to_entity(model)

    def to_model(self, entity):
        return JobPositionMapper.to_model(entity)

    async def is_unique_position_number(self, number: str) -> bool:
        exists = await JobPositionModel.objects.filter(number=number).aexists()
        logger.debug(f"Position number {number} in use: {exists}")
        return not exists


class DjangoWorkerRepository(DjangoRepository[Worker, WorkerModel]):
    """Trabalhadores, com o cargo carregado via select_related."""

    model_class = WorkerModel
    shape = WORKER_SHAPE
    select_related_fields = ["position"]

    def to_entity(self, model):
        return WorkerMapper.to_entity(model)

    def to_model(self, entity):
        return WorkerMapper.to_model(entity)

    async def is_unique_worker_number(self, number: str) -> bool:
        exists = await WorkerModel.objects.filter(worker_number=number).aexists()
        logger.debug(f"Worker number {number} in use: {exists}")
        return not exists
