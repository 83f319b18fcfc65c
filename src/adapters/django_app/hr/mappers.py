"""
Mappers para conversão entre Entities (Core) e Models (Django).

Responsabilidades:
- Converter Entity → Model (para persistência)
- Converter Model → Entity (para uso no Core)

Navegações (unit, band, position) só são convertidas quando o model
relacionado já foi carregado via select_related; o mapper nunca dispara
queries.

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from typing import Optional

from django.db import models

from src.core.bands.entities import CompensationBand
from src.core.positions.entities import JobPosition
from src.core.units.entities import OrganizationalUnit
from src.core.workers.entities import Gender, Worker

from .models import (
    CompensationBandModel,
    JobPositionModel,
    OrganizationalUnitModel,
    WorkerModel,
)


def _cached_related(model: models.Model, name: str) -> Optional[models.Model]:
    """Retorna o model relacionado apenas se já estiver em cache."""
    field = model._meta.get_field(name)
    if not field.is_cached(model):
        return None
    return getattr(model, name)


def _audit(model: models.Model) -> dict:
    return {
        "created_at": model.created_at,
        "created_by": model.created_by,
        "last_modified_at": model.last_modified_at,
        "last_modified_by": model.last_modified_by,
    }


class OrganizationalUnitMapper:
    """Mapper OrganizationalUnit ↔ OrganizationalUnitModel."""

    @staticmethod
    def to_model(entity: OrganizationalUnit) -> OrganizationalUnitModel:
        return OrganizationalUnitModel(
            id=entity.id,
            name=entity.name,
            created_by=entity.created_by,
            last_modified_by=entity.last_modified_by,
        )

    @staticmethod
    def to_entity(model: OrganizationalUnitModel) -> OrganizationalUnit:
        return OrganizationalUnit(id=model.id, name=model.name, **_audit(model))


class CompensationBandMapper:
    """Mapper CompensationBand ↔ CompensationBandModel."""

    @staticmethod
    def to_model(entity: CompensationBand) -> CompensationBandModel:
        return CompensationBandModel(
            id=entity.id,
            name=entity.name,
            min_salary=entity.min_salary,
            max_salary=entity.max_salary,
            created_by=entity.created_by,
            last_modified_by=entity.last_modified_by,
        )

    @staticmethod
    def to_entity(model: CompensationBandModel) -> CompensationBand:
        return CompensationBand(
            id=model.id,
            name=model.name,
            min_salary=model.min_salary,
            max_salary=model.max_salary,
            **_audit(model),
        )


class JobPositionMapper:
    """
    Mapper JobPosition ↔ JobPositionModel.

    to_entity() preenche unit e band quando carregados.
    """

    @staticmethod
    def to_model(entity: JobPosition) -> JobPositionModel:
        return JobPositionModel(
            id=entity.id,
            title=entity.title,
            number=entity.number,
            description=entity.description,
            unit_id=entity.unit_id,
            band_id=entity.band_id,
            created_by=entity.created_by,
            last_modified_by=entity.last_modified_by,
        )

    @staticmethod
    def to_entity(model: JobPositionModel) -> JobPosition:
        unit = _cached_related(model, "unit")
        band = _cached_related(model, "band")
        return JobPosition(
            id=model.id,
            title=model.title,
            number=model.number,
            description=model.description,
            unit_id=model.unit_id,
            band_id=model.band_id,
            unit=OrganizationalUnitMapper.to_entity(unit) if unit else None,
            band=CompensationBandMapper.to_entity(band) if band else None,
            **_audit(model),
        )


class WorkerMapper:
    """
    Mapper Worker ↔ WorkerModel.

    Converte Gender para o valor string do model e vice-versa.
    """

    @staticmethod
    def to_model(entity: Worker) -> WorkerModel:
        return WorkerModel(
            id=entity.id,
            first_name=entity.first_name,
            middle_name=entity.middle_name,
            last_name=entity.last_name,
            email=entity.email,
            worker_number=entity.worker_number,
            prefix=entity.prefix,
            phone=entity.phone,
            salary=entity.salary,
            birthday=entity.birthday,
            gender=entity.gender.value,
            position_id=entity.position_id,
            created_by=entity.created_by,
            last_modified_by=entity.last_modified_by,
        )

    @staticmethod
    def to_entity(model: WorkerModel) -> Worker:
        position = _cached_related(model, "position")
        return Worker(
            id=model.id,
            first_name=model.first_name,
            middle_name=model.middle_name,
            last_name=model.last_name,
            email=model.email,
            worker_number=model.worker_number,
            prefix=model.prefix,
            phone=model.phone,
            salary=model.salary,
            birthday=model.birthday,
            gender=Gender(model.gender),
            position_id=model.position_id,
            position=JobPositionMapper.to_entity(position) if position else None,
            **_audit(model),
        )
