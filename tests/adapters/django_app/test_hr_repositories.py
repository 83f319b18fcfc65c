"""
Testes de Integração dos repositórios Django.

Testa a integração entre:
- Django Models ↔ Core Entities (via Mappers)
- Repository ↔ Database (SQLite por padrão)
- Predicate do core ↔ Q do ORM

Estratégia:
- django_db(transaction=True): o ORM assíncrono roda em outra thread,
  fora da transação do teste
- Mesmos cenários dos testes em memória, para garantir paridade
"""

from datetime import date
from decimal import Decimal

import pytest
from django.db.models import Q

from src.adapters.django_app.hr.mappers import JobPositionMapper, WorkerMapper
from src.adapters.django_app.hr.repositories import (
    DjangoCompensationBandRepository,
    DjangoJobPositionRepository,
    DjangoOrganizationalUnitRepository,
    DjangoWorkerRepository,
)
from src.adapters.django_app.shared.repository import order_expressions, to_q
from src.core.bands.use_cases import PagedCompensationBandsService
from src.core.shared.dtos import QuerySpecification, TableQueryDTO
from src.core.shared.exceptions import EntityNotFoundError
from src.core.shared.query import PageWindow, all_of, between, contains, equals, search_predicate
from src.core.units.dtos import OrganizationalUnitListQueryDTO
from src.core.units.use_cases import ListOrganizationalUnitsService
from src.core.workers.dtos import WORKER_SHAPE, WorkerListQueryDTO
from src.core.workers.entities import Gender
from src.core.workers.use_cases import (
    DeleteWorkerService,
    GetWorkerByIdService,
    ListWorkersService,
    UpdateWorkerService,
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def unit_repository():
    return DjangoOrganizationalUnitRepository()


@pytest.fixture
def band_repository():
    return DjangoCompensationBandRepository()


@pytest.fixture
def position_repository():
    return DjangoJobPositionRepository()


@pytest.fixture
def worker_repository():
    return DjangoWorkerRepository()


@pytest.fixture
async def staff(unit_repository, band_repository, position_repository, worker_repository,
                make_unit, make_band, make_position, make_worker):
    unit = await unit_repository.add(make_unit("Engineering"))
    band = await band_repository.add(make_band("Level 3", "3000", "4999"))
    engineer = await position_repository.add(make_position("Software Engineer", "ENG-001", unit.id, band.id))
    analyst = await position_repository.add(make_position("Data Analyst", "DAT-001", unit.id, band.id))

    workers = [
        make_worker("John", "Smith", "W-001", position_id=engineer.id, salary=Decimal("5000")),
        make_worker("Jane", "Doe", "W-002", position_id=analyst.id, gender=Gender.FEMALE,
                    salary=Decimal("4000")),
        make_worker("Johnny", "Walker", "W-003", position_id=engineer.id, salary=Decimal("3000")),
        make_worker("Alice", "Johnson", "W-004", middle_name="May", gender=Gender.FEMALE),
    ]
    for worker in workers:
        await worker_repository.add(worker)
    return workers


# =============================================================================
# Compilação Predicate → Q
# =============================================================================

class TestToQ:
    """Testes para to_q e order_expressions (sem banco)."""

    def test_predicado_vazio(self):
        assert not to_q(all_of())

    def test_contains_vira_icontains(self):
        q = to_q(all_of(contains("position.title", "eng")))
        assert q == Q(position__title__icontains="eng")

    def test_enum_pelo_valor(self):
        q = to_q(all_of(equals("gender", Gender.FEMALE)))
        assert q == Q(gender="Female")

    def test_faixa(self):
        q = to_q(all_of(between("salary", Decimal("1"), Decimal("2"))))
        assert q == Q(salary__gte=Decimal("1")) & Q(salary__lte=Decimal("2"))

    def test_busca_usa_or(self):
        q = to_q(search_predicate("x", ["first_name", "last_name"]))
        assert q == Q(first_name__icontains="x") | Q(last_name__icontains="x")

    def test_ordenacao_ignora_campo_calculado(self):
        assert len(order_expressions("fullName desc,lastName", WORKER_SHAPE)) == 1


# =============================================================================
# Repositórios
# =============================================================================

@pytest.mark.django_db(transaction=True)
class TestDjangoWorkerRepository:
    """Testes para DjangoWorkerRepository."""

    async def test_add_e_get_by_id(self, worker_repository, staff):
        worker = await worker_repository.get_by_id(staff[0].id)

        assert worker.first_name == "John"
        assert worker.gender is Gender.MALE
        assert worker.position.title == "Software Engineer"
        assert worker.created_at is not None

    async def test_get_by_id_inexistente(self, worker_repository):
        assert await worker_repository.get_by_id("missing") is None

    async def test_get_response_filtrado(self, worker_repository, staff):
        spec = QuerySpecification(
            predicate=all_of(contains("first_name", "john")),
            fields="firstName,positionTitle",
            order_by="firstName desc",
            window=PageWindow.normalize(1, 10),
        )

        data, counts = await worker_repository.get_response(spec)

        assert counts.records_total == 4
        assert counts.records_filtered == 2
        assert data == [
            {"firstName": "Johnny", "positionTitle": "Software Engineer"},
            {"firstName": "John", "positionTitle": "Software Engineer"},
        ]

    async def test_busca_pelo_titulo_do_cargo(self, worker_repository, staff):
        spec = QuerySpecification(
            predicate=search_predicate("analyst", ["last_name", "first_name", "position.title"]),
            fields="lastName",
        )

        data, counts = await worker_repository.get_response(spec)

        assert data == [{"lastName": "Doe"}]
        assert counts.records_filtered == 1

    async def test_paginacao(self, worker_repository, staff):
        spec = QuerySpecification(fields="workerNumber", order_by="workerNumber", window=PageWindow.normalize(2, 3))

        data, counts = await worker_repository.get_response(spec)

        assert data == [{"workerNumber": "W-004"}]
        assert counts.records_total == counts.records_filtered == 4

    async def test_count_com_predicado(self, worker_repository, staff):
        assert await worker_repository.count() == 4
        assert await worker_repository.count(all_of(equals("gender", Gender.FEMALE))) == 2

    async def test_matricula_unica(self, worker_repository, staff):
        assert await worker_repository.is_unique_worker_number("W-001") is False
        assert await worker_repository.is_unique_worker_number("W-999") is True


@pytest.mark.django_db(transaction=True)
class TestDjangoJobPositionRepository:
    """Testes para DjangoJobPositionRepository."""

    async def test_navegacoes_carregadas(self, position_repository, staff):
        position = await position_repository.get_by_id(staff[0].position_id)

        assert position.unit.name == "Engineering"
        assert position.band.name == "Level 3"

    async def test_codigo_unico(self, position_repository, staff):
        assert await position_repository.is_unique_position_number("ENG-001") is False
        assert await position_repository.is_unique_position_number("ENG-002") is True


# =============================================================================
# Use Cases sobre o ORM
# =============================================================================

@pytest.mark.django_db(transaction=True)
class TestUseCasesComDjango:
    """Fluxos completos sobre os repositórios Django."""

    async def test_listar_trabalhadores(self, worker_repository, staff):
        response = await ListWorkersService(worker_repository).execute(
            WorkerListQueryDTO(first_name="John")
        )

        assert response.records_filtered == 2
        assert response.records_total == 4

    async def test_cinco_unidades_pagina_dois(self, unit_repository, make_unit):
        for name in ["Engineering", "Sales", "Marketing", "Finance", "Legal"]:
            await unit_repository.add(make_unit(name))

        service = ListOrganizationalUnitsService(unit_repository)
        page = await service.execute(OrganizationalUnitListQueryDTO(page_number=2, page_size=2))
        filtered = await service.execute(OrganizationalUnitListQueryDTO(name="Engineering"))

        assert len(page.data) == 2
        assert page.records_total == 5
        assert filtered.records_filtered == 1
        assert filtered.records_total == 5

    async def test_busca_de_faixas(self, band_repository, make_band):
        for i in range(1, 6):
            await band_repository.add(make_band(f"Level {i}", str(i * 1000), str(i * 1000 + 999)))

        service = PagedCompensationBandsService(band_repository)
        found = await service.execute(TableQueryDTO(search_value="Level"))
        blank = await service.execute(TableQueryDTO(search_value=""))

        assert found.records_filtered == 5
        assert blank.records_filtered == blank.records_total == 5
        assert [r["name"] for r in found.data] == [f"Level {i}" for i in range(1, 6)]

    async def test_atualizar_e_remover(self, worker_repository, staff):
        target = staff[2]
        entity = await worker_repository.get_by_id(target.id)
        entity.salary = Decimal("3500")
        await worker_repository.update(entity)

        response = await GetWorkerByIdService(worker_repository).execute(target.id)
        assert response.data["salary"] == Decimal("3500")

        await DeleteWorkerService(worker_repository).execute(target.id)
        assert await worker_repository.get_by_id(target.id) is None

    async def test_update_inexistente(self, worker_repository):
        from src.core.workers.dtos import UpdateWorkerCommand

        command = UpdateWorkerCommand(
            id="missing",
            first_name="X",
            last_name="Y",
            email="x@example.com",
            worker_number="W-404",
            position_id="none",
            salary=Decimal("1"),
            birthday=date(2000, 1, 1),
            gender=Gender.MALE,
        )

        with pytest.raises(EntityNotFoundError, match="Worker Not Found."):
            await UpdateWorkerService(worker_repository).execute(command)

        assert await worker_repository.count() == 0


class TestMappers:
    """Testes dos mappers (sem banco)."""

    def test_worker_round_trip(self, make_worker):
        worker = make_worker("Ana", "Lima", "W-010", gender=Gender.FEMALE)

        model = WorkerMapper.to_model(worker)

        assert model.gender == "Female"
        assert model.position_id is None

    def test_position_sem_navegacao_em_cache(self, make_position):
        model = JobPositionMapper.to_model(make_position(unit_id="u-1", band_id="b-1"))

        entity = JobPositionMapper.to_entity(model)

        assert entity.unit is None
        assert entity.unit_id == "u-1"
