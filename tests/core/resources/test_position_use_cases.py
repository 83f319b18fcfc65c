"""
Testes dos Use Cases de Cargos.

Os repositórios em memória estão ligados: o cargo enxerga a unidade e a
faixa pelas navegações.
"""

import pytest

from src.core.positions.dtos import CreateJobPositionCommand, JobPositionListQueryDTO
from src.core.positions.use_cases import (
    CountJobPositionsService,
    CreateJobPositionService,
    GetJobPositionByIdService,
    ListJobPositionsService,
    PagedJobPositionsService,
)
from src.core.shared.dtos import TableQueryDTO


@pytest.fixture
async def catalog(unit_repo, band_repo, position_repo, make_unit, make_band, make_position):
    engineering = await unit_repo.add(make_unit("Engineering"))
    sales = await unit_repo.add(make_unit("Sales"))
    junior = await band_repo.add(make_band("Junior", "1000", "2000"))
    senior = await band_repo.add(make_band("Senior", "3000", "6000"))

    positions = [
        make_position("Backend Developer", "ENG-001", engineering.id, junior.id),
        make_position("Tech Lead", "ENG-002", engineering.id, senior.id),
        make_position("Account Executive", "SAL-001", sales.id, junior.id),
    ]
    for position in positions:
        await position_repo.add(position)

    return {
        "engineering": engineering,
        "sales": sales,
        "junior": junior,
        "senior": senior,
        "positions": positions,
    }


class TestListJobPositionsService:
    """Testes para ListJobPositionsService."""

    async def test_filtro_por_nome_da_unidade(self, position_repo, catalog):
        service = ListJobPositionsService(position_repo)

        response = await service.execute(JobPositionListQueryDTO(unit_name="engin", order_by="number"))

        assert [r["number"] for r in response.data] == ["ENG-001", "ENG-002"]
        assert response.records_total == 3

    async def test_filtro_exato_por_faixa(self, position_repo, catalog):
        service = ListJobPositionsService(position_repo)

        response = await service.execute(JobPositionListQueryDTO(band_id=catalog["senior"].id))

        assert response.records_filtered == 1
        assert response.data[0]["title"] == "Tech Lead"
        assert response.data[0]["bandName"] == "Senior"


class TestPagedJobPositionsService:
    """Testes para PagedJobPositionsService."""

    async def test_busca_no_nome_da_faixa(self, position_repo, catalog):
        service = PagedJobPositionsService(position_repo)

        response = await service.execute(TableQueryDTO(search_value="junior"))

        assert response.records_filtered == 2

    async def test_ordem_padrao_por_titulo(self, position_repo, catalog):
        service = PagedJobPositionsService(position_repo)

        response = await service.execute(TableQueryDTO(fields="title"))

        assert [r["title"] for r in response.data] == [
            "Account Executive",
            "Backend Developer",
            "Tech Lead",
        ]


class TestJobPositionCommands:
    """Testes de criação e unicidade."""

    async def test_criar_e_obter_com_navegacoes(self, position_repo, catalog):
        created = await CreateJobPositionService(position_repo).execute(
            CreateJobPositionCommand(
                title="Sales Manager",
                number="SAL-002",
                description="Leads the sales team",
                unit_id=catalog["sales"].id,
                band_id=catalog["senior"].id,
            )
        )

        response = await GetJobPositionByIdService(position_repo).execute(created.data)

        assert response.data["unitName"] == "Sales"
        assert response.data["bandName"] == "Senior"

    async def test_codigo_unico(self, position_repo, catalog):
        assert await position_repo.is_unique_position_number("ENG-999") is True
        assert await position_repo.is_unique_position_number("ENG-001") is False

    async def test_contar_por_unidade(self, position_repo, catalog):
        service = CountJobPositionsService(position_repo)

        response = await service.execute(JobPositionListQueryDTO(unit_id=catalog["engineering"].id))

        assert response.data == 2
