"""
Testes dos Use Cases de Faixas Salariais.
"""

from decimal import Decimal

import pytest

from src.core.bands.dtos import (
    CompensationBandListQueryDTO,
    CreateCompensationBandCommand,
    UpdateCompensationBandCommand,
)
from src.core.bands.use_cases import (
    CreateCompensationBandService,
    GetCompensationBandByIdService,
    ListCompensationBandsService,
    PagedCompensationBandsService,
    UpdateCompensationBandService,
)
from src.core.shared.dtos import TableQueryDTO


@pytest.fixture
async def five_bands(band_repo, make_band):
    bands = [
        make_band(f"Level {i}", str(i * 1000), str(i * 1000 + 999))
        for i in (3, 1, 5, 2, 4)
    ]
    for band in bands:
        await band_repo.add(band)
    return bands


class TestPagedCompensationBandsService:
    """Testes para PagedCompensationBandsService."""

    async def test_busca_por_level(self, band_repo, five_bands):
        """Busca "Level" encontra as 5 faixas."""
        service = PagedCompensationBandsService(band_repo)

        response = await service.execute(TableQueryDTO(draw=1, search_value="Level"))

        assert response.records_filtered == 5
        assert response.records_total == 5

    async def test_busca_vazia(self, band_repo, five_bands):
        """Busca vazia: filtrado = total = 5."""
        service = PagedCompensationBandsService(band_repo)

        response = await service.execute(TableQueryDTO(search_value=""))

        assert response.records_filtered == response.records_total == 5

    async def test_ordem_padrao_por_nome(self, band_repo, five_bands):
        service = PagedCompensationBandsService(band_repo)

        response = await service.execute(TableQueryDTO(fields="name"))

        assert [r["name"] for r in response.data] == [f"Level {i}" for i in range(1, 6)]

    async def test_order_by_explicito(self, band_repo, five_bands):
        service = PagedCompensationBandsService(band_repo)

        response = await service.execute(TableQueryDTO(fields="name", order_by="maxSalary desc"))

        assert response.data[0] == {"name": "Level 5"}


class TestListCompensationBandsService:
    """Testes para ListCompensationBandsService."""

    async def test_faixa_salarial(self, band_repo, five_bands):
        service = ListCompensationBandsService(band_repo)

        response = await service.execute(
            CompensationBandListQueryDTO(
                salary_from=Decimal("2000"),
                salary_to=Decimal("3999"),
                order_by="name",
            )
        )

        assert [r["name"] for r in response.data] == ["Level 2", "Level 3"]
        assert response.records_total == 5


class TestCompensationBandCommands:
    """Testes de criação, leitura e atualização."""

    async def test_criar_e_obter(self, band_repo):
        created = await CreateCompensationBandService(band_repo).execute(
            CreateCompensationBandCommand(
                name="Senior",
                min_salary=Decimal("5000"),
                max_salary=Decimal("8000"),
            )
        )

        response = await GetCompensationBandByIdService(band_repo).execute(created.data)

        assert response.data["name"] == "Senior"
        assert response.data["minSalary"] == Decimal("5000")
        assert response.data["maxSalary"] == Decimal("8000")

    async def test_atualizar(self, band_repo, five_bands):
        band = five_bands[0]

        await UpdateCompensationBandService(band_repo).execute(
            UpdateCompensationBandCommand(
                id=band.id,
                name="Level 3A",
                min_salary=Decimal("3100"),
                max_salary=Decimal("3900"),
            )
        )

        stored = await band_repo.get_by_id(band.id)
        assert stored.name == "Level 3A"
        assert stored.contains_salary(Decimal("3500"))
        assert not stored.contains_salary(Decimal("3000"))
