"""
Configurações globais do Pytest para o serviço de RH.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.

Django é configurado via DJANGO_SETTINGS_MODULE (pyproject.toml);
sem variáveis de banco, os testes usam SQLite.
"""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from src.config.container import reset_container
from src.core.bands.entities import CompensationBand
from src.core.bands.ports import InMemoryCompensationBandRepository
from src.core.positions.entities import JobPosition
from src.core.positions.ports import InMemoryJobPositionRepository
from src.core.units.entities import OrganizationalUnit
from src.core.units.ports import InMemoryOrganizationalUnitRepository
from src.core.workers.entities import Gender, Worker
from src.core.workers.ports import InMemoryWorkerRepository


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reset de singletons entre testes.

    Garante que cada teste inicia com container limpo.
    """
    yield
    reset_container()


# =============================================================================
# Repositórios em memória (ligados pelas navegações)
# =============================================================================

@pytest.fixture
def unit_repo():
    return InMemoryOrganizationalUnitRepository()


@pytest.fixture
def band_repo():
    return InMemoryCompensationBandRepository()


@pytest.fixture
def position_repo(unit_repo, band_repo):
    return InMemoryJobPositionRepository(unit_repository=unit_repo, band_repository=band_repo)


@pytest.fixture
def worker_repo(position_repo):
    return InMemoryWorkerRepository(position_repository=position_repo)


# =============================================================================
# Factories
# =============================================================================

@pytest.fixture
def make_unit():
    def _make(name="Engineering", **kwargs):
        return OrganizationalUnit.create(name=name, **kwargs)
    return _make


@pytest.fixture
def make_band():
    def _make(name="Level 1", min_salary="1000", max_salary="2000"):
        return CompensationBand.create(
            name=name,
            min_salary=Decimal(min_salary),
            max_salary=Decimal(max_salary),
        )
    return _make


@pytest.fixture
def make_position():
    def _make(title="Developer", number="P-001", unit_id=None, band_id=None, **kwargs):
        return JobPosition.create(
            title=title,
            number=number,
            description=kwargs.pop("description", f"{title} position"),
            unit_id=unit_id,
            band_id=band_id,
            **kwargs,
        )
    return _make


@pytest.fixture
def make_worker():
    def _make(first_name="John", last_name="Doe", worker_number="W-001", **kwargs):
        values = {
            "middle_name": None,
            "email": f"{first_name.lower()}.{last_name.lower()}@example.com",
            "position_id": None,
            "salary": Decimal("1500"),
            "birthday": date(1990, 1, 1),
            "gender": Gender.MALE,
            "prefix": None,
            "phone": None,
        }
        values.update(kwargs)
        return Worker.create(
            first_name=first_name,
            last_name=last_name,
            worker_number=worker_number,
            **values,
        )
    return _make


def pytest_configure(config):
    """Configuração do pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modifica coleção de testes."""
    # Testes de integração só rodam com --run-integration
    skip_integration = pytest.mark.skip(reason="Integration tests require --run-integration")

    for item in items:
        if "integration" in item.keywords:
            if not config.getoption("--run-integration", default=False):
                item.add_marker(skip_integration)


def pytest_addoption(parser):
    """Adiciona opções de linha de comando."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="run integration tests",
    )
