"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories)
- Factory: Nova instância por chamada (services)

Imports são lazy: o container pode ser criado antes do Django estar
configurado; os models só são importados ao resolver um repositório.
"""

from dependency_injector import containers, providers
from typing import Optional


def _lazy(module: str, name: str):
    """Resolve uma classe por caminho de módulo, apenas quando chamada."""
    return getattr(__import__(module, fromlist=[name]), name)


def _repository(module: str, name: str, **dependencies) -> providers.Singleton:
    return providers.Singleton(
        lambda **kwargs: _lazy(module, name)(**kwargs),
        **dependencies,
    )


def _service(module: str, name: str, repository: providers.Provider) -> providers.Factory:
    return providers.Factory(
        lambda repository: _lazy(module, name)(repository=repository),
        repository=repository,
    )


DJANGO_REPOSITORIES = 'src.adapters.django_app.hr.repositories'

UNITS = 'src.core.units.use_cases'
BANDS = 'src.core.bands.use_cases'
POSITIONS = 'src.core.positions.use_cases'
WORKERS = 'src.core.workers.use_cases'


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Repositories: Persistência (Django ORM)
    - Services: Use Cases por recurso

    Example:
        from src.config.container import get_container

        container = get_container()
        service = container.list_workers_service()
        response = await service.execute(WorkerListQueryDTO(first_name="John"))
    """

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    unit_repository = _repository(DJANGO_REPOSITORIES, 'DjangoOrganizationalUnitRepository')
    band_repository = _repository(DJANGO_REPOSITORIES, 'DjangoCompensationBandRepository')
    position_repository = _repository(DJANGO_REPOSITORIES, 'DjangoJobPositionRepository')
    worker_repository = _repository(DJANGO_REPOSITORIES, 'DjangoWorkerRepository')

    # =========================================================================
    # Services / Use Cases (Factory - nova instância por chamada)
    # =========================================================================

    # Unidades Organizacionais
    get_unit_service = _service(UNITS, 'GetOrganizationalUnitByIdService', unit_repository)
    create_unit_service = _service(UNITS, 'CreateOrganizationalUnitService', unit_repository)
    update_unit_service = _service(UNITS, 'UpdateOrganizationalUnitService', unit_repository)
    delete_unit_service = _service(UNITS, 'DeleteOrganizationalUnitService', unit_repository)
    list_units_service = _service(UNITS, 'ListOrganizationalUnitsService', unit_repository)
    paged_units_service = _service(UNITS, 'PagedOrganizationalUnitsService', unit_repository)
    count_units_service = _service(UNITS, 'CountOrganizationalUnitsService', unit_repository)

    # Faixas Salariais
    get_band_service = _service(BANDS, 'GetCompensationBandByIdService', band_repository)
    create_band_service = _service(BANDS, 'CreateCompensationBandService', band_repository)
    update_band_service = _service(BANDS, 'UpdateCompensationBandService', band_repository)
    delete_band_service = _service(BANDS, 'DeleteCompensationBandService', band_repository)
    list_bands_service = _service(BANDS, 'ListCompensationBandsService', band_repository)
    paged_bands_service = _service(BANDS, 'PagedCompensationBandsService', band_repository)
    count_bands_service = _service(BANDS, 'CountCompensationBandsService', band_repository)

    # Cargos
    get_position_service = _service(POSITIONS, 'GetJobPositionByIdService', position_repository)
    create_position_service = _service(POSITIONS, 'CreateJobPositionService', position_repository)
    update_position_service = _service(POSITIONS, 'UpdateJobPositionService', position_repository)
    delete_position_service = _service(POSITIONS, 'DeleteJobPositionService', position_repository)
    list_positions_service = _service(POSITIONS, 'ListJobPositionsService', position_repository)
    paged_positions_service = _service(POSITIONS, 'PagedJobPositionsService', position_repository)
    count_positions_service = _service(POSITIONS, 'CountJobPositionsService', position_repository)

    # Trabalhadores
    get_worker_service = _service(WORKERS, 'GetWorkerByIdService', worker_repository)
    create_worker_service = _service(WORKERS, 'CreateWorkerService', worker_repository)
    update_worker_service = _service(WORKERS, 'UpdateWorkerService', worker_repository)
    delete_worker_service = _service(WORKERS, 'DeleteWorkerService', worker_repository)
    list_workers_service = _service(WORKERS, 'ListWorkersService', worker_repository)
    paged_workers_service = _service(WORKERS, 'PagedWorkersService', worker_repository)
    count_workers_service = _service(WORKERS, 'CountWorkersService', worker_repository)


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization).

    Returns:
        Container configurado
    """
    global _container

    if _container is None:
        _container = Container()

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

class TestingContainer(containers.DeclarativeContainer):
    """
    Container para testes.

    Usa implementações InMemory, com as navegações ligadas entre os
    repositórios (cargo → unidade/faixa, trabalhador → cargo).

    Example:
        container = TestingContainer()
        await container.create_unit_service().execute(command)
    """

    # InMemory implementations
    unit_repository = _repository('src.core.units.ports', 'InMemoryOrganizationalUnitRepository')
    band_repository = _repository('src.core.bands.ports', 'InMemoryCompensationBandRepository')
    position_repository = _repository(
        'src.core.positions.ports',
        'InMemoryJobPositionRepository',
        unit_repository=unit_repository,
        band_repository=band_repository,
    )
    worker_repository = _repository(
        'src.core.workers.ports',
        'InMemoryWorkerRepository',
        position_repository=position_repository,
    )

    # Services com InMemory dependencies
    get_unit_service = _service(UNITS, 'GetOrganizationalUnitByIdService', unit_repository)
    create_unit_service = _service(UNITS, 'CreateOrganizationalUnitService', unit_repository)
    update_unit_service = _service(UNITS, 'UpdateOrganizationalUnitService', unit_repository)
    delete_unit_service = _service(UNITS, 'DeleteOrganizationalUnitService', unit_repository)
    list_units_service = _service(UNITS, 'ListOrganizationalUnitsService', unit_repository)
    paged_units_service = _service(UNITS, 'PagedOrganizationalUnitsService', unit_repository)
    count_units_service = _service(UNITS, 'CountOrganizationalUnitsService', unit_repository)

    get_band_service = _service(BANDS, 'GetCompensationBandByIdService', band_repository)
    create_band_service = _service(BANDS, 'CreateCompensationBandService', band_repository)
    update_band_service = _service(BANDS, 'UpdateCompensationBandService', band_repository)
    delete_band_service = _service(BANDS, 'DeleteCompensationBandService', band_repository)
    list_bands_service = _service(BANDS, 'ListCompensationBandsService', band_repository)
    paged_bands_service = _service(BANDS, 'PagedCompensationBandsService', band_repository)
    count_bands_service = _service(BANDS, 'CountCompensationBandsService', band_repository)

    get_position_service = _service(POSITIONS, 'GetJobPositionByIdService', position_repository)
    create_position_service = _service(POSITIONS, 'CreateJobPositionService', position_repository)
    update_position_service = _service(POSITIONS, 'UpdateJobPositionService', position_repository)
    delete_position_service = _service(POSITIONS, 'DeleteJobPositionService', position_repository)
    list_positions_service = _service(POSITIONS, 'ListJobPositionsService', position_repository)
    paged_positions_service = _service(POSITIONS, 'PagedJobPositionsService', position_repository)
    count_positions_service = _service(POSITIONS, 'CountJobPositionsService', position_repository)

    get_worker_service = _service(WORKERS, 'GetWorkerByIdService', worker_repository)
    create_worker_service = _service(WORKERS, 'CreateWorkerService', worker_repository)
    update_worker_service = _service(WORKERS, 'UpdateWorkerService', worker_repository)
    delete_worker_service = _service(WORKERS, 'DeleteWorkerService', worker_repository)
    list_workers_service = _service(WORKERS, 'ListWorkersService', worker_repository)
    paged_workers_service = _service(WORKERS, 'PagedWorkersService', worker_repository)
    count_workers_service = _service(WORKERS, 'CountWorkersService', worker_repository)
