"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories, publisher)
- Factory: Nova instância por chamada (services, UoW)

Imports são feitos sob demanda para que o container possa ser
importado antes do Django estar configurado.
"""

from dependency_injector import containers, providers
from typing import Optional


def _lazy(module: str, name: str):
    """Callable que importa module.name somente ao ser invocado."""

    def build(*args, **kwargs):
        return getattr(__import__(module, fromlist=[name]), name)(*args, **kwargs)

    build.__name__ = name
    return build


_DJANGO_REPOSITORIES = 'src.adapters.django_app.workforce.repositories'
_MEMORY = 'src.adapters.memory'


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Infrastructure: Publisher de eventos
    - Repositories: Persistência (Django ORM)
    - Unit of Work: Transações
    - Services: WorkforceService (monta os use cases por chamada)

    Example:
        from src.config.container import get_container

        service = get_container().workforce_service()
        result = service.calculate_project_hr_cost(10)
    """

    # =========================================================================
    # Infrastructure
    # =========================================================================

    event_publisher = providers.Singleton(
        _lazy('src.adapters.django_app.events.publishers', 'LoggingEventPublisher')
    )

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    department_repository = providers.Singleton(_lazy(_DJANGO_REPOSITORIES, 'DjangoDepartmentRepository'))
    employee_repository = providers.Singleton(_lazy(_DJANGO_REPOSITORIES, 'DjangoEmployeeRepository'))
    project_repository = providers.Singleton(_lazy(_DJANGO_REPOSITORIES, 'DjangoProjectRepository'))
    client_repository = providers.Singleton(_lazy(_DJANGO_REPOSITORIES, 'DjangoClientRepository'))
    assignment_repository = providers.Singleton(_lazy(_DJANGO_REPOSITORIES, 'DjangoAssignmentRepository'))
    project_link_repository = providers.Singleton(_lazy(_DJANGO_REPOSITORIES, 'DjangoProjectLinkRepository'))

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        _lazy('src.adapters.django_app.shared.unit_of_work', 'DjangoUnitOfWork'),
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Services (Factory - nova instância por chamada)
    # =========================================================================

    workforce_service = providers.Factory(
        _lazy('src.core.workforce.facade', 'WorkforceService'),
        department_repo=department_repository,
        employee_repo=employee_repository,
        project_repo=project_repository,
        client_repo=client_repository,
        assignment_repo=assignment_repository,
        link_repo=project_link_repository,
        uow_factory=unit_of_work.provider,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization).
    """
    global _container

    if _container is None:
        _container = Container()

    return _container


def reset_container() -> None:
    """Reset do container (para testes)."""
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

class TestingContainer(containers.DeclarativeContainer):
    """
    Container para testes sobre o banco em memória.

    Example:
        container = TestingContainer()
        service = container.workforce_service()
        service.create_department(Department.create(...))
    """

    database = providers.Singleton(_lazy(_MEMORY, 'InMemoryDatabase'))

    event_publisher = providers.Singleton(
        _lazy('src.adapters.django_app.events.publishers', 'InMemoryEventPublisher')
    )

    department_repository = providers.Singleton(_lazy(_MEMORY, 'InMemoryDepartmentRepository'), db=database)
    employee_repository = providers.Singleton(_lazy(_MEMORY, 'InMemoryEmployeeRepository'), db=database)
    project_repository = providers.Singleton(_lazy(_MEMORY, 'InMemoryProjectRepository'), db=database)
    client_repository = providers.Singleton(_lazy(_MEMORY, 'InMemoryClientRepository'), db=database)
    assignment_repository = providers.Singleton(_lazy(_MEMORY, 'InMemoryAssignmentRepository'), db=database)
    project_link_repository = providers.Singleton(_lazy(_MEMORY, 'InMemoryProjectLinkRepository'), db=database)

    unit_of_work = providers.Factory(
        _lazy(_MEMORY, 'InMemoryUnitOfWork'),
        db=database,
        event_publisher=event_publisher,
    )

    workforce_service = providers.Factory(
        _lazy('src.core.workforce.facade', 'WorkforceService'),
        department_repo=department_repository,
        employee_repo=employee_repository,
        project_repo=project_repository,
        client_repo=client_repository,
        assignment_repo=assignment_repository,
        link_repo=project_link_repository,
        uow_factory=unit_of_work.provider,
    )
