"""
Configurações globais do Pytest para Workforce Manager.

Este arquivo é carregado automaticamente pelo pytest e fornece:
- Django settings para testes (SQLite em memória)
- Fixtures do banco em memória e dos repositórios
- Builders de entidades de exemplo
"""

from datetime import date
import pytest

from src.adapters.memory import (
    InMemoryAssignmentRepository,
    InMemoryClientRepository,
    InMemoryDatabase,
    InMemoryDepartmentRepository,
    InMemoryEmployeeRepository,
    InMemoryProjectLinkRepository,
    InMemoryProjectRepository,
    InMemoryUnitOfWork,
)
from src.core.workforce.entities import Client, Department, Employee, Project


def pytest_configure(config):
    """Configura Django antes dos testes."""
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.contenttypes',
                'src.adapters.django_app.workforce',
            ],
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='America/Sao_Paulo',
        )
        django.setup()

    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


# =============================================================================
# Banco em memória
# =============================================================================

@pytest.fixture
def memory_db():
    return InMemoryDatabase(lock_timeout=5.0)


@pytest.fixture
def department_repo(memory_db):
    return InMemoryDepartmentRepository(memory_db)


@pytest.fixture
def employee_repo(memory_db):
    return InMemoryEmployeeRepository(memory_db)


@pytest.fixture
def project_repo(memory_db):
    return InMemoryProjectRepository(memory_db)


@pytest.fixture
def client_repo(memory_db):
    return InMemoryClientRepository(memory_db)


@pytest.fixture
def assignment_repo(memory_db):
    return InMemoryAssignmentRepository(memory_db)


@pytest.fixture
def link_repo(memory_db):
    return InMemoryProjectLinkRepository(memory_db)


@pytest.fixture
def uow_factory(memory_db):
    """Cria um InMemoryUnitOfWork novo por chamada."""
    return lambda: InMemoryUnitOfWork(memory_db)


# =============================================================================
# Builders
# =============================================================================

def _department(name="Engineering", location="Building A", annual_budget="500000.00"):
    return Department.create(name=name, location=location, annual_budget=annual_budget)


def _employee(department_id, full_name="Alice Thompson", salary="120000.00", title="Developer"):
    return Employee.create(
        full_name=full_name,
        title=title,
        hire_date=date(2024, 10, 1),
        salary=salary,
        department_id=department_id,
    )


def _project(
    name="Apollo",
    start_date=date(2024, 1, 1),
    end_date=date(2024, 2, 29),
    budget="250000.00",
    status="Active",
):
    return Project.create(
        name=name,
        start_date=start_date,
        end_date=end_date,
        budget=budget,
        status=status,
    )


def _client(name="Acme Corp", industry="Manufacturing", contact_email="ops@acme.example"):
    return Client.create(name=name, industry=industry, contact_email=contact_email)


@pytest.fixture
def engineering(department_repo):
    return department_repo.create(_department())


@pytest.fixture
def marketing(department_repo):
    return department_repo.create(_department(name="Marketing", location="Building B"))


@pytest.fixture
def alice(employee_repo, engineering):
    return employee_repo.create(_employee(engineering.id))


@pytest.fixture
def apollo(project_repo):
    return project_repo.create(_project())


@pytest.fixture
def make_department():
    """Factory de Department válido (campos sobrescrevíveis)."""
    return _department


@pytest.fixture
def make_employee():
    return _employee


@pytest.fixture
def make_project():
    return _project


@pytest.fixture
def make_client():
    return _client
