"""
Fixtures para testes dos adapters Django.

O Django já é configurado em tests/conftest.py (SQLite em memória);
aqui ficam os repositórios ORM e registros de exemplo.
"""

from datetime import date
import pytest

from src.adapters.django_app.events.publishers import InMemoryEventPublisher
from src.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork
from src.adapters.django_app.workforce.repositories import (
    DjangoAssignmentRepository,
    DjangoClientRepository,
    DjangoDepartmentRepository,
    DjangoEmployeeRepository,
    DjangoProjectLinkRepository,
    DjangoProjectRepository,
)


@pytest.fixture
def orm_departments():
    return DjangoDepartmentRepository()


@pytest.fixture
def orm_employees():
    return DjangoEmployeeRepository()


@pytest.fixture
def orm_projects():
    return DjangoProjectRepository()


@pytest.fixture
def orm_clients():
    return DjangoClientRepository()


@pytest.fixture
def orm_assignments():
    return DjangoAssignmentRepository()


@pytest.fixture
def orm_links():
    return DjangoProjectLinkRepository()


@pytest.fixture
def publisher():
    return InMemoryEventPublisher()


@pytest.fixture
def django_uow(publisher):
    return DjangoUnitOfWork(event_publisher=publisher)


@pytest.fixture
def seeded(db, orm_departments, orm_employees, orm_projects, orm_clients, orm_links,
           make_department, make_employee, make_project, make_client):
    """
    Cenário base:
    - Engineering com Alice; Marketing vazio
    - Apollo (ativo, termina 2024-02-29) e Zephyr (ativo, termina 2024-06-30)
      ligados a Engineering; Legacy (Closed) também ligado
    - Acme vinculado a Apollo e Zephyr
    """
    engineering = orm_departments.create(make_department())
    marketing = orm_departments.create(make_department(name="Marketing", location="Building B"))
    alice = orm_employees.create(make_employee(engineering.id))
    apollo = orm_projects.create(make_project())
    zephyr = orm_projects.create(make_project(
        name="Zephyr", start_date=date(2024, 3, 1), end_date=date(2024, 6, 30), budget="90000.00",
    ))
    legacy = orm_projects.create(make_project(name="Legacy", status="Closed"))
    acme = orm_clients.create(make_client())
    for project in (apollo, zephyr, legacy):
        orm_links.add_department(project.id, engineering.id)
    orm_links.add_client(apollo.id, acme.id)
    orm_links.add_client(zephyr.id, acme.id)
    return {
        "engineering": engineering,
        "marketing": marketing,
        "alice": alice,
        "apollo": apollo,
        "zephyr": zephyr,
        "legacy": legacy,
        "acme": acme,
    }
