"""
Testes do WorkforceService (fronteira que retorna Result).

Usa o TestingContainer (banco em memória) para montar o serviço do
mesmo jeito que a aplicação monta o serviço real.
"""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import Mock

from src.config.container import TestingContainer
from src.core.shared.exceptions import ErrorKind
from src.core.workforce.entities import Client, Department, Employee, Project
from src.core.workforce.events import EmployeeTransferredEvent
from src.core.workforce.facade import WorkforceService


@pytest.fixture
def container():
    return TestingContainer()


@pytest.fixture
def service(container):
    return container.workforce_service()


@pytest.fixture
def staffed(service):
    """Dois departamentos, um funcionário e um projeto alocado."""
    engineering = service.create_department(
        Department.create(name="Engineering", location="Building A", annual_budget="500000")
    ).unwrap()
    marketing = service.create_department(
        Department.create(name="Marketing", location="Building B", annual_budget="200000")
    ).unwrap()
    alice = service.create_employee(
        Employee.create(
            full_name="Alice Thompson",
            title="Developer",
            hire_date=date(2024, 10, 1),
            salary="120000.00",
            department_id=engineering.id,
        )
    ).unwrap()
    apollo = service.create_project(
        Project.create(
            name="Apollo",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 2, 29),
            budget="250000",
        )
    ).unwrap()
    service.assign_employee_to_project(alice.id, apollo.id, 50).unwrap()
    service.assign_department_to_project(apollo.id, engineering.id).unwrap()
    return {"engineering": engineering, "marketing": marketing, "alice": alice, "apollo": apollo}


class TestWorkforceServiceResults:

    def test_custo_de_pessoal(self, service, staffed):
        result = service.calculate_project_hr_cost(staffed["apollo"].id)

        assert result.ok
        assert result.value == Decimal("10000.00")

    def test_custo_projeto_inexistente(self, service):
        result = service.calculate_project_hr_cost(999)

        assert result.kind is ErrorKind.NOT_FOUND

    def test_projetos_por_departamento(self, service, staffed):
        result = service.get_projects_by_department(staffed["engineering"].id, "name")

        assert [p.name for p in result.value] == ["Apollo"]

    def test_chave_de_ordenacao_invalida(self, service, staffed):
        result = service.get_projects_by_department(staffed["engineering"].id, "shipdate")

        assert result.kind is ErrorKind.INVALID_INPUT
        assert result.error.field == "sort_key"

    def test_prazo_negativo(self, service):
        assert service.find_clients_by_upcoming_project_deadline(-1).kind is ErrorKind.INVALID_INPUT

    def test_prazo_muito_grande_nao_vira_falha_de_repositorio(self, service):
        result = service.find_clients_by_upcoming_project_deadline(10 ** 7)

        assert result.ok
        assert result.value == []

    def test_transferencia_e_evento(self, container, service, staffed):
        result = service.transfer_employee_to_department(staffed["alice"].id, staffed["marketing"].id)

        assert result.ok and result.value is True
        assert service.get_employee(staffed["alice"].id).value.department_id == staffed["marketing"].id
        events = container.event_publisher().get_events_by_type("EmployeeTransferredEvent")
        assert len(events) == 1
        assert isinstance(events[0], EmployeeTransferredEvent)

    def test_transferencia_mesmo_departamento(self, service, staffed):
        result = service.transfer_employee_to_department(staffed["alice"].id, staffed["engineering"].id)

        assert result.kind is ErrorKind.INVALID_INPUT
        assert service.get_employee(staffed["alice"].id).value == staffed["alice"]

    def test_transferencia_para_departamento_inexistente(self, service, staffed):
        result = service.transfer_employee_to_department(staffed["alice"].id, 999)

        assert result.kind is ErrorKind.NOT_FOUND
        assert service.get_employee(staffed["alice"].id).value == staffed["alice"]

    def test_remover_departamento_com_funcionarios(self, service, staffed):
        result = service.delete_department(staffed["engineering"].id)

        assert result.kind is ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION
        assert service.get_department(staffed["engineering"].id).ok
        assert service.get_employee(staffed["alice"].id).ok

    def test_remover_departamento_vazio(self, service, staffed):
        assert service.delete_department(staffed["marketing"].id).value is True
        assert service.get_department(staffed["marketing"].id).kind is ErrorKind.NOT_FOUND

    def test_alocacoes_do_projeto(self, service, staffed):
        apollo_id = staffed["apollo"].id
        alice_id = staffed["alice"].id

        assert service.update_employee_project_allocation(alice_id, apollo_id, 100).value is True
        assert service.calculate_project_hr_cost(apollo_id).value == Decimal("20000.00")
        assert [a.allocation_percent for a in service.get_project_assignments(apollo_id).value] == [100]
        assert service.remove_employee_from_project(alice_id, apollo_id).value is True
        assert service.calculate_project_hr_cost(apollo_id).value == Decimal("0.00")

    def test_clientes_do_projeto(self, service, staffed):
        acme = service.create_client(
            Client.create(name="Acme", industry="Retail", contact_email="ops@acme.example")
        ).unwrap()
        apollo_id = staffed["apollo"].id

        assert service.assign_client_to_project(apollo_id, acme.id).value is True
        assert service.get_project_clients(apollo_id).value == [acme]
        assert service.remove_client_from_project(apollo_id, acme.id).value is True

    def test_listagens_crud(self, service, staffed):
        assert len(service.list_departments().value) == 2
        assert len(service.list_employees().value) == 1
        assert len(service.list_projects().value) == 1
        assert service.list_clients().value == []

    def test_falha_inesperada_vira_store_failure(self, container):
        broken = Mock()
        broken.get_by_id.side_effect = ConnectionError("database unavailable")
        service = WorkforceService(
            department_repo=container.department_repository(),
            employee_repo=container.employee_repository(),
            project_repo=broken,
            client_repo=container.client_repository(),
            assignment_repo=container.assignment_repository(),
            link_repo=container.project_link_repository(),
            uow_factory=container.unit_of_work,
        )

        result = service.get_project(1)

        assert result.kind is ErrorKind.STORE_FAILURE
        assert isinstance(result.error.__cause__, ConnectionError)

    def test_relogio_injetado(self, container):
        client_repo = Mock()
        client_repo.list_by_upcoming_deadline.return_value = []
        service = WorkforceService(
            department_repo=Mock(),
            employee_repo=Mock(),
            project_repo=Mock(),
            client_repo=client_repo,
            assignment_repo=Mock(),
            link_repo=Mock(),
            uow_factory=container.unit_of_work,
            today=lambda: date(2024, 12, 25),
        )

        service.find_clients_by_upcoming_project_deadline(7)

        client_repo.list_by_upcoming_deadline.assert_called_once_with(date(2025, 1, 1))
