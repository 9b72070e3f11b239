"""
Testes de Integração dos repositórios Django.

Repository ↔ Database (SQLite em memória) via Mappers.
"""

import pytest
from dataclasses import replace
from datetime import date

from src.adapters.django_app.workforce.models import DepartmentModel, EmployeeModel, ProjectClientModel
from src.adapters.django_app.workforce import repositories
from src.adapters.django_app.workforce.repositories import PROJECT_SORT_FIELDS
from src.core.shared.exceptions import ReferentialIntegrityViolationError, ValidationError
from src.core.workforce.entities import Assignment
from src.core.workforce.validation import SORT_KEYS


pytestmark = pytest.mark.django_db


class TestCrud:

    def test_create_atribui_id(self, orm_departments, make_department):
        department = orm_departments.create(make_department())

        assert department.id is not None
        assert DepartmentModel.objects.filter(pk=department.id).exists()
        assert orm_departments.get_by_id(department.id) == department

    def test_get_inexistente(self, orm_projects):
        assert orm_projects.get_by_id(999) is None

    def test_update(self, seeded, orm_projects):
        apollo = seeded["apollo"]

        assert orm_projects.update(replace(apollo, budget=apollo.budget * 2)) is True
        assert orm_projects.get_by_id(apollo.id).budget == apollo.budget * 2

    def test_update_inexistente(self, seeded, orm_projects):
        assert orm_projects.update(replace(seeded["apollo"], id=999)) is False

    def test_list_all_ordenado_por_id(self, seeded, orm_projects):
        ids = [p.id for p in orm_projects.list_all()]

        assert ids == sorted(ids)
        assert len(ids) == 3

    def test_delete_projeto_remove_vinculos(self, seeded, orm_projects):
        apollo = seeded["apollo"]

        assert orm_projects.delete(apollo.id) is True
        assert not ProjectClientModel.objects.filter(project_id=apollo.id).exists()
        assert orm_projects.delete(apollo.id) is False


class TestDepartmentDeletion:

    def test_departamento_com_funcionarios(self, seeded, orm_departments):
        with pytest.raises(ReferentialIntegrityViolationError) as exc_info:
            orm_departments.delete(seeded["engineering"].id)

        assert exc_info.value.rule == "department_has_employees"
        assert EmployeeModel.objects.filter(pk=seeded["alice"].id).exists()

    def test_departamento_vazio(self, seeded, orm_departments):
        assert orm_departments.delete(seeded["marketing"].id) is True


class TestEmployeeQueries:

    def test_lock_de_leitura_dentro_do_uow(self, seeded, orm_employees, django_uow):
        with django_uow:
            employee = orm_employees.get_by_id_for_update(seeded["alice"].id)

        assert employee == seeded["alice"]

    def test_list_by_ids_ignora_inexistentes(self, seeded, orm_employees):
        alice = seeded["alice"]

        assert orm_employees.list_by_ids([alice.id, alice.id, 999]) == [alice]
        assert orm_employees.list_by_ids([]) == []

    def test_count_by_department(self, seeded, orm_employees):
        assert orm_employees.count_by_department(seeded["engineering"].id) == 1
        assert orm_employees.count_by_department(seeded["marketing"].id) == 0


class TestProjectsByDepartment:

    def test_mapa_de_ordenacao_cobre_chaves_validas(self):
        assert set(PROJECT_SORT_FIELDS) == set(SORT_KEYS)

    @pytest.mark.parametrize("sort_key, expected", [
        ("name", ["Apollo", "Zephyr"]),
        ("budget", ["Zephyr", "Apollo"]),
        ("end_date", ["Apollo", "Zephyr"]),
        ("start_date", ["Apollo", "Zephyr"]),
    ])
    def test_somente_ativos_ordenados(self, seeded, orm_projects, sort_key, expected):
        projects = orm_projects.list_active_by_department(seeded["engineering"].id, sort_key)

        assert [p.name for p in projects] == expected

    def test_status_com_caixa_diferente_nao_e_ativo(self, seeded, orm_projects, orm_links, make_project):
        engineering = seeded["engineering"]
        for status in ("active", "ACTIVE"):
            project = orm_projects.create(make_project(name=f"Hermes {status}", status=status))
            orm_links.add_department(project.id, engineering.id)

        projects = orm_projects.list_active_by_department(engineering.id, "name")

        assert [p.name for p in projects] == ["Apollo", "Zephyr"]

    def test_linhas_devolvidas_pelo_banco_sem_status_exato_sao_descartadas(
        self, seeded, orm_projects, orm_links, make_project, monkeypatch
    ):
        # Simula collation case-insensitive: o banco devolve "active"
        hermes = orm_projects.create(make_project(name="Hermes", status="active"))
        orm_links.add_department(hermes.id, seeded["engineering"].id)
        monkeypatch.setattr(repositories, "ACTIVE_STATUS", "active")

        assert orm_projects.list_active_by_department(seeded["engineering"].id, "name") == []

    def test_chave_fora_do_mapa(self, seeded, orm_projects):
        with pytest.raises(ValidationError):
            orm_projects.list_active_by_department(seeded["engineering"].id, "name; DROP TABLE project")

    def test_departamento_sem_projetos(self, seeded, orm_projects):
        assert orm_projects.list_active_by_department(seeded["marketing"].id, "name") == []


class TestClientQueries:

    def test_prazo_sem_duplicatas(self, seeded, orm_clients):
        clients = orm_clients.list_by_upcoming_deadline(date(2024, 12, 31))

        assert clients == [seeded["acme"]]

    def test_prazo_inclusivo(self, seeded, orm_clients):
        assert orm_clients.list_by_upcoming_deadline(date(2024, 2, 29)) == [seeded["acme"]]
        assert orm_clients.list_by_upcoming_deadline(date(2024, 2, 28)) == []

    def test_clientes_do_projeto(self, seeded, orm_clients):
        assert orm_clients.list_by_project(seeded["apollo"].id) == [seeded["acme"]]
        assert orm_clients.list_by_project(seeded["legacy"].id) == []


class TestAssignments:

    def test_ciclo_de_vida(self, seeded, orm_assignments):
        alice, apollo = seeded["alice"], seeded["apollo"]
        assignment = Assignment.create(employee_id=alice.id, project_id=apollo.id, allocation_percent=40)

        assert orm_assignments.create(assignment) is True
        assert orm_assignments.create(assignment) is False
        assert orm_assignments.update(replace(assignment, allocation_percent=80)) is True
        assert orm_assignments.list_by_project(apollo.id) == [replace(assignment, allocation_percent=80)]
        assert orm_assignments.delete(alice.id, apollo.id) is True
        assert orm_assignments.list_by_project(apollo.id) == []
        assert orm_assignments.update(assignment) is False


class TestProjectLinks:

    def test_vinculo_duplicado(self, seeded, orm_links):
        assert orm_links.add_client(seeded["apollo"].id, seeded["acme"].id) is False

    def test_remover_vinculo(self, seeded, orm_links, orm_clients, orm_projects):
        apollo, acme, engineering = seeded["apollo"], seeded["acme"], seeded["engineering"]

        assert orm_links.remove_client(apollo.id, acme.id) is True
        assert orm_clients.list_by_project(apollo.id) == []
        assert orm_clients.list_by_project(seeded["zephyr"].id) == [acme]
        assert orm_links.remove_department(apollo.id, engineering.id) is True
        assert [p.name for p in orm_projects.list_active_by_department(engineering.id, "name")] == ["Zephyr"]
        assert orm_links.remove_department(apollo.id, engineering.id) is False
