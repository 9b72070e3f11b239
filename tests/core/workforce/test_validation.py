"""
Testes Unitários para o Módulo de Validação do Domínio Workforce.

Cada regra de campo lança ValidationError com o campo correto;
valores válidos passam sem retorno.
"""

import pytest
from dataclasses import replace
from datetime import date
from decimal import Decimal

from src.core.shared.exceptions import ErrorKind, ValidationError
from src.core.workforce.entities import Client, Department, Employee, Project
from src.core.workforce.validation import (
    SORT_KEYS,
    to_decimal,
    validate_allocation,
    validate_client,
    validate_days_until_deadline,
    validate_department,
    validate_employee,
    validate_project,
    validate_sort_key,
)


@pytest.fixture
def department():
    return Department(id=1, name="Engineering", location="Building A", annual_budget=Decimal("500000"))


@pytest.fixture
def employee():
    return Employee(
        id=1,
        full_name="Alice Thompson",
        title="Developer",
        hire_date=date(2024, 10, 1),
        salary=Decimal("65000.00"),
        department_id=1,
    )


@pytest.fixture
def project():
    return Project(
        id=1,
        name="Apollo",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 6, 30),
        budget=Decimal("250000.00"),
    )


@pytest.fixture
def client():
    return Client(id=1, name="Acme Corp", industry="Manufacturing", contact_email="ops@acme.example")


class TestToDecimal:
    """Testes para conversão de valores monetários."""

    @pytest.mark.parametrize("value, expected", [
        (Decimal("1.10"), Decimal("1.10")),
        (120000, Decimal("120000")),
        (" 65000.50 ", Decimal("65000.50")),
    ])
    def test_aceita_decimal_int_e_str(self, value, expected):
        assert to_decimal(value, "salary") == expected

    @pytest.mark.parametrize("value", [None, 1.5, True, "abc"])
    def test_rejeita_float_bool_none_e_texto(self, value):
        with pytest.raises(ValidationError) as exc_info:
            to_decimal(value, "salary")

        assert exc_info.value.field == "salary"


class TestValidateDepartment:

    def test_departamento_valido(self, department):
        assert validate_department(department) is None

    @pytest.mark.parametrize("changes, field", [
        ({"name": ""}, "name"),
        ({"name": "   "}, "name"),
        ({"location": ""}, "location"),
        ({"annual_budget": Decimal("0")}, "annual_budget"),
        ({"annual_budget": Decimal("-1")}, "annual_budget"),
    ])
    def test_campos_invalidos(self, department, changes, field):
        with pytest.raises(ValidationError) as exc_info:
            validate_department(replace(department, **changes))

        assert exc_info.value.field == field
        assert exc_info.value.kind is ErrorKind.INVALID_INPUT


class TestValidateEmployee:

    def test_funcionario_valido(self, employee):
        assert validate_employee(employee) is None

    @pytest.mark.parametrize("changes, field", [
        ({"full_name": ""}, "full_name"),
        ({"title": ""}, "title"),
        ({"hire_date": None}, "hire_date"),
        ({"hire_date": "2024-10-01"}, "hire_date"),
        ({"salary": Decimal("0")}, "salary"),
        ({"department_id": None}, "department_id"),
    ])
    def test_campos_invalidos(self, employee, changes, field):
        with pytest.raises(ValidationError) as exc_info:
            validate_employee(replace(employee, **changes))

        assert exc_info.value.field == field


class TestValidateProject:

    def test_projeto_valido(self, project):
        assert validate_project(project) is None

    def test_projeto_de_um_dia_valido(self, project):
        one_day = replace(project, end_date=project.start_date)
        assert validate_project(one_day) is None

    def test_fim_antes_do_inicio(self, project):
        with pytest.raises(ValidationError) as exc_info:
            validate_project(replace(project, end_date=date(2023, 12, 31)))

        assert exc_info.value.field == "end_date"

    @pytest.mark.parametrize("changes, field", [
        ({"name": ""}, "name"),
        ({"start_date": None}, "start_date"),
        ({"end_date": None}, "end_date"),
        ({"budget": Decimal("0")}, "budget"),
    ])
    def test_campos_invalidos(self, project, changes, field):
        with pytest.raises(ValidationError) as exc_info:
            validate_project(replace(project, **changes))

        assert exc_info.value.field == field


class TestValidateClient:

    def test_cliente_valido(self, client):
        assert validate_client(client) is None

    @pytest.mark.parametrize("changes, field", [
        ({"name": ""}, "name"),
        ({"industry": ""}, "industry"),
        ({"contact_email": "ops.acme.example"}, "contact_email"),
        ({"contact_email": ""}, "contact_email"),
    ])
    def test_campos_invalidos(self, client, changes, field):
        with pytest.raises(ValidationError) as exc_info:
            validate_client(replace(client, **changes))

        assert exc_info.value.field == field


class TestValidateAllocation:

    @pytest.mark.parametrize("allocation", [1, 50, 100])
    def test_limites_validos(self, allocation):
        assert validate_allocation(allocation) is None

    @pytest.mark.parametrize("allocation", [0, 101, -5, True, 50.0, "50", None])
    def test_fora_do_intervalo_ou_tipo_errado(self, allocation):
        with pytest.raises(ValidationError) as exc_info:
            validate_allocation(allocation)

        assert exc_info.value.field == "allocation_percent"


class TestValidateSortKey:

    @pytest.mark.parametrize("sort_key", sorted(SORT_KEYS))
    def test_chaves_permitidas(self, sort_key):
        assert validate_sort_key(sort_key) is None

    @pytest.mark.parametrize("sort_key", [
        "shipdate",
        "NAME",
        "name; DROP TABLE project",
        "",
        None,
        ["name"],
    ])
    def test_chaves_rejeitadas(self, sort_key):
        with pytest.raises(ValidationError) as exc_info:
            validate_sort_key(sort_key)

        assert exc_info.value.field == "sort_key"


class TestValidateDaysUntilDeadline:

    @pytest.mark.parametrize("days", [0, 1, 365])
    def test_dias_validos(self, days):
        assert validate_days_until_deadline(days) is None

    @pytest.mark.parametrize("days", [-1, -30, 1.5, "7", None, False])
    def test_dias_invalidos(self, days):
        with pytest.raises(ValidationError) as exc_info:
            validate_days_until_deadline(days)

        assert exc_info.value.code == "VALIDATION_ERROR_DAYS_UNTIL_DEADLINE"
