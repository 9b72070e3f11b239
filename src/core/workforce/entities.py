"""
Entidades do Domínio Workforce.

Este módulo define as entidades de domínio como registros de valor
imutáveis (frozen dataclasses). Alterações produzem novos valores via
``dataclasses.replace`` em vez de mutar a instância, o que evita
aliasing entre chamadores concorrentes.

Entidades:
- Department: Unidade organizacional, dona de funcionários
- Employee: Membro da força de trabalho
- Project: Iniciativa com datas, orçamento e status
- Client: Organização externa associada a projetos
- Assignment: Alocação de um funcionário em um projeto

Identificadores são inteiros atribuídos pelo repositório. Antes do
primeiro create o id é None.
"""

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from .validation import (
    to_decimal,
    validate_allocation,
    validate_client,
    validate_department,
    validate_employee,
    validate_project,
)


# Status reconhecido pelas consultas de alocação (comparação case-sensitive)
ACTIVE_STATUS = "Active"

DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class Department:
    """
    Entidade de Domínio: Departamento.

    Invariantes:
    - Nome e localização obrigatórios
    - Orçamento anual positivo
    - Não pode ser removido enquanto possuir funcionários
    """

    id: Optional[int] = None
    name: str = ""
    location: str = ""
    annual_budget: Decimal = Decimal("0")

    @classmethod
    def create(
        cls,
        name: str,
        location: str,
        annual_budget,
        id: Optional[int] = None,
    ) -> "Department":
        """
        Factory method com validação.

        Raises:
            ValidationError: Se dados inválidos
        """
        department = cls(
            id=id,
            name=name,
            location=location,
            annual_budget=to_decimal(annual_budget, "annual_budget"),
        )
        validate_department(department)
        return department

    def with_id(self, department_id: int) -> "Department":
        return replace(self, id=department_id)


@dataclass(frozen=True)
class Employee:
    """
    Entidade de Domínio: Funcionário.

    Invariantes:
    - Nome completo e cargo obrigatórios
    - Data de admissão obrigatória
    - Salário anual positivo
    - Referencia exatamente um departamento existente

    Example:
        employee = Employee.create(
            full_name="Alice Thompson",
            title="Junior Developer",
            hire_date=date(2024, 10, 1),
            salary=Decimal("65000.00"),
            department_id=1,
        )
        moved = employee.transfer_to(2)  # novo valor; employee não muda
    """

    id: Optional[int] = None
    full_name: str = ""
    title: str = ""
    hire_date: Optional[date] = None
    salary: Decimal = Decimal("0")
    department_id: Optional[int] = None

    @classmethod
    def create(
        cls,
        full_name: str,
        title: str,
        hire_date: date,
        salary,
        department_id: int,
        id: Optional[int] = None,
    ) -> "Employee":
        """
        Factory method com validação.

        Raises:
            ValidationError: Se dados inválidos
        """
        employee = cls(
            id=id,
            full_name=full_name,
            title=title,
            hire_date=hire_date,
            salary=to_decimal(salary, "salary"),
            department_id=department_id,
        )
        validate_employee(employee)
        return employee

    def with_id(self, employee_id: int) -> "Employee":
        return replace(self, id=employee_id)

    def transfer_to(self, department_id: int) -> "Employee":
        """Retorna o funcionário referenciando outro departamento."""
        return replace(self, department_id=department_id)

    @property
    def monthly_salary(self) -> Decimal:
        """Salário mensal para exibição (2 casas, HALF_UP)."""
        return (self.salary / MONTHS_PER_YEAR).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Project:
    """
    Entidade de Domínio: Projeto.

    Invariantes:
    - Nome obrigatório
    - end_date >= start_date
    - Orçamento positivo

    O status é texto livre; apenas "Active" (exato) é reconhecido
    pelas consultas de projetos ativos.
    """

    id: Optional[int] = None
    name: str = ""
    description: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: Decimal = Decimal("0")
    status: str = ACTIVE_STATUS

    @classmethod
    def create(
        cls,
        name: str,
        start_date: date,
        end_date: date,
        budget,
        description: str = "",
        status: str = ACTIVE_STATUS,
        id: Optional[int] = None,
    ) -> "Project":
        """
        Factory method com validação.

        Raises:
            ValidationError: Se dados inválidos
        """
        project = cls(
            id=id,
            name=name,
            description=description or "",
            start_date=start_date,
            end_date=end_date,
            budget=to_decimal(budget, "budget"),
            status=status,
        )
        validate_project(project)
        return project

    def with_id(self, project_id: int) -> "Project":
        return replace(self, id=project_id)

    @property
    def duration_in_months(self) -> int:
        """
        Duração em meses, arredondando mês parcial para cima.

        Conta os dias de forma inclusiva: um projeto de um dia
        dura 1 mês; 30 dias = 1 mês; 31 dias = 2 meses.
        """
        days = (self.end_date - self.start_date).days + 1
        return -(-days // DAYS_PER_MONTH)

    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE_STATUS

    def ends_by(self, deadline: date) -> bool:
        """Verifica se o projeto termina até a data informada (inclusive)."""
        return self.end_date <= deadline


@dataclass(frozen=True)
class Client:
    """
    Entidade de Domínio: Cliente.

    Invariantes:
    - Nome e setor obrigatórios
    - E-mail de contato deve conter "@"
    """

    id: Optional[int] = None
    name: str = ""
    industry: str = ""
    contact_person: str = ""
    contact_phone: str = ""
    contact_email: str = ""

    @classmethod
    def create(
        cls,
        name: str,
        industry: str,
        contact_email: str,
        contact_person: str = "",
        contact_phone: str = "",
        id: Optional[int] = None,
    ) -> "Client":
        client = cls(
            id=id,
            name=name,
            industry=industry,
            contact_person=contact_person or "",
            contact_phone=contact_phone or "",
            contact_email=contact_email,
        )
        validate_client(client)
        return client

    def with_id(self, client_id: int) -> "Client":
        return replace(self, id=client_id)


@dataclass(frozen=True)
class Assignment:
    """
    Alocação de um funcionário em um projeto.

    Chave composta (employee_id, project_id). A alocação vale por par,
    não há teto global somando projetos.
    """

    employee_id: int
    project_id: int
    allocation_percent: int

    @classmethod
    def create(cls, employee_id: int, project_id: int, allocation_percent: int) -> "Assignment":
        validate_allocation(allocation_percent)
        return cls(
            employee_id=employee_id,
            project_id=project_id,
            allocation_percent=allocation_percent,
        )
