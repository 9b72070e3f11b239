"""
Domínio Workforce - Departamentos, Funcionários, Projetos e Clientes.

Este módulo contém toda a lógica de negócio da gestão de força de
trabalho, incluindo:
- Entidades (Department, Employee, Project, Client, Assignment)
- Validação de campos antes de qualquer escrita
- Use Cases (custo de pessoal, transferência, consultas, CRUD)
- Domain Events (EmployeeTransferredEvent)
- Ports (Interfaces para repositórios)
- WorkforceService (fronteira que retorna Result)

Características do Domínio:
- Valores monetários em Decimal, nunca float
- Entidades imutáveis; alterações geram novos valores
- Transferência de departamento com lock de linha e rollback
"""

from .entities import (
    ACTIVE_STATUS,
    Assignment,
    Client,
    Department,
    Employee,
    Project,
)
from .events import EmployeeTransferredEvent
from .dtos import AssignEmployeeInputDTO, TransferEmployeeInputDTO
from .ports import (
    AssignmentRepository,
    ClientRepository,
    DepartmentRepository,
    EmployeeRepository,
    ProjectLinkRepository,
    ProjectRepository,
)
from .use_cases import (
    AssignmentService,
    CalculateProjectHRCostService,
    ClientService,
    DepartmentService,
    EmployeeService,
    FindClientsByDeadlineService,
    ListDepartmentProjectsService,
    ProjectLinkService,
    ProjectService,
    TransferEmployeeService,
)
from .facade import WorkforceService

__all__ = [
    # Entities
    "ACTIVE_STATUS",
    "Assignment",
    "Client",
    "Department",
    "Employee",
    "Project",
    # Events
    "EmployeeTransferredEvent",
    # DTOs
    "AssignEmployeeInputDTO",
    "TransferEmployeeInputDTO",
    # Ports
    "AssignmentRepository",
    "ClientRepository",
    "DepartmentRepository",
    "EmployeeRepository",
    "ProjectLinkRepository",
    "ProjectRepository",
    # Use Cases
    "AssignmentService",
    "CalculateProjectHRCostService",
    "ClientService",
    "DepartmentService",
    "EmployeeService",
    "FindClientsByDeadlineService",
    "ListDepartmentProjectsService",
    "ProjectLinkService",
    "ProjectService",
    "TransferEmployeeService",
    # Facade
    "WorkforceService",
]
