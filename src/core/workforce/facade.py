"""
WorkforceService - Fronteira do core do domínio Workforce.

Expõe todas as operações do domínio retornando Result em vez de
lançar exceções. Cada chamada monta o Use Case com um UnitOfWork novo
(obtido de uow_factory), de modo que chamadores concorrentes nunca
compartilham escopo de transação.

Example:
    service = container.workforce_service()
    result = service.transfer_employee_to_department(42, 7)
    if not result.ok:
        logger.warning(result.error.to_dict())
"""

from datetime import date
from decimal import Decimal
from typing import Callable, List

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.result import Result, capture

from .dtos import AssignEmployeeInputDTO, TransferEmployeeInputDTO
from .entities import Assignment, Client, Department, Employee, Project
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


class WorkforceService:
    """
    Facade das operações de negócio.

    Args:
        department_repo / employee_repo / project_repo / client_repo:
            Repositórios das entidades
        assignment_repo: Alocações funcionário ↔ projeto
        link_repo: Vínculos projeto ↔ cliente/departamento
        uow_factory: Cria um UnitOfWork por operação
        today: Relógio usado pela consulta de prazos
    """

    def __init__(
        self,
        department_repo: DepartmentRepository,
        employee_repo: EmployeeRepository,
        project_repo: ProjectRepository,
        client_repo: ClientRepository,
        assignment_repo: AssignmentRepository,
        link_repo: ProjectLinkRepository,
        uow_factory: Callable[[], UnitOfWork],
        today: Callable[[], date] = date.today,
    ):
        self.department_repo = department_repo
        self.employee_repo = employee_repo
        self.project_repo = project_repo
        self.client_repo = client_repo
        self.assignment_repo = assignment_repo
        self.link_repo = link_repo
        self.uow_factory = uow_factory
        self.today = today

    # ==================== Operações centrais ====================

    def calculate_project_hr_cost(self, project_id: int) -> Result[Decimal]:
        service = CalculateProjectHRCostService(
            self.project_repo, self.assignment_repo, self.employee_repo, self.uow_factory()
        )
        return capture(service.execute, project_id)

    def get_projects_by_department(self, department_id: int, sort_key: str) -> Result[List[Project]]:
        service = ListDepartmentProjectsService(self.department_repo, self.project_repo)
        return capture(service.execute, department_id, sort_key)

    def find_clients_by_upcoming_project_deadline(self, days_until_deadline: int) -> Result[List[Client]]:
        service = FindClientsByDeadlineService(self.client_repo, today=self.today)
        return capture(service.execute, days_until_deadline)

    def transfer_employee_to_department(self, employee_id: int, new_department_id: int) -> Result[bool]:
        service = TransferEmployeeService(self.employee_repo, self.department_repo, self.uow_factory())
        return capture(
            service.execute,
            TransferEmployeeInputDTO(employee_id=employee_id, new_department_id=new_department_id),
        )

    # ==================== Departamentos ====================

    def _departments(self) -> DepartmentService:
        return DepartmentService(self.department_repo, self.employee_repo, self.uow_factory())

    def create_department(self, department: Department) -> Result[Department]:
        return capture(self._departments().create, department)

    def get_department(self, department_id: int) -> Result[Department]:
        return capture(self._departments().get, department_id)

    def list_departments(self) -> Result[List[Department]]:
        return capture(self._departments().list)

    def update_department(self, department: Department) -> Result[bool]:
        return capture(self._departments().update, department)

    def delete_department(self, department_id: int) -> Result[bool]:
        return capture(self._departments().delete, department_id)

    # ==================== Funcionários ====================

    def _employees(self) -> EmployeeService:
        return EmployeeService(self.employee_repo, self.department_repo)

    def create_employee(self, employee: Employee) -> Result[Employee]:
        return capture(self._employees().create, employee)

    def get_employee(self, employee_id: int) -> Result[Employee]:
        return capture(self._employees().get, employee_id)

    def list_employees(self) -> Result[List[Employee]]:
        return capture(self._employees().list)

    def update_employee(self, employee: Employee) -> Result[bool]:
        return capture(self._employees().update, employee)

    def delete_employee(self, employee_id: int) -> Result[bool]:
        return capture(self._employees().delete, employee_id)

    # ==================== Projetos ====================

    def create_project(self, project: Project) -> Result[Project]:
        return capture(ProjectService(self.project_repo).create, project)

    def get_project(self, project_id: int) -> Result[Project]:
        return capture(ProjectService(self.project_repo).get, project_id)

    def list_projects(self) -> Result[List[Project]]:
        return capture(ProjectService(self.project_repo).list)

    def update_project(self, project: Project) -> Result[bool]:
        return capture(ProjectService(self.project_repo).update, project)

    def delete_project(self, project_id: int) -> Result[bool]:
        return capture(ProjectService(self.project_repo).delete, project_id)

    # ==================== Clientes ====================

    def create_client(self, client: Client) -> Result[Client]:
        return capture(ClientService(self.client_repo).create, client)

    def get_client(self, client_id: int) -> Result[Client]:
        return capture(ClientService(self.client_repo).get, client_id)

    def list_clients(self) -> Result[List[Client]]:
        return capture(ClientService(self.client_repo).list)

    def update_client(self, client: Client) -> Result[bool]:
        return capture(ClientService(self.client_repo).update, client)

    def delete_client(self, client_id: int) -> Result[bool]:
        return capture(ClientService(self.client_repo).delete, client_id)

    # ==================== Alocações e vínculos ====================

    def _assignments(self) -> AssignmentService:
        return AssignmentService(self.assignment_repo, self.employee_repo, self.project_repo)

    def _links(self) -> ProjectLinkService:
        return ProjectLinkService(
            self.link_repo, self.project_repo, self.client_repo, self.department_repo
        )

    def assign_employee_to_project(
        self, employee_id: int, project_id: int, allocation_percent: int
    ) -> Result[bool]:
        dto = AssignEmployeeInputDTO(
            employee_id=employee_id,
            project_id=project_id,
            allocation_percent=allocation_percent,
        )
        return capture(self._assignments().assign, dto)

    def update_employee_project_allocation(
        self, employee_id: int, project_id: int, allocation_percent: int
    ) -> Result[bool]:
        dto = AssignEmployeeInputDTO(
            employee_id=employee_id,
            project_id=project_id,
            allocation_percent=allocation_percent,
        )
        return capture(self._assignments().update_allocation, dto)

    def remove_employee_from_project(self, employee_id: int, project_id: int) -> Result[bool]:
        return capture(self._assignments().remove, employee_id, project_id)

    def get_project_assignments(self, project_id: int) -> Result[List[Assignment]]:
        return capture(self._assignments().list_for_project, project_id)

    def assign_client_to_project(self, project_id: int, client_id: int) -> Result[bool]:
        return capture(self._links().add_client, project_id, client_id)

    def remove_client_from_project(self, project_id: int, client_id: int) -> Result[bool]:
        return capture(self._links().remove_client, project_id, client_id)

    def get_project_clients(self, project_id: int) -> Result[List[Client]]:
        return capture(self._links().list_clients, project_id)

    def assign_department_to_project(self, project_id: int, department_id: int) -> Result[bool]:
        return capture(self._links().add_department, project_id, department_id)

    def remove_department_from_project(self, project_id: int, department_id: int) -> Result[bool]:
        return capture(self._links().remove_department, project_id, department_id)
