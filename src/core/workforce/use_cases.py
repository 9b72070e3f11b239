"""
Use Cases (Application Services) do Domínio Workforce.

Este módulo contém os casos de uso que orquestram a lógica de negócio
coordenando entidades, repositórios e transações.

Use Cases implementados:
- CalculateProjectHRCostService: Custo de pessoal de um projeto
- ListDepartmentProjectsService: Projetos ativos de um departamento
- FindClientsByDeadlineService: Clientes com prazo de projeto próximo
- TransferEmployeeService: Transferência atômica de departamento
- DepartmentService / EmployeeService / ProjectService / ClientService:
  CRUD validado
- AssignmentService: Alocação funcionário ↔ projeto
- ProjectLinkService: Vínculos projeto ↔ cliente/departamento

Princípios:
- Validação antes de qualquer escrita (falha rápida, sem escrita parcial)
- Erros propagados como DomainException
- Dependências injetadas (DI)
- Sem lógica de infraestrutura
"""

from collections import defaultdict
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_EVEN, ROUND_HALF_UP, localcontext
from typing import Callable, Dict, List
import logging

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ReferentialIntegrityViolationError,
    TransactionFailureError,
    ValidationError,
)

from .dtos import AssignEmployeeInputDTO, TransferEmployeeInputDTO
from .entities import Assignment, Client, Department, Employee, Project
from .events import EmployeeTransferredEvent
from .ports import (
    AssignmentRepository,
    ClientRepository,
    DepartmentRepository,
    EmployeeRepository,
    ProjectLinkRepository,
    ProjectRepository,
)
from .validation import (
    validate_allocation,
    validate_client,
    validate_days_until_deadline,
    validate_department,
    validate_employee,
    validate_project,
    validate_sort_key,
)

logger = logging.getLogger(__name__)


# Precisão intermediária do custo por funcionário e arredondamento final
COST_QUANTUM = Decimal("0.00000001")
CENT = Decimal("0.01")
COST_CONTEXT_PRECISION = 34
# salário anual × meses × percentual / (12 meses × 100%)
ANNUAL_PERCENT_DIVISOR = 1200


def _not_found(entity_type: str, entity_id: int, label: str) -> EntityNotFoundError:
    return EntityNotFoundError(
        f"{label} {entity_id} não encontrado",
        entity_type=entity_type,
        entity_id=entity_id,
    )


def _require_id(entity) -> None:
    if entity.id is None:
        raise ValidationError("ID é obrigatório para atualização", field="id")


class CalculateProjectHRCostService:
    """
    Use Case: Calcular custo de pessoal (HR cost) de um projeto.

    Fluxo:
    1. Buscar projeto (NotFound se ausente)
    2. Calcular duração em meses (mês parcial conta inteiro)
    3. Somar alocações por funcionário
    4. Buscar funcionários em lote
    5. Custo por funcionário = salário × meses × alocação / 1200,
       com 8 casas decimais (HALF_EVEN)
    6. Somar e arredondar o total para 2 casas (HALF_UP)

    O total é arredondado uma única vez. Funcionário referenciado em alocação mas
    ausente do repositório contribui com zero.

    Example:
        service = CalculateProjectHRCostService(
            project_repo, assignment_repo, employee_repo, uow
        )
        total = service.execute(project_id=10)  # Decimal("10000.00")
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        assignment_repo: AssignmentRepository,
        employee_repo: EmployeeRepository,
        uow: UnitOfWork,
    ):
        self.project_repo = project_repo
        self.assignment_repo = assignment_repo
        self.employee_repo = employee_repo
        self.uow = uow

    def execute(self, project_id: int) -> Decimal:
        """
        Calcula o custo total de pessoal do projeto.

        Args:
            project_id: ID do projeto

        Returns:
            Custo total com 2 casas decimais

        Raises:
            EntityNotFoundError: Se projeto não existe
        """
        with self.uow:
            project = self.project_repo.get_by_id(project_id)
            if project is None:
                raise _not_found("Project", project_id, "Projeto")

            allocation_by_employee: Dict[int, int] = defaultdict(int)
            for assignment in self.assignment_repo.list_by_project(project_id):
                allocation_by_employee[assignment.employee_id] += assignment.allocation_percent

            employees = (
                self.employee_repo.list_by_ids(list(allocation_by_employee))
                if allocation_by_employee
                else []
            )

        salary_by_employee = {employee.id: employee.salary for employee in employees}
        months = project.duration_in_months

        with localcontext() as ctx:
            ctx.prec = COST_CONTEXT_PRECISION
            ctx.rounding = ROUND_HALF_EVEN

            total = Decimal("0")
            for employee_id, allocation in sorted(allocation_by_employee.items()):
                salary = salary_by_employee.get(employee_id)
                if salary is None:
                    logger.warning(
                        f"Employee {employee_id} assigned to project {project_id} "
                        f"not found; contributing zero"
                    )
                    continue

                cost = salary * months * allocation / ANNUAL_PERCENT_DIVISOR
                total += cost.quantize(COST_QUANTUM, rounding=ROUND_HALF_EVEN)

            total = total.quantize(CENT, rounding=ROUND_HALF_UP)

        logger.debug(
            f"HR cost for project {project_id}: {total} "
            f"({len(allocation_by_employee)} employees, {months} months)"
        )
        return total


class ListDepartmentProjectsService:
    """
    Use Case: Listar projetos ativos de um departamento.

    A chave de ordenação é validada contra uma allow-list antes de
    qualquer consulta ao repositório. Não usa UoW (leitura simples).
    """

    def __init__(self, department_repo: DepartmentRepository, project_repo: ProjectRepository):
        self.department_repo = department_repo
        self.project_repo = project_repo

    def execute(self, department_id: int, sort_key: str) -> List[Project]:
        """
        Lista projetos com status "Active" do departamento.

        Args:
            department_id: ID do departamento
            sort_key: budget, end_date, name ou start_date

        Returns:
            Projetos em ordem ascendente pela chave

        Raises:
            ValidationError: Se sort_key inválida
            EntityNotFoundError: Se departamento não existe
        """
        validate_sort_key(sort_key)

        if self.department_repo.get_by_id(department_id) is None:
            raise _not_found("Department", department_id, "Departamento")

        return self.project_repo.list_active_by_department(department_id, sort_key)


class FindClientsByDeadlineService:
    """
    Use Case: Clientes com projetos terminando nos próximos N dias.

    O prazo é hoje + N dias. Clientes com vários projetos no prazo
    aparecem uma única vez.
    """

    def __init__(self, client_repo: ClientRepository, today: Callable[[], date] = date.today):
        self.client_repo = client_repo
        self.today = today

    def execute(self, days_until_deadline: int) -> List[Client]:
        """
        Raises:
            ValidationError: Se days_until_deadline negativo
        """
        validate_days_until_deadline(days_until_deadline)

        try:
            deadline = self.today() + timedelta(days=days_until_deadline)
        except OverflowError:
            # Prazo além do calendário cobre todos os projetos
            deadline = date.max
        clients = self.client_repo.list_by_upcoming_deadline(deadline)

        unique = {client.id: client for client in clients}
        return [unique[client_id] for client_id in sorted(unique)]


class TransferEmployeeService:
    """
    Use Case: Transferir funcionário para outro departamento.

    Única operação com atomicidade multi-etapa.

    Fluxo:
    1. Abrir UoW
    2. Ler funcionário com lock exclusivo de linha
    3. Ler departamento de destino
    4. Rejeitar transferência para o mesmo departamento
    5. Atualizar referência de departamento
    6. Zero linhas afetadas → rollback e retorna False
    7. Commit e evento EmployeeTransferred

    Transferências concorrentes do mesmo funcionário são serializadas
    pelo lock: a segunda enxerga o resultado já comitado da primeira.
    Falhas inesperadas dentro do escopo são revertidas e relançadas
    como TransactionFailureError.
    """

    def __init__(
        self,
        employee_repo: EmployeeRepository,
        department_repo: DepartmentRepository,
        uow: UnitOfWork,
    ):
        self.employee_repo = employee_repo
        self.department_repo = department_repo
        self.uow = uow

    def execute(self, input_dto: TransferEmployeeInputDTO) -> bool:
        """
        Executa a transferência.

        Returns:
            True se transferido, False se o update não afetou linhas

        Raises:
            EntityNotFoundError: Se funcionário ou departamento não existe
            ValidationError: Se funcionário já está no departamento
            TransactionFailureError: Se falha inesperada no escopo
        """
        employee_id = input_dto.employee_id
        new_department_id = input_dto.new_department_id

        try:
            with self.uow:
                employee = self.employee_repo.get_by_id_for_update(employee_id)
                if employee is None:
                    raise _not_found("Employee", employee_id, "Funcionário")

                department = self.department_repo.get_by_id(new_department_id)
                if department is None:
                    raise _not_found("Department", new_department_id, "Departamento")

                if employee.department_id == department.id:
                    raise ValidationError(
                        f"Funcionário {employee_id} já está no departamento {new_department_id}",
                        field="new_department_id",
                    )

                if not self.employee_repo.update(employee.transfer_to(department.id)):
                    logger.warning(f"Transfer of employee {employee_id} affected no rows")
                    self.uow.rollback()
                    return False

                self.uow.publish_event(
                    EmployeeTransferredEvent(
                        aggregate_id=employee.id,
                        from_department_id=employee.department_id,
                        to_department_id=department.id,
                    )
                )
        except DomainException:
            raise
        except Exception as e:
            logger.error(f"Transfer of employee {employee_id} failed: {e}")
            raise TransactionFailureError(
                f"Falha ao transferir funcionário {employee_id}: {e}"
            ) from e

        logger.info(f"Employee {employee_id} transferred to department {new_department_id}")
        return True


class DepartmentService:
    """
    Use Cases: CRUD de departamentos.

    A remoção confere, dentro de um UoW, se o departamento ainda
    possui funcionários.
    """

    def __init__(
        self,
        department_repo: DepartmentRepository,
        employee_repo: EmployeeRepository,
        uow: UnitOfWork,
    ):
        self.department_repo = department_repo
        self.employee_repo = employee_repo
        self.uow = uow

    def create(self, department: Department) -> Department:
        validate_department(department)
        return self.department_repo.create(department)

    def get(self, department_id: int) -> Department:
        department = self.department_repo.get_by_id(department_id)
        if department is None:
            raise _not_found("Department", department_id, "Departamento")
        return department

    def list(self) -> List[Department]:
        return self.department_repo.list_all()

    def update(self, department: Department) -> bool:
        _require_id(department)
        validate_department(department)
        return self.department_repo.update(department)

    def delete(self, department_id: int) -> bool:
        """
        Remove departamento sem funcionários.

        Raises:
            ReferentialIntegrityViolationError: Se há funcionários
        """
        with self.uow:
            headcount = self.employee_repo.count_by_department(department_id)
            if headcount > 0:
                raise ReferentialIntegrityViolationError(
                    f"Departamento {department_id} possui {headcount} funcionário(s) "
                    f"e não pode ser removido",
                    rule="department_has_employees",
                )
            return self.department_repo.delete(department_id)


class EmployeeService:
    """
    Use Cases: CRUD de funcionários.

    Create e update exigem que o departamento referenciado exista.
    """

    def __init__(self, employee_repo: EmployeeRepository, department_repo: DepartmentRepository):
        self.employee_repo = employee_repo
        self.department_repo = department_repo

    def _require_department(self, department_id: int) -> None:
        if self.department_repo.get_by_id(department_id) is None:
            raise _not_found("Department", department_id, "Departamento")

    def create(self, employee: Employee) -> Employee:
        validate_employee(employee)
        self._require_department(employee.department_id)
        return self.employee_repo.create(employee)

    def get(self, employee_id: int) -> Employee:
        employee = self.employee_repo.get_by_id(employee_id)
        if employee is None:
            raise _not_found("Employee", employee_id, "Funcionário")
        return employee

    def list(self) -> List[Employee]:
        return self.employee_repo.list_all()

    def update(self, employee: Employee) -> bool:
        _require_id(employee)
        validate_employee(employee)
        self._require_department(employee.department_id)
        return self.employee_repo.update(employee)

    def delete(self, employee_id: int) -> bool:
        return self.employee_repo.delete(employee_id)


class ProjectService:
    """Use Cases: CRUD de projetos."""

    def __init__(self, project_repo: ProjectRepository):
        self.project_repo = project_repo

    def create(self, project: Project) -> Project:
        validate_project(project)
        return self.project_repo.create(project)

    def get(self, project_id: int) -> Project:
        project = self.project_repo.get_by_id(project_id)
        if project is None:
            raise _not_found("Project", project_id, "Projeto")
        return project

    def list(self) -> List[Project]:
        return self.project_repo.list_all()

    def update(self, project: Project) -> bool:
        _require_id(project)
        validate_project(project)
        return self.project_repo.update(project)

    def delete(self, project_id: int) -> bool:
        return self.project_repo.delete(project_id)


class ClientService:
    """Use Cases: CRUD de clientes."""

    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    def create(self, client: Client) -> Client:
        validate_client(client)
        return self.client_repo.create(client)

    def get(self, client_id: int) -> Client:
        client = self.client_repo.get_by_id(client_id)
        if client is None:
            raise _not_found("Client", client_id, "Cliente")
        return client

    def list(self) -> List[Client]:
        return self.client_repo.list_all()

    def update(self, client: Client) -> bool:
        _require_id(client)
        validate_client(client)
        return self.client_repo.update(client)

    def delete(self, client_id: int) -> bool:
        return self.client_repo.delete(client_id)


class AssignmentService:
    """
    Use Cases: Alocação de funcionários em projetos.

    Fluxo (assign):
    1. Validar percentual (1-100)
    2. Confirmar que funcionário e projeto existem
    3. Persistir alocação
    """

    def __init__(
        self,
        assignment_repo: AssignmentRepository,
        employee_repo: EmployeeRepository,
        project_repo: ProjectRepository,
    ):
        self.assignment_repo = assignment_repo
        self.employee_repo = employee_repo
        self.project_repo = project_repo

    def assign(self, input_dto: AssignEmployeeInputDTO) -> bool:
        """
        Raises:
            ValidationError: Se alocação fora de 1-100
            EntityNotFoundError: Se funcionário ou projeto não existe
        """
        validate_allocation(input_dto.allocation_percent)

        if self.employee_repo.get_by_id(input_dto.employee_id) is None:
            raise _not_found("Employee", input_dto.employee_id, "Funcionário")
        if self.project_repo.get_by_id(input_dto.project_id) is None:
            raise _not_found("Project", input_dto.project_id, "Projeto")

        return self.assignment_repo.create(
            Assignment.create(
                employee_id=input_dto.employee_id,
                project_id=input_dto.project_id,
                allocation_percent=input_dto.allocation_percent,
            )
        )

    def update_allocation(self, input_dto: AssignEmployeeInputDTO) -> bool:
        validate_allocation(input_dto.allocation_percent)
        return self.assignment_repo.update(
            Assignment(
                employee_id=input_dto.employee_id,
                project_id=input_dto.project_id,
                allocation_percent=input_dto.allocation_percent,
            )
        )

    def remove(self, employee_id: int, project_id: int) -> bool:
        return self.assignment_repo.delete(employee_id, project_id)

    def list_for_project(self, project_id: int) -> List[Assignment]:
        if self.project_repo.get_by_id(project_id) is None:
            raise _not_found("Project", project_id, "Projeto")
        return self.assignment_repo.list_by_project(project_id)


class ProjectLinkService:
    """Use Cases: Vínculos de projeto com clientes e departamentos."""

    def __init__(
        self,
        link_repo: ProjectLinkRepository,
        project_repo: ProjectRepository,
        client_repo: ClientRepository,
        department_repo: DepartmentRepository,
    ):
        self.link_repo = link_repo
        self.project_repo = project_repo
        self.client_repo = client_repo
        self.department_repo = department_repo

    def _require_project(self, project_id: int) -> None:
        if self.project_repo.get_by_id(project_id) is None:
            raise _not_found("Project", project_id, "Projeto")

    def add_client(self, project_id: int, client_id: int) -> bool:
        self._require_project(project_id)
        if self.client_repo.get_by_id(client_id) is None:
            raise _not_found("Client", client_id, "Cliente")
        return self.link_repo.add_client(project_id, client_id)

    def remove_client(self, project_id: int, client_id: int) -> bool:
        return self.link_repo.remove_client(project_id, client_id)

    def list_clients(self, project_id: int) -> List[Client]:
        self._require_project(project_id)
        return self.client_repo.list_by_project(project_id)

    def add_department(self, project_id: int, department_id: int) -> bool:
        self._require_project(project_id)
        if self.department_repo.get_by_id(department_id) is None:
            raise _not_found("Department", department_id, "Departamento")
        return self.link_repo.add_department(project_id, department_id)

    def remove_department(self, project_id: int, department_id: int) -> bool:
        return self.link_repo.remove_department(project_id, department_id)
