"""
Ports (Interfaces) do Domínio Workforce.

Define os contratos que os Adapters de persistência (Entity Store)
devem implementar. O core só conversa com o repositório através
destes Protocols.

Convenções:
- create(entity) -> entity com id atribuído
- get_by_id(id) -> entity ou None
- list_all() -> lista
- update(entity) -> bool (linhas afetadas > 0)
- delete(id) -> bool

Implementações:
- Django ORM: src/adapters/django_app/workforce/repositories.py
- Memória: src/adapters/memory/repositories.py
"""

from datetime import date
from typing import Iterable, List, Optional, Protocol, runtime_checkable

from .entities import Assignment, Client, Department, Employee, Project


@runtime_checkable
class DepartmentRepository(Protocol):
    """
    Persistência de departamentos.

    Note:
        delete() deve verificar se há funcionários antes de remover e
        lançar ReferentialIntegrityViolationError nesse caso.
    """

    def create(self, department: Department) -> Department:
        ...

    def get_by_id(self, department_id: int) -> Optional[Department]:
        ...

    def list_all(self) -> List[Department]:
        ...

    def update(self, department: Department) -> bool:
        ...

    def delete(self, department_id: int) -> bool:
        ...


@runtime_checkable
class EmployeeRepository(Protocol):
    """Persistência de funcionários."""

    def create(self, employee: Employee) -> Employee:
        ...

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        ...

    def get_by_id_for_update(self, employee_id: int) -> Optional[Employee]:
        """
        Lê o funcionário com lock exclusivo de linha.

        Deve ser chamado dentro de um UnitOfWork aberto. O lock é
        liberado no commit ou rollback do escopo.
        """
        ...

    def list_all(self) -> List[Employee]:
        ...

    def list_by_ids(self, employee_ids: Iterable[int]) -> List[Employee]:
        """Busca em lote; ids inexistentes são simplesmente omitidos."""
        ...

    def count_by_department(self, department_id: int) -> int:
        ...

    def update(self, employee: Employee) -> bool:
        ...

    def delete(self, employee_id: int) -> bool:
        ...


@runtime_checkable
class ProjectRepository(Protocol):
    """Persistência e consultas de projetos."""

    def create(self, project: Project) -> Project:
        ...

    def get_by_id(self, project_id: int) -> Optional[Project]:
        ...

    def list_all(self) -> List[Project]:
        ...

    def list_active_by_department(self, department_id: int, sort_key: str) -> List[Project]:
        """
        Projetos com status exatamente "Active" ligados ao departamento.

        Args:
            department_id: Departamento
            sort_key: Uma das chaves de validation.SORT_KEYS (já validada)

        Returns:
            Projetos distintos em ordem ascendente pela chave
        """
        ...

    def update(self, project: Project) -> bool:
        ...

    def delete(self, project_id: int) -> bool:
        ...


@runtime_checkable
class ClientRepository(Protocol):
    """Persistência e consultas de clientes."""

    def create(self, client: Client) -> Client:
        ...

    def get_by_id(self, client_id: int) -> Optional[Client]:
        ...

    def list_all(self) -> List[Client]:
        ...

    def list_by_project(self, project_id: int) -> List[Client]:
        ...

    def list_by_upcoming_deadline(self, deadline: date) -> List[Client]:
        """Clientes distintos com ao menos um projeto terminando até deadline."""
        ...

    def update(self, client: Client) -> bool:
        ...

    def delete(self, client_id: int) -> bool:
        ...


@runtime_checkable
class AssignmentRepository(Protocol):
    """Persistência das alocações funcionário ↔ projeto."""

    def create(self, assignment: Assignment) -> bool:
        ...

    def list_by_project(self, project_id: int) -> List[Assignment]:
        ...

    def update(self, assignment: Assignment) -> bool:
        ...

    def delete(self, employee_id: int, project_id: int) -> bool:
        ...


@runtime_checkable
class ProjectLinkRepository(Protocol):
    """Vínculos projeto ↔ cliente e projeto ↔ departamento."""

    def add_client(self, project_id: int, client_id: int) -> bool:
        ...

    def remove_client(self, project_id: int, client_id: int) -> bool:
        ...

    def add_department(self, project_id: int, department_id: int) -> bool:
        ...

    def remove_department(self, project_id: int, department_id: int) -> bool:
        ...
