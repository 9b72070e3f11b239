"""
Repositórios em memória do domínio Workforce.

Implementam os Ports de src/core/workforce/ports.py sobre um
InMemoryDatabase compartilhado. Úteis para:
- Testes unitários
- Prototipagem
- Desenvolvimento local

Exclusões seguem o schema relacional: remover projeto ou funcionário
remove também alocações e vínculos que o referenciam.
"""

from datetime import date
from typing import Iterable, List, Optional
import logging

from src.core.shared.exceptions import ReferentialIntegrityViolationError
from src.core.workforce.entities import (
    Assignment,
    Client,
    Employee,
    Project,
)

from .database import InMemoryDatabase

logger = logging.getLogger(__name__)


class _InMemoryEntityRepository:
    """CRUD comum às entidades com id inteiro."""

    table: str = ""

    def __init__(self, db: InMemoryDatabase):
        self.db = db

    def create(self, entity):
        saved = entity.with_id(self.db.next_id(self.table))
        self.db.put(self.table, saved.id, saved)
        logger.info(f"{self.table} saved: {saved.id}")
        return saved

    def get_by_id(self, entity_id: int):
        return self.db.get(self.table, entity_id)

    def list_all(self) -> list:
        return sorted(self.db.values(self.table), key=lambda entity: entity.id)

    def update(self, entity) -> bool:
        if entity.id is None or not self.db.contains(self.table, entity.id):
            return False
        self.db.put(self.table, entity.id, entity)
        logger.info(f"{self.table} updated: {entity.id}")
        return True

    def delete(self, entity_id: int) -> bool:
        deleted = self.db.remove(self.table, entity_id)
        if deleted:
            self._cascade(entity_id)
            logger.info(f"{self.table} deleted: {entity_id}")
        return deleted

    def _cascade(self, entity_id: int) -> None:
        pass

    def _remove_links(self, table: str, position: int, entity_id: int) -> None:
        for key, _ in self.db.rows(table):
            if key[position] == entity_id:
                self.db.remove(table, key)


class InMemoryDepartmentRepository(_InMemoryEntityRepository):
    table = "department"

    def delete(self, department_id: int) -> bool:
        """
        Raises:
            ReferentialIntegrityViolationError: Se há funcionários
        """
        headcount = sum(
            1 for employee in self.db.values("employee")
            if employee.department_id == department_id
        )
        if headcount:
            raise ReferentialIntegrityViolationError(
                f"Departamento {department_id} possui {headcount} funcionário(s)",
                rule="department_has_employees",
            )
        return super().delete(department_id)

    def _cascade(self, department_id: int) -> None:
        self._remove_links("project_department", 1, department_id)


class InMemoryEmployeeRepository(_InMemoryEntityRepository):
    table = "employee"

    def get_by_id_for_update(self, employee_id: int) -> Optional[Employee]:
        self.db.lock_row(self.table, employee_id)
        return self.db.get(self.table, employee_id)

    def list_by_ids(self, employee_ids: Iterable[int]) -> List[Employee]:
        found = (self.db.get(self.table, employee_id) for employee_id in set(employee_ids))
        return sorted((e for e in found if e is not None), key=lambda e: e.id)

    def count_by_department(self, department_id: int) -> int:
        return sum(1 for e in self.db.values(self.table) if e.department_id == department_id)

    def _cascade(self, employee_id: int) -> None:
        self._remove_links("employee_project", 0, employee_id)


class InMemoryProjectRepository(_InMemoryEntityRepository):
    table = "project"

    def list_active_by_department(self, department_id: int, sort_key: str) -> List[Project]:
        projects = (
            self.db.get(self.table, project_id)
            for project_id, linked_department in self.db.values("project_department")
            if linked_department == department_id
        )
        active = {p.id: p for p in projects if p is not None and p.is_active}
        return sorted(active.values(), key=lambda p: (getattr(p, sort_key), p.id))

    def _cascade(self, project_id: int) -> None:
        self._remove_links("employee_project", 1, project_id)
        self._remove_links("project_client", 0, project_id)
        self._remove_links("project_department", 0, project_id)


class InMemoryClientRepository(_InMemoryEntityRepository):
    table = "client"

    def list_by_project(self, project_id: int) -> List[Client]:
        client_ids = {
            client_id for linked_project, client_id in self.db.values("project_client")
            if linked_project == project_id
        }
        return [c for c in self.list_all() if c.id in client_ids]

    def list_by_upcoming_deadline(self, deadline: date) -> List[Client]:
        client_ids = set()
        for project_id, client_id in self.db.values("project_client"):
            project = self.db.get("project", project_id)
            if project is not None and project.ends_by(deadline):
                client_ids.add(client_id)
        return [c for c in self.list_all() if c.id in client_ids]

    def _cascade(self, client_id: int) -> None:
        self._remove_links("project_client", 1, client_id)


class InMemoryAssignmentRepository:
    """Alocações chaveadas por (employee_id, project_id)."""

    table = "employee_project"

    def __init__(self, db: InMemoryDatabase):
        self.db = db

    def create(self, assignment: Assignment) -> bool:
        key = (assignment.employee_id, assignment.project_id)
        if self.db.contains(self.table, key):
            return False
        self.db.put(self.table, key, assignment)
        logger.info(f"Assignment saved: {key}")
        return True

    def list_by_project(self, project_id: int) -> List[Assignment]:
        return [a for key, a in sorted(self.db.rows(self.table)) if key[1] == project_id]

    def update(self, assignment: Assignment) -> bool:
        key = (assignment.employee_id, assignment.project_id)
        if not self.db.contains(self.table, key):
            return False
        self.db.put(self.table, key, assignment)
        return True

    def delete(self, employee_id: int, project_id: int) -> bool:
        return self.db.remove(self.table, (employee_id, project_id))


class InMemoryProjectLinkRepository:
    """Vínculos projeto ↔ cliente e projeto ↔ departamento."""

    def __init__(self, db: InMemoryDatabase):
        self.db = db

    def _add(self, table: str, key: tuple) -> bool:
        if self.db.contains(table, key):
            return False
        self.db.put(table, key, key)
        return True

    def add_client(self, project_id: int, client_id: int) -> bool:
        return self._add("project_client", (project_id, client_id))

    def remove_client(self, project_id: int, client_id: int) -> bool:
        return self.db.remove("project_client", (project_id, client_id))

    def add_department(self, project_id: int, department_id: int) -> bool:
        return self._add("project_department", (project_id, department_id))

    def remove_department(self, project_id: int, department_id: int) -> bool:
        return self.db.remove("project_department", (project_id, department_id))

