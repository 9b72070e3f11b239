"""
Repositórios Django do domínio Workforce.

Implementam os Ports de src/core/workforce/ports.py sobre o Django ORM.

Otimizações:
- Consultas de vínculo com distinct() para não duplicar linhas do join
- Busca de funcionários em lote (pk__in) no cálculo de custo
- select_for_update() na leitura com lock da transferência

Ordenação da listagem por departamento usa um mapa fechado chave →
campo do model; o valor recebido nunca é interpolado em SQL.
"""

from datetime import date
from typing import Dict, Iterable, List, Optional
import logging

from django.db.models import ProtectedError

from src.core.shared.exceptions import (
    ReferentialIntegrityViolationError,
    ValidationError,
)
from src.core.workforce.entities import (
    ACTIVE_STATUS,
    Assignment,
    Client,
    Department,
    Employee,
    Project,
)

from ..shared.repository import BaseRepository
from .mappers import (
    AssignmentMapper,
    ClientMapper,
    DepartmentMapper,
    EmployeeMapper,
    ProjectMapper,
)
from .models import (
    AssignmentModel,
    ClientModel,
    DepartmentModel,
    EmployeeModel,
    ProjectClientModel,
    ProjectDepartmentModel,
    ProjectModel,
)

logger = logging.getLogger(__name__)


# Chave de ordenação → campo do ProjectModel
PROJECT_SORT_FIELDS: Dict[str, str] = {
    "budget": "budget",
    "end_date": "end_date",
    "name": "name",
    "start_date": "start_date",
}


class DjangoDepartmentRepository(BaseRepository[Department, DepartmentModel]):
    model_class = DepartmentModel

    def to_entity(self, model: DepartmentModel) -> Department:
        return DepartmentMapper.to_entity(model)

    def to_fields(self, entity: Department) -> dict:
        return DepartmentMapper.to_fields(entity)

    def delete(self, department_id: int) -> bool:
        """
        Remove departamento sem funcionários.

        Raises:
            ReferentialIntegrityViolationError: Se há funcionários
        """
        headcount = EmployeeModel.objects.filter(department_id=department_id).count()
        if headcount:
            raise ReferentialIntegrityViolationError(
                f"Departamento {department_id} possui {headcount} funcionário(s)",
                rule="department_has_employees",
            )

        try:
            return super().delete(department_id)
        except ProtectedError as e:
            # Funcionário inserido entre a contagem e o DELETE
            raise ReferentialIntegrityViolationError(
                f"Departamento {department_id} possui funcionários",
                rule="department_has_employees",
            ) from e


class DjangoEmployeeRepository(BaseRepository[Employee, EmployeeModel]):
    model_class = EmployeeModel

    def to_entity(self, model: EmployeeModel) -> Employee:
        return EmployeeMapper.to_entity(model)

    def to_fields(self, entity: Employee) -> dict:
        return EmployeeMapper.to_fields(entity)

    def get_by_id_for_update(self, employee_id: int) -> Optional[Employee]:
        """
        SELECT ... FOR UPDATE do funcionário.

        Exige um bloco atomic aberto (DjangoUnitOfWork). O lock é
        liberado no commit ou rollback.
        """
        model = EmployeeModel.objects.select_for_update().filter(pk=employee_id).first()
        return self.to_entity(model) if model is not None else None

    def list_by_ids(self, employee_ids: Iterable[int]) -> List[Employee]:
        ids = list(set(employee_ids))
        if not ids:
            return []
        qs = EmployeeModel.objects.filter(pk__in=ids).order_by("id")
        return [self.to_entity(m) for m in qs]

    def count_by_department(self, department_id: int) -> int:
        return EmployeeModel.objects.filter(department_id=department_id).count()


class DjangoProjectRepository(BaseRepository[Project, ProjectModel]):
    model_class = ProjectModel

    def to_entity(self, model: ProjectModel) -> Project:
        return ProjectMapper.to_entity(model)

    def to_fields(self, entity: Project) -> dict:
        return ProjectMapper.to_fields(entity)

    def list_active_by_department(self, department_id: int, sort_key: str) -> List[Project]:
        order_field = PROJECT_SORT_FIELDS.get(sort_key)
        if order_field is None:
            raise ValidationError(f"Chave de ordenação inválida: {sort_key!r}", field="sort_key")

        qs = (
            ProjectModel.objects
            .filter(department_links__department_id=department_id, status=ACTIVE_STATUS)
            .distinct()
            .order_by(order_field, "id")
        )
        # Collations *_ci (MySQL) casam "active"; comparação exata na entidade
        projects = (self.to_entity(m) for m in qs)
        return [p for p in projects if p.is_active]


class DjangoClientRepository(BaseRepository[Client, ClientModel]):
    model_class = ClientModel

    def to_entity(self, model: ClientModel) -> Client:
        return ClientMapper.to_entity(model)

    def to_fields(self, entity: Client) -> dict:
        return ClientMapper.to_fields(entity)

    def list_by_project(self, project_id: int) -> List[Client]:
        qs = ClientModel.objects.filter(project_links__project_id=project_id).distinct().order_by("id")
        return [self.to_entity(m) for m in qs]

    def list_by_upcoming_deadline(self, deadline: date) -> List[Client]:
        qs = (
            ClientModel.objects
            .filter(project_links__project__end_date__lte=deadline)
            .distinct()
            .order_by("id")
        )
        return [self.to_entity(m) for m in qs]


class DjangoAssignmentRepository:
    """Alocações funcionário ↔ projeto (employee_project)."""

    def create(self, assignment: Assignment) -> bool:
        _, created = AssignmentModel.objects.get_or_create(
            employee_id=assignment.employee_id,
            project_id=assignment.project_id,
            defaults={"allocation_percent": assignment.allocation_percent},
        )
        if created:
            logger.info(
                f"Assignment saved: employee={assignment.employee_id} "
                f"project={assignment.project_id}"
            )
        return created

    def list_by_project(self, project_id: int) -> List[Assignment]:
        qs = AssignmentModel.objects.filter(project_id=project_id).order_by("employee_id")
        return [AssignmentMapper.to_entity(m) for m in qs]

    def update(self, assignment: Assignment) -> bool:
        updated = AssignmentModel.objects.filter(
            employee_id=assignment.employee_id,
            project_id=assignment.project_id,
        ).update(allocation_percent=assignment.allocation_percent)
        return updated > 0

    def delete(self, employee_id: int, project_id: int) -> bool:
        deleted, _ = AssignmentModel.objects.filter(
            employee_id=employee_id, project_id=project_id
        ).delete()
        return deleted > 0


class DjangoProjectLinkRepository:
    """Vínculos projeto ↔ cliente e projeto ↔ departamento."""

    def add_client(self, project_id: int, client_id: int) -> bool:
        _, created = ProjectClientModel.objects.get_or_create(project_id=project_id, client_id=client_id)
        return created

    def remove_client(self, project_id: int, client_id: int) -> bool:
        deleted, _ = ProjectClientModel.objects.filter(project_id=project_id, client_id=client_id).delete()
        return deleted > 0

    def add_department(self, project_id: int, department_id: int) -> bool:
        _, created = ProjectDepartmentModel.objects.get_or_create(
            project_id=project_id, department_id=department_id
        )
        return created

    def remove_department(self, project_id: int, department_id: int) -> bool:
        deleted, _ = ProjectDepartmentModel.objects.filter(
            project_id=project_id, department_id=department_id
        ).delete()
        return deleted > 0
