"""
Mappers para conversão entre Entities (Core) e Models (Django).

Responsabilidades:
- to_entity(): Model → Entity (para uso no Core)
- to_fields(): Entity → campos gravados (sem id)

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Valores lidos do banco não são revalidados (já passaram pelo Core)
"""

from typing import Any, Dict

from src.core.workforce.entities import (
    Assignment,
    Client,
    Department,
    Employee,
    Project,
)

from .models import (
    AssignmentModel,
    ClientModel,
    DepartmentModel,
    EmployeeModel,
    ProjectModel,
)


class DepartmentMapper:

    @staticmethod
    def to_entity(model: DepartmentModel) -> Department:
        return Department(
            id=model.pk,
            name=model.name,
            location=model.location,
            annual_budget=model.annual_budget,
        )

    @staticmethod
    def to_fields(entity: Department) -> Dict[str, Any]:
        return {
            "name": entity.name,
            "location": entity.location,
            "annual_budget": entity.annual_budget,
        }


class EmployeeMapper:

    @staticmethod
    def to_entity(model: EmployeeModel) -> Employee:
        return Employee(
            id=model.pk,
            full_name=model.full_name,
            title=model.title,
            hire_date=model.hire_date,
            salary=model.salary,
            department_id=model.department_id,
        )

    @staticmethod
    def to_fields(entity: Employee) -> Dict[str, Any]:
        return {
            "full_name": entity.full_name,
            "title": entity.title,
            "hire_date": entity.hire_date,
            "salary": entity.salary,
            "department_id": entity.department_id,
        }


class ProjectMapper:

    @staticmethod
    def to_entity(model: ProjectModel) -> Project:
        return Project(
            id=model.pk,
            name=model.name,
            description=model.description or "",
            start_date=model.start_date,
            end_date=model.end_date,
            budget=model.budget,
            status=model.status,
        )

    @staticmethod
    def to_fields(entity: Project) -> Dict[str, Any]:
        return {
            "name": entity.name,
            "description": entity.description,
            "start_date": entity.start_date,
            "end_date": entity.end_date,
            "budget": entity.budget,
            "status": entity.status,
        }


class ClientMapper:

    @staticmethod
    def to_entity(model: ClientModel) -> Client:
        return Client(
            id=model.pk,
            name=model.name,
            industry=model.industry,
            contact_person=model.contact_person,
            contact_phone=model.contact_phone,
            contact_email=model.contact_email,
        )

    @staticmethod
    def to_fields(entity: Client) -> Dict[str, Any]:
        return {
            "name": entity.name,
            "industry": entity.industry,
            "contact_person": entity.contact_person,
            "contact_phone": entity.contact_phone,
            "contact_email": entity.contact_email,
        }


class AssignmentMapper:

    @staticmethod
    def to_entity(model: AssignmentModel) -> Assignment:
        return Assignment(
            employee_id=model.employee_id,
            project_id=model.project_id,
            allocation_percent=model.allocation_percent,
        )
