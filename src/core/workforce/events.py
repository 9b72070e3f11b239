"""
Domain Events do Domínio Workforce.

Eventos:
- EmployeeTransferredEvent: Funcionário mudou de departamento

Uso:
    with uow:
        ...
        employee_repo.update(moved)
        uow.publish_event(EmployeeTransferredEvent(...))
    # publicado somente após commit
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.core.shared.events import DomainEvent


@dataclass
class EmployeeTransferredEvent(DomainEvent):
    """
    Evento: Funcionário foi transferido de departamento.

    Attributes:
        from_department_id: Departamento de origem
        to_department_id: Departamento de destino
    """

    from_department_id: Optional[int] = None
    to_department_id: Optional[int] = None

    @property
    def aggregate_type(self) -> str:
        return "Employee"

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "from_department_id": self.from_department_id,
            "to_department_id": self.to_department_id,
        }
