"""
Data Transfer Objects (DTOs) do Domínio Workforce.

DTOs de entrada imutáveis para os Use Cases de escrita que recebem
apenas identificadores e parâmetros (sem uma entidade completa).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TransferEmployeeInputDTO:
    """
    DTO de entrada para transferir funcionário.

    Attributes:
        employee_id: ID do funcionário
        new_department_id: ID do departamento de destino
    """

    employee_id: int
    new_department_id: int


@dataclass(frozen=True)
class AssignEmployeeInputDTO:
    """
    DTO de entrada para alocar funcionário em projeto.

    Attributes:
        employee_id: ID do funcionário
        project_id: ID do projeto
        allocation_percent: Percentual de alocação (1-100)
    """

    employee_id: int
    project_id: int
    allocation_percent: int
