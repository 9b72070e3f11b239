"""
Adapter em memória do domínio Workforce.

Banco em memória com locks de linha e journal de desfazer, repositórios
que implementam os Ports do core e um UnitOfWork correspondente.
Usado em testes e prototipagem.
"""

from .database import InMemoryDatabase
from .repositories import (
    InMemoryAssignmentRepository,
    InMemoryClientRepository,
    InMemoryDepartmentRepository,
    InMemoryEmployeeRepository,
    InMemoryProjectLinkRepository,
    InMemoryProjectRepository,
)
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryDatabase",
    "InMemoryAssignmentRepository",
    "InMemoryClientRepository",
    "InMemoryDepartmentRepository",
    "InMemoryEmployeeRepository",
    "InMemoryProjectLinkRepository",
    "InMemoryProjectRepository",
    "InMemoryUnitOfWork",
]
