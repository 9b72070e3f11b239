"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio (família única discriminada por ErrorKind)
- Result tipado para a fronteira do core
- Interfaces (Ports)
- Base classes para Domain Events
"""

from .exceptions import (
    DomainException,
    ErrorKind,
    ValidationError,
    EntityNotFoundError,
    ReferentialIntegrityViolationError,
    TransactionFailureError,
    StoreFailureError,
)
from .events import DomainEvent
from .interfaces import EventPublisher, TransactionState, UnitOfWork
from .result import Result, capture

__all__ = [
    "DomainException",
    "ErrorKind",
    "ValidationError",
    "EntityNotFoundError",
    "ReferentialIntegrityViolationError",
    "TransactionFailureError",
    "StoreFailureError",
    "DomainEvent",
    "EventPublisher",
    "TransactionState",
    "UnitOfWork",
    "Result",
    "capture",
]
