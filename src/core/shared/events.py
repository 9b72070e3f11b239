"""
Domain Events - Comunicação desacoplada entre partes do sistema.

Características:
- Auto-geração de ID e timestamp
- Serializáveis para log/transporte
- Rastreáveis via aggregate_id

Pattern:
    - Eventos são enfileirados no UoW durante a transação
    - Publicados somente após commit bem-sucedido
    - Descartados em rollback
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional
import uuid


@dataclass
class DomainEvent(ABC):
    """
    Classe base abstrata para Domain Events.

    Um Domain Event representa algo significativo que aconteceu
    no domínio (nomeado no passado: EmployeeTransferred).

    Attributes:
        aggregate_id: ID do agregado que gerou o evento
        event_id: Identificador único do evento
        occurred_at: Momento em que o evento ocorreu
        version: Versão do schema do evento
    """

    aggregate_id: Optional[int] = None
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    occurred_at: datetime = field(default_factory=datetime.now)
    version: int = 1

    def __post_init__(self):
        """Validação após inicialização."""
        if self.aggregate_id is None:
            raise ValueError("aggregate_id é obrigatório")

    @property
    @abstractmethod
    def aggregate_type(self) -> str:
        """Tipo do agregado que gerou o evento (ex: "Employee")."""
        ...

    @property
    def event_type(self) -> str:
        """Tipo do evento (nome da classe)."""
        return self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        """Serializa evento para dicionário."""
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "occurred_at": self.occurred_at.isoformat(),
            "version": self.version,
            "data": self._get_event_data(),
        }

    def _get_event_data(self) -> Dict[str, Any]:
        """Campos específicos da subclasse."""
        base_fields = {"event_id", "aggregate_id", "occurred_at", "version"}
        return {
            key: value
            for key, value in self.__dict__.items()
            if key not in base_fields and not key.startswith("_")
        }

    def __repr__(self) -> str:
        return (
            f"{self.event_type}("
            f"event_id={self.event_id[:8]}..., "
            f"aggregate_id={self.aggregate_id}, "
            f"occurred_at={self.occurred_at.isoformat()}"
            f")"
        )
