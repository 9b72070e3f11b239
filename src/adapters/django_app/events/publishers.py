"""
Event Publishers - Publicadores de Eventos de Domínio.

Responsável por entregar eventos comitados a consumidores.
Implementações:
- LoggingEventPublisher: Loga e despacha para handlers síncronos
- InMemoryEventPublisher: Para testes

Padrão Observer/Pub-Sub para desacoplamento.
"""

from typing import Callable, Dict, List
import json
import logging

from src.core.shared.events import DomainEvent
from src.core.shared.interfaces import EventPublisher

logger = logging.getLogger(__name__)


class _HandlerRegistry:
    """Handlers síncronos registrados por tipo de evento."""

    def __init__(self):
        self._handlers: Dict[str, List[Callable[[DomainEvent], None]]] = {}

    def register_handler(
        self,
        event_type: str,
        handler: Callable[[DomainEvent], None]
    ) -> None:
        """Registra handler para tipo de evento."""
        self._handlers.setdefault(event_type, []).append(handler)

    def _dispatch_to_handlers(self, event: DomainEvent) -> None:
        # Handler com erro não desfaz o commit já realizado
        for handler in self._handlers.get(event.event_type, []):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Erro em handler para {event.event_type}: {e}")


class LoggingEventPublisher(_HandlerRegistry, EventPublisher):
    """
    Publisher que loga eventos.

    Usado por padrão: a auditoria de transferências fica no log da
    aplicação sem exigir infraestrutura de mensageria.
    """

    def __init__(self, log_level: int = logging.INFO):
        super().__init__()
        self._log_level = log_level

    def publish(self, event: DomainEvent) -> None:
        logger.log(
            self._log_level,
            f"[EVENT] {event.event_type} | "
            f"aggregate={event.aggregate_type}:{event.aggregate_id} | "
            f"data={json.dumps(event.to_dict(), default=str)}"
        )
        self._dispatch_to_handlers(event)


class InMemoryEventPublisher(_HandlerRegistry, EventPublisher):
    """
    Publisher em memória para testes.

    Armazena eventos publicados para verificação em testes.
    """

    def __init__(self):
        super().__init__()
        self._published_events: List[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self._published_events.append(event)
        self._dispatch_to_handlers(event)

    @property
    def published_events(self) -> List[DomainEvent]:
        return self._published_events.copy()

    def clear(self) -> None:
        self._published_events.clear()

    def get_events_by_type(self, event_type: str) -> List[DomainEvent]:
        return [e for e in self._published_events if e.event_type == event_type]
