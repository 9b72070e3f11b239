"""
Unit of Work em memória.

Abre uma transação do InMemoryDatabase na thread corrente. O commit
descarta o journal e libera os locks de linha; o rollback reaplica o
journal antes de liberar. Eventos são entregues ao publisher somente
após commit.
"""

from typing import List, Optional
import logging

from src.core.shared.events import DomainEvent
from src.core.shared.interfaces import EventPublisher, TransactionState, UnitOfWork

from .database import InMemoryDatabase

logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work sobre InMemoryDatabase.

    Example:
        uow = InMemoryUnitOfWork(db)
        with uow:
            employee = employee_repo.get_by_id_for_update(1)
            employee_repo.update(employee.transfer_to(2))
            uow.publish_event(event)

        assert uow.is_committed
        assert len(uow.published_events) == 1
    """

    def __init__(self, db: InMemoryDatabase, event_publisher: Optional[EventPublisher] = None):
        super().__init__()
        self.db = db
        self._event_publisher = event_publisher
        self._published_events: List[DomainEvent] = []

    def _begin_transaction(self) -> None:
        self.db.begin()
        logger.debug("In-memory transaction started")

    def commit(self) -> None:
        if self._state is not TransactionState.OPEN:
            return

        self.db.commit()
        self._state = TransactionState.COMMITTED
        logger.debug("In-memory transaction committed")

        events = self.collect_events()
        self.clear_events()
        self._published_events.extend(events)
        if self._event_publisher is None:
            return

        # Falha de publicação não desfaz o commit; apenas é logada
        for event in events:
            try:
                self._event_publisher.publish(event)
            except Exception as e:
                logger.error(f"Failed to publish event {event.event_type}: {e}")

    def rollback(self) -> None:
        if self._state is not TransactionState.OPEN:
            return

        self.db.rollback()
        self._state = TransactionState.ROLLED_BACK
        self.clear_events()
        logger.debug("In-memory transaction rolled back")

    @property
    def published_events(self) -> List[DomainEvent]:
        """Eventos entregues após commit."""
        return self._published_events
