"""
Unit of Work - Implementação Django.

Gerencia o escopo transacional das operações do core sobre
django.db.transaction.atomic, garantindo consistência de dados.

Responsabilidades:
- Abrir o bloco atomic ao entrar no contexto
- Commit (saída limpa do atomic) ou rollback (set_rollback + saída)
- Publicar eventos somente após commit bem-sucedido

ACID Guarantees:
- Atomicidade: Tudo ou nada
- Isolamento: Conexões Django são por thread; SELECT ... FOR UPDATE
  serializa escritas concorrentes na mesma linha
- Sem alternância manual de autocommit: dentro de outro atomic
  (ex.: testes) o escopo vira um savepoint
"""

from typing import Optional
import logging

from django.db import DEFAULT_DB_ALIAS, transaction

from src.core.shared.interfaces import EventPublisher, TransactionState, UnitOfWork

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Example:
        with DjangoUnitOfWork() as uow:
            employee = employee_repo.get_by_id_for_update(1)
            employee_repo.update(employee.transfer_to(2))
            uow.publish_event(EmployeeTransferredEvent(...))
        # Commit automático + eventos publicados

    Example com rollback:
        with DjangoUnitOfWork() as uow:
            repo.update(entity)
            raise Exception("Erro!")
        # Rollback automático, eventos descartados
    """

    def __init__(
        self,
        event_publisher: Optional[EventPublisher] = None,
        using: str = DEFAULT_DB_ALIAS,
    ):
        """
        Args:
            event_publisher: Publicador de eventos pós-commit
            using: Alias do banco em settings.DATABASES
        """
        super().__init__()
        self._event_publisher = event_publisher
        self._using = using
        self._atomic = None

    def _begin_transaction(self) -> None:
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Sai do bloco atomic (COMMIT ou RELEASE SAVEPOINT) e publica eventos.

        Raises:
            Exception: Se o commit falhar; o banco já desfez a transação
        """
        if self._state is not TransactionState.OPEN:
            return

        try:
            self._exit_atomic()
        except Exception as e:
            logger.error(f"Commit failed: {e}")
            self._state = TransactionState.ROLLED_BACK
            self.clear_events()
            raise

        self._state = TransactionState.COMMITTED
        logger.debug("Transaction committed")
        self._publish_events()

    def rollback(self) -> None:
        """
        Marca o bloco atomic para rollback e sai dele.

        Chamado automaticamente se exceção ocorrer dentro do contexto.
        """
        if self._state is not TransactionState.OPEN:
            return

        try:
            transaction.set_rollback(True, using=self._using)
            self._exit_atomic()
            logger.debug("Transaction rolled back")
        except Exception as e:
            logger.error(f"Rollback failed: {e}")
        finally:
            self._state = TransactionState.ROLLED_BACK
            self.clear_events()

    def _exit_atomic(self) -> None:
        atomic, self._atomic = self._atomic, None
        if atomic is not None:
            atomic.__exit__(None, None, None)

    def _publish_events(self) -> None:
        """
        Publica eventos enfileirados.

        Falha de publicação não desfaz o commit; apenas é logada.
        """
        events = self.collect_events()
        self.clear_events()

        for event in events:
            logger.info(
                f"Publishing event: {event.event_type} "
                f"for aggregate {event.aggregate_id}"
            )
            if self._event_publisher:
                try:
                    self._event_publisher.publish(event)
                except Exception as e:
                    logger.error(f"Failed to publish event: {e}")
