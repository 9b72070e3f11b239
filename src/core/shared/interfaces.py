"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define as interfaces que os Adapters devem implementar.
São os "Ports" da Arquitetura Hexagonal.

Tipos de Ports:
- Driven Ports (lado direito): UnitOfWork, EventPublisher, repositórios
- Driving Ports (lado esquerdo): Definidos nos Use Cases

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List

from .events import DomainEvent


class TransactionState(Enum):
    """
    Estados de um escopo transacional.

    Fluxo:
        IDLE → OPEN → COMMITTED
                 └──→ ROLLED_BACK
    """

    IDLE = "idle"
    OPEN = "open"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


class UnitOfWork(ABC):
    """
    Unit of Work - Coordena transações atômicas.

    Garante que múltiplas operações de persistência sejam
    executadas como uma única unidade: ou todas são persistidas
    ou nenhuma é.

    Pattern: Context Manager
        with uow:
            employee = employee_repo.get_by_id_for_update(1)
            employee_repo.update(employee.transfer_to(2))
            uow.publish_event(event)
        # Commit automático ao sair sem erro
        # Rollback automático se exceção

    Responsabilidades:
    - Abrir/fechar o escopo de transação
    - Commit/Rollback coordenado
    - Liberar locks e conexão em qualquer caminho de saída
    - Publicar eventos apenas após commit bem-sucedido

    Um rollback explícito dentro do bloco (``uow.rollback()``) finaliza
    o escopo; o commit implícito na saída passa a ser ignorado.
    """

    def __init__(self):
        self._events: List[DomainEvent] = []
        self._state = TransactionState.IDLE

    def __enter__(self) -> "UnitOfWork":
        """
        Inicia contexto de transação.

        Returns:
            Self para permitir uso como context manager
        """
        self._events = []
        self._begin_transaction()
        self._state = TransactionState.OPEN
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """
        Finaliza contexto de transação.

        Returns:
            False para propagar exceções
        """
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False  # Não suprime exceções

    @property
    def state(self) -> TransactionState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is TransactionState.OPEN

    @property
    def is_committed(self) -> bool:
        return self._state is TransactionState.COMMITTED

    @property
    def is_rolled_back(self) -> bool:
        return self._state is TransactionState.ROLLED_BACK

    @abstractmethod
    def _begin_transaction(self) -> None:
        """
        Abre o escopo de transação no adapter.

        Django: entra em transaction.atomic()
        """
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """
        Persiste todas as mudanças e publica eventos.

        Ordem de execução:
        1. Commit da transação no banco
        2. Publicação de eventos enfileirados
        3. Limpeza de estado interno

        Note:
            Deve ser no-op se o escopo já foi finalizado.
        """
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Desfaz todas as mudanças e descarta eventos.

        Chamado automaticamente se exceção ocorrer dentro
        do bloco `with`. Deve ser no-op se o escopo já foi finalizado.
        """
        raise NotImplementedError

    def publish_event(self, event: DomainEvent) -> None:
        """
        Enfileira evento para publicação após commit.

        Args:
            event: Evento de domínio a ser publicado
        """
        self._events.append(event)

    def collect_events(self) -> List[DomainEvent]:
        """Retorna eventos enfileirados (para testing/debugging)."""
        return list(self._events)

    def clear_events(self) -> None:
        """Limpa fila de eventos."""
        self._events.clear()


class EventPublisher(ABC):
    """
    Interface para publicação de eventos.

    Adapters implementam para integrar com diferentes destinos
    (log, fila de mensagens, etc.)
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """
        Publica evento para consumidores.

        Args:
            event: Evento de domínio a ser publicado
        """
        raise NotImplementedError

    def publish_batch(self, events: List[DomainEvent]) -> None:
        """Publica múltiplos eventos em sequência."""
        for event in events:
            self.publish(event)
