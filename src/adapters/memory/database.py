"""
Banco de dados em memória com locks de linha e journal de desfazer.

Tabelas são dicionários chave → valor imutável. Cada thread tem sua
própria transação (threading.local): enquanto aberta, toda escrita
registra o valor anterior no journal, e o rollback reaplica o journal
em ordem inversa. Locks de linha ficam com a thread dona até o fim da
transação e saem do mapa quando nenhuma thread os detém ou aguarda.

Não há isolamento de leitura entre threads (leituras enxergam escritas
não comitadas). O único controle de concorrência é o lock de linha,
suficiente para serializar transferências do mesmo funcionário.

Não usar em produção!
"""

from itertools import count
from typing import Any, Dict, Hashable, Iterator, List, Tuple
import logging
import threading

logger = logging.getLogger(__name__)

TABLES = (
    "department",
    "employee",
    "project",
    "client",
    "employee_project",
    "project_client",
    "project_department",
)

DEFAULT_LOCK_TIMEOUT = 10.0

_MISSING = object()


class _RowLock:
    """Lock de linha com contagem de threads que o detêm ou aguardam."""

    def __init__(self, key: Tuple[str, Hashable]):
        self.key = key
        self.lock = threading.Lock()
        self.users = 0


class InMemoryDatabase:
    """
    Armazenamento compartilhado pelos repositórios em memória.

    Example:
        db = InMemoryDatabase()
        db.begin()
        db.lock_row("employee", 1)
        db.put("employee", 1, moved)
        db.rollback()  # valor anterior restaurado, lock liberado
    """

    def __init__(self, lock_timeout: float = DEFAULT_LOCK_TIMEOUT):
        self.lock_timeout = lock_timeout
        self._mutex = threading.RLock()
        self._tables: Dict[str, Dict[Hashable, Any]] = {name: {} for name in TABLES}
        self._sequences = {name: count(1) for name in TABLES}
        self._row_locks: Dict[Tuple[str, Hashable], _RowLock] = {}
        self._local = threading.local()

    # ==================== Transação ====================

    @property
    def in_transaction(self) -> bool:
        return getattr(self._local, "journal", None) is not None

    def begin(self) -> None:
        if self.in_transaction:
            raise RuntimeError("Transação já aberta nesta thread")
        self._local.journal = []
        self._local.held_locks = []

    def commit(self) -> None:
        self._end()

    def rollback(self) -> None:
        journal = getattr(self._local, "journal", None) or []
        with self._mutex:
            for table, key, previous in reversed(journal):
                if previous is _MISSING:
                    self._tables[table].pop(key, None)
                else:
                    self._tables[table][key] = previous
        logger.debug(f"In-memory rollback undid {len(journal)} write(s)")
        self._end()

    def _end(self) -> None:
        for row in getattr(self._local, "held_locks", None) or []:
            row.lock.release()
            self._forget(row)
        self._local.journal = None
        self._local.held_locks = None

    def lock_row(self, table: str, key: Hashable) -> None:
        """
        Adquire lock exclusivo da linha até o fim da transação.

        Raises:
            RuntimeError: Se não há transação aberta
            TimeoutError: Se o lock não foi obtido a tempo
        """
        if not self.in_transaction:
            raise RuntimeError("Lock de linha exige transação aberta")

        row_key = (table, key)
        with self._mutex:
            row = self._row_locks.get(row_key)
            if row is not None and row in self._local.held_locks:
                return
            if row is None:
                row = self._row_locks[row_key] = _RowLock(row_key)
            row.users += 1

        if not row.lock.acquire(timeout=self.lock_timeout):
            self._forget(row)
            raise TimeoutError(f"Timeout aguardando lock de {table}:{key}")
        self._local.held_locks.append(row)

    def _forget(self, row: _RowLock) -> None:
        # Entrada removida quando nenhuma thread detém ou aguarda a linha
        with self._mutex:
            row.users -= 1
            if row.users == 0:
                del self._row_locks[row.key]

    # ==================== Dados ====================

    def next_id(self, table: str) -> int:
        with self._mutex:
            return next(self._sequences[table])

    def get(self, table: str, key: Hashable) -> Any:
        with self._mutex:
            return self._tables[table].get(key)

    def contains(self, table: str, key: Hashable) -> bool:
        with self._mutex:
            return key in self._tables[table]

    def rows(self, table: str) -> List[Tuple[Hashable, Any]]:
        """Snapshot das linhas da tabela."""
        with self._mutex:
            return list(self._tables[table].items())

    def values(self, table: str) -> Iterator[Any]:
        return (value for _, value in self.rows(table))

    def put(self, table: str, key: Hashable, value: Any) -> None:
        with self._mutex:
            self._record(table, key)
            self._tables[table][key] = value

    def remove(self, table: str, key: Hashable) -> bool:
        with self._mutex:
            if key not in self._tables[table]:
                return False
            self._record(table, key)
            del self._tables[table][key]
            return True

    def _record(self, table: str, key: Hashable) -> None:
        journal = getattr(self._local, "journal", None)
        if journal is not None:
            journal.append((table, key, self._tables[table].get(key, _MISSING)))

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        with self._mutex:
            for table in self._tables.values():
                table.clear()
            self._sequences = {name: count(1) for name in TABLES}
