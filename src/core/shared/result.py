"""
Result - valor de retorno tipado para operações falíveis.

Os Use Cases propagam erros lançando DomainException. Na fronteira do
core (WorkforceService) cada chamada é convertida em um Result, de modo
que o chamador recebe sucesso ou um erro discriminado por ErrorKind
sem precisar capturar exceções.

Example:
    result = service.calculate_project_hr_cost(10)
    if result.ok:
        print(result.value)
    elif result.kind is ErrorKind.NOT_FOUND:
        print("Projeto não existe")
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar
import logging

from .exceptions import DomainException, ErrorKind, StoreFailureError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Sucesso (value) ou falha (error) de uma operação.

    Attributes:
        value: Valor produzido em caso de sucesso
        error: Erro de domínio em caso de falha
    """

    value: Optional[T] = None
    error: Optional[DomainException] = None

    @classmethod
    def success(cls, value: T = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: DomainException) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Discriminador do erro (None em caso de sucesso)."""
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T:
        """
        Retorna o valor ou relança o erro.

        Raises:
            DomainException: Se o resultado é uma falha
        """
        if self.error is not None:
            raise self.error
        return self.value

    def to_dict(self) -> dict:
        if self.ok:
            return {"success": True, "data": self.value}
        return {"success": False, "error": self.error.to_dict()}


def capture(operation: Callable[..., T], *args, **kwargs) -> Result[T]:
    """
    Executa a operação e converte o desfecho em Result.

    Erros de domínio viram falhas do mesmo tipo. Qualquer outra exceção
    vinda do repositório é registrada e embrulhada em StoreFailureError,
    preservando a causa original.
    """
    try:
        return Result.success(operation(*args, **kwargs))
    except DomainException as e:
        logger.debug(f"Operation {operation.__name__} failed: {e}")
        return Result.failure(e)
    except Exception as e:
        logger.exception(f"Store failure in {operation.__name__}: {e}")
        error = StoreFailureError(f"Falha no repositório: {e}")
        error.__cause__ = e
        return Result.failure(error)
