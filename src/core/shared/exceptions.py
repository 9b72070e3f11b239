"""
Exceções de Domínio do Workforce Manager.

Este módulo define a família única de erros do domínio. Cada variante
carrega um discriminador ``kind`` (ErrorKind) para que chamadores possam
tratar o erro por tipo sem depender da hierarquia de classes.

Hierarquia:
    DomainException (base)
    ├── ValidationError (INVALID_INPUT)
    ├── EntityNotFoundError (NOT_FOUND)
    ├── ReferentialIntegrityViolationError (REFERENTIAL_INTEGRITY_VIOLATION)
    ├── TransactionFailureError (TRANSACTION_FAILURE)
    └── StoreFailureError (STORE_FAILURE)
"""

from enum import Enum
from typing import ClassVar, Optional


class ErrorKind(Enum):
    """Variantes do erro de domínio."""

    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    REFERENTIAL_INTEGRITY_VIOLATION = "REFERENTIAL_INTEGRITY_VIOLATION"
    TRANSACTION_FAILURE = "TRANSACTION_FAILURE"
    STORE_FAILURE = "STORE_FAILURE"


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            service.transfer_employee_to_department(1, 2)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    kind: ClassVar[ErrorKind] = ErrorKind.STORE_FAILURE

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.kind.value
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "kind": self.kind.value,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada quando um campo não atende às regras do domínio, quando a
    chave de ordenação não é permitida, quando o número de dias é
    negativo ou quando uma transferência não mudaria nada.

    Example:
        if not name.strip():
            raise ValidationError("Nome é obrigatório", field="name")
    """

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma busca por ID não retorna resultado no momento
    em que a operação de negócio precisa da entidade.

    Example:
        project = repo.get_by_id(project_id)
        if project is None:
            raise EntityNotFoundError(
                f"Projeto {project_id} não encontrado",
                entity_type="Project",
                entity_id=project_id,
            )
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str, entity_type: str = None, entity_id: Optional[int] = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id is not None:
            result["entity_id"] = self.entity_id
        return result


class ReferentialIntegrityViolationError(DomainException):
    """
    Violação de integridade referencial.

    Lançada quando uma remoção deixaria referências órfãs, por exemplo
    ao remover um departamento que ainda possui funcionários.
    """

    kind = ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION

    def __init__(self, message: str, rule: str = None):
        self.rule = rule
        super().__init__(message, "REFERENTIAL_INTEGRITY_VIOLATION")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        return result


class TransactionFailureError(DomainException):
    """
    Falha dentro de um escopo transacional.

    A transação já foi revertida quando esta exceção chega ao chamador.
    A causa original fica disponível em ``__cause__``.
    """

    kind = ErrorKind.TRANSACTION_FAILURE

    def __init__(self, message: str):
        super().__init__(message, "TRANSACTION_FAILURE")


class StoreFailureError(DomainException):
    """Falha genérica de I/O ou conectividade do repositório."""

    kind = ErrorKind.STORE_FAILURE

    def __init__(self, message: str):
        super().__init__(message, "STORE_FAILURE")
