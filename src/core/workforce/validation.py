"""
Módulo de Validação do Domínio Workforce.

Funções puras, síncronas e sem efeitos colaterais que verificam as
invariantes de campo de cada entidade. Rodam antes de qualquer
create/update enviado ao repositório: uma falha aqui impede qualquer
escrita.

Contrato:
    validate_x(entity) -> None      (válido)
    validate_x(entity) -> raise ValidationError(field=...)
"""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, FrozenSet

from src.core.shared.exceptions import ValidationError


# Chaves de ordenação aceitas na listagem de projetos por departamento
SORT_KEYS: FrozenSet[str] = frozenset({"budget", "end_date", "name", "start_date"})

MIN_ALLOCATION = 1
MAX_ALLOCATION = 100


def to_decimal(value: Any, field: str) -> Decimal:
    """
    Converte valor monetário para Decimal.

    Aceita Decimal, int e str. Float é rejeitado para não
    importar erro de representação binária.

    Raises:
        ValidationError: Se valor ausente, float ou não numérico
    """
    if value is None:
        raise ValidationError(f"Campo {field} é obrigatório", field=field)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or isinstance(value, float):
        raise ValidationError(
            f"Campo {field} deve ser Decimal, int ou str (float não é aceito)",
            field=field,
        )
    try:
        return Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"Valor inválido para {field}: {value!r}", field=field)


def _require_text(value: Any, field: str, label: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} é obrigatório", field=field)


def _require_positive(value: Any, field: str, label: str) -> None:
    if not isinstance(value, Decimal) or not value.is_finite() or value <= 0:
        raise ValidationError(f"{label} deve ser positivo", field=field)


def _require_id(value: Any, field: str, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} é obrigatório", field=field)


def validate_department(department) -> None:
    """Nome, localização e orçamento anual (> 0)."""
    _require_text(department.name, "name", "Nome do departamento")
    _require_text(department.location, "location", "Localização do departamento")
    _require_positive(department.annual_budget, "annual_budget", "Orçamento do departamento")


def validate_employee(employee) -> None:
    """Nome, cargo, data de admissão, salário (> 0) e departamento."""
    _require_text(employee.full_name, "full_name", "Nome do funcionário")
    _require_text(employee.title, "title", "Cargo do funcionário")
    if not isinstance(employee.hire_date, date):
        raise ValidationError("Data de admissão é obrigatória", field="hire_date")
    _require_positive(employee.salary, "salary", "Salário do funcionário")
    _require_id(employee.department_id, "department_id", "Departamento do funcionário")


def validate_project(project) -> None:
    """
    Valida projeto.

    Regras:
    - Nome obrigatório
    - Datas de início e fim obrigatórias
    - Data de fim não pode preceder a de início
    - Orçamento positivo
    """
    _require_text(project.name, "name", "Nome do projeto")

    if not isinstance(project.start_date, date) or not isinstance(project.end_date, date):
        raise ValidationError(
            "Datas de início e fim são obrigatórias",
            field="start_date" if not isinstance(project.start_date, date) else "end_date",
        )

    if project.end_date < project.start_date:
        raise ValidationError(
            "Data de fim não pode ser anterior à data de início",
            field="end_date",
        )

    _require_positive(project.budget, "budget", "Orçamento do projeto")


def validate_client(client) -> None:
    """Nome, setor e e-mail de contato contendo "@"."""
    _require_text(client.name, "name", "Nome do cliente")
    _require_text(client.industry, "industry", "Setor do cliente")
    email = client.contact_email
    if not isinstance(email, str) or "@" not in email:
        raise ValidationError("E-mail de contato válido é obrigatório", field="contact_email")


def validate_allocation(allocation_percent: Any) -> None:
    """Percentual de alocação inteiro entre 1 e 100."""
    if (
        isinstance(allocation_percent, bool)
        or not isinstance(allocation_percent, int)
        or not MIN_ALLOCATION <= allocation_percent <= MAX_ALLOCATION
    ):
        raise ValidationError(
            f"Alocação deve estar entre {MIN_ALLOCATION} e {MAX_ALLOCATION}",
            field="allocation_percent",
        )


def validate_sort_key(sort_key: Any) -> None:
    """Chave de ordenação precisa estar na allow-list."""
    if not isinstance(sort_key, str) or sort_key not in SORT_KEYS:
        raise ValidationError(
            f"Campo de ordenação inválido: {sort_key!r}. "
            f"Use um de: {', '.join(sorted(SORT_KEYS))}",
            field="sort_key",
        )


def validate_days_until_deadline(days: Any) -> None:
    """Número de dias inteiro e não negativo."""
    if isinstance(days, bool) or not isinstance(days, int):
        raise ValidationError("Dias até o prazo deve ser inteiro", field="days_until_deadline")
    if days < 0:
        raise ValidationError(
            "Dias até o prazo não pode ser negativo",
            field="days_until_deadline",
        )
