"""
Django Models para o domínio Workforce.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/workforce/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Lógica de negócio fica nas Entities e Use Cases do Core
- Models são mapeados para/de Entities via Mappers

Relacionamentos:
- DepartmentModel 1 ─ N EmployeeModel (PROTECT: departamento com
  funcionários não pode ser removido)
- EmployeeModel N ─ N ProjectModel via AssignmentModel (alocação)
- ProjectModel N ─ N ClientModel via ProjectClientModel
- ProjectModel N ─ N DepartmentModel via ProjectDepartmentModel
"""

from django.db import models


MONEY_MAX_DIGITS = 15
MONEY_DECIMAL_PLACES = 2


class DepartmentModel(models.Model):
    """Model Django para persistência de Departamentos."""

    name = models.CharField(max_length=100, help_text="Nome do departamento")
    location = models.CharField(max_length=100, help_text="Localização")
    annual_budget = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        help_text="Orçamento anual"
    )

    class Meta:
        db_table = 'department'
        verbose_name = 'Departamento'
        verbose_name_plural = 'Departamentos'
        ordering = ['id']

    def __str__(self):
        return f"[{self.pk}] {self.name}"


class EmployeeModel(models.Model):
    """
    Model Django para persistência de Funcionários.

    Fields:
        full_name: Nome completo
        title: Cargo
        hire_date: Data de admissão
        salary: Salário anual
        department: Departamento atual (PROTECT)
    """

    full_name = models.CharField(max_length=100, db_index=True)
    title = models.CharField(max_length=100)
    hire_date = models.DateField()
    salary = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        help_text="Salário anual"
    )
    department = models.ForeignKey(
        DepartmentModel,
        on_delete=models.PROTECT,
        related_name='employees',
        help_text="Departamento atual"
    )

    class Meta:
        db_table = 'employee'
        verbose_name = 'Funcionário'
        verbose_name_plural = 'Funcionários'
        ordering = ['id']

    def __str__(self):
        return f"[{self.pk}] {self.full_name}"


class ProjectModel(models.Model):
    """Model Django para persistência de Projetos."""

    name = models.CharField(max_length=100, db_index=True)
    description = models.TextField(blank=True, default='')
    start_date = models.DateField()
    end_date = models.DateField(db_index=True)
    budget = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
    )
    status = models.CharField(max_length=20, default='Active', db_index=True)

    class Meta:
        db_table = 'project'
        verbose_name = 'Projeto'
        verbose_name_plural = 'Projetos'
        ordering = ['id']

    def __str__(self):
        return f"[{self.pk}] {self.name} ({self.status})"


class ClientModel(models.Model):
    """Model Django para persistência de Clientes."""

    name = models.CharField(max_length=100, db_index=True)
    industry = models.CharField(max_length=50)
    contact_person = models.CharField(max_length=100, blank=True, default='')
    contact_phone = models.CharField(max_length=20, blank=True, default='')
    contact_email = models.CharField(max_length=100)

    class Meta:
        db_table = 'client'
        verbose_name = 'Cliente'
        verbose_name_plural = 'Clientes'
        ordering = ['id']

    def __str__(self):
        return f"[{self.pk}] {self.name}"


class AssignmentModel(models.Model):
    """Alocação de funcionário em projeto (employee_project)."""

    employee = models.ForeignKey(
        EmployeeModel,
        on_delete=models.CASCADE,
        related_name='assignments',
    )
    project = models.ForeignKey(
        ProjectModel,
        on_delete=models.CASCADE,
        related_name='assignments',
    )
    allocation_percent = models.PositiveSmallIntegerField(help_text="Percentual 1-100")

    class Meta:
        db_table = 'employee_project'
        verbose_name = 'Alocação'
        verbose_name_plural = 'Alocações'
        constraints = [
            models.UniqueConstraint(
                fields=['employee', 'project'],
                name='unique_employee_project',
            ),
        ]


class ProjectClientModel(models.Model):
    """Vínculo projeto ↔ cliente (project_client)."""

    project = models.ForeignKey(
        ProjectModel,
        on_delete=models.CASCADE,
        related_name='client_links',
    )
    client = models.ForeignKey(
        ClientModel,
        on_delete=models.CASCADE,
        related_name='project_links',
    )

    class Meta:
        db_table = 'project_client'
        constraints = [
            models.UniqueConstraint(
                fields=['project', 'client'],
                name='unique_project_client',
            ),
        ]


class ProjectDepartmentModel(models.Model):
    """Vínculo projeto ↔ departamento (project_department)."""

    project = models.ForeignKey(
        ProjectModel,
        on_delete=models.CASCADE,
        related_name='department_links',
    )
    department = models.ForeignKey(
        DepartmentModel,
        on_delete=models.CASCADE,
        related_name='project_links',
    )

    class Meta:
        db_table = 'project_department'
        constraints = [
            models.UniqueConstraint(
                fields=['project', 'department'],
                name='unique_project_department',
            ),
        ]
