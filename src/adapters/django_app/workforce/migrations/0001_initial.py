"""
Migration inicial para o domínio Workforce.

Cria as tabelas:
- department, employee, project, client
- employee_project: Alocações (único por funcionário+projeto)
- project_client, project_department: Vínculos de projeto
"""

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='DepartmentModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Nome do departamento', max_length=100)),
                ('location', models.CharField(help_text='Localização', max_length=100)),
                ('annual_budget', models.DecimalField(decimal_places=2, help_text='Orçamento anual', max_digits=15)),
            ],
            options={
                'verbose_name': 'Departamento',
                'verbose_name_plural': 'Departamentos',
                'db_table': 'department',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='ClientModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(db_index=True, max_length=100)),
                ('industry', models.CharField(max_length=50)),
                ('contact_person', models.CharField(blank=True, default='', max_length=100)),
                ('contact_phone', models.CharField(blank=True, default='', max_length=20)),
                ('contact_email', models.CharField(max_length=100)),
            ],
            options={
                'verbose_name': 'Cliente',
                'verbose_name_plural': 'Clientes',
                'db_table': 'client',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='ProjectModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(db_index=True, max_length=100)),
                ('description', models.TextField(blank=True, default='')),
                ('start_date', models.DateField()),
                ('end_date', models.DateField(db_index=True)),
                ('budget', models.DecimalField(decimal_places=2, max_digits=15)),
                ('status', models.CharField(db_index=True, default='Active', max_length=20)),
            ],
            options={
                'verbose_name': 'Projeto',
                'verbose_name_plural': 'Projetos',
                'db_table': 'project',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='EmployeeModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('full_name', models.CharField(db_index=True, max_length=100)),
                ('title', models.CharField(max_length=100)),
                ('hire_date', models.DateField()),
                ('salary', models.DecimalField(decimal_places=2, help_text='Salário anual', max_digits=15)),
                ('department', models.ForeignKey(
                    help_text='Departamento atual',
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='employees',
                    to='workforce.departmentmodel'
                )),
            ],
            options={
                'verbose_name': 'Funcionário',
                'verbose_name_plural': 'Funcionários',
                'db_table': 'employee',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='AssignmentModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('allocation_percent', models.PositiveSmallIntegerField(help_text='Percentual 1-100')),
                ('employee', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='assignments',
                    to='workforce.employeemodel'
                )),
                ('project', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='assignments',
                    to='workforce.projectmodel'
                )),
            ],
            options={
                'verbose_name': 'Alocação',
                'verbose_name_plural': 'Alocações',
                'db_table': 'employee_project',
                'constraints': [
                    models.UniqueConstraint(fields=('employee', 'project'), name='unique_employee_project'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ProjectClientModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('client', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='project_links',
                    to='workforce.clientmodel'
                )),
                ('project', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='client_links',
                    to='workforce.projectmodel'
                )),
            ],
            options={
                'db_table': 'project_client',
                'constraints': [
                    models.UniqueConstraint(fields=('project', 'client'), name='unique_project_client'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ProjectDepartmentModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('department', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='project_links',
                    to='workforce.departmentmodel'
                )),
                ('project', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='department_links',
                    to='workforce.projectmodel'
                )),
            ],
            options={
                'db_table': 'project_department',
                'constraints': [
                    models.UniqueConstraint(fields=('project', 'department'), name='unique_project_department'),
                ],
            },
        ),
    ]
