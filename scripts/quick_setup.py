#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Cria banco de dados SQLite
3. Executa migrations
4. Cria dados de exemplo e mostra as consultas principais (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

from datetime import date, timedelta
import argparse
import os
import sys

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')
    os.environ.setdefault('DATABASE_URL', 'sqlite:///workforce.sqlite3')

    import django
    django.setup()


def run_migrations():
    """Executa migrations."""
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def create_sample_data(service):
    """Cria departamentos, funcionários, projetos e clientes de exemplo."""
    from src.core.workforce.entities import Client, Department, Employee, Project

    print("📝 Criando dados de exemplo...")

    engineering = service.create_department(
        Department.create(name='Engineering', location='Building A', annual_budget='1500000')
    ).unwrap()
    marketing = service.create_department(
        Department.create(name='Marketing', location='Building B', annual_budget='400000')
    ).unwrap()

    staff = [
        ('Alice Thompson', 'Tech Lead', '150000', engineering),
        ('Bruno Costa', 'Developer', '110000', engineering),
        ('Carla Souza', 'Analyst', '90000', marketing),
    ]
    employees = [
        service.create_employee(Employee.create(
            full_name=name,
            title=title,
            hire_date=date(2023, 3, 1),
            salary=salary,
            department_id=department.id,
        )).unwrap()
        for name, title, salary, department in staff
    ]
    for employee in employees:
        print(f"   ✓ {employee.full_name} ({employee.title}): {employee.monthly_salary}/mês")

    today = date.today()
    apollo = service.create_project(Project.create(
        name='Apollo',
        start_date=today - timedelta(days=60),
        end_date=today + timedelta(days=20),
        budget='300000',
    )).unwrap()
    orion = service.create_project(Project.create(
        name='Orion',
        start_date=today,
        end_date=today + timedelta(days=180),
        budget='120000',
    )).unwrap()

    acme = service.create_client(Client.create(
        name='Acme Corp', industry='Manufacturing', contact_email='ops@acme.example'
    )).unwrap()

    service.assign_department_to_project(apollo.id, engineering.id).unwrap()
    service.assign_department_to_project(orion.id, marketing.id).unwrap()
    service.assign_client_to_project(apollo.id, acme.id).unwrap()
    service.assign_employee_to_project(employees[0].id, apollo.id, 50).unwrap()
    service.assign_employee_to_project(employees[1].id, apollo.id, 100).unwrap()
    service.assign_employee_to_project(employees[2].id, orion.id, 25).unwrap()

    print(f"✅ {len(employees)} funcionários, 2 projetos e 1 cliente criados!")
    return apollo, engineering


def show_reports(service, project, department):
    """Executa as consultas principais sobre os dados de exemplo."""
    print("\n📊 Consultas")
    print(f"  Custo de pessoal de {project.name}: {service.calculate_project_hr_cost(project.id).to_dict()}")

    projects = service.get_projects_by_department(department.id, 'end_date')
    print(f"  Projetos ativos de {department.name}: {[p.name for p in projects.value or []]}")

    clients = service.find_clients_by_upcoming_project_deadline(30)
    print(f"  Clientes com prazo em 30 dias: {[c.name for c in clients.value or []]}")


def check_connection():
    """Verifica conexão com o banco."""
    from django.db import connection

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        print("✅ Conexão OK!")
        return True
    except Exception as e:
        print(f"❌ Erro de conexão: {e}")
        return False


def show_info():
    """Mostra informações do setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60 + "\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar dados de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Workforce Manager - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        print("   Para usar SQLite, defina: DATABASE_URL=sqlite:///workforce.sqlite3")
        return

    run_migrations()

    if args.with_sample_data:
        from src.config.container import get_container

        service = get_container().workforce_service()
        project, department = create_sample_data(service)
        show_reports(service, project, department)

    show_info()


if __name__ == '__main__':
    main()
