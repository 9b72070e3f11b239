"""
Configuração do Django App para Workforce.
"""

from django.apps import AppConfig


class WorkforceConfig(AppConfig):
    """Configuração do app Workforce."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.workforce'
    label = 'workforce'
    verbose_name = 'Gestão de Força de Trabalho'
