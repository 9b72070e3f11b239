"""
Django Settings para Workforce Manager.

Configurações organizadas por ambiente (development, production).
Usa variáveis de ambiente (.env via python-dotenv) para configurações
sensíveis.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

from src.adapters.django_app.shared.database import DatabaseConfig

# Carregar variáveis de ambiente
load_dotenv()

# =============================================================================
# Caminhos Base
# =============================================================================

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# =============================================================================
# Segurança
# =============================================================================

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv(
    'SECRET_KEY',
    'django-insecure-dev-key-change-in-production-please'
)

DEBUG = os.getenv('DEBUG', 'True').lower() in ('true', '1', 'yes')

# =============================================================================
# Aplicações
# =============================================================================

DJANGO_APPS = [
    'django.contrib.contenttypes',
]

LOCAL_APPS = [
    'src.adapters.django_app.workforce',
]

INSTALLED_APPS = DJANGO_APPS + LOCAL_APPS

# =============================================================================
# Banco de Dados
# =============================================================================

# DATABASE_URL ou DATABASE_* (postgresql, mysql, sqlite); padrão SQLite
_database = DatabaseConfig.from_env()
if _database.engine == 'sqlite' and not os.path.isabs(str(_database.name)):
    _database.name = str(BASE_DIR / _database.name)

DATABASES = {
    'default': _database.to_django_config(),
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# =============================================================================
# Internacionalização
# =============================================================================

LANGUAGE_CODE = 'pt-br'
TIME_ZONE = 'America/Sao_Paulo'
USE_I18N = True
USE_TZ = True

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'src.core': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'src.adapters': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
