"""
Django Settings para PiuPiuwer.

Usa variáveis de ambiente (.env) para configurações sensíveis.

Os dados vivem apenas em memória (repositórios do container DI),
então não há banco de dados configurado nem apps com models.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

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

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.getenv('DEBUG', 'True').lower() in ('true', '1', 'yes')

ALLOWED_HOSTS = os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')

# =============================================================================
# Aplicações
# =============================================================================

DJANGO_APPS = [
    'django.contrib.staticfiles',
]

LOCAL_APPS = [
    'src.adapters.django_app.api',
]

INSTALLED_APPS = DJANGO_APPS + LOCAL_APPS

# =============================================================================
# Middleware
# =============================================================================

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'src.config.urls'

WSGI_APPLICATION = 'src.config.wsgi.application'

# URLs sem barra final (/users, /pius) são aceitas
APPEND_SLASH = False

# =============================================================================
# Banco de Dados
# =============================================================================

# Sem persistência: usuários e pius ficam nos repositórios em memória
DATABASES = {}

# =============================================================================
# Internacionalização
# =============================================================================

LANGUAGE_CODE = 'pt-br'
TIME_ZONE = 'America/Sao_Paulo'
USE_I18N = True
USE_TZ = True

# =============================================================================
# Arquivos Estáticos
# =============================================================================

STATIC_URL = 'static/'

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{levelname} {asctime} {name} {message}',
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
            'level': os.getenv('CORE_LOG_LEVEL', LOG_LEVEL),
            'propagate': False,
        },
        'src.adapters': {
            'handlers': ['console'],
            'level': os.getenv('ADAPTERS_LOG_LEVEL', LOG_LEVEL),
            'propagate': False,
        },
    },
}

# =============================================================================
# Configurações de Domínio
# =============================================================================

# Quantidade padrão de pius em /pius/trending/<count> quando count é inválido
TRENDING_DEFAULT_COUNT = int(os.getenv('TRENDING_DEFAULT_COUNT', 5))
