"""
Configuração do Django App da API.
"""

from django.apps import AppConfig


class ApiConfig(AppConfig):
    """Configuração do app da API JSON."""

    name = 'src.adapters.django_app.api'
    label = 'piupiuwer_api'
    verbose_name = 'API PiuPiuwer'

    def ready(self):
        """
        Instancia o container na subida do servidor, para que os
        repositórios em memória existam antes do primeiro request.
        """
        from src.config.container import get_container

        get_container()
