"""
Configurações globais do Pytest para PiuPiuwer.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.
"""

import os
from datetime import date, datetime, timedelta
from pathlib import Path

import pytest


def pytest_configure(config):
    """Configura Django e registra markers."""
    import django
    from django.test.utils import setup_test_environment

    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')
    django.setup()
    setup_test_environment()

    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


def pytest_addoption(parser):
    """Adiciona opções de linha de comando."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="run integration tests",
    )


def pytest_collection_modifyitems(config, items):
    """Pula testes de integração a menos que --run-integration seja passado."""
    if config.getoption("--run-integration"):
        return

    skip_integration = pytest.mark.skip(reason="use --run-integration to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reset do container DI entre testes.

    Cada teste começa com repositórios vazios.
    """
    from src.config.container import reset_container

    reset_container()
    yield
    reset_container()


class FakeClock:
    """Relógio controlável: avança um segundo a cada leitura."""

    def __init__(self, inicio: datetime = datetime(2024, 1, 1, 12, 0, 0)):
        self.agora = inicio

    def __call__(self) -> datetime:
        atual = self.agora
        self.agora += timedelta(seconds=1)
        return atual


class SequentialIds:
    """Gera IDs previsíveis: <prefixo>-1, <prefixo>-2, ..."""

    def __init__(self, prefixo: str = "id"):
        self.prefixo = prefixo
        self.contador = 0

    def __call__(self) -> str:
        self.contador += 1
        return f"{self.prefixo}-{self.contador}"


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def sequential_ids():
    return SequentialIds()


@pytest.fixture
def usuario_data():
    """Dados válidos de criação de usuário (CPF 123.456.789-09)."""
    return {
        'username': 'ana',
        'email': 'ana@example.com',
        'nome': 'Ana Souza',
        'nascimento': date(1990, 1, 1),
        'cpf': '12345678909',
        'telefone': '11987654321',
    }
