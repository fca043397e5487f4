#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Cria dados de exemplo nos repositórios em memória (opcional)
3. Sobe o servidor de desenvolvimento no mesmo processo

Como os dados vivem apenas em memória, o servidor roda sem autoreload:
um processo filho não enxergaria os dados criados aqui.

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
    python scripts/quick_setup.py --with-sample-data --port 3333
"""

import os
import sys
import argparse
from datetime import date

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    import django
    django.setup()


def cpf_valido(base: str) -> str:
    """Completa 9 dígitos com os verificadores."""
    from src.core.shared.validators import calcular_digitos_cpf

    return base + calcular_digitos_cpf(base)


def create_sample_data():
    """Cria usuários e pius de exemplo."""
    from src.config.container import get_container
    from src.core.usuarios.dtos import CriarUsuarioInputDTO
    from src.core.pius.dtos import CriarPiuInputDTO

    container = get_container()
    criar_usuario = container.criar_usuario_service()
    criar_piu = container.criar_piu_service()

    sample_users = [
        {
            'username': 'ana',
            'email': 'ana@example.com',
            'nome': 'Ana Souza',
            'nascimento': date(1992, 3, 14),
            'cpf': cpf_valido('123456789'),
            'telefone': '11987654321',
            'sobre': 'Desenvolvedora e piuzeira nas horas vagas',
        },
        {
            'username': 'bruno',
            'email': 'bruno@example.com',
            'nome': 'Bruno Lima',
            'nascimento': date(1988, 11, 2),
            'cpf': cpf_valido('987654321'),
            'telefone': '(21) 99876-5432',
        },
        {
            'username': 'carla',
            'email': 'carla@example.com',
            'nome': 'Carla Mendes',
            'nascimento': date(2000, 7, 21),
            'cpf': cpf_valido('111444777'),
            'telefone': '31912345678',
        },
    ]

    sample_pius = {
        'ana': ['Hello mundo!', 'Primeiro piu do dia', 'Alguém mais acha que segunda devia ser feriado?'],
        'bruno': ['hello de novo', 'Café, código e chuva lá fora'],
        'carla': ['Piu piu!'],
    }

    print("📝 Criando usuários de exemplo...")

    ids = {}
    for user_data in sample_users:
        usuario = criar_usuario.execute(CriarUsuarioInputDTO(**user_data)).unwrap()
        ids[usuario.username] = usuario.id
        print(f"   ✓ {usuario.username} ({usuario.cpf}, {usuario.telefone})")

    print("📝 Criando pius de exemplo...")

    total = 0
    for username, textos in sample_pius.items():
        for texto in textos:
            criar_piu.execute(CriarPiuInputDTO(usuario_id=ids[username], texto=texto)).unwrap()
            total += 1

    print(f"✅ {len(sample_users)} usuários e {total} pius criados!")


def show_info(port: int):
    """Mostra informações do setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Debug Mode: {settings.DEBUG}")
    print(f"  Trending padrão: {settings.TRENDING_DEFAULT_COUNT}")
    print("=" * 60)
    print("\n🚀 Endpoints:")
    print(f"   http://localhost:{port}/users/")
    print(f"   http://localhost:{port}/pius/")
    print(f"   http://localhost:{port}/api-info/")
    print("\n")


def run_server(port: int):
    """Sobe o servidor de desenvolvimento no processo atual."""
    from django.core.management import call_command

    call_command('runserver', f'127.0.0.1:{port}', use_reloader=False)


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar dados de exemplo'
    )
    parser.add_argument(
        '--port',
        type=int,
        default=8000,
        help='Porta do servidor (default: 8000)'
    )
    parser.add_argument(
        '--no-server',
        action='store_true',
        help='Apenas criar os dados, sem subir o servidor'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🐦 PiuPiuwer - Quick Setup")
    print("=" * 60 + "\n")

    # Configurar Django
    setup_django()

    # Criar dados de exemplo
    if args.with_sample_data:
        create_sample_data()

    # Mostrar informações
    show_info(args.port)

    if not args.no_server:
        run_server(args.port)


if __name__ == '__main__':
    main()
