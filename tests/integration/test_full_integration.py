"""
Testes de Integração End-to-End.

Testes que validam o fluxo completo da aplicação:
- Request HTTP → URL → View → Use Case → Repositório em memória
- Cascata de remoção sob concorrência (marcados como integration)
"""

import json
import threading
from datetime import date

import pytest
from django.test import Client

from src.config.container import get_container
from src.core.usuarios.dtos import CriarUsuarioInputDTO
from src.core.pius.dtos import CriarPiuInputDTO


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """Django test client."""
    return Client()


@pytest.fixture
def api(client):
    """Atalhos JSON sobre o client."""

    class Api:
        def get(self, path, **params):
            return client.get(path, params)

        def post(self, path, data):
            return client.post(path, data=json.dumps(data), content_type='application/json')

        def patch(self, path, data):
            return client.patch(path, data=json.dumps(data), content_type='application/json')

        def delete(self, path):
            return client.delete(path)

    return Api()


@pytest.fixture
def ana(api):
    response = api.post('/users', {
        'username': 'ana',
        'email': 'ana@example.com',
        'name': 'Ana Souza',
        'birth': '1990-01-01',
        'cpf': '12345678909',
        'phone': '11987654321',
    })
    assert response.status_code == 201, response.content
    return response.json()


# =============================================================================
# Fluxos HTTP
# =============================================================================

class TestFluxoUsuarios:

    def test_health(self, client):
        response = client.get('/health/')

        assert response.status_code == 200
        assert response.json() == {'status': 'ok'}

    def test_rotas_com_e_sem_barra_final(self, api, ana):
        assert api.get('/users').json() == [ana]
        assert api.get('/users/').json() == [ana]
        assert api.get(f"/users/{ana['id']}").json() == ana
        assert api.get(f"/users/{ana['id']}/").json() == ana

    def test_criar_duplicado_pelo_cpf_formatado(self, api, ana):
        response = api.post('/users', {
            'username': 'bruno',
            'email': 'bruno@example.com',
            'name': 'Bruno',
            'birth': '1985-05-05',
            'cpf': '123.456.789-09',
            'phone': '(21) 99876-5432',
        })

        assert response.status_code == 400
        assert response.json()['message'] == 'Este CPF já está cadastrado'

    def test_atualizar_e_remover(self, api, ana):
        response = api.patch(f"/users/{ana['id']}", {'about': 'Nova bio'})
        assert response.status_code == 200
        assert response.json()['about'] == 'Nova bio'

        assert api.delete(f"/users/{ana['id']}").status_code == 204
        assert api.get(f"/users/{ana['id']}").status_code == 404

    def test_metodo_nao_permitido(self, client):
        assert client.put('/users').status_code == 405


class TestFluxoPius:

    def test_criar_buscar_e_listar_por_usuario(self, api, ana):
        for texto in ('Hello world', 'bye', 'say HELLO'):
            assert api.post('/pius', {'userId': ana['id'], 'text': texto}).status_code == 201

        busca = api.get('/pius/search', q='hello').json()
        assert [p['text'] for p in busca] == ['Hello world', 'say HELLO']

        assert len(api.get(f"/pius/user/{ana['id']}").json()) == 3
        assert len(api.get('/pius').json()) == 3

    def test_trending(self, api, ana):
        for i in range(10):
            api.post('/pius', {'userId': ana['id'], 'text': f'piu {i}'})

        sorteados = api.get('/pius/trending/3').json()

        assert len(sorteados) == 3
        assert len({p['id'] for p in sorteados}) == 3

    def test_trending_quantidade_invalida_usa_padrao(self, api, ana, django_settings):
        for i in range(10):
            api.post('/pius', {'userId': ana['id'], 'text': f'piu {i}'})

        assert len(api.get('/pius/trending/abc').json()) == django_settings.TRENDING_DEFAULT_COUNT

    def test_cascata_remove_pius(self, api, ana):
        piu = api.post('/pius', {'userId': ana['id'], 'text': 'oi'}).json()

        api.delete(f"/users/{ana['id']}")

        assert api.get(f"/pius/{piu['id']}").status_code == 404
        assert api.get('/pius').json() == []

    def test_api_info(self, api):
        assert 'pius' in api.get('/api-info').json()['endpoints']


@pytest.fixture
def django_settings():
    from django.conf import settings
    return settings


# =============================================================================
# Concorrência
# =============================================================================

@pytest.mark.integration
class TestCascataConcorrente:

    def test_nenhum_piu_orfao(self):
        container = get_container()
        usuario = container.criar_usuario_service().execute(CriarUsuarioInputDTO(
            username='ana',
            email='ana@example.com',
            nome='Ana',
            nascimento=date(1990, 1, 1),
            cpf='12345678909',
            telefone='11987654321',
        )).unwrap()

        inicio = threading.Barrier(5)

        def postar():
            inicio.wait()
            for i in range(200):
                container.criar_piu_service().execute(
                    CriarPiuInputDTO(usuario_id=usuario.id, texto=f'piu {i}')
                )

        def remover():
            inicio.wait()
            container.remover_usuario_service().execute(usuario.id)

        threads = [threading.Thread(target=postar) for _ in range(4)]
        threads.append(threading.Thread(target=remover))
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        piu_repo = container.piu_repository()
        assert container.usuario_repository().get_by_id(usuario.id) is None
        assert piu_repo.list_by_usuario(usuario.id) == []
        assert piu_repo.count() == 0
