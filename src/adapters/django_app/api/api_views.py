"""
API Views JSON para usuários e pius.

Endpoints:
- GET /users/ - Listar usuários
- POST /users/ - Criar usuário
- GET /users/<id>/ - Obter usuário
- PATCH /users/<id>/ - Atualizar usuário parcial
- DELETE /users/<id>/ - Remover usuário (e seus pius)
- GET /pius/ - Listar pius
- POST /pius/ - Criar piu
- GET /pius/user/<userId>/ - Pius de um usuário
- GET /pius/search/?q= - Buscar pius por texto
- GET /pius/trending/<count>/ - Sortear pius
- GET /pius/<id>/ - Obter piu
- DELETE /pius/<id>/ - Remover piu
- GET /api-info/ - Descrição da API

Formato:
- Entrada: JSON com as chaves públicas (camelCase)
- Saída: registro (ou lista de registros) sem envelope
- Erro: {"message": texto, "error": código}
"""

import json
import logging
from datetime import date
from typing import Any, Dict, Optional

from django.views import View
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt

from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    DomainException,
    DonoNaoEncontradoError,
    EntityNotFoundError,
    ValidationError,
)
from src.core.usuarios.dtos import AtualizarUsuarioInputDTO, CriarUsuarioInputDTO
from src.core.usuarios.use_cases import usuario_nao_encontrado
from src.core.pius.dtos import CriarPiuInputDTO
from src.config.container import get_container

logger = logging.getLogger(__name__)


DEFAULT_TRENDING_COUNT = 5


# =============================================================================
# Helpers
# =============================================================================

def json_response(data: Any, status: int = 200) -> JsonResponse:
    """Cria resposta JSON (aceita listas)."""
    return JsonResponse(data, status=status, safe=False)


def error_response(message: str, code: str, status: int) -> JsonResponse:
    return json_response({'message': message, 'error': code}, status=status)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValueError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except json.JSONDecodeError as e:
        raise ValueError(f"JSON inválido: {e}")

    if not isinstance(data, dict):
        raise ValueError("O corpo da requisição deve ser um objeto JSON")

    return data


def parse_birth(value: Any) -> Optional[date]:
    """
    Converte ``birth`` (ISO 8601) em date.

    Aceita ``YYYY-MM-DD`` ou um datetime ISO, do qual só a data é usada.
    Vazio ou ausente vira None.

    Raises:
        ValueError: Se a data não puder ser interpretada
    """
    if value in (None, ''):
        return None

    if not isinstance(value, str):
        raise ValueError("Data de nascimento inválida")

    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        raise ValueError("Data de nascimento inválida")


def get_text(data: Dict, key: str) -> Optional[str]:
    """
    Lê um campo textual do body.

    Raises:
        ValueError: Se o valor presente não for string
    """
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"O campo '{key}' deve ser texto")
    return value


def usuario_input_from_json(data: Dict) -> Dict[str, Any]:
    """Traduz chaves públicas do usuário para os campos do domínio."""
    return {
        'username': get_text(data, 'username'),
        'email': get_text(data, 'email'),
        'nome': get_text(data, 'name'),
        'nascimento': parse_birth(data.get('birth')),
        'cpf': get_text(data, 'cpf'),
        'telefone': get_text(data, 'phone'),
    }


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado
    """

    def get_container(self):
        """Retorna container de DI."""
        return get_container()

    def get_service(self, service_name: str):
        """Obtém service do container."""
        return getattr(self.get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        """Parseia body JSON."""
        return parse_json_body(request)

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Trata exceções e retorna resposta apropriada.

        Dono inexistente na criação de piu é erro de entrada (400),
        diferente de recurso inexistente na URL (404).
        """
        if isinstance(e, DonoNaoEncontradoError):
            return error_response(e.message, e.code, status=400)

        if isinstance(e, ValidationError):
            return error_response(e.message, e.code, status=400)

        if isinstance(e, EntityNotFoundError):
            return error_response(e.message, e.code, status=404)

        if isinstance(e, BusinessRuleViolationError):
            return error_response(e.message, e.code, status=400)

        if isinstance(e, DomainException):
            return error_response(e.message, e.code, status=400)

        if isinstance(e, ValueError):
            return error_response(str(e), 'INVALID_REQUEST', status=400)

        # Erro inesperado
        logger.exception(f"Erro inesperado na API: {e}")
        return error_response("Erro interno do servidor", 'INTERNAL_ERROR', status=500)


# =============================================================================
# Usuário API Views
# =============================================================================

class UsuarioAPIListView(BaseAPIView):
    """
    API para listar e criar usuários.

    GET /users/ - Lista usuários
    POST /users/ - Cria usuário
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            usuarios = self.get_service('listar_usuarios_service').execute()
            return json_response([u.to_dict() for u in usuarios])

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Cria novo usuário.

        Body JSON:
        {
            "username": "string",
            "email": "string",
            "name": "string",
            "birth": "YYYY-MM-DD",
            "cpf": "XXX.XXX.XXX-XX ou 11 dígitos",
            "phone": "(XX) XXXXX-XXXX ou 11 dígitos",
            "about": "string (opcional)"
        }
        """
        try:
            data = self.parse_body(request)

            input_dto = CriarUsuarioInputDTO(
                sobre=get_text(data, 'about') or '',
                **usuario_input_from_json(data),
            )

            output = self.get_service('criar_usuario_service').execute(input_dto).unwrap()

            logger.info(f"API: Usuário criado: {output.id}")

            return json_response(output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class UsuarioAPIDetailView(BaseAPIView):
    """
    API para operações em usuário específico.

    GET /users/<id>/ - Obter usuário
    PATCH /users/<id>/ - Atualizar usuário
    DELETE /users/<id>/ - Remover usuário e seus pius
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            output = self.get_service('obter_usuario_service').execute(pk).unwrap()
            return json_response(output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def patch(self, request: HttpRequest, pk: str) -> JsonResponse:
        """
        Atualiza usuário parcialmente.

        Campos ausentes (ou vazios) são mantidos; ``about`` vazio
        limpa a descrição.
        """
        try:
            data = self.parse_body(request)

            input_dto = AtualizarUsuarioInputDTO(
                sobre=get_text(data, 'about'),
                **usuario_input_from_json(data),
            )

            atualizar_service = self.get_service('atualizar_usuario_service')
            output = atualizar_service.execute(pk, input_dto).unwrap()

            return json_response(output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str) -> HttpResponse:
        try:
            if not self.get_service('remover_usuario_service').execute(pk):
                raise usuario_nao_encontrado(pk)

            logger.info(f"API: Usuário {pk} removido")

            return HttpResponse(status=204)

        except Exception as e:
            return self.handle_exception(e)


# =============================================================================
# Piu API Views
# =============================================================================

def piu_nao_encontrado(piu_id: str) -> EntityNotFoundError:
    return EntityNotFoundError("Piu não encontrado", entity_type="Piu", entity_id=piu_id)


class PiuAPIListView(BaseAPIView):
    """
    API para listar e criar pius.

    GET /pius/ - Lista pius
    POST /pius/ - Cria piu
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            pius = self.get_service('listar_pius_service').execute()
            return json_response([p.to_dict() for p in pius])

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Cria novo piu.

        Body JSON:
        {
            "userId": "string (obrigatório)",
            "text": "string, até 140 caracteres (obrigatório)"
        }
        """
        try:
            data = self.parse_body(request)

            input_dto = CriarPiuInputDTO(
                usuario_id=get_text(data, 'userId'),
                texto=get_text(data, 'text'),
            )

            output = self.get_service('criar_piu_service').execute(input_dto).unwrap()

            logger.info(f"API: Piu criado: {output.id}")

            return json_response(output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class PiuAPIDetailView(BaseAPIView):
    """
    API para operações em piu específico.

    GET /pius/<id>/ - Obter piu
    DELETE /pius/<id>/ - Remover piu
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            output = self.get_service('obter_piu_service').execute(pk).unwrap()
            return json_response(output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str) -> HttpResponse:
        try:
            if not self.get_service('remover_piu_service').execute(pk):
                raise piu_nao_encontrado(pk)

            logger.info(f"API: Piu {pk} removido")

            return HttpResponse(status=204)

        except Exception as e:
            return self.handle_exception(e)


class PiuAPIPorUsuarioView(BaseAPIView):
    """
    API para pius de um usuário.

    GET /pius/user/<userId>/
    """

    def get(self, request: HttpRequest, usuario_id: str) -> JsonResponse:
        try:
            pius = self.get_service('listar_pius_por_usuario_service').execute(usuario_id)
            return json_response([p.to_dict() for p in pius])

        except Exception as e:
            return self.handle_exception(e)


class PiuAPIBuscaView(BaseAPIView):
    """
    API para busca de pius por texto.

    GET /pius/search/?q=termo
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            query = request.GET.get('q', '')
            pius = self.get_service('buscar_pius_service').execute(query)
            return json_response([p.to_dict() for p in pius])

        except Exception as e:
            return self.handle_exception(e)


class PiuAPITrendingView(BaseAPIView):
    """
    API para sorteio de pius.

    GET /pius/trending/<count>/

    ``count`` não numérico ou menor que 1 usa a quantidade padrão
    (TRENDING_DEFAULT_COUNT).
    """

    def get_default_count(self) -> int:
        configurado = self.get_container().config.trending_default_count()
        return configurado or DEFAULT_TRENDING_COUNT

    def parse_count(self, count: str) -> int:
        try:
            quantidade = int(count)
        except (TypeError, ValueError):
            return self.get_default_count()
        return quantidade if quantidade > 0 else self.get_default_count()

    def get(self, request: HttpRequest, count: str) -> JsonResponse:
        try:
            pius = self.get_service('sortear_pius_service').execute(self.parse_count(count))
            return json_response([p.to_dict() for p in pius])

        except Exception as e:
            return self.handle_exception(e)


# =============================================================================
# Informações da API
# =============================================================================

API_INFO = {
    'name': 'PiuPiuwer API',
    'endpoints': {
        'users': {
            'GET /users/': 'Lista usuários',
            'POST /users/': 'Cria usuário',
            'GET /users/<id>/': 'Obtém usuário',
            'PATCH /users/<id>/': 'Atualiza usuário',
            'DELETE /users/<id>/': 'Remove usuário e seus pius',
        },
        'pius': {
            'GET /pius/': 'Lista pius',
            'POST /pius/': 'Cria piu',
            'GET /pius/user/<userId>/': 'Pius de um usuário',
            'GET /pius/search/?q=': 'Busca pius por texto',
            'GET /pius/trending/<count>/': 'Sorteia pius',
            'GET /pius/<id>/': 'Obtém piu',
            'DELETE /pius/<id>/': 'Remove piu',
        },
    },
}


class APIInfoView(BaseAPIView):
    """GET /api-info/"""

    def get(self, request: HttpRequest) -> JsonResponse:
        return json_response(API_INFO)
