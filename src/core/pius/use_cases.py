"""
Use Cases (Application Services) do Domínio de Pius.

Use Cases implementados:
- CriarPiuService: Cria piu (exige dono existente)
- ListarPiusService: Lista todos os pius
- ObterPiuService: Obtém piu específico
- ListarPiusPorUsuarioService: Pius de um usuário
- BuscarPiusService: Busca por texto
- SortearPiusService: N pius aleatórios (trending)
- RemoverPiuService: Remove piu

O repositório de usuários é usado apenas para leitura.
"""

import logging
import random
from typing import List

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import DonoNaoEncontradoError, EntityNotFoundError
from src.core.shared.result import Err, Ok, Result
from src.core.usuarios.ports import UsuarioRepository

from .ports import PiuRepository
from .entities import PiuEntity
from .dtos import CriarPiuInputDTO, PiuOutputDTO

logger = logging.getLogger(__name__)


def _to_dtos(pius: List[PiuEntity]) -> List[PiuOutputDTO]:
    return [PiuOutputDTO.from_entity(p) for p in pius]


class CriarPiuService:
    """
    Use Case: Criar um novo piu.

    Fluxo:
    1. Validar texto (obrigatório, até 140 caracteres)
    2. Verificar que o dono existe
    3. Persistir com likes = 0

    Os passos 2 e 3 rodam no mesmo Unit of Work da remoção de
    usuários, evitando pius órfãos.
    """

    def __init__(
        self,
        piu_repo: PiuRepository,
        usuario_repo: UsuarioRepository,
        uow: UnitOfWork,
    ):
        self.piu_repo = piu_repo
        self.usuario_repo = usuario_repo
        self.uow = uow

    def execute(self, input_dto: CriarPiuInputDTO) -> Result:
        """
        Returns:
            Ok(PiuOutputDTO) ou Err (texto inválido, dono inexistente)
        """
        erro = PiuEntity.validar_texto(input_dto.texto)
        if erro:
            return Err(erro)

        with self.uow:
            if not input_dto.usuario_id or not self.usuario_repo.get_by_id(input_dto.usuario_id):
                return Err(DonoNaoEncontradoError(input_dto.usuario_id))

            piu = self.piu_repo.create(
                usuario_id=input_dto.usuario_id,
                texto=input_dto.texto,
                likes=0,
            )

        logger.info(f"Piu criado: {piu.id} (usuário {piu.usuario_id})")
        return Ok(PiuOutputDTO.from_entity(piu))


class ListarPiusService:
    """Use Case: Listar todos os pius em ordem de criação."""

    def __init__(self, piu_repo: PiuRepository):
        self.piu_repo = piu_repo

    def execute(self) -> List[PiuOutputDTO]:
        return _to_dtos(self.piu_repo.list_all())


class ObterPiuService:
    """Use Case: Obter piu por ID."""

    def __init__(self, piu_repo: PiuRepository):
        self.piu_repo = piu_repo

    def execute(self, piu_id: str) -> Result:
        """
        Returns:
            Ok(PiuOutputDTO) ou Err(EntityNotFoundError)
        """
        piu = self.piu_repo.get_by_id(piu_id)

        if not piu:
            return Err(EntityNotFoundError(
                "Piu não encontrado",
                entity_type="Piu",
                entity_id=piu_id,
            ))

        return Ok(PiuOutputDTO.from_entity(piu))


class ListarPiusPorUsuarioService:
    """
    Use Case: Listar pius de um usuário.

    Usuário inexistente resulta em lista vazia, não em erro.
    """

    def __init__(self, piu_repo: PiuRepository, usuario_repo: UsuarioRepository):
        self.piu_repo = piu_repo
        self.usuario_repo = usuario_repo

    def execute(self, usuario_id: str) -> List[PiuOutputDTO]:
        if not self.usuario_repo.get_by_id(usuario_id):
            return []
        return _to_dtos(self.piu_repo.list_by_usuario(usuario_id))


class BuscarPiusService:
    """
    Use Case: Buscar pius por texto.

    Busca case-insensitive por substring. Consulta vazia retorna todos.
    """

    def __init__(self, piu_repo: PiuRepository):
        self.piu_repo = piu_repo

    def execute(self, query: str = "") -> List[PiuOutputDTO]:
        pius = self.piu_repo.list_all()
        if not query:
            return _to_dtos(pius)
        return _to_dtos([p for p in pius if p.contem(query)])


class SortearPiusService:
    """
    Use Case: Sortear N pius (trending).

    Se houver até N pius, retorna todos. Caso contrário embaralha com
    Fisher-Yates e retorna os N primeiros. Cada chamada usa sorteio
    novo; não há ordem garantida.

    Attributes:
        rng: Fonte de aleatoriedade (injetável para testes)
    """

    def __init__(self, piu_repo: PiuRepository, rng: random.Random = None):
        self.piu_repo = piu_repo
        self.rng = rng or random.Random()

    def execute(self, quantidade: int) -> List[PiuOutputDTO]:
        if quantidade <= 0:
            return []

        pius = self.piu_repo.list_all()
        if len(pius) <= quantidade:
            return _to_dtos(pius)

        return _to_dtos(self._embaralhar(pius)[:quantidade])

    def _embaralhar(self, pius: List[PiuEntity]) -> List[PiuEntity]:
        """Fisher-Yates: j sorteado em [0, i], i do último índice até 1."""
        embaralhados = list(pius)
        for i in range(len(embaralhados) - 1, 0, -1):
            j = self.rng.randint(0, i)
            embaralhados[i], embaralhados[j] = embaralhados[j], embaralhados[i]
        return embaralhados


class RemoverPiuService:
    """Use Case: Remover piu."""

    def __init__(self, piu_repo: PiuRepository, uow: UnitOfWork):
        self.piu_repo = piu_repo
        self.uow = uow

    def execute(self, piu_id: str) -> bool:
        """
        Returns:
            True se removido, False se o piu não existe
        """
        with self.uow:
            removido = self.piu_repo.delete(piu_id)

        if removido:
            logger.info(f"Piu removido: {piu_id}")
        return removido
