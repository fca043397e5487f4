"""
Use Cases (Application Services) do Domínio de Usuários.

Use Cases implementados:
- CriarUsuarioService: Cria usuário com validações de unicidade e formato
- AtualizarUsuarioService: Atualização parcial com as mesmas validações
- RemoverUsuarioService: Remove usuário e, em cascata, seus pius
- ListarUsuariosService: Lista usuários
- ObterUsuarioService: Obtém usuário específico

Responsabilidades dos Use Cases:
- Validar entrada (campos obrigatórios, CPF, telefone)
- Garantir unicidade de username, email, CPF e telefone
- Normalizar CPF e telefone antes de gravar
- Coordenar repositórios dentro de um Unit of Work
- Retornar Ok(DTO) ou Err(razão)
"""

import logging
from typing import Any, Dict, List, Optional

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import (
    CampoDuplicadoError,
    CampoObrigatorioError,
    CPFInvalidoError,
    DomainException,
    EntityNotFoundError,
    TelefoneInvalidoError,
)
from src.core.shared.result import Err, Ok, Result
from src.core.shared.validators import (
    formatar_cpf,
    normalizar_telefone,
    validar_cpf,
    validar_telefone,
)
from src.core.pius.ports import PiuRepository

from .ports import UsuarioRepository
from .entities import UsuarioEntity
from .dtos import (
    AtualizarUsuarioInputDTO,
    CriarUsuarioInputDTO,
    UsuarioOutputDTO,
)

logger = logging.getLogger(__name__)


def usuario_nao_encontrado(usuario_id: str) -> EntityNotFoundError:
    return EntityNotFoundError(
        "Usuário não encontrado",
        entity_type="Usuario",
        entity_id=usuario_id,
    )


class _ValidacaoUsuario:
    """
    Regras compartilhadas por criação e atualização.

    Cada método devolve a razão do erro ou None.
    """

    def __init__(self, usuario_repo: UsuarioRepository):
        self.usuario_repo = usuario_repo

    def verificar_email(self, email: str) -> Optional[DomainException]:
        if self.usuario_repo.email_exists(email):
            return CampoDuplicadoError("email")
        return None

    def verificar_username(self, username: str) -> Optional[DomainException]:
        if self.usuario_repo.username_exists(username):
            return CampoDuplicadoError("username")
        return None

    def normalizar_cpf(self, cpf: str):
        """Valida dígitos e devolve (cpf_formatado, erro)."""
        if not validar_cpf(cpf):
            return None, CPFInvalidoError()
        return formatar_cpf(cpf), None

    def normalizar_telefone(self, telefone: str):
        """Formata se necessário e devolve (telefone, erro)."""
        normalizado = normalizar_telefone(telefone)
        if not validar_telefone(normalizado):
            return None, TelefoneInvalidoError()
        return normalizado, None


class CriarUsuarioService:
    """
    Use Case: Criar um novo usuário.

    Fluxo:
    1. Verificar campos obrigatórios
    2. Verificar email e username únicos
    3. Validar dígitos do CPF
    4. Normalizar CPF e telefone
    5. Validar formato do telefone
    6. Verificar CPF e telefone únicos
    7. Persistir

    Example:
        service = CriarUsuarioService(usuario_repo, uow)
        result = service.execute(CriarUsuarioInputDTO(
            username="ana",
            email="ana@example.com",
            nome="Ana Souza",
            nascimento=date(1990, 1, 1),
            cpf="12345678909",
            telefone="11987654321",
        ))
        result.value.cpf  # "123.456.789-09"
    """

    def __init__(self, usuario_repo: UsuarioRepository, uow: UnitOfWork):
        self.usuario_repo = usuario_repo
        self.uow = uow
        self._validacao = _ValidacaoUsuario(usuario_repo)

    def execute(self, input_dto: CriarUsuarioInputDTO) -> Result:
        """
        Executa criação de usuário.

        Returns:
            Ok(UsuarioOutputDTO) ou Err com a razão da recusa
        """
        for campo in UsuarioEntity.CAMPOS_OBRIGATORIOS:
            if not getattr(input_dto, campo):
                return Err(CampoObrigatorioError(field=campo))

        with self.uow:
            erro = (
                self._validacao.verificar_email(input_dto.email)
                or self._validacao.verificar_username(input_dto.username)
            )
            if erro:
                return Err(erro)

            cpf, erro = self._validacao.normalizar_cpf(input_dto.cpf)
            if erro:
                return Err(erro)

            telefone, erro = self._validacao.normalizar_telefone(input_dto.telefone)
            if erro:
                return Err(erro)

            if self.usuario_repo.cpf_exists(cpf):
                return Err(CampoDuplicadoError("cpf"))

            if self.usuario_repo.telefone_exists(telefone):
                return Err(CampoDuplicadoError("telefone"))

            usuario = self.usuario_repo.create(
                username=input_dto.username,
                email=input_dto.email,
                nome=input_dto.nome,
                nascimento=input_dto.nascimento,
                cpf=cpf,
                telefone=telefone,
                sobre=input_dto.sobre or "",
            )

        logger.info(f"Usuário criado: {usuario.id} ({usuario.username})")
        return Ok(UsuarioOutputDTO.from_entity(usuario))


class AtualizarUsuarioService:
    """
    Use Case: Atualizar usuário parcialmente.

    Apenas os campos informados são validados, e a unicidade só é
    verificada quando o valor (já normalizado) difere do atual.
    """

    def __init__(self, usuario_repo: UsuarioRepository, uow: UnitOfWork):
        self.usuario_repo = usuario_repo
        self.uow = uow
        self._validacao = _ValidacaoUsuario(usuario_repo)

    def execute(self, usuario_id: str, input_dto: AtualizarUsuarioInputDTO) -> Result:
        """
        Executa atualização.

        Returns:
            Ok(UsuarioOutputDTO) ou Err (usuário inexistente, duplicidade,
            CPF ou telefone inválidos)
        """
        with self.uow:
            atual = self.usuario_repo.get_by_id(usuario_id)
            if not atual:
                return Err(usuario_nao_encontrado(usuario_id))

            alteracoes = input_dto.campos_informados()

            erro = self._validar_alteracoes(atual, alteracoes)
            if erro:
                return Err(erro)

            usuario = self.usuario_repo.update(usuario_id, **alteracoes)
            if not usuario:
                return Err(usuario_nao_encontrado(usuario_id))

        logger.info(f"Usuário atualizado: {usuario_id} (campos: {sorted(alteracoes)})")
        return Ok(UsuarioOutputDTO.from_entity(usuario))

    def _validar_alteracoes(
        self,
        atual: UsuarioEntity,
        alteracoes: Dict[str, Any],
    ) -> Optional[DomainException]:
        """
        Valida e normaliza ``alteracoes`` no lugar.

        Returns:
            Razão do primeiro erro encontrado, ou None
        """
        if "email" in alteracoes and alteracoes["email"] != atual.email:
            erro = self._validacao.verificar_email(alteracoes["email"])
            if erro:
                return erro

        if "username" in alteracoes and alteracoes["username"] != atual.username:
            erro = self._validacao.verificar_username(alteracoes["username"])
            if erro:
                return erro

        if "cpf" in alteracoes:
            cpf, erro = self._validacao.normalizar_cpf(alteracoes["cpf"])
            if erro:
                return erro
            if cpf != atual.cpf and self.usuario_repo.cpf_exists(cpf):
                return CampoDuplicadoError("cpf")
            alteracoes["cpf"] = cpf

        if "telefone" in alteracoes:
            telefone, erro = self._validacao.normalizar_telefone(alteracoes["telefone"])
            if erro:
                return erro
            if telefone != atual.telefone and self.usuario_repo.telefone_exists(telefone):
                return CampoDuplicadoError("telefone")
            alteracoes["telefone"] = telefone

        return None


class RemoverUsuarioService:
    """
    Use Case: Remover usuário e seus pius (cascata).

    Ordem:
    1. Remover cada piu do usuário
    2. Remover o usuário

    Tudo acontece dentro do mesmo Unit of Work usado por
    CriarPiuService, então nenhum piu novo aparece para o usuário
    entre os passos 1 e 2.
    """

    def __init__(
        self,
        usuario_repo: UsuarioRepository,
        piu_repo: PiuRepository,
        uow: UnitOfWork,
    ):
        self.usuario_repo = usuario_repo
        self.piu_repo = piu_repo
        self.uow = uow

    def execute(self, usuario_id: str) -> bool:
        """
        Remove usuário.

        Returns:
            True se removido, False se o usuário não existe
        """
        with self.uow:
            if not self.usuario_repo.get_by_id(usuario_id):
                return False

            pius = self.piu_repo.list_by_usuario(usuario_id)
            for piu in pius:
                self.piu_repo.delete(piu.id)

            removido = self.usuario_repo.delete(usuario_id)

        logger.info(f"Usuário removido: {usuario_id} ({len(pius)} pius em cascata)")
        return removido


class ListarUsuariosService:
    """
    Use Case: Listar usuários em ordem de criação.

    Não usa UoW pois é operação de leitura.
    """

    def __init__(self, usuario_repo: UsuarioRepository):
        self.usuario_repo = usuario_repo

    def execute(self) -> List[UsuarioOutputDTO]:
        return [UsuarioOutputDTO.from_entity(u) for u in self.usuario_repo.list_all()]


class ObterUsuarioService:
    """
    Use Case: Obter usuário por ID.
    """

    def __init__(self, usuario_repo: UsuarioRepository):
        self.usuario_repo = usuario_repo

    def execute(self, usuario_id: str) -> Result:
        """
        Returns:
            Ok(UsuarioOutputDTO) ou Err(EntityNotFoundError)
        """
        usuario = self.usuario_repo.get_by_id(usuario_id)

        if not usuario:
            return Err(usuario_nao_encontrado(usuario_id))

        return Ok(UsuarioOutputDTO.from_entity(usuario))
