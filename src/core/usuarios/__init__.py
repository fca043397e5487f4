"""
Domínio de Usuários - Contas do PiuPiuwer.

Este módulo contém:
- Entidades (UsuarioEntity)
- Use Cases (CriarUsuario, AtualizarUsuario, RemoverUsuario, ...)
- DTOs (Input/Output Data Transfer Objects)
- Ports (UsuarioRepository e implementação em memória)

Características do Domínio:
- username, email, CPF e telefone únicos
- CPF validado pelos dígitos verificadores e gravado formatado
- Remoção de usuário remove também seus pius
"""

from .entities import UsuarioEntity
from .dtos import (
    CriarUsuarioInputDTO,
    AtualizarUsuarioInputDTO,
    UsuarioOutputDTO,
)
from .ports import UsuarioRepository, InMemoryUsuarioRepository
from .use_cases import (
    CriarUsuarioService,
    AtualizarUsuarioService,
    RemoverUsuarioService,
    ListarUsuariosService,
    ObterUsuarioService,
)

__all__ = [
    # Entities
    "UsuarioEntity",
    # DTOs
    "CriarUsuarioInputDTO",
    "AtualizarUsuarioInputDTO",
    "UsuarioOutputDTO",
    # Ports
    "UsuarioRepository",
    "InMemoryUsuarioRepository",
    # Use Cases
    "CriarUsuarioService",
    "AtualizarUsuarioService",
    "RemoverUsuarioService",
    "ListarUsuariosService",
    "ObterUsuarioService",
]
