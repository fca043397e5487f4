"""
Entidades do Domínio de Usuários.

Entidades:
- UsuarioEntity: Conta de usuário do PiuPiuwer

Invariantes (garantidas por repositório + use cases):
- username, email, cpf e telefone são únicos entre usuários vivos
- cpf é armazenado como XXX.XXX.XXX-XX
- telefone é armazenado como (XX) XXXXX-XXXX
- criado_em nunca muda; atualizado_em >= criado_em
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import ClassVar, Tuple
import uuid


@dataclass
class UsuarioEntity:
    """
    Entidade de Domínio: Usuário.

    Instâncias são tratadas como valores: o repositório substitui o
    registro inteiro a cada atualização (ver ``InMemoryStore.update``).

    Attributes:
        id: Identificador único (UUID)
        username: Nome de usuário único
        email: Email único
        nome: Nome completo
        nascimento: Data de nascimento
        cpf: CPF único, formatado
        telefone: Telefone único, formatado
        sobre: Biografia (opcional)
        criado_em: Data/hora de criação
        atualizado_em: Data/hora da última atualização
    """

    username: str
    email: str
    nome: str
    nascimento: date
    cpf: str
    telefone: str
    sobre: str = ""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    criado_em: datetime = field(default_factory=datetime.now)
    atualizado_em: datetime = field(default_factory=datetime.now)

    # Campos com índice único no repositório
    CAMPOS_UNICOS: ClassVar[Tuple[str, ...]] = ("username", "email", "cpf", "telefone")

    # Campos exigidos na criação (sobre é opcional)
    CAMPOS_OBRIGATORIOS: ClassVar[Tuple[str, ...]] = (
        "username",
        "email",
        "nome",
        "nascimento",
        "cpf",
        "telefone",
    )

    # Campos que podem ser alterados via atualização parcial
    CAMPOS_EDITAVEIS: ClassVar[Tuple[str, ...]] = CAMPOS_OBRIGATORIOS + ("sobre",)

    def __repr__(self) -> str:
        return (
            f"UsuarioEntity("
            f"id={self.id[:8]}..., "
            f"username='{self.username}', "
            f"email='{self.email}'"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, UsuarioEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
