"""
Data Transfer Objects (DTOs) do Domínio de Pius.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .entities import PiuEntity


@dataclass(frozen=True)
class CriarPiuInputDTO:
    """
    DTO de entrada para criar piu.

    Attributes:
        usuario_id: ID do usuário dono
        texto: Conteúdo do piu
    """

    usuario_id: Optional[str]
    texto: Optional[str]

    def to_dict(self) -> dict:
        return {
            "usuario_id": self.usuario_id,
            "texto": self.texto,
        }


@dataclass
class PiuOutputDTO:
    """
    DTO de saída com dados do piu.

    Attributes:
        id: Identificador único
        usuario_id: ID do dono
        texto: Conteúdo
        likes: Curtidas
        criado_em: Data/hora de criação
        atualizado_em: Data/hora da última atualização
    """

    id: str
    usuario_id: str
    texto: str
    likes: int
    criado_em: datetime
    atualizado_em: datetime

    @classmethod
    def from_entity(cls, entity: PiuEntity) -> "PiuOutputDTO":
        """Factory method para converter entidade em DTO."""
        return cls(
            id=entity.id,
            usuario_id=entity.usuario_id,
            texto=entity.texto,
            likes=entity.likes,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário no formato JSON da API."""
        return {
            "id": self.id,
            "userId": self.usuario_id,
            "text": self.texto,
            "createdAt": self.criado_em.isoformat(),
            "updatedAt": self.atualizado_em.isoformat(),
            "likes": self.likes,
        }
