"""
Entidades do Domínio de Pius.

Um piu é um texto curto publicado por um usuário.

Regras:
- Texto obrigatório, no máximo 140 caracteres
- Dono (usuario_id) deve existir na criação (verificado no use case)
- likes começa em 0 e nunca é negativo
- Pius não são editados, apenas criados e removidos
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Optional
import uuid

from src.core.shared.exceptions import (
    CampoObrigatorioError,
    TextoMuitoLongoError,
    ValidationError,
)


@dataclass
class PiuEntity:
    """
    Entidade de Domínio: Piu.

    Attributes:
        id: Identificador único (UUID)
        usuario_id: ID do usuário dono
        texto: Conteúdo (1 a 140 caracteres)
        likes: Contador de curtidas
        criado_em: Data/hora de criação
        atualizado_em: Data/hora da última atualização
    """

    usuario_id: str
    texto: str
    likes: int = 0
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    criado_em: datetime = field(default_factory=datetime.now)
    atualizado_em: datetime = field(default_factory=datetime.now)

    TEXTO_MAX_LENGTH: ClassVar[int] = 140

    @classmethod
    def validar_texto(cls, texto: Optional[str]) -> Optional[ValidationError]:
        """
        Valida o texto de um piu.

        Returns:
            Razão do erro, ou None se o texto é válido
        """
        if not texto or not isinstance(texto, str):
            return CampoObrigatorioError(
                field="texto",
                message="O texto do piu é obrigatório",
            )

        if len(texto) > cls.TEXTO_MAX_LENGTH:
            return TextoMuitoLongoError(cls.TEXTO_MAX_LENGTH)

        return None

    def contem(self, termo: str) -> bool:
        """Busca case-insensitive do termo no texto."""
        return termo.casefold() in self.texto.casefold()

    def __repr__(self) -> str:
        return (
            f"PiuEntity("
            f"id={self.id[:8]}..., "
            f"usuario_id={self.usuario_id[:8]}..., "
            f"texto='{self.texto[:20]}...'"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, PiuEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
