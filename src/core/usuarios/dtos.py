"""
Data Transfer Objects (DTOs) do Domínio de Usuários.

Tipos de DTOs:
- Input DTOs: dados de entrada (de APIs/scripts)
- Output DTOs: dados de resposta, já no formato JSON dos clientes

O formato JSON usa as chaves originais da API (camelCase em inglês),
enquanto o domínio usa nomes em português.
"""

from dataclasses import dataclass, fields
from datetime import date, datetime
from typing import Any, Dict, Optional

from .entities import UsuarioEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CriarUsuarioInputDTO:
    """
    DTO de entrada para criar usuário.

    Attributes:
        username: Nome de usuário
        email: Email
        nome: Nome completo
        nascimento: Data de nascimento
        cpf: CPF (com ou sem pontuação)
        telefone: Telefone (canônico ou 11 dígitos)
        sobre: Biografia (opcional)
    """

    username: Optional[str]
    email: Optional[str]
    nome: Optional[str]
    nascimento: Optional[date]
    cpf: Optional[str]
    telefone: Optional[str]
    sobre: str = ""

    def to_dict(self) -> dict:
        """Converte para dicionário."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class AtualizarUsuarioInputDTO:
    """
    DTO de entrada para atualização parcial de usuário.

    Campos None não são alterados.
    """

    username: Optional[str] = None
    email: Optional[str] = None
    nome: Optional[str] = None
    nascimento: Optional[date] = None
    cpf: Optional[str] = None
    telefone: Optional[str] = None
    sobre: Optional[str] = None

    def campos_informados(self) -> Dict[str, Any]:
        """
        Retorna apenas os campos presentes na atualização.

        String vazia em campo obrigatório conta como ausente;
        ``sobre=""`` é um valor válido (limpa a biografia).
        """
        presentes = {}
        for f in fields(self):
            valor = getattr(self, f.name)
            if valor is None:
                continue
            if valor == "" and f.name != "sobre":
                continue
            presentes[f.name] = valor
        return presentes


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class UsuarioOutputDTO:
    """
    DTO de saída com dados do usuário.

    Attributes:
        id: Identificador único
        username: Nome de usuário
        email: Email
        nome: Nome completo
        nascimento: Data de nascimento
        cpf: CPF formatado
        telefone: Telefone formatado
        sobre: Biografia
        criado_em: Data/hora de criação
        atualizado_em: Data/hora da última atualização
    """

    id: str
    username: str
    email: str
    nome: str
    nascimento: date
    cpf: str
    telefone: str
    sobre: str
    criado_em: datetime
    atualizado_em: datetime

    @classmethod
    def from_entity(cls, entity: UsuarioEntity) -> "UsuarioOutputDTO":
        """Factory method para converter entidade em DTO."""
        return cls(
            id=entity.id,
            username=entity.username,
            email=entity.email,
            nome=entity.nome,
            nascimento=entity.nascimento,
            cpf=entity.cpf,
            telefone=entity.telefone,
            sobre=entity.sobre,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário no formato JSON da API."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "name": self.nome,
            "birth": self.nascimento.isoformat() if self.nascimento else None,
            "cpf": self.cpf,
            "phone": self.telefone,
            "about": self.sobre,
            "createdAt": self.criado_em.isoformat(),
            "updatedAt": self.atualizado_em.isoformat(),
        }
