"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio (razões de erro)
- Result (Ok / Err)
- Interfaces (Ports) e Unit of Work
- InMemoryStore (armazenamento indexado)
- Validadores de CPF e telefone
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    BusinessRuleViolationError,
    CampoObrigatorioError,
    CampoDuplicadoError,
    CPFInvalidoError,
    TelefoneInvalidoError,
    TextoMuitoLongoError,
    DonoNaoEncontradoError,
)
from .result import Ok, Err, Result
from .interfaces import UnitOfWork, InMemoryUnitOfWork, IdGenerator
from .store import InMemoryStore

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "BusinessRuleViolationError",
    "CampoObrigatorioError",
    "CampoDuplicadoError",
    "CPFInvalidoError",
    "TelefoneInvalidoError",
    "TextoMuitoLongoError",
    "DonoNaoEncontradoError",
    "Ok",
    "Err",
    "Result",
    "UnitOfWork",
    "InMemoryUnitOfWork",
    "IdGenerator",
    "InMemoryStore",
]
