"""
Exceções de Domínio do PiuPiuwer.

Este módulo define as razões de erro do domínio. Os use cases não as
lançam: devolvem-nas dentro de um ``Err`` (ver ``result.py``). Quem
precisar do comportamento de exceção chama ``Result.unwrap()``.

Hierarquia:
    DomainException (base)
    ├── ValidationError (validação de entrada)
    │   ├── CampoObrigatorioError
    │   ├── TextoMuitoLongoError
    │   ├── CPFInvalidoError
    │   └── TelefoneInvalidoError
    ├── EntityNotFoundError (entidade não existe)
    │   └── DonoNaoEncontradoError
    └── BusinessRuleViolationError (regra de negócio violada)
        └── CampoDuplicadoError

As mensagens são as mesmas exibidas aos clientes da API e não devem
ser alteradas.
"""

from typing import Optional


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Example:
        result = service.execute(dto)
        if result.is_err:
            logger.warning(f"Erro de domínio: {result.error}")
    """

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DomainException):
            return NotImplemented
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((type(self), self.code, self.message))

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Example:
        if not texto:
            return Err(ValidationError("O texto do piu é obrigatório", field="texto"))
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class CampoObrigatorioError(ValidationError):
    """Um campo obrigatório não foi informado."""

    MENSAGEM_PADRAO = "Todos os campos são obrigatórios"

    def __init__(self, field: Optional[str] = None, message: Optional[str] = None):
        super().__init__(message or self.MENSAGEM_PADRAO, field=field)


class TextoMuitoLongoError(ValidationError):
    """Texto do piu acima do limite de caracteres."""

    def __init__(self, limite: int = 140):
        self.limite = limite
        super().__init__(
            f"O piu não pode ter mais de {limite} caracteres",
            field="texto",
        )


class CPFInvalidoError(ValidationError):
    """CPF com formato ou dígitos verificadores inválidos."""

    def __init__(self):
        super().__init__("O CPF informado não é válido", field="cpf")


class TelefoneInvalidoError(ValidationError):
    """Telefone fora do formato canônico (XX) XXXXX-XXXX."""

    def __init__(self):
        super().__init__(
            "O telefone deve estar no formato (XX) XXXXX-XXXX",
            field="telefone",
        )


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Example:
        piu = repo.get_by_id(piu_id)
        if not piu:
            return Err(EntityNotFoundError("Piu não encontrado", "Piu", piu_id))
    """

    def __init__(
        self,
        message: str,
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id:
            result["entity_id"] = self.entity_id
        return result


class DonoNaoEncontradoError(EntityNotFoundError):
    """O usuário indicado como dono de um piu não existe."""

    def __init__(self, usuario_id: Optional[str] = None):
        super().__init__(
            "Usuário não encontrado",
            entity_type="Usuario",
            entity_id=usuario_id,
        )


class BusinessRuleViolationError(DomainException):
    """
    Violação de regra de negócio.

    Example:
        if repo.email_exists(email):
            return Err(CampoDuplicadoError("email"))
    """

    def __init__(self, message: str, rule: Optional[str] = None):
        self.rule = rule
        super().__init__(message, "BUSINESS_RULE_VIOLATION")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        return result


class CampoDuplicadoError(BusinessRuleViolationError):
    """
    Valor de campo único já pertence a outro usuário.

    Attributes:
        field: Campo em conflito (email, username, cpf, telefone)
    """

    MENSAGENS = {
        "email": "Este email já está em uso",
        "username": "Este username já está em uso",
        "cpf": "Este CPF já está cadastrado",
        "telefone": "Este telefone já está cadastrado",
    }

    def __init__(self, field: str):
        self.field = field
        message = self.MENSAGENS.get(field, f"Este {field} já está cadastrado")
        super().__init__(message, rule=f"{field}_unico")

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["field"] = self.field
        return result
