"""
Result - Retorno discriminado dos Use Cases.

Um use case devolve ``Ok(valor)`` em caso de sucesso ou ``Err(razao)``
quando uma regra de domínio é violada. A razão é sempre uma
``DomainException``, o que permite à camada de transporte mapear o erro
para status HTTP sem conhecer o use case.

Example:
    result = criar_usuario.execute(input_dto)

    if result.is_ok:
        print(result.value.id)
    else:
        print(result.error.message)

    # Ou, quando exceções são mais convenientes (views, scripts):
    usuario = result.unwrap()
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .exceptions import DomainException


T = TypeVar("T")
E = TypeVar("E", bound=DomainException)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Variante de sucesso."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Variante de erro, carrega a razão de domínio."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def unwrap(self):
        """
        Lança a razão do erro.

        Raises:
            DomainException: Sempre
        """
        raise self.error


Result = Union[Ok[T], Err[DomainException]]
