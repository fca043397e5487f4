"""
Ports (Interfaces) do Domínio de Usuários.

Define o contrato de persistência de usuários e a implementação
em memória usada pela aplicação.

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core
"""

from datetime import datetime
from typing import Any, List, Optional, Protocol, runtime_checkable

from src.core.shared.interfaces import IdGenerator, Repository, gerar_id_uuid
from src.core.shared.store import Clock, InMemoryStore

from .entities import UsuarioEntity


@runtime_checkable
class UsuarioRepository(Repository[UsuarioEntity], Protocol):
    """
    Interface para persistência de Usuários.

    Implementações:
    - InMemoryUsuarioRepository (única implementação; sem persistência)

    Methods:
        create: Cria usuário com ID novo
        update: Atualização parcial (merge)
        delete: Remove usuário
        get_by_id / get_by_email / get_by_username: Buscas O(1)
        *_exists: Verificações de unicidade O(1)
        list_all: Lista em ordem de criação
    """

    def create(self, **fields: Any) -> UsuarioEntity:
        ...

    def update(self, usuario_id: str, **changes: Any) -> Optional[UsuarioEntity]:
        ...

    def delete(self, usuario_id: str) -> bool:
        ...

    def get_by_id(self, usuario_id: str) -> Optional[UsuarioEntity]:
        ...

    def get_by_email(self, email: str) -> Optional[UsuarioEntity]:
        ...

    def get_by_username(self, username: str) -> Optional[UsuarioEntity]:
        ...

    def email_exists(self, email: str) -> bool:
        ...

    def username_exists(self, username: str) -> bool:
        ...

    def cpf_exists(self, cpf: str) -> bool:
        ...

    def telefone_exists(self, telefone: str) -> bool:
        ...

    def list_all(self) -> List[UsuarioEntity]:
        ...

    def count(self) -> int:
        ...


class InMemoryUsuarioRepository:
    """
    Implementação em memória do UsuarioRepository.

    Índices únicos: username, email, cpf, telefone.

    Example:
        repo = InMemoryUsuarioRepository()
        usuario = repo.create(username="ana", email="ana@x.com", ...)
        repo.email_exists("ana@x.com")  # True
    """

    def __init__(
        self,
        id_generator: IdGenerator = gerar_id_uuid,
        clock: Clock = datetime.now,
    ):
        self._store: InMemoryStore[UsuarioEntity] = InMemoryStore(
            UsuarioEntity,
            unique_indexes=UsuarioEntity.CAMPOS_UNICOS,
            id_generator=id_generator,
            clock=clock,
        )

    def create(self, **fields: Any) -> UsuarioEntity:
        """Cria usuário e indexa campos únicos."""
        return self._store.create(**fields)

    def update(self, usuario_id: str, **changes: Any) -> Optional[UsuarioEntity]:
        """Atualiza campos informados; None se usuário não existe."""
        return self._store.update(usuario_id, **changes)

    def delete(self, usuario_id: str) -> bool:
        """Remove usuário e suas entradas de índice."""
        return self._store.delete(usuario_id)

    def get_by_id(self, usuario_id: str) -> Optional[UsuarioEntity]:
        return self._store.get_by_id(usuario_id)

    def get_by_email(self, email: str) -> Optional[UsuarioEntity]:
        return self._store.get_by_index_unique("email", email)

    def get_by_username(self, username: str) -> Optional[UsuarioEntity]:
        return self._store.get_by_index_unique("username", username)

    def email_exists(self, email: str) -> bool:
        return self._store.exists_by("email", email)

    def username_exists(self, username: str) -> bool:
        return self._store.exists_by("username", username)

    def cpf_exists(self, cpf: str) -> bool:
        return self._store.exists_by("cpf", cpf)

    def telefone_exists(self, telefone: str) -> bool:
        return self._store.exists_by("telefone", telefone)

    def exists(self, usuario_id: str) -> bool:
        return usuario_id in self._store

    def list_all(self) -> List[UsuarioEntity]:
        return self._store.get_all()

    def count(self) -> int:
        return self._store.count()

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._store.clear()
