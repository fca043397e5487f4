"""
Ports (Interfaces) do Domínio de Pius.

O repositório de pius mantém, além do mapa primário, um índice
um-para-muitos usuario_id -> pius, usado na listagem por usuário e
na remoção em cascata.

Note:
    O repositório não verifica se usuario_id existe. Essa regra
    pertence a CriarPiuService.
"""

from datetime import datetime
from typing import Any, List, Optional, Protocol, runtime_checkable

from src.core.shared.interfaces import IdGenerator, Repository, gerar_id_uuid
from src.core.shared.store import Clock, InMemoryStore

from .entities import PiuEntity


@runtime_checkable
class PiuRepository(Repository[PiuEntity], Protocol):
    """
    Interface para persistência de Pius.

    Methods:
        create: Cria piu com ID novo
        delete: Remove piu
        get_by_id: Busca O(1)
        list_all: Lista em ordem de criação
        list_by_usuario: Pius de um usuário, O(m)
    """

    def create(self, **fields: Any) -> PiuEntity:
        ...

    def delete(self, piu_id: str) -> bool:
        ...

    def get_by_id(self, piu_id: str) -> Optional[PiuEntity]:
        ...

    def list_all(self) -> List[PiuEntity]:
        ...

    def list_by_usuario(self, usuario_id: str) -> List[PiuEntity]:
        ...

    def count(self) -> int:
        ...


class InMemoryPiuRepository:
    """
    Implementação em memória do PiuRepository.

    Example:
        repo = InMemoryPiuRepository()
        piu = repo.create(usuario_id="user-1", texto="Primeiro piu!")
        repo.list_by_usuario("user-1")  # [piu]
    """

    def __init__(
        self,
        id_generator: IdGenerator = gerar_id_uuid,
        clock: Clock = datetime.now,
    ):
        self._store: InMemoryStore[PiuEntity] = InMemoryStore(
            PiuEntity,
            one_to_many_indexes=("usuario_id",),
            id_generator=id_generator,
            clock=clock,
        )

    def create(self, **fields: Any) -> PiuEntity:
        """Cria piu e o adiciona ao índice do dono."""
        return self._store.create(**fields)

    def delete(self, piu_id: str) -> bool:
        """Remove piu do mapa primário e do índice do dono."""
        return self._store.delete(piu_id)

    def get_by_id(self, piu_id: str) -> Optional[PiuEntity]:
        return self._store.get_by_id(piu_id)

    def list_all(self) -> List[PiuEntity]:
        return self._store.get_all()

    def list_by_usuario(self, usuario_id: str) -> List[PiuEntity]:
        return self._store.get_by_one_to_many("usuario_id", usuario_id)

    def count(self) -> int:
        return self._store.count()

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._store.clear()
