"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define as interfaces que os Adapters devem implementar.
São os "Ports" da Arquitetura Hexagonal.

Tipos de Ports:
- Driven Ports (lado direito): Repository, UnitOfWork, IdGenerator
- Driving Ports (lado esquerdo): Definidos nos Use Cases

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Protocol, TypeVar
import logging
import threading
import uuid


logger = logging.getLogger(__name__)

# Type variable para entidades genéricas
T = TypeVar("T")

# Gerador de IDs injetável (determinístico nos testes)
IdGenerator = Callable[[], str]


def gerar_id_uuid() -> str:
    """Gerador padrão: UUID v4 em formato string."""
    return str(uuid.uuid4())


class UnitOfWork(ABC):
    """
    Unit of Work - Coordena operações atômicas.

    Garante que múltiplas operações nos repositórios sejam vistas
    de fora como uma única unidade. No PiuPiuwer isso importa em
    dois pontos:
    - verificar unicidade e inserir, sem outro create no meio
    - remover os pius de um usuário e o próprio usuário, sem que
      um piu novo "ressuscite" um órfão

    Pattern: Context Manager
        with uow:
            for piu in piu_repo.list_by_usuario(usuario_id):
                piu_repo.delete(piu.id)
            usuario_repo.delete(usuario_id)
        # commit ao sair sem erro, rollback se exceção
    """

    def __enter__(self) -> "UnitOfWork":
        """
        Inicia contexto da unidade de trabalho.

        Returns:
            Self para permitir uso como context manager
        """
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """
        Finaliza contexto.

        Returns:
            False para propagar exceções
        """
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False  # Não suprime exceções

    @abstractmethod
    def _begin_transaction(self) -> None:
        """Inicia uma nova unidade de trabalho."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """Confirma a unidade de trabalho."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Encerra a unidade de trabalho após exceção.

        Chamado automaticamente se exceção ocorrer dentro
        do bloco `with`.
        """
        raise NotImplementedError


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work para os repositórios em memória.

    Não há transação para desfazer: toda validação acontece antes da
    primeira escrita e nenhuma escrita em memória falha. O papel desta
    implementação é serializar as operações dos dois repositórios
    através de um lock compartilhado (reentrante, então use cases
    podem aninhar ``with uow``).

    Example:
        lock = threading.RLock()
        uow = InMemoryUnitOfWork(lock=lock)
        with uow:
            ...

        assert uow.committed
    """

    def __init__(self, lock: Optional[threading.RLock] = None):
        self._lock = lock if lock is not None else threading.RLock()
        self._depth = 0
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        self._lock.acquire()
        self._depth += 1
        self._committed = False
        self._rolled_back = False
        logger.debug("Unit of work started (depth=%d)", self._depth)

    def commit(self) -> None:
        self._committed = True
        self._release()
        logger.debug("Unit of work committed")

    def rollback(self) -> None:
        self._rolled_back = True
        self._release()
        logger.debug("Unit of work rolled back")

    def _release(self) -> None:
        if self._depth > 0:
            self._depth -= 1
            self._lock.release()

    @property
    def committed(self) -> bool:
        """Verifica se foi comitado."""
        return self._committed

    @property
    def rolled_back(self) -> bool:
        """Verifica se foi revertido."""
        return self._rolled_back


class Repository(Protocol[T]):
    """
    Interface genérica para repositórios.

    Type Parameters:
        T: Tipo da entidade gerenciada pelo repositório

    Note:
        Usando Protocol para permitir duck typing.
        Adapters não precisam herdar explicitamente.
    """

    def get_by_id(self, entity_id: str) -> Optional[T]:
        """
        Busca entidade por ID.

        Returns:
            Entidade encontrada ou None
        """
        ...

    def delete(self, entity_id: str) -> bool:
        """
        Remove entidade.

        Returns:
            True se removida, False se não existia
        """
        ...

    def list_all(self) -> List[T]:
        """Lista todas as entidades em ordem de criação."""
        ...

    def count(self) -> int:
        """Conta entidades armazenadas."""
        ...
