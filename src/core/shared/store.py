"""
InMemoryStore - Armazenamento indexado em memória.

Base dos repositórios de usuários e pius. Mantém:
- mapa primário: id -> registro
- índices únicos: campo -> (valor -> id)
- índices um-para-muitos: campo -> (valor -> ids, em ordem de inserção)

Complexidade:
    create, get_by_id, exists_by, get_by_index_unique, update, delete: O(1)
    get_by_one_to_many: O(m), m = registros do valor consultado
    get_all: O(n)

Política de falha:
    Nenhuma operação lança exceção. Ausência é sinalizada com None/False
    e cabe aos use cases transformar isso em erro de domínio.

Requisitos dos registros:
    Dataclasses com os campos ``id``, ``criado_em`` e ``atualizado_em``.
    A factory recebe ``id``, ``criado_em``, ``atualizado_em`` e os demais
    campos como keyword arguments.
"""

from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, TypeVar
import threading

from .interfaces import IdGenerator, gerar_id_uuid


T = TypeVar("T")

Clock = Callable[[], datetime]

# Campos que nunca mudam depois do create
CAMPOS_IMUTAVEIS = frozenset({"id", "criado_em", "atualizado_em"})


class InMemoryStore(Generic[T]):
    """
    Store genérico com índices secundários.

    Attributes:
        factory: Classe (ou callable) que constrói o registro
        unique_indexes: Campos com valor único entre registros vivos
        one_to_many_indexes: Campos que agrupam registros por dono
        id_generator: Gerador de IDs (injetável para testes)
        clock: Fonte de timestamps (injetável para testes)

    Example:
        store = InMemoryStore(
            PiuEntity,
            one_to_many_indexes=("usuario_id",),
        )
        piu = store.create(usuario_id="u1", texto="Olá")
        store.get_by_one_to_many("usuario_id", "u1")  # [piu]
    """

    def __init__(
        self,
        factory: Callable[..., T],
        unique_indexes: Iterable[str] = (),
        one_to_many_indexes: Iterable[str] = (),
        id_generator: IdGenerator = gerar_id_uuid,
        clock: Clock = datetime.now,
    ):
        self._factory = factory
        self._id_generator = id_generator
        self._clock = clock
        self._lock = threading.RLock()

        self._records: Dict[str, T] = {}
        self._unique: Dict[str, Dict[Any, str]] = {
            name: {} for name in unique_indexes
        }
        # dict como conjunto ordenado: preserva ordem de criação
        self._one_to_many: Dict[str, Dict[Any, Dict[str, None]]] = {
            name: {} for name in one_to_many_indexes
        }

    # =========================================================================
    # Escrita
    # =========================================================================

    def create(self, **fields: Any) -> T:
        """
        Cria registro com ID novo e indexa por todos os índices.

        Returns:
            Registro criado
        """
        with self._lock:
            record_id = self._id_generator()
            agora = self._clock()
            record = self._factory(
                id=record_id,
                criado_em=agora,
                atualizado_em=agora,
                **fields,
            )

            self._records[record_id] = record
            for name, index in self._unique.items():
                index[getattr(record, name)] = record_id
            for name, index in self._one_to_many.items():
                index.setdefault(getattr(record, name), {})[record_id] = None

            return record

    def update(self, record_id: str, **changes: Any) -> Optional[T]:
        """
        Aplica atualização parcial (merge) a um registro.

        Para cada campo indexado que muda, a entrada antiga do índice é
        removida e a nova inserida antes de o registro ser substituído.
        ``id``, ``criado_em`` e ``atualizado_em`` são ignorados em
        ``changes``; ``atualizado_em`` é sempre renovado.

        Returns:
            Registro atualizado, ou None se o ID não existe
        """
        changes = {k: v for k, v in changes.items() if k not in CAMPOS_IMUTAVEIS}

        with self._lock:
            atual = self._records.get(record_id)
            if atual is None:
                return None

            for name, index in self._unique.items():
                if name in changes and changes[name] != getattr(atual, name):
                    index.pop(getattr(atual, name), None)
                    index[changes[name]] = record_id

            for name, index in self._one_to_many.items():
                if name in changes and changes[name] != getattr(atual, name):
                    self._discard_one_to_many(index, getattr(atual, name), record_id)
                    index.setdefault(changes[name], {})[record_id] = None

            atualizado = replace(atual, **changes, atualizado_em=self._touch(atual))
            self._records[record_id] = atualizado
            return atualizado

    def delete(self, record_id: str) -> bool:
        """
        Remove registro e todas as suas entradas de índice.

        Returns:
            True se removido, False se o ID não existe
        """
        with self._lock:
            record = self._records.pop(record_id, None)
            if record is None:
                return False

            for name, index in self._unique.items():
                valor = getattr(record, name)
                if index.get(valor) == record_id:
                    del index[valor]

            for name, index in self._one_to_many.items():
                self._discard_one_to_many(index, getattr(record, name), record_id)

            return True

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        with self._lock:
            self._records.clear()
            for index in self._unique.values():
                index.clear()
            for index in self._one_to_many.values():
                index.clear()

    # =========================================================================
    # Leitura
    # =========================================================================

    def get_by_id(self, record_id: str) -> Optional[T]:
        with self._lock:
            return self._records.get(record_id)

    def get_all(self) -> List[T]:
        """Todos os registros, em ordem de criação."""
        with self._lock:
            return list(self._records.values())

    def exists_by(self, index_name: str, value: Any) -> bool:
        with self._lock:
            return value in self._unique_index(index_name)

    def get_by_index_unique(self, index_name: str, value: Any) -> Optional[T]:
        with self._lock:
            record_id = self._unique_index(index_name).get(value)
            if record_id is None:
                return None
            return self._records.get(record_id)

    def get_by_one_to_many(self, index_name: str, value: Any) -> List[T]:
        with self._lock:
            ids = self._one_to_many_index(index_name).get(value, {})
            return [self._records[record_id] for record_id in ids]

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._records

    # =========================================================================
    # Helpers
    # =========================================================================

    def _unique_index(self, index_name: str) -> Dict[Any, str]:
        try:
            return self._unique[index_name]
        except KeyError:
            raise KeyError(f"Índice único desconhecido: {index_name}") from None

    def _one_to_many_index(self, index_name: str) -> Dict[Any, Dict[str, None]]:
        try:
            return self._one_to_many[index_name]
        except KeyError:
            raise KeyError(f"Índice um-para-muitos desconhecido: {index_name}") from None

    def _touch(self, record: T) -> datetime:
        # atualizado_em nunca fica antes de criado_em, mesmo com relógio injetado
        return max(self._clock(), getattr(record, "criado_em"))

    @staticmethod
    def _discard_one_to_many(
        index: Dict[Any, Dict[str, None]],
        valor: Any,
        record_id: str,
    ) -> None:
        ids = index.get(valor)
        if ids is None:
            return
        ids.pop(record_id, None)
        if not ids:
            del index[valor]
