"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositórios, lock)
- Factory: Nova instância por chamada (use cases, UoW)

Os repositórios em memória SÃO o armazenamento da aplicação: existe
exatamente um de cada por container, compartilhado por todos os use
cases. O lock compartilhado é o que torna atômicas a criação de pius
e a remoção em cascata de usuários.
"""

import threading
from typing import Optional

from dependency_injector import containers, providers

from src.core.shared.interfaces import InMemoryUnitOfWork, gerar_id_uuid
from src.core.usuarios.ports import InMemoryUsuarioRepository
from src.core.usuarios.use_cases import (
    CriarUsuarioService,
    AtualizarUsuarioService,
    RemoverUsuarioService,
    ListarUsuariosService,
    ObterUsuarioService,
)
from src.core.pius.ports import InMemoryPiuRepository
from src.core.pius.use_cases import (
    CriarPiuService,
    ListarPiusService,
    ObterPiuService,
    ListarPiusPorUsuarioService,
    BuscarPiusService,
    SortearPiusService,
    RemoverPiuService,
)


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: Variáveis de ambiente/settings
    - Infrastructure: Gerador de IDs, lock compartilhado
    - Repositories: Armazenamento em memória
    - Unit of Work: Serialização entre repositórios
    - Services: Use Cases

    Example:
        from src.config.container import Container

        container = Container()

        service = container.criar_usuario_service()
        result = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Infrastructure
    # =========================================================================

    id_generator = providers.Object(gerar_id_uuid)

    store_lock = providers.Singleton(threading.RLock)

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    usuario_repository = providers.Singleton(
        InMemoryUsuarioRepository,
        id_generator=id_generator,
    )

    piu_repository = providers.Singleton(
        InMemoryPiuRepository,
        id_generator=id_generator,
    )

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação, lock único)
    # =========================================================================

    unit_of_work = providers.Factory(
        InMemoryUnitOfWork,
        lock=store_lock,
    )

    # =========================================================================
    # Services / Use Cases - Usuários
    # =========================================================================

    criar_usuario_service = providers.Factory(
        CriarUsuarioService,
        usuario_repo=usuario_repository,
        uow=unit_of_work,
    )

    atualizar_usuario_service = providers.Factory(
        AtualizarUsuarioService,
        usuario_repo=usuario_repository,
        uow=unit_of_work,
    )

    remover_usuario_service = providers.Factory(
        RemoverUsuarioService,
        usuario_repo=usuario_repository,
        piu_repo=piu_repository,
        uow=unit_of_work,
    )

    listar_usuarios_service = providers.Factory(
        ListarUsuariosService,
        usuario_repo=usuario_repository,
    )

    obter_usuario_service = providers.Factory(
        ObterUsuarioService,
        usuario_repo=usuario_repository,
    )

    # =========================================================================
    # Services / Use Cases - Pius
    # =========================================================================

    criar_piu_service = providers.Factory(
        CriarPiuService,
        piu_repo=piu_repository,
        usuario_repo=usuario_repository,
        uow=unit_of_work,
    )

    listar_pius_service = providers.Factory(
        ListarPiusService,
        piu_repo=piu_repository,
    )

    obter_piu_service = providers.Factory(
        ObterPiuService,
        piu_repo=piu_repository,
    )

    listar_pius_por_usuario_service = providers.Factory(
        ListarPiusPorUsuarioService,
        piu_repo=piu_repository,
        usuario_repo=usuario_repository,
    )

    buscar_pius_service = providers.Factory(
        BuscarPiusService,
        piu_repo=piu_repository,
    )

    sortear_pius_service = providers.Factory(
        SortearPiusService,
        piu_repo=piu_repository,
    )

    remover_piu_service = providers.Factory(
        RemoverPiuService,
        piu_repo=piu_repository,
        uow=unit_of_work,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization).

    Returns:
        Container configurado
    """
    global _container

    if _container is None:
        _container = Container()
        _load_settings(_container)

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Descarta repositórios e dados em memória.
    """
    global _container
    _container = None


def _load_settings(container: Container) -> None:
    """Copia configurações de domínio do Django, se configurado."""
    from django.conf import settings

    if settings.configured:
        container.config.from_dict({
            'trending_default_count': getattr(settings, 'TRENDING_DEFAULT_COUNT', 5),
        })
