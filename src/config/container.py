"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories, stateless)
- Factory: Nova instância por chamada (services, UoW)

As classes são importadas sob demanda para que o container possa
ser importado antes do registro de apps do Django.
"""

from importlib import import_module
from typing import Callable, Optional

from dependency_injector import containers, providers


def _lazy(module_path: str, class_name: str) -> Callable:
    """
    Retorna factory que importa a classe apenas na primeira chamada.

    Example:
        providers.Singleton(_lazy('src.core.motos.ports', 'InMemoryMotoRepository'))
    """

    def factory(*args, **kwargs):
        cls = getattr(import_module(module_path), class_name)
        return cls(*args, **kwargs)

    factory.__name__ = class_name
    return factory


MOTOS_USE_CASES = 'src.core.motos.use_cases'
VAGAS_USE_CASES = 'src.core.vagas.use_cases'
USUARIOS_USE_CASES = 'src.core.usuarios.use_cases'


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Repositories: Persistência (Django ORM)
    - Unit of Work: Transações
    - Services: Use Cases de motos, vagas e usuários

    Example:
        from src.config.container import get_container

        service = get_container().criar_moto_service()
        output = service.execute(input_dto)
    """

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    moto_repository = providers.Singleton(
        _lazy('src.adapters.django_app.motos.repositories', 'DjangoMotoRepository')
    )

    vaga_repository = providers.Singleton(
        _lazy('src.adapters.django_app.vagas.repositories', 'DjangoVagaRepository')
    )

    usuario_repository = providers.Singleton(
        _lazy('src.adapters.django_app.usuarios.repositories', 'DjangoUsuarioRepository')
    )

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        _lazy('src.adapters.django_app.shared.unit_of_work', 'DjangoUnitOfWork')
    )

    # =========================================================================
    # Motos
    # =========================================================================

    listar_motos_service = providers.Factory(
        _lazy(MOTOS_USE_CASES, 'ListarMotosService'),
        moto_repo=moto_repository,
    )

    obter_moto_service = providers.Factory(
        _lazy(MOTOS_USE_CASES, 'ObterMotoService'),
        moto_repo=moto_repository,
    )

    buscar_motos_por_placa_service = providers.Factory(
        _lazy(MOTOS_USE_CASES, 'BuscarMotosPorPlacaService'),
        moto_repo=moto_repository,
    )

    criar_moto_service = providers.Factory(
        _lazy(MOTOS_USE_CASES, 'CriarMotoService'),
        moto_repo=moto_repository,
        uow=unit_of_work,
    )

    atualizar_moto_service = providers.Factory(
        _lazy(MOTOS_USE_CASES, 'AtualizarMotoService'),
        moto_repo=moto_repository,
        uow=unit_of_work,
    )

    remover_moto_service = providers.Factory(
        _lazy(MOTOS_USE_CASES, 'RemoverMotoService'),
        moto_repo=moto_repository,
        uow=unit_of_work,
    )

    # =========================================================================
    # Vagas
    # =========================================================================

    listar_vagas_service = providers.Factory(
        _lazy(VAGAS_USE_CASES, 'ListarVagasService'),
        vaga_repo=vaga_repository,
    )

    listar_vagas_por_patio_service = providers.Factory(
        _lazy(VAGAS_USE_CASES, 'ListarVagasPorPatioService'),
        vaga_repo=vaga_repository,
    )

    obter_vaga_service = providers.Factory(
        _lazy(VAGAS_USE_CASES, 'ObterVagaService'),
        vaga_repo=vaga_repository,
    )

    criar_vaga_service = providers.Factory(
        _lazy(VAGAS_USE_CASES, 'CriarVagaService'),
        vaga_repo=vaga_repository,
        uow=unit_of_work,
    )

    atualizar_vaga_service = providers.Factory(
        _lazy(VAGAS_USE_CASES, 'AtualizarVagaService'),
        vaga_repo=vaga_repository,
        uow=unit_of_work,
    )

    remover_vaga_service = providers.Factory(
        _lazy(VAGAS_USE_CASES, 'RemoverVagaService'),
        vaga_repo=vaga_repository,
        uow=unit_of_work,
    )

    # =========================================================================
    # Usuários
    # =========================================================================

    listar_usuarios_service = providers.Factory(
        _lazy(USUARIOS_USE_CASES, 'ListarUsuariosService'),
        usuario_repo=usuario_repository,
    )

    obter_usuario_service = providers.Factory(
        _lazy(USUARIOS_USE_CASES, 'ObterUsuarioService'),
        usuario_repo=usuario_repository,
    )

    criar_usuario_service = providers.Factory(
        _lazy(USUARIOS_USE_CASES, 'CriarUsuarioService'),
        usuario_repo=usuario_repository,
        uow=unit_of_work,
    )

    atualizar_usuario_service = providers.Factory(
        _lazy(USUARIOS_USE_CASES, 'AtualizarUsuarioService'),
        usuario_repo=usuario_repository,
        uow=unit_of_work,
    )

    remover_usuario_service = providers.Factory(
        _lazy(USUARIOS_USE_CASES, 'RemoverUsuarioService'),
        usuario_repo=usuario_repository,
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
    """
    global _container

    if _container is None:
        _container = Container()

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

class TestingContainer(containers.DeclarativeContainer):
    """
    Overrides em memória para testes sem banco.

    Sobrescreve apenas repositórios e Unit of Work; os services
    do Container principal passam a recebê-los.

    Example:
        container = create_testing_container()
        container.criar_vaga_service().execute(VagaInputDTO(1, "A"))
    """

    moto_repository = providers.Singleton(
        _lazy('src.core.motos.ports', 'InMemoryMotoRepository')
    )

    vaga_repository = providers.Singleton(
        _lazy('src.core.vagas.ports', 'InMemoryVagaRepository')
    )

    usuario_repository = providers.Singleton(
        _lazy('src.core.usuarios.ports', 'InMemoryUsuarioRepository')
    )

    unit_of_work = providers.Factory(
        _lazy('src.adapters.django_app.shared.unit_of_work', 'InMemoryUnitOfWork')
    )


def create_testing_container() -> Container:
    """Container principal com repositórios em memória."""
    container = Container()
    container.override(TestingContainer())
    return container
