"""
Configurações globais do Pytest para Pátio Manager.

Este arquivo é carregado automaticamente pelo pytest e:
- Configura Django (SQLite em memória) antes da coleta
- Fornece fixtures compartilhadas (repositórios em memória, UoW)
"""

import sys
from pathlib import Path

import pytest

# Adicionar raiz do projeto ao path (imports `src.*`)
project_path = Path(__file__).parent.parent
sys.path.insert(0, str(project_path))


def pytest_configure(config):
    """Configura Django antes dos testes."""
    import django
    from django.conf import settings

    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='test-secret-key',
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.admin',
                'django.contrib.auth',
                'django.contrib.contenttypes',
                'django.contrib.sessions',
                'django.contrib.messages',
                'src.adapters.django_app.motos',
                'src.adapters.django_app.vagas',
                'src.adapters.django_app.usuarios',
            ],
            MIDDLEWARE=[
                'django.middleware.common.CommonMiddleware',
            ],
            ROOT_URLCONF='src.config.urls',
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='America/Sao_Paulo',
            PAGE_SIZE_DEFAULT=10,
            PAGE_SIZE_MAX=100,
        )
        django.setup()


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return project_path


@pytest.fixture(autouse=True)
def reset_di_container():
    """
    Reset do container global entre testes.

    Garante que cada teste inicia com estado limpo.
    """
    from src.config.container import reset_container

    reset_container()
    yield
    reset_container()


@pytest.fixture
def inmemory_moto_repo():
    """Repositório de motos em memória para testes unitários."""
    from src.core.motos.ports import InMemoryMotoRepository
    return InMemoryMotoRepository()


@pytest.fixture
def inmemory_vaga_repo():
    """Repositório de vagas em memória para testes unitários."""
    from src.core.vagas.ports import InMemoryVagaRepository
    return InMemoryVagaRepository()


@pytest.fixture
def inmemory_usuario_repo():
    """Repositório de usuários em memória para testes unitários."""
    from src.core.usuarios.ports import InMemoryUsuarioRepository
    return InMemoryUsuarioRepository()


@pytest.fixture
def inmemory_uow():
    """Unit of Work em memória para testes unitários."""
    from src.adapters.django_app.shared.unit_of_work import InMemoryUnitOfWork
    return InMemoryUnitOfWork()
