"""
Domínio de Usuários.

Contém:
- Entidade UsuarioEntity
- DTOs de entrada/saída (saída sem senha)
- Port UsuarioRepository (+ implementação em memória)
- Use Cases de CRUD
"""

from .entities import UsuarioEntity
from .dtos import UsuarioInputDTO, UsuarioOutputDTO
from .ports import UsuarioRepository, InMemoryUsuarioRepository, conflito_email, conflito_cpf
from .use_cases import (
    CriarUsuarioService,
    AtualizarUsuarioService,
    RemoverUsuarioService,
    ObterUsuarioService,
    ListarUsuariosService,
)

__all__ = [
    "UsuarioEntity",
    "UsuarioInputDTO",
    "UsuarioOutputDTO",
    "UsuarioRepository",
    "InMemoryUsuarioRepository",
    "conflito_email",
    "conflito_cpf",
    "CriarUsuarioService",
    "AtualizarUsuarioService",
    "RemoverUsuarioService",
    "ObterUsuarioService",
    "ListarUsuariosService",
]
