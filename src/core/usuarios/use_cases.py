"""
Use Cases (Application Services) do Domínio de Usuários.

Use Cases implementados:
- ListarUsuariosService: Lista paginada
- ObterUsuarioService: Obtém usuário por ID
- CriarUsuarioService: Cadastra usuário
- AtualizarUsuarioService: Substitui dados básicos e senha
- RemoverUsuarioService: Remove usuário
"""

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import EntityNotFoundError
from src.core.shared.pagination import Page, PageRequest

from .ports import UsuarioRepository
from .entities import UsuarioEntity
from .dtos import UsuarioInputDTO, UsuarioOutputDTO


def _usuario_nao_encontrado(usuario_id: int) -> EntityNotFoundError:
    return EntityNotFoundError(
        f"Usuário {usuario_id} não encontrado",
        entity_type="Usuario",
        entity_id=usuario_id,
    )


class CriarUsuarioService:
    """
    Use Case: Cadastrar um novo usuário.

    Raises (execute):
        ValidationError: Se dados inválidos
        ConflictError: Se email ou CPF já cadastrados
    """

    def __init__(self, usuario_repo: UsuarioRepository, uow: UnitOfWork):
        self.usuario_repo = usuario_repo
        self.uow = uow

    def execute(self, input_dto: UsuarioInputDTO) -> UsuarioOutputDTO:
        usuario = UsuarioEntity.criar(
            nome=input_dto.nome,
            email=input_dto.email,
            senha=input_dto.senha,
            cpf=input_dto.cpf,
        )

        with self.uow:
            usuario = self.usuario_repo.add(usuario)

        return UsuarioOutputDTO.from_entity(usuario)


class AtualizarUsuarioService:
    """Use Case: Substituir nome, email, CPF e senha de um usuário."""

    def __init__(self, usuario_repo: UsuarioRepository, uow: UnitOfWork):
        self.usuario_repo = usuario_repo
        self.uow = uow

    def execute(self, usuario_id: int, input_dto: UsuarioInputDTO) -> UsuarioOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se usuário não existe
            ValidationError: Se dados inválidos
            ConflictError: Se email ou CPF pertencem a outro usuário
        """
        with self.uow:
            usuario = self.usuario_repo.get_by_id(usuario_id)

            if not usuario:
                raise _usuario_nao_encontrado(usuario_id)

            usuario.atualizar_dados_basicos(input_dto.nome, input_dto.email, input_dto.cpf)
            usuario.definir_senha(input_dto.senha)

            self.usuario_repo.update(usuario)

        return UsuarioOutputDTO.from_entity(usuario)


class RemoverUsuarioService:
    """Use Case: Remover um usuário."""

    def __init__(self, usuario_repo: UsuarioRepository, uow: UnitOfWork):
        self.usuario_repo = usuario_repo
        self.uow = uow

    def execute(self, usuario_id: int) -> None:
        with self.uow:
            if not self.usuario_repo.exists(usuario_id):
                raise _usuario_nao_encontrado(usuario_id)

            self.usuario_repo.delete(usuario_id)


class ObterUsuarioService:
    """Use Case: Obter usuário por ID."""

    def __init__(self, usuario_repo: UsuarioRepository):
        self.usuario_repo = usuario_repo

    def execute(self, usuario_id: int) -> UsuarioOutputDTO:
        usuario = self.usuario_repo.get_by_id(usuario_id)

        if not usuario:
            raise _usuario_nao_encontrado(usuario_id)

        return UsuarioOutputDTO.from_entity(usuario)


class ListarUsuariosService:
    """Use Case: Listar usuários com paginação."""

    def __init__(self, usuario_repo: UsuarioRepository):
        self.usuario_repo = usuario_repo

    def execute(self, page_request: PageRequest) -> Page[UsuarioOutputDTO]:
        page = self.usuario_repo.list_paginated(page_request)
        return page.map(UsuarioOutputDTO.from_entity)
