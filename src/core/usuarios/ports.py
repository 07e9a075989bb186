"""
Ports (Interfaces) do Domínio de Usuários.
"""

from typing import Dict, Optional, Protocol, runtime_checkable

from src.core.shared.exceptions import ConflictError
from src.core.shared.pagination import Page, PageRequest

from .entities import UsuarioEntity


def conflito_email() -> ConflictError:
    return ConflictError("Email já cadastrado.", constraint="uk_usuario_email")


def conflito_cpf() -> ConflictError:
    return ConflictError("CPF já cadastrado.", constraint="uk_usuario_cpf")


@runtime_checkable
class UsuarioRepository(Protocol):
    """
    Interface para persistência de Usuários.

    `add`/`update` lançam ConflictError se email ou CPF já pertencem
    a outro usuário.
    """

    def add(self, usuario: UsuarioEntity) -> UsuarioEntity:
        ...

    def update(self, usuario: UsuarioEntity) -> None:
        ...

    def get_by_id(self, usuario_id: int) -> Optional[UsuarioEntity]:
        ...

    def delete(self, usuario_id: int) -> bool:
        ...

    def exists(self, usuario_id: int) -> bool:
        ...

    def count(self) -> int:
        ...

    def list_paginated(self, page_request: PageRequest) -> Page[UsuarioEntity]:
        ...

    def email_exists(self, email: str) -> bool:
        ...

    def cpf_exists(self, cpf: str) -> bool:
        ...


class InMemoryUsuarioRepository:
    """
    Implementação em memória do UsuarioRepository.

    Emula as restrições únicas de email e CPF.
    """

    def __init__(self):
        self._usuarios: Dict[int, UsuarioEntity] = {}
        self._next_id = 1

    def _verificar_unicidade(self, usuario: UsuarioEntity) -> None:
        for outro in self._usuarios.values():
            if outro.id == usuario.id:
                continue
            if outro.email == usuario.email:
                raise conflito_email()
            if outro.cpf == usuario.cpf:
                raise conflito_cpf()

    def add(self, usuario: UsuarioEntity) -> UsuarioEntity:
        self._verificar_unicidade(usuario)
        usuario.id = self._next_id
        self._next_id += 1
        self._usuarios[usuario.id] = usuario
        return usuario

    def update(self, usuario: UsuarioEntity) -> None:
        self._verificar_unicidade(usuario)
        self._usuarios[usuario.id] = usuario

    def get_by_id(self, usuario_id: int) -> Optional[UsuarioEntity]:
        return self._usuarios.get(usuario_id)

    def delete(self, usuario_id: int) -> bool:
        return self._usuarios.pop(usuario_id, None) is not None

    def exists(self, usuario_id: int) -> bool:
        return usuario_id in self._usuarios

    def count(self) -> int:
        return len(self._usuarios)

    def list_paginated(self, page_request: PageRequest) -> Page[UsuarioEntity]:
        usuarios = [self._usuarios[k] for k in sorted(self._usuarios)]
        return Page(
            items=usuarios[page_request.offset:page_request.offset + page_request.limit],
            total=len(usuarios),
            page=page_request.page,
            page_size=page_request.page_size,
        )

    def email_exists(self, email: str) -> bool:
        email = (email or "").strip().lower()
        return any(u.email == email for u in self._usuarios.values())

    def cpf_exists(self, cpf: str) -> bool:
        cpf = (cpf or "").strip()
        return any(u.cpf == cpf for u in self._usuarios.values())

    def clear(self) -> None:
        self._usuarios.clear()
        self._next_id = 1
