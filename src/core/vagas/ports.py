"""
Ports (Interfaces) do Domínio de Vagas.

A restrição de unicidade (pátio, número) pertence ao store:
`add` e `update` lançam ConflictError quando ela é violada.
"""

from typing import Dict, Optional, Protocol, runtime_checkable

from src.core.shared.exceptions import ConflictError
from src.core.shared.pagination import Page, PageRequest

from .entities import VagaEntity


def conflito_patio_numero(patio: str, numero: int) -> ConflictError:
    """ConflictError padrão para (pátio, número) duplicados."""
    return ConflictError(
        f"Já existe a vaga nº {numero} no pátio '{patio}'.",
        constraint="uk_vaga_patio_numero",
    )


@runtime_checkable
class VagaRepository(Protocol):
    """
    Interface para persistência de Vagas.

    Implementações:
    - DjangoVagaRepository (ORM)
    - InMemoryVagaRepository (para testes)
    """

    def add(self, vaga: VagaEntity) -> VagaEntity:
        """
        Raises:
            ConflictError: Se (pátio, número) já existe
        """
        ...

    def update(self, vaga: VagaEntity) -> None:
        """
        Raises:
            ConflictError: Se (pátio, número) já existe em outra vaga
        """
        ...

    def get_by_id(self, vaga_id: int) -> Optional[VagaEntity]:
        ...

    def delete(self, vaga_id: int) -> bool:
        ...

    def exists(self, vaga_id: int) -> bool:
        ...

    def count(self) -> int:
        ...

    def list_paginated(self, page_request: PageRequest) -> Page[VagaEntity]:
        ...

    def list_by_patio(self, patio: str, page_request: PageRequest) -> Page[VagaEntity]:
        """Página de vagas de um pátio (igualdade exata), ordenada por ID."""
        ...

    def exists_patio_numero(self, patio: str, numero: int) -> bool:
        ...


class InMemoryVagaRepository:
    """
    Implementação em memória do VagaRepository.

    Emula a restrição única (pátio, número) do banco.
    """

    def __init__(self):
        self._vagas: Dict[int, VagaEntity] = {}
        self._next_id = 1

    def _verificar_unicidade(self, vaga: VagaEntity) -> None:
        for outra in self._vagas.values():
            if outra.id != vaga.id and outra.patio == vaga.patio and outra.numero == vaga.numero:
                raise conflito_patio_numero(vaga.patio, vaga.numero)

    def _paginar(self, vagas, page_request: PageRequest) -> Page[VagaEntity]:
        fatia = vagas[page_request.offset:page_request.offset + page_request.limit]
        return Page(
            items=fatia,
            total=len(vagas),
            page=page_request.page,
            page_size=page_request.page_size,
        )

    def add(self, vaga: VagaEntity) -> VagaEntity:
        self._verificar_unicidade(vaga)
        vaga.id = self._next_id
        self._next_id += 1
        self._vagas[vaga.id] = vaga
        return vaga

    def update(self, vaga: VagaEntity) -> None:
        self._verificar_unicidade(vaga)
        self._vagas[vaga.id] = vaga

    def get_by_id(self, vaga_id: int) -> Optional[VagaEntity]:
        return self._vagas.get(vaga_id)

    def delete(self, vaga_id: int) -> bool:
        return self._vagas.pop(vaga_id, None) is not None

    def exists(self, vaga_id: int) -> bool:
        return vaga_id in self._vagas

    def count(self) -> int:
        return len(self._vagas)

    def list_paginated(self, page_request: PageRequest) -> Page[VagaEntity]:
        return self._paginar([self._vagas[k] for k in sorted(self._vagas)], page_request)

    def list_by_patio(self, patio: str, page_request: PageRequest) -> Page[VagaEntity]:
        patio = (patio or "").strip()
        vagas = [self._vagas[k] for k in sorted(self._vagas) if self._vagas[k].patio == patio]
        return self._paginar(vagas, page_request)

    def exists_patio_numero(self, patio: str, numero: int) -> bool:
        return any(v.patio == patio and v.numero == numero for v in self._vagas.values())

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._vagas.clear()
        self._next_id = 1
