"""
Ports (Interfaces) do Domínio de Motos.

Define os contratos que os Adapters de infraestrutura devem implementar
para persistência e consulta de motos.

Example:
    # No Adapter (Django)
    class DjangoMotoRepository(MotoRepository):
        def add(self, moto: MotoEntity) -> MotoEntity:
            model = MotoMapper.to_model(moto)
            model.save()
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from src.core.shared.pagination import Page, PageRequest

from .entities import MotoEntity
from .value_objects import Placa


@runtime_checkable
class MotoRepository(Protocol):
    """
    Interface para persistência de Motos.

    Implementações:
    - DjangoMotoRepository (PostgreSQL/SQLite via ORM)
    - InMemoryMotoRepository (para testes)
    """

    def add(self, moto: MotoEntity) -> MotoEntity:
        """Insere moto e atribui o ID gerado pelo store."""
        ...

    def update(self, moto: MotoEntity) -> None:
        ...

    def get_by_id(self, moto_id: int) -> Optional[MotoEntity]:
        ...

    def delete(self, moto_id: int) -> bool:
        ...

    def exists(self, moto_id: int) -> bool:
        ...

    def count(self) -> int:
        ...

    def list_paginated(self, page_request: PageRequest) -> Page[MotoEntity]:
        """Página de motos ordenada por ID crescente."""
        ...

    def search_by_placa(self, fragmento: str) -> List[MotoEntity]:
        """
        Busca motos cuja placa contém o fragmento (sem paginação).

        A comparação ignora maiúsculas/minúsculas; resultado ordenado por ID.
        """
        ...

    def placa_exists(self, placa: Placa) -> bool:
        ...


class InMemoryMotoRepository:
    """
    Implementação em memória do MotoRepository.

    Útil para testes unitários e prototipagem. Não usar em produção!

    Example:
        repo = InMemoryMotoRepository()
        moto = repo.add(moto)
        found = repo.get_by_id(moto.id)
    """

    def __init__(self):
        self._motos: Dict[int, MotoEntity] = {}
        self._next_id = 1

    def add(self, moto: MotoEntity) -> MotoEntity:
        moto.id = self._next_id
        self._next_id += 1
        self._motos[moto.id] = moto
        return moto

    def update(self, moto: MotoEntity) -> None:
        self._motos[moto.id] = moto

    def get_by_id(self, moto_id: int) -> Optional[MotoEntity]:
        return self._motos.get(moto_id)

    def delete(self, moto_id: int) -> bool:
        return self._motos.pop(moto_id, None) is not None

    def exists(self, moto_id: int) -> bool:
        return moto_id in self._motos

    def count(self) -> int:
        return len(self._motos)

    def list_paginated(self, page_request: PageRequest) -> Page[MotoEntity]:
        ordenadas = [self._motos[k] for k in sorted(self._motos)]
        fatia = ordenadas[page_request.offset:page_request.offset + page_request.limit]
        return Page(
            items=fatia,
            total=len(ordenadas),
            page=page_request.page,
            page_size=page_request.page_size,
        )

    def search_by_placa(self, fragmento: str) -> List[MotoEntity]:
        fragmento = (fragmento or "").upper()
        return [
            self._motos[k] for k in sorted(self._motos)
            if fragmento in str(self._motos[k].placa)
        ]

    def placa_exists(self, placa: Placa) -> bool:
        return any(m.placa == placa for m in self._motos.values())

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._motos.clear()
        self._next_id = 1
