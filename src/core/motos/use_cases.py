"""
Use Cases (Application Services) do Domínio de Motos.

Use Cases implementados:
- ListarMotosService: Lista paginada
- ObterMotoService: Obtém moto por ID
- BuscarMotosPorPlacaService: Busca por fragmento de placa
- CriarMotoService: Cadastra moto
- AtualizarMotoService: Substitui dados de moto existente
- RemoverMotoService: Remove moto

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas (DI)
- Sem lógica de infraestrutura
"""

from typing import List

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import EntityNotFoundError
from src.core.shared.pagination import Page, PageRequest

from .ports import MotoRepository
from .entities import MotoEntity
from .value_objects import Placa
from .dtos import MotoInputDTO, MotoOutputDTO


def _moto_nao_encontrada(moto_id: int) -> EntityNotFoundError:
    return EntityNotFoundError(
        f"Moto {moto_id} não encontrada",
        entity_type="Moto",
        entity_id=moto_id,
    )


class CriarMotoService:
    """
    Use Case: Cadastrar uma nova moto.

    Fluxo:
    1. Normalizar/validar placa (value object)
    2. Criar entidade (validações de marca, modelo e ano)
    3. Persistir via repositório em transação
    4. Retornar DTO de saída com o ID gerado

    Example:
        service = CriarMotoService(moto_repo, uow)
        output = service.execute(MotoInputDTO("kac7516", "Honda", "CG 160", 2021))
        output.placa  # "KAC7516"
    """

    def __init__(self, moto_repo: MotoRepository, uow: UnitOfWork):
        self.moto_repo = moto_repo
        self.uow = uow

    def execute(self, input_dto: MotoInputDTO) -> MotoOutputDTO:
        """
        Raises:
            ValidationError: Se dados inválidos
        """
        moto = MotoEntity.criar(
            placa=Placa.criar(input_dto.placa),
            marca=input_dto.marca,
            modelo=input_dto.modelo,
            ano=input_dto.ano,
        )

        with self.uow:
            moto = self.moto_repo.add(moto)

        return MotoOutputDTO.from_entity(moto)


class AtualizarMotoService:
    """
    Use Case: Substituir placa, marca, modelo e ano de uma moto.

    A existência é verificada antes de qualquer validação ou alteração.
    """

    def __init__(self, moto_repo: MotoRepository, uow: UnitOfWork):
        self.moto_repo = moto_repo
        self.uow = uow

    def execute(self, moto_id: int, input_dto: MotoInputDTO) -> MotoOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se moto não existe
            ValidationError: Se dados inválidos
        """
        with self.uow:
            moto = self.moto_repo.get_by_id(moto_id)

            if not moto:
                raise _moto_nao_encontrada(moto_id)

            moto.definir_placa(Placa.criar(input_dto.placa))
            moto.atualizar_dados_basicos(input_dto.marca, input_dto.modelo, input_dto.ano)

            self.moto_repo.update(moto)

        return MotoOutputDTO.from_entity(moto)


class RemoverMotoService:
    """Use Case: Remover uma moto."""

    def __init__(self, moto_repo: MotoRepository, uow: UnitOfWork):
        self.moto_repo = moto_repo
        self.uow = uow

    def execute(self, moto_id: int) -> None:
        with self.uow:
            if not self.moto_repo.exists(moto_id):
                raise _moto_nao_encontrada(moto_id)

            self.moto_repo.delete(moto_id)


class ObterMotoService:
    """Use Case: Obter moto por ID."""

    def __init__(self, moto_repo: MotoRepository):
        self.moto_repo = moto_repo

    def execute(self, moto_id: int) -> MotoOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se moto não existe
        """
        moto = self.moto_repo.get_by_id(moto_id)

        if not moto:
            raise _moto_nao_encontrada(moto_id)

        return MotoOutputDTO.from_entity(moto)


class ListarMotosService:
    """
    Use Case: Listar motos com paginação.

    Não usa UoW pois é operação de leitura.
    """

    def __init__(self, moto_repo: MotoRepository):
        self.moto_repo = moto_repo

    def execute(self, page_request: PageRequest) -> Page[MotoOutputDTO]:
        page = self.moto_repo.list_paginated(page_request)
        return page.map(MotoOutputDTO.from_entity)


class BuscarMotosPorPlacaService:
    """Use Case: Buscar motos por fragmento de placa (sem paginação)."""

    def __init__(self, moto_repo: MotoRepository):
        self.moto_repo = moto_repo

    def execute(self, placa: str) -> List[MotoOutputDTO]:
        fragmento = (placa or "").strip()
        motos = self.moto_repo.search_by_placa(fragmento)
        return [MotoOutputDTO.from_entity(m) for m in motos]
