"""
Use Cases (Application Services) do Domínio de Vagas.

Use Cases implementados:
- ListarVagasService: Lista paginada
- ListarVagasPorPatioService: Lista paginada filtrada por pátio
- ObterVagaService: Obtém vaga por ID
- CriarVagaService: Cadastra vaga
- AtualizarVagaService: Substitui número, pátio e status
- RemoverVagaService: Remove vaga
"""

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import EntityNotFoundError
from src.core.shared.pagination import Page, PageRequest

from .ports import VagaRepository
from .entities import VagaEntity
from .dtos import VagaInputDTO, VagaOutputDTO


def _vaga_nao_encontrada(vaga_id: int) -> EntityNotFoundError:
    return EntityNotFoundError(
        f"Vaga {vaga_id} não encontrada",
        entity_type="Vaga",
        entity_id=vaga_id,
    )


class CriarVagaService:
    """
    Use Case: Cadastrar uma nova vaga.

    Fluxo:
    1. Criar entidade (validações de número e pátio)
    2. Persistir via repositório em transação
    3. Retornar DTO de saída com o ID gerado

    A duplicidade de (pátio, número) é detectada pelo repositório.
    """

    def __init__(self, vaga_repo: VagaRepository, uow: UnitOfWork):
        self.vaga_repo = vaga_repo
        self.uow = uow

    def execute(self, input_dto: VagaInputDTO) -> VagaOutputDTO:
        """
        Raises:
            ValidationError: Se dados inválidos
            ConflictError: Se (pátio, número) já existe
        """
        vaga = VagaEntity.criar(
            numero=input_dto.numero,
            patio=input_dto.patio,
            status=input_dto.status,
        )

        with self.uow:
            vaga = self.vaga_repo.add(vaga)

        return VagaOutputDTO.from_entity(vaga)


class AtualizarVagaService:
    """Use Case: Substituir número, pátio e status de uma vaga."""

    def __init__(self, vaga_repo: VagaRepository, uow: UnitOfWork):
        self.vaga_repo = vaga_repo
        self.uow = uow

    def execute(self, vaga_id: int, input_dto: VagaInputDTO) -> VagaOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se vaga não existe
            ValidationError: Se dados inválidos
            ConflictError: Se (pátio, número) pertence a outra vaga
        """
        with self.uow:
            vaga = self.vaga_repo.get_by_id(vaga_id)

            if not vaga:
                raise _vaga_nao_encontrada(vaga_id)

            vaga.atualizar_localizacao(input_dto.numero, input_dto.patio)
            vaga.alterar_status(input_dto.status)

            self.vaga_repo.update(vaga)

        return VagaOutputDTO.from_entity(vaga)


class RemoverVagaService:
    """Use Case: Remover uma vaga."""

    def __init__(self, vaga_repo: VagaRepository, uow: UnitOfWork):
        self.vaga_repo = vaga_repo
        self.uow = uow

    def execute(self, vaga_id: int) -> None:
        with self.uow:
            if not self.vaga_repo.exists(vaga_id):
                raise _vaga_nao_encontrada(vaga_id)

            self.vaga_repo.delete(vaga_id)


class ObterVagaService:
    """Use Case: Obter vaga por ID."""

    def __init__(self, vaga_repo: VagaRepository):
        self.vaga_repo = vaga_repo

    def execute(self, vaga_id: int) -> VagaOutputDTO:
        vaga = self.vaga_repo.get_by_id(vaga_id)

        if not vaga:
            raise _vaga_nao_encontrada(vaga_id)

        return VagaOutputDTO.from_entity(vaga)


class ListarVagasService:
    """Use Case: Listar vagas com paginação."""

    def __init__(self, vaga_repo: VagaRepository):
        self.vaga_repo = vaga_repo

    def execute(self, page_request: PageRequest) -> Page[VagaOutputDTO]:
        page = self.vaga_repo.list_paginated(page_request)
        return page.map(VagaOutputDTO.from_entity)


class ListarVagasPorPatioService:
    """
    Use Case: Listar vagas de um pátio com paginação.

    O filtro é por igualdade exata do nome do pátio (após trim).
    """

    def __init__(self, vaga_repo: VagaRepository):
        self.vaga_repo = vaga_repo

    def execute(self, patio: str, page_request: PageRequest) -> Page[VagaOutputDTO]:
        page = self.vaga_repo.list_by_patio((patio or "").strip(), page_request)
        return page.map(VagaOutputDTO.from_entity)
