"""
Repositório Django para persistência de Vagas.

Implementa a interface VagaRepository definida no Core.
Violação de (pátio, número) vira ConflictError com a
mensagem de domínio.
"""

import logging

from django.db import IntegrityError

from src.core.shared.exceptions import ConflictError
from src.core.shared.pagination import Page, PageRequest
from src.core.vagas.entities import VagaEntity
from src.core.vagas.ports import conflito_patio_numero

from ..shared.repository import BaseRepository
from .models import VagaModel
from .mappers import VagaMapper

logger = logging.getLogger(__name__)


class DjangoVagaRepository(BaseRepository[VagaEntity, VagaModel]):
    """
    Implementação Django do VagaRepository.

    Example:
        repo = DjangoVagaRepository()
        repo.add(VagaEntity.criar(numero=1, patio="A"))
        repo.add(VagaEntity.criar(numero=1, patio="A"))  # ConflictError
    """

    model_class = VagaModel

    def to_entity(self, model: VagaModel) -> VagaEntity:
        return VagaMapper.to_entity(model)

    def to_model(self, entity: VagaEntity) -> VagaModel:
        return VagaMapper.to_model(entity)

    def conflict_error(self, entity: VagaEntity, exc: IntegrityError) -> ConflictError:
        return conflito_patio_numero(entity.patio, entity.numero)

    def list_by_patio(self, patio: str, page_request: PageRequest) -> Page[VagaEntity]:
        """Vagas de um pátio (igualdade exata após trim), ordenadas por ID."""
        qs = self._get_base_queryset().filter(patio=(patio or "").strip())
        return self._paginate(qs, page_request)

    def exists_patio_numero(self, patio: str, numero: int) -> bool:
        return self.model_class.objects.filter(patio=patio, numero=numero).exists()
