"""
Repositório Django para persistência de Motos.

Implementa a interface MotoRepository definida no Core.
É um DRIVEN ADAPTER - acionado pelos Use Cases.
"""

from typing import List
import logging

from src.core.motos.entities import MotoEntity
from src.core.motos.value_objects import Placa

from ..shared.repository import BaseRepository
from .models import MotoModel
from .mappers import MotoMapper

logger = logging.getLogger(__name__)


class DjangoMotoRepository(BaseRepository[MotoEntity, MotoModel]):
    """
    Implementação Django do MotoRepository.

    Herda de BaseRepository CRUD e paginação por ID; acrescenta
    as buscas por placa.

    Example:
        repo = DjangoMotoRepository()
        moto = repo.add(MotoEntity.criar(Placa.criar("KAC7516"), "Honda", "CG 160", 2021))
        repo.search_by_placa("kac")  # [moto]
    """

    model_class = MotoModel

    def to_entity(self, model: MotoModel) -> MotoEntity:
        return MotoMapper.to_entity(model)

    def to_model(self, entity: MotoEntity) -> MotoModel:
        return MotoMapper.to_model(entity)

    def search_by_placa(self, fragmento: str) -> List[MotoEntity]:
        """
        Busca motos cuja placa contém o fragmento (sem diferenciar caixa).

        Fragmento vazio retorna todas as motos.
        """
        qs = self._get_base_queryset()
        fragmento = (fragmento or "").strip()
        if fragmento:
            qs = qs.filter(placa__icontains=fragmento.upper())
        models = qs.order_by(self.default_order_field)
        logger.debug(f"Busca por placa '{fragmento}'")
        return MotoMapper.to_entity_list(models)

    def placa_exists(self, placa: Placa) -> bool:
        return self.model_class.objects.filter(placa=str(placa)).exists()
