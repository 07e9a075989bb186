"""
Mapper para conversão entre MotoEntity (Core) e MotoModel (Django).

A placa é persistida como texto já normalizado e reidratada pelo
construtor do Value Object, que revalida o padrão.
"""

from typing import List

from src.core.motos.entities import MotoEntity
from src.core.motos.value_objects import Placa

from .models import MotoModel


class MotoMapper:
    """
    Responsável por:
    - to_model(): Entity → Model
    - to_entity(): Model → Entity
    - to_entity_list(): List[Model] → List[Entity]
    """

    @staticmethod
    def to_model(entity: MotoEntity) -> MotoModel:
        """
        Converte MotoEntity para MotoModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return MotoModel(
            id=entity.id,
            placa=str(entity.placa),
            marca=entity.marca,
            modelo=entity.modelo,
            ano=entity.ano,
        )

    @staticmethod
    def to_entity(model: MotoModel) -> MotoEntity:
        return MotoEntity(
            id=model.id,
            placa=Placa(model.placa),
            marca=model.marca,
            modelo=model.modelo,
            ano=model.ano,
        )

    @staticmethod
    def to_entity_list(models: List[MotoModel]) -> List[MotoEntity]:
        return [MotoMapper.to_entity(m) for m in models]
