"""
Mapper para conversão entre VagaEntity (Core) e VagaModel (Django).
"""

from src.core.vagas.entities import VagaEntity

from .models import VagaModel


class VagaMapper:
    """Entity ↔ Model, sem regras de negócio."""

    @staticmethod
    def to_model(entity: VagaEntity) -> VagaModel:
        return VagaModel(
            id=entity.id,
            status=entity.status,
            numero=entity.numero,
            patio=entity.patio,
        )

    @staticmethod
    def to_entity(model: VagaModel) -> VagaEntity:
        return VagaEntity(
            id=model.id,
            status=model.status,
            numero=model.numero,
            patio=model.patio,
        )
