"""
Mapper para conversão entre UsuarioEntity (Core) e UsuarioModel (Django).
"""

from src.core.usuarios.entities import UsuarioEntity

from .models import UsuarioModel


class UsuarioMapper:
    """Entity ↔ Model, sem regras de negócio."""

    @staticmethod
    def to_model(entity: UsuarioEntity) -> UsuarioModel:
        return UsuarioModel(
            id=entity.id,
            nome=entity.nome,
            email=entity.email,
            senha=entity.senha,
            cpf=entity.cpf,
        )

    @staticmethod
    def to_entity(model: UsuarioModel) -> UsuarioEntity:
        return UsuarioEntity(
            id=model.id,
            nome=model.nome,
            email=model.email,
            senha=model.senha,
            cpf=model.cpf,
        )
