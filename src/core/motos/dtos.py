"""
Data Transfer Objects (DTOs) do Domínio de Motos.

- MotoInputDTO: dados de entrada de criação e atualização (PUT)
- MotoOutputDTO: projeção de saída da entidade
"""

from dataclasses import dataclass

from .entities import MotoEntity


@dataclass(frozen=True)
class MotoInputDTO:
    """
    DTO de entrada para criar ou substituir uma moto.

    Attributes:
        placa: Placa em qualquer caixa (normalizada pelo domínio)
        marca: Marca da moto
        modelo: Modelo da moto
        ano: Ano de fabricação
    """

    placa: str
    marca: str
    modelo: str
    ano: int


@dataclass
class MotoOutputDTO:
    """DTO de saída de uma moto."""

    id: int
    placa: str
    marca: str
    modelo: str
    ano: int

    @classmethod
    def from_entity(cls, entity: MotoEntity) -> "MotoOutputDTO":
        return cls(
            id=entity.id,
            placa=str(entity.placa) if entity.placa else None,
            marca=entity.marca,
            modelo=entity.modelo,
            ano=entity.ano,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "placa": self.placa,
            "marca": self.marca,
            "modelo": self.modelo,
            "ano": self.ano,
        }
