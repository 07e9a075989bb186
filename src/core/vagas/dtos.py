"""
Data Transfer Objects (DTOs) do Domínio de Vagas.
"""

from dataclasses import dataclass
from typing import Optional

from .entities import VagaEntity


@dataclass(frozen=True)
class VagaInputDTO:
    """
    DTO de entrada para criar ou substituir uma vaga.

    Attributes:
        numero: Número da vaga
        patio: Nome do pátio
        status: Status (opcional; "Livre" quando vazio)
    """

    numero: int
    patio: str
    status: Optional[str] = None


@dataclass
class VagaOutputDTO:
    """DTO de saída de uma vaga."""

    id: int
    status: str
    numero: int
    patio: str
    esta_livre: bool = False
    esta_ocupada: bool = False

    @classmethod
    def from_entity(cls, entity: VagaEntity) -> "VagaOutputDTO":
        return cls(
            id=entity.id,
            status=entity.status,
            numero=entity.numero,
            patio=entity.patio,
            esta_livre=entity.esta_livre,
            esta_ocupada=entity.esta_ocupada,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "status": self.status,
            "numero": self.numero,
            "patio": self.patio,
        }
