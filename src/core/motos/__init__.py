"""
Domínio de Motos.

Contém:
- Value Object Placa (padrão Mercosul)
- Entidade MotoEntity
- DTOs de entrada/saída
- Port MotoRepository (+ implementação em memória)
- Use Cases de CRUD e busca por placa
"""

from .value_objects import Placa
from .entities import MotoEntity
from .dtos import MotoInputDTO, MotoOutputDTO
from .ports import MotoRepository, InMemoryMotoRepository
from .use_cases import (
    CriarMotoService,
    AtualizarMotoService,
    RemoverMotoService,
    ObterMotoService,
    ListarMotosService,
    BuscarMotosPorPlacaService,
)

__all__ = [
    "Placa",
    "MotoEntity",
    "MotoInputDTO",
    "MotoOutputDTO",
    "MotoRepository",
    "InMemoryMotoRepository",
    "CriarMotoService",
    "AtualizarMotoService",
    "RemoverMotoService",
    "ObterMotoService",
    "ListarMotosService",
    "BuscarMotosPorPlacaService",
]
