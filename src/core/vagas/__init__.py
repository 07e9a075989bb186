"""
Domínio de Vagas.

Contém:
- Entidade VagaEntity (status texto livre)
- DTOs de entrada/saída
- Port VagaRepository (+ implementação em memória)
- Use Cases de CRUD e listagem por pátio
"""

from .entities import VagaEntity, VagaStatus
from .dtos import VagaInputDTO, VagaOutputDTO
from .ports import VagaRepository, InMemoryVagaRepository, conflito_patio_numero
from .use_cases import (
    CriarVagaService,
    AtualizarVagaService,
    RemoverVagaService,
    ObterVagaService,
    ListarVagasService,
    ListarVagasPorPatioService,
)

__all__ = [
    "VagaEntity",
    "VagaStatus",
    "VagaInputDTO",
    "VagaOutputDTO",
    "VagaRepository",
    "InMemoryVagaRepository",
    "conflito_patio_numero",
    "CriarVagaService",
    "AtualizarVagaService",
    "RemoverVagaService",
    "ObterVagaService",
    "ListarVagasService",
    "ListarVagasPorPatioService",
]
