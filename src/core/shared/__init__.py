"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Interfaces (Ports)
- Paginação e links HATEOAS
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    ConflictError,
)
from .interfaces import UnitOfWork
from .pagination import PageRequest, Page, Link, LinkAssembler

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    "UnitOfWork",
    "PageRequest",
    "Page",
    "Link",
    "LinkAssembler",
]
