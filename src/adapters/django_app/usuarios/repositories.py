"""
Repositório Django para persistência de Usuários.

Implementa a interface UsuarioRepository definida no Core.
"""

import logging
from typing import Optional

from django.db import IntegrityError

from src.core.shared.exceptions import ConflictError
from src.core.usuarios.entities import UsuarioEntity
from src.core.usuarios.ports import conflito_cpf, conflito_email

from ..shared.repository import BaseRepository
from .models import UsuarioModel
from .mappers import UsuarioMapper

logger = logging.getLogger(__name__)

CPF_CONSTRAINT = "uk_usuario_cpf"
EMAIL_CONSTRAINT = "uk_usuario_email"


def _constraint_violada(exc: IntegrityError) -> Optional[str]:
    """Nome da constraint única violada, se identificável."""
    diag = getattr(exc.__cause__, "diag", None)
    nome = getattr(diag, "constraint_name", None)
    if nome:
        return nome

    # Só a primeira linha: o DETAIL do PostgreSQL traz o valor duplicado
    mensagem = (str(exc).splitlines() or [""])[0]
    if CPF_CONSTRAINT in mensagem or "usuarios.cpf" in mensagem:
        return CPF_CONSTRAINT
    if EMAIL_CONSTRAINT in mensagem or "usuarios.email" in mensagem:
        return EMAIL_CONSTRAINT
    return None


class DjangoUsuarioRepository(BaseRepository[UsuarioEntity, UsuarioModel]):
    """
    Implementação Django do UsuarioRepository.

    A constraint violada (email ou CPF) é identificada pelo nome
    informado pelo driver (PostgreSQL) ou pela coluna citada na
    mensagem (SQLite). O valor duplicado, presente no DETAIL do
    PostgreSQL, nunca é considerado.
    """

    model_class = UsuarioModel

    def to_entity(self, model: UsuarioModel) -> UsuarioEntity:
        return UsuarioMapper.to_entity(model)

    def to_model(self, entity: UsuarioEntity) -> UsuarioModel:
        return UsuarioMapper.to_model(entity)

    def conflict_error(self, entity: UsuarioEntity, exc: IntegrityError) -> ConflictError:
        if _constraint_violada(exc) == CPF_CONSTRAINT:
            return conflito_cpf()
        return conflito_email()

    def email_exists(self, email: str) -> bool:
        email = (email or "").strip().lower()
        return self.model_class.objects.filter(email=email).exists()

    def cpf_exists(self, cpf: str) -> bool:
        return self.model_class.objects.filter(cpf=(cpf or "").strip()).exists()
