"""
Repository Base - Implementação base de repositórios com Django ORM.

Fornece funcionalidades comuns para os repositórios de motos,
vagas e usuários:
- CRUD básico com ID gerado pelo banco
- Paginação ordenada por ID crescente
- Tradução de violação de unicidade em ConflictError

Princípios:
- Repositórios são stateless
- Não contêm lógica de negócio
- Apenas persistência e queries
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Type, TypeVar
import logging

from django.db import IntegrityError, models, transaction
from django.db.models import QuerySet

from src.core.shared.exceptions import ConflictError
from src.core.shared.pagination import Page, PageRequest

from .database import is_unique_violation

logger = logging.getLogger(__name__)

# Type variables
T = TypeVar("T")  # Entity type
M = TypeVar("M", bound=models.Model)  # Model type


class BaseRepository(ABC, Generic[T, M]):
    """
    Classe base abstrata para repositórios Django.

    Subclasses definem `model_class`, os conversores entity/model e
    `conflict_error`, que descreve a violação de unicidade no
    vocabulário do domínio.

    Type Parameters:
        T: Tipo da entidade de domínio
        M: Tipo do Model Django

    Example:
        class DjangoMotoRepository(BaseRepository[MotoEntity, MotoModel]):
            model_class = MotoModel

            def to_entity(self, model):
                return MotoMapper.to_entity(model)

            def to_model(self, entity):
                return MotoMapper.to_model(entity)
    """

    # Classe do model Django (definir na subclasse)
    model_class: Type[M]

    # Ordenação estável para paginação
    default_order_field: str = "id"

    @abstractmethod
    def to_entity(self, model: M) -> T:
        """Converte Model Django para Entity de domínio."""
        raise NotImplementedError

    @abstractmethod
    def to_model(self, entity: T) -> M:
        """Converte Entity de domínio para Model Django (não salvo)."""
        raise NotImplementedError

    def conflict_error(self, entity: T, exc: IntegrityError) -> ConflictError:
        """
        Monta o ConflictError para uma violação de unicidade.

        Subclasses com restrições únicas sobrescrevem para
        produzir mensagens específicas.
        """
        return ConflictError("Registro duplicado.")

    def _get_base_queryset(self) -> QuerySet[M]:
        return self.model_class.objects.all()

    def _save_model(self, entity: T, model: M, force_insert: bool = False) -> M:
        """
        Salva o model em um savepoint, traduzindo unicidade em ConflictError.

        O savepoint mantém utilizável a transação externa (Unit of Work)
        depois de um IntegrityError.
        """
        try:
            with transaction.atomic():
                model.save(force_insert=force_insert)
        except IntegrityError as e:
            if is_unique_violation(e):
                logger.warning(f"{self.model_class.__name__} unique violation: {e}")
                raise self.conflict_error(entity, e) from e
            raise
        return model

    def add(self, entity: T) -> T:
        """
        Insere a entidade e atribui o ID gerado pelo banco.

        Raises:
            ConflictError: Se violar restrição única
        """
        model = self.to_model(entity)
        model.pk = None
        self._save_model(entity, model, force_insert=True)
        entity.id = model.pk
        logger.info(f"{self.model_class.__name__} created: {entity.id}")
        return entity

    def update(self, entity: T) -> None:
        """
        Persiste alterações de entidade existente.

        Raises:
            ConflictError: Se violar restrição única
        """
        model = self.to_model(entity)
        self._save_model(entity, model)
        logger.debug(f"{self.model_class.__name__} saved: {entity.id}")

    def get_by_id(self, entity_id: int) -> Optional[T]:
        """
        Busca entidade por ID.

        Returns:
            Entidade encontrada ou None
        """
        try:
            model = self._get_base_queryset().get(id=entity_id)
            return self.to_entity(model)
        except self.model_class.DoesNotExist:
            return None

    def delete(self, entity_id: int) -> bool:
        """
        Remove entidade.

        Returns:
            True se removido, False se não existia
        """
        deleted_count, _ = self.model_class.objects.filter(id=entity_id).delete()
        if deleted_count:
            logger.info(f"{self.model_class.__name__} deleted: {entity_id}")
        return deleted_count > 0

    def exists(self, entity_id: int) -> bool:
        return self.model_class.objects.filter(id=entity_id).exists()

    def count(self) -> int:
        return self.model_class.objects.count()

    def list_paginated(self, page_request: PageRequest) -> Page[T]:
        """Lista uma página de entidades ordenadas por ID."""
        return self._paginate(self._get_base_queryset(), page_request)

    def _paginate(self, qs: QuerySet[M], page_request: PageRequest) -> Page[T]:
        """
        Aplica ordenação e fatia ao queryset.

        Args:
            qs: QuerySet já filtrado
            page_request: Página/tamanho normalizados

        Returns:
            Página de entidades com total da coleção filtrada
            (vazia quando a página está além do fim)
        """
        qs = qs.order_by(self.default_order_field)
        total = qs.count()

        # Página além do fim não consulta o banco (offset pode exceder BIGINT)
        entities: List[T] = []
        if page_request.offset < total:
            models_page = qs[page_request.offset:page_request.offset + page_request.limit]
            entities = [self.to_entity(m) for m in models_page]

        return Page(
            items=entities,
            total=total,
            page=page_request.page,
            page_size=page_request.page_size,
        )
