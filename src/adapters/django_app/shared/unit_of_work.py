"""
Unit of Work - Implementação Django.

Gerencia a transação de um caso de uso, garantindo que as
escritas de um `with uow:` sejam persistidas juntas ou
descartadas juntas.

Usa `transaction.atomic()` por baixo: dentro de outra transação
(ex.: testes com pytest-django) vira um savepoint.
"""

import logging

from django.db import transaction

from src.core.shared.interfaces import UnitOfWork

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Example:
        with DjangoUnitOfWork():
            repo.add(entity1)
            repo.update(entity2)
        # Commit automático

    Example com rollback:
        with DjangoUnitOfWork():
            repo.add(entity)
            raise Exception("Erro!")
        # Rollback automático
    """

    def __init__(self, using: str = None):
        self._using = using
        self._atomic = None
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        if self._atomic is not None:
            return
        self._committed = False
        self._rolled_back = False
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()
        logger.debug("Transaction started")

    def commit(self) -> None:
        if self._atomic is None:
            logger.warning("Transaction already finalized")
            return

        atomic, self._atomic = self._atomic, None
        atomic.__exit__(None, None, None)
        self._committed = True
        logger.debug("Transaction committed")

    def rollback(self) -> None:
        if self._atomic is None:
            return

        atomic, self._atomic = self._atomic, None
        transaction.set_rollback(True, using=self._using)
        atomic.__exit__(None, None, None)
        self._rolled_back = True
        logger.debug("Transaction rolled back")

    @property
    def is_committed(self) -> bool:
        """Verifica se transação foi comitada."""
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        """Verifica se transação foi revertida."""
        return self._rolled_back


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória para testes.

    Não persiste nada - apenas registra commit/rollback para
    testes unitários sem banco de dados.

    Example:
        uow = InMemoryUnitOfWork()
        with uow:
            repo.add(entity)

        assert uow.committed
    """

    def __init__(self):
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        pass

    def commit(self) -> None:
        self._committed = True

    def rollback(self) -> None:
        self._rolled_back = True

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back

    def reset(self) -> None:
        """Reset para próximo teste."""
        self._committed = False
        self._rolled_back = False
