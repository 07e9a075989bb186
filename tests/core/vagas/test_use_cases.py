"""
Testes Unitários para Use Cases do Domínio de Vagas.

Coverage:
- CriarVagaService (incluindo conflito pátio + número)
- AtualizarVagaService
- RemoverVagaService
- ObterVagaService
- ListarVagasService / ListarVagasPorPatioService
"""

import pytest

from src.core.shared.exceptions import ConflictError, EntityNotFoundError, ValidationError
from src.core.shared.pagination import PageRequest
from src.core.vagas.dtos import VagaInputDTO
from src.core.vagas.use_cases import (
    AtualizarVagaService,
    CriarVagaService,
    ListarVagasPorPatioService,
    ListarVagasService,
    ObterVagaService,
    RemoverVagaService,
)


@pytest.fixture
def criar(inmemory_vaga_repo, inmemory_uow):
    service = CriarVagaService(inmemory_vaga_repo, inmemory_uow)

    def _criar(numero=1, patio="A", status=None):
        return service.execute(VagaInputDTO(numero=numero, patio=patio, status=status))

    return _criar


class TestCriarVagaService:
    """Testes para CriarVagaService."""

    def test_criar_vaga(self, criar, inmemory_vaga_repo):
        output = criar(numero=12, patio=" A ")

        assert output.id is not None
        assert output.to_dict() == {
            "id": output.id,
            "status": "Livre",
            "numero": 12,
            "patio": "A",
        }
        assert inmemory_vaga_repo.exists_patio_numero("A", 12)

    def test_patio_numero_duplicado_gera_conflito(self, criar, inmemory_vaga_repo, inmemory_uow):
        primeira = criar(numero=1, patio="A")

        with pytest.raises(ConflictError) as exc_info:
            criar(numero=1, patio="A")

        assert exc_info.value.message == "Já existe a vaga nº 1 no pátio 'A'."
        assert inmemory_uow.rolled_back
        assert inmemory_vaga_repo.count() == 1
        assert inmemory_vaga_repo.get_by_id(primeira.id) is not None

    def test_mesmo_numero_em_outro_patio(self, criar, inmemory_vaga_repo):
        criar(numero=1, patio="A")
        criar(numero=1, patio="B")

        assert inmemory_vaga_repo.count() == 2

    def test_numero_invalido(self, criar):
        with pytest.raises(ValidationError):
            criar(numero=0)


class TestAtualizarVagaService:
    """Testes para AtualizarVagaService."""

    def test_substituir_dados(self, criar, inmemory_vaga_repo, inmemory_uow):
        vaga = criar(numero=1, patio="A")

        AtualizarVagaService(inmemory_vaga_repo, inmemory_uow).execute(
            vaga.id, VagaInputDTO(numero=2, patio="B", status="Ocupada")
        )

        atualizada = inmemory_vaga_repo.get_by_id(vaga.id)
        assert (atualizada.numero, atualizada.patio, atualizada.status) == (2, "B", "Ocupada")

    def test_status_omitido_volta_para_livre(self, criar, inmemory_vaga_repo, inmemory_uow):
        vaga = criar(status="Ocupada")

        output = AtualizarVagaService(inmemory_vaga_repo, inmemory_uow).execute(
            vaga.id, VagaInputDTO(numero=1, patio="A")
        )

        assert output.status == "Livre"

    def test_conflito_com_outra_vaga(self, criar, inmemory_vaga_repo, inmemory_uow):
        criar(numero=1, patio="A")
        segunda = criar(numero=2, patio="A")

        with pytest.raises(ConflictError):
            AtualizarVagaService(inmemory_vaga_repo, inmemory_uow).execute(
                segunda.id, VagaInputDTO(numero=1, patio="A")
            )

    def test_manter_mesma_localizacao_nao_conflita(self, criar, inmemory_vaga_repo, inmemory_uow):
        vaga = criar(numero=1, patio="A")

        output = AtualizarVagaService(inmemory_vaga_repo, inmemory_uow).execute(
            vaga.id, VagaInputDTO(numero=1, patio="A", status="Ocupada")
        )

        assert output.status == "Ocupada"

    def test_vaga_inexistente(self, inmemory_vaga_repo, inmemory_uow):
        with pytest.raises(EntityNotFoundError):
            AtualizarVagaService(inmemory_vaga_repo, inmemory_uow).execute(
                99, VagaInputDTO(numero=1, patio="A")
            )


class TestRemoverVagaService:
    """Testes para RemoverVagaService."""

    def test_remover(self, criar, inmemory_vaga_repo, inmemory_uow):
        vaga = criar()

        RemoverVagaService(inmemory_vaga_repo, inmemory_uow).execute(vaga.id)

        assert inmemory_vaga_repo.count() == 0

    def test_remover_inexistente(self, inmemory_vaga_repo, inmemory_uow):
        with pytest.raises(EntityNotFoundError):
            RemoverVagaService(inmemory_vaga_repo, inmemory_uow).execute(1)


class TestConsultasDeVagas:
    """Testes das consultas de vagas."""

    def test_obter(self, criar, inmemory_vaga_repo):
        vaga = criar(numero=3, patio="C")

        output = ObterVagaService(inmemory_vaga_repo).execute(vaga.id)

        assert (output.numero, output.patio) == (3, "C")

    def test_obter_inexistente(self, inmemory_vaga_repo):
        with pytest.raises(EntityNotFoundError):
            ObterVagaService(inmemory_vaga_repo).execute(1)

    def test_listar(self, criar, inmemory_vaga_repo):
        for numero in range(1, 13):
            criar(numero=numero)

        page = ListarVagasService(inmemory_vaga_repo).execute(PageRequest.criar(page=2, page_size=5))

        assert page.total == 12
        assert page.total_pages == 3
        assert [v.numero for v in page.items] == [6, 7, 8, 9, 10]

    def test_listar_por_patio_igualdade_exata(self, criar, inmemory_vaga_repo):
        criar(numero=1, patio="A")
        criar(numero=2, patio="A")
        criar(numero=1, patio="AB")
        criar(numero=1, patio="B")

        page = ListarVagasPorPatioService(inmemory_vaga_repo).execute(" A ", PageRequest.criar())

        assert page.total == 2
        assert [(v.patio, v.numero) for v in page.items] == [("A", 1), ("A", 2)]

    def test_listar_por_patio_inexistente(self, criar, inmemory_vaga_repo):
        criar(patio="A")

        page = ListarVagasPorPatioService(inmemory_vaga_repo).execute("Z", PageRequest.criar())

        assert page.total == 0
        assert page.total_pages == 0
        assert page.items == []
