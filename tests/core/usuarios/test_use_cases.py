"""
Testes Unitários para Use Cases do Domínio de Usuários.

Coverage:
- CriarUsuarioService (conflitos de email e CPF)
- AtualizarUsuarioService
- RemoverUsuarioService
- ObterUsuarioService / ListarUsuariosService
"""

import pytest

from src.core.shared.exceptions import ConflictError, EntityNotFoundError, ValidationError
from src.core.shared.pagination import PageRequest
from src.core.usuarios.dtos import UsuarioInputDTO
from src.core.usuarios.use_cases import (
    AtualizarUsuarioService,
    CriarUsuarioService,
    ListarUsuariosService,
    ObterUsuarioService,
    RemoverUsuarioService,
)


def payload(**overrides):
    dados = {
        "nome": "Ana Souza",
        "email": "ana@example.com",
        "senha": "segredo123",
        "cpf": "12345678901",
    }
    dados.update(overrides)
    return UsuarioInputDTO(**dados)


@pytest.fixture
def criar(inmemory_usuario_repo, inmemory_uow):
    service = CriarUsuarioService(inmemory_usuario_repo, inmemory_uow)

    def _criar(**overrides):
        return service.execute(payload(**overrides))

    return _criar


class TestCriarUsuarioService:
    """Testes para CriarUsuarioService."""

    def test_criar_usuario(self, criar, inmemory_usuario_repo, inmemory_uow):
        output = criar(email="ANA@example.com")

        assert output.to_dict() == {
            "id": output.id,
            "nome": "Ana Souza",
            "email": "ana@example.com",
            "cpf": "12345678901",
        }
        assert "senha" not in output.to_dict()
        assert inmemory_uow.committed
        assert inmemory_usuario_repo.email_exists("ana@example.com")

    def test_input_sem_senha_no_repr(self):
        assert "segredo123" not in repr(payload())

    def test_email_duplicado(self, criar, inmemory_usuario_repo, inmemory_uow):
        criar()

        with pytest.raises(ConflictError) as exc_info:
            criar(email="Ana@Example.com", cpf="98765432100")

        assert exc_info.value.message == "Email já cadastrado."
        assert inmemory_uow.rolled_back
        assert inmemory_usuario_repo.count() == 1

    def test_cpf_duplicado(self, criar):
        criar()

        with pytest.raises(ConflictError) as exc_info:
            criar(email="bia@example.com")

        assert exc_info.value.message == "CPF já cadastrado."
        assert exc_info.value.constraint == "uk_usuario_cpf"

    def test_senha_curta(self, criar, inmemory_usuario_repo):
        with pytest.raises(ValidationError):
            criar(senha="curta")

        assert inmemory_usuario_repo.count() == 0


class TestAtualizarUsuarioService:
    """Testes para AtualizarUsuarioService."""

    def test_substituir_dados_e_senha(self, criar, inmemory_usuario_repo, inmemory_uow):
        usuario = criar()

        output = AtualizarUsuarioService(inmemory_usuario_repo, inmemory_uow).execute(
            usuario.id,
            payload(nome="Ana S.", email="ana.s@example.com", senha="novasenha99"),
        )

        assert output.email == "ana.s@example.com"
        assert inmemory_usuario_repo.get_by_id(usuario.id).senha == "novasenha99"

    def test_manter_proprio_email_nao_conflita(self, criar, inmemory_usuario_repo, inmemory_uow):
        usuario = criar()

        output = AtualizarUsuarioService(inmemory_usuario_repo, inmemory_uow).execute(
            usuario.id, payload(nome="Outro Nome")
        )

        assert output.nome == "Outro Nome"

    def test_email_de_outro_usuario(self, criar, inmemory_usuario_repo, inmemory_uow):
        criar()
        segundo = criar(email="bia@example.com", cpf="98765432100")

        with pytest.raises(ConflictError):
            AtualizarUsuarioService(inmemory_usuario_repo, inmemory_uow).execute(
                segundo.id, payload(cpf="98765432100")
            )

    def test_usuario_inexistente(self, inmemory_usuario_repo, inmemory_uow):
        with pytest.raises(EntityNotFoundError):
            AtualizarUsuarioService(inmemory_usuario_repo, inmemory_uow).execute(5, payload())

        assert inmemory_uow.rolled_back


class TestRemoverEConsultarUsuarios:
    """Testes para remoção e consultas."""

    def test_remover(self, criar, inmemory_usuario_repo, inmemory_uow):
        usuario = criar()

        RemoverUsuarioService(inmemory_usuario_repo, inmemory_uow).execute(usuario.id)

        assert not inmemory_usuario_repo.exists(usuario.id)

    def test_remover_inexistente(self, inmemory_usuario_repo, inmemory_uow):
        with pytest.raises(EntityNotFoundError):
            RemoverUsuarioService(inmemory_usuario_repo, inmemory_uow).execute(1)

    def test_obter(self, criar, inmemory_usuario_repo):
        usuario = criar()

        assert ObterUsuarioService(inmemory_usuario_repo).execute(usuario.id).nome == "Ana Souza"

    def test_obter_inexistente(self, inmemory_usuario_repo):
        with pytest.raises(EntityNotFoundError) as exc_info:
            ObterUsuarioService(inmemory_usuario_repo).execute(3)

        assert exc_info.value.entity_type == "Usuario"

    def test_listar(self, criar, inmemory_usuario_repo):
        for n in range(3):
            criar(email=f"u{n}@example.com", cpf=f"0000000000{n}")

        page = ListarUsuariosService(inmemory_usuario_repo).execute(PageRequest.criar(page=1, page_size=2))

        assert page.total == 3
        assert [u.email for u in page.items] == ["u0@example.com", "u1@example.com"]
