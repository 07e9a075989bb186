"""
Testes Unitários para a entidade UsuarioEntity.
"""

import pytest

from src.core.shared.exceptions import ValidationError
from src.core.usuarios.entities import UsuarioEntity


def novo_usuario(**overrides):
    dados = {
        "nome": "Ana Souza",
        "email": "ana@example.com",
        "senha": "segredo123",
        "cpf": "12345678901",
    }
    dados.update(overrides)
    return UsuarioEntity.criar(**dados)


class TestUsuarioEntity:
    """Testes da entidade Usuário."""

    def test_criar_normaliza_campos(self):
        usuario = novo_usuario(nome="  Ana Souza ", email=" Ana@Example.COM ", cpf=" 12345678901 ")

        assert usuario.nome == "Ana Souza"
        assert usuario.email == "ana@example.com"
        assert usuario.cpf == "12345678901"
        assert usuario.id is None

    def test_senha_fora_do_repr(self):
        assert "segredo123" not in repr(novo_usuario())

    @pytest.mark.parametrize("campo, mensagem", [
        ("nome", "Nome é obrigatório."),
        ("email", "Email é obrigatório."),
        ("cpf", "CPF é obrigatório."),
    ])
    def test_campos_obrigatorios(self, campo, mensagem):
        with pytest.raises(ValidationError) as exc_info:
            novo_usuario(**{campo: "   "})

        assert exc_info.value.message == mensagem
        assert exc_info.value.field == campo

    @pytest.mark.parametrize("senha", ["", "1234567", "   abc   ", None])
    def test_senha_curta(self, senha):
        with pytest.raises(ValidationError) as exc_info:
            novo_usuario(senha=senha)

        assert exc_info.value.message == "Senha deve ter ao menos 8 caracteres."

    def test_senha_com_oito_caracteres(self):
        assert novo_usuario(senha=" 12345678 ").senha == "12345678"

    def test_cpf_longo_demais(self):
        with pytest.raises(ValidationError) as exc_info:
            novo_usuario(cpf="123456789012")

        assert exc_info.value.message == "CPF deve ter no máximo 11 caracteres."

    def test_atualizar_dados_invalidos_preserva_estado(self):
        usuario = novo_usuario()

        with pytest.raises(ValidationError):
            usuario.atualizar_dados_basicos("Bia", "", "98765432100")

        assert usuario.nome == "Ana Souza"
        assert usuario.cpf == "12345678901"
