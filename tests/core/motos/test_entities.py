"""
Testes Unitários para o Value Object Placa e a entidade MotoEntity.

Testa regras de negócio sem dependências externas.
"""

from datetime import datetime, timezone

import pytest

from src.core.motos.entities import MotoEntity
from src.core.motos.value_objects import Placa
from src.core.shared.exceptions import ValidationError


class TestPlaca:
    """Testes de normalização e validação da placa."""

    def test_normaliza_caixa_e_espacos(self):
        """Placa é convertida para maiúsculas e sem espaços nas pontas."""
        assert str(Placa.criar(" kac7516 ")) == "KAC7516"

    @pytest.mark.parametrize("raw", ["ABC1234", "BRA2E19", "abc1d23"])
    def test_aceita_padrao_antigo_e_mercosul(self, raw):
        assert Placa.criar(raw).value == raw.upper()

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_placa_vazia(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            Placa.criar(raw)

        assert exc_info.value.message == "Placa é obrigatória."
        assert exc_info.value.field == "placa"

    @pytest.mark.parametrize("raw", ["AB12345", "ABC-1234", "ABCD123", "ABC12345", "1BC1234"])
    def test_placa_fora_do_padrao(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            Placa.criar(raw)

        assert exc_info.value.message == "Placa inválida."

    def test_igualdade_por_valor(self):
        assert Placa.criar("kac7516") == Placa.criar("KAC7516")

    @pytest.mark.parametrize("raw", ["kac7516", " KAC7516", "x", "KAC7516\n"])
    def test_construtor_direto_valida(self, raw):
        """Sem normalização: só aceita placa já em maiúsculas e no padrão."""
        with pytest.raises(ValidationError, match="Placa inválida."):
            Placa(raw)

    def test_construtor_direto_com_placa_normalizada(self):
        assert Placa("BRA2E19") == Placa.criar("bra2e19")


class TestMotoEntity:
    """Testes da entidade Moto."""

    def test_criar_moto_valida(self):
        moto = MotoEntity.criar(Placa.criar("KAC7516"), " Honda ", " CG 160 ", 2021)

        assert str(moto.placa) == "KAC7516"
        assert moto.marca == "Honda"
        assert moto.modelo == "CG 160"
        assert moto.ano == 2021
        assert moto.id is None

    @pytest.mark.parametrize("marca", ["", "   ", None])
    def test_marca_obrigatoria(self, marca):
        with pytest.raises(ValidationError, match="Marca é obrigatória."):
            MotoEntity.criar(Placa.criar("KAC7516"), marca, "CG 160", 2021)

    def test_modelo_obrigatorio(self):
        with pytest.raises(ValidationError, match="Modelo é obrigatório."):
            MotoEntity.criar(Placa.criar("KAC7516"), "Honda", " ", 2021)

    def test_marca_longa_demais(self):
        with pytest.raises(ValidationError) as exc_info:
            MotoEntity.criar(Placa.criar("KAC7516"), "H" * 51, "CG 160", 2021)

        assert exc_info.value.field == "marca"

    def test_limites_do_ano(self):
        """Aceita de 1885 até o ano corrente (UTC) + 1."""
        ano_limite = datetime.now(timezone.utc).year + 1

        assert MotoEntity.criar(Placa.criar("KAC7516"), "Honda", "CG", 1885).ano == 1885
        assert MotoEntity.criar(Placa.criar("KAC7516"), "Honda", "CG", ano_limite).ano == ano_limite

    @pytest.mark.parametrize("delta", [1, 10])
    def test_ano_no_futuro_invalido(self, delta):
        ano = datetime.now(timezone.utc).year + 1 + delta

        with pytest.raises(ValidationError, match="Ano inválido."):
            MotoEntity.criar(Placa.criar("KAC7516"), "Honda", "CG 160", ano)

    def test_ano_antes_de_1885_invalido(self):
        with pytest.raises(ValidationError) as exc_info:
            MotoEntity.criar(Placa.criar("KAC7516"), "Honda", "CG 160", 1884)

        assert exc_info.value.field == "ano"
        assert exc_info.value.code == "VALIDATION_ERROR_ANO"

    def test_atualizar_dados_invalidos_nao_altera_estado(self):
        moto = MotoEntity.criar(Placa.criar("KAC7516"), "Honda", "CG 160", 2021)

        with pytest.raises(ValidationError):
            moto.atualizar_dados_basicos("Yamaha", "", 2022)

        assert moto.marca == "Honda"
        assert moto.ano == 2021

    def test_definir_placa_substitui(self):
        moto = MotoEntity.criar(Placa.criar("KAC7516"), "Honda", "CG 160", 2021)

        moto.definir_placa(Placa.criar("BRA2E19"))

        assert str(moto.placa) == "BRA2E19"

    def test_igualdade_por_id(self):
        a = MotoEntity.criar(Placa.criar("KAC7516"), "Honda", "CG 160", 2021)
        b = MotoEntity.criar(Placa.criar("BRA2E19"), "Yamaha", "Fazer", 2022)
        a.id = b.id = 1

        assert a == b
        assert len({a, b}) == 1
