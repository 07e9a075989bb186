"""
Entidades do Domínio de Motos.

Regras de Negócio Encapsuladas:
- Placa sempre normalizada e válida (value object Placa)
- Marca e modelo obrigatórios, sem espaços nas pontas, até 50 caracteres
- Ano entre 1885 e o ano corrente (UTC) + 1
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import ClassVar, Optional

from src.core.shared.exceptions import ValidationError

from .value_objects import Placa


@dataclass(eq=False)
class MotoEntity:
    """
    Entidade de Domínio: Moto.

    A identidade (`id`) é atribuída pelo repositório na inserção.
    Alterações passam por `definir_placa` e `atualizar_dados_basicos`;
    as mesmas validações da criação são aplicadas em toda atualização.

    Example:
        moto = MotoEntity.criar(
            placa=Placa.criar("KAC7516"),
            marca="Honda",
            modelo="CG 160",
            ano=2021,
        )
    """

    placa: Optional[Placa] = None
    marca: str = ""
    modelo: str = ""
    ano: int = 0
    id: Optional[int] = None

    ANO_MINIMO: ClassVar[int] = 1885
    MARCA_MAX_LENGTH: ClassVar[int] = 50
    MODELO_MAX_LENGTH: ClassVar[int] = 50

    @classmethod
    def criar(cls, placa: Placa, marca: str, modelo: str, ano: int) -> "MotoEntity":
        """
        Factory method para criar moto com validações.

        Raises:
            ValidationError: Se marca/modelo vazios ou ano fora do intervalo
        """
        moto = cls()
        moto.definir_placa(placa)
        moto.atualizar_dados_basicos(marca, modelo, ano)
        return moto

    @classmethod
    def ano_maximo(cls) -> int:
        """Último ano aceito: ano corrente em UTC + 1."""
        return datetime.now(timezone.utc).year + 1

    def definir_placa(self, placa: Placa) -> None:
        """Substitui a placa (já validada por Placa.criar)."""
        self.placa = placa

    def atualizar_dados_basicos(self, marca: str, modelo: str, ano: int) -> None:
        """
        Valida e aplica marca, modelo e ano.

        Raises:
            ValidationError: Se algum dado for inválido
        """
        if not marca or not marca.strip():
            raise ValidationError("Marca é obrigatória.", field="marca")
        if not modelo or not modelo.strip():
            raise ValidationError("Modelo é obrigatório.", field="modelo")
        if len(marca.strip()) > self.MARCA_MAX_LENGTH:
            raise ValidationError(
                f"Marca deve ter no máximo {self.MARCA_MAX_LENGTH} caracteres.",
                field="marca",
            )
        if len(modelo.strip()) > self.MODELO_MAX_LENGTH:
            raise ValidationError(
                f"Modelo deve ter no máximo {self.MODELO_MAX_LENGTH} caracteres.",
                field="modelo",
            )
        if ano is None or ano < self.ANO_MINIMO or ano > self.ano_maximo():
            raise ValidationError("Ano inválido.", field="ano")

        self.marca = marca.strip()
        self.modelo = modelo.strip()
        self.ano = ano

    def __repr__(self) -> str:
        return f"MotoEntity(id={self.id}, placa={self.placa}, ano={self.ano})"

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, MotoEntity):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)
