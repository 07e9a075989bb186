"""
Entidades do Domínio de Vagas.

Regras de Negócio Encapsuladas:
- Número da vaga entre 1 e 2147483647 (inteiro de 32 bits do banco)
- Pátio obrigatório, sem espaços nas pontas, até 50 caracteres
- Status livre (texto), "Livre" por padrão

A unicidade de (pátio, número) NÃO é verificada aqui: é uma
restrição do banco, traduzida em ConflictError pelo repositório.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from src.core.shared.exceptions import ValidationError


class VagaStatus:
    """Valores de status conhecidos (comparação sem diferenciar caixa)."""

    LIVRE = "Livre"
    OCUPADA = "Ocupada"


@dataclass(eq=False)
class VagaEntity:
    """
    Entidade de Domínio: Vaga de pátio.

    O status é texto livre: apenas "Livre" e "Ocupada" têm
    significado (para os links HATEOAS), mas outros valores são aceitos.

    Example:
        vaga = VagaEntity.criar(numero=12, patio="A")
        vaga.alterar_status("Ocupada")
    """

    numero: int = 0
    patio: str = ""
    status: str = VagaStatus.LIVRE
    id: Optional[int] = None

    NUMERO_MAX: ClassVar[int] = 2147483647
    PATIO_MAX_LENGTH: ClassVar[int] = 50
    STATUS_MAX_LENGTH: ClassVar[int] = 20

    @classmethod
    def criar(cls, numero: int, patio: str, status: Optional[str] = None) -> "VagaEntity":
        """
        Factory method para criar vaga com validações.

        Args:
            numero: Número da vaga (> 0)
            patio: Nome do pátio
            status: Status inicial (opcional, "Livre" se vazio)

        Raises:
            ValidationError: Se número/pátio inválidos
        """
        vaga = cls()
        vaga.definir_localizacao(numero, patio)
        if status and status.strip():
            vaga.alterar_status(status)
        return vaga

    def definir_localizacao(self, numero: int, patio: str) -> None:
        """
        Valida e aplica número e pátio.

        Raises:
            ValidationError: Se numero fora de 1..NUMERO_MAX ou pátio vazio
        """
        if numero is None or numero <= 0:
            raise ValidationError(
                "Número da vaga deve ser maior que zero.",
                field="numero",
            )
        if numero > self.NUMERO_MAX:
            raise ValidationError(
                f"Número da vaga deve ser no máximo {self.NUMERO_MAX}.",
                field="numero",
            )
        if not patio or not patio.strip():
            raise ValidationError("Pátio é obrigatório.", field="patio")
        if len(patio.strip()) > self.PATIO_MAX_LENGTH:
            raise ValidationError(
                f"Pátio deve ter no máximo {self.PATIO_MAX_LENGTH} caracteres.",
                field="patio",
            )

        self.numero = numero
        self.patio = patio.strip()

    def atualizar_localizacao(self, numero: int, patio: str) -> None:
        """Mesmo contrato de `definir_localizacao`."""
        self.definir_localizacao(numero, patio)

    def alterar_status(self, status: Optional[str]) -> None:
        """
        Reatribui o status sem validar contra um conjunto fechado.

        Status vazio volta para "Livre".
        """
        valor = (status or "").strip() or VagaStatus.LIVRE
        if len(valor) > self.STATUS_MAX_LENGTH:
            raise ValidationError(
                f"Status deve ter no máximo {self.STATUS_MAX_LENGTH} caracteres.",
                field="status",
            )
        self.status = valor

    @property
    def esta_livre(self) -> bool:
        return (self.status or "").lower() == VagaStatus.LIVRE.lower()

    @property
    def esta_ocupada(self) -> bool:
        return (self.status or "").lower() == VagaStatus.OCUPADA.lower()

    def __repr__(self) -> str:
        return f"VagaEntity(id={self.id}, patio='{self.patio}', numero={self.numero}, status={self.status})"

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, VagaEntity):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)
