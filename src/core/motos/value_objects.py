"""Value Objects do domínio de Motos: imutáveis, comparados por valor."""

import re
from dataclasses import dataclass

from src.core.shared.exceptions import ValidationError


# Padrão Mercosul (ABC1D23) e antigo (ABC1234)
PLACA_REGEX = re.compile(r"^[A-Z]{3}[0-9][A-Z0-9][0-9]{2}\Z")


@dataclass(frozen=True)
class Placa:
    """
    Placa de moto normalizada.

    Sempre em maiúsculas e sem espaços nas pontas. Use `Placa.criar`
    para construir a partir de entrada externa (normaliza antes de
    validar); o construtor direto só aceita valores já normalizados.

    Example:
        placa = Placa.criar(" kac7516 ")
        str(placa)  # "KAC7516"
    """

    value: str

    def __post_init__(self):
        # Também vale para a reidratação direta (Placa(valor_do_banco))
        if not isinstance(self.value, str) or not PLACA_REGEX.match(self.value):
            raise ValidationError("Placa inválida.", field="placa")

    @classmethod
    def criar(cls, raw: str) -> "Placa":
        """
        Normaliza e valida a placa.

        Raises:
            ValidationError: Se vazia ou fora do padrão
        """
        if raw is None or not str(raw).strip():
            raise ValidationError("Placa é obrigatória.", field="placa")

        valor = str(raw).strip().upper()

        return cls(valor)

    def __str__(self) -> str:
        return self.value
