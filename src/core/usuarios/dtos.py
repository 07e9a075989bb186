"""
Data Transfer Objects (DTOs) do Domínio de Usuários.
"""

from dataclasses import dataclass, field

from .entities import UsuarioEntity


@dataclass(frozen=True)
class UsuarioInputDTO:
    """DTO de entrada para criar ou substituir um usuário."""

    nome: str
    email: str
    senha: str = field(repr=False)
    cpf: str


@dataclass
class UsuarioOutputDTO:
    """DTO de saída de um usuário (nunca inclui a senha)."""

    id: int
    nome: str
    email: str
    cpf: str

    @classmethod
    def from_entity(cls, entity: UsuarioEntity) -> "UsuarioOutputDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            email=entity.email,
            cpf=entity.cpf,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "email": self.email,
            "cpf": self.cpf,
        }
