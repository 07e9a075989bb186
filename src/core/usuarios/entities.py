"""
Entidades do Domínio de Usuários.

Regras de Negócio Encapsuladas:
- Nome, email e CPF obrigatórios (trim; email em minúsculas)
- Senha com ao menos 8 caracteres após trim

Email e CPF são únicos no banco; a violação vira ConflictError
no repositório.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional

from src.core.shared.exceptions import ValidationError


@dataclass(eq=False)
class UsuarioEntity:
    """
    Entidade de Domínio: Usuário da aplicação.

    A senha nunca sai da entidade: DTOs de saída não a carregam.
    """

    nome: str = ""
    email: str = ""
    cpf: str = ""
    senha: str = field(default="", repr=False)
    id: Optional[int] = None

    NOME_MAX_LENGTH: ClassVar[int] = 120
    EMAIL_MAX_LENGTH: ClassVar[int] = 254
    CPF_MAX_LENGTH: ClassVar[int] = 11
    SENHA_MIN_LENGTH: ClassVar[int] = 8
    SENHA_MAX_LENGTH: ClassVar[int] = 100

    @classmethod
    def criar(cls, nome: str, email: str, senha: str, cpf: str) -> "UsuarioEntity":
        """
        Factory method para criar usuário com validações.

        Raises:
            ValidationError: Se algum campo é inválido
        """
        usuario = cls()
        usuario.atualizar_dados_basicos(nome, email, cpf)
        usuario.definir_senha(senha)
        return usuario

    def atualizar_dados_basicos(self, nome: str, email: str, cpf: str) -> None:
        """
        Valida e aplica nome, email e CPF.

        Raises:
            ValidationError: Se algum campo está vazio ou excede o limite
        """
        if not nome or not nome.strip():
            raise ValidationError("Nome é obrigatório.", field="nome")
        if not email or not email.strip():
            raise ValidationError("Email é obrigatório.", field="email")
        if not cpf or not cpf.strip():
            raise ValidationError("CPF é obrigatório.", field="cpf")

        self._validar_tamanho("nome", "Nome", nome.strip(), self.NOME_MAX_LENGTH)
        self._validar_tamanho("email", "Email", email.strip(), self.EMAIL_MAX_LENGTH)
        self._validar_tamanho("cpf", "CPF", cpf.strip(), self.CPF_MAX_LENGTH)

        self.nome = nome.strip()
        self.email = email.strip().lower()
        self.cpf = cpf.strip()

    def definir_senha(self, senha: str) -> None:
        """
        Raises:
            ValidationError: Se a senha tem menos de 8 caracteres
        """
        if not senha or len(senha.strip()) < self.SENHA_MIN_LENGTH:
            raise ValidationError(
                "Senha deve ter ao menos 8 caracteres.",
                field="senha",
            )
        self._validar_tamanho("senha", "Senha", senha.strip(), self.SENHA_MAX_LENGTH)
        self.senha = senha.strip()

    @staticmethod
    def _validar_tamanho(campo: str, rotulo: str, valor: str, limite: int) -> None:
        if len(valor) > limite:
            raise ValidationError(
                f"{rotulo} deve ter no máximo {limite} caracteres.",
                field=campo,
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UsuarioEntity):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)
