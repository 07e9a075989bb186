"""
Django Models para o domínio de Usuários.

Email e CPF são únicos por constraint do banco; o repositório
traduz a violação em ConflictError.
"""

from django.db import models


class UsuarioModel(models.Model):
    """
    Model Django para persistência de Usuários.

    Fields:
        id: Inteiro autoincremento (gerado pelo banco)
        nome: Nome completo
        email: Email em minúsculas (único)
        senha: Senha (nunca exposta pela API)
        cpf: CPF sem formatação (único)
    """

    id = models.BigAutoField(primary_key=True)

    nome = models.CharField(
        max_length=120,
        help_text="Nome do usuário"
    )

    email = models.CharField(
        max_length=254,
        help_text="Email (minúsculas)"
    )

    senha = models.CharField(
        max_length=100,
        help_text="Senha do usuário"
    )

    cpf = models.CharField(
        max_length=11,
        help_text="CPF (somente dígitos)"
    )

    class Meta:
        db_table = 'usuarios'
        verbose_name = 'Usuário'
        verbose_name_plural = 'Usuários'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(fields=['email'], name='uk_usuario_email'),
            models.UniqueConstraint(fields=['cpf'], name='uk_usuario_cpf'),
        ]

    def __str__(self):
        return f"{self.nome} <{self.email}>"

    def __repr__(self):
        return f"<UsuarioModel id={self.id} email={self.email}>"
