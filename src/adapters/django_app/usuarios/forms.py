"""
Django Forms para validação do payload JSON de Usuários.
"""

from django import forms


class UsuarioForm(forms.Form):
    """Payload de criação/substituição de usuário."""

    nome = forms.CharField(
        max_length=120,
        error_messages={
            'required': 'Nome é obrigatório.',
            'max_length': 'Nome deve ter no máximo 120 caracteres.',
        },
    )

    email = forms.CharField(
        max_length=254,
        error_messages={
            'required': 'Email é obrigatório.',
            'max_length': 'Email deve ter no máximo 254 caracteres.',
        },
    )

    senha = forms.CharField(
        max_length=100,
        error_messages={
            'required': 'Senha deve ter ao menos 8 caracteres.',
            'max_length': 'Senha deve ter no máximo 100 caracteres.',
        },
    )

    cpf = forms.CharField(
        max_length=11,
        error_messages={
            'required': 'CPF é obrigatório.',
            'max_length': 'CPF deve ter no máximo 11 caracteres.',
        },
    )
