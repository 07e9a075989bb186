"""
Django Forms para validação do payload JSON de Vagas.
"""

from django import forms


class VagaForm(forms.Form):
    """
    Payload de criação/substituição de vaga.

    Status é opcional e livre; a entidade aplica "Livre" quando vazio.
    """

    numero = forms.IntegerField(
        min_value=1,
        max_value=2147483647,
        error_messages={
            'required': 'Número da vaga deve ser maior que zero.',
            'invalid': 'Número da vaga deve ser um inteiro.',
            'min_value': 'Número da vaga deve ser maior que zero.',
            'max_value': 'Número da vaga deve ser no máximo 2147483647.',
        },
    )

    patio = forms.CharField(
        max_length=50,
        error_messages={
            'required': 'Pátio é obrigatório.',
            'max_length': 'Pátio deve ter no máximo 50 caracteres.',
        },
    )

    status = forms.CharField(
        max_length=20,
        required=False,
        error_messages={
            'max_length': 'Status deve ter no máximo 20 caracteres.',
        },
    )
