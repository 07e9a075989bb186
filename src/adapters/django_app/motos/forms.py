"""
Django Forms para validação do payload JSON de Motos.

Forms são DRIVING ADAPTERS que validam a estrutura dos dados
(campos presentes, tipos, tamanhos) antes dos Use Cases.
O formato da placa e a faixa do ano são regras do Core.
"""

from django import forms


class MotoForm(forms.Form):
    """Payload de criação/substituição de moto."""

    placa = forms.CharField(
        error_messages={
            'required': 'Placa é obrigatória.',
        },
    )

    marca = forms.CharField(
        max_length=50,
        error_messages={
            'required': 'Marca é obrigatória.',
            'max_length': 'Marca deve ter no máximo 50 caracteres.',
        },
    )

    modelo = forms.CharField(
        max_length=50,
        error_messages={
            'required': 'Modelo é obrigatório.',
            'max_length': 'Modelo deve ter no máximo 50 caracteres.',
        },
    )

    ano = forms.IntegerField(
        error_messages={
            'required': 'Ano inválido.',
            'invalid': 'Ano inválido.',
        },
    )
