"""
Configuração do Django App para Vagas.
"""

from django.apps import AppConfig


class VagasConfig(AppConfig):
    """Configuração do app Vagas."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.vagas'
    label = 'vagas'
    verbose_name = 'Vagas do Pátio'
