"""
Configuração do Django App para Motos.
"""

from django.apps import AppConfig


class MotosConfig(AppConfig):
    """Configuração do app Motos."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.motos'
    label = 'motos'
    verbose_name = 'Motos'
