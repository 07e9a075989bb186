"""
Django Admin para o domínio de Vagas.
"""

from django.contrib import admin

from .models import VagaModel


@admin.register(VagaModel)
class VagaAdmin(admin.ModelAdmin):
    """Admin para VagaModel."""

    list_display = ['id', 'patio', 'numero', 'status']
    list_filter = ['patio', 'status']
    search_fields = ['patio']
    ordering = ['patio', 'numero']
    list_per_page = 25
