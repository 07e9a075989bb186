"""
Django Admin para o domínio de Motos.
"""

from django.contrib import admin

from .models import MotoModel


@admin.register(MotoModel)
class MotoAdmin(admin.ModelAdmin):
    """Admin para MotoModel."""

    list_display = ['id', 'placa', 'marca', 'modelo', 'ano']
    list_filter = ['marca', 'ano']
    search_fields = ['placa', 'marca', 'modelo']
    ordering = ['id']
    list_per_page = 25
