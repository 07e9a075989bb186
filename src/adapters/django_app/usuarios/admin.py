"""
Django Admin para o domínio de Usuários.

A senha não é listada nem editável pelo admin.
"""

from django.contrib import admin

from .models import UsuarioModel


@admin.register(UsuarioModel)
class UsuarioAdmin(admin.ModelAdmin):
    """Admin para UsuarioModel."""

    list_display = ['id', 'nome', 'email', 'cpf']
    search_fields = ['nome', 'email', 'cpf']
    exclude = ['senha']
    ordering = ['id']
    list_per_page = 25
