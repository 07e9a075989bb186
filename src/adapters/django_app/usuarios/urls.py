"""
URL patterns para o domínio de Usuários.

Endpoints API JSON (prefixo /api/usuario/):
- GET/POST /api/usuario/ - Listar / Cadastrar
- GET/PUT/DELETE /api/usuario/<id>/ - Obter / Substituir / Remover
"""

from django.urls import path
from . import api_views

app_name = 'usuarios'

urlpatterns = [
    path('', api_views.UsuarioAPIListView.as_view(), name='list'),
    path('<int:pk>/', api_views.UsuarioAPIDetailView.as_view(), name='detail'),
]
