"""
URL patterns para o domínio de Motos.

Endpoints API JSON (prefixo /api/moto/):
- GET/POST /api/moto/ - Listar / Cadastrar
- GET /api/moto/search/?placa= - Buscar por placa
- GET/PUT/DELETE /api/moto/<id>/ - Obter / Substituir / Remover
"""

from django.urls import path
from . import api_views

app_name = 'motos'

urlpatterns = [
    # Listagem e criação
    path('', api_views.MotoAPIListView.as_view(), name='list'),

    # Busca (antes do <pk> para não conflitar)
    path('search/', api_views.MotoAPISearchView.as_view(), name='search'),

    # Detalhes, atualização e remoção
    path('<int:pk>/', api_views.MotoAPIDetailView.as_view(), name='detail'),
]
