"""
URL patterns para o domínio de Vagas.

Endpoints API JSON (prefixo /api/vaga/):
- GET/POST /api/vaga/ - Listar / Cadastrar
- GET /api/vaga/patio/?patio= - Listar por pátio
- GET/PUT/DELETE /api/vaga/<id>/ - Obter / Substituir / Remover
"""

from django.urls import path
from . import api_views

app_name = 'vagas'

urlpatterns = [
    path('', api_views.VagaAPIListView.as_view(), name='list'),

    # Filtro por pátio (antes do <pk> para não conflitar)
    path('patio/', api_views.VagaAPIPatioView.as_view(), name='patio'),

    path('<int:pk>/', api_views.VagaAPIDetailView.as_view(), name='detail'),
]
