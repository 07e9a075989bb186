"""
URL Configuration para Pátio Manager.

Estrutura:
- /admin/ - Django Admin
- /api/moto/ - API de Motos
- /api/vaga/ - API de Vagas
- /api/usuario/ - API de Usuários
- /health/ - Health check
"""

from django.contrib import admin
from django.urls import path, include

from src.adapters.django_app.shared.api import health_view

urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    # APIs JSON
    path('api/moto/', include('src.adapters.django_app.motos.urls')),
    path('api/vaga/', include('src.adapters.django_app.vagas.urls')),
    path('api/usuario/', include('src.adapters.django_app.usuarios.urls')),

    # Health check
    path('health/', health_view, name='health'),
]
