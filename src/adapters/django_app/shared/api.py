"""
Base das APIs JSON - helpers compartilhados pelos apps.

Fornece:
- Respostas JSON (envelope paginado, 201 com Location, 204)
- Parsing de JSON e de parâmetros de paginação
- Validação estrutural via Django Forms
- Construção de URLs absolutas para links HATEOAS
- Tradução de exceções de domínio em status HTTP

Mapeamento de erros:
    ValidationError / ValueError  → 400
    EntityNotFoundError           → 404
    ConflictError                 → 409
    Outras exceções               → logadas e propagadas (500 do Django)
"""

import json
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Type
from urllib.parse import urlencode

from django import forms
from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.urls import reverse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from src.core.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from src.core.shared.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    Link,
    LinkAssembler,
    Page,
    PageRequest,
)
from src.config.container import get_container

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def json_response(data: Any, status: int = 200, headers: Dict[str, str] = None) -> JsonResponse:
    """
    Cria resposta JSON.

    Args:
        data: Corpo (dict ou lista)
        status: HTTP status code
        headers: Headers adicionais (ex.: Location)
    """
    response = JsonResponse(
        data,
        status=status,
        safe=False,
        json_dumps_params={'ensure_ascii': False},
    )
    for name, value in (headers or {}).items():
        response[name] = value
    return response


def no_content() -> HttpResponse:
    """Resposta 204 sem corpo."""
    return HttpResponse(status=204)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValueError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"JSON inválido: {e}")

    if not isinstance(data, dict):
        raise ValueError("JSON inválido: o corpo deve ser um objeto")

    return data


def parse_int_param(request: HttpRequest, name: str) -> Optional[int]:
    """
    Lê parâmetro inteiro da query string.

    Returns:
        Inteiro ou None se ausente/vazio

    Raises:
        ValidationError: Se o valor não for inteiro
    """
    raw = request.GET.get(name)
    if raw is None or raw.strip() == '':
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"Parâmetro '{name}' deve ser um número inteiro.", field=name)


def django_url_for(request: HttpRequest) -> Callable[..., str]:
    """
    Cria a função `url_for` usada pelo LinkAssembler.

    Resolve a rota nomeada com `reverse` e gera URL absoluta
    a partir do host do request.
    """

    def url_for(route_name: str, kwargs: Dict[str, Any] = None, query: Dict[str, Any] = None) -> str:
        path = reverse(route_name, kwargs=kwargs)
        if query:
            path = f"{path}?{urlencode(query)}"
        return request.build_absolute_uri(path)

    return url_for


def links_to_dict(links: Iterable[Link]) -> List[Dict[str, str]]:
    return [link.to_dict() for link in links]


def health_view(request: HttpRequest) -> JsonResponse:
    """GET /health/ - liveness simples."""
    return JsonResponse({'status': 'ok'})


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON e paginação
    - Acesso ao container DI
    - Links HATEOAS
    - Tratamento de erros padronizado

    Subclasses implementam os handlers HTTP (get/post/put/delete)
    e delegam erros para `handle_exception`.
    """

    def get_container(self):
        """Retorna container de DI."""
        return get_container()

    def get_service(self, service_name: str):
        """Obtém service do container."""
        container = self.get_container()
        return getattr(container, service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        """Parseia body JSON."""
        return parse_json_body(request)

    def validate_form(self, form_class: Type[forms.Form], data: Dict) -> Dict:
        """
        Valida estrutura do payload com um Django Form.

        Returns:
            cleaned_data do form

        Raises:
            ValidationError: Com a primeira mensagem de erro do form
        """
        form = form_class(data=data)
        if not form.is_valid():
            field_name, messages = next(iter(form.errors.items()))
            field_name = None if field_name == '__all__' else field_name
            raise ValidationError(messages[0], field=field_name)
        return form.cleaned_data

    def get_page_request(self, request: HttpRequest) -> PageRequest:
        """
        Extrai `page` e `pageSize` da query string.

        Raises:
            ValidationError: Se algum deles não for inteiro
        """
        return PageRequest.criar(
            page=parse_int_param(request, 'page'),
            page_size=parse_int_param(request, 'pageSize'),
            default_page_size=getattr(settings, 'PAGE_SIZE_DEFAULT', DEFAULT_PAGE_SIZE),
            max_page_size=getattr(settings, 'PAGE_SIZE_MAX', MAX_PAGE_SIZE),
        )

    def get_link_assembler(self, request: HttpRequest) -> LinkAssembler:
        return LinkAssembler(url_for=django_url_for(request))

    def item_links(self, request: HttpRequest, item) -> List[Link]:
        """Links de um item (sobrescrever nas subclasses)."""
        return []

    def serialize_item(self, request: HttpRequest, item) -> Dict:
        """DTO de saída + links HATEOAS."""
        data = item.to_dict()
        data['links'] = links_to_dict(self.item_links(request, item))
        return data

    def paginated_response(
        self,
        request: HttpRequest,
        page: Page,
        route_name: str,
        extra_params: Dict[str, Any] = None,
    ) -> JsonResponse:
        """
        Envelope paginado:
        {page, pageSize, total, totalPages, items, _links}
        """
        body = page.to_dict()
        body['items'] = [self.serialize_item(request, item) for item in page.items]
        body['_links'] = links_to_dict(
            self.get_link_assembler(request).collection(route_name, page, extra_params)
        )
        return json_response(body)

    def created_response(self, request: HttpRequest, item, detail_route: str) -> JsonResponse:
        """201 com o recurso criado e header Location."""
        location = django_url_for(request)(detail_route, kwargs={'pk': item.id})
        return json_response(
            self.serialize_item(request, item),
            status=201,
            headers={'Location': location},
        )

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Trata exceções e retorna resposta apropriada.

        Exceções fora do domínio são logadas e re-lançadas.
        """
        if isinstance(e, ValidationError):
            return json_response(e.to_dict(), status=400)

        if isinstance(e, EntityNotFoundError):
            return json_response(e.to_dict(), status=404)

        if isinstance(e, ConflictError):
            logger.warning(f"Conflito: {e}")
            return json_response(e.to_dict(), status=409)

        if isinstance(e, DomainException):
            return json_response(e.to_dict(), status=400)

        if isinstance(e, ValueError):
            return json_response({'error': 'BAD_REQUEST', 'message': str(e)}, status=400)

        # Erro inesperado
        logger.exception(f"Erro inesperado na API: {e}")
        raise e
