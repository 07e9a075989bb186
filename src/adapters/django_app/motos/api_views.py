"""
API Views JSON para o domínio de Motos.

Endpoints:
- GET    /api/moto/?page=&pageSize=  - Listar (envelope paginado)
- POST   /api/moto/                  - Cadastrar
- GET    /api/moto/search/?placa=    - Buscar por fragmento de placa
- GET    /api/moto/<id>/             - Obter
- PUT    /api/moto/<id>/             - Substituir
- DELETE /api/moto/<id>/             - Remover

Cada moto retornada carrega links HATEOAS:
self, update, delete e list.
"""

import logging
from typing import List

from django.http import HttpRequest, JsonResponse

from src.core.motos.dtos import MotoInputDTO, MotoOutputDTO
from src.core.shared.pagination import DEFAULT_PAGE_SIZE, Link

from ..shared.api import BaseAPIView, django_url_for, json_response, no_content
from .forms import MotoForm

logger = logging.getLogger(__name__)


class MotoAPIMixin:
    """Links HATEOAS e conversão de payload comuns às views de moto."""

    def item_links(self, request: HttpRequest, item: MotoOutputDTO) -> List[Link]:
        links = self.get_link_assembler(request).resource('motos:detail', item.id)
        links.append(Link(
            'list',
            django_url_for(request)('motos:list', query={'page': 1, 'pageSize': DEFAULT_PAGE_SIZE}),
        ))
        return links

    def build_input(self, request: HttpRequest) -> MotoInputDTO:
        data = self.validate_form(MotoForm, self.parse_body(request))
        return MotoInputDTO(
            placa=data['placa'],
            marca=data['marca'],
            modelo=data['modelo'],
            ano=data['ano'],
        )


class MotoAPIListView(MotoAPIMixin, BaseAPIView):
    """
    API para listar e criar motos.

    GET /api/moto/ - Lista paginada
    POST /api/moto/ - Cadastra moto
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        """
        Query params:
        - page: Página (default: 1)
        - pageSize: Itens por página (default: 10, máximo: 100)
        """
        try:
            page_request = self.get_page_request(request)
            page = self.get_service('listar_motos_service').execute(page_request)
            return self.paginated_response(request, page, 'motos:list')

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Body JSON:
        {
            "placa": "string (obrigatório)",
            "marca": "string (obrigatório)",
            "modelo": "string (obrigatório)",
            "ano": int (obrigatório)
        }
        """
        try:
            input_dto = self.build_input(request)
            output = self.get_service('criar_moto_service').execute(input_dto)

            logger.info(f"API: Moto criada: {output.id} ({output.placa})")

            return self.created_response(request, output, 'motos:detail')

        except Exception as e:
            return self.handle_exception(e)


class MotoAPISearchView(MotoAPIMixin, BaseAPIView):
    """
    API de busca por placa.

    GET /api/moto/search/?placa=KAC - Lista (sem paginação)
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            placa = request.GET.get('placa', '')
            motos = self.get_service('buscar_motos_por_placa_service').execute(placa)
            return json_response([self.serialize_item(request, m) for m in motos])

        except Exception as e:
            return self.handle_exception(e)


class MotoAPIDetailView(MotoAPIMixin, BaseAPIView):
    """
    API para operações em moto específica.

    GET /api/moto/<id>/ - Obter moto
    PUT /api/moto/<id>/ - Substituir dados
    DELETE /api/moto/<id>/ - Remover
    """

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            moto = self.get_service('obter_moto_service').execute(pk)
            return json_response(self.serialize_item(request, moto))

        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int):
        try:
            input_dto = self.build_input(request)
            self.get_service('atualizar_moto_service').execute(pk, input_dto)

            logger.info(f"API: Moto {pk} atualizada")

            return no_content()

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int):
        try:
            self.get_service('remover_moto_service').execute(pk)

            logger.info(f"API: Moto {pk} removida")

            return no_content()

        except Exception as e:
            return self.handle_exception(e)
