"""
API Views JSON para o domínio de Vagas.

Endpoints:
- GET    /api/vaga/?page=&pageSize=              - Listar (envelope paginado)
- POST   /api/vaga/                              - Cadastrar
- GET    /api/vaga/patio/?patio=&page=&pageSize= - Listar por pátio
- GET    /api/vaga/<id>/                         - Obter
- PUT    /api/vaga/<id>/                         - Substituir
- DELETE /api/vaga/<id>/                         - Remover

Links HATEOAS de cada vaga: self, update, delete e, conforme o
status, ocupar (vaga livre) ou liberar (vaga ocupada).
"""

import logging
from typing import List

from django.http import HttpRequest, JsonResponse

from src.core.vagas.dtos import VagaInputDTO, VagaOutputDTO
from src.core.shared.pagination import Link

from ..shared.api import BaseAPIView, django_url_for, json_response, no_content
from .forms import VagaForm

logger = logging.getLogger(__name__)


class VagaAPIMixin:
    """Links HATEOAS e conversão de payload comuns às views de vaga."""

    def item_links(self, request: HttpRequest, item: VagaOutputDTO) -> List[Link]:
        links = self.get_link_assembler(request).resource('vagas:detail', item.id)
        href = django_url_for(request)('vagas:detail', kwargs={'pk': item.id})

        if item.esta_livre:
            links.append(Link('ocupar', href, 'PUT'))
        elif item.esta_ocupada:
            links.append(Link('liberar', href, 'PUT'))

        return links

    def build_input(self, request: HttpRequest) -> VagaInputDTO:
        data = self.validate_form(VagaForm, self.parse_body(request))
        return VagaInputDTO(
            numero=data['numero'],
            patio=data['patio'],
            status=data.get('status') or None,
        )


class VagaAPIListView(VagaAPIMixin, BaseAPIView):
    """
    API para listar e criar vagas.

    GET /api/vaga/ - Lista paginada
    POST /api/vaga/ - Cadastra vaga (409 se pátio+número já existe)
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            page_request = self.get_page_request(request)
            page = self.get_service('listar_vagas_service').execute(page_request)
            return self.paginated_response(request, page, 'vagas:list')

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Body JSON:
        {
            "numero": int (obrigatório, > 0),
            "patio": "string (obrigatório)",
            "status": "string (opcional, default Livre)"
        }
        """
        try:
            input_dto = self.build_input(request)
            output = self.get_service('criar_vaga_service').execute(input_dto)

            logger.info(f"API: Vaga criada: {output.id} (pátio {output.patio}, nº {output.numero})")

            return self.created_response(request, output, 'vagas:detail')

        except Exception as e:
            return self.handle_exception(e)


class VagaAPIPatioView(VagaAPIMixin, BaseAPIView):
    """
    API de listagem por pátio.

    GET /api/vaga/patio/?patio=A&page=1&pageSize=10
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            patio = (request.GET.get('patio') or '').strip()
            page_request = self.get_page_request(request)
            page = self.get_service('listar_vagas_por_patio_service').execute(patio, page_request)
            return self.paginated_response(request, page, 'vagas:patio', extra_params={'patio': patio})

        except Exception as e:
            return self.handle_exception(e)


class VagaAPIDetailView(VagaAPIMixin, BaseAPIView):
    """
    API para operações em vaga específica.

    GET /api/vaga/<id>/ - Obter vaga
    PUT /api/vaga/<id>/ - Substituir número, pátio e status
    DELETE /api/vaga/<id>/ - Remover
    """

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            vaga = self.get_service('obter_vaga_service').execute(pk)
            return json_response(self.serialize_item(request, vaga))

        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int):
        try:
            input_dto = self.build_input(request)
            self.get_service('atualizar_vaga_service').execute(pk, input_dto)

            logger.info(f"API: Vaga {pk} atualizada")

            return no_content()

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int):
        try:
            self.get_service('remover_vaga_service').execute(pk)

            logger.info(f"API: Vaga {pk} removida")

            return no_content()

        except Exception as e:
            return self.handle_exception(e)
