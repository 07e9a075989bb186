"""
API Views JSON para o domínio de Usuários.

Endpoints:
- GET    /api/usuario/?page=&pageSize= - Listar (envelope paginado)
- POST   /api/usuario/                 - Cadastrar
- GET    /api/usuario/<id>/            - Obter
- PUT    /api/usuario/<id>/            - Substituir
- DELETE /api/usuario/<id>/            - Remover

A senha é aceita na entrada e nunca aparece nas respostas.
"""

import logging
from typing import List

from django.http import HttpRequest, JsonResponse

from src.core.usuarios.dtos import UsuarioInputDTO, UsuarioOutputDTO
from src.core.shared.pagination import Link

from ..shared.api import BaseAPIView, json_response, no_content
from .forms import UsuarioForm

logger = logging.getLogger(__name__)


class UsuarioAPIMixin:
    """Links HATEOAS e conversão de payload comuns às views de usuário."""

    def item_links(self, request: HttpRequest, item: UsuarioOutputDTO) -> List[Link]:
        return self.get_link_assembler(request).resource('usuarios:detail', item.id)

    def build_input(self, request: HttpRequest) -> UsuarioInputDTO:
        data = self.validate_form(UsuarioForm, self.parse_body(request))
        return UsuarioInputDTO(
            nome=data['nome'],
            email=data['email'],
            senha=data['senha'],
            cpf=data['cpf'],
        )


class UsuarioAPIListView(UsuarioAPIMixin, BaseAPIView):
    """
    API para listar e criar usuários.

    GET /api/usuario/ - Lista paginada
    POST /api/usuario/ - Cadastra usuário (409 se email/CPF já existem)
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            page_request = self.get_page_request(request)
            page = self.get_service('listar_usuarios_service').execute(page_request)
            return self.paginated_response(request, page, 'usuarios:list')

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Body JSON:
        {
            "nome": "string (obrigatório)",
            "email": "string (obrigatório)",
            "senha": "string (obrigatório, >= 8 caracteres)",
            "cpf": "string (obrigatório)"
        }
        """
        try:
            input_dto = self.build_input(request)
            output = self.get_service('criar_usuario_service').execute(input_dto)

            logger.info(f"API: Usuário criado: {output.id}")

            return self.created_response(request, output, 'usuarios:detail')

        except Exception as e:
            return self.handle_exception(e)


class UsuarioAPIDetailView(UsuarioAPIMixin, BaseAPIView):
    """
    API para operações em usuário específico.

    GET /api/usuario/<id>/ - Obter usuário
    PUT /api/usuario/<id>/ - Substituir dados e senha
    DELETE /api/usuario/<id>/ - Remover
    """

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            usuario = self.get_service('obter_usuario_service').execute(pk)
            return json_response(self.serialize_item(request, usuario))

        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int):
        try:
            input_dto = self.build_input(request)
            self.get_service('atualizar_usuario_service').execute(pk, input_dto)

            logger.info(f"API: Usuário {pk} atualizado")

            return no_content()

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int):
        try:
            self.get_service('remover_usuario_service').execute(pk)

            logger.info(f"API: Usuário {pk} removido")

            return no_content()

        except Exception as e:
            return self.handle_exception(e)
