"""
Testes Unitários para paginação e links HATEOAS.

Coverage:
- PageRequest.criar (normalização de página/tamanho)
- Page (total_pages, prev/next, map)
- LinkAssembler (links de coleção e de recurso)
"""

import pytest

from src.core.shared.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    Link,
    LinkAssembler,
    Page,
    PageRequest,
)


def fake_url_for(route_name, kwargs=None, query=None):
    """url_for determinístico para inspecionar os links gerados."""
    url = f"/{route_name}"
    if kwargs:
        url += "/" + "/".join(str(v) for v in kwargs.values())
    if query:
        url += "?" + "&".join(f"{k}={v}" for k, v in query.items())
    return url


class TestPageRequest:
    """Testes de normalização dos parâmetros de paginação."""

    def test_valores_padrao(self):
        """Sem parâmetros: página 1, tamanho 10."""
        req = PageRequest.criar()

        assert req.page == 1
        assert req.page_size == DEFAULT_PAGE_SIZE

    @pytest.mark.parametrize("page", [0, -1, -50])
    def test_pagina_menor_que_um_vira_um(self, page):
        assert PageRequest.criar(page=page).page == 1

    @pytest.mark.parametrize("page_size", [0, -5])
    def test_tamanho_menor_que_um_volta_ao_padrao(self, page_size):
        assert PageRequest.criar(page_size=page_size).page_size == DEFAULT_PAGE_SIZE

    def test_tamanho_limitado_ao_maximo(self):
        assert PageRequest.criar(page_size=500).page_size == MAX_PAGE_SIZE

    def test_limites_configuraveis(self):
        req = PageRequest.criar(page_size=0, default_page_size=20, max_page_size=50)
        assert req.page_size == 20

        req = PageRequest.criar(page_size=80, default_page_size=20, max_page_size=50)
        assert req.page_size == 50

    def test_offset(self):
        assert PageRequest.criar(page=3, page_size=10).offset == 20
        assert PageRequest.criar(page=1, page_size=10).offset == 0


class TestPage:
    """Testes dos metadados de página."""

    def test_total_pages_arredonda_para_cima(self):
        page = Page(items=[], total=25, page=1, page_size=10)
        assert page.total_pages == 3

    def test_total_zero_tem_zero_paginas(self):
        page = Page(items=[], total=0, page=1, page_size=10)

        assert page.total_pages == 0
        assert not page.has_next
        assert not page.has_prev

    def test_primeira_pagina(self):
        page = Page(items=[], total=25, page=1, page_size=10)

        assert not page.has_prev
        assert page.has_next

    def test_ultima_pagina(self):
        page = Page(items=[], total=25, page=3, page_size=10)

        assert page.has_prev
        assert not page.has_next

    def test_pagina_alem_do_fim(self):
        """Página além do total: sem itens, prev presente, next ausente."""
        page = Page(items=[], total=5, page=4, page_size=10)

        assert page.has_prev
        assert not page.has_next

    def test_map_preserva_metadados(self):
        page = Page(items=[1, 2, 3], total=13, page=2, page_size=3)

        mapped = page.map(lambda n: n * 10)

        assert mapped.items == [10, 20, 30]
        assert (mapped.total, mapped.page, mapped.page_size) == (13, 2, 3)

    def test_to_dict_usa_nomes_da_api(self):
        page = Page(items=[], total=25, page=2, page_size=10)

        assert page.to_dict() == {
            "page": 2,
            "pageSize": 10,
            "total": 25,
            "totalPages": 3,
        }


class TestLinkAssembler:
    """Testes de montagem de links HATEOAS."""

    @pytest.fixture
    def assembler(self):
        return LinkAssembler(url_for=fake_url_for)

    def test_colecao_pagina_do_meio(self, assembler):
        page = Page(items=[], total=25, page=2, page_size=10)

        links = assembler.collection("motos:list", page)

        assert [link.rel for link in links] == ["self", "prev", "next"]
        assert links[0].href == "/motos:list?page=2&pageSize=10"
        assert links[1].href == "/motos:list?page=1&pageSize=10"
        assert links[2].href == "/motos:list?page=3&pageSize=10"
        assert all(link.method == "GET" for link in links)

    def test_colecao_vazia_so_tem_self(self, assembler):
        page = Page(items=[], total=0, page=1, page_size=10)

        links = assembler.collection("motos:list", page)

        assert [link.rel for link in links] == ["self"]

    def test_colecao_com_parametros_extras(self, assembler):
        page = Page(items=[], total=1, page=1, page_size=5)

        links = assembler.collection("vagas:patio", page, extra_params={"patio": "A"})

        assert links[0].href == "/vagas:patio?patio=A&page=1&pageSize=5"

    def test_recurso(self, assembler):
        links = assembler.resource("motos:detail", 7)

        assert [(link.rel, link.method) for link in links] == [
            ("self", "GET"),
            ("update", "PUT"),
            ("delete", "DELETE"),
        ]
        assert all(link.href == "/motos:detail/7" for link in links)

    def test_link_to_dict(self):
        link = Link("update", "http://x/api/moto/1/", "PUT")

        assert link.to_dict() == {
            "rel": "update",
            "href": "http://x/api/moto/1/",
            "method": "PUT",
        }
