"""
Paginação e links HATEOAS.

Lógica única, agnóstica de recurso, reutilizada por motos, vagas
e usuários:
- PageRequest: página/tamanho solicitados, já normalizados
- Page: itens da página + metadados (total, total_pages, prev/next)
- Link: relação + URL + método HTTP
- LinkAssembler: monta links de coleção e de recurso

O core não conhece o roteador HTTP. A construção de URLs é
delegada a uma função `url_for(route_name, kwargs, query)`
fornecida pelo adapter (no Django, baseada em `reverse`).
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

UrlFor = Callable[..., str]


@dataclass(frozen=True)
class PageRequest:
    """
    Parâmetros de paginação normalizados.

    Use `PageRequest.criar` para aplicar os limites:
    - page < 1 → 1
    - page_size < 1 → DEFAULT_PAGE_SIZE
    - page_size > MAX_PAGE_SIZE → MAX_PAGE_SIZE
    """

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def criar(
        cls,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> "PageRequest":
        page = page if page is not None else 1
        page_size = page_size if page_size is not None else default_page_size

        if page < 1:
            page = 1
        if page_size < 1:
            page_size = default_page_size
        if page_size > max_page_size:
            page_size = max_page_size

        return cls(page=page, page_size=page_size)

    @property
    def offset(self) -> int:
        """Calcula offset para query."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass
class Page(Generic[T]):
    """Resultado paginado."""

    items: List[T]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """Total de páginas (0 quando a coleção está vazia)."""
        if self.total == 0:
            return 0
        return (self.total + self.page_size - 1) // self.page_size

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def map(self, func: Callable[[T], R]) -> "Page[R]":
        """Retorna nova página com os itens convertidos."""
        return Page(
            items=[func(item) for item in self.items],
            total=self.total,
            page=self.page,
            page_size=self.page_size,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "page": self.page,
            "pageSize": self.page_size,
            "total": self.total,
            "totalPages": self.total_pages,
        }


@dataclass(frozen=True)
class Link:
    """Link HATEOAS: relação, destino e método HTTP."""

    rel: str
    href: str
    method: str = "GET"

    def to_dict(self) -> Dict[str, str]:
        return {
            "rel": self.rel,
            "href": self.href,
            "method": self.method,
        }


@dataclass
class LinkAssembler:
    """
    Monta links HATEOAS para coleções e recursos.

    Attributes:
        url_for: função `url_for(route_name, kwargs=None, query=None)`
            que resolve uma rota nomeada para URL absoluta.

    Example:
        assembler = LinkAssembler(url_for=django_url_for(request))
        links = assembler.collection("motos:list", page)
        # [Link("self", ".../api/moto/?page=1&pageSize=10"), Link("next", ...)]
    """

    url_for: UrlFor

    def collection(
        self,
        route_name: str,
        page: Page,
        extra_params: Optional[Dict[str, Any]] = None,
    ) -> List[Link]:
        """
        Links de navegação de uma coleção paginada.

        - self: sempre
        - prev: apenas se page > 1
        - next: apenas se page < total_pages
        """

        def href(numero_pagina: int) -> str:
            query = dict(extra_params or {})
            query["page"] = numero_pagina
            query["pageSize"] = page.page_size
            return self.url_for(route_name, query=query)

        links = [Link("self", href(page.page))]
        if page.has_prev:
            links.append(Link("prev", href(page.page - 1)))
        if page.has_next:
            links.append(Link("next", href(page.page + 1)))
        return links

    def resource(
        self,
        detail_route: str,
        pk: Any,
        update_route: Optional[str] = None,
        delete_route: Optional[str] = None,
    ) -> List[Link]:
        """
        Links padrão de um recurso: self (GET), update (PUT), delete (DELETE).

        As rotas de update/delete usam a rota de detalhe quando omitidas.
        """
        kwargs = {"pk": pk}
        return [
            Link("self", self.url_for(detail_route, kwargs=kwargs)),
            Link("update", self.url_for(update_route or detail_route, kwargs=kwargs), "PUT"),
            Link("delete", self.url_for(delete_route or detail_route, kwargs=kwargs), "DELETE"),
        ]
