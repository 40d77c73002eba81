# clockify_connector/core/query.py
from typing import Optional, Protocol, runtime_checkable

import httpx
from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class QueryAppender(Protocol):
    """
    Capacité optionnelle d'un body de requête : s'ajouter lui-même à la
    query string de l'URL.

    HTTPClient.new_request teste cette capacité avec isinstance() sur le body,
    quelle que soit la méthode HTTP. Pour un GET, le body n'est utilisé que
    pour cet effet et n'est jamais encodé en JSON.
    """

    def append_to_query(self, url: httpx.URL) -> httpx.URL:
        ...


class QueryParams(BaseModel):
    """
    Base pydantic pour les paramètres de requête.
    Les champs non-None sont fusionnés dans la query string (alias respectés).
    """

    model_config = ConfigDict(populate_by_name=True)

    def append_to_query(self, url: httpx.URL) -> httpx.URL:
        params = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if not params:
            return url
        return url.copy_merge_params(params)


class PaginationParams(QueryParams):
    """Pagination des endpoints de liste (?page=2&page-size=50)."""
    page: Optional[int]         = Field(None, ge=1, description="Numéro de page (à partir de 1)")
    page_size: Optional[int]    = Field(None, ge=1, alias="page-size", description="Nombre d'éléments par page")
