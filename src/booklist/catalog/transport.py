"""HTTP transport for the CARL.X catalog's JSON search API."""

from __future__ import annotations

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from booklist.catalog.exceptions import CatalogDecodeError, CatalogTransportError
from booklist.catalog.tokens import CacheBuster
from booklist.models import FacetFilter, SearchRequestPayload

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 10.0

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class CatalogTransport:
    """Build and send the POST requests the catalog's web client sends.

    Every request carries a fresh cache-busting token, so the catalog's
    server-side paging state advances between otherwise identical requests.
    """

    def __init__(
        self,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        client: httpx.Client | None = None,
        cache_buster: CacheBuster | None = None,
    ) -> None:
        self.timeout_s = timeout_s
        self._owns_client = client is None
        self._client = client or httpx.Client()
        self._cache_buster = cache_buster or CacheBuster()

    @staticmethod
    def _headers(catalog_url: str) -> dict[str, str]:
        return {
            "X-Requested-With": "XMLHttpRequest",
            "Content-Type": "application/json; charset=utf-8",
            "Accept": "application/json, text/javascript, */*; q=0.01",
            "Accept-Language": "en-US,en;q=0.8",
            "Ls2pac-config-type": "pac",
            "Ls2pac-config-name": "default - Go Live load",
            "Referer": catalog_url,
        }

    def post(
        self,
        catalog_url: str,
        endpoint: str,
        filters: list[FacetFilter],
        search_term: str,
        response_model: type[ResponseT],
    ) -> ResponseT:
        """POST a search payload to ``catalog_url + endpoint`` and decode the reply."""
        url = f"{catalog_url}{endpoint}"
        params = {"_": self._cache_buster.next_token()}
        payload = SearchRequestPayload(facet_filters=filters, search_term=search_term)
        logger.debug("POST %s?_=%s", url, params["_"])

        try:
            response = self._client.post(
                url,
                params=params,
                json=payload.to_wire(),
                headers=self._headers(catalog_url),
                timeout=self.timeout_s,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise CatalogTransportError(f"POST request '{url}' failed; {exc}") from exc

        if response.status_code != httpx.codes.OK:
            raise CatalogTransportError(
                f"POST request '{url}' failed; "
                f"HTTP error: {response.status_code} {response.reason_phrase}"
            )

        try:
            return response_model.model_validate_json(response.content)
        except ValidationError as exc:
            raise CatalogDecodeError(
                f"unable to decode response to '{response_model.__name__}': {exc}"
            ) from exc

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> CatalogTransport:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
