"""Search coordinator: CatalogQuery -> PublicationInfo[]."""

from __future__ import annotations

import logging
from typing import Any

from booklist.catalog.exceptions import CatalogProtocolError, QueryValidationError
from booklist.catalog.transport import CatalogTransport
from booklist.models import (
    CURRENT_YEAR,
    UNKNOWN,
    UNKNOWN_YEAR,
    CatalogQuery,
    CountResponse,
    FacetFilter,
    PublicationInfo,
    SearchResponse,
)

logger = logging.getLogger(__name__)

COUNT_ENDPOINT = "search/count"
SEARCH_ENDPOINT = "search"


class CatalogSearch:
    """Search a CARL.X catalog for an author's publications of one media type.

    Two requests are needed per year: one returns the number of
    publications matching the facet filters, the other returns up to a
    page of those publications.  The catalog keeps its own paging state, so
    the page request is repeated until the expected count is reached.

    The search runs for publications of an unknown year first, then for
    the current year.
    """

    def __init__(
        self,
        transport: CatalogTransport | None = None,
        current_year: str = CURRENT_YEAR,
    ) -> None:
        self._owns_transport = transport is None
        self._transport = transport or CatalogTransport()
        self.current_year = current_year

    @property
    def year_buckets(self) -> list[str]:
        return [UNKNOWN_YEAR, self.current_year]

    def search(self, query: CatalogQuery) -> list[PublicationInfo]:
        """Return (media, title) pairs for the query's author.

        Any error aborts the whole search; no partial results are returned.
        """
        _validate(query)

        results: list[PublicationInfo] = []
        for year in self.year_buckets:
            filters = [
                FacetFilter.of("Year", year),
                FacetFilter.of("Format", query.media),
            ]

            # Expected count tells us when to stop requesting pages.
            expected = self._count(query, filters)
            if expected == 0:
                continue

            retrieved = 0
            while retrieved < expected:
                resources = self._page(query, filters)
                if not resources:
                    raise CatalogProtocolError(
                        f"catalog returned an empty page; expected {expected} "
                        f"publications for year '{year}', have {retrieved}"
                    )
                retrieved += len(resources)
                logger.debug("Retrieved %d of %d", retrieved, expected)
                results.extend(filter_resources(resources, query.author))

            if retrieved > expected:
                raise CatalogProtocolError(
                    f"received more publications than expected; "
                    f"expected {expected} currently have {retrieved}"
                )

        return results

    def _count(self, query: CatalogQuery, filters: list[FacetFilter]) -> int:
        response = self._transport.post(
            query.catalog_url, COUNT_ENDPOINT, filters, query.author, CountResponse
        )
        if not response.success:
            raise CatalogProtocolError(
                "failed to retrieve total number of matches on author, media and year"
            )
        logger.debug("Expected number of matches: %d", response.total_hits)
        return response.total_hits

    def _page(
        self, query: CatalogQuery, filters: list[FacetFilter]
    ) -> list[Any]:
        response = self._transport.post(
            query.catalog_url, SEARCH_ENDPOINT, filters, query.author, SearchResponse
        )
        resources = response.resources or []
        logger.debug("Number of resources found: %d", len(resources))
        return resources

    def close(self) -> None:
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> CatalogSearch:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _validate(query: CatalogQuery) -> None:
    missing = [
        name
        for name, value in (
            ("catalog_url", query.catalog_url),
            ("author", query.author),
            ("media", query.media),
        )
        if not value
    ]
    if missing:
        raise QueryValidationError(
            f"query fields must be non-empty: {', '.join(missing)}"
        )


def _str_field(resource: dict[str, Any], key: str) -> str | None:
    value = resource.get(key)
    return value if isinstance(value, str) else None


def normalize_resource(resource: Any, author: str) -> PublicationInfo | None:
    """Return the resource's (media, title) if it belongs to ``author``.

    Resources without an author are dropped; some catalog entries, such as
    cookbooks, have none and still match a name search.  The remote search
    matches on substrings, so the author must match exactly.
    """
    if not isinstance(resource, dict):
        return None
    resource_author = _str_field(resource, "shortAuthor")
    if resource_author is None or resource_author != author:
        return None
    media = _str_field(resource, "format")
    title = _str_field(resource, "shortTitle")
    return PublicationInfo(
        media=UNKNOWN if media is None else media,
        title=UNKNOWN if title is None else title,
    )


def filter_resources(
    resources: list[Any], author: str
) -> list[PublicationInfo]:
    kept: list[PublicationInfo] = []
    for resource in resources:
        info = normalize_resource(resource, author)
        if info is not None:
            logger.debug("media: %s, title: %s", info.media, info.title)
            kept.append(info)
    return kept
