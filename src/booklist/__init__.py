"""booklist: list this year's publications by favourite authors from a library catalog."""

from __future__ import annotations

from booklist.catalog import CatalogError, CatalogSearch, CatalogTransport
from booklist.config import BooklistConfig, ConfigError, load_config
from booklist.models import CatalogQuery, PublicationInfo
from booklist.report import format_report


def search_publications(
    catalog_url: str,
    author: str,
    media: str,
    timeout_s: float | None = None,
) -> list[PublicationInfo]:
    """One-line convenience: search one author/media with a throwaway client.

    Args:
        catalog_url: Catalog website URL, with trailing slash.
        author: Author name as the catalog lists it, e.g. "Grafton, Sue".
        media: Catalog media type, e.g. "Book".
        timeout_s: Per-request timeout; defaults to the transport default.
    """
    query = CatalogQuery(catalog_url=catalog_url, author=author, media=media)
    kwargs = {} if timeout_s is None else {"timeout_s": timeout_s}
    with CatalogTransport(**kwargs) as transport:
        return CatalogSearch(transport).search(query)


__all__ = [
    "BooklistConfig",
    "CatalogError",
    "CatalogQuery",
    "CatalogSearch",
    "CatalogTransport",
    "ConfigError",
    "PublicationInfo",
    "format_report",
    "load_config",
    "search_publications",
]
