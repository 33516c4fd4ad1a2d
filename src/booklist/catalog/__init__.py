"""CARL.X catalog search: transport and search coordination."""

from booklist.catalog.exceptions import (
    CatalogDecodeError,
    CatalogError,
    CatalogProtocolError,
    CatalogTransportError,
    QueryValidationError,
)
from booklist.catalog.search import CatalogSearch
from booklist.catalog.tokens import CacheBuster
from booklist.catalog.transport import CatalogTransport

__all__ = [
    "CacheBuster",
    "CatalogDecodeError",
    "CatalogError",
    "CatalogProtocolError",
    "CatalogSearch",
    "CatalogTransport",
    "CatalogTransportError",
    "QueryValidationError",
]
