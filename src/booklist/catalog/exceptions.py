"""Exceptions for catalog searches."""


class CatalogError(Exception):
    """Base exception for all catalog search errors."""


class QueryValidationError(CatalogError, ValueError):
    """Required query field is missing; raised before any request is sent."""


class CatalogTransportError(CatalogError):
    """Connection failure, timeout or non-200 HTTP status."""


class CatalogDecodeError(CatalogError):
    """Response body is not JSON of the expected shape."""


class CatalogProtocolError(CatalogError):
    """Catalog responses disagree with each other or report failure."""
