"""Core data models for the catalog search.

All Pydantic models are defined here as the single source of truth.
Every other module imports from this file.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Maximum number of publications the catalog returns per response.
MAX_HITS_PER_PAGE = 30

UNKNOWN = "Unknown"

# Computed once at import; used as the publication year facet.
CURRENT_YEAR = datetime.now(UTC).strftime("%Y")

# Year facet value for publications without a known release year.
UNKNOWN_YEAR = "unknown"


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

class CatalogQuery(BaseModel):
    """One author/media search against a catalog website."""

    model_config = ConfigDict(frozen=True)

    catalog_url: str
    author: str
    media: str


# ---------------------------------------------------------------------------
# Wire payloads
# ---------------------------------------------------------------------------

class FacetFilter(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="facetName")
    value: str = Field(alias="facetValue")
    display: str = Field(alias="facetDisplay")

    @classmethod
    def of(cls, name: str, value: str) -> FacetFilter:
        return cls(name=name, value=value, display=value)


class SearchRequestPayload(BaseModel):
    """JSON body POSTed to both the count and the search endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    add_to_history: bool = Field(default=True, alias="addToHistory")
    db_codes: list[str] = Field(default_factory=list, alias="dbCodes")
    hits_per_page: int = Field(default=MAX_HITS_PER_PAGE, alias="hitsPerPage")
    sort_criteria: str = Field(default="NewlyAdded", alias="sortCriteria")
    start_index: int = Field(default=0, alias="startIndex")
    target_audience: str = Field(default="", alias="targetAudience")
    facet_filters: list[FacetFilter] = Field(alias="facetFilters")
    search_term: str = Field(alias="searchTerm")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class CountResponse(BaseModel):
    success: bool = False
    total_hits: int = Field(default=0, alias="totalHits")


class SearchResponse(BaseModel):
    # Resource records have no fixed schema; entries are checked on access.
    resources: list[Any] | None = None


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class PublicationInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    media: str
    title: str
