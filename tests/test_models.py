"""Tests for core data models."""

import pytest
from pydantic import ValidationError

from booklist.models import (
    CatalogQuery,
    CountResponse,
    FacetFilter,
    PublicationInfo,
    SearchRequestPayload,
    SearchResponse,
)


def test_facet_filter_wire_names():
    facet = FacetFilter.of("Year", "unknown")
    assert facet.model_dump(by_alias=True) == {
        "facetName": "Year",
        "facetValue": "unknown",
        "facetDisplay": "unknown",
    }


def test_payload_defaults():
    payload = SearchRequestPayload(facet_filters=[], search_term="Grafton, Sue")
    wire = payload.to_wire()
    assert wire["addToHistory"] is True
    assert wire["hitsPerPage"] == 30
    assert wire["sortCriteria"] == "NewlyAdded"
    assert wire["startIndex"] == 0
    assert wire["searchTerm"] == "Grafton, Sue"


def test_count_response_missing_fields():
    response = CountResponse.model_validate({})
    assert response.success is False
    assert response.total_hits == 0


def test_search_response_keeps_unknown_keys():
    response = SearchResponse.model_validate(
        {"totalHits": 1, "resources": [{"shortAuthor": "A", "extra": [1, 2]}]}
    )
    assert response.resources[0]["extra"] == [1, 2]


def test_publication_info_is_frozen():
    info = PublicationInfo(media="Book", title="X")
    with pytest.raises(ValidationError):
        info.title = "Y"


def test_query_is_frozen():
    query = CatalogQuery(catalog_url="https://x/", author="A", media="Book")
    with pytest.raises(ValidationError):
        query.author = "B"


def test_search_response_null_resources():
    assert SearchResponse.model_validate({"resources": None}).resources is None
    assert SearchResponse.model_validate({}).resources is None


def test_search_response_accepts_non_mapping_entries():
    response = SearchResponse.model_validate({"resources": [None, {"shortAuthor": "A"}]})
    assert response.resources == [None, {"shortAuthor": "A"}]
