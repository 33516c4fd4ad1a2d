"""Console formatting for search results."""

from __future__ import annotations

from booklist.models import CatalogQuery, PublicationInfo


def format_heading(query: CatalogQuery) -> str:
    return f"{query.author} -- {query.media}s:"


def format_results(results: list[PublicationInfo]) -> str:
    """One line per publication, media column padded to the widest entry.

    Media types can be supersets of each other (a 'Book' search also finds
    'Large Print'), so each title is shown with its actual media type.
    """
    if not results:
        return ""
    width = max(len(info.media) for info in results)
    return "\n".join(f"  [{info.media:<{width}}]  {info.title}" for info in results)


def format_report(query: CatalogQuery, results: list[PublicationInfo]) -> str:
    body = format_results(results)
    heading = format_heading(query)
    return f"{heading}\n{body}" if body else heading
