"""Search filter pipeline: one predicate per criterion, combined with AND"""

from typing import Callable

from docstore.core.models import Document, SearchRequest


Predicate = Callable[[Document, SearchRequest], bool]


def by_title_prefixes(doc: Document, request: SearchRequest) -> bool:
    """Title starts with any of the requested prefixes."""
    if request.title_prefixes is None:
        return True
    return doc.title is not None and any(doc.title.startswith(p) for p in request.title_prefixes)


def by_contents(doc: Document, request: SearchRequest) -> bool:
    """Content equals any of the requested strings exactly (not a substring match)."""
    if request.contains_contents is None:
        return True
    return doc.content is not None and any(doc.content == c for c in request.contains_contents)


def by_author_ids(doc: Document, request: SearchRequest) -> bool:
    """Author id equals any of the requested ids."""
    if request.author_ids is None:
        return True
    return doc.author is not None and any(doc.author.id == a for a in request.author_ids)


def by_created_from(doc: Document, request: SearchRequest) -> bool:
    if request.created_from is None:
        return True
    return doc.created is not None and doc.created > request.created_from


def by_created_to(doc: Document, request: SearchRequest) -> bool:
    if request.created_to is None:
        return True
    return doc.created is not None and doc.created < request.created_to


# Applied in order; append here to add a criterion.
FILTERS: tuple[Predicate, ...] = (
    by_title_prefixes,
    by_contents,
    by_author_ids,
    by_created_from,
    by_created_to,
)


def matches(doc: Document, request: SearchRequest) -> bool:
    """True when doc satisfies every criterion set on request."""
    return all(f(doc, request) for f in FILTERS)
