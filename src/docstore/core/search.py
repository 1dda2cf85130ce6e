"""Search predicates: one per SearchRequest clause, AND-composed by matches()

Each predicate returns True when its clause is inactive (None). An active
clause never passes a document whose field is None.
"""

from __future__ import annotations

from typing import Iterable

from docstore.crud.models import Document, SearchRequest


def title_matches(doc: Document, prefixes: frozenset[str] | None) -> bool:
    """Title starts with at least one prefix."""
    if prefixes is None:
        return True
    return doc.title is not None and any(doc.title.startswith(p) for p in prefixes)


def content_matches(doc: Document, needles: frozenset[str] | None) -> bool:
    """Content contains at least one needle as a substring."""
    if needles is None:
        return True
    return doc.content is not None and any(n in doc.content for n in needles)


def author_matches(doc: Document, author_ids: frozenset[str] | None) -> bool:
    if author_ids is None:
        return True
    return doc.author is not None and doc.author.id in author_ids


def created_in_range(doc: Document, created_from=None, created_to=None) -> bool:
    """created lies within [created_from, created_to]; either bound may be None."""
    if created_from is None and created_to is None:
        return True
    if doc.created is None:
        return False
    if created_from is not None and doc.created < created_from:
        return False
    if created_to is not None and doc.created > created_to:
        return False
    return True


def matches(doc: Document, request: SearchRequest) -> bool:
    """True when doc satisfies every active clause of request."""
    return (
        title_matches(doc, request.title_prefixes)
        and content_matches(doc, request.contains_contents)
        and author_matches(doc, request.author_ids)
        and created_in_range(doc, request.created_from, request.created_to)
    )


def filter_documents(docs: Iterable[Document], request: SearchRequest) -> list[Document]:
    return [doc for doc in docs if matches(doc, request)]
