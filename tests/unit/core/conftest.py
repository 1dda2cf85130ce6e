"""Shared fixtures for search predicate tests"""

from datetime import datetime, timezone

import pytest

from docstore.crud.models import Author, Document


@pytest.fixture(name="t1")
def t1_fixture():
    return datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(name="t2")
def t2_fixture():
    return datetime(2024, 2, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(name="doc")
def doc_fixture(t1):
    """A fully populated document."""
    return Document(
        id="doc-0", title="Foobar", content="the quick brown fox",
        author=Author(id="a1", name="Ada"), created=t1,
    )


@pytest.fixture(name="empty_doc")
def empty_doc_fixture():
    """A document whose filterable fields are all None."""
    return Document(id="doc-1")
