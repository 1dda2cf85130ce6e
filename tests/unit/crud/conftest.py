"""Shared fixtures for crud and search unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.crud.memory_repo import MemoryRepo
from docstore.crud.models import Author, Document


T1 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
T2 = datetime(2024, 2, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(name="repo")
def repo_fixture():
    """Empty repo with the default id prefix."""
    return MemoryRepo()


@pytest.fixture(name="doc_a")
def doc_a_fixture(repo):
    """'Hello World' by a1, created at T1, saved to repo."""
    return repo.save(Document(
        title="Hello World", content="greetings to everyone",
        author=Author(id="a1", name="Ada"), created=T1,
    ))


@pytest.fixture(name="doc_b")
def doc_b_fixture(repo):
    """'Help' by a2, created at T2, saved to repo."""
    return repo.save(Document(
        title="Help", content="a manual page",
        author=Author(id="a2", name="Bo"), created=T2,
    ))


@pytest.fixture(name="bare")
def bare_fixture(repo):
    """A document with only an id; every filterable field is None."""
    return repo.save(Document(id="bare"))
