"""Shared fixtures for core unit tests"""

from datetime import datetime

import pytest

from docstore.core.models import Author, Document


NOW = datetime(2024, 5, 1, 12, 0, 0)


@pytest.fixture(name="now")
def now_fixture():
    return NOW


@pytest.fixture(name="full_doc")
def full_doc_fixture():
    """A document with every field populated."""
    return Document(
        id="doc-1",
        title="Quarterly report",
        content="Revenue went up",
        author=Author(id="42", name="Alex"),
        created=NOW,
    )


@pytest.fixture(name="empty_doc")
def empty_doc_fixture():
    """A document with no optional fields set."""
    return Document()
