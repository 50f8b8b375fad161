"""Shared fixtures for crud unit tests"""

import pytest

from docstore.crud.memory_repo import MemoryRepo


@pytest.fixture(name="repo")
def repo_fixture():
    """A fresh, empty repository per test."""
    return MemoryRepo()


@pytest.fixture(name="replacing_repo")
def replacing_repo_fixture():
    """A repository that replaces documents sharing an id instead of appending."""
    return MemoryRepo(replace_on_save=True)
