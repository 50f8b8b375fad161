"""Read documents from a YAML or JSON file"""

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from docstore.core.models import Document
from docstore.crud.repo import DocumentRepo


def read_documents(path: Path) -> list[Document]:
    """Parse a file holding a list of document mappings.

    .json files are read with json; anything else with YAML. Raises ValueError
    when the file is unreadable, malformed, or not a list of documents.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Cannot read {path}: {e}") from e

    try:
        data = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid documents file {path}: {e}") from e

    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Invalid documents file {path}: expected a list, got {type(data).__name__}")

    try:
        return [Document.model_validate(item) for item in data]
    except ValidationError as e:
        raise ValueError(f"Invalid document in {path}: {e}") from e


def load_documents(repo: DocumentRepo, path: Path) -> list[Document]:
    """Save every document in path into repo, in file order. Returns the saved docs."""
    return [repo.save(doc) for doc in read_documents(path)]
