"""CLI command implementations"""

from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.load import load_documents
from docstore.core.models import Document, SearchRequest
from docstore.crud.memory_repo import MemoryRepo
from docstore.logging_config import setup_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level)
    return settings


def _open_repo(path: Path, settings: Settings) -> MemoryRepo:
    """Build a fresh repo seeded from the documents file."""
    repo = MemoryRepo(replace_on_save=settings.replace_on_save)
    try:
        load_documents(repo, path)
    except ValueError as e:
        _fail("Could not load documents", e)
    return repo


def _dump(doc: Document, indent: int) -> str:
    return doc.model_dump_json(indent=indent or None, exclude_none=True)


def search_cmd(
    path: Annotated[Path, typer.Argument(help="YAML or JSON file with a list of documents")],
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Match titles starting with this (repeatable)")] = None,
    content: Annotated[Optional[list[str]], typer.Option("--content", help="Match content exactly (repeatable)")] = None,
    author_id: Annotated[Optional[list[str]], typer.Option("--author-id", help="Match author id (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--created-from", help="Created strictly after (read as UTC)")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--created-to", help="Created strictly before (read as UTC)")] = None,
    replace: Annotated[bool, typer.Option("--replace", help="Replace docs sharing an id on load instead of appending")] = False,
    indent: Annotated[Optional[int], typer.Option("--indent", help="JSON indent; 0 = one line per doc")] = None,
    ):
    """Print matching documents as JSON, in file order."""
    settings = _settings(overrides={"replace_on_save": replace or None, "output_indent": indent})
    repo = _open_repo(path, settings)

    request = SearchRequest(
        title_prefixes=title_prefix or None,
        contains_contents=content or None,
        author_ids=author_id or None,
        created_from=created_from,
        created_to=created_to,
    )
    for doc in repo.search(request):
        typer.echo(_dump(doc, settings.output_indent))


def get_cmd(
    path: Annotated[Path, typer.Argument(help="YAML or JSON file with a list of documents")],
    doc_id: Annotated[str, typer.Argument(help="Exact document id")],
    indent: Annotated[Optional[int], typer.Option("--indent", help="JSON indent; 0 = single line")] = None,
    ):
    """Print the first document with the given id."""
    settings = _settings(overrides={"output_indent": indent})
    repo = _open_repo(path, settings)
    doc = repo.find_by_id(doc_id)
    if doc is None:
        _fail(f"No document with id '{doc_id}'")
    typer.echo(_dump(doc, settings.output_indent))
