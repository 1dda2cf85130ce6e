"""CLI command implementations"""

import json
from typing import Annotated, List, Optional

import typer

from docstore.config import Settings, load_config
from docstore.crud.loader import load_into
from docstore.crud.memory_repo import MemoryRepo
from docstore.crud.models import Document, SearchRequest


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings() -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config()
    except ValueError as e:
        _fail(str(e))


def _load(path: str) -> tuple[MemoryRepo, list[Document]]:
    """Fresh repo populated from the given document file, plus the saved documents."""
    repo = MemoryRepo(id_prefix=_settings().id_prefix)
    try:
        saved = load_into(repo, path)
    except ValueError as e:
        _fail(str(e))
    return repo, saved


def _as_json(docs: list[Document]) -> str:
    return json.dumps([d.model_dump(mode="json") for d in docs], indent=2)


def search_cmd(
    path: Annotated[str, typer.Argument(help="YAML or JSON file of documents")],
    title_prefix: Annotated[Optional[List[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[List[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author: Annotated[Optional[List[str]], typer.Option("--author", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[str], typer.Option("--created-from", help="ISO 8601 lower bound, inclusive")] = None,
    created_to: Annotated[Optional[str], typer.Option("--created-to", help="ISO 8601 upper bound, inclusive")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print matches as a JSON array")] = False,
    ):
    """Load documents from a file and print those matching every given filter."""
    repo, _ = _load(path)
    try:
        request = SearchRequest(
            title_prefixes=title_prefix or None,
            contains_contents=contains or None,
            author_ids=author or None,
            created_from=created_from,
            created_to=created_to,
        )
    except ValueError as e:
        _fail("Invalid search filter", e)

    docs = repo.search(request)
    if as_json:
        typer.echo(_as_json(docs))
        return
    for doc in docs:
        typer.echo(f"{doc.id}\t{doc.title or ''}")


def show_cmd(
    path: Annotated[str, typer.Argument(help="YAML or JSON file of documents")],
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    ):
    """Print a single document as JSON."""
    repo, _ = _load(path)
    doc = repo.find_by_id(doc_id)
    if doc is None:
        _fail(f"No document with id '{doc_id}'")
    typer.echo(doc.model_dump_json(indent=2))


def ids_cmd(
    path: Annotated[str, typer.Argument(help="YAML or JSON file of documents")],
    ):
    """List document ids in file order, including generated ones."""
    _, saved = _load(path)
    for doc in saved:
        typer.echo(doc.id)
