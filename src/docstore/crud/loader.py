"""Read documents from a YAML or JSON file and save them into a repo"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from docstore.crud.models import Document
from docstore.crud.repo import DocumentRepo


logger = logging.getLogger(__name__)

SUFFIXES = {".yaml", ".yml", ".json"}


def _parse(path: Path) -> Any:
    """Parse file text as JSON or YAML according to its suffix."""
    text = path.read_text()
    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e


def read_documents(path: str | Path) -> list[Document]:
    """Return the documents listed in path.

    The file holds either a list of documents or a mapping with a 'documents'
    list. Raises ValueError for missing or unsupported files, bad syntax,
    and entries that fail validation.
    """
    path = Path(path)
    if not path.is_file():
        raise ValueError(f"No such file: {path}")
    if path.suffix.lower() not in SUFFIXES:
        raise ValueError(f"Unsupported file type '{path.suffix}': expected one of {sorted(SUFFIXES)}")

    data = _parse(path)
    if data is None:
        return []
    if isinstance(data, dict):
        if "documents" not in data:
            raise ValueError(f"Invalid {path.name}: expected a list of documents")
        data = data["documents"] or []
    if not isinstance(data, list):
        raise ValueError(f"Invalid {path.name}: expected a list of documents")

    docs = []
    for i, entry in enumerate(data):
        try:
            docs.append(Document.model_validate(entry))
        except ValidationError as e:
            raise ValueError(f"Invalid document #{i} in {path.name}: {e}") from e
    return docs


def load_into(repo: DocumentRepo, path: str | Path) -> list[Document]:
    """Save every document in path into repo; return the saved values in file order."""
    saved = [repo.save(doc) for doc in read_documents(path)]
    logger.info("Loaded %d document(s) from %s", len(saved), path)
    return saved
