import logging
from dataclasses import dataclass, field
from itertools import count
from threading import Lock

from docstore.core.search import filter_documents
from docstore.crud.models import Document, SearchRequest
from docstore.crud.repo import DocumentRepo


logger = logging.getLogger(__name__)


@dataclass
class MemoryRepo(DocumentRepo):
    """Dict-backed repo. Ids are generated as id_prefix + a per-instance counter."""
    id_prefix: str = "doc-"
    _docs: dict[str, Document] = field(default_factory=dict, repr=False)
    _counter: count = field(default_factory=count, repr=False)
    _lock: Lock = field(default_factory=Lock, repr=False)

    def save(self, doc: Document) -> Document:
        """Store a copy of doc with its id populated. doc itself is left untouched."""
        with self._lock:
            if doc.id is None:
                doc = doc.model_copy(update={"id": f"{self.id_prefix}{next(self._counter)}"})
                logger.debug("Assigned id %s", doc.id)
            elif doc.id in self._docs:
                logger.debug("Replacing document %s", doc.id)
            self._docs[doc.id] = doc
        return doc

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        with self._lock:
            snapshot = list(self._docs.values())
        return filter_documents(snapshot, request or SearchRequest())

    def find_by_id(self, doc_id: str) -> Document | None:
        with self._lock:
            return self._docs.get(doc_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        with self._lock:
            return doc_id in self._docs
