"""In-memory document repository backed by an ordered list"""

from dataclasses import dataclass, field
from typing import Callable

from docstore.core.errors import InvalidArgumentError
from docstore.core.filters import matches
from docstore.core.models import Document, SearchRequest
from docstore.core.utils.ids import is_blank, new_id
from docstore.crud.repo import DocumentRepo
from docstore.logging_config import get_logger


logger = get_logger(__name__)


@dataclass
class MemoryRepo(DocumentRepo):
    """Single-process, single-threaded store; one instance owns its documents.

    By default save() always appends, so saving the same id twice stores two
    entries. With replace_on_save=True the first entry sharing the id is
    replaced in place instead.
    """
    replace_on_save: bool = False
    id_factory: Callable[[], str] = new_id
    _docs: list[Document] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self._docs)

    def save(self, doc: Document) -> Document:
        if doc is None:
            raise InvalidArgumentError("Document cannot be None")

        if is_blank(doc.id):
            doc.id = self.id_factory()
            logger.debug("Assigned id %s", doc.id)
        elif self.replace_on_save:
            for i, existing in enumerate(self._docs):
                if existing.id == doc.id:
                    self._docs[i] = doc
                    logger.debug("Replaced document %s", doc.id)
                    return doc

        self._docs.append(doc)
        return doc

    def search(self, request: SearchRequest) -> list[Document]:
        if request is None:
            raise InvalidArgumentError("SearchRequest cannot be None")
        found = [d for d in self._docs if matches(d, request)]
        logger.debug("Search matched %d of %d document(s)", len(found), len(self._docs))
        return found

    def find_by_id(self, doc_id: str | None) -> Document | None:
        """Return the first document with this exact id, or None (also for a None id)."""
        if doc_id is None:
            return None
        return next((d for d in self._docs if d.id == doc_id), None)

    def all(self) -> list[Document]:
        """Return every stored document in insertion order."""
        return list(self._docs)
