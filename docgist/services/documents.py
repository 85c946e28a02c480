"""
Document source service - turns editor state into DocumentRefs.

Resolution is synchronous and never fails: no document (or no tab) simply
yields nothing, which the publisher treats as "nothing to publish".
"""

from __future__ import annotations

from collections.abc import Iterable

from docgist.models import UNTITLED, DocumentRef, DocumentScope
from docgist.protocols import Document, EditorHost


def document_name(document: Document) -> str:
    """Filename of a document, 'untitled' for scratch buffers."""
    if document.is_untitled():
        return UNTITLED
    return document.filename() or UNTITLED


def to_ref(document: Document) -> DocumentRef:
    return DocumentRef(name=document_name(document), content=document.text or '')


class DocumentSource:
    """Resolves current, selected or active documents from an EditorHost."""

    def __init__(self, host: EditorHost) -> None:
        self.host = host

    def current_document(self) -> DocumentRef | None:
        document = self.host.current_document()
        if document is None:
            return None
        return to_ref(document)

    def selected_documents(self) -> list[DocumentRef]:
        """Every document visible in the current tab."""
        tab = self.host.current_tab()
        if tab is None:
            return []
        return self._refs(tab.visible_documents())

    def active_documents(self) -> list[DocumentRef]:
        """The documents the user marked active in the current tab."""
        tab = self.host.current_tab()
        if tab is None:
            return []
        return self._refs(tab.active_documents())

    def resolve(self, scope: DocumentScope) -> list[DocumentRef]:
        if scope == 'current':
            current = self.current_document()
            return [current] if current is not None else []
        if scope == 'selected':
            return self.selected_documents()
        if scope == 'active':
            return self.active_documents()
        raise ValueError(f'Unknown document scope: {scope!r}')

    @staticmethod
    def _refs(documents: Iterable[Document] | None) -> list[DocumentRef]:
        return [to_ref(document) for document in documents or ()]
