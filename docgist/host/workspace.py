"""
File workspace - an EditorHost made of files named on the command line.

A workspace has a single tab. Every path is a visible document, the paths
marked with --focus are its active documents, and the current document is the
first active document (or the first visible one when none is marked). The
path '-' stands for standard input, which behaves like an untitled buffer.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

import attrs

STDIN_PATH = '-'


@attrs.define
class WorkspaceDocument:
    """A file (or stdin) opened in the workspace. Text is read on first access."""

    path: Path | None
    stream: TextIO | None = None
    _text: str | None = attrs.field(default=None, init=False)

    @classmethod
    def open(cls, raw_path: str, stdin: TextIO | None = None) -> WorkspaceDocument:
        if raw_path == STDIN_PATH:
            return cls(path=None, stream=stdin or sys.stdin)
        return cls(path=Path(raw_path))

    @property
    def text(self) -> str | None:
        if self._text is None:
            if self.path is None:
                self._text = self.stream.read() if self.stream is not None else ''
            else:
                self._text = self.path.read_text(encoding='utf-8')
        return self._text

    def filename(self) -> str | None:
        return self.path.name if self.path is not None else None

    def is_untitled(self) -> bool:
        return self.path is None


@attrs.define
class WorkspaceTab:
    documents: list[WorkspaceDocument]
    active: list[WorkspaceDocument]

    def visible_documents(self) -> Sequence[WorkspaceDocument]:
        return self.documents

    def active_documents(self) -> Sequence[WorkspaceDocument]:
        return self.active


@attrs.define
class FileWorkspace:
    """EditorHost over a list of files."""

    tab: WorkspaceTab | None

    @classmethod
    def from_paths(
        cls,
        paths: Sequence[str],
        focus: Sequence[str] = (),
        stdin: TextIO | None = None,
    ) -> FileWorkspace:
        """
        Open a workspace.

        Focused paths that were not listed are opened as well, so
        `--focus a.py` alone is enough to publish a.py.

        Raises:
            FileNotFoundError: If a path does not exist or is not a file
        """
        ordered = list(dict.fromkeys([*paths, *focus]))
        if not ordered:
            return cls(tab=None)

        by_path: dict[str, WorkspaceDocument] = {}
        for raw_path in ordered:
            if raw_path != STDIN_PATH and not Path(raw_path).is_file():
                raise FileNotFoundError(f'No such file: {raw_path}')
            by_path[raw_path] = WorkspaceDocument.open(raw_path, stdin=stdin)

        documents = [by_path[raw_path] for raw_path in ordered]
        active = [by_path[raw_path] for raw_path in dict.fromkeys(focus)]
        return cls(tab=WorkspaceTab(documents=documents, active=active))

    def current_document(self) -> WorkspaceDocument | None:
        if self.tab is None:
            return None
        if self.tab.active:
            return self.tab.active[0]
        return self.tab.documents[0] if self.tab.documents else None

    def current_tab(self) -> WorkspaceTab | None:
        return self.tab
