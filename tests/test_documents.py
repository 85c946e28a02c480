"""Tests for document resolution and the file workspace host."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from docgist.host.workspace import FileWorkspace
from docgist.models import DocumentRef
from docgist.services.documents import DocumentSource, document_name

from conftest import FakeDocument, FakeHost, FakeTab


# ==============================================================================
# DocumentSource
# ==============================================================================


def test_untitled_documents_are_named_untitled() -> None:
    assert document_name(FakeDocument(None, 'x')) == 'untitled'
    assert document_name(FakeDocument('', 'x')) == 'untitled'
    assert document_name(FakeDocument('ignored.py', 'x', untitled=True)) == 'untitled'
    assert document_name(FakeDocument('notes.md', 'x')) == 'notes.md'


def test_current_document() -> None:
    source = DocumentSource(FakeHost(current=FakeDocument('notes.md', 'hi')))

    assert source.current_document() == DocumentRef(name='notes.md', content='hi')
    assert source.resolve('current') == [DocumentRef(name='notes.md', content='hi')]


def test_no_current_document() -> None:
    source = DocumentSource(FakeHost())

    assert source.current_document() is None
    assert source.resolve('current') == []


def test_missing_text_becomes_empty_content() -> None:
    source = DocumentSource(FakeHost(current=FakeDocument('a.py', None)))

    assert source.current_document() == DocumentRef(name='a.py', content='')


def test_selected_and_active_documents_come_from_current_tab() -> None:
    a, b, c = FakeDocument('a.py', 'a'), FakeDocument('b.py', 'b'), FakeDocument(None, 'scratch')
    source = DocumentSource(FakeHost(current=a, tab=FakeTab(visible=[a, b, c], active=[b])))

    assert [d.name for d in source.selected_documents()] == ['a.py', 'b.py', 'untitled']
    assert [d.name for d in source.active_documents()] == ['b.py']
    assert source.resolve('selected') == source.selected_documents()
    assert source.resolve('active') == source.active_documents()


def test_no_tab_means_no_documents() -> None:
    source = DocumentSource(FakeHost())

    assert source.selected_documents() == []
    assert source.active_documents() == []


def test_unknown_scope_raises() -> None:
    with pytest.raises(ValueError):
        DocumentSource(FakeHost()).resolve('everything')  # type: ignore[arg-type]


# ==============================================================================
# FileWorkspace
# ==============================================================================


@pytest.fixture
def files(tmp_path: Path) -> tuple[str, str, str]:
    (tmp_path / 'a.py').write_text('print("a")\n', encoding='utf-8')
    (tmp_path / 'b.md').write_text('# b\n', encoding='utf-8')
    (tmp_path / 'empty.txt').write_text('', encoding='utf-8')
    return str(tmp_path / 'a.py'), str(tmp_path / 'b.md'), str(tmp_path / 'empty.txt')


def test_workspace_without_paths_has_nothing() -> None:
    source = DocumentSource(FileWorkspace.from_paths([]))

    assert source.resolve('current') == []
    assert source.resolve('selected') == []
    assert source.resolve('active') == []


def test_workspace_current_is_first_path(files) -> None:
    a, b, _ = files
    source = DocumentSource(FileWorkspace.from_paths([a, b]))

    assert source.current_document() == DocumentRef(name='a.py', content='print("a")\n')
    assert [d.name for d in source.selected_documents()] == ['a.py', 'b.md']
    assert source.active_documents() == []


def test_workspace_focus_marks_active_and_current(files) -> None:
    a, b, empty = files
    source = DocumentSource(FileWorkspace.from_paths([a, b, empty], focus=[b]))

    assert source.current_document().name == 'b.md'
    assert [d.name for d in source.active_documents()] == ['b.md']
    assert [d.name for d in source.selected_documents()] == ['a.py', 'b.md', 'empty.txt']


def test_workspace_focus_alone_opens_the_file(files) -> None:
    a, _, _ = files
    source = DocumentSource(FileWorkspace.from_paths([], focus=[a]))

    assert [d.name for d in source.selected_documents()] == ['a.py']
    assert [d.name for d in source.active_documents()] == ['a.py']


def test_workspace_stdin_is_untitled() -> None:
    source = DocumentSource(FileWorkspace.from_paths(['-'], stdin=io.StringIO('piped text')))

    assert source.current_document() == DocumentRef(name='untitled', content='piped text')


def test_workspace_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        FileWorkspace.from_paths([str(tmp_path / 'nope.py')])


def test_workspace_reads_text_once(files) -> None:
    a, _, _ = files
    workspace = FileWorkspace.from_paths([a])
    document = workspace.current_document()

    assert document.text == 'print("a")\n'
    Path(a).write_text('changed', encoding='utf-8')
    assert document.text == 'print("a")\n'
