"""Concrete host adapters: clipboard, desktop notifications and the file workspace."""

from docgist.host.clipboard import NativeClipboard
from docgist.host.notifications import DesktopNotifications
from docgist.host.workspace import FileWorkspace, WorkspaceDocument, WorkspaceTab

__all__ = ['DesktopNotifications', 'FileWorkspace', 'NativeClipboard', 'WorkspaceDocument', 'WorkspaceTab']
