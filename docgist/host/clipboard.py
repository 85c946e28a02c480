"""
System clipboard through the platform's command-line tools.

Supported tools (in order of preference):
- macOS: pbcopy
- Windows: clip.exe
- Linux/BSD: wl-copy (Wayland), xclip, xsel (X11)
"""

from __future__ import annotations

import os
import shutil
import subprocess
import sys


class NativeClipboard:
    """Clipboard that pipes text into the first available system tool."""

    def __init__(self, timeout: float = 5.0) -> None:
        self.timeout = timeout
        self.last_error: str | None = None
        self._tool = self._detect_tool()

    @property
    def name(self) -> str:
        return f'native ({self._tool[0] if self._tool else "unavailable"})'

    @property
    def available(self) -> bool:
        return self._tool is not None

    @staticmethod
    def _detect_tool() -> tuple[str, list[str]] | None:
        if sys.platform == 'darwin':
            return ('pbcopy', ['pbcopy']) if shutil.which('pbcopy') else None
        if sys.platform == 'win32':
            return ('clip', ['clip']) if shutil.which('clip') else None

        candidates = [
            ('wl-copy', ['wl-copy']),
            ('xclip', ['xclip', '-selection', 'clipboard']),
            ('xsel', ['xsel', '--clipboard', '--input']),
        ]
        # Under X11 the X tools win even if wl-copy happens to be installed
        if os.environ.get('XDG_SESSION_TYPE', '').lower() != 'wayland' and os.environ.get('DISPLAY'):
            candidates = candidates[1:] + candidates[:1]
        for tool_name, command in candidates:
            if shutil.which(tool_name):
                return (tool_name, command)
        return None

    def copy(self, text: str) -> bool:
        """
        Copy text to the clipboard.

        Returns:
            True if the tool accepted the text, False otherwise (see last_error)
        """
        if not text or not self._tool:
            self.last_error = None if text else 'nothing to copy'
            return False

        try:
            proc = subprocess.run(
                self._tool[1],
                input=text.encode('utf-8'),
                capture_output=True,
                timeout=self.timeout,
            )
        except (subprocess.TimeoutExpired, OSError) as e:
            self.last_error = str(e)
            return False

        if proc.returncode != 0:
            self.last_error = proc.stderr.decode('utf-8', errors='replace').strip() or f'exit code {proc.returncode}'
            return False
        self.last_error = None
        return True
