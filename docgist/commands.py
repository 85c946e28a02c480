"""
Gist commands - the six publish actions offered to the user.

Each command pairs a document scope with a visibility. The menu path and
shortcut are what an editor integration would register; the CLI exposes each
command as a subcommand of the same name.
"""

from __future__ import annotations

from docgist.base_model import StrictModel
from docgist.models import DocumentScope, Visibility

SCOPE_LABELS: dict[DocumentScope, str] = {
    'current': 'Current Document',
    'selected': 'Selected Documents',
    'active': 'Active Documents',
}

SHORTCUT_MODIFIERS: dict[DocumentScope, str] = {
    'current': 'control-shift',
    'selected': 'command-control-shift',
    'active': 'option-control-shift',
}

SHORTCUT_KEYS: dict[Visibility, str] = {
    'public': 'g',
    'private': 'p',
}


class GistCommand(StrictModel):
    """One user-triggerable publish action."""

    name: str
    menu_path: str
    shortcut: str
    scope: DocumentScope
    visibility: Visibility

    @property
    def title(self) -> str:
        return self.menu_path.rsplit('/', 1)[-1]


def make_command(scope: DocumentScope, visibility: Visibility) -> GistCommand:
    return GistCommand(
        name=f'{visibility}-{scope}',
        menu_path=f'Actions/Gist/{visibility.capitalize()} Gist {SCOPE_LABELS[scope]}',
        shortcut=f'{SHORTCUT_MODIFIERS[scope]}-{SHORTCUT_KEYS[visibility]}',
        scope=scope,
        visibility=visibility,
    )


GIST_COMMANDS: tuple[GistCommand, ...] = tuple(
    make_command(scope, visibility) for visibility in ('public', 'private') for scope in ('current', 'selected', 'active')
)


def find_command(name: str) -> GistCommand:
    """
    Raises:
        KeyError: If no command has that name
    """
    for command in GIST_COMMANDS:
        if command.name == name:
            return command
    raise KeyError(name)
