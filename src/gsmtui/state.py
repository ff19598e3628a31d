"""State shared by the controller and the orchestrator."""

from __future__ import annotations

from dataclasses import dataclass, field

from gsmtui.cache import DataCache
from gsmtui.client import SecretClient
from gsmtui.editor import TextEditor
from gsmtui.models import StatusMessage
from gsmtui.views import ProjectSelector, SecretsList, View


@dataclass
class AppState:
    """Everything a render reads; mutated only by the controller and orchestrator."""

    project_id: str = ""
    current_view: View = field(default_factory=SecretsList)
    previous_view: View | None = None
    busy: bool = False
    status: StatusMessage | None = None
    show_help: bool = False
    cache: DataCache = field(default_factory=DataCache)
    editor: TextEditor = field(default_factory=TextEditor)
    # Created lazily for project_id, dropped when the project changes.
    client: SecretClient | None = None

    @classmethod
    def for_project(cls, project_id: str | None) -> AppState:
        """Start in the secrets list when a project is known, else in the selector."""
        if project_id:
            return cls(project_id=project_id, current_view=SecretsList())
        return cls(project_id="", current_view=ProjectSelector())

    @property
    def has_project(self) -> bool:
        return bool(self.project_id)

    def set_status(self, text: str, is_error: bool = False) -> None:
        self.status = StatusMessage(text=text, is_error=is_error)
