"""Last-loaded collections plus the focused secret and any revealed value."""

from __future__ import annotations

from gsmtui.models import ProjectInfo, SecretInfo, VersionInfo
from gsmtui.selection import SelectableList


class DataCache:
    """Everything fetched from the remote side that the views read from."""

    def __init__(self) -> None:
        self.secrets: SelectableList[SecretInfo] = SelectableList()
        self.versions: SelectableList[VersionInfo] = SelectableList(
            on_select=self.hide_value
        )
        self.projects: SelectableList[ProjectInfo] = SelectableList()
        self.current_secret: SecretInfo | None = None
        self.revealed_value: str | None = None

    @property
    def selected_secret(self) -> SecretInfo | None:
        return self.secrets.selected_item

    @property
    def selected_version(self) -> VersionInfo | None:
        return self.versions.selected_item

    def hide_value(self) -> None:
        self.revealed_value = None

    def focus_secret(self, secret: SecretInfo) -> None:
        """Make *secret* the detail target, dropping the previous one's versions."""
        self.current_secret = secret
        self.versions.clear()
        self.revealed_value = None

    def leave_detail(self) -> None:
        self.current_secret = None
        self.versions.clear()
        self.revealed_value = None

    def clear_project_data(self) -> None:
        """Forget everything scoped to the active project."""
        self.secrets.clear()
        self.leave_detail()
