"""User preferences persisted between sessions."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from core.domain.tab import Tab


class DisplaySettings(BaseModel):
    """How the terminal tables are drawn."""

    show_lines: bool = Field(
        default=False,
        description="Draw a separator line between table rows.",
    )
    show_tags: bool = Field(
        default=True,
        description="Include the Tags column in person/meeting tables.",
    )


class UserPrefs(BaseModel):
    address_book_file_path: Path | None = Field(
        default=None,
        description="Data file to open when no MEETBOOK_DATA_FILE is configured.",
    )
    last_tab: Tab = Field(
        default_factory=Tab.default,
        description="Tab shown when the shell starts.",
    )
    display: DisplaySettings = Field(default_factory=DisplaySettings)
