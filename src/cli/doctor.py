"""Doctor command for environment diagnostics."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.clipboard import clipboard_available
from adapters.json_storage import JsonAddressBookStorage, JsonUserPrefsStorage
from core.config import AppSettings, get_user_config_dir, get_user_env_file, write_user_env_vars
from core.domain.prefs import UserPrefs
from core.errors import DataConversionError
from core.services.bootstrap import resolve_data_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_prefs(path: Path) -> tuple[str, str, UserPrefs]:
    try:
        prefs = JsonUserPrefsStorage(path).read()
    except DataConversionError as exc:
        return "FAIL", str(exc), UserPrefs()
    if prefs is None:
        return "MISSING", "Defaults will be used", UserPrefs()
    return "OK", f"last tab: {prefs.last_tab.value}", prefs


def _check_data_file(path: Path) -> tuple[str, str]:
    try:
        book = JsonAddressBookStorage(path).read()
    except DataConversionError as exc:
        return "FAIL", f"{exc} -> app starts with an empty address book"
    if book is None:
        return "MISSING", "Sample data will be loaded on first start"
    return "OK", f"{len(book.persons)} persons, {len(book.meetings)} meetings"


def _display_summary(prefs: UserPrefs) -> str:
    display = prefs.display
    return f"lines {'on' if display.show_lines else 'off'}, tags {'on' if display.show_tags else 'off'}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="meetbook Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Config dir", "OK", escape(str(get_user_config_dir())))
    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", escape(str(env_file)))
    table.add_row("Log level", "OK", settings.log_level)

    # Files
    prefs_status, prefs_detail, prefs = _check_prefs(settings.prefs_file)
    table.add_row("Preferences", prefs_status, escape(f"{settings.prefs_file}: {prefs_detail}"))
    table.add_row("Display", "OK", _display_summary(prefs))

    data_file = resolve_data_file(settings, prefs)
    data_status, data_detail = _check_data_file(data_file)
    table.add_row("Data file", data_status, escape(f"{data_file}: {data_detail}"))

    # Clipboard
    ok_clip, detail_clip = clipboard_available()
    table.add_row("Clipboard", "OK" if ok_clip else "FAIL", escape(detail_clip))

    _console.print(table)

    if not ok_clip:
        _console.print(
            "\n[yellow]Note:[/yellow] `copy` needs a clipboard tool (xclip, xsel or wl-clipboard on Linux)."
        )


@app.command(name="set-data-file")
def set_data_file(
    path: Path = typer.Argument(..., help="JSON file to store persons and meetings in."),
) -> None:
    """Store the data file location in the user config .env."""

    if path.exists() and path.is_dir():
        raise typer.BadParameter("path points to a directory, expected a JSON file")

    env_path = write_user_env_vars({"MEETBOOK_DATA_FILE": str(path.expanduser().resolve())})
    _console.print(f"[green]Saved data file location to:[/green] {escape(str(env_path))}")


@app.command(name="set-display")
def set_display(
    lines: Optional[bool] = typer.Option(None, "--lines/--no-lines", help="Separator lines between table rows."),
    tags: Optional[bool] = typer.Option(None, "--tags/--no-tags", help="Show the Tags column."),
) -> None:
    """Change how person and meeting tables are drawn."""

    settings = AppSettings()
    storage = JsonUserPrefsStorage(settings.prefs_file)
    try:
        prefs = storage.read()
    except DataConversionError as exc:
        _console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc
    if prefs is None:
        prefs = UserPrefs()

    changes = {key: value for key, value in {"show_lines": lines, "show_tags": tags}.items() if value is not None}
    display = prefs.display.model_copy(update=changes)
    updated = prefs.model_copy(update={"display": display})
    storage.save(updated)
    _console.print(f"[green]Display:[/green] {_display_summary(updated)}")
