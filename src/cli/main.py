"""meetbook command line.

Entry points:
- `meetbook` / `meetbook shell`: interactive command box with live tables.
- `meetbook exec "find cs2103"`: run one command and print the outcome.
- `meetbook doctor ...`: environment diagnostics.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from adapters.clipboard import MemoryClipboard
from cli.doctor import app as doctor_app
from cli.ui_components import (
    build_active_table,
    build_help_panel,
    build_result_panel,
    print_banner,
)
from core.commands.base import CommandResult
from core.config import AppSettings
from core.domain.tab import Tab
from core.errors import MeetbookError
from core.logging_config import setup_logging
from core.services.bootstrap import start
from core.services.logic import LogicManager

app = typer.Typer(help="Manage contacts and meetings from the terminal.", add_completion=False)
app.add_typer(doctor_app, name="doctor")

_console = Console()


def _render(console: Console, logic: LogicManager, result: CommandResult | None = None) -> None:
    if result is not None and result.show_help:
        console.print(build_help_panel())
    console.print(
        build_active_table(
            logic.active_tab,
            logic.filtered_person_list,
            logic.sorted_and_filtered_meeting_list,
            logic.user_prefs.display,
        )
    )


def _settings() -> AppSettings:
    settings = AppSettings()
    setup_logging(settings.log_level, settings.log_file)
    return settings


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Without a subcommand, start the interactive shell."""

    if ctx.invoked_subcommand is None:
        shell(tab=None, banner=True)


@app.command()
def shell(
    tab: Optional[Tab] = typer.Option(None, "--tab", help="Tab to open (defaults to the last one used)."),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the welcome banner."),
) -> None:
    """Interactive command box. Type `help` for usage, `exit` to quit."""

    startup = start(_settings(), tab=tab)
    logic = startup.logic

    if banner:
        print_banner(_console)
    for warning in startup.warnings:
        _console.print(f"[yellow]Warning:[/yellow] {escape(warning)}")
    _console.print(f"[dim]Data file: {escape(str(logic.address_book_file_path))}[/dim]")
    _render(_console, logic)

    try:
        while True:
            try:
                command_text = _console.input(f"[bold cyan]{logic.active_tab.value}[/bold cyan] > ")
            except (EOFError, KeyboardInterrupt):
                _console.print()
                break

            if not command_text.strip():
                continue

            try:
                result = logic.execute(command_text)
            except MeetbookError as exc:
                _console.print(build_result_panel(str(exc), error=True))
                continue

            _console.print(build_result_panel(result.feedback_to_user))
            if result.exit:
                break
            _render(_console, logic, result)
    finally:
        logic.save_user_prefs()


@app.command(name="exec")
def exec_command(
    command: str = typer.Argument(..., help='Command text, e.g. "add n/Alex p/123 e/a@b.co a/Street".'),
    tab: Optional[Tab] = typer.Option(None, "--tab", help="Tab to run the command in."),
    clipboard: bool = typer.Option(True, "--clipboard/--no-clipboard", help="Use the system clipboard for `copy`."),
    show_table: bool = typer.Option(True, "--table/--no-table", help="Print the active list afterwards."),
) -> None:
    """Run a single command against the data file."""

    startup = start(_settings(), tab=tab, clipboard=None if clipboard else MemoryClipboard())
    logic = startup.logic
    for warning in startup.warnings:
        _console.print(f"[yellow]Warning:[/yellow] {escape(warning)}")

    try:
        result = logic.execute(command)
    except MeetbookError as exc:
        _console.print(build_result_panel(str(exc), error=True))
        raise typer.Exit(code=1) from exc

    _console.print(build_result_panel(result.feedback_to_user))
    if result.switch_to is not None:
        logic.save_user_prefs()
    if show_table and not result.exit:
        _render(_console, logic, result)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
