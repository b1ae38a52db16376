"""UI components for the CLI (Rich).

Why separate components:
- Keeps command handling apart from visual details.
- The same tables/panels are reused by the shell, `exec` and `doctor`.
"""

from __future__ import annotations

from datetime import datetime

from rich import box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.commands.general_commands import ExitCommand, HelpCommand, SwitchCommand
from core.commands.meeting_commands import (
    AddMeetingCommand,
    CopyMeetingCommand,
    EditMeetingCommand,
    FindMeetingCommand,
)
from core.commands.person_commands import (
    AddPersonCommand,
    CopyPersonCommand,
    EditPersonCommand,
    FindPersonCommand,
)
from core.domain.models import Meeting, Person
from core.domain.prefs import DisplaySettings
from core.domain.tab import Tab

_DISPLAY_TIME_FORMAT = "%a %d %b %Y, %H:%M"


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Kept out of the shell loop so `exec` (pipelines, scripts) can skip it.
    """

    title = Text("meetbook", style="bold cyan")
    subtitle = Text("Contacts • Meetings • Links", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _tags_text(tags: frozenset[str]) -> Text:
    text = Text()
    for i, tag in enumerate(sorted(tags)):
        if i:
            text.append(" ")
        text.append(f" {tag} ", style="black on bright_blue")
    return text


def format_time_range(start: datetime, end: datetime) -> str:
    if start.date() == end.date():
        return f"{start.strftime(_DISPLAY_TIME_FORMAT)} - {end.strftime('%H:%M')}"
    return f"{start.strftime(_DISPLAY_TIME_FORMAT)} - {end.strftime(_DISPLAY_TIME_FORMAT)}"


def build_persons_table(persons: list[Person], display: DisplaySettings | None = None) -> Table:
    display = display or DisplaySettings()
    table = Table(title="Persons", box=box.ROUNDED, show_lines=display.show_lines)
    table.add_column("#", style="dim", justify="right", no_wrap=True)
    table.add_column("Name", style="bold white")
    table.add_column("Phone", style="green", no_wrap=True)
    table.add_column("Email", style="cyan")
    table.add_column("Address", style="white")
    if display.show_tags:
        table.add_column("Tags")

    for position, person in enumerate(persons, start=1):
        row: list[str | Text] = [
            str(position),
            person.name,
            person.phone,
            Text(person.email),
            Text(person.address),
        ]
        if display.show_tags:
            row.append(_tags_text(person.tags))
        table.add_row(*row)

    if not persons:
        table.caption = "No persons to show"
    return table


def build_meetings_table(meetings: list[Meeting], display: DisplaySettings | None = None) -> Table:
    display = display or DisplaySettings()
    table = Table(title="Meetings", box=box.ROUNDED, show_lines=display.show_lines)
    table.add_column("#", style="dim", justify="right", no_wrap=True)
    table.add_column("Title", style="bold white")
    table.add_column("When", style="yellow")
    table.add_column("Duration", style="green", justify="right", no_wrap=True)
    table.add_column("Link", style="magenta")
    if display.show_tags:
        table.add_column("Tags")

    for position, meeting in enumerate(meetings, start=1):
        row: list[str | Text] = [
            str(position),
            meeting.title,
            format_time_range(meeting.start_time, meeting.end_time),
            f"{meeting.duration} min",
            Text(meeting.link),
        ]
        if display.show_tags:
            row.append(_tags_text(meeting.tags))
        table.add_row(*row)

    if not meetings:
        table.caption = "No meetings to show"
    return table


def build_result_panel(message: str, *, error: bool = False) -> Panel:
    """Command feedback box; red when the command was rejected."""

    style = "red" if error else "green"
    return Panel(Text(message), title="Result", title_align="left", border_style=style)


def build_help_panel() -> Panel:
    """Usage of every command, grouped by tab."""

    table = Table(box=box.SIMPLE, show_header=True, expand=True)
    table.add_column("Tab", style="cyan", no_wrap=True)
    table.add_column("Usage", style="white")

    for command in (HelpCommand, SwitchCommand, ExitCommand):
        table.add_row("any", Text(command.MESSAGE_USAGE))
    for command in (AddPersonCommand, EditPersonCommand, FindPersonCommand, CopyPersonCommand):
        table.add_row(Tab.PERSONS.value, Text(command.MESSAGE_USAGE))
    for command in (AddMeetingCommand, EditMeetingCommand, FindMeetingCommand, CopyMeetingCommand):
        table.add_row(Tab.MEETINGS.value, Text(command.MESSAGE_USAGE))
    table.add_row("both", "list, clear, delete INDEX work on the active tab.")

    return Panel(table, title="Help", subtitle="Prefixes: n/ p/ e/ a/ t/ l/ s/ d/", border_style="yellow")


def build_active_table(
    tab: Tab,
    persons: list[Person],
    meetings: list[Meeting],
    display: DisplaySettings | None = None,
) -> Table:
    if tab is Tab.MEETINGS:
        return build_meetings_table(meetings, display)
    return build_persons_table(persons, display)
