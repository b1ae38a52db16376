import json

import pytest
from typer.testing import CliRunner

import cli.doctor as doctor
from cli.main import app
from core.config import get_user_env_file

runner = CliRunner()


@pytest.fixture
def data_file(tmp_path, monkeypatch):
    path = tmp_path / "data" / "book.json"
    monkeypatch.setenv("MEETBOOK_DATA_FILE", str(path))
    monkeypatch.setenv("MEETBOOK_PREFS_FILE", str(tmp_path / "prefs.json"))
    return path


def _saved(path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_exec_list_creates_data_file_from_sample(data_file):
    result = runner.invoke(app, ["exec", "list", "--no-clipboard"])
    assert result.exit_code == 0, result.output
    assert "Listed all persons" in result.output
    assert [p["name"] for p in _saved(data_file)["persons"]][0] == "Alex Yeoh"


def test_exec_add_person_persists(data_file):
    result = runner.invoke(
        app,
        ["exec", "add n/Amy Bee p/11111111 e/amy@example.com a/Block 312 t/friend", "--no-table"],
    )
    assert result.exit_code == 0, result.output
    assert "New person added" in result.output
    assert "Amy Bee" in [p["name"] for p in _saved(data_file)["persons"]]


def test_exec_meetings_tab(data_file):
    result = runner.invoke(app, ["exec", "find cs2101", "--tab", "meetings", "--no-clipboard"])
    assert result.exit_code == 0, result.output
    assert "1 meetings listed!" in result.output


def test_exec_error_exits_with_code_one(data_file):
    result = runner.invoke(app, ["exec", "delete 99", "--no-clipboard"])
    assert result.exit_code == 1
    assert "The person index provided is invalid" in result.output


def test_exec_unknown_command(data_file):
    result = runner.invoke(app, ["exec", "frobnicate"])
    assert result.exit_code == 1
    assert "Unknown command" in result.output


def test_exec_meeting_ending_past_the_calendar_is_rejected_and_not_saved(data_file):
    late = "add n/New Year l/https://example.org s/9999-12-31 2359 d/1"
    result = runner.invoke(app, ["exec", late, "--tab", "meetings", "--no-clipboard"])
    assert result.exit_code == 1
    assert "Meetings should end no later than" in result.output

    result = runner.invoke(app, ["exec", "list", "--tab", "meetings", "--no-clipboard"])
    assert result.exit_code == 0, result.output
    assert "New Year" not in [m["title"] for m in _saved(data_file)["meetings"]]


def test_exec_switch_is_remembered(data_file, tmp_path):
    result = runner.invoke(app, ["exec", "switch", "--no-table"])
    assert result.exit_code == 0, result.output
    assert _saved(tmp_path / "prefs.json")["last_tab"] == "meetings"


def test_shell_session(data_file, tmp_path):
    result = runner.invoke(app, ["shell", "--no-banner"], input="list\nswitch\nbogus\nexit\n")
    assert result.exit_code == 0, result.output
    assert "Listed all persons" in result.output
    assert "Switched to meetings" in result.output
    assert "Unknown command" in result.output
    assert "Exiting meetbook as requested" in result.output
    assert _saved(tmp_path / "prefs.json")["last_tab"] == "meetings"


def test_shell_stops_at_end_of_input(data_file):
    result = runner.invoke(app, ["shell", "--no-banner"], input="help\n")
    assert result.exit_code == 0, result.output
    assert "Opened help window." in result.output


def test_doctor_run(data_file, monkeypatch):
    monkeypatch.setattr(doctor, "clipboard_available", lambda: (False, "no clipboard mechanism"))
    result = runner.invoke(app, ["doctor", "run"])
    assert result.exit_code == 0, result.output
    assert "meetbook Doctor" in result.output
    assert "MISSING" in result.output
    assert "clipboard tool" in result.output


def test_doctor_set_data_file(tmp_path):
    target = tmp_path / "elsewhere.json"
    result = runner.invoke(app, ["doctor", "set-data-file", str(target)])
    assert result.exit_code == 0, result.output
    assert f"MEETBOOK_DATA_FILE={target.resolve()}" in get_user_env_file().read_text(encoding="utf-8")


def test_doctor_set_data_file_rejects_directory(tmp_path):
    result = runner.invoke(app, ["doctor", "set-data-file", str(tmp_path)])
    assert result.exit_code != 0
    assert not get_user_env_file().exists()


def test_doctor_set_display_updates_only_given_flags(data_file, tmp_path):
    result = runner.invoke(app, ["doctor", "set-display", "--lines"])
    assert result.exit_code == 0, result.output
    assert _saved(tmp_path / "prefs.json")["display"] == {"show_lines": True, "show_tags": True}

    result = runner.invoke(app, ["doctor", "set-display", "--no-tags"])
    assert result.exit_code == 0, result.output
    assert "lines on, tags off" in result.output
    assert _saved(tmp_path / "prefs.json")["display"] == {"show_lines": True, "show_tags": False}

    result = runner.invoke(app, ["exec", "list", "--no-clipboard"])
    assert result.exit_code == 0, result.output
    assert "Tags" not in result.output


def test_doctor_set_display_with_corrupt_prefs(data_file, tmp_path):
    (tmp_path / "prefs.json").write_text("{broken", encoding="utf-8")
    result = runner.invoke(app, ["doctor", "set-display", "--lines"])
    assert result.exit_code == 1
    assert (tmp_path / "prefs.json").read_text(encoding="utf-8") == "{broken"
