"""Tests for the demo command."""

# pylint: disable=redefined-outer-name

import json

import pytest
from typer.testing import CliRunner

from taskkeeper.main import app
from taskkeeper.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from taskkeeper.utils.ui.console import get_console

runner = CliRunner()


def _ids(result) -> list[int]:
    assert result.exit_code == 0, result.output
    return [item["id"] for item in json.loads(result.output)]


def test_demo_seeds_example_tasks():
    result = runner.invoke(app, ["demo", "-o", "json"])

    data = json.loads(result.output)
    assert [item["title"] for item in data] == ["Buy groceries", "Complete project", "Go to gym"]
    assert [item["kind"] for item in data] == ["generic", "work", "personal"]


def test_demo_pretty_output_by_default():
    result = runner.invoke(app, ["demo"])

    assert result.exit_code == 0
    assert "Complete project" in result.output
    assert "Project: Flutter App" in result.output
    assert "Location: Fitness Center" in result.output


@pytest.mark.parametrize(
    "view,expected",
    [
        ("all", [1, 2, 3]),
        ("work", [2]),
        ("personal", [3]),
        ("incomplete", [1, 2, 3]),
        ("completed", []),
        ("overdue", []),
    ],
)
def test_demo_views(view, expected):
    assert _ids(runner.invoke(app, ["demo", "--view", view, "-o", "json"])) == expected


def test_demo_toggle_moves_task_to_completed():
    result = runner.invoke(app, ["demo", "--toggle", "1", "--view", "completed", "-o", "json"])
    assert _ids(result) == [1]


def test_demo_toggle_twice_restores():
    result = runner.invoke(
        app, ["demo", "-t", "1", "-t", "1", "--view", "completed", "-o", "json"]
    )
    assert _ids(result) == []


def test_demo_delete():
    assert _ids(runner.invoke(app, ["demo", "--delete", "2", "-o", "json"])) == [1, 3]


def test_demo_by_priority():
    assert _ids(runner.invoke(app, ["demo", "--by-priority", "-o", "json"])) == [2, 1, 3]


def test_demo_without_seed():
    assert _ids(runner.invoke(app, ["demo", "--no-seed", "-o", "json"])) == []


def test_demo_delete_unknown_id_exits_not_found(isolated_dirs):
    result = runner.invoke(app, ["demo", "--delete", "9"])

    assert result.exit_code == ERROR_NOT_FOUND
    assert "Task #9 not found" in result.output
    log = (isolated_dirs / "logs" / "taskkeeper.log").read_text(encoding="utf-8")
    assert "command failed: demo" in log


def test_demo_toggle_unknown_id_exits_not_found():
    result = runner.invoke(app, ["demo", "--no-seed", "--toggle", "1"])
    assert result.exit_code == ERROR_NOT_FOUND


def test_demo_rejects_unknown_output_format():
    result = runner.invoke(app, ["demo", "-o", "xml"])

    assert result.exit_code == ERROR_INVALID_ARGS
    assert "Unknown output format 'xml'" in result.output


def test_demo_follows_config(tmp_config):
    tmp_config.set_value("output.format", "json")
    tmp_config.set_value("demo.seed_examples", "false")

    assert _ids(runner.invoke(app, ["demo"])) == []


# ---------------------------------------------------------------------------
# Adding tasks from the command line
# ---------------------------------------------------------------------------


def _tasks(result) -> list[dict]:
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


def test_demo_add_generic_task():
    data = _tasks(runner.invoke(app, ["demo", "--add", "Water plants", "--priority", "2", "-o", "json"]))

    added = data[-1]
    assert (added["id"], added["kind"], added["title"], added["priority"]) == (
        4,
        "generic",
        "Water plants",
        2,
    )


def test_demo_add_work_task():
    data = _tasks(
        runner.invoke(
            app,
            [
                "demo", "--no-seed", "--add", "Ship release", "--kind", "work",
                "--project", "Core", "--deadline", "2020-01-31", "-o", "json",
            ],
        )
    )

    assert len(data) == 1
    assert data[0]["project"] == "Core"
    assert data[0]["deadline"].startswith("2020-01-31")
    assert data[0]["is_overdue"] is True


def test_demo_add_personal_task_uses_defaults_for_empty_fields():
    data = _tasks(
        runner.invoke(
            app,
            ["demo", "--no-seed", "--add", "Read", "--kind", "personal", "--category", "", "-o", "json"],
        )
    )

    assert data[0]["category"] == "General"
    assert data[0]["location"] is None


def test_demo_add_personal_task_with_location():
    data = _tasks(
        runner.invoke(
            app,
            [
                "demo", "--no-seed", "--add", "Run", "--kind", "personal",
                "--category", "Health", "--location", "Park", "-o", "json",
            ],
        )
    )

    assert (data[0]["category"], data[0]["location"]) == ("Health", "Park")


def test_demo_add_then_toggle_new_task():
    result = runner.invoke(
        app, ["demo", "--add", "New", "--toggle", "4", "--view", "completed", "-o", "json"]
    )
    assert _ids(result) == [4]


def test_demo_add_empty_title_is_ignored():
    result = runner.invoke(app, ["demo", "--add", "", "-o", "pretty"])

    assert result.exit_code == 0
    assert "Task not added: the title is empty" in result.output
    assert "3 active, 0 completed" in result.output


def test_demo_add_work_task_without_project_is_ignored():
    result = runner.invoke(app, ["demo", "--add", "Ship", "--kind", "work"])

    assert result.exit_code == 0
    assert "work tasks need a project" in result.output
    assert "3 active, 0 completed" in result.output


def test_demo_with_color_disabled(tmp_config):
    tmp_config.set_value("output.color", "false")
    before = get_console().no_color

    result = runner.invoke(app, ["demo"])

    assert result.exit_code == 0
    assert "\x1b[" not in result.output
    assert get_console().no_color is before
