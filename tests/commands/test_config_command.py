"""Tests for the config commands."""

import json

from typer.testing import CliRunner

from taskkeeper.main import app
from taskkeeper.services.config_service import get_config_service
from taskkeeper.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND

runner = CliRunner()


def test_show_config():
    result = runner.invoke(app, ["config", "show"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["output"]["format"] == "pretty"


def test_get_config_value():
    result = runner.invoke(app, ["config", "get", "output.format"])

    assert result.exit_code == 0
    assert "pretty" in result.output


def test_get_unknown_key():
    result = runner.invoke(app, ["config", "get", "output.nope"])

    assert result.exit_code == ERROR_NOT_FOUND
    assert "not found" in result.output


def test_set_config_value():
    result = runner.invoke(app, ["config", "set", "output.icons", "false"])

    assert result.exit_code == 0
    assert "Success" in result.output
    assert get_config_service().config.output.icons is False


def test_set_invalid_value():
    result = runner.invoke(app, ["config", "set", "output.format", "xml"])
    assert result.exit_code == ERROR_INVALID_ARGS


def test_set_unknown_key():
    result = runner.invoke(app, ["config", "set", "nope", "1"])
    assert result.exit_code == ERROR_NOT_FOUND


def test_reset_with_confirmation_declined():
    runner.invoke(app, ["config", "set", "output.compact", "true"])

    result = runner.invoke(app, ["config", "reset"], input="n\n")

    assert result.exit_code == 0
    assert get_config_service().config.output.compact is True


def test_reset_with_yes():
    runner.invoke(app, ["config", "set", "output.compact", "true"])

    result = runner.invoke(app, ["config", "reset", "--yes"])

    assert result.exit_code == 0
    assert get_config_service().config.output.compact is False
