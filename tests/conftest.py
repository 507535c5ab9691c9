"""Shared test fixtures and configuration.

Keeps tests away from the real platform config and log directories.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from taskkeeper.services.task_manager import TaskManager
from taskkeeper.utils.logger import close_logger


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point config and log directories at *tmp_path* for every test."""
    from taskkeeper.services.config_service import get_config_service

    config_dir = tmp_path / "config"
    log_dir = tmp_path / "logs"

    close_logger()
    get_config_service.cache_clear()

    with (
        patch("taskkeeper.services.config_service.user_config_dir", return_value=str(config_dir)),
        patch("taskkeeper.utils.logger.user_log_dir", return_value=str(log_dir)),
    ):
        yield tmp_path

    get_config_service.cache_clear()
    close_logger()


@pytest.fixture()
def manager() -> TaskManager:
    return TaskManager()


@pytest.fixture()
def tmp_config():
    """Provide a real ConfigService backed by the isolated config directory."""
    from taskkeeper.services.config_service import get_config_service

    return get_config_service()
