"""
Core pytest configuration for the entire test suite.

This module only installs logging and registers the shared fixtures. Nothing here
touches a database: the repository is in memory and every test builds its own.

Domain-specific fixtures are located in:
- tests/test_fixtures/repository_fixtures.py
- tests/test_fixtures/api_fixtures.py
"""

from __future__ import annotations

import logging

# -------------------------------
# Early logging tuning (IMPORTANT)
# -------------------------------
# Set the level for noisy third-party loggers at import time, before importing modules
# that might initialize them.
NOISY_LOGGERS = (
    "asyncio",
    "httpx",
    "httpcore",
    "urllib3",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

import pytest

from employee_directory.config.settings import Settings
from employee_directory.core.logging.builder import setup_logging


# -------------------------------
# Settings
# -------------------------------
@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings built explicitly for tests, so a developer's .env cannot change the results.
    """
    return Settings(
        _env_file=None,
        ENV="testing",
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="text",
        LOG_TO_STDOUT=True,
    )


# -------------------------------
# Logging: install application logging once per session
# -------------------------------
# The `autouse=True` part means pytest uses this fixture without it being listed in
# test parameters.
@pytest.fixture(scope="session", autouse=True)
def configure_logging(test_settings: Settings):
    """
    Install application logging for the entire test session, so the formatters and
    filters the app expects (request_id, redact) are active in every test.
    """
    setup_logging(test_settings)
    yield


# Shared fixtures
from .test_fixtures.repository_fixtures import (  # noqa: E402
    employee_repository,
    employee_actions,
    sample_employee_data,
    create_employee,
    created_employee,
    multiple_employees,
)
from .test_fixtures.api_fixtures import (  # noqa: E402
    app,
    client,
    api_client,
)
