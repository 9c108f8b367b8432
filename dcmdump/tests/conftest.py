# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Fixtures used in different tests."""

import pytest

from dcmdump import config
from dcmdump.tests._encoding import EXPLICIT_FILE, IMPLICIT_FILE


@pytest.fixture
def enforce_valid_values():
    value = config.enforce_valid_values
    config.enforce_valid_values = True
    yield
    config.enforce_valid_values = value


@pytest.fixture
def default_implicit_VR():
    value = config.default_is_implicit_VR
    config.default_is_implicit_VR = True
    yield
    config.default_is_implicit_VR = value


@pytest.fixture
def restore_debugging():
    """Put the logger back the way it was after a test turns debug on."""
    handlers = list(config.logger.handlers)
    yield
    config.logger.handlers = handlers
    config.debug(False, False)


# fixtures for often used test files

@pytest.fixture
def explicit_name(tmp_path):
    path = tmp_path / "explicit.dcm"
    path.write_bytes(EXPLICIT_FILE)
    yield str(path)


@pytest.fixture
def implicit_name(tmp_path):
    path = tmp_path / "implicit.dcm"
    path.write_bytes(IMPLICIT_FILE)
    yield str(path)


@pytest.fixture
def truncated_name(tmp_path):
    path = tmp_path / "truncated.dcm"
    path.write_bytes(EXPLICIT_FILE[:-5])
    yield str(path)
