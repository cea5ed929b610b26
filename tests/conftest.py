"""Shared test fixtures for fileaccess tests."""

from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def src_root(project_root):
    """Return the src/ directory."""
    return project_root / "src"


@pytest.fixture
def config_file(tmp_path):
    """Point config_path() at a not-yet-existing file under tmp_path."""
    path = tmp_path / "home" / ".fileaccess" / "config.yaml"
    with patch("fileaccess.config.config_path", return_value=path):
        yield path
