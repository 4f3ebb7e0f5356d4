"""Fixtures for config module tests."""

from pathlib import Path

import pytest


@pytest.fixture
def project_config_file(tmp_path: Path) -> Path:
    """Create a project configuration file.

    Parameters
    ----------
    tmp_path : Path
        Pytest tmp_path fixture

    Returns
    -------
    Path
        Path to the YAML file
    """
    config_file = tmp_path / ".bindable-assertions.yaml"
    config_file.write_text(
        "logging:\n  level: info\nmessages:\n  max_value_repr: 20\n",
        encoding="utf-8",
    )
    return config_file


@pytest.fixture
def malformed_config_file(tmp_path: Path) -> Path:
    """Create a YAML file that does not parse."""
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("logging: [unclosed\n", encoding="utf-8")
    return config_file
