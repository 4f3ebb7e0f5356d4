"""Root pytest configuration and shared fixtures for the bindable_assertions suite."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

# Imports intentionally after path setup
from bindable_assertions.pytest_plugin import *  # noqa: E402, F401, F403
from tests._helpers.bindables import (  # noqa: E402
    Person,
    TestBindable,
    ValidatingBindable,
)


@pytest.fixture
def bindable() -> TestBindable:
    """Subject implementing ``NotifyPropertyChanged``."""
    return TestBindable()


@pytest.fixture
def validating_bindable() -> ValidatingBindable:
    """Subject implementing ``NotifyDataErrorInfo``."""
    return ValidatingBindable()


@pytest.fixture
def person() -> Person:
    """Subject implementing both notification capabilities."""
    return Person()
