"""Root conftest — shared test configuration."""

import pytest

from outside_in.core import credentials


@pytest.fixture(autouse=True)
def _reset_credentials():
    """Every test starts and ends with an unset credential store."""
    credentials.reset()
    yield
    credentials.reset()
