from datetime import date

import pytest

from study_flow.store import ConfigStore


@pytest.fixture
def today():
    """A fixed Monday so date arithmetic is reproducible."""
    return date(2024, 1, 1)


@pytest.fixture
def store(today):
    """Store holding the default configuration as of ``today``."""
    return ConfigStore(today=today)
