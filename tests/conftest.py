from datetime import datetime, timedelta

import pytest

from payroll.services.company_registry import CompanyRegistry


class FixedClock:
    """Clock returning a pinned time, moved forward by hand."""

    def __init__(self, start=datetime(2024, 3, 5, 14, 7, 9)):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds=1):
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def registry():
    return CompanyRegistry()


@pytest.fixture(autouse=True)
def _reset_default_registry():
    CompanyRegistry.reset_instance()
    yield
    CompanyRegistry.reset_instance()
