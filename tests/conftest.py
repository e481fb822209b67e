"""Shared test fixtures."""

import pytest

from strdur import StringDuration


@pytest.fixture
def sd():
    return StringDuration()


@pytest.fixture
def preset():
    return StringDuration("90m")
