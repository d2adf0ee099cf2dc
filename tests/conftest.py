"""Shared test fixtures."""

import pytest


@pytest.fixture
def fixed_clock():
    # 2018-05-02T06:59:53.059Z
    return lambda: 1525244393059
