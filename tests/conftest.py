"""Pytest configuration and shared fixtures."""

import pytest

from models import PropertyInput


@pytest.fixture
def default_inputs():
    """The calculator's reset values: 500萬 flat, 30% down, 3.5% over 30 years."""
    return PropertyInput.default()


@pytest.fixture
def cash_inputs():
    """Same flat bought outright."""
    return PropertyInput.default(payment_type="cash")
