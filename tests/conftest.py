"""
pytest configuration and shared fixtures.
"""

import warnings

import pytest

from anovatab.core.exceptions import AnovaTabWarning


@pytest.fixture
def no_anovatab_warnings():
    """Fail the test if any anovatab diagnostic is emitted."""
    with warnings.catch_warnings():
        warnings.simplefilter('error', AnovaTabWarning)
        yield
