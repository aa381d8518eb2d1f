"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default factories (info, warnings)
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from anovatab.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResultConstruction:

    def test_basic_creation(self):
        result = Result(params=FakeParams(value=42.0), info={'source': 'test'})
        assert result.params.value == 42.0
        assert result.info['source'] == 'test'

    def test_defaults(self):
        result = Result(params=FakeParams(value=1.0))
        assert result.info == {}
        assert result.warnings == ()

    def test_default_info_not_shared(self):
        a = Result(params=FakeParams(value=1.0))
        b = Result(params=FakeParams(value=2.0))
        assert a.info is not b.info


class TestImmutability:

    def test_cannot_reassign_params(self):
        result = Result(params=FakeParams(value=1.0))
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_reassign_warnings(self):
        result = Result(params=FakeParams(value=1.0))
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("late",)


class TestHasWarning:

    def test_substring_match(self):
        result = Result(
            params=FakeParams(value=1.0),
            warnings=("HF eps > 1 treated as 1.",),
        )
        assert result.has_warning("HF eps")
        assert not result.has_warning("renamed")

    def test_no_warnings(self):
        assert not Result(params=FakeParams(value=1.0)).has_warning("anything")
