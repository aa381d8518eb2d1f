"""
Tests for input validators.
"""

import numpy as np
import pytest

from anovatab.core.exceptions import DimensionError, ValidationError
from anovatab.core.validation import (
    check_array,
    check_choice,
    check_consistent_length,
    check_labels,
    check_required_columns,
    check_unique,
    is_numeric_column,
)


class TestCheckArray:

    def test_int_to_float(self):
        result = check_array([1, 2, 3], "Df")
        assert result.dtype == np.float64

    def test_none_to_nan(self):
        result = check_array([1.0, None], "F")
        assert np.isnan(result[1])

    def test_returns_copy(self):
        source = np.array([1.0, 2.0])
        result = check_array(source, "Df")
        result[0] = 5.0
        assert source[0] == 1.0

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="Df"):
            check_array(['a', 'b'], "Df")

    def test_rejects_mixed_object(self):
        with pytest.raises(ValidationError, match="F"):
            check_array([1.0, 'x'], "F")

    def test_rejects_2d(self):
        with pytest.raises(DimensionError):
            check_array([[1.0], [2.0]], "Df")


class TestIsNumericColumn:

    @pytest.mark.parametrize("values", [
        [1, 2], [1.5, np.nan], [1.0, None], [None, None], [], [True, False],
    ])
    def test_numeric(self, values):
        assert is_numeric_column(values)

    @pytest.mark.parametrize("values", [['a', 'b'], [1.0, 'b'], ['1', '2']])
    def test_labels(self, values):
        assert not is_numeric_column(values)


class TestLabels:

    def test_converts_to_str(self):
        assert check_labels([1, 'a'], "row_names") == ('1', 'a')

    def test_rejects_none(self):
        with pytest.raises(ValidationError, match="position 1"):
            check_labels(['a', None], "row_names")

    def test_unique(self):
        check_unique(('a', 'b'), "columns")

    def test_duplicates_named(self):
        with pytest.raises(ValidationError, match="'Df'"):
            check_unique(('Df', 'F', 'Df'), "columns")


class TestLengthsAndColumns:

    def test_consistent(self):
        check_consistent_length({'a': 3, 'b': 3}, 3, "table")

    def test_inconsistent(self):
        with pytest.raises(DimensionError, match="'b'=2"):
            check_consistent_length({'a': 3, 'b': 2}, 3, "table")

    def test_required_present(self):
        check_required_columns(['Df', 'Sum Sq'], ['Df'], "stratum")

    def test_required_missing(self):
        with pytest.raises(ValidationError, match="RSS"):
            check_required_columns(['Df'], ['Df', 'RSS'], "comparison")


class TestCheckChoice:

    def test_valid(self):
        assert check_choice('GG', ('GG', 'HF'), "correction") == 'GG'

    @pytest.mark.parametrize("value", ['gg', None, 1])
    def test_invalid(self, value):
        with pytest.raises(ValidationError, match="correction"):
            check_choice(value, ('GG', 'HF'), "correction")
