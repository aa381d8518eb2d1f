"""
Input validation utilities for anovatab.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about the producing routine.

Design principles:
    - Missing values are legitimate in variance tables (None -> NaN)
    - No other type coercion beyond np.asarray on array-likes
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Iterable, Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from anovatab.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert a column to a float64 array.

    None entries become NaN; anything else that is not numeric is
    rejected.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        1D numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to a numeric array
        DimensionError: If input is not 1D
    """
    raw = np.asarray(array)
    if raw.dtype.kind in ('U', 'S'):
        raise ValidationError(
            f"{name}: non-numeric dtype {raw.dtype}, expected numeric data"
        )

    try:
        result = np.asarray(array, dtype=np.float64)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to numeric array: {e}") from e

    if result.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D column, got {result.ndim}D with shape {result.shape}"
        )

    return result.copy()


def is_numeric_column(array: ArrayLike) -> bool:
    """
    Report whether a column holds numbers (possibly missing) or labels.

    Object columns count as numeric when every entry is None or converts
    to float; string columns never do.
    """
    raw = np.asarray(array)
    if raw.dtype.kind in 'biuf':
        return True
    if raw.dtype.kind != 'O':
        return False
    for value in raw.ravel():
        if value is None or isinstance(value, (int, float, np.number)):
            continue
        return False
    return True


def check_labels(labels: Iterable[Any], name: str) -> tuple[str, ...]:
    """
    Convert labels to a tuple of str.

    Args:
        labels: Row names or term labels
        name: Parameter name for error messages

    Raises:
        ValidationError: If any label is None
    """
    result = []
    for i, label in enumerate(labels):
        if label is None:
            raise ValidationError(f"{name}: label at position {i} is None")
        result.append(str(label))
    return tuple(result)


def check_consistent_length(
    lengths: dict[str, int],
    expected: int,
    name: str,
) -> None:
    """
    Verify every column has the expected number of rows.

    Args:
        lengths: {column_name: length}
        expected: Required length (the table's row count)
        name: Table name for error messages

    Raises:
        DimensionError: If any column length differs
    """
    bad = {col: n for col, n in lengths.items() if n != expected}
    if bad:
        details = ", ".join(f"{col!r}={n}" for col, n in bad.items())
        raise DimensionError(
            f"{name}: expected {expected} rows in every column, got {details}"
        )


def check_unique(values: Sequence[str], name: str) -> None:
    """
    Verify labels are unique.

    Raises:
        ValidationError: If any label occurs more than once
    """
    seen: set[str] = set()
    duplicates: list[str] = []
    for value in values:
        if value in seen and value not in duplicates:
            duplicates.append(value)
        seen.add(value)
    if duplicates:
        raise ValidationError(f"{name}: duplicate labels {duplicates}")


def check_choice(value: Any, choices: tuple[str, ...], name: str) -> str:
    """
    Verify value is one of a fixed set of strings.

    Raises:
        ValidationError: If value is not one of choices
    """
    if not isinstance(value, str) or value not in choices:
        raise ValidationError(
            f"{name} must be one of {choices}, got {value!r}"
        )
    return value


def check_required_columns(
    available: Iterable[str],
    required: Iterable[str],
    name: str,
) -> None:
    """
    Verify that all required columns are present.

    Raises:
        ValidationError: Naming every missing column
    """
    present = set(available)
    missing = [col for col in required if col not in present]
    if missing:
        raise ValidationError(
            f"{name}: missing required columns {missing}"
        )
