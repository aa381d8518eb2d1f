"""
User-facing variance table.

VarianceTable wraps a Result[VarianceTableParams] and provides convenient
accessors and conversions for report-formatting code. Rendering is left
to the consumer.
"""

import warnings
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from anovatab.core.exceptions import ValidationError
from anovatab.core.result import Result
from anovatab.core.validation import check_choice
from anovatab.arrange._common import (
    CANONICAL_COLUMNS,
    Correction,
    TableKind,
    VALID_CORRECTIONS,
    VALID_KINDS,
    VarianceTableParams,
    VarianceTableRow,
)

if TYPE_CHECKING:
    import pandas as pd

# canonical column -> VarianceTableRow attribute
_ROW_FIELDS = {
    'sumsq': 'sumsq',
    'df': 'df',
    'sumsq_err': 'sumsq_err',
    'df_res': 'df_res',
    'statistic': 'statistic',
    'p.value': 'p_value',
}


@dataclass
class VarianceTable:
    """
    Normalized variance table.

    Produced by arrange_anova() and the individual reshapers.
    """
    _result: Result[VarianceTableParams]

    @property
    def rows(self) -> tuple[VarianceTableRow, ...]:
        return self._result.params.rows

    @property
    def terms(self) -> tuple[str, ...]:
        return tuple(row.term for row in self.rows)

    @property
    def columns(self) -> tuple[str, ...]:
        """Columns present in the output, canonical ones first."""
        return self._result.params.columns

    @property
    def kind(self) -> TableKind:
        return self._result.params.kind

    @property
    def correction(self) -> Correction:
        return self._result.params.correction

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def column(self, name: str) -> NDArray:
        """
        Values of one output column.

        Args:
            name: Column name, e.g. 'sumsq', 'p.value', 'term' or an
                extra such as 'meansq'

        Returns:
            float64 array (str array for 'term')

        Raises:
            ValidationError: If the column is not part of this table
        """
        if name not in self.columns:
            raise ValidationError(
                f"column {name!r} not in table; available: {list(self.columns)}"
            )
        if name == 'term':
            return np.array(self.terms)
        if name in _ROW_FIELDS:
            attr = _ROW_FIELDS[name]
            return np.array([getattr(row, attr) for row in self.rows], dtype=np.float64)
        return np.array(
            [row.extras.get(name, np.nan) for row in self.rows], dtype=np.float64
        )

    def to_records(self) -> list[dict[str, Any]]:
        """One dict per row, keyed by the present column names."""
        records: list[dict[str, Any]] = []
        for row in self.rows:
            record: dict[str, Any] = {}
            for name in self.columns:
                if name == 'term':
                    record[name] = row.term
                elif name in _ROW_FIELDS:
                    record[name] = getattr(row, _ROW_FIELDS[name])
                else:
                    record[name] = row.extras.get(name, np.nan)
            records.append(record)
        return records

    def to_dataframe(self) -> 'pd.DataFrame':
        """
        Convert to a pandas DataFrame.

        kind and correction are stored in DataFrame.attrs.
        """
        import pandas as pd

        df = pd.DataFrame.from_records(self.to_records(), columns=list(self.columns))
        df.attrs['kind'] = self.kind
        df.attrs['correction'] = self.correction
        return df

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[VarianceTableRow]:
        return iter(self.rows)

    def __repr__(self) -> str:
        return (
            f"VarianceTable(kind={self.kind!r}, correction={self.correction!r}, "
            f"terms={list(self.terms)})"
        )


def order_columns(present: set[str] | frozenset[str]) -> tuple[str, ...]:
    """Canonical columns in fixed order, then extras alphabetically."""
    canonical = tuple(c for c in CANONICAL_COLUMNS if c in present)
    extras = tuple(sorted(c for c in present if c not in CANONICAL_COLUMNS))
    return canonical + extras


def build_table(
    rows: list[VarianceTableRow] | tuple[VarianceTableRow, ...],
    columns: tuple[str, ...],
    *,
    kind: TableKind = 'variance_table',
    correction: Correction = 'none',
    info: dict[str, Any] | None = None,
    notes: list[str] | tuple[str, ...] = (),
) -> VarianceTable:
    """Wrap reshaped rows in a fresh Result envelope."""
    check_choice(kind, VALID_KINDS, "kind")
    check_choice(correction, VALID_CORRECTIONS, "correction")
    params = VarianceTableParams(
        rows=tuple(rows),
        columns=columns,
        kind=kind,
        correction=correction,
    )
    return VarianceTable(
        _result=Result(params=params, info=dict(info or {}), warnings=tuple(notes))
    )


def record_warning(
    message: str,
    category: type[Warning],
    notes: list[str],
    stacklevel: int = 3,
) -> None:
    """Emit a warning and keep its message for the result envelope."""
    warnings.warn(message, category, stacklevel=stacklevel)
    notes.append(message)
