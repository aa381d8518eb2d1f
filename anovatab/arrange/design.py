"""
Input variants for arrange_anova().

Each class wraps the already-computed output of one kind of variance
analysis. Instances are immutable and validated on construction; create
them via the factory methods, not directly.

Variants:
    GenericAnovaTable            - ANOVA / model-comparison tables
    SingleStratumSummary         - one-way / factorial aov summaries
    MultiStratumSummary          - repeated-measures aov summaries
    MultivariateSphericityResult - multivariate repeated-measures results
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from anovatab.core.exceptions import DimensionError, ValidationError
from anovatab.core.validation import (
    check_array,
    check_consistent_length,
    check_labels,
    check_required_columns,
    check_unique,
    is_numeric_column,
)

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True)
class LabeledTable:
    """
    Column-oriented table with row labels.

    Numeric columns are float64 arrays with NaN for missing values; label
    columns (e.g. 'Effect') are arrays of str.
    """
    row_names: tuple[str, ...]
    columns: dict[str, NDArray]

    @staticmethod
    def from_columns(
        columns: Mapping[str, ArrayLike],
        *,
        row_names: Iterable[Any] | None = None,
    ) -> 'LabeledTable':
        """
        Create a table from named columns.

        Args:
            columns: {column_name: 1D values}, in display order
            row_names: Row labels. Defaults to '1', '2', ...

        Returns:
            LabeledTable with copied, validated columns
        """
        names = check_labels(columns.keys(), "columns")
        check_unique(names, "columns")

        validated: dict[str, NDArray] = {}
        for name, values in zip(names, columns.values()):
            if is_numeric_column(values):
                validated[name] = check_array(values, name)
            else:
                labels = np.asarray(values)
                if labels.ndim != 1:
                    raise ValidationError(f"{name}: expected 1D, got {labels.ndim}D")
                validated[name] = np.array([str(v) for v in labels])

        lengths = {name: len(arr) for name, arr in validated.items()}
        if row_names is None:
            n_rows = max(lengths.values(), default=0)
            rows = tuple(str(i + 1) for i in range(n_rows))
        else:
            rows = check_labels(row_names, "row_names")
            n_rows = len(rows)

        check_consistent_length(lengths, n_rows, "table")

        return LabeledTable(row_names=rows, columns=validated)

    @staticmethod
    def from_dataframe(df: 'pd.DataFrame') -> 'LabeledTable':
        """
        Create a table from a pandas DataFrame.

        The index supplies the row names.
        """
        columns = {str(col): df[col].to_numpy() for col in df.columns}
        return LabeledTable.from_columns(columns, row_names=[str(i) for i in df.index])

    @property
    def n_rows(self) -> int:
        return len(self.row_names)

    @property
    def column_names(self) -> tuple[str, ...]:
        return tuple(self.columns)

    def has_column(self, name: str) -> bool:
        return name in self.columns

    def column(self, name: str) -> NDArray:
        """Return a copy of one column."""
        if name not in self.columns:
            raise ValidationError(
                f"column {name!r} not found; available: {list(self.columns)}"
            )
        return self.columns[name].copy()

    def numeric_column_names(self) -> tuple[str, ...]:
        return tuple(
            name for name, arr in self.columns.items()
            if np.issubdtype(arr.dtype, np.floating)
        )


def _as_table(obj: Any, name: str) -> LabeledTable | None:
    """Accept a LabeledTable, a DataFrame-like object, or None."""
    if obj is None or isinstance(obj, LabeledTable):
        return obj
    if hasattr(obj, 'columns') and hasattr(obj, 'index'):
        return LabeledTable.from_dataframe(obj)
    raise ValidationError(
        f"{name}: expected LabeledTable, pandas DataFrame or None, "
        f"got {type(obj).__name__}"
    )


@dataclass(frozen=True)
class GenericAnovaTable:
    """
    ANOVA table with free-form columns and an optional heading.

    Covers anova tables of linear models, variance-homogeneity tests,
    mixed-model tables (Kenward-Roger, Satterthwaite, parametric
    bootstrap, likelihood-ratio) and comparisons of nested models. A
    heading element mentioning both 'Model 1' and 'Model 2' marks a model
    comparison.
    """
    table: LabeledTable
    heading: tuple[str, ...] = ()

    @staticmethod
    def from_columns(
        columns: Mapping[str, ArrayLike],
        *,
        row_names: Iterable[Any] | None = None,
        heading: Iterable[str] | str = (),
    ) -> 'GenericAnovaTable':
        """
        Create from named columns.

        Args:
            columns: {source_column_label: 1D values}
            row_names: Row labels (term names). Defaults to '1', '2', ...
            heading: Heading lines printed above the table

        Returns:
            GenericAnovaTable
        """
        table = LabeledTable.from_columns(columns, row_names=row_names)
        return GenericAnovaTable(table=table, heading=_as_heading(heading))

    @staticmethod
    def from_dataframe(
        df: 'pd.DataFrame',
        *,
        heading: Iterable[str] | str | None = None,
    ) -> 'GenericAnovaTable':
        """
        Create from a pandas DataFrame.

        The heading defaults to df.attrs['heading'] when present.
        """
        if heading is None:
            heading = df.attrs.get('heading', ())
        return GenericAnovaTable(
            table=LabeledTable.from_dataframe(df),
            heading=_as_heading(heading),
        )


def _as_heading(heading: Iterable[str] | str) -> tuple[str, ...]:
    if isinstance(heading, str):
        return (heading,)
    return check_labels(heading, "heading")


# Column vocabulary of a single-stratum summary
STRATUM_COLUMNS: tuple[str, ...] = ('Df', 'Sum Sq', 'Mean Sq', 'F value', 'Pr(>F)')


@dataclass(frozen=True)
class SingleStratumSummary:
    """
    Variance table of one error stratum.

    Row names are term labels; a trailing 'Residuals' row holds the
    error sum of squares and degrees of freedom.
    """
    table: LabeledTable

    @staticmethod
    def from_columns(
        columns: Mapping[str, ArrayLike],
        *,
        row_names: Iterable[Any],
    ) -> 'SingleStratumSummary':
        """
        Create from named columns.

        Args:
            columns: Must include 'Df' and 'Sum Sq'; 'Mean Sq', 'F value'
                and 'Pr(>F)' are optional
            row_names: Term labels, residual row last

        Returns:
            SingleStratumSummary
        """
        table = LabeledTable.from_columns(columns, row_names=row_names)
        return SingleStratumSummary._validated(table)

    @staticmethod
    def from_dataframe(df: 'pd.DataFrame') -> 'SingleStratumSummary':
        """Create from a pandas DataFrame indexed by term."""
        return SingleStratumSummary._validated(LabeledTable.from_dataframe(df))

    @staticmethod
    def _validated(table: LabeledTable) -> 'SingleStratumSummary':
        check_required_columns(table.column_names, ('Df', 'Sum Sq'), "stratum")
        unknown = [c for c in table.column_names if c not in STRATUM_COLUMNS]
        if unknown:
            raise ValidationError(
                f"stratum: unexpected columns {unknown}; "
                f"expected a subset of {list(STRATUM_COLUMNS)}"
            )
        if table.n_rows == 0:
            raise ValidationError("stratum: table has no rows")
        return SingleStratumSummary(table=table)


@dataclass(frozen=True)
class MultiStratumSummary:
    """
    Ordered error strata of a repeated-measures variance analysis.

    names defaults to 'Stratum 1', 'Stratum 2', ... when left empty.
    """
    strata: tuple[SingleStratumSummary, ...]
    names: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        strata = tuple(self.strata)
        if not strata:
            raise ValidationError("strata: need at least 1 stratum, got 0")
        if self.names:
            names = check_labels(self.names, "names")
        else:
            names = tuple(f"Stratum {i + 1}" for i in range(len(strata)))
        if len(names) != len(strata):
            raise DimensionError(
                f"names: expected {len(strata)} stratum names, got {len(names)}"
            )
        for name, summary in zip(names, strata):
            if not isinstance(summary, SingleStratumSummary):
                raise ValidationError(
                    f"strata: {name!r} is {type(summary).__name__}, "
                    f"expected SingleStratumSummary"
                )
        object.__setattr__(self, 'strata', strata)
        object.__setattr__(self, 'names', names)

    @staticmethod
    def from_strata(
        strata: Mapping[str, SingleStratumSummary] | Sequence[SingleStratumSummary],
    ) -> 'MultiStratumSummary':
        """
        Create from strata in order.

        Args:
            strata: {stratum_name: summary} or a sequence of summaries
                (named 'Stratum 1', 'Stratum 2', ...)

        Returns:
            MultiStratumSummary
        """
        if isinstance(strata, Mapping):
            return MultiStratumSummary(
                strata=tuple(strata.values()),
                names=check_labels(strata.keys(), "strata"),
            )
        return MultiStratumSummary(strata=tuple(strata))


@dataclass(frozen=True)
class MultivariateSphericityResult:
    """
    Multivariate repeated-measures result.

    univariate_tests has one row per term; sphericity_tests and
    pval_adjustments are indexed by the repeated-measures terms with more
    than two levels. univariate_tests is None for a pure multivariate
    analysis.
    """
    univariate_tests: LabeledTable | None
    sphericity_tests: LabeledTable | None = None
    pval_adjustments: LabeledTable | None = None

    @staticmethod
    def from_tables(
        univariate_tests: Any = None,
        sphericity_tests: Any = None,
        pval_adjustments: Any = None,
    ) -> 'MultivariateSphericityResult':
        """
        Create from sub-tables.

        Args:
            univariate_tests: LabeledTable, DataFrame, or None
            sphericity_tests: LabeledTable, DataFrame, or None
            pval_adjustments: LabeledTable, DataFrame, or None. Required
                when sphericity_tests has rows.

        Returns:
            MultivariateSphericityResult
        """
        uni = _as_table(univariate_tests, "univariate_tests")
        sph = _as_table(sphericity_tests, "sphericity_tests")
        adj = _as_table(pval_adjustments, "pval_adjustments")

        if sph is not None and sph.n_rows > 0 and adj is None:
            raise ValidationError(
                "pval_adjustments: required when sphericity_tests has rows"
            )

        return MultivariateSphericityResult(
            univariate_tests=uni,
            sphericity_tests=sph,
            pval_adjustments=adj,
        )

    @property
    def has_sphericity_tests(self) -> bool:
        return self.sphericity_tests is not None and self.sphericity_tests.n_rows > 0


ResultVariant = Union[
    GenericAnovaTable,
    SingleStratumSummary,
    MultiStratumSummary,
    MultivariateSphericityResult,
]
