"""
Common data types for variance tables.

Contains the frozen payloads that go inside Result[P] envelopes and the
module-level constants shared by the reshapers.
Each payload is a pure data container with no methods.
"""

from dataclasses import dataclass, field
from typing import Literal

TableKind = Literal['variance_table', 'model_comparison']
Correction = Literal['GG', 'HF', 'none']

VALID_CORRECTIONS: tuple[str, ...] = ('GG', 'HF', 'none')
VALID_KINDS: tuple[str, ...] = ('variance_table', 'model_comparison')

# Output column order; 'p.value' is stored on rows as p_value
CANONICAL_COLUMNS: tuple[str, ...] = (
    'term', 'sumsq', 'df', 'sumsq_err', 'df_res', 'statistic', 'p.value',
)

# Canonical names kept on VarianceTableRow.extras
EXTRA_COLUMNS: tuple[str, ...] = (
    'meansq', 'logLik', 'AIC', 'BIC', 'n.parameters',
)

RESIDUAL_TERM = 'Residuals'
INTERCEPT_TERM = '(Intercept)'

NAN = float('nan')


@dataclass(frozen=True)
class TidyRow:
    """One per-term row of a tidied single-stratum summary."""
    term: str
    df: float
    sumsq: float
    meansq: float
    statistic: float
    p_value: float


@dataclass(frozen=True)
class VarianceTableRow:
    """One row of a normalized variance table. Missing values are NaN."""
    term: str
    sumsq: float = NAN
    df: float = NAN
    sumsq_err: float = NAN
    df_res: float = NAN
    statistic: float = NAN
    p_value: float = NAN
    extras: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class VarianceTableParams:
    """
    Parameter payload for a normalized variance table.

    columns lists the canonical columns the source actually provided, in
    output order; row fields for absent columns hold NaN.
    """
    rows: tuple[VarianceTableRow, ...]
    columns: tuple[str, ...]
    kind: TableKind = 'variance_table'
    correction: Correction = 'none'
