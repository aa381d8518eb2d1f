"""
Multivariate repeated-measures results with sphericity correction.

The univariate tests of a multivariate repeated-measures analysis are
reported with per-term error sums of squares. For terms listed in the
sphericity tests, degrees of freedom and p values are corrected:

    GG:   df, df_res multiplied by the Greenhouse-Geisser epsilon;
          p value replaced by the GG-adjusted p value
    HF:   as GG with the Huynh-Feldt epsilon, capped at 1
    none: values reported as computed
"""

import numpy as np
from numpy.typing import NDArray

from anovatab.core.exceptions import (
    EpsilonClampedNotice,
    MultivariateUnsupportedError,
    UnsupportedCorrectionError,
    ValidationError,
)
from anovatab.core.validation import check_required_columns
from anovatab.arrange._common import VALID_CORRECTIONS, VarianceTableRow
from anovatab.arrange.design import MultivariateSphericityResult
from anovatab.arrange.solution import VarianceTable, build_table, record_warning

# source label -> canonical column
MLM_RENAMERS: dict[str, str] = {
    'SS': 'sumsq',
    'Sum Sq': 'sumsq',
    'num Df': 'df',
    'Error SS': 'sumsq_err',
    'den Df': 'df_res',
    'F': 'statistic',
    'F value': 'statistic',
    'Pr(>F)': 'p.value',
}

MLM_OUTPUT_COLUMNS: tuple[str, ...] = (
    'sumsq', 'df', 'sumsq_err', 'df_res', 'statistic', 'p.value',
)

# correction -> (epsilon column, adjusted p-value column)
_ADJUSTMENT_COLUMNS: dict[str, tuple[str, str]] = {
    'GG': ('GG eps', 'Pr(>F[GG])'),
    'HF': ('HF eps', 'Pr(>F[HF])'),
}

MANOVA_SUGGESTION = (
    "Fit a classical multivariate analysis of variance instead if Type I "
    "or Type II sums of squares are adequate for your analysis."
)


def arrange_mlm(
    x: MultivariateSphericityResult,
    correction: str = 'GG',
) -> VarianceTable:
    """
    Reshape the univariate tests of a multivariate repeated-measures result.

    Args:
        x: MultivariateSphericityResult
        correction: 'GG' (default), 'HF', or 'none'

    Returns:
        VarianceTable with term, sumsq, df, sumsq_err, df_res, statistic
        and p.value; correction records the method applied

    Raises:
        UnsupportedCorrectionError: correction not in VALID_CORRECTIONS
        MultivariateUnsupportedError: x has no univariate tests
        ValidationError: required columns or terms are missing
    """
    if not isinstance(correction, str) or correction not in VALID_CORRECTIONS:
        raise UnsupportedCorrectionError(
            f"Correction not supported: {correction!r}. "
            f"'correction' must be one of {VALID_CORRECTIONS}.",
            correction=correction,
            supported=VALID_CORRECTIONS,
        )

    if x.univariate_tests is None:
        raise MultivariateUnsupportedError(
            "Multivariate results without univariate tests are not supported. "
            + MANOVA_SUGGESTION,
            suggestion=MANOVA_SUGGESTION,
        )

    uni = x.univariate_tests
    values: dict[str, NDArray] = {}
    for source, dest in MLM_RENAMERS.items():
        if uni.has_column(source) and dest not in values:
            values[dest] = uni.column(source)
    check_required_columns(values, MLM_OUTPUT_COLUMNS, "univariate_tests")

    notes: list[str] = []
    info: dict[str, object] = {'source': 'MultivariateSphericityResult'}

    if x.has_sphericity_tests and correction != 'none':
        epsilon = _apply_correction(x, values, correction, notes)
        info['epsilon'] = epsilon

    rows = [
        VarianceTableRow(
            term=term,
            sumsq=float(values['sumsq'][i]),
            df=float(values['df'][i]),
            sumsq_err=float(values['sumsq_err'][i]),
            df_res=float(values['df_res'][i]),
            statistic=float(values['statistic'][i]),
            p_value=float(values['p.value'][i]),
        )
        for i, term in enumerate(uni.row_names)
    ]

    return build_table(
        rows,
        ('term', *MLM_OUTPUT_COLUMNS),
        correction=correction,
        info=info,
        notes=notes,
    )


def _apply_correction(
    x: MultivariateSphericityResult,
    values: dict[str, NDArray],
    correction: str,
    notes: list[str],
) -> dict[str, float]:
    """Correct df, df_res and p.value in place; return epsilon by term."""
    adj = x.pval_adjustments
    if adj is None:
        raise ValidationError(
            "pval_adjustments: required when sphericity_tests has rows"
        )

    eps_col, p_col = _ADJUSTMENT_COLUMNS[correction]
    check_required_columns(adj.column_names, (eps_col, p_col), "pval_adjustments")

    terms = x.univariate_tests.row_names
    unknown = [t for t in adj.row_names if t not in terms]
    if unknown:
        raise ValidationError(
            f"pval_adjustments: terms {unknown} not found in univariate_tests"
        )
    idx = np.array([terms.index(t) for t in adj.row_names], dtype=np.intp)

    eps = adj.column(eps_col)
    if correction == 'HF':
        if np.any(eps > 1):
            record_warning(
                "HF eps > 1 treated as 1.",
                EpsilonClampedNotice,
                notes,
                stacklevel=4,
            )
        eps = np.minimum(1.0, eps)

    values['df'][idx] = values['df'][idx] * eps
    values['df_res'][idx] = values['df_res'][idx] * eps
    values['p.value'][idx] = adj.column(p_col)

    return {term: float(e) for term, e in zip(adj.row_names, eps)}
