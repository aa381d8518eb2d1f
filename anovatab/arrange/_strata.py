"""
Single- and multi-stratum variance tables.

A stratum's trailing 'Residuals' row is folded into every term row as
sumsq_err / df_res and then dropped. A stratum that consists of the
residual row alone (the between-subjects stratum of a repeated-measures
design with no between-subjects terms) is kept as an '(Intercept)' row
carrying only the error terms, so that effect sizes can later be computed
against it. A stratum without a trailing 'Residuals' row keeps all of its
rows with missing error terms and emits MissingResidualWarning.
"""

from anovatab.core.exceptions import MissingResidualWarning, ValidationError
from anovatab.core.protocols import Tidier, TidyRecord
from anovatab.arrange._common import (
    INTERCEPT_TERM,
    NAN,
    RESIDUAL_TERM,
    VarianceTableRow,
)
from anovatab.arrange._tidy import tidy_aov
from anovatab.arrange.design import MultiStratumSummary, SingleStratumSummary
from anovatab.arrange.solution import VarianceTable, build_table, record_warning

STRATUM_OUTPUT_COLUMNS: tuple[str, ...] = (
    'term', 'sumsq', 'df', 'sumsq_err', 'df_res', 'statistic', 'p.value', 'meansq',
)


def arrange_aov(
    x: SingleStratumSummary,
    *,
    tidier: Tidier | None = None,
) -> VarianceTable:
    """
    Reshape one stratum.

    Args:
        x: SingleStratumSummary
        tidier: Callable turning x into per-term rows. Default tidy_aov.

    Returns:
        VarianceTable with one row per term, residual row consumed
    """
    notes: list[str] = []
    rows, residual_only = _stratum_rows(x, tidier or tidy_aov, notes)
    return build_table(
        rows,
        STRATUM_OUTPUT_COLUMNS,
        info={'source': 'SingleStratumSummary', 'residual_only': residual_only},
        notes=notes,
    )


def arrange_aovlist(
    x: MultiStratumSummary,
    *,
    tidier: Tidier | None = None,
) -> VarianceTable:
    """
    Reshape every stratum and stack the results in stratum order.

    Each stratum's rows carry that stratum's own error terms.

    Args:
        x: MultiStratumSummary
        tidier: Passed to the per-stratum reshaping

    Returns:
        VarianceTable with the rows of all strata
    """
    tidy = tidier or tidy_aov
    rows: list[VarianceTableRow] = []
    strata_info: list[dict[str, object]] = []
    notes: list[str] = []

    for name, stratum in zip(x.names, x.strata, strict=True):
        stratum_rows, residual_only = _stratum_rows(stratum, tidy, notes)
        rows.extend(stratum_rows)
        strata_info.append({
            'name': name,
            'n_rows': len(stratum_rows),
            'residual_only': residual_only,
        })

    return build_table(
        rows,
        STRATUM_OUTPUT_COLUMNS,
        info={'source': 'MultiStratumSummary', 'strata': strata_info},
        notes=notes,
    )


def _stratum_rows(
    x: SingleStratumSummary,
    tidier: Tidier,
    notes: list[str],
) -> tuple[list[VarianceTableRow], bool]:
    tidy: tuple[TidyRecord, ...] = tuple(tidier(x))
    for i, record in enumerate(tidy):
        if not isinstance(record, TidyRecord):
            raise ValidationError(
                f"tidier: row {i} is {type(record).__name__}, expected an object "
                f"with term, df, sumsq, meansq, statistic and p_value"
            )

    if len(tidy) == 1 and tidy[0].term == RESIDUAL_TERM:
        residual = tidy[0]
        row = VarianceTableRow(
            term=INTERCEPT_TERM,
            sumsq_err=float(residual.sumsq),
            df_res=float(residual.df),
            extras={'meansq': NAN},
        )
        return [row], True

    if tidy and tidy[-1].term == RESIDUAL_TERM:
        residual = tidy[-1]
        terms = tidy[:-1]
        sumsq_err, df_res = float(residual.sumsq), float(residual.df)
    else:
        # no residual degrees of freedom left in this stratum
        terms = tidy
        sumsq_err, df_res = NAN, NAN
        if terms:
            record_warning(
                f"No {RESIDUAL_TERM!r} row in stratum; sumsq_err and df_res "
                f"are missing for {[t.term for t in terms]}",
                MissingResidualWarning,
                notes,
                stacklevel=4,
            )

    rows = [
        VarianceTableRow(
            term=t.term,
            sumsq=float(t.sumsq),
            df=float(t.df),
            sumsq_err=sumsq_err,
            df_res=df_res,
            statistic=float(t.statistic),
            p_value=float(t.p_value),
            extras={'meansq': float(t.meansq)},
        )
        for t in terms
    ]
    return rows, False
