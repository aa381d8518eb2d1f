"""
Generic ANOVA tables.

Handles two shapes:
    - Comparisons of nested models (heading 'Model 1: ... Model 2: ...'),
      one output row per comparison, labeled model2, model3, ...
    - Ordinary ANOVA tables from linear models, variance-homogeneity tests
      and mixed-model tests (Kenward-Roger, Satterthwaite, parametric
      bootstrap, likelihood ratio). Columns are renamed through RENAMERS;
      a single residual row supplies sumsq_err / df_res for every term.

A residual row is a row with a missing value in any numeric column:
producing routines leave the test statistic and p value of the residual
(or reference model) row empty.
"""

import numpy as np
from numpy.typing import NDArray

from anovatab.core.capabilities import (
    CAPABILITY_CHISQ_DF,
    CAPABILITY_EFFECT_LABELS,
    CAPABILITY_MODEL_COMPARISON,
    CAPABILITY_PARAMETRIC_BOOTSTRAP,
    table_capabilities,
)
from anovatab.core.exceptions import MultipleResidualRowsError, UnmappedColumnWarning
from anovatab.core.validation import check_required_columns
from anovatab.arrange._common import (
    CANONICAL_COLUMNS,
    EXTRA_COLUMNS,
    NAN,
    VarianceTableRow,
)
from anovatab.arrange.design import GenericAnovaTable, LabeledTable
from anovatab.arrange.solution import (
    VarianceTable,
    build_table,
    order_columns,
    record_warning,
)

# source label -> canonical column
RENAMERS: dict[str, str] = {
    'Sum Sq': 'sumsq',
    'Df': 'df',
    'F value': 'statistic',
    'Pr(>F)': 'p.value',
    # nuisance
    'Mean Sq': 'meansq',
    # fixed-effects tables with approximate denominator df
    'NumDF': 'df',
    'DenDF': 'df_res',
    # likelihood-ratio model comparisons
    'logLik': 'logLik',
    'AIC': 'AIC',
    'BIC': 'BIC',
    'LRT': 'statistic',
    'Chisq': 'statistic',
    'Pr(>Chisq)': 'p.value',
    # mixed-model effect tables
    'Effect': 'term',
    'Chi Df': 'df',
    'num Df': 'df',
    'den Df': 'df_res',
    'F': 'statistic',
    'Pr(>PB)': 'p.value',
    'npar': 'n.parameters',
}

# source label -> canonical column, nested model comparisons
MODEL_COMPARISON_RENAMERS: dict[str, str] = {
    'Sum of Sq': 'sumsq',
    'Df': 'df',
    'F': 'statistic',
    'Pr(>F)': 'p.value',
    'RSS': 'sumsq_err',
}

_RESIDUAL_DF = 'Res.Df'


def arrange_anova_table(x: GenericAnovaTable) -> VarianceTable:
    """
    Reshape a generic ANOVA table.

    Args:
        x: GenericAnovaTable

    Returns:
        VarianceTable of kind 'model_comparison' when the heading
        announces nested models, 'variance_table' otherwise

    Raises:
        MultipleResidualRowsError: More than one residual row in an
            ordinary ANOVA table
        ValidationError: Model comparison without the expected columns
    """
    table = x.table
    caps = table_capabilities(table.column_names, x.heading)
    residual = residual_rows(table)

    if CAPABILITY_MODEL_COMPARISON in caps:
        return _arrange_model_comparison(table, residual)
    return _arrange_variance_table(table, caps, residual)


def residual_rows(table: LabeledTable) -> NDArray[np.bool_]:
    """Boolean mask of rows with a missing value in any numeric column."""
    mask = np.zeros(table.n_rows, dtype=bool)
    for name in table.numeric_column_names():
        mask |= np.isnan(table.columns[name])
    return mask


def _arrange_model_comparison(
    table: LabeledTable,
    residual: NDArray[np.bool_],
) -> VarianceTable:
    check_required_columns(
        table.column_names,
        (_RESIDUAL_DF, *MODEL_COMPARISON_RENAMERS),
        "model comparison",
    )
    values = {
        dest: table.columns[source]
        for source, dest in MODEL_COMPARISON_RENAMERS.items()
    }
    res_df = table.columns[_RESIDUAL_DF]

    rows: list[VarianceTableRow] = []
    for i in np.flatnonzero(~residual):
        # residual df of the two models being compared
        previous = res_df[i - 1] if i > 0 else res_df[i]
        rows.append(VarianceTableRow(
            term=f"model{i + 1}",
            sumsq=float(values['sumsq'][i]),
            # sign depends on the order the models were given in
            df=float(np.abs(values['df'][i])),
            sumsq_err=float(values['sumsq_err'][i]),
            df_res=float(np.minimum(previous, res_df[i])),
            statistic=float(values['statistic'][i]),
            p_value=float(values['p.value'][i]),
        ))

    return build_table(
        rows,
        CANONICAL_COLUMNS,
        kind='model_comparison',
        correction='none',
        info={'source': 'GenericAnovaTable', 'n_models': table.n_rows},
    )


def _arrange_variance_table(
    table: LabeledTable,
    caps: frozenset[str],
    residual: NDArray[np.bool_],
) -> VarianceTable:
    notes: list[str] = []

    dropped: set[str] = set()
    if CAPABILITY_PARAMETRIC_BOOTSTRAP in caps:
        # bootstrap p value supersedes the asymptotic one
        dropped.add('Pr(>Chisq)')
    if CAPABILITY_CHISQ_DF in caps:
        dropped.add('Df')

    kept = [name for name in table.column_names if name not in dropped]
    unmapped = [name for name in kept if name not in RENAMERS]
    if unmapped:
        record_warning(
            f"Some columns could not be renamed and were dropped: {unmapped}",
            UnmappedColumnWarning,
            notes,
            stacklevel=4,
        )

    canonical: dict[str, NDArray] = {}
    for name in kept:
        dest = RENAMERS.get(name)
        if dest is not None and dest not in canonical:
            canonical[dest] = table.columns[name]

    n_residual = int(residual.sum())
    if n_residual > 1:
        offending = tuple(
            label for label, flag in zip(table.row_names, residual) if flag
        )
        raise MultipleResidualRowsError(
            f"Expected at most 1 residual row, found {n_residual}: {list(offending)}",
            n_residual_rows=n_residual,
            row_names=offending,
        )

    if n_residual == 1:
        r = int(np.flatnonzero(residual)[0])
        if 'df' in canonical:
            canonical['df_res'] = np.full(table.n_rows, canonical['df'][r])
        if 'sumsq' in canonical:
            canonical['sumsq_err'] = np.full(table.n_rows, canonical['sumsq'][r])

    if CAPABILITY_EFFECT_LABELS in caps:
        labels = tuple(str(v) for v in canonical.pop('term'))
    else:
        labels = table.row_names

    def value(name: str, i: int) -> float:
        return float(canonical[name][i]) if name in canonical else NAN

    rows = [
        VarianceTableRow(
            term=labels[i],
            sumsq=value('sumsq', i),
            df=value('df', i),
            sumsq_err=value('sumsq_err', i),
            df_res=value('df_res', i),
            statistic=value('statistic', i),
            p_value=value('p.value', i),
            extras={name: value(name, i) for name in EXTRA_COLUMNS if name in canonical},
        )
        for i in np.flatnonzero(~residual)
    ]

    return build_table(
        rows,
        order_columns(set(canonical) | {'term'}),
        kind='variance_table',
        correction='none',
        info={
            'source': 'GenericAnovaTable',
            'capabilities': sorted(caps),
            'dropped_columns': sorted(dropped & set(table.column_names)) + unmapped,
        },
        notes=notes,
    )
