"""
Default tidier for single-stratum summaries.

Flattens a SingleStratumSummary into TidyRow records
(term, df, sumsq, meansq, statistic, p_value). Term labels are stripped
of the padding that printed summaries carry; absent columns become NaN.
"""

import numpy as np

from anovatab.arrange._common import TidyRow
from anovatab.arrange.design import SingleStratumSummary

# source column -> TidyRow field
_TIDY_FIELDS = {
    'Df': 'df',
    'Sum Sq': 'sumsq',
    'Mean Sq': 'meansq',
    'F value': 'statistic',
    'Pr(>F)': 'p_value',
}


def tidy_aov(summary: SingleStratumSummary) -> tuple[TidyRow, ...]:
    """
    Convert one stratum into per-term rows.

    Args:
        summary: Single-stratum summary

    Returns:
        Tuple of TidyRow in source order (residual row last)
    """
    table = summary.table
    n = table.n_rows
    values: dict[str, np.ndarray] = {}
    for source, dest in _TIDY_FIELDS.items():
        if table.has_column(source):
            values[dest] = table.column(source)
        else:
            values[dest] = np.full(n, np.nan)

    return tuple(
        TidyRow(
            term=table.row_names[i].strip(),
            df=float(values['df'][i]),
            sumsq=float(values['sumsq'][i]),
            meansq=float(values['meansq'][i]),
            statistic=float(values['statistic'][i]),
            p_value=float(values['p_value'][i]),
        )
        for i in range(n)
    )
