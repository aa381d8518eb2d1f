"""
Variance table dispatch.

Public API:
    arrange_anova(x, ...) -> VarianceTable

Dispatch is on the type of x, over a closed set of variants:
    GenericAnovaTable            -> arrange_anova_table
    SingleStratumSummary         -> arrange_aov
    MultiStratumSummary          -> arrange_aovlist
    MultivariateSphericityResult -> arrange_mlm
Anything else raises UnsupportedVariantError.
"""

from functools import singledispatch
from typing import Any

from anovatab.core.exceptions import UnsupportedVariantError
from anovatab.core.protocols import Tidier
from anovatab.arrange._generic import arrange_anova_table
from anovatab.arrange._sphericity import arrange_mlm
from anovatab.arrange._strata import arrange_aov, arrange_aovlist
from anovatab.arrange.design import (
    GenericAnovaTable,
    MultiStratumSummary,
    MultivariateSphericityResult,
    SingleStratumSummary,
)
from anovatab.arrange.solution import VarianceTable


def arrange_anova(
    x: Any,
    correction: str = 'GG',
    *,
    tidier: Tidier | None = None,
) -> VarianceTable:
    """
    Create a variance table from the result of a variance analysis.

    Args:
        x: GenericAnovaTable, SingleStratumSummary, MultiStratumSummary,
            or MultivariateSphericityResult
        correction: Sphericity correction for MultivariateSphericityResult:
            'GG' (Greenhouse-Geisser, default), 'HF' (Huynh-Feldt) or
            'none'. Ignored for other inputs.
        tidier: Flattens single strata into per-term rows. Only used for
            SingleStratumSummary and MultiStratumSummary. Default tidy_aov.

    Returns:
        VarianceTable of kind 'variance_table' or 'model_comparison'

    Raises:
        UnsupportedVariantError: x is none of the supported variants

    Examples:
        >>> summary = SingleStratumSummary.from_columns(
        ...     {'Df': [1, 12], 'Sum Sq': [189.3, 185.3]},
        ...     row_names=['N', 'Residuals'],
        ... )
        >>> table = arrange_anova(summary)
        >>> table.terms
        ('N',)
    """
    return _arrange(x, correction=correction, tidier=tidier)


@singledispatch
def _arrange(x: Any, *, correction: str, tidier: Tidier | None) -> VarianceTable:
    name = type(x).__name__
    raise UnsupportedVariantError(
        f"Objects of class '{name}' are currently not supported "
        f"(no method defined). Open an issue to request support for this class.",
        variant=name,
    )


@_arrange.register(GenericAnovaTable)
def _(x: GenericAnovaTable, *, correction: str, tidier: Tidier | None) -> VarianceTable:
    return arrange_anova_table(x)


@_arrange.register(SingleStratumSummary)
def _(x: SingleStratumSummary, *, correction: str, tidier: Tidier | None) -> VarianceTable:
    return arrange_aov(x, tidier=tidier)


@_arrange.register(MultiStratumSummary)
def _(x: MultiStratumSummary, *, correction: str, tidier: Tidier | None) -> VarianceTable:
    return arrange_aovlist(x, tidier=tidier)


@_arrange.register(MultivariateSphericityResult)
def _(
    x: MultivariateSphericityResult,
    *,
    correction: str,
    tidier: Tidier | None,
) -> VarianceTable:
    return arrange_mlm(x, correction=correction)
