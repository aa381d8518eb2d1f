"""
Variance tables from variance-analysis results.

Public API:
    arrange_anova(x, ...) -> VarianceTable          # dispatcher
    arrange_anova_table(x) -> VarianceTable         # generic / model comparison
    arrange_aov(x, ...) -> VarianceTable            # single stratum
    arrange_aovlist(x, ...) -> VarianceTable        # multiple strata
    arrange_mlm(x, ...) -> VarianceTable            # sphericity-corrected
    tidy_aov(x) -> tuple[TidyRow, ...]              # default tidier
"""

from anovatab.arrange.solvers import arrange_anova
from anovatab.arrange._generic import arrange_anova_table
from anovatab.arrange._strata import arrange_aov, arrange_aovlist
from anovatab.arrange._sphericity import arrange_mlm
from anovatab.arrange._tidy import tidy_aov
from anovatab.arrange._common import (
    TidyRow,
    VarianceTableParams,
    VarianceTableRow,
    VALID_CORRECTIONS,
)
from anovatab.arrange.design import (
    GenericAnovaTable,
    LabeledTable,
    MultiStratumSummary,
    MultivariateSphericityResult,
    ResultVariant,
    SingleStratumSummary,
)
from anovatab.arrange.solution import VarianceTable

__all__ = [
    "arrange_anova",
    "arrange_anova_table",
    "arrange_aov",
    "arrange_aovlist",
    "arrange_mlm",
    "tidy_aov",
    "TidyRow",
    "VarianceTableParams",
    "VarianceTableRow",
    "VALID_CORRECTIONS",
    "GenericAnovaTable",
    "LabeledTable",
    "MultiStratumSummary",
    "MultivariateSphericityResult",
    "ResultVariant",
    "SingleStratumSummary",
    "VarianceTable",
]
