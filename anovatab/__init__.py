"""
anovatab: uniform variance tables from variance-analysis results.

Normalizes ANOVA tables, single- and multi-stratum aov summaries and
multivariate repeated-measures results (with Greenhouse-Geisser or
Huynh-Feldt correction) into one table shape for report rendering.

Submodules:
    arrange: Input variants, reshapers and the VarianceTable result
    core: Exceptions, validation, result envelope, protocols
"""

__version__ = "0.1.0"

from anovatab import arrange
from anovatab.arrange import (
    arrange_anova,
    GenericAnovaTable,
    LabeledTable,
    MultiStratumSummary,
    MultivariateSphericityResult,
    SingleStratumSummary,
    VarianceTable,
)

__all__ = [
    "__version__",
    "arrange",
    "arrange_anova",
    "GenericAnovaTable",
    "LabeledTable",
    "MultiStratumSummary",
    "MultivariateSphericityResult",
    "SingleStratumSummary",
    "VarianceTable",
]
