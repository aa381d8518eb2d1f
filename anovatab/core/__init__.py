"""
Core infrastructure for anovatab.

This module provides shared abstractions and utilities used by the
reshaping code in anovatab.arrange.

Key components:
    protocols: Tidier, TidyRecord protocols
    result: Generic Result[P] envelope
    exceptions: Exception and warning hierarchy
    validation: Input validators
    capabilities: Column-set capability flags
"""

from anovatab.core.protocols import Tidier, TidyRecord
from anovatab.core.result import Result
from anovatab.core.exceptions import (
    AnovaTabError,
    ValidationError,
    DimensionError,
    UnsupportedVariantError,
    UnsupportedCorrectionError,
    MultivariateUnsupportedError,
    MultipleResidualRowsError,
    AnovaTabWarning,
    UnmappedColumnWarning,
    EpsilonClampedNotice,
    MissingResidualWarning,
)

__all__ = [
    # Protocols
    "Tidier",
    "TidyRecord",
    # Result
    "Result",
    # Exceptions
    "AnovaTabError",
    "ValidationError",
    "DimensionError",
    "UnsupportedVariantError",
    "UnsupportedCorrectionError",
    "MultivariateUnsupportedError",
    "MultipleResidualRowsError",
    # Warnings
    "AnovaTabWarning",
    "UnmappedColumnWarning",
    "EpsilonClampedNotice",
    "MissingResidualWarning",
]
