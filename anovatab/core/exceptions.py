"""
Exception and warning hierarchy for anovatab.

All exceptions inherit from AnovaTabError to allow catching any
library-specific error. Non-fatal conditions are reported through
AnovaTabWarning subclasses so they can be filtered with the standard
warnings machinery.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class AnovaTabError(Exception):
    """Base exception for all anovatab errors."""
    pass


class ValidationError(AnovaTabError):
    """
    Input validation failed.

    Raised when a result object or argument fails validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Column lengths are incorrect or inconsistent.

    Raised when the columns of a table do not match its row count.
    """
    pass


class UnsupportedVariantError(AnovaTabError):
    """
    No reshaper is registered for the object passed to arrange_anova().

    Attributes:
        variant: Class name of the unsupported object
    """

    def __init__(self, message: str, variant: str | None = None):
        super().__init__(message)
        self.variant = variant


class UnsupportedCorrectionError(ValidationError):
    """
    Sphericity correction is not one of the supported methods.

    Attributes:
        correction: The value that was passed
        supported: The accepted values
    """

    def __init__(
        self,
        message: str,
        correction: object = None,
        supported: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.correction = correction
        self.supported = supported


class MultivariateUnsupportedError(AnovaTabError):
    """
    Multivariate result without univariate tests.

    Pure multivariate test statistics cannot be expressed as a variance
    table.

    Attributes:
        suggestion: Alternative the caller can use instead
    """

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(message)
        self.suggestion = suggestion


class MultipleResidualRowsError(ValidationError):
    """
    More than one residual row where exactly one is expected.

    Attributes:
        n_residual_rows: Number of residual rows found
        row_names: Labels of the offending rows
    """

    def __init__(
        self,
        message: str,
        n_residual_rows: int,
        row_names: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.n_residual_rows = n_residual_rows
        self.row_names = row_names


class AnovaTabWarning(UserWarning):
    """Base class for non-fatal anovatab diagnostics."""
    pass


class UnmappedColumnWarning(AnovaTabWarning):
    """Columns without a canonical name were dropped from the output."""
    pass


class EpsilonClampedNotice(AnovaTabWarning):
    """Huynh-Feldt epsilon above 1 was treated as 1."""
    pass


class MissingResidualWarning(AnovaTabWarning):
    """Stratum has no trailing residual row; error terms are missing."""
    pass
