"""
Generic result container for anovatab.

The Result class provides a standardized envelope around the reshaped
table payload. Reshapers record metadata about the source object in info
and every non-fatal diagnostic they emitted in warnings, so callers can
inspect them without installing a warnings filter.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (source variant, strata, epsilons)
    - Immutable (frozen=True); a new envelope is built for every call
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a reshaping call.

    Type Parameters:
        P: The payload type

    Attributes:
        params: The reshaped payload
        info: Structured metadata (source variant, strata, clamping)
        warnings: Non-fatal issues encountered while reshaping

    Examples:
        >>> Result(
        ...     params=VarianceTableParams(rows=rows, columns=cols),
        ...     info={'source': 'SingleStratumSummary'},
        ... )
    """
    params: P
    info: dict[str, Any] = field(default_factory=dict)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
