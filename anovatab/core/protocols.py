"""
Core protocols for anovatab.

These define structural interfaces for collaborators that live outside the
reshaping core. We use Protocol (structural typing) rather than ABC
(nominal typing) so that any callable with the right shape can be plugged
in without inheriting from anything.

Design Principles:
    - Minimal contracts: prescribe only what the reshapers read
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, runtime_checkable

S = TypeVar('S', contravariant=True)  # Summary type consumed
R = TypeVar('R', covariant=True)      # Row type produced


@runtime_checkable
class TidyRecord(Protocol):
    """
    One per-term row produced by a tidier.

    The reshapers read exactly these attributes; missing values are NaN.
    """

    @property
    def term(self) -> str:
        ...

    @property
    def df(self) -> float:
        ...

    @property
    def sumsq(self) -> float:
        ...

    @property
    def meansq(self) -> float:
        ...

    @property
    def statistic(self) -> float:
        ...

    @property
    def p_value(self) -> float:
        ...


@runtime_checkable
class Tidier(Protocol[S, R]):
    """
    Converts a single-stratum summary into flat per-term rows.

    Tidiers are stateless: the same summary always yields the same rows,
    in source order, with the residual row (if any) last.

    Type Parameters:
        S: The summary type accepted
        R: The row type produced (must satisfy TidyRecord)
    """

    def __call__(self, summary: S) -> tuple[R, ...]:
        """
        Flatten the summary.

        Args:
            summary: One stratum of a variance analysis

        Returns:
            Tuple of per-term rows in source order
        """
        ...
