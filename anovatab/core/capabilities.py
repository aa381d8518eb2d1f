"""
Capability flags for generic ANOVA tables.

This module is the SINGLE SOURCE OF TRUTH for the column-set probes that
decide how a generic ANOVA table is reshaped. Flags are derived once from
the table's columns and heading, before any renaming happens.

Usage:
    from anovatab.core.capabilities import (
        CAPABILITY_PARAMETRIC_BOOTSTRAP,
        table_capabilities,
    )

    caps = table_capabilities(table.column_names, table.heading)
    if CAPABILITY_PARAMETRIC_BOOTSTRAP in caps:
        ...
"""

from collections.abc import Iterable

# Parametric-bootstrap table: asymptotic chi-square df next to bootstrap p
CAPABILITY_PARAMETRIC_BOOTSTRAP = 'parametric_bootstrap'

# Both chi-square df and ordinary df are present
CAPABILITY_CHISQ_DF = 'chisq_df'

# Term labels are stored in an 'Effect' column rather than row names
CAPABILITY_EFFECT_LABELS = 'effect_labels'

# Heading announces a comparison of nested models
CAPABILITY_MODEL_COMPARISON = 'model_comparison'


def table_capabilities(
    column_names: Iterable[str],
    heading: Iterable[str] = (),
) -> frozenset[str]:
    """
    Derive the capability flags of a generic ANOVA table.

    Args:
        column_names: Column labels of the source table
        heading: Heading lines attached to the source table

    Returns:
        frozenset of capability strings
    """
    names = set(column_names)
    caps: set[str] = set()

    if 'Chi Df' in names and 'Pr(>PB)' in names:
        caps.add(CAPABILITY_PARAMETRIC_BOOTSTRAP)
    if 'Chi Df' in names and 'Df' in names:
        caps.add(CAPABILITY_CHISQ_DF)
    if 'Effect' in names:
        caps.add(CAPABILITY_EFFECT_LABELS)
    # Both markers must appear in the same heading element
    if any('Model 1' in line and 'Model 2' in line for line in heading):
        caps.add(CAPABILITY_MODEL_COMPARISON)

    return frozenset(caps)


__all__ = [
    'CAPABILITY_PARAMETRIC_BOOTSTRAP',
    'CAPABILITY_CHISQ_DF',
    'CAPABILITY_EFFECT_LABELS',
    'CAPABILITY_MODEL_COMPARISON',
    'table_capabilities',
]
