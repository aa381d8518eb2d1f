"""
Shared fixtures for variance table tests.

Tables mirror the layout of the result objects that common variance
analysis routines print: linear-model ANOVA tables, model comparisons,
variance-homogeneity tests, mixed-model effect tables, aov summaries and
multivariate repeated-measures results.
"""

import numpy as np
import pytest

from anovatab.arrange import (
    GenericAnovaTable,
    LabeledTable,
    MultiStratumSummary,
    MultivariateSphericityResult,
    SingleStratumSummary,
)

NA = np.nan


# =====================================================================
# Generic ANOVA tables
# =====================================================================


@pytest.fixture
def lm_anova():
    """Sequential ANOVA of a linear model with two predictors."""
    return GenericAnovaTable.from_columns(
        {
            'Df': [1, 1, 27],
            'Sum Sq': [52.5, 10.25, 135.0],
            'Mean Sq': [52.5, 10.25, 5.0],
            'F value': [10.5, 2.05, NA],
            'Pr(>F)': [0.0031, 0.1637, NA],
        },
        row_names=['x', 'z', 'Residuals'],
        heading=('Analysis of Variance Table\n', 'Response: y'),
    )


@pytest.fixture
def levene_table():
    """Variance-homogeneity test; no sums of squares."""
    return GenericAnovaTable.from_columns(
        {
            'Df': [2, 27],
            'F value': [3.12, NA],
            'Pr(>F)': [0.0604, NA],
        },
        row_names=['group', ' '],
        heading="Levene's Test for Homogeneity of Variance (center = median)",
    )


@pytest.fixture
def satterthwaite_table():
    """Fixed-effects table with Satterthwaite denominator df."""
    return GenericAnovaTable.from_columns(
        {
            'Sum Sq': [40.2, 12.8],
            'Mean Sq': [40.2, 6.4],
            'NumDF': [1, 2],
            'DenDF': [17.93, 35.21],
            'F value': [8.04, 1.28],
            'Pr(>F)': [0.0111, 0.2905],
        },
        row_names=['treatment', 'time'],
        heading='Type III Analysis of Variance Table with Satterthwaite\'s method',
    )


@pytest.fixture
def kenward_roger_table():
    """Mixed-model effect table with term labels in an 'Effect' column."""
    return GenericAnovaTable.from_columns(
        {
            'Effect': ['treatment', 'time', 'treatment:time'],
            'num Df': [1, 2, 2],
            'den Df': [18.0, 36.0, 36.0],
            'F': [8.04, 1.28, 0.51],
            'Pr(>F)': [0.0111, 0.2905, 0.6050],
        },
        row_names=['1', '2', '3'],
    )


@pytest.fixture
def bootstrap_table():
    """Parametric-bootstrap table with a competing asymptotic p value."""
    return GenericAnovaTable.from_columns(
        {
            'Effect': ['treatment', 'time'],
            'Chisq': [7.45, 2.61],
            'Chi Df': [1, 2],
            'Pr(>Chisq)': [0.0063, 0.2711],
            'Pr(>PB)': [0.0110, 0.2950],
        },
        row_names=['1', '2'],
    )


@pytest.fixture
def lrt_table():
    """Likelihood-ratio table with both model df and chi-square df."""
    return GenericAnovaTable.from_columns(
        {
            'Effect': ['treatment', 'time'],
            'Df': [6, 5],
            'Chisq': [7.45, 2.61],
            'Chi Df': [1, 2],
            'Pr(>Chisq)': [0.0063, 0.2711],
        },
        row_names=['1', '2'],
    )


@pytest.fixture
def comparison_two_models():
    """Nested comparison of two linear models."""
    return GenericAnovaTable.from_columns(
        {
            'Res.Df': [22, 21],
            'RSS': [400.0, 300.0],
            'Df': [NA, 1],
            'Sum of Sq': [NA, 100.0],
            'F': [NA, 7.0],
            'Pr(>F)': [NA, 0.015],
        },
        row_names=['1', '2'],
        heading=(
            'Analysis of Variance Table\n',
            'Model 1: y ~ x\nModel 2: y ~ x + z',
        ),
    )


@pytest.fixture
def comparison_three_models_descending():
    """Three models listed from largest to smallest; Df differences negative."""
    return GenericAnovaTable.from_columns(
        {
            'Res.Df': [20, 21, 23],
            'RSS': [280.0, 300.0, 360.0],
            'Df': [NA, -1, -2],
            'Sum of Sq': [NA, -20.0, -60.0],
            'F': [NA, 1.43, 2.14],
            'Pr(>F)': [NA, 0.246, 0.144],
        },
        row_names=['1', '2', '3'],
        heading=(
            'Analysis of Variance Table\n',
            'Model 1: y ~ x * z\nModel 2: y ~ x + z\nModel 3: y ~ x',
        ),
    )


# =====================================================================
# aov summaries
# =====================================================================


@pytest.fixture
def npk_stratum():
    """Randomized block factorial design (block + N*P*K), one stratum."""
    return SingleStratumSummary.from_columns(
        {
            'Df': [5, 1, 1, 1, 1, 1, 1, 12],
            'Sum Sq': [343.295, 189.282, 8.402, 95.202, 21.282, 33.135, 0.482, 185.287],
            'Mean Sq': [68.659, 189.282, 8.402, 95.202, 21.282, 33.135, 0.482, 15.441],
            'F value': [4.447, 12.259, 0.544, 6.166, 1.378, 2.146, 0.031, NA],
            'Pr(>F)': [0.01594, 0.00437, 0.47490, 0.02880, 0.26317, 0.16865, 0.86275, NA],
        },
        row_names=['block      ', 'N          ', 'P          ', 'K          ',
                   'N:P        ', 'N:K        ', 'P:K        ', 'Residuals  '],
    )


@pytest.fixture
def subject_stratum():
    """Between-subjects stratum with no between-subjects terms."""
    return SingleStratumSummary.from_columns(
        {
            'Df': [9],
            'Sum Sq': [120.5],
            'Mean Sq': [13.389],
            'F value': [NA],
            'Pr(>F)': [NA],
        },
        row_names=['Residuals'],
    )


@pytest.fixture
def within_stratum():
    """Within-subjects stratum: one 3-level factor."""
    return SingleStratumSummary.from_columns(
        {
            'Df': [2, 18],
            'Sum Sq': [80.0, 36.0],
            'Mean Sq': [40.0, 2.0],
            'F value': [20.0, NA],
            'Pr(>F)': [2.6e-05, NA],
        },
        row_names=['time       ', 'Residuals  '],
    )


@pytest.fixture
def block_stratum():
    """Block stratum of the blocked factorial design."""
    return SingleStratumSummary.from_columns(
        {
            'Df': [1, 4],
            'Sum Sq': [37.0, 306.3],
            'Mean Sq': [37.0, 76.57],
            'F value': [0.483, NA],
            'Pr(>F)': [0.525, NA],
        },
        row_names=['N:P:K', 'Residuals'],
    )


@pytest.fixture
def rm_aovlist(subject_stratum, within_stratum):
    return MultiStratumSummary.from_strata({
        'Error: id': subject_stratum,
        'Error: id:time': within_stratum,
    })


@pytest.fixture
def npk_aovlist(block_stratum, npk_stratum):
    return MultiStratumSummary.from_strata({
        'Error: block': block_stratum,
        'Error: Within': npk_stratum,
    })


# =====================================================================
# Multivariate repeated measures
# =====================================================================

MLM_TERMS = ['(Intercept)', 'treatment', 'phase', 'treatment:phase']


@pytest.fixture
def mlm_univariate():
    return LabeledTable.from_columns(
        {
            'Sum Sq': [7260.0, 211.29, 167.50, 78.67],
            'num Df': [1, 2, 2, 4],
            'Error SS': [228.06, 228.06, 80.15, 80.15],
            'den Df': [13, 13, 26, 26],
            'F value': [413.85, 6.02, 27.17, 6.38],
            'Pr(>F)': [2.0e-11, 0.0142, 4.0e-07, 0.0010],
        },
        row_names=MLM_TERMS,
    )


@pytest.fixture
def mlm_sphericity():
    return LabeledTable.from_columns(
        {
            'Test statistic': [0.7493, 0.7493],
            'p-value': [0.1860, 0.1860],
        },
        row_names=['phase', 'treatment:phase'],
    )


@pytest.fixture
def mlm_adjustments():
    """GG epsilons below 1; HF epsilon of phase above 1."""
    return LabeledTable.from_columns(
        {
            'GG eps': [0.7997, 0.7997],
            'Pr(>F[GG])': [3.2e-06, 0.0026],
            'HF eps': [1.0575, 0.9342],
            'Pr(>F[HF])': [4.0e-07, 0.0014],
        },
        row_names=['phase', 'treatment:phase'],
    )


@pytest.fixture
def mlm_result(mlm_univariate, mlm_sphericity, mlm_adjustments):
    return MultivariateSphericityResult.from_tables(
        univariate_tests=mlm_univariate,
        sphericity_tests=mlm_sphericity,
        pval_adjustments=mlm_adjustments,
    )


@pytest.fixture
def mlm_two_levels(mlm_univariate):
    """Only two-level repeated factors: empty sphericity tests."""
    empty = LabeledTable.from_columns(
        {'Test statistic': [], 'p-value': []},
        row_names=[],
    )
    return MultivariateSphericityResult.from_tables(
        univariate_tests=mlm_univariate,
        sphericity_tests=empty,
        pval_adjustments=None,
    )
