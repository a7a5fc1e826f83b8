"""
Physics Layer Constants
=======================

Numerical thresholds and defaults used across photonic modules.
Centralizing these prevents magic number proliferation.

Jan 2026
"""

# ---------------------------------------------------------------------
# RECURRENCE DEFAULTS
# ---------------------------------------------------------------------

# Tolerance `small` for the Haydock recurrence.
# b² below this ends the recurrence (generated state is numerically null);
# a raw b² below -small triggers NumericalPrecisionWarning.
DEFAULT_SMALL = 1e-7

# Maximum number of Haydock steps taken by AllH when nh is not given
DEFAULT_NH = 50

# ---------------------------------------------------------------------
# RETARDED METRIC DEFAULTS
# ---------------------------------------------------------------------

# Host dielectric function (vacuum)
DEFAULT_EPSILON = 1.0

# Relative margin for |ε q² - |k+G|²|: closer than this to the light cone
# the metric denominator is treated as vanishing.
LIGHT_CONE_MARGIN = 1e-10
