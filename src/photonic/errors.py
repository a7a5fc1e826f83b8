"""
Error and Warning Categories
============================

InvalidArgumentError       - malformed polarization, geometry or metric shapes
DegenerateInputError       - seed state with null metric norm
NumericalPrecisionWarning  - raw b² fell below -small before sign correction

Recurrence termination is NOT an error: step() returning False is the
modeled end of a Haydock sequence.
"""


class InvalidArgumentError(ValueError):
    """Malformed input or shape mismatch between provider outputs and dims."""


class DegenerateInputError(ValueError):
    """The seed state has zero norm under the metric."""


class NumericalPrecisionWarning(RuntimeWarning):
    """A Haydock b² came out more negative than the tolerance allows."""
