"""
Photonic Layer
==============

Built on top of grid_math (pure periodic-grid numerics).

Modules:
    constants - Tolerances and defaults
    errors    - Error and warning categories
    geometry  - Characteristic function of a periodic two-component medium
    metric    - Metric providers (array, identity, retarded)
    operator  - Operator application ψ -> F[B F⁻¹[g ψ]]
    one_h     - Haydock recurrence, one step at a time
    all_h     - In-memory collector of the full coefficient sequence

Classes:
    RetardedOneH - Incremental Haydock engine (main entry point)
    AllH         - Runs RetardedOneH and stores a, b², b, c, g sequences

Jan 2026
"""

# Constants (import first, used by other modules)
from .constants import (
    DEFAULT_SMALL,
    DEFAULT_NH,
    DEFAULT_EPSILON,
    LIGHT_CONE_MARGIN,
)

from .errors import (
    InvalidArgumentError,
    DegenerateInputError,
    NumericalPrecisionWarning,
)

# Geometry and metric providers
from .geometry import (
    Geometry,
    build_inclusion_geometry,
    build_layered_geometry,
)

from .metric import (
    ArrayMetric,
    RetardedMetric,
    identity_metric,
    scaled_metric,
)

# Recurrence
from .operator import apply_operator, check_metric_shapes
from .one_h import RetardedOneH
from .all_h import AllH
