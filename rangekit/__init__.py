"""
rangekit - Bounded Values and Normalized Transfer Curves
========================================================

A small numeric core for interactive applications that keep scalars and
2D/3D vectors inside well-defined ranges and reshape normalized values
through reusable curves.

Key Features
------------
- Linear range mapping for scalars and per-axis for vectors
- Clamping with optional borders, component-wise or by vector magnitude
- Angle helpers: reflex angles and circle-sector lookup for 2D directions
- Grid snapping and parity tests
- Transfer functions on [0, 1] (exponential, cosine ease, inversion)
- Immutable self-clamping value types: BoundedInt, BoundedFloat, UnitFloat

Quick Start
-----------
>>> from rangekit import BoundedInt, UnitFloat, map_range, transfer_invert
>>>
>>> BoundedInt(15, 0, 10).value
10
>>> (UnitFloat(0.75) + 0.5).value
1.0
>>> map_range(5.0, 0.0, 10.0, 100.0, 200.0)
150.0
>>> transfer_invert(0.25)
0.75

Modules
-------
- assurance: NaN and unit-range guards
- numeric: mapping, clamping, angles and grid primitives
- transfer: transfer functions for normalized values
- bounded: bounded value types
- errors: exception hierarchy
"""

from .errors import (
    NumericError,
    InvalidNumericState,
    RangeViolation,
    DegenerateDomain,
    InvalidBounds,
    InvalidArgument,
    ZeroMagnitude,
)
from .assurance import assure_not_nan, assure_in_range_01
from .numeric import (
    map_range,
    map_from_unit,
    map_to_unit,
    clamp,
    clamp_unit,
    clamp_magnitude,
    reflex_angle,
    signed_angle,
    direction_angle,
    quadrant_index,
    snap,
    is_on_grid,
    is_even,
)
from .transfer import (
    transfer_exponential,
    transfer_cos,
    transfer_invert,
    chain_transfers,
)
from .bounded import BoundedNumber, BoundedFloat, BoundedInt, UnitFloat

__version__ = "1.0.0"

__all__ = [
    # errors
    "NumericError",
    "InvalidNumericState",
    "RangeViolation",
    "DegenerateDomain",
    "InvalidBounds",
    "InvalidArgument",
    "ZeroMagnitude",
    # assurance
    "assure_not_nan",
    "assure_in_range_01",
    # numeric primitives
    "map_range",
    "map_from_unit",
    "map_to_unit",
    "clamp",
    "clamp_unit",
    "clamp_magnitude",
    "reflex_angle",
    "signed_angle",
    "direction_angle",
    "quadrant_index",
    "snap",
    "is_on_grid",
    "is_even",
    # transfer functions
    "transfer_exponential",
    "transfer_cos",
    "transfer_invert",
    "chain_transfers",
    # bounded value types
    "BoundedNumber",
    "BoundedFloat",
    "BoundedInt",
    "UnitFloat",
    # version
    "__version__",
]
