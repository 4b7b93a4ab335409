"""Central configuration dataclass for truth-table enumeration and rendering.

Settings live in a single frozen dataclass so they can be passed around as
one object.  Functions that take a `config` argument treat None as Config().
"""

from __future__ import annotations

from dataclasses import dataclass

# 2**20 rows is about a million evaluations; beyond that exhaustive
# enumeration is not what the caller wants.
_DEFAULT_MAX_ENUM_INPUTS: int = 20
_COUNTER_BITS: int = 63


@dataclass(frozen=True)
class Config:
    """Frozen settings for enumeration and table formatting.

    Groups:
        Enumeration: max_enum_inputs
        Formatting:  input_prefix, output_label, column_width
    """
    # --- Enumeration ---
    max_enum_inputs: int = _DEFAULT_MAX_ENUM_INPUTS  # largest input_count evaluate_all accepts

    # --- Formatting ---
    input_prefix: str = "I"     # input column labels are I0, I1, ...
    output_label: str = "O1"
    column_width: int = 4       # width of every column except the last

    def __post_init__(self):
        # Rows are counted in an int64; the counter must fit with its sign bit
        if not 0 <= self.max_enum_inputs < _COUNTER_BITS:
            raise ValueError(f"max_enum_inputs must be in [0, {_COUNTER_BITS})")
        if self.column_width < 2:
            raise ValueError("column_width must be >= 2")

    @property
    def max_enum_rows(self) -> int:
        """Largest number of truth-table rows evaluate_all will produce."""
        return 1 << self.max_enum_inputs
