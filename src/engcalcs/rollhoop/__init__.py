"""
Roll Hoop Offset Calculator - body hole positions from measured leg angles.

Example:
    >>> from engcalcs.rollhoop import get_dataset, resolve_design, to_summary
    >>>
    >>> design = resolve_design(get_dataset("gd427"))
    >>> print(to_summary(design))
"""

from .core import (
    DEFAULT_HEIGHTS,
    angle_to_offset,
    resolve_offsets,
    resolve_design,
    is_resolved,
    get_offset,
)

from .layout import (
    LegLayout,
    SideLayout,
    plumb_positions,
    layout_side,
)

from .validation import (
    validate_configuration,
    Severity,
    ValidationMessage,
    ValidationResult,
)

from .output import (
    round_mm,
    offset_label,
    horizontal_label,
    vertical_label,
    to_json,
    to_markdown,
    to_summary,
)

from .datasets import (
    DEFAULT_DATASET,
    get_dataset,
    list_datasets,
)

__all__ = [
    # Resolver
    "DEFAULT_HEIGHTS",
    "angle_to_offset",
    "resolve_offsets",
    "resolve_design",
    "is_resolved",
    "get_offset",

    # Layout
    "LegLayout",
    "SideLayout",
    "plumb_positions",
    "layout_side",

    # Validation
    "validate_configuration",
    "Severity",
    "ValidationMessage",
    "ValidationResult",

    # Output formatters
    "round_mm",
    "offset_label",
    "horizontal_label",
    "vertical_label",
    "to_json",
    "to_markdown",
    "to_summary",

    # Datasets
    "DEFAULT_DATASET",
    "get_dataset",
    "list_datasets",
]
