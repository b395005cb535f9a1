"""
engcalcs IO - roll-hoop data model, JSON loaders and schema checks.

Example:
    >>> from engcalcs.io import load_hoop_design_json, save_hoop_design_json
    >>> from engcalcs.rollhoop import resolve_design
    >>>
    >>> design = resolve_design(load_hoop_design_json("hoop.json"))
    >>> save_hoop_design_json(design, "hoop_resolved.json")
"""

from .loaders import (
    AngleMeasurement,
    Plane,
    HoopSide,
    HoopConfiguration,
    HeightTable,
    HoopGeometry,
    HoopDesign,
    iter_measurements,
    load_hoop_design_json,
    save_hoop_design_json,
)

from .schema import (
    SCHEMA_VERSION,
    validate_json_schema,
)

__all__ = [
    # Data model
    "AngleMeasurement",
    "Plane",
    "HoopSide",
    "HoopConfiguration",
    "HeightTable",
    "HoopGeometry",
    "HoopDesign",
    "iter_measurements",

    # Loaders
    "load_hoop_design_json",
    "save_hoop_design_json",

    # Schema
    "SCHEMA_VERSION",
    "validate_json_schema",
]
