"""
engcalcs - small engineering calculators.

- Roll hoop: body hole offsets from measured leg angles
- Beam: deflection check for simply supported steel and timber beams

Example:
    >>> from engcalcs import get_dataset, resolve_design, to_summary
    >>>
    >>> design = resolve_design(get_dataset("gd427"))
    >>> print(to_summary(design))
    >>>
    >>> from engcalcs import get_section, point_load_calc, kg_to_newtons
    >>> point_load_calc(get_section("UB127x76x13"), kg_to_newtons(1000), 2500).is_deflection_safe
    True

Note: All imports are lazy-loaded. The beam calculator can be imported
without the roll-hoop modules and neither imports matplotlib.
"""

__version__ = "1.0.0"

# Define which names come from which submodule

_ENUMS = {"Side", "Leg", "Axis", "Material"}

_IO = {
    "AngleMeasurement",
    "Plane",
    "HoopSide",
    "HoopConfiguration",
    "HeightTable",
    "HoopGeometry",
    "HoopDesign",
    "iter_measurements",
    "load_hoop_design_json",
    "save_hoop_design_json",
}

_ROLLHOOP = {
    "angle_to_offset",
    "resolve_offsets",
    "resolve_design",
    "is_resolved",
    "layout_side",
    "validate_configuration",
    "Severity",
    "ValidationResult",
    "horizontal_label",
    "vertical_label",
    "to_summary",
    "to_markdown",
    "get_dataset",
    "list_datasets",
}

_BEAM = {
    "UniversalBeam",
    "TimberSection",
    "get_section",
    "BeamResult",
    "kg_to_newtons",
    "beam_calc",
    "point_load_calc",
    "udl_calc",
    "pretty_print",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    if name in _ROLLHOOP:
        if "rollhoop" not in _modules:
            from . import rollhoop
            _modules["rollhoop"] = rollhoop
        return getattr(_modules["rollhoop"], name)

    if name in _BEAM:
        if "beam" not in _modules:
            from . import beam
            _modules["beam"] = beam
        return getattr(_modules["beam"], name)

    raise AttributeError(f"module 'engcalcs' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Enums (lazy loaded from enums)
    "Side",
    "Leg",
    "Axis",
    "Material",

    # Data model (lazy loaded from io)
    "AngleMeasurement",
    "Plane",
    "HoopSide",
    "HoopConfiguration",
    "HeightTable",
    "HoopGeometry",
    "HoopDesign",
    "iter_measurements",
    "load_hoop_design_json",
    "save_hoop_design_json",

    # Roll hoop (lazy loaded from rollhoop)
    "angle_to_offset",
    "resolve_offsets",
    "resolve_design",
    "is_resolved",
    "layout_side",
    "validate_configuration",
    "Severity",
    "ValidationResult",
    "horizontal_label",
    "vertical_label",
    "to_summary",
    "to_markdown",
    "get_dataset",
    "list_datasets",

    # Beam (lazy loaded from beam)
    "UniversalBeam",
    "TimberSection",
    "get_section",
    "BeamResult",
    "kg_to_newtons",
    "beam_calc",
    "point_load_calc",
    "udl_calc",
    "pretty_print",
]
