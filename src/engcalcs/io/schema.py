"""
JSON schema helpers for roll-hoop design files.

A design file holds a 'configuration' tree (nearside/offside -> outer_leg,
inner_leg, rear_leg -> front_to_back, ns_to_os -> angle) plus optional
'heights' and 'geometry' sections. A bare configuration tree is also
accepted. The Pydantic models in loaders.py do the full validation; this
module gives quick structural feedback on raw, already-parsed JSON.
"""

from typing import Any, Dict, List

SCHEMA_VERSION = "1.0"

SIDE_KEYS = ("nearside", "offside")

# snake_case first, then the camelCase spelling of older files
LEG_KEYS = (("outer_leg", "outerLeg"), ("inner_leg", "innerLeg"), ("rear_leg", "rearLeg"))
AXIS_KEYS = (("front_to_back", "frontToBack"), ("ns_to_os", "nsToOs"))


def _first_present(data: Dict, names) -> Any:
    for name in names:
        if name in data:
            return data[name]
    return None


def validate_json_schema(data: Dict) -> Dict[str, Any]:
    """
    Check raw design JSON for missing sections and non-numeric angles.

    Returns:
        {
            "valid": bool,
            "errors": List[str],
            "warnings": List[str],
            "schema_version": str
        }
    """
    errors: List[str] = []
    warnings: List[str] = []

    schema_version = data.get("schema_version", "unknown")
    if schema_version == "unknown":
        warnings.append("Missing 'schema_version' field (assuming bare measurement file)")
    elif schema_version != SCHEMA_VERSION:
        warnings.append(f"Schema version {schema_version} != current {SCHEMA_VERSION}")

    configuration = data.get("configuration", data)

    for side in SIDE_KEYS:
        side_data = configuration.get(side)
        if side_data is None:
            errors.append(f"Missing required section: '{side}'")
            continue
        for leg_names in LEG_KEYS:
            leg_data = _first_present(side_data, leg_names)
            if leg_data is None:
                errors.append(f"Missing leg '{leg_names[0]}' in '{side}'")
                continue
            for axis_names in AXIS_KEYS:
                axis_data = _first_present(leg_data, axis_names)
                path = f"{side}.{leg_names[0]}.{axis_names[0]}"
                if axis_data is None:
                    errors.append(f"Missing plane '{path}'")
                    continue
                angle = axis_data.get("angle")
                if angle is None:
                    errors.append(f"Missing 'angle' at '{path}'")
                elif isinstance(angle, bool) or not isinstance(angle, (int, float)):
                    errors.append(f"Angle at '{path}' must be a number, got {angle!r}")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
        "schema_version": schema_version
    }
