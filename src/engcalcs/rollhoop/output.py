"""Output formatters for resolved roll-hoop designs.

Turns resolved offsets into direction labels, a console summary, a
markdown sheet for the workshop and JSON. Formatters only read the
'absolute' values; rounding to whole millimetres happens here and
nowhere else.
"""

import json
from math import floor, isfinite
from typing import List, Optional, TYPE_CHECKING

from ..enums import Axis, Leg, Side
from ..io import HoopDesign
from ..io.schema import SCHEMA_VERSION
from .core import is_resolved

if TYPE_CHECKING:
    from .validation import ValidationResult

LEG_NAMES = {
    Leg.OUTER: "Outer leg",
    Leg.INNER: "Inner leg",
    Leg.REAR: "Rear leg",
}

AXIS_NAMES = {
    Axis.FRONT_TO_BACK: "Front to back",
    Axis.NS_TO_OS: "Nearside to offside",
}


def round_mm(value: float) -> int:
    """Round half up to the nearest millimetre (2.5 -> 3, -2.5 -> -2)."""
    if not isfinite(value):
        raise ValueError(f"Cannot round non-finite offset {value}")
    return int(floor(value + 0.5))


def offset_label(value: float) -> str:
    """Offset as whole millimetres, e.g. '12mm'."""
    if not isfinite(value):
        return f"{'-' if value < 0 else ''}∞mm"
    return f"{round_mm(value)}mm"


def _directional(value: float, level: str, positive: str, negative: str) -> str:
    if not isfinite(value):
        return f"{positive if value > 0 else negative} ∞mm"
    rounded = round_mm(value)
    if rounded == 0:
        return level
    arrow = positive if rounded > 0 else negative
    return f"{arrow} {abs(rounded)}mm"


def horizontal_label(x: float) -> str:
    """Nearside-to-offside offset: '→ 12mm', '← 12mm' or '↔ level'."""
    return _directional(x, "↔ level", "→", "←")


def vertical_label(y: float) -> str:
    """Front-to-back offset: '↓ 12mm' (rearward), '↑ 12mm' or '↕ level'."""
    return _directional(y, "↕ level", "↓", "↑")


def _check_resolved(design: HoopDesign) -> None:
    if not is_resolved(design.configuration):
        raise ValueError("Design has unresolved offsets - call resolve_design() first")


def _validation_to_dict(validation: "ValidationResult") -> dict:
    def messages(items):
        return [
            {
                'severity': msg.severity.value,
                'code': msg.code,
                'message': msg.message,
                'suggestion': msg.suggestion
            }
            for msg in items
        ]

    return {
        'valid': validation.valid,
        'errors': messages(validation.errors),
        'warnings': messages(validation.warnings),
        'infos': messages(validation.infos),
    }


def to_json(
    design: HoopDesign,
    validation: Optional["ValidationResult"] = None,
    indent: int = 2
) -> str:
    """Convert a resolved HoopDesign to a JSON string.

    Adds a 'labels' section with the rounded direction labels for each leg
    and, if given, the validation findings.
    """
    _check_resolved(design)

    design_dict = design.model_dump(mode='json')
    design_dict['schema_version'] = SCHEMA_VERSION

    labels = {}
    for side in Side:
        hoop_side = design.configuration.side(side)
        labels[side.value] = {
            leg.value: {
                'ns_to_os': horizontal_label(hoop_side.plane(leg).ns_to_os.absolute),
                'front_to_back': vertical_label(hoop_side.plane(leg).front_to_back.absolute),
            }
            for leg in Leg
        }
    design_dict['labels'] = labels

    if validation:
        design_dict['validation'] = _validation_to_dict(validation)

    return json.dumps(design_dict, indent=indent, ensure_ascii=False)


def to_markdown(
    design: HoopDesign,
    validation: Optional["ValidationResult"] = None
) -> str:
    """Convert a resolved HoopDesign to a markdown drilling sheet."""
    _check_resolved(design)

    heights = design.heights
    geometry = design.geometry

    md = "# Roll Hoop Body Hole Offsets\n\n"
    if design.name:
        md += f"**Measurement set:** {design.name}\n\n"

    md += "## Setup\n\n"
    md += "| Parameter | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Outer leg height to hole | {heights.outer_leg:.1f} mm |\n"
    md += f"| Inner leg height to hole | {heights.inner_leg:.1f} mm |\n"
    md += f"| Rear leg height to hole | {heights.rear_leg:.1f} mm |\n"
    md += f"| Front leg spacing | {geometry.front_leg_spacing_mm:.1f} mm |\n"
    md += f"| Rear leg offset | {geometry.rear_leg_offset_mm:.3f} mm |\n"
    md += f"| Front leg diameter | {geometry.front_leg_diameter_mm:.1f} mm |\n"
    md += f"| Rear leg diameter | {geometry.rear_leg_diameter_mm:.1f} mm |\n\n"

    for side in Side:
        hoop_side = design.configuration.side(side)
        md += f"## {side.value.title()}\n\n"
        md += "| Leg | Axis | Angle | Offset | Move hole |\n"
        md += "|-----|------|-------|--------|-----------|\n"
        for leg in Leg:
            plane = hoop_side.plane(leg)
            for axis in Axis:
                measurement = plane.measurement(axis)
                if axis == Axis.NS_TO_OS:
                    direction = horizontal_label(measurement.absolute)
                else:
                    direction = vertical_label(measurement.absolute)
                md += (
                    f"| {LEG_NAMES[leg]} | {AXIS_NAMES[axis]} | {measurement.angle:.2f}° "
                    f"| {measurement.absolute:.3f} mm | {direction} |\n"
                )
        md += "\n"

    if validation:
        md += "## Validation\n\n"

        if validation.valid:
            md += "**Status:** ✅ Measurements are usable\n\n"
        else:
            md += "**Status:** ❌ Measurements have errors\n\n"

        if validation.errors:
            md += "### Errors\n\n"
            for msg in validation.errors:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.warnings:
            md += "### Warnings\n\n"
            for msg in validation.warnings:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.infos:
            md += "### Information\n\n"
            for msg in validation.infos:
                md += f"- {msg.message}\n"
            md += "\n"

    md += "## Notes\n\n"
    md += "- Angles are measured from horizontal; a vertical leg reads ±90°\n"
    md += "- Offsets are from the plumb hole position; directions are rounded to the nearest mm\n"
    md += "- → moves the hole towards the offside, ↓ moves it rearward\n\n"

    md += "---\n"
    md += "*Generated by engcalcs roll hoop calculator*\n"

    return md


def to_summary(
    design: HoopDesign,
    validation: Optional["ValidationResult"] = None
) -> str:
    """Convert a resolved HoopDesign to a short console summary."""
    _check_resolved(design)

    heights = design.heights
    title = f"═══ Roll Hoop Offsets: {design.name} ═══" if design.name else "═══ Roll Hoop Offsets ═══"

    lines: List[str] = [
        title,
        f"Height to hole: outer {heights.outer_leg:g} mm | "
        f"inner {heights.inner_leg:g} mm | rear {heights.rear_leg:g} mm",
    ]

    for side in Side:
        hoop_side = design.configuration.side(side)
        lines.extend(["", f"{side.value.title()}:"])
        for leg in Leg:
            plane = hoop_side.plane(leg)
            lines.append(
                f"  {LEG_NAMES[leg]:<10} {horizontal_label(plane.ns_to_os.absolute):<10} "
                f"{vertical_label(plane.front_to_back.absolute):<10} "
                f"(ns-os {plane.ns_to_os.angle:.2f}°, f-b {plane.front_to_back.angle:.2f}°)"
            )

    if validation and validation.messages:
        lines.extend(["", "Validation:"])
        for msg in validation.messages:
            lines.append(f"  [{msg.severity.value.upper()}] {msg.code}: {msg.message}")

    return "\n".join(lines)
