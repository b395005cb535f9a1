"""
Roll Hoop Calculator - Validation Rules

Checks measured angles and resolved offsets for values that make the
offset meaningless (zero or beyond-vertical angles) or suspicious
(shallow legs, holes that miss the plumb hole entirely).

The resolver itself never raises on bad angles; this module is where
they are reported.
"""

from dataclasses import dataclass, field
from enum import Enum
from math import isfinite, hypot
from typing import List, Optional

from ..constants import SHALLOW_ANGLE_WARNING_DEG, VERTICAL_ANGLE_DEG
from ..enums import Axis, Leg, Side
from ..io import HoopConfiguration, HoopGeometry, iter_measurements


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]


def validate_configuration(
    configuration: HoopConfiguration,
    geometry: Optional[HoopGeometry] = None
) -> ValidationResult:
    """
    Validate measured angles and, if present, resolved offsets.

    Args:
        configuration: Resolved or unresolved hoop configuration
        geometry: Tube sizes for the leg overlap check (default: HoopGeometry())

    Returns:
        ValidationResult with all findings
    """
    if geometry is None:
        geometry = HoopGeometry()

    messages: List[ValidationMessage] = []
    messages.extend(_validate_angles(configuration))
    messages.extend(_validate_offsets(configuration, geometry))

    has_errors = any(m.severity == Severity.ERROR for m in messages)

    return ValidationResult(
        valid=not has_errors,
        messages=messages
    )


def _location(side, leg, axis) -> str:
    return f"{side.value} {leg.value} {axis.value}"


def _validate_angles(configuration: HoopConfiguration) -> List[ValidationMessage]:
    """Check every angle lies in (-90, 90) excluding 0"""
    messages = []

    for side, leg, axis, measurement in iter_measurements(configuration):
        angle = measurement.angle
        where = _location(side, leg, axis)

        if angle == 0:
            messages.append(ValidationMessage(
                severity=Severity.ERROR,
                code="ANGLE_ZERO",
                message=f"{where}: angle is 0°, the offset would be infinite",
                suggestion="Angles are measured from horizontal; a vertical leg reads 90°"
            ))
        elif abs(angle) > VERTICAL_ANGLE_DEG:
            messages.append(ValidationMessage(
                severity=Severity.ERROR,
                code="ANGLE_OUT_OF_RANGE",
                message=f"{where}: angle {angle}° is beyond vertical",
                suggestion="Re-measure; use a negative angle for a lean the other way"
            ))
        elif abs(angle) == VERTICAL_ANGLE_DEG:
            messages.append(ValidationMessage(
                severity=Severity.INFO,
                code="ANGLE_VERTICAL",
                message=f"{where}: leg is vertical, no offset needed"
            ))
        elif abs(angle) < SHALLOW_ANGLE_WARNING_DEG:
            messages.append(ValidationMessage(
                severity=Severity.WARNING,
                code="ANGLE_SHALLOW",
                message=f"{where}: angle {angle}° leans more than {SHALLOW_ANGLE_WARNING_DEG:.0f}° off vertical",
                suggestion="Check the gauge was zeroed on a horizontal surface"
            ))

    return messages


def _validate_offsets(
    configuration: HoopConfiguration,
    geometry: HoopGeometry
) -> List[ValidationMessage]:
    """Check resolved offsets are finite and the leg still overlaps its plumb hole"""
    messages = []

    for side, leg, axis, measurement in iter_measurements(configuration):
        if measurement.absolute is not None and not isfinite(measurement.absolute):
            messages.append(ValidationMessage(
                severity=Severity.ERROR,
                code="OFFSET_NOT_FINITE",
                message=f"{_location(side, leg, axis)}: offset is {measurement.absolute}"
            ))

    for side in Side:
        hoop_side = configuration.side(side)
        for leg in Leg:
            plane = hoop_side.plane(leg)
            dx = plane.measurement(Axis.NS_TO_OS).absolute
            dy = plane.measurement(Axis.FRONT_TO_BACK).absolute
            if dx is None or dy is None or not (isfinite(dx) and isfinite(dy)):
                continue

            distance = hypot(dx, dy)
            diameter = geometry.leg_diameter(leg)
            if distance >= diameter:
                messages.append(ValidationMessage(
                    severity=Severity.WARNING,
                    code="OFFSET_EXCEEDS_LEG_DIAMETER",
                    message=(
                        f"{side.value} {leg.value}: hole moves {distance:.1f}mm, "
                        f"clear of the {diameter:.1f}mm plumb hole"
                    ),
                    suggestion="Check the leg angles before drilling a new hole"
                ))

    return messages
