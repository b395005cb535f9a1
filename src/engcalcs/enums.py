"""Type-safe enums shared by the roll-hoop and beam calculators."""

from enum import Enum


class Side(Enum):
    """Lateral side of the vehicle body"""
    NEARSIDE = "nearside"
    OFFSIDE = "offside"


class Leg(Enum):
    """Roll-hoop mounting leg"""
    OUTER = "outer_leg"
    INNER = "inner_leg"
    REAR = "rear_leg"


class Axis(Enum):
    """Horizontal axis along which a leg deviates from vertical"""
    FRONT_TO_BACK = "front_to_back"
    NS_TO_OS = "ns_to_os"  # Nearside to offside


class Material(Enum):
    """Beam material"""
    STEEL = "steel"
    TIMBER = "timber"

