"""
Named roll-hoop measurement sets.

Each entry is one set of angles read off the car, kept as data rather than
as another copy of the calculation. Add new measurement sessions here (or
save them as JSON and pass --design to the CLI).
"""

from typing import Dict, List

from ..io import HoopConfiguration, HoopDesign


def _side(outer, inner, rear) -> dict:
    """Build a side from (front_to_back, ns_to_os) angle pairs."""
    return {
        leg: {
            "front_to_back": {"angle": angles[0]},
            "ns_to_os": {"angle": angles[1]},
        }
        for leg, angles in (("outer_leg", outer), ("inner_leg", inner), ("rear_leg", rear))
    }


# GD427 body, hoop angles as measured before drilling
GD427 = {
    "nearside": _side(outer=(-89.91, -89.97), inner=(-89.95, 89.39), rear=(89.36, 89.85)),
    "offside": _side(outer=(89.51, 89.42), inner=(89.69, -89.89), rear=(-89.52, 89.48)),
}

DATASETS: Dict[str, dict] = {
    "gd427": GD427,
}

DEFAULT_DATASET = "gd427"


def list_datasets() -> List[str]:
    return sorted(DATASETS)


def get_dataset(name: str = DEFAULT_DATASET) -> HoopDesign:
    """
    Build a fresh HoopDesign for a named measurement set.

    Raises:
        KeyError: If no dataset has that name
    """
    key = name.lower()
    if key not in DATASETS:
        raise KeyError(
            f"Unknown dataset '{name}'. Available: {', '.join(list_datasets())}"
        )
    return HoopDesign(
        name=key,
        configuration=HoopConfiguration.model_validate(DATASETS[key]),
    )
