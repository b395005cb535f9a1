"""
Pytest configuration and shared fixtures for engcalcs tests.
"""

import json
import pytest


# ─── Roll hoop designs ───────────────────────────────────────────────────


@pytest.fixture
def gd427_design():
    """Unresolved GD427 measurement set."""
    from engcalcs.rollhoop import get_dataset
    return get_dataset("gd427")


@pytest.fixture
def resolved_gd427(gd427_design):
    """GD427 resolved against the default heights."""
    from engcalcs.rollhoop import resolve_design
    return resolve_design(gd427_design)


@pytest.fixture
def uniform_configuration():
    """Every leg measured at 89.5° on both axes."""
    from engcalcs.io import HoopConfiguration
    return HoopConfiguration.model_validate(_configuration_dict(89.5))


@pytest.fixture
def legacy_config_dict():
    """Bare configuration using the camelCase keys of the old measurement files."""
    return _legacy_config()


@pytest.fixture
def legacy_config_file(tmp_path, legacy_config_dict):
    """camelCase configuration written to a JSON file."""
    path = tmp_path / "hoop_legacy.json"
    path.write_text(json.dumps(legacy_config_dict))
    return path


@pytest.fixture
def zero_angle_design_file(tmp_path):
    """Design file where the nearside outer leg reads 0° front to back."""
    config = _configuration_dict(89.5)
    config["nearside"]["outer_leg"]["front_to_back"]["angle"] = 0.0
    path = tmp_path / "hoop_zero.json"
    path.write_text(json.dumps({"name": "zero", "configuration": config}))
    return path


# ─── Beam sections ───────────────────────────────────────────────────────


@pytest.fixture
def ub127():
    from engcalcs.beam import get_section
    return get_section("UB127x76x13")


@pytest.fixture
def joist():
    from engcalcs.beam import TimberSection
    return TimberSection(width_mm=47, depth_mm=200)


# ─── Helper functions (no pytest dependency) ──────────────────────────────


def _configuration_dict(angle):
    """Snake-case configuration with the same angle everywhere."""
    leg = {"front_to_back": {"angle": angle}, "ns_to_os": {"angle": angle}}
    side = {"outer_leg": dict(leg), "inner_leg": dict(leg), "rear_leg": dict(leg)}
    return {
        "nearside": json.loads(json.dumps(side)),
        "offside": json.loads(json.dumps(side)),
    }


def _legacy_config():
    """Nearside/offside tree as written by older measurement files."""
    return {
        "nearside": {
            "outerLeg": {"frontToBack": {"angle": -89.91}, "nsToOs": {"angle": -89.97}},
            "innerLeg": {"frontToBack": {"angle": -89.95}, "nsToOs": {"angle": 89.39}},
            "rearLeg": {"frontToBack": {"angle": 89.36}, "nsToOs": {"angle": 89.85}},
        },
        "offside": {
            "outerLeg": {"frontToBack": {"angle": 89.51}, "nsToOs": {"angle": 89.42}},
            "innerLeg": {"frontToBack": {"angle": 89.69}, "nsToOs": {"angle": -89.89}},
            "rearLeg": {"frontToBack": {"angle": -89.52}, "nsToOs": {"angle": 89.48}},
        },
    }
