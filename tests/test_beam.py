"""
Tests for the beam deflection calculator.
"""

import json
import pytest
from pydantic import ValidationError

from engcalcs.beam import (
    TimberSection,
    allowable_deflection,
    beam_calc,
    get_section,
    kg_to_newtons,
    list_sections,
    modulus_of_elasticity,
    point_load_calc,
    point_load_deflection,
    pretty_print,
    to_json,
    to_summary,
    udl_calc,
)
from engcalcs.constants import UNSAFE_DEFLECTION_BANNER
from engcalcs.enums import Material


class TestSections:
    """Section library."""

    def test_universal_beam_units(self, ub127):
        assert ub127.moment_of_inertia_mm4 == pytest.approx(473e4)
        assert ub127.section_modulus_mm3 == pytest.approx(74.5e3)
        assert ub127.neutral_axis_mm == pytest.approx(63.5)
        assert ub127.default_material == Material.STEEL

    def test_lookup_case_insensitive(self):
        assert get_section("ub152x89x16").name == "UB152x89x16"

    def test_timber_properties(self, joist):
        assert joist.name == "47x200 C24"
        assert joist.moment_of_inertia_mm4 == pytest.approx(47 * 200 ** 3 / 12)
        assert joist.section_modulus_mm3 == pytest.approx(47 * 200 ** 2 / 6)
        assert joist.neutral_axis_mm == 100
        assert joist.default_material == Material.TIMBER

    def test_timber_parsed_from_name(self):
        section = get_section("63 x 225")
        assert isinstance(section, TimberSection)
        assert section.depth_mm == 225

    def test_timber_dimensions_positive(self):
        with pytest.raises(ValidationError):
            TimberSection(width_mm=0, depth_mm=200)

    def test_unknown_section(self):
        with pytest.raises(KeyError, match="UB127x76x13"):
            get_section("HEB200")

    def test_list_sections(self):
        names = list_sections()
        assert names[0] == "UB127x76x13"
        assert "47x200" in names


class TestFormulas:
    """Individual formula helpers."""

    def test_kg_to_newtons(self):
        assert kg_to_newtons(1000) == pytest.approx(9810)

    def test_modulus(self):
        assert modulus_of_elasticity(Material.STEEL) == 200000
        assert modulus_of_elasticity("timber") == 11000

    def test_point_load_deflection(self):
        # 9810 * 2500³ / (48 * 200000 * 473e4)
        assert point_load_deflection(9810, 2500, 200000, 473e4) == pytest.approx(3.3757, rel=1e-4)

    def test_allowable(self):
        assert allowable_deflection(2500) == pytest.approx(7.142857, rel=1e-6)
        assert allowable_deflection(3000, ratio=500) == pytest.approx(6.0)


class TestPointLoad:
    """Central point load."""

    def test_reference_beam(self, ub127):
        result = point_load_calc(ub127, kg_to_newtons(1000), 2500)

        assert result.section_name == "UB127x76x13"
        assert result.material == Material.STEEL
        assert result.max_deflection_mm == pytest.approx(3.3757, rel=1e-4)
        assert result.safe_deflection_limit_mm == pytest.approx(7.142857, rel=1e-6)
        assert result.is_deflection_safe
        assert result.support_force_n == pytest.approx(4905)
        assert result.max_moment_nmm == pytest.approx(9810 * 2500 / 4)
        assert result.max_stress_n_per_mm2 == pytest.approx(82.31, rel=1e-3)

    def test_unsafe(self, ub127):
        result = point_load_calc(ub127, kg_to_newtons(3000), 4000)

        assert result.max_deflection_mm == pytest.approx(41.5, rel=1e-2)
        assert not result.is_deflection_safe

    def test_unsafe_logs_warning(self, ub127, caplog):
        with caplog.at_level("WARNING", logger="engcalcs"):
            point_load_calc(ub127, kg_to_newtons(3000), 4000)
        assert "exceeds" in caplog.text

    def test_deflection_scales_with_cube_of_length(self, ub127):
        short = point_load_calc(ub127, 1000, 1000)
        long = point_load_calc(ub127, 1000, 2000)
        assert long.max_deflection_mm == pytest.approx(8 * short.max_deflection_mm)

    def test_material_override(self, ub127):
        steel = point_load_calc(ub127, 1000, 2000)
        timber = point_load_calc(ub127, 1000, 2000, material="timber")

        assert timber.material == Material.TIMBER
        assert timber.max_deflection_mm == pytest.approx(steel.max_deflection_mm * 200000 / 11000)

    def test_ratio(self, ub127):
        result = point_load_calc(ub127, 1000, 3500, ratio=500)
        assert result.safe_deflection_limit_mm == pytest.approx(7.0)
        assert result.deflection_ratio == 500


class TestUdl:
    """Distributed and combined loads."""

    def test_udl(self):
        result = udl_calc(get_section("UB152x89x16"), 1.0, 3000)

        assert result.max_deflection_mm == pytest.approx(0.6323, rel=1e-3)
        assert result.max_moment_nmm == pytest.approx(3000 ** 2 / 8)
        assert result.support_force_n == pytest.approx(1500)

    def test_timber_joist(self, joist):
        result = udl_calc(joist, 1.5, 3600)

        assert result.material == Material.TIMBER
        expected = 5 * 1.5 * 3600 ** 4 / (384 * 11000 * joist.moment_of_inertia_mm4)
        assert result.max_deflection_mm == pytest.approx(expected)

    def test_superposition(self, ub127):
        point = point_load_calc(ub127, 5000, 2500)
        udl = udl_calc(ub127, 2.0, 2500)
        both = beam_calc(ub127, 2500, point_load_n=5000, udl_n_per_mm=2.0)

        assert both.max_deflection_mm == pytest.approx(point.max_deflection_mm + udl.max_deflection_mm)
        assert both.support_force_n == pytest.approx(point.support_force_n + udl.support_force_n)


class TestErrors:
    """Input checks."""

    @pytest.mark.parametrize("kwargs", [
        {"length_mm": 0},
        {"length_mm": -100},
        {"length_mm": 2500, "ratio": 0},
        {"length_mm": 2500, "point_load_n": -1},
        {"length_mm": 2500, "udl_n_per_mm": -0.5},
    ])
    def test_invalid(self, ub127, kwargs):
        with pytest.raises(ValueError):
            beam_calc(ub127, **kwargs)

    def test_unknown_material(self, ub127):
        with pytest.raises(ValueError):
            beam_calc(ub127, 2500, point_load_n=100, material="aluminium")

    def test_no_load(self, ub127):
        result = beam_calc(ub127, 2500)
        assert result.max_deflection_mm == 0
        assert result.is_deflection_safe


class TestOutput:
    """Beam formatters."""

    def test_pretty_print(self, ub127):
        pretty = pretty_print(point_load_calc(ub127, kg_to_newtons(1000), 2500))

        assert pretty == {
            "beam_name": "UB127x76x13",
            "beam_length": "2500 mm",
            "point_load": "1000 Kg",
            "max_deflection": "3.4 mm",
            "safe_deflection_limit": "7.1 mm",
            "deflection_summary": "OK",
        }

    def test_pretty_print_unsafe(self, ub127):
        pretty = pretty_print(point_load_calc(ub127, kg_to_newtons(3000), 4000))
        assert pretty["deflection_summary"] == UNSAFE_DEFLECTION_BANNER

    def test_pretty_print_udl(self, joist):
        pretty = pretty_print(udl_calc(joist, 1.5, 3600))
        assert pretty["udl"] == "1.5 kN/m"

    def test_summary(self, ub127):
        text = to_summary(point_load_calc(ub127, kg_to_newtons(1000), 2500))

        assert text.splitlines()[0] == "═══ Beam: UB127x76x13 (steel) ═══"
        assert "Max deflection:    3.38 mm" in text
        assert text.splitlines()[-1] == "OK"

    def test_json(self, ub127):
        data = json.loads(to_json(point_load_calc(ub127, kg_to_newtons(1000), 2500)))

        assert data["material"] == "steel"
        assert data["is_deflection_safe"] is True
        assert data["summary"]["point_load"] == "1000 Kg"
