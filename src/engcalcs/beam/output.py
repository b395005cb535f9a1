"""Output formatters for beam calculations."""

import json
from typing import Dict

from ..constants import KG_TO_N, UNSAFE_DEFLECTION_BANNER
from .core import BeamResult


def pretty_print(result: BeamResult) -> Dict[str, str]:
    """Human readable key figures, one string per field."""
    pretty = {
        "beam_name": result.section_name,
        "beam_length": f"{result.length_mm:g} mm",
        "point_load": f"{result.point_load_n / KG_TO_N:g} Kg",
    }
    if result.udl_n_per_mm:
        pretty["udl"] = f"{result.udl_n_per_mm:g} kN/m"
    pretty.update({
        "max_deflection": f"{result.max_deflection_mm:.1f} mm",
        "safe_deflection_limit": f"{result.safe_deflection_limit_mm:.1f} mm",
        "deflection_summary": "OK" if result.is_deflection_safe else UNSAFE_DEFLECTION_BANNER,
    })
    return pretty


def to_summary(result: BeamResult) -> str:
    """Multi-line console summary."""
    lines = [
        f"═══ Beam: {result.section_name} ({result.material.value}) ═══",
        f"Span:              {result.length_mm:g} mm",
        f"Point load:        {result.point_load_n:.0f} N ({result.point_load_n / KG_TO_N:g} Kg)",
    ]
    if result.udl_n_per_mm:
        lines.append(f"Distributed load:  {result.udl_n_per_mm:g} kN/m")

    lines.extend([
        "",
        f"E:                 {result.modulus_n_per_mm2:g} N/mm²",
        f"I:                 {result.moment_of_inertia_mm4:.4g} mm⁴",
        f"Support force:     {result.support_force_n:.1f} N",
        f"Max moment:        {result.max_moment_nmm / 1e6:.2f} kNm",
        f"Max stress:        {result.max_stress_n_per_mm2:.1f} N/mm²",
        f"Max deflection:    {result.max_deflection_mm:.2f} mm",
        f"Limit (L/{result.deflection_ratio:g}):   {result.safe_deflection_limit_mm:.2f} mm",
        "",
        "OK" if result.is_deflection_safe else UNSAFE_DEFLECTION_BANNER,
    ])
    return "\n".join(lines)


def to_json(result: BeamResult, indent: int = 2) -> str:
    data = result.model_dump(mode='json')
    data['summary'] = pretty_print(result)
    return json.dumps(data, indent=indent, ensure_ascii=False)
