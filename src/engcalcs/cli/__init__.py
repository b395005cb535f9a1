"""Command-line entry points (engcalcs-hoop, engcalcs-beam)."""
