"""
Tests for the command-line tools.

Most tests call main() in-process; a couple run the modules as scripts to
check the entry points.
"""

import json
import logging
import subprocess
import sys

import pytest

from engcalcs.cli import beam as beam_cli
from engcalcs.cli import hoop as hoop_cli


@pytest.fixture(autouse=True)
def reset_logging():
    """main() attaches a stderr handler; drop it so later tests don't write to a closed capture."""
    yield
    logging.getLogger("engcalcs").handlers.clear()


def run_module(module, *args):
    """Run `python -m <module>` and return the completed process."""
    return subprocess.run(
        [sys.executable, "-m", module, *args],
        capture_output=True,
        text=True,
    )


class TestHoopCli:
    """engcalcs-hoop"""

    def test_default_dataset_summary(self, capsys):
        assert hoop_cli.main([]) == 0

        out = capsys.readouterr().out
        assert "═══ Roll Hoop Offsets: gd427 ═══" in out
        assert "→ 3mm" in out

    def test_list_datasets(self, capsys):
        assert hoop_cli.main(["--list-datasets"]) == 0
        assert capsys.readouterr().out.split() == ["gd427"]

    def test_json_format(self, capsys):
        assert hoop_cli.main(["--format", "json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["labels"]["nearside"]["rear_leg"]["front_to_back"] == "↓ 3mm"
        assert data["validation"]["valid"] is True

    def test_design_file(self, capsys, legacy_config_file):
        assert hoop_cli.main(["--design", str(legacy_config_file)]) == 0
        assert "hoop_legacy" in capsys.readouterr().out

    def test_missing_design(self, capsys, tmp_path):
        assert hoop_cli.main(["--design", str(tmp_path / "nope.json")]) == 1
        assert "Error loading design" in capsys.readouterr().err

    def test_unknown_dataset(self, capsys):
        assert hoop_cli.main(["--dataset", "xyz"]) == 1
        assert "Unknown dataset" in capsys.readouterr().err

    def test_height_override(self, capsys):
        assert hoop_cli.main(["--format", "json", "--outer-height", "480"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["heights"]["outer_leg"] == 480
        assert data["heights"]["inner_leg"] == 310
        assert data["configuration"]["nearside"]["outer_leg"]["front_to_back"]["absolute"] == pytest.approx(-0.754, rel=1e-2)

    def test_negative_height(self, capsys):
        assert hoop_cli.main(["--rear-height", "-5"]) == 1
        assert "positive" in capsys.readouterr().err

    def test_output_and_save(self, tmp_path):
        md_path = tmp_path / "offsets.md"
        json_path = tmp_path / "resolved.json"

        code = hoop_cli.main([
            "--format", "markdown", "-o", str(md_path), "--save-json", str(json_path),
        ])

        assert code == 0
        assert md_path.read_text(encoding="utf-8").startswith("# Roll Hoop Body Hole Offsets")
        assert json.loads(json_path.read_text())["schema_version"] == "1.0"

    def test_plot(self, tmp_path):
        pytest.importorskip("matplotlib")
        plot_path = tmp_path / "holes.png"

        assert hoop_cli.main(["--plot", str(plot_path)]) == 0
        assert plot_path.exists()

    def test_strict_with_zero_angle(self, capsys, zero_angle_design_file):
        assert hoop_cli.main(["--design", str(zero_angle_design_file)]) == 0
        assert hoop_cli.main(["--design", str(zero_angle_design_file), "--strict"]) == 2
        assert "ANGLE_ZERO" in capsys.readouterr().out

    def test_strict_valid(self):
        assert hoop_cli.main(["--strict"]) == 0

    def test_design_and_dataset_exclusive(self):
        with pytest.raises(SystemExit):
            hoop_cli.main(["--dataset", "gd427", "--design", "x.json"])


class TestBeamCli:
    """engcalcs-beam"""

    def test_default_summary(self, capsys):
        assert beam_cli.main(["--point-load-kg", "1000"]) == 0

        out = capsys.readouterr().out
        assert "UB127x76x13" in out
        assert out.strip().endswith("OK")

    def test_pretty(self, capsys):
        assert beam_cli.main(["--point-load-kg", "1000", "--format", "pretty"]) == 0

        pretty = json.loads(capsys.readouterr().out)
        assert pretty["max_deflection"] == "3.4 mm"

    def test_json_timber(self, capsys):
        code = beam_cli.main([
            "--section", "47x200", "--udl-kn-per-m", "1.5", "--length", "3600", "--format", "json",
        ])

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["material"] == "timber"
        assert data["section_name"] == "47x200 C24"

    def test_list_sections(self, capsys):
        assert beam_cli.main(["--list-sections"]) == 0
        assert "UB305x127x42" in capsys.readouterr().out.split()

    def test_unknown_section(self, capsys):
        assert beam_cli.main(["--section", "HEB200"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_bad_length(self, capsys):
        assert beam_cli.main(["--length", "0", "--point-load-kg", "10"]) == 1

    def test_strict_unsafe(self, capsys):
        args = ["--point-load-kg", "3000", "--length", "4000"]
        assert beam_cli.main(args) == 0
        assert beam_cli.main(args + ["--strict"]) == 2


class TestEntryPoints:
    """Modules run as scripts."""

    def test_hoop_help(self):
        result = run_module("engcalcs.cli.hoop", "--help")
        assert result.returncode == 0
        assert "--design" in result.stdout

    def test_beam_help(self):
        result = run_module("engcalcs.cli.beam", "--help")
        assert result.returncode == 0
        assert "--point-load-kg" in result.stdout

    def test_hoop_json_to_stdout(self):
        result = run_module("engcalcs.cli.hoop", "--format", "json")

        assert result.returncode == 0
        json.loads(result.stdout)
