"""
Tests for the schedule export script.
"""

import importlib.util
import os

SCRIPT_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "scripts",
    "export_schedule.py",
)


def load_script():
    spec = importlib.util.spec_from_file_location("export_schedule", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_writes_csv_file(tmp_path, capsys):
    output = tmp_path / "schedule.csv"
    load_script().main(
        ["--loan-amount", "200000", "--rate", "4", "--term", "15", "-o", str(output)]
    )

    lines = output.read_text().splitlines()
    assert lines[0].startswith("Year,")
    assert len(lines) == 16

    printed = capsys.readouterr().out
    assert "Estimated monthly PITI" in printed
    assert "Wrote 15 rows" in printed


def test_csv_to_stdout(capsys):
    load_script().main(["--frequency", "biweekly", "--extra", "100"])

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Year,")
    assert 1 < len(lines) < 31
