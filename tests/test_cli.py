"""Tests for the interactive prompt."""

import io
import subprocess
import sys
from datetime import date
from pathlib import Path

from app.cli import BANNER, main, run_prompt
from app.services.dispatcher import CommandDispatcher


def _run(service, text):
    dispatcher = CommandDispatcher(service, today=lambda: date(2024, 8, 30))
    stdout = io.StringIO()
    run_prompt(dispatcher, io.StringIO(text), stdout)
    return stdout.getvalue()


def test_prompt_prints_results(service):
    out = _run(service, "Availability(H1, 20240901, SGL)\nSearch(H2, 5, SGL)\n\n")
    assert out.startswith(BANNER)
    assert "> 1\n" in out
    assert "> (20240830-20240831, 1), (20240903-20240903, 1)\n" in out


def test_prompt_reports_errors_and_continues(service):
    out = _run(service, "Availability(H9, 20240901, SGL)\nNope\nAvailability(H1, 20240903, SGL)\n")
    assert "Error: Hotel H9 not found" in out
    assert "Error: Invalid command format" in out
    assert "> 2\n" in out


def test_prompt_stops_at_blank_line(service):
    out = _run(service, "\nAvailability(H1, 20240901, SGL)\n")
    assert "> 1" not in out


def test_prompt_stops_at_eof(service):
    out = _run(service, "Availability(H1, 20240903, SGL)")
    assert out.endswith("> 2\n> ")


def test_main_missing_files(tmp_path):
    stdout = io.StringIO()
    code = main(
        ["--hotels", str(tmp_path / "h.json"), "--bookings", str(tmp_path / "b.json")],
        stdin=io.StringIO(""),
        stdout=stdout,
    )
    assert code == 1
    assert stdout.getvalue() == "Error: One or both files not found.\n"


def test_main_invalid_data(tmp_path, data_files):
    _, bookings_path = data_files
    hotels_path = tmp_path / "broken.json"
    hotels_path.write_text("{", encoding="utf-8")
    stdout = io.StringIO()
    code = main(
        ["--hotels", str(hotels_path), "--bookings", str(bookings_path)],
        stdin=io.StringIO(""),
        stdout=stdout,
    )
    assert code == 1
    assert stdout.getvalue().startswith("Error: ")


def test_main_runs_prompt(data_files):
    hotels_path, bookings_path = data_files
    stdout = io.StringIO()
    code = main(
        ["--hotels", str(hotels_path), "--bookings", str(bookings_path)],
        stdin=io.StringIO("Availability(H1, 20240901-20240903, DBL)\n\n"),
        stdout=stdout,
    )
    assert code == 0
    assert "> 1\n" in stdout.getvalue()


def test_main_reads_paths_from_env(mock_env):
    stdout = io.StringIO()
    code = main([], stdin=io.StringIO("Availability(H2, 20240902, SGL)\n"), stdout=stdout)
    assert code == 0
    assert "> 0\n" in stdout.getvalue()


def test_prompt_survives_days_ahead_out_of_range(service):
    out = _run(service, "Search(H1, 99999999999, SGL)\nAvailability(H1, 20240903, SGL)\n")
    assert "Error: Days ahead 99999999999 out of range" in out
    assert "> 2\n" in out


def test_cli_import_does_not_build_web_app():
    root = Path(__file__).resolve().parents[1]
    proc = subprocess.run(
        [sys.executable, "-c", "import sys, app.cli; print('app.main' in sys.modules)"],
        cwd=root,
        capture_output=True,
        text=True,
        check=True,
    )
    assert proc.stdout.strip() == "False"
