import io
import json
import os
import shutil
import subprocess
import sys
from pathlib import Path

import pandas as pd
import pytest
from typer.testing import CliRunner

from rentadjust.adapters.config import config
from rentadjust.cli import app

runner = CliRunner()

_SCENARIO_A = [
    "--effective-rate", "20",
    "--last-year-rent", "1,000,000",
    "--last-year-mortgage", "10,000,000",
    "--next-year-mortgage", "12,000,000",
]


def test_calculate_next_rent_mode_prints_percent():
    r = runner.invoke(app, ["calculate", *_SCENARIO_A, "--next-year-rent", "1,200,000", "--digits", "ascii"])

    assert r.exit_code == 0, r.output
    assert "20.00%" in r.output
    assert "1,400,000" in r.output


def test_calculate_json_output():
    r = runner.invoke(app, ["calculate", *_SCENARIO_A, "--increase-percent", "25", "--json"])

    assert r.exit_code == 0, r.output
    data = json.loads(r.output)
    assert data["ok"] is True
    assert data["result"]["next_rent"] == pytest.approx(1_258_333.3333, rel=1e-9)


def test_calculate_failure_exits_non_zero():
    r = runner.invoke(app, ["calculate", *_SCENARIO_A, "--next-year-rent", "0", "--increase-percent", "0"])

    assert r.exit_code == 1
    assert "فقط" in r.output


def test_calculate_rejects_unknown_digits():
    r = runner.invoke(app, ["calculate", *_SCENARIO_A, "--next-year-rent", "1", "--digits", "roman"])
    assert r.exit_code != 0


def test_batch_writes_results_csv(tmp_path):
    src = tmp_path / "in.csv"
    dst = tmp_path / "out.csv"
    pd.DataFrame(
        [
            {"effectiveRate": "20", "lastYearRent": "1,000,000", "lastYearMortgage": "10,000,000",
             "nextYearMortgage": "12,000,000", "nextYearRent": "1,200,000", "rentIncreasePercent": ""},
            {"effectiveRate": "0", "lastYearRent": "", "lastYearMortgage": "",
             "nextYearMortgage": "", "nextYearRent": "1", "rentIncreasePercent": ""},
        ]
    ).to_csv(src, index=False)

    r = runner.invoke(app, ["batch", str(src), "--output", str(dst)])

    assert r.exit_code == 0, r.output
    out = pd.read_csv(dst)
    assert len(out) == 2
    assert out.loc[0, "increase_percent"] == pytest.approx(20.0)
    assert out.loc[1, "reason"] == "invalid_base_inputs"
    # input columns are carried through
    assert "effectiveRate" in out.columns


def test_calculate_digits_default_follows_config(monkeypatch):
    monkeypatch.setattr(config, "DISPLAY_DIGITS", "ascii")
    r = runner.invoke(app, ["calculate", *_SCENARIO_A, "--next-year-rent", "1,200,000"])
    assert r.exit_code == 0, r.output
    assert "1,400,000" in r.output

    monkeypatch.setattr(config, "DISPLAY_DIGITS", "fa")
    r = runner.invoke(app, ["calculate", *_SCENARIO_A, "--next-year-rent", "1,200,000"])
    assert r.exit_code == 0, r.output
    assert "۱٬۴۰۰٬۰۰۰" in r.output


# Logs go to stderr; these run the command in its own process so stdout holds
# only what the command prints.

_SRC = Path(__file__).resolve().parents[1] / "src"


def _run_cli(*args: str) -> subprocess.CompletedProcess:
    exe = shutil.which("rentadjust")
    cmd = [exe] if exe else [sys.executable, "-m", "rentadjust.cli"]
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(p for p in (str(_SRC), env.get("PYTHONPATH")) if p)
    env["PYTHONIOENCODING"] = "utf-8"
    env["RENTADJUST_LOG_LEVEL"] = "DEBUG"
    return subprocess.run(
        [*cmd, *args],
        capture_output=True,
        encoding="utf-8",
        env=env,
        timeout=120,
    )


def test_calculate_json_failure_stdout_is_only_json():
    r = _run_cli("calculate", "--effective-rate", "0", "--next-year-rent", "1", "--json")

    assert r.returncode == 1, r.stderr
    data = json.loads(r.stdout)
    assert data["result"]["reason"] == "invalid_base_inputs"
    assert "rent adjustment rejected" in r.stderr


def test_batch_to_stdout_is_only_csv(tmp_path):
    src = tmp_path / "in.csv"
    src.write_text("effectiveRate,nextYearRent\n0,1\n20,\n", encoding="utf-8")

    r = _run_cli("batch", str(src))

    assert r.returncode == 0, r.stderr
    out = pd.read_csv(io.StringIO(r.stdout))
    assert len(out) == 2
    assert out["reason"].tolist() == ["invalid_base_inputs", "incomplete_mode"]
    assert "rent adjustment rejected" in r.stderr
