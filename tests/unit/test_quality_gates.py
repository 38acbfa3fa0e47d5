"""
Quality gates runner tests.

The gates themselves are not run here; only the runner's bookkeeping.
"""

from __future__ import annotations

import importlib.util
import json
import sys
from pathlib import Path
from types import ModuleType

import pytest


@pytest.fixture
def gates(project_root: Path) -> ModuleType:
    spec = importlib.util.spec_from_file_location(
        "quality_gates", project_root / "scripts" / "quality_gates.py"
    )
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


def test_gate_names(gates: ModuleType) -> None:
    names = [gate.name for gate in gates.GATES]
    assert names == ["rules", "lint", "format", "types", "tests", "regression"]


def test_only_format_is_optional(gates: ModuleType) -> None:
    assert [gate.name for gate in gates.GATES if not gate.required] == ["format"]


def test_run_gate_statuses(gates: ModuleType) -> None:
    ok = gates.GateConfig("ok", "exits 0", [sys.executable, "-c", "pass"])
    bad = gates.GateConfig("bad", "exits 3", [sys.executable, "-c", "raise SystemExit(3)"])
    soft = gates.GateConfig(
        "soft", "optional", [sys.executable, "-c", "raise SystemExit(1)"], required=False
    )

    assert gates.run_gate(ok)["status"] == "pass"
    assert gates.run_gate(bad)["exit_code"] == 3
    assert gates.run_gate(bad)["status"] == "fail"
    assert gates.run_gate(soft)["status"] == "warn"


def test_missing_command_fails(gates: ModuleType) -> None:
    gate = gates.GateConfig("missing", "no such binary", ["/nonexistent/chromatoken-tool"])
    result = gates.run_gate(gate)

    assert result["status"] == "fail"
    assert result["exit_code"] == -1


def test_report_written(
    gates: ModuleType, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(gates, "ARTIFACTS_DIR", tmp_path)
    monkeypatch.setattr(
        gates, "GATES", [gates.GateConfig("ok", "exits 0", [sys.executable, "-c", "pass"])]
    )

    assert gates.main([]) == 0

    report = json.loads((tmp_path / "quality_gates_run.json").read_text())
    assert report["overall_status"] == "pass"
    assert report["gates"]["ok"]["status"] == "pass"
