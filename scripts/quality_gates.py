#!/usr/bin/env python3
"""
Quality Gates Runner.

Runs every gate and writes a JSON evidence artifact.

Gates:
1. Rules gate: chromatoken_rules.yaml schema validation
2. Lint gate: ruff linting
3. Format gate: ruff formatting (warning only)
4. Type gate: mypy type checking
5. Test gate: pytest, component and repo tests
6. Regression gate: engine invariants
"""

from __future__ import annotations

import argparse
import datetime
import json
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TypedDict

# --- Configuration ---

PROJECT_ROOT = Path(__file__).parent.parent
ARTIFACTS_DIR = PROJECT_ROOT / "artifacts"


@dataclass(frozen=True)
class GateConfig:
    """Configuration for a quality gate."""

    name: str
    description: str
    command: list[str]
    required: bool = True
    timeout_seconds: int = 300


class GateResult(TypedDict):
    status: str  # "pass" | "fail" | "warn"
    required: bool
    exit_code: int
    duration_seconds: float
    stdout: str
    stderr: str
    command: list[str]


class GatesReport(TypedDict):
    timestamp_utc: str
    overall_status: str  # "pass" | "fail"
    gates: dict[str, GateResult]


GATES: list[GateConfig] = [
    GateConfig(
        name="rules",
        description="Rules schema validation",
        command=[sys.executable, "-m", "pytest", "tests/unit/test_rules_loader.py", "-q"],
    ),
    GateConfig(
        name="lint",
        description="Code linting (ruff)",
        command=[sys.executable, "-m", "ruff", "check", "."],
    ),
    GateConfig(
        name="format",
        description="Code formatting check (ruff)",
        command=[sys.executable, "-m", "ruff", "format", "--check", "."],
        required=False,
    ),
    GateConfig(
        name="types",
        description="Type checking (mypy)",
        command=[sys.executable, "-m", "mypy", "chromatoken"],
    ),
    GateConfig(
        name="tests",
        description="All tests (pytest)",
        command=[
            sys.executable,
            "-m",
            "pytest",
            "-q",
            f"--junitxml={ARTIFACTS_DIR / 'pytest-report.xml'}",
        ],
        timeout_seconds=600,
    ),
    GateConfig(
        name="regression",
        description="Engine invariants",
        command=[sys.executable, "-m", "pytest", "tests/regression", "-q"],
    ),
]

# --- Execution ---


def run_gate(gate: GateConfig) -> GateResult:
    print(f"[{gate.name}] {gate.description} ...", end="", flush=True)
    started = datetime.datetime.now(datetime.UTC)

    try:
        result = subprocess.run(
            gate.command,
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            check=False,
            timeout=gate.timeout_seconds,
        )
        exit_code = result.returncode
        stdout, stderr = result.stdout, result.stderr
    except subprocess.TimeoutExpired as e:
        exit_code = -1
        stdout, stderr = "", f"Timed out after {e.timeout}s"
    except OSError as e:
        exit_code = -1
        stdout, stderr = "", str(e)

    duration = (datetime.datetime.now(datetime.UTC) - started).total_seconds()

    if exit_code == 0:
        status = "pass"
    elif gate.required:
        status = "fail"
    else:
        status = "warn"
    print(f" {status.upper()}")

    return {
        "status": status,
        "required": gate.required,
        "exit_code": exit_code,
        "duration_seconds": round(duration, 2),
        "stdout": stdout,
        "stderr": stderr,
        "command": gate.command,
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run chromatoken quality gates")
    parser.add_argument(
        "--gate",
        action="append",
        choices=[gate.name for gate in GATES],
        help="Run only the named gate (repeatable)",
    )
    args = parser.parse_args(argv)

    print("=== chromatoken: Quality Gates Runner ===")
    ARTIFACTS_DIR.mkdir(exist_ok=True)

    selected = [gate for gate in GATES if not args.gate or gate.name in args.gate]
    results = {gate.name: run_gate(gate) for gate in selected}
    overall_pass = all(result["status"] != "fail" for result in results.values())

    report: GatesReport = {
        "timestamp_utc": datetime.datetime.now(datetime.UTC).isoformat(),
        "overall_status": "pass" if overall_pass else "fail",
        "gates": results,
    }

    report_path = ARTIFACTS_DIR / "quality_gates_run.json"
    try:
        report_path.write_text(json.dumps(report, indent=2))
    except OSError as e:
        print(f"\nFAILED to write report artifact: {e}")
        return 2
    print(f"\nReport written to: {report_path}")

    if overall_pass:
        print("\nSUCCESS: All quality gates passed.")
        return 0

    print("\nFAILURE: One or more quality gates failed.")
    for name, result in results.items():
        if result["status"] != "fail":
            continue
        print(f"\n--- {name} FAILED (exit code {result['exit_code']}) ---")
        if result["stdout"].strip():
            print("STDOUT:")
            print(result["stdout"])
        if result["stderr"].strip():
            print("STDERR:")
            print(result["stderr"])
    return 1


if __name__ == "__main__":
    sys.exit(main())
