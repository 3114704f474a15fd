#!/usr/bin/env python3
"""
Evaluation runner for the Huffman tree project.

This evaluation script:
- Runs pytest on the tests/ folder against the modules in src/
- Collects individual test results with pass/fail status
- Generates a structured report with environment metadata

Run with:
    python evaluation/evaluation.py [options]
"""
import argparse
import json
import os
import platform
import subprocess
import sys
import traceback
import uuid
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
STATUS_WORDS = {
    " PASSED": "passed",
    " FAILED": "failed",
    " ERROR": "error",
    " SKIPPED": "skipped",
    " XFAIL": "skipped",
    " XPASS": "passed",
}


def generate_run_id():
    """Generate a short unique run ID."""
    return uuid.uuid4().hex[:8]


def get_environment_info():
    """Collect environment information for the report."""
    return {
        "python_version": platform.python_version(),
        "platform": platform.platform(),
        "os": platform.system(),
        "os_release": platform.release(),
        "architecture": platform.machine(),
        "hostname": platform.node(),
    }


def parse_pytest_verbose_output(output):
    """Parse pytest verbose output to extract test results."""
    tests = []

    for line in output.split("\n"):
        line_stripped = line.strip()

        # Match lines like: tests/test_huffman_core.py::test_nub_idempotent PASSED [ 10%]
        if "::" not in line_stripped:
            continue
        for status_word, outcome in STATUS_WORDS.items():
            if status_word in line_stripped:
                nodeid = line_stripped.split(status_word)[0].strip()
                tests.append({
                    "nodeid": nodeid,
                    "name": nodeid.split("::")[-1],
                    "outcome": outcome,
                })
                break

    return tests


def summarize(tests):
    summary = {"total": len(tests)}
    for outcome in ("passed", "failed", "error", "skipped"):
        summary[outcome] = sum(1 for t in tests if t["outcome"] == outcome)
    return summary


def run_pytest(tests_dir, timeout=300):
    """
    Run pytest on the tests folder with src/ on PYTHONPATH.

    Returns:
        dict with test results
    """
    pythonpath = str(PROJECT_ROOT / "src")

    print(f"\n{'=' * 60}")
    print("RUNNING TESTS")
    print(f"{'=' * 60}")
    print(f"PYTHONPATH: {pythonpath}")
    print(f"Tests directory: {tests_dir}")

    cmd = [sys.executable, "-m", "pytest", str(tests_dir), "-v", "--tb=short"]

    env = os.environ.copy()
    env["PYTHONPATH"] = pythonpath

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
            env=env,
            timeout=timeout
        )
    except subprocess.TimeoutExpired:
        print("Test execution timed out")
        return {
            "success": False,
            "exit_code": -1,
            "tests": [],
            "summary": {"error": "Test execution timed out"},
            "stdout": "",
            "stderr": "",
        }

    stdout = result.stdout
    stderr = result.stderr
    tests = parse_pytest_verbose_output(stdout)
    summary = summarize(tests)

    print(
        f"\nResults: {summary['passed']} passed, {summary['failed']} failed, "
        f"{summary['error']} errors, {summary['skipped']} skipped (total: {summary['total']})"
    )
    for test in tests:
        print(f"  {test['nodeid']}: {test['outcome']}")

    return {
        "success": result.returncode == 0,
        "exit_code": result.returncode,
        "tests": tests,
        "summary": summary,
        "stdout": stdout[-3000:],
        "stderr": stderr[-1000:],
    }


def generate_output_path(now=None):
    """Generate output path in format: evaluation/YYYY-MM-DD/HH-MM-SS/report.json"""
    now = now or datetime.now()
    output_dir = PROJECT_ROOT / "evaluation" / now.strftime("%Y-%m-%d") / now.strftime("%H-%M-%S")
    return output_dir / "report.json"


def build_report(run_id, started_at, finished_at, results, error_message):
    success = bool(results and results.get("success"))
    return {
        "run_id": run_id,
        "started_at": started_at.isoformat(),
        "finished_at": finished_at.isoformat(),
        "duration_seconds": round((finished_at - started_at).total_seconds(), 6),
        "success": success,
        "error": error_message if error_message else (None if success else "Tests failed"),
        "environment": get_environment_info(),
        "results": results,
    }


def main(argv=None):
    """Main entry point for evaluation."""
    parser = argparse.ArgumentParser(description="Run the Huffman tree test suite and write a report")
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON file path (default: evaluation/YYYY-MM-DD/HH-MM-SS/report.json)"
    )
    parser.add_argument(
        "--tests-dir",
        type=str,
        default=str(PROJECT_ROOT / "tests"),
        help="Directory holding the pytest modules"
    )
    args = parser.parse_args(argv)

    run_id = generate_run_id()
    started_at = datetime.now()

    print(f"Run ID: {run_id}")
    print(f"Started at: {started_at.isoformat()}")

    results = None
    error_message = None
    try:
        results = run_pytest(args.tests_dir)
    except Exception as e:
        print(f"\nERROR: {e}")
        traceback.print_exc()
        error_message = str(e)

    report = build_report(run_id, started_at, datetime.now(), results, error_message)

    output_path = Path(args.output) if args.output else generate_output_path(started_at)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(report, f, indent=2)
    print(f"\nReport saved to: {output_path}")

    print(f"\n{'=' * 60}")
    print("EVALUATION COMPLETE")
    print(f"{'=' * 60}")
    print(f"Run ID: {run_id}")
    print(f"Duration: {report['duration_seconds']:.2f}s")
    print(f"Success: {'YES' if report['success'] else 'NO'}")

    return 0 if report["success"] else 1


if __name__ == "__main__":
    sys.exit(main())
