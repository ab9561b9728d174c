#!/usr/bin/env python3
"""Test runner for the QuickBar import/export package.

Wraps pytest with the suites and coverage settings used in development
and CI.
"""
import os
import sys
import subprocess
import argparse
import time
from pathlib import Path
from typing import List

PACKAGE = "quickbar"
SUITES = {
    "unit": ["tests/unit/"],
    "integration": ["tests/integration/", "-m", "integration"],
    "all": [],
}


def run_command(cmd: List[str]) -> int:
    """Run a command and return the exit code."""
    print(f"Running: {' '.join(cmd)}")
    return subprocess.run(cmd).returncode


def coverage_args(report: str = "term-missing", fail_under: int = 0) -> List[str]:
    args = [f"--cov={PACKAGE}", f"--cov-report={report}"]
    if fail_under:
        args.append(f"--cov-fail-under={fail_under}")
    return args


def run_suite(name: str, coverage: bool = True, verbose: bool = True) -> int:
    """Run one of the named pytest suites."""
    cmd = [sys.executable, "-m", "pytest", *SUITES[name]]
    if verbose:
        cmd.append("-v")
    if coverage and name != "integration":
        cmd.extend(coverage_args())

    print(f"Running {name} tests...")
    return run_command(cmd)


def run_quick_tests() -> int:
    """Stop at the first unit test failure, with terse output."""
    return run_command([sys.executable, "-m", "pytest", "tests/unit/", "-x", "--tb=short", "-q"])


def run_ci_tests() -> int:
    """Run everything with machine-readable reports."""
    os.environ["CI"] = "true"
    cmd = [
        sys.executable, "-m", "pytest",
        *coverage_args(report="xml:coverage.xml", fail_under=85),
        "--cov-report=term",
        "--junit-xml=test-results.xml",
        "--tb=short",
    ]
    return run_command(cmd)


def check_test_environment() -> bool:
    """Check that pytest and the coverage plugin are importable."""
    ok = True
    for module in ("pytest", "pytest_cov"):
        try:
            __import__(module)
            print(f"✓ {module} available")
        except ImportError:
            print(f"✗ {module} not installed (pip install -e .[test])")
            ok = False
    return ok


def main() -> int:
    parser = argparse.ArgumentParser(description="Test runner for QuickBar import/export")
    parser.add_argument("test_type", choices=[*SUITES, "quick", "ci", "check"], help="Type of tests to run")
    parser.add_argument("--no-coverage", action="store_true", help="Disable coverage reporting")
    parser.add_argument("--quiet", action="store_true", help="Quiet output")
    args = parser.parse_args()

    if args.test_type == "check":
        return 0 if check_test_environment() else 1

    os.chdir(Path(__file__).parent)
    start_time = time.time()

    try:
        if args.test_type == "quick":
            result = run_quick_tests()
        elif args.test_type == "ci":
            result = run_ci_tests()
        else:
            result = run_suite(args.test_type, coverage=not args.no_coverage, verbose=not args.quiet)
    except KeyboardInterrupt:
        print("\n\nTest execution interrupted by user")
        return 130

    print(f"\nTest execution completed in {time.time() - start_time:.2f} seconds")
    print("✓ All tests passed" if result == 0 else "✗ Some tests failed")
    return result


if __name__ == "__main__":
    sys.exit(main())
