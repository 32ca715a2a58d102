#!/usr/bin/env python3
"""Run the formatters, linters and the test suite in one go.

Steps, in order: black, isort, ruff, pylint, pytest. Output of every step is
collected and failures are repeated in a summary at the end.
"""

from pathlib import Path
import subprocess
import sys

ROOT = Path(__file__).parent


def run_command(cmd: list[str], description: str) -> tuple[bool, str]:
    """Run `cmd` from the repo root and return (succeeded, combined output)."""
    print(f"\n{'='*60}")
    print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    print("=" * 60)

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False, cwd=ROOT)
    except OSError as e:
        print(f"FAILED to start: {e}")
        return False, str(e)

    success = result.returncode == 0
    output = result.stdout + result.stderr
    print("OK" if success else "FAILED")
    if output.strip():
        print("\nOutput:")
        print(output)
    return success, output


def main() -> None:
    py = sys.executable
    commands = [
        ([py, "-m", "black", ".", "--check"], "black format check"),
        ([py, "-m", "isort", ".", "--check-only"], "isort import order check"),
        ([py, "-m", "ruff", "check", "."], "ruff"),
        ([py, "-m", "pylint", "configstore"], "pylint"),
        ([py, "-m", "pytest", "-q"], "pytest"),
    ]

    results = [(description, *run_command(cmd, description)) for cmd, description in commands]

    print(f"\n{'='*60}")
    print("Summary")
    print("=" * 60)
    for description, success, _ in results:
        print(f"{description}: {'passed' if success else 'FAILED'}")

    failed = [(d, out) for d, ok, out in results if not ok]
    for description, output in failed:
        if output.strip():
            print(f"\n--- {description} errors ---")
            print(output)

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
