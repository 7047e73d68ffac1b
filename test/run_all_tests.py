import argparse
import subprocess
import sys
from pathlib import Path


def run_step(name, command):
    """Runs one test command and returns True when it exits cleanly."""
    print(f"\n{'='*20} RUNNING: {name} {'='*20}")
    try:
        process = subprocess.run(
            command,
            capture_output=True,
            text=True,
            check=False, # Don't raise exception on non-zero exit code
            encoding='utf-8'
        )
    except FileNotFoundError:
        print(f"Error: Could not run {command[0]}")
        return False

    if process.stdout:
        print("--- STDOUT ---")
        print(process.stdout)
    if process.stderr:
        print("--- STDERR ---")
        print(process.stderr)

    if process.returncode == 0:
        print(f"-----> RESULT: PASS ({name}) <-----")
        return True
    print(f"-----> RESULT: FAIL ({name}) - Exit Code: {process.returncode} <-----")
    return False


def main():
    """Runs the pytest suite and, with --live, the smoke test against a running server."""
    parser = argparse.ArgumentParser(description="Run the todo task API tests.")
    parser.add_argument("--live", action="store_true", help="Also run the smoke test against a running server.")
    args = parser.parse_args()

    test_dir = Path(__file__).parent
    steps = [("pytest suite", [sys.executable, "-m", "pytest", str(test_dir)])]
    if args.live:
        steps.append(("live smoke test", [sys.executable, str(test_dir / "smoke_api.py")]))

    results = {name: run_step(name, command) for name, command in steps}

    print(f"\n{'='*20} OVERALL TEST SUMMARY {'='*20}")
    for name, passed in results.items():
        print(f"{name:<40} {'PASS' if passed else 'FAIL'}")
    print("="*62)

    if all(results.values()):
        print("\nAll tests passed.")
        sys.exit(0)
    print("\nSome tests failed. Please review the logs above.")
    sys.exit(1)


if __name__ == "__main__":
    main()
