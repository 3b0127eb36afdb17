"""Development script to run checks (formatting, linting, tests) and a CLI smoke run."""

import argparse
import subprocess
import sys

SMOKE_PATHS = ["C:/path////../../../to/.////file.. ..", "nul", "\\\\?\\C:\\a\\..\\b"]


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def run_checks() -> None:
    """Run the lint and test gate."""
    run_command(["uv", "run", "ruff", "format", "--check"], "Ruff Format Check")
    run_command(["uv", "run", "ruff", "check"], "Ruff Linting")
    run_command(
        [
            "uv",
            "run",
            "pytest",
            "--cov=kernelpath",
            "--cov-branch",
            "--cov-report=term-missing",
            "--cov-fail-under=80",
        ],
        "Tests with Coverage",
    )


def main() -> None:
    """Run the development checks and optionally the CLI smoke run."""
    parser = argparse.ArgumentParser(
        description="Run development checks and a CLI smoke run."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, skipping the CLI"
    )
    args = parser.parse_args()

    if args.ci:
        run_checks()
        print("\n✅ CI checks passed successfully. Skipping the CLI smoke run.")
        return

    # Run auto-formatting and fixing
    run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
    run_command(
        ["uv", "run", "ruff", "check", "--fix", "--unsafe-fixes"],
        "Ruff Linting & Fixes",
    )

    run_checks()

    run_command(["uv", "run", "kernelpath", "-v", *SMOKE_PATHS], "CLI Smoke Run")

    print("\n✅ All development checks and the CLI smoke run passed successfully.")


if __name__ == "__main__":
    main()
