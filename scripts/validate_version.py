#!/usr/bin/env python3
"""Validate version consistency between pyproject.toml and the package.

pyproject.toml is the single source of truth; simparse.__version__ is read
from installed metadata, so a stale editable install shows up here.

CHECKS PERFORMED:
    CRITICAL (fail build):
    1. Package __version__ matches pyproject.toml
    2. Version follows semantic versioning (MAJOR.MINOR.PATCH)
    3. Version is not a development placeholder

    INFORMATIONAL (warn only):
    4. CHANGELOG.md mentions current version

Exit Codes:
    0: All checks passed (warnings allowed)
    1: Critical version mismatch or invalid version

Python 3.13+. No external dependencies.
"""

from __future__ import annotations

import os
import re
import sys
import tomllib
from pathlib import Path
from typing import NamedTuple

NO_COLOR = os.environ.get("NO_COLOR", "") == "1"

PLACEHOLDERS = ("0.0.0+dev", "0.0.0+unknown", "0.0.0.dev0", "unknown", "dev")

SEMVER_PATTERN = re.compile(
    r"^\d+\.\d+\.\d+"  # MAJOR.MINOR.PATCH (required)
    r"(?:-[a-zA-Z0-9.]+)?"  # -PRERELEASE (optional)
    r"(?:\+[a-zA-Z0-9.]+)?$"  # +BUILD (optional)
)


class Colors:
    """ANSI color codes for terminal output."""
    RED = "" if NO_COLOR else "\033[31m"
    GREEN = "" if NO_COLOR else "\033[32m"
    YELLOW = "" if NO_COLOR else "\033[33m"
    CYAN = "" if NO_COLOR else "\033[36m"
    BOLD = "" if NO_COLOR else "\033[1m"
    RESET = "" if NO_COLOR else "\033[0m"


class CheckResult(NamedTuple):
    """Result of a single validation check."""
    name: str
    passed: bool
    message: str
    is_critical: bool = True  # If False, only warns


def get_pyproject_version(root: Path) -> str | None:
    """Extract [project] version from pyproject.toml."""
    pyproject_path = root / "pyproject.toml"
    if not pyproject_path.exists():
        return None
    try:
        with pyproject_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError:
        return None
    return data.get("project", {}).get("version")


def get_runtime_version() -> str | None:
    """Get __version__ by importing the package, or None if not importable."""
    try:
        import simparse  # noqa: PLC0415
    except ImportError:
        return None
    return simparse.__version__


def check_version_matches_pyproject(version: str) -> CheckResult:
    """CRITICAL: __version__ must match pyproject.toml."""
    runtime_version = get_runtime_version()

    if runtime_version is None:
        return CheckResult(
            "version_matches_pyproject",
            False,
            f"Package not importable.\n"
            f"  pyproject.toml: {version}\n"
            f"  Resolution: Run 'pip install -e .'",
        )
    if runtime_version != version:
        return CheckResult(
            "version_matches_pyproject",
            False,
            f"Version mismatch detected!\n"
            f"  pyproject.toml: {version}\n"
            f"  __version__:    {runtime_version}\n"
            f"  Resolution: Run 'pip install -e .' to refresh metadata",
        )
    return CheckResult("version_matches_pyproject", True, f"Version {version} synchronized")


def check_valid_semver(version: str) -> CheckResult:
    """CRITICAL: version must follow MAJOR.MINOR.PATCH[-PRE][+BUILD]."""
    if not SEMVER_PATTERN.match(version):
        return CheckResult(
            "valid_semver",
            False,
            f"Invalid version format: {version!r}\n"
            f"  Expected: MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]",
        )
    return CheckResult("valid_semver", True, f"Version {version} is valid semver")


def check_not_placeholder(version: str) -> CheckResult:
    """CRITICAL: version must not be a development placeholder."""
    if version in PLACEHOLDERS:
        return CheckResult(
            "not_placeholder",
            False,
            f"Development placeholder detected: {version!r}",
        )
    return CheckResult("not_placeholder", True, "Version is not a placeholder")


def check_changelog_mentions_version(root: Path, version: str) -> CheckResult:
    """INFO: CHANGELOG.md should mention the current version."""
    changelog = root / "CHANGELOG.md"
    if not changelog.exists():
        return CheckResult("changelog_mentions_version", True, "No CHANGELOG.md (skipped)", False)
    if version not in changelog.read_text(encoding="utf-8"):
        return CheckResult(
            "changelog_mentions_version",
            False,
            f"CHANGELOG.md does not mention {version}",
            False,
        )
    return CheckResult("changelog_mentions_version", True, "CHANGELOG.md up to date", False)


def main() -> int:
    """Run all version consistency checks."""
    root = Path(__file__).parent.parent
    version = get_pyproject_version(root)

    if version is None:
        print(f"{Colors.RED}[FAIL]{Colors.RESET} Cannot read version from pyproject.toml")
        return 1

    print(f"{Colors.BOLD}{Colors.CYAN}=== Version Consistency Check ==={Colors.RESET}")
    print(f"Canonical version (pyproject.toml): {Colors.BOLD}{version}{Colors.RESET}\n")

    checks = [
        check_version_matches_pyproject(version),
        check_valid_semver(version),
        check_not_placeholder(version),
        check_changelog_mentions_version(root, version),
    ]

    for result in checks:
        if result.passed:
            status = f"{Colors.GREEN}[PASS]{Colors.RESET}"
        elif result.is_critical:
            status = f"{Colors.RED}[FAIL]{Colors.RESET}"
        else:
            status = f"{Colors.YELLOW}[WARN]{Colors.RESET}"
        print(f"  {status} {result.name}")
        if not result.passed:
            for line in result.message.split("\n"):
                print(f"         {line}")

    print()
    failures = [r for r in checks if not r.passed and r.is_critical]
    if failures:
        print(f"{Colors.RED}{Colors.BOLD}[FAIL]{Colors.RESET} {len(failures)} critical failure(s)")
        return 1

    print(f"{Colors.GREEN}{Colors.BOLD}[OK]{Colors.RESET} All critical version checks passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
