#!/usr/bin/env python3

import argparse
import re
import sys
from pathlib import Path

import semver

PYPROJECT_VERSION_RE = re.compile(r'(\[project\].*?)version\s*=\s*"([^"]+)"', re.DOTALL)
PACKAGE_VERSION_RE = re.compile(r'^__version__\s*=\s*"([^"]+)"', re.MULTILINE)


def get_version_from_pyproject(pyproject_path: Path) -> str:
    content = pyproject_path.read_text()
    match = PYPROJECT_VERSION_RE.search(content)
    if not match:
        raise ValueError(f"Could not find version in {pyproject_path}")
    return match.group(2)


def update_version_in_pyproject(pyproject_path: Path, new_version: str) -> None:
    content = pyproject_path.read_text()
    new_content = PYPROJECT_VERSION_RE.sub(
        lambda m: f'{m.group(1)}version = "{new_version}"', content, count=1
    )
    pyproject_path.write_text(new_content)


def update_version_in_package(init_path: Path, new_version: str) -> None:
    content = init_path.read_text()
    if not PACKAGE_VERSION_RE.search(content):
        raise ValueError(f"Could not find __version__ in {init_path}")
    new_content = PACKAGE_VERSION_RE.sub(f'__version__ = "{new_version}"', content, count=1)
    init_path.write_text(new_content)


def bump(root: Path, bump_type: str) -> str:
    """Bump the version in pyproject.toml and the package, returning the new one."""
    project_toml = root / "pyproject.toml"
    package_init = root / "src" / "greeter" / "__init__.py"

    current_version = get_version_from_pyproject(project_toml)
    new_version = str(semver.Version.parse(current_version).next_version(bump_type))

    update_version_in_pyproject(project_toml, new_version)
    update_version_in_package(package_init, new_version)
    return new_version


def main() -> None:
    parser = argparse.ArgumentParser(description="Bump the greeter package version")
    parser.add_argument(
        "bump_type", choices=["patch", "minor", "major", "prerelease"], help="Type of version bump to perform"
    )
    args = parser.parse_args()

    root = Path.cwd()
    if not (root / "pyproject.toml").exists():
        print("Error: Could not find pyproject.toml file")
        sys.exit(1)

    current_version = get_version_from_pyproject(root / "pyproject.toml")
    new_version = bump(root, args.bump_type)
    print(f"Bumped version from {current_version} to {new_version}")


if __name__ == "__main__":
    main()
