"""Application version.

Installed copies report the distribution version. A source checkout reads
the VERSION file at the project root and appends the number of commits
since the last tag when git is available.
"""

import subprocess
from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "sprite-grid-editor"

# editor/src/version.py -> project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def get_version() -> str:
    """Version string such as '1.0.3'."""
    checkout_version = _checkout_version()
    if checkout_version is not None:
        return checkout_version
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"


def _checkout_version():
    version_file = _PROJECT_ROOT / "VERSION"
    try:
        major_minor = version_file.read_text().strip()
    except FileNotFoundError:
        return None
    return f"{major_minor}.{_commits_since_tag()}"


def _commits_since_tag() -> int:
    try:
        result = subprocess.run(
            ['git', 'describe', '--tags', '--long'],
            capture_output=True, text=True, check=False,
            cwd=str(_PROJECT_ROOT),
        )
    except FileNotFoundError:
        return 0  # git not installed
    if result.returncode != 0:
        return 0
    # v1.0-5-gabcdef -> 5
    parts = result.stdout.strip().rsplit('-', 2)
    if len(parts) == 3 and parts[1].isdigit():
        return int(parts[1])
    return 0
