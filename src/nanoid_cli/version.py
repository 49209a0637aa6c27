"""Build metadata for the version command."""

import re
from importlib import metadata

# Prefix of the git tag for a version
PREFIX = "v"

UNSET_VERSION = "v0.0.0-unset"

# Stamped by scripts/stamp-commit.sh when building a release
GIT_COMMIT_ID = "unknown"

DISTRIBUTION = "nanoid-cli"

SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>[0-9A-Za-z.-]+))?(?:\+[0-9A-Za-z.-]+)?$"
)


def get_version() -> str:
    try:
        return PREFIX + metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return UNSET_VERSION


def get_git_commit_id() -> str:
    return GIT_COMMIT_ID


def semver_version(version: str | None = None) -> tuple[int, int, int, str]:
    """Parse a version such as ``v1.2.3-rc.1`` into (major, minor, patch, prerelease)."""
    version = (version or get_version()).removeprefix(PREFIX)
    match = SEMVER_PATTERN.match(version)
    if not match:
        raise ValueError(f"Invalid semantic version: {version}")
    return int(match["major"]), int(match["minor"]), int(match["patch"]), match["prerelease"] or ""
