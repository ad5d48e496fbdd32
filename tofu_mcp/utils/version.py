"""
Version resolution utilities for Tofu MCP.

Registry version ids are opaque strings: usually semantic versions, sometimes
"v"-prefixed, occasionally something else entirely. These helpers pick the
latest one without ever failing on an identifier they cannot read.
"""

import re

# First run of up to three dot-separated numeric components, not embedded in
# a longer run of digits.
_COERCE_PATTERN = re.compile(r"(?:^|[^\d])(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?:$|[^\d])")


def coerce_version(version: str | None) -> tuple[int, int, int] | None:
    """
    Coerce a version string into a (major, minor, patch) tuple.

    A leading "v" is ignored, missing components default to zero, and any
    pre-release or build suffix is dropped.

    Args:
        version: Version string to coerce

    Returns:
        The coerced tuple, or None if the string contains no version number

    Examples:
        >>> coerce_version("v1.2.3")
        (1, 2, 3)
        >>> coerce_version("2.0.0-rc1")
        (2, 0, 0)
        >>> coerce_version("4")
        (4, 0, 0)
        >>> coerce_version("latest") is None
        True
    """
    if not version:
        return None

    match = _COERCE_PATTERN.search(version.removeprefix("v"))
    if not match:
        return None

    major, minor, patch = match.groups()
    return int(major), int(minor or 0), int(patch or 0)


def resolve_latest_version(versions: list[str]) -> str | None:
    """
    Pick the latest version from a list of version ids.

    Ids that coerce to a semantic version are ordered newest first and the
    top entry is returned in its original form (e.g. "v5.0.0", not "5.0.0").
    Among equal versions the one listed first wins. When nothing coerces,
    the first id is returned unchanged.

    Args:
        versions: Version ids in registry order

    Returns:
        The latest version id, or None for an empty list

    Examples:
        >>> resolve_latest_version(["1.9.0", "v2.0.0", "1.10.0"])
        'v2.0.0'
        >>> resolve_latest_version(["nightly", "stable"])
        'nightly'
        >>> resolve_latest_version([]) is None
        True
    """
    if not versions:
        return None

    candidates = [
        (coerced, original)
        for original in versions
        if (coerced := coerce_version(original)) is not None
    ]

    if not candidates:
        return versions[0]

    candidates.sort(key=lambda candidate: candidate[0], reverse=True)
    return candidates[0][1]
