"""
GHCheck Version Helpers — Pull version numbers out of tool banners.

`git --version` prints "git version 2.43.0" (with platform suffixes such as
".windows.1" or " (Apple Git-146)"), and `code --version` prints the
version on its first line followed by the commit hash and architecture.
These helpers extract the numeric part and compare it with
packaging.version.
"""

import re
from typing import Optional

from packaging.version import InvalidVersion, Version

_VERSION_RE = re.compile(r"(\d+(?:\.\d+){1,3})")


def extract_version(text: Optional[str]) -> Optional[str]:
    """Find the first dotted version number in a tool's output.

    Examples:
        "git version 2.43.0"               -> "2.43.0"
        "git version 2.39.3 (Apple Git-146)" -> "2.39.3"
        "1.85.1\\n0ee08df0cf...\\nx64"       -> "1.85.1"
    """
    if not text:
        return None
    match = _VERSION_RE.search(text)
    return match.group(1) if match else None


def first_line(text: Optional[str]) -> str:
    return text.splitlines()[0] if text else ""


def is_older_than(version_text: Optional[str], minimum: str) -> bool:
    """True when a tool banner carries a version below `minimum`.

    An unparseable banner is never reported as old.
    """
    version = extract_version(version_text)
    if version is None:
        return False
    try:
        return Version(version) < Version(minimum)
    except InvalidVersion:
        return False
