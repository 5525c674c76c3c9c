"""
GHCheck Dev Container Loader — Read .devcontainer/devcontainer.json.

devcontainer.json is "JSON with comments": VS Code accepts // line comments
and /* */ block comments in it. Comments are stripped textually before the
content is handed to the json module.

Known limitation: stripping is a plain regex pass and knows nothing about
string literals, so a value containing "//" (any URL, for instance) or "/*"
is cut at that point and may then fail to parse or parse to a truncated
value.
"""

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

DEVCONTAINER_PATH = Path(".devcontainer") / "devcontainer.json"

_LINE_COMMENT_RE = re.compile(r"//.*$", re.MULTILINE)
_BLOCK_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")


class DevContainerError(ValueError):
    """The dev container file exists but could not be read or parsed."""


@dataclass
class DevContainerConfig:
    """Parsed devcontainer.json."""
    path: Path
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def extensions(self) -> Optional[list[str]]:
        """customizations.vscode.extensions, or None when not configured."""
        customizations = self.data.get("customizations")
        if not isinstance(customizations, dict):
            return None
        vscode = customizations.get("vscode")
        if not isinstance(vscode, dict):
            return None
        extensions = vscode.get("extensions")
        if not isinstance(extensions, list):
            return None
        return [str(e) for e in extensions]


def strip_json_comments(text: str) -> str:
    """Remove // line comments, then /* */ block comments."""
    text = _LINE_COMMENT_RE.sub("", text)
    return _BLOCK_COMMENT_RE.sub("", text)


def devcontainer_path(cwd: str | Path) -> Path:
    return Path(cwd) / DEVCONTAINER_PATH


def load_devcontainer(cwd: str | Path) -> Optional[DevContainerConfig]:
    """Load the dev container config under `cwd`.

    Returns:
        DevContainerConfig, or None if the file does not exist.

    Raises:
        DevContainerError: the file exists but is unreadable or malformed.
    """
    path = devcontainer_path(cwd)
    if not path.exists():
        return None

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DevContainerError(f"Could not read {path}: {e}") from e

    try:
        data = json.loads(strip_json_comments(raw))
    except json.JSONDecodeError as e:
        raise DevContainerError(str(e)) from e

    if not isinstance(data, dict):
        raise DevContainerError(
            f"Expected a JSON object at top level, got {type(data).__name__}"
        )

    return DevContainerConfig(path=path, data=data)
