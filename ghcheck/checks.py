"""
GHCheck Checks — The ordered registry of diagnostic probes.

Each check is an independent probe: it runs one or more external commands
(or reads one file), prints what it found, and returns a CheckResult. Checks
never raise and never depend on each other's results, so all of them always
run, in registration order.

Adding a check means writing a function that takes a CheckContext and
registering it with register_check(); the runner loop and the summary do
not change.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Optional

from ghcheck.devcontainer import DevContainerError, load_devcontainer
from ghcheck.presenter import Presenter
from ghcheck.runner import CommandRunner, run_command
from ghcheck.versions import first_line, is_older_than

logger = logging.getLogger(__name__)


class CheckResult(Enum):
    """Outcome of one check."""
    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"                      # Applicable, not passing, not a hard failure
    NOT_APPLICABLE = "not_applicable"  # Skipped; excluded from the summary ratio


class Problem(Enum):
    """Kinds of problem a check can run into (used for diagnostics logging)."""
    TOOL_MISSING = "tool_missing"
    CONFIG_MISSING = "config_missing"
    CONFIG_MISMATCH = "config_mismatch"
    AUTH_UNCLEAR = "auth_unclear"
    FILE_UNREADABLE_OR_MALFORMED = "file_unreadable_or_malformed"


class ExtensionLevel(Enum):
    """How strongly an editor extension is recommended."""
    RECOMMENDED = "recommended"      # Warning if absent, with install hint
    OPTIONAL = "optional"            # Warning if absent
    INFORMATIONAL = "informational"  # Info line if absent


@dataclass(frozen=True)
class ExtensionExpectation:
    """An editor extension the checker looks for."""
    extension_id: str
    label: str
    level: ExtensionLevel
    hint: Optional[str] = None


@dataclass
class CheckContext:
    """Everything a check is allowed to touch."""
    run: CommandRunner = run_command
    out: Presenter = field(default_factory=Presenter)
    cwd: Path = field(default_factory=Path.cwd)


@dataclass(frozen=True)
class Check:
    """A registered check: a section title and the function that runs it."""
    check_id: str
    title: str
    func: Callable[[CheckContext], CheckResult]


class ExtensionSet:
    """Editor extension identifiers, matched case-insensitively.

    Used both for the `code --list-extensions` listing and for the
    extensions listed in devcontainer.json.
    """

    def __init__(self, extension_ids: Iterable[str] = ()):
        self._ids = {e.strip().casefold() for e in extension_ids if e.strip()}

    @classmethod
    def from_output(cls, text: Optional[str]) -> "ExtensionSet":
        """Build from `code --list-extensions` output (one identifier per line)."""
        return cls((text or "").splitlines())

    def __contains__(self, extension_id: object) -> bool:
        return isinstance(extension_id, str) and extension_id.casefold() in self._ids

    def __len__(self) -> int:
        return len(self._ids)


# =============================================================================
# Configuration
# =============================================================================

GITHUB_HOST = "github.com"
REMOTE_NAME = "origin"
MIN_RECOMMENDED_GIT = "2.28.0"
COPILOT_EXTENSION = "GitHub.copilot"

EXTENSION_EXPECTATIONS: list[ExtensionExpectation] = [
    ExtensionExpectation(
        extension_id=COPILOT_EXTENSION,
        label="GitHub Copilot",
        level=ExtensionLevel.RECOMMENDED,
        hint="Install from: https://marketplace.visualstudio.com/items?itemName=GitHub.copilot",
    ),
    ExtensionExpectation(
        extension_id="GitHub.vscode-pull-request-github",
        label="GitHub Pull Requests",
        level=ExtensionLevel.OPTIONAL,
    ),
    ExtensionExpectation(
        extension_id="eamodio.gitlens",
        label="GitLens",
        level=ExtensionLevel.INFORMATIONAL,
    ),
]


# =============================================================================
# REGISTRY
# =============================================================================

CHECKS: list[Check] = []


def register_check(check: Check) -> Check:
    """Append a check to the ordered registry."""
    CHECKS.append(check)
    return check


def run_checks(ctx: CheckContext, checks: Optional[list[Check]] = None) -> list[CheckResult]:
    """Run every check in order and collect their results.

    Each check gets a numbered section header. A check that raises despite
    its own error handling is reported as a failure and the run continues.
    """
    checks = CHECKS if checks is None else checks
    results = []
    for num, check in enumerate(checks, 1):
        ctx.out.header(f"{num}. {check.title}")
        try:
            result = check.func(ctx)
        except Exception as e:
            logger.exception("Check %s crashed", check.check_id)
            ctx.out.error(f"Check could not complete: {e}")
            result = CheckResult.FAIL
        logger.debug("Check %s -> %s", check.check_id, result.value)
        results.append(result)
    return results


def _problem(check_id: str, problem: Problem, detail: str = "") -> None:
    logger.debug("%s: %s %s", check_id, problem.value, detail)


# =============================================================================
# 1. Git installation
# =============================================================================

def check_git_installation(ctx: CheckContext) -> CheckResult:
    version = ctx.run("git --version")
    if not version.available:
        _problem("git_installation", Problem.TOOL_MISSING, "git")
        ctx.out.error("Git is not installed or not in PATH")
        ctx.out.info("Install Git from: https://git-scm.com/downloads")
        return CheckResult.FAIL

    ctx.out.success(f"Git is installed: {version.output}")
    if is_older_than(version.output, MIN_RECOMMENDED_GIT):
        ctx.out.warning(f"Git {MIN_RECOMMENDED_GIT} or newer is recommended")
        ctx.out.info("Update Git from: https://git-scm.com/downloads")
    return CheckResult.PASS


# =============================================================================
# 2. Git identity
# =============================================================================

_IDENTITY_KEYS = [
    ("user.name", '"Your Name"'),
    ("user.email", '"your.email@example.com"'),
]


def check_git_configuration(ctx: CheckContext) -> CheckResult:
    all_good = True
    for key, example in _IDENTITY_KEYS:
        value = ctx.run(f"git config {key}")
        if value.available:
            ctx.out.success(f"Git {key} is set: {value.output}")
        else:
            _problem("git_configuration", Problem.CONFIG_MISSING, key)
            ctx.out.error(f"Git {key} is not configured")
            ctx.out.info(f"Configure it with: git config --global {key} {example}")
            all_good = False
    return CheckResult.PASS if all_good else CheckResult.FAIL


# =============================================================================
# 3. GitHub remote
# =============================================================================

def check_github_remote(ctx: CheckContext) -> CheckResult:
    inside = ctx.run("git rev-parse --is-inside-work-tree")
    if not inside.available:
        ctx.out.warning("Not inside a git repository")
        return CheckResult.NOT_APPLICABLE

    remote = ctx.run(f"git remote get-url {REMOTE_NAME}")
    if not remote.available:
        _problem("github_remote", Problem.CONFIG_MISSING, REMOTE_NAME)
        ctx.out.error("No remote repository configured")
        ctx.out.info(f"Add a GitHub remote with: git remote add {REMOTE_NAME} <github-repo-url>")
        return CheckResult.FAIL

    if GITHUB_HOST in remote.output:
        ctx.out.success(f"GitHub remote is configured: {remote.output}")
        return CheckResult.PASS

    _problem("github_remote", Problem.CONFIG_MISMATCH, remote.output)
    ctx.out.warning(f"Remote is configured but not GitHub: {remote.output}")
    return CheckResult.WARN


# =============================================================================
# 4. GitHub authentication
# =============================================================================

def check_github_authentication(ctx: CheckContext) -> CheckResult:
    # Heuristic: a read-only handshake whose output mentions no error.
    handshake = ctx.run(f"git ls-remote {REMOTE_NAME} HEAD 2>&1")
    if handshake.available:
        lowered = handshake.output.lower()
        if "error" not in lowered and "fatal" not in lowered:
            ctx.out.success("GitHub authentication is working")
            return CheckResult.PASS

    _problem("github_authentication", Problem.AUTH_UNCLEAR, handshake.stdout or "")
    ctx.out.error("GitHub authentication may not be configured")
    ctx.out.info("Configure GitHub authentication:")
    ctx.out.info("  - Use GitHub CLI: gh auth login")
    ctx.out.info("  - Or use Git Credential Manager")
    ctx.out.info("  - Or configure SSH keys: https://docs.github.com/en/authentication")
    return CheckResult.FAIL


# =============================================================================
# 5. VS Code extensions
# =============================================================================

def _report_extension(ctx: CheckContext, installed: ExtensionSet,
                      expected: ExtensionExpectation) -> None:
    if expected.extension_id in installed:
        ctx.out.success(f"{expected.label} extension is installed")
        return

    if expected.level is ExtensionLevel.RECOMMENDED:
        ctx.out.warning(f"{expected.label} extension is not installed")
    elif expected.level is ExtensionLevel.OPTIONAL:
        ctx.out.warning(f"{expected.label} extension is not installed (optional)")
    else:
        ctx.out.info(f"{expected.label} extension is not installed (optional but recommended)")
    if expected.hint:
        ctx.out.info(expected.hint)


def check_vscode_extensions(ctx: CheckContext) -> CheckResult:
    code_version = ctx.run("code --version")
    if not code_version.available:
        _problem("vscode_extensions", Problem.TOOL_MISSING, "code")
        ctx.out.warning("VS Code CLI is not available")
        ctx.out.info('Make sure VS Code is installed and "code" command is in PATH')
        ctx.out.info("In VS Code: Cmd/Ctrl+Shift+P -> \"Shell Command: Install 'code' command in PATH\"")
        return CheckResult.WARN

    ctx.out.success(f"VS Code is installed: {first_line(code_version.output)}")

    listing = ctx.run("code --list-extensions")
    if not listing.available:
        ctx.out.warning("Could not retrieve VS Code extensions list")
        return CheckResult.WARN

    installed = ExtensionSet.from_output(listing.output)
    logger.debug("%d extensions installed", len(installed))
    for expected in EXTENSION_EXPECTATIONS:
        _report_extension(ctx, installed, expected)
    return CheckResult.PASS


# =============================================================================
# 6. Dev container configuration
# =============================================================================

def check_devcontainer_configuration(ctx: CheckContext) -> CheckResult:
    try:
        config = load_devcontainer(ctx.cwd)
    except DevContainerError as e:
        _problem("devcontainer", Problem.FILE_UNREADABLE_OR_MALFORMED, str(e))
        ctx.out.warning(f"Dev Container configuration exists but could not be parsed: {e}")
        return CheckResult.WARN

    if config is None:
        ctx.out.info("No Dev Container configuration found (optional)")
        return CheckResult.NOT_APPLICABLE

    ctx.out.success("Dev Container configuration found")
    extensions = config.extensions
    if extensions is not None:
        if COPILOT_EXTENSION in ExtensionSet(extensions):
            ctx.out.success("GitHub Copilot is configured in devcontainer.json")
        ctx.out.info(f"Configured extensions: {', '.join(extensions)}")
    return CheckResult.PASS


register_check(Check("git_installation", "Checking Git Installation", check_git_installation))
register_check(Check("git_configuration", "Checking Git Configuration", check_git_configuration))
register_check(Check("github_remote", "Checking GitHub Remote Connection", check_github_remote))
register_check(Check("github_authentication", "Checking GitHub Authentication", check_github_authentication))
register_check(Check("vscode_extensions", "Checking VS Code Extensions", check_vscode_extensions))
register_check(Check("devcontainer", "Checking Dev Container Configuration", check_devcontainer_configuration))
