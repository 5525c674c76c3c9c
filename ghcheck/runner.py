"""
GHCheck Command Runner — Run external tools and capture their output.

Every probe in the checker shells out to some tool (git, code). This module
is the single place that does it. Failures of any kind (non-zero exit, a
missing executable, the process not spawning at all) are folded into a
CommandOutcome instead of being raised, so a check only ever has to branch
on whether output is available.

Usage:
    from ghcheck.runner import run_command

    outcome = run_command("git --version")
    if outcome.available:
        print(outcome.output)
"""

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutcome:
    """Result of one external command invocation."""
    command: str
    succeeded: bool
    stdout: Optional[str] = None   # Trimmed stdout; None if the command never ran

    @property
    def output(self) -> Optional[str]:
        """Trimmed stdout, or None when the command failed or printed nothing."""
        if not self.succeeded or not self.stdout:
            return None
        return self.stdout

    @property
    def available(self) -> bool:
        return self.output is not None


# A runner is anything that turns a command string into an outcome.
# Checks receive one through their context so tests can substitute it.
CommandRunner = Callable[[str], CommandOutcome]


def run_command(command: str, cwd: str | Path | None = None) -> CommandOutcome:
    """Run a shell command synchronously and capture its output.

    The command is run through the shell so redirections such as ``2>&1``
    behave as they would at a prompt. stdin is closed, git's terminal
    prompt is disabled and on POSIX the child runs in a new session without
    a controlling terminal, so a probe can never block waiting for input.

    Args:
        command: Shell command line (e.g., "git config user.name").
        cwd: Working directory; defaults to the current one.

    Returns:
        CommandOutcome. Never raises.
    """
    logger.debug("Running: %s", command)
    try:
        result = subprocess.run(
            command,
            shell=True,
            cwd=str(cwd) if cwd is not None else None,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            env={**os.environ, "GIT_TERMINAL_PROMPT": "0"},
            # No controlling terminal: ssh cannot open /dev/tty to prompt
            start_new_session=os.name == "posix",
        )
    except OSError as e:
        logger.debug("Could not start %r: %s", command, e)
        return CommandOutcome(command=command, succeeded=False)

    if result.returncode != 0:
        # 127 is the shell's "command not found"
        logger.debug("%r exited with %d: %s", command, result.returncode,
                     result.stderr.strip())
        return CommandOutcome(command=command, succeeded=False,
                              stdout=result.stdout.strip())

    return CommandOutcome(command=command, succeeded=True,
                          stdout=result.stdout.strip())


def runner_for(cwd: str | Path | None) -> CommandRunner:
    """Bind run_command to a working directory."""
    def run(command: str) -> CommandOutcome:
        return run_command(command, cwd=cwd)
    return run
