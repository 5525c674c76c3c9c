"""
GHCheck — GitHub Integration Checker for VS Code

Runs every diagnostic check in order and prints a summary:
  1. Git installation
  2. Git identity (user.name / user.email)
  3. GitHub remote for the current repository
  4. GitHub authentication (read-only ls-remote)
  5. VS Code CLI and GitHub-related extensions
  6. Dev container configuration

The checker is advisory only: it always exits with status 0.

Usage:
    python main.py                  # Check the current directory
    python main.py -C ~/src/project # Check another working tree
    python main.py --no-color       # Plain output (e.g., when piping)
    python main.py -v               # Log every command to stderr
"""

import argparse
import logging
import sys
from pathlib import Path

from ghcheck import __version__
from ghcheck.checks import CheckContext, run_checks
from ghcheck.presenter import Presenter
from ghcheck.runner import runner_for
from ghcheck.summary import print_summary

logger = logging.getLogger("ghcheck")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check that VS Code and git are set up to work with GitHub",
    )
    parser.add_argument("-C", "--directory", type=Path, default=None,
                        help="Run the checks in this directory instead of the current one")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log commands and check outcomes to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cwd = (args.directory or Path.cwd()).resolve()
    if not cwd.is_dir():
        logger.warning("%s is not a directory; checking %s instead", cwd, Path.cwd())
        cwd = Path.cwd()

    out = Presenter(color=not args.no_color, stream=sys.stdout)
    ctx = CheckContext(run=runner_for(cwd), out=out, cwd=cwd)

    out.banner()
    results = run_checks(ctx)
    summary = print_summary(results, out)
    logger.debug("Passed %d of %d applicable checks (%d skipped)",
                 summary.passed, summary.applicable, summary.skipped)
    return 0


if __name__ == "__main__":
    sys.exit(main())
