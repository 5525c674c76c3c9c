"""
GHCheck Summary — Aggregate check results into a final verdict.

Only applicable checks count: a NOT_APPLICABLE result is left out of both
the pass count and the total, so a skipped check neither helps nor hurts.
"""

from dataclasses import dataclass

from ghcheck.checks import CheckResult
from ghcheck.presenter import C, Presenter

RESOURCES: list[tuple[str, str]] = [
    ("GitHub Docs", "https://docs.github.com/en/get-started"),
    ("VS Code with GitHub", "https://code.visualstudio.com/docs/sourcecontrol/github"),
    ("GitHub Copilot Setup",
     "https://docs.github.com/en/copilot/getting-started-with-github-copilot"),
]


@dataclass
class Summary:
    """Counts over one run's results."""
    passed: int = 0
    applicable: int = 0
    total: int = 0

    @property
    def skipped(self) -> int:
        return self.total - self.applicable

    @property
    def all_passed(self) -> bool:
        return self.passed == self.applicable

    def __str__(self) -> str:
        if self.all_passed:
            return f"All checks passed! ({self.passed}/{self.applicable})"
        return f"{self.passed} out of {self.applicable} checks passed"


def summarize(results: list[CheckResult]) -> Summary:
    return Summary(
        passed=sum(1 for r in results if r is CheckResult.PASS),
        applicable=sum(1 for r in results if r is not CheckResult.NOT_APPLICABLE),
        total=len(results),
    )


def print_summary(results: list[CheckResult], out: Presenter) -> Summary:
    """Print the verdict and the resource links; return the counts."""
    summary = summarize(results)
    out.header("Summary")
    out.blank()

    if summary.all_passed:
        out.success(str(summary))
        out.blank()
        out.emphasis("Your VS Code is properly configured to use GitHub!", C.GREEN)
    else:
        out.warning(str(summary))
        out.blank()
        out.emphasis("Some configuration issues were found. Please review the output above.",
                     C.YELLOW)

    out.blank()
    out.emphasis("Additional Resources:", C.BLUE)
    for label, url in RESOURCES:
        out.info(f"- {label}: {url}")
    return summary
