"""Protocol for reporting network data integrity issues."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from transit_routing.domain.models.integrity_issue import DataIntegrityIssue


class IntegrityIssueReporterProtocol(Protocol):
    """Protocol for receiving data integrity issues found during a search."""

    def report(self, issue: "DataIntegrityIssue") -> None:
        """Report an issue.

        Args:
            issue: The issue found. The search continues after reporting.
        """
        ...
