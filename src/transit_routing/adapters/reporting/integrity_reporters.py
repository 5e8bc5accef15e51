"""Adapters receiving data integrity issues found during searches."""

import logging

from transit_routing.domain.contracts.integrity_reporter import IntegrityIssueReporterProtocol
from transit_routing.domain.models.integrity_issue import DataIntegrityIssue

logger = logging.getLogger(__name__)


class LoggingIntegrityReporter(IntegrityIssueReporterProtocol):
    """Logs every reported issue as a warning."""

    def report(self, issue: DataIntegrityIssue) -> None:
        """Log the issue."""
        logger.warning(
            f"Data integrity issue at station {issue.station_id} "
            f"(destination {issue.destination_id}): {issue.reason}"
        )


class InMemoryIntegrityReporter(IntegrityIssueReporterProtocol):
    """Keeps reported issues in memory and logs them."""

    def __init__(self) -> None:
        """Initialize with no issues."""
        self._issues: list[DataIntegrityIssue] = []
        self._logging_reporter = LoggingIntegrityReporter()

    def report(self, issue: DataIntegrityIssue) -> None:
        """Record and log the issue."""
        self._issues.append(issue)
        self._logging_reporter.report(issue)

    @property
    def issues(self) -> list[DataIntegrityIssue]:
        """Issues reported so far, oldest first."""
        return list(self._issues)

    def clear(self) -> None:
        self._issues.clear()
