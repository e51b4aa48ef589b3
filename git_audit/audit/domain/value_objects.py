"""Value objects for the audit domain."""

from dataclasses import dataclass
from enum import Enum


class AuditState(str, Enum):
    """Phase of an audit pipeline run."""

    INITIAL = "initial"
    RETRYING = "retrying"
    DONE = "done"


@dataclass(frozen=True)
class AuditEntry:
    """A summarized revision, ready to be written to the report."""

    revision: str
    author: str
    date: str
    summary: str


@dataclass(frozen=True)
class AuditResult:
    """Outcome of an audit pipeline run.

    Attributes:
        entries: Audited revisions in completion order
        pending: Revisions still awaiting processing when the run stopped
        interrupted: Whether the run was stopped by cancellation
        passes: Number of retry passes that were started
    """

    entries: tuple[AuditEntry, ...]
    pending: tuple[str, ...]
    interrupted: bool
    passes: int

    def unique_pending(self) -> tuple[str, ...]:
        """Pending revisions without duplicates, in order of first appearance."""
        return tuple(dict.fromkeys(self.pending))
