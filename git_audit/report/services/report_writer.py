"""Writer for the consolidated audit report."""

from collections.abc import Sequence
from pathlib import Path

from git_audit.audit.domain.value_objects import AuditEntry

DEFAULT_REPORT_FILE = "gitaudit.txt"
ENTRY_SEPARATOR = "\n---\n\n"


class WriteError(RuntimeError):
    """The report file could not be written."""


def format_entry(entry: AuditEntry) -> str:
    """Render one audit entry as a report record."""
    return (
        f"Commit: {entry.revision}\n"
        f"Author: {entry.author}\n"
        f"Date: {entry.date}\n"
        f"\n"
        f"{entry.summary}\n"
    )


class ReportWriter:
    """Writes audit entries to a plain-text report."""

    def write(self, output_file: Path, entries: Sequence[AuditEntry]) -> None:
        """
        Write the entries in the order given, separated by '---' lines.

        A partially written file is left in place if writing fails midway.

        Args:
            output_file: Path of the report file (created or truncated)
            entries: Audit entries in completion order

        Raises:
            WriteError: If the file cannot be created or written
        """
        current: str | None = None
        try:
            with output_file.open("w", encoding="utf-8") as f:
                for index, entry in enumerate(entries):
                    current = entry.revision
                    f.write(format_entry(entry))
                    # Separator between entries, but not after the last one
                    if index < len(entries) - 1:
                        f.write(ENTRY_SEPARATOR)
        except OSError as e:
            if current is None:
                raise WriteError(f"Failed to create file {output_file}: {e}") from e
            raise WriteError(
                f"Failed to write audit data to file {output_file} "
                f"for commit {current}: {e}"
            ) from e
