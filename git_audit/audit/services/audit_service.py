"""Audit pipeline: summarize every revision of a range, retrying failures."""

from collections.abc import Sequence
from pathlib import Path

from git_audit.audit.domain.value_objects import AuditEntry, AuditResult, AuditState
from git_audit.audit.services.cancellation import CancellationToken
from git_audit.git.domain.errors import DescribeError, MetadataError
from git_audit.git.services.git_service import GitService
from git_audit.summarization.domain.errors import SummarizationError
from git_audit.summarization.services.summarization_service import SummarizationService


class AuditPipeline:
    """Sequential audit of a list of revisions with an unbounded retry queue.

    The run starts with one pass over the enumerated revisions. Every revision
    whose patch, summary or metadata could not be obtained is queued, and the
    queue is drained in further passes until it is empty or the cancellation
    token is triggered. A pass in which every revision fails is restarted
    unconditionally: there is no pass limit and no delay between passes, the
    operator stops the run by interrupting it.
    """

    def __init__(
        self,
        git_service: GitService,
        summarization_service: SummarizationService,
        cancellation_token: CancellationToken,
    ) -> None:
        """
        Initialize AuditPipeline.

        Args:
            git_service: Service for fetching patches and metadata
            summarization_service: Service for generating commit messages
            cancellation_token: Token polled before every revision
        """
        self._git_service = git_service
        self._summarization_service = summarization_service
        self._cancellation_token = cancellation_token
        self.state = AuditState.INITIAL
        self.passes = 0

    def run(self, repo_path: Path, revisions: Sequence[str]) -> AuditResult:
        """
        Process revisions in order and retry failures until done or cancelled.

        Args:
            repo_path: Path to the git repository
            revisions: Revision hashes, newest first

        Returns:
            AuditResult with the audited entries in completion order and the
            revisions still pending
        """
        self.state = AuditState.INITIAL
        self.passes = 0
        entries: list[AuditEntry] = []

        print("--- Initial Processing Pass ---")
        pending, interrupted = self._run_pass(repo_path, revisions, entries, retry=False)
        if interrupted:
            print("Interrupted during initial processing pass.")
            return self._finish(entries, pending, interrupted=True)

        if pending and not self._cancellation_token.is_triggered:
            print("\n--- Starting Retry Processing ---")
            self.state = AuditState.RETRYING

        while pending:
            if self._cancellation_token.is_triggered:
                print("Interrupted during retry processing.")
                return self._finish(entries, pending, interrupted=True)

            self.passes += 1
            print(f"Commits in retry queue: {len(pending)}")
            attempted = len(pending)
            pending, interrupted = self._run_pass(repo_path, pending, entries, retry=True)
            if interrupted:
                print("Interrupted during retry processing.")
                return self._finish(entries, pending, interrupted=True)

            if pending and len(pending) == attempted:
                print(
                    f"All {attempted} commits in the current retry pass failed. "
                    "Retrying them again in the next pass."
                )

        return self._finish(entries, pending, interrupted=False)

    def _run_pass(
        self,
        repo_path: Path,
        revisions: Sequence[str],
        entries: list[AuditEntry],
        retry: bool,
    ) -> tuple[list[str], bool]:
        """
        Attempt each revision once, in order.

        Args:
            repo_path: Path to the git repository
            revisions: Snapshot of the revisions for this pass
            entries: Result collection, appended to on success
            retry: Whether this is a retry pass (only changes console wording)

        Returns:
            Tuple of (queue for the next pass, whether the pass was cancelled)
        """
        next_queue: list[str] = []
        for index, revision in enumerate(revisions):
            if self._cancellation_token.is_triggered:
                next_queue.extend(revisions[index:])
                return next_queue, True

            print(f"{'Retrying' if retry else 'Processing'} commit: {revision}")
            entry = self._process_revision(repo_path, revision, retry)
            if entry is None:
                next_queue.append(revision)
            else:
                entries.append(entry)

        return next_queue, False

    def _process_revision(
        self, repo_path: Path, revision: str, retry: bool
    ) -> AuditEntry | None:
        """
        Fetch the patch, summarize it and fetch the metadata of one revision.

        Returns:
            The AuditEntry, or None if any step failed
        """
        suffix = (
            " during retry: {error}. Will retry again."
            if retry
            else ": {error}. Adding to retry queue."
        )

        try:
            changeset = self._git_service.changeset_for(repo_path, revision)
        except DescribeError as e:
            print(f"Error generating patch for commit {revision}" + suffix.format(error=e))
            return None

        try:
            summary = self._summarization_service.summarize_changeset(changeset)
        except SummarizationError as e:
            print(f"Error calling Ollama for commit {revision}" + suffix.format(error=e))
            return None

        try:
            metadata = self._git_service.metadata_for(repo_path, revision)
        except MetadataError as e:
            print(f"Error getting metadata for commit {revision}" + suffix.format(error=e))
            return None

        print(
            f"Successfully processed commit {revision}"
            f"{' on retry' if retry else ''} (Got Ollama summary and Git metadata)"
        )
        return AuditEntry(
            revision=metadata.revision,
            author=metadata.author,
            date=metadata.date,
            summary=summary,
        )

    def _finish(
        self, entries: list[AuditEntry], pending: list[str], interrupted: bool
    ) -> AuditResult:
        self.state = AuditState.DONE
        return AuditResult(
            entries=tuple(entries),
            pending=tuple(pending),
            interrupted=interrupted,
            passes=self.passes,
        )
