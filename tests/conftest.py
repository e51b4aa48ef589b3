"""Shared fakes and fixtures for the git-audit test suite."""

import re
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from git_audit.audit.services.audit_service import AuditPipeline
from git_audit.audit.services.cancellation import CancellationToken
from git_audit.git.domain.errors import (
    DescribeError,
    MalformedMetadataError,
    MetadataError,
    RepositoryError,
    UnresolvableRevisionError,
)
from git_audit.git.domain.value_objects import RevisionChangeset, RevisionMetadata
from git_audit.git.repositories.interfaces import GitRepository
from git_audit.git.services.git_service import GitService
from git_audit.summarization.domain.errors import TransportError
from git_audit.summarization.repositories.interfaces import LLMAgentRepository
from git_audit.summarization.services.summarization_service import (
    SummarizationService,
)

PATCH_PATTERN = re.compile(r"^PATCH (\S+)$", re.MULTILINE)


class FakeGitRepository(GitRepository):
    """In-memory repository: history is newest first, failures are counted down."""

    def __init__(
        self,
        history: Iterable[str],
        unreachable: Iterable[str] = (),
        aliases: dict[str, str] | None = None,
        is_repository: bool = True,
    ) -> None:
        self.history = tuple(history)
        self.known = set(self.history) | set(unreachable)
        self.aliases = aliases or {}
        self.is_repository = is_repository
        self.changeset_failures: dict[str, int] = {}
        self.metadata_failures: dict[str, int] = {}
        self.malformed: set[str] = set()
        self.calls: list[tuple[str, str]] = []

    def check_repository(self, repo_path: Path) -> None:
        if not self.is_repository:
            raise RepositoryError(f"Path {repo_path} is not a git repository")

    def resolve_revision(self, repo_path: Path, revision: str) -> str:
        canonical = self.aliases.get(revision, revision)
        if canonical not in self.known:
            raise UnresolvableRevisionError(f"Failed to resolve commit ID {revision}")
        return canonical

    def list_revisions(self, repo_path: Path) -> tuple[str, ...]:
        return self.history

    def get_changeset(self, repo_path: Path, revision: str) -> RevisionChangeset:
        self.calls.append(("changeset", revision))
        if self._consume_failure(self.changeset_failures, revision):
            raise DescribeError(f"git show failed for {revision}")
        return RevisionChangeset(revision=revision, content=f"PATCH {revision}\n")

    def get_metadata(self, repo_path: Path, revision: str) -> RevisionMetadata:
        self.calls.append(("metadata", revision))
        if revision in self.malformed:
            raise MalformedMetadataError(f"expected 3 lines for {revision}")
        if self._consume_failure(self.metadata_failures, revision):
            raise MetadataError(f"git show -s failed for {revision}")
        return RevisionMetadata(
            revision=revision,
            author=f"Author of {revision}",
            date="2024-01-01 12:00:00 +0000",
        )

    @staticmethod
    def _consume_failure(failures: dict[str, int], revision: str) -> bool:
        remaining = failures.get(revision, 0)
        if remaining == 0:
            return False
        if remaining > 0:
            failures[revision] = remaining - 1
        # Negative counts fail forever
        return True


class FakeLLMAgent(LLMAgentRepository):
    """Agent answering 'summary of <revision>' unless a failure is scheduled."""

    def __init__(self) -> None:
        self.failures: dict[str, int] = {}
        self.prompts: list[str] = []
        self.after_call: Callable[[str], None] | None = None

    def summarize(self, prompt: str) -> str:
        self.prompts.append(prompt)
        match = PATCH_PATTERN.search(prompt)
        revision = match.group(1) if match else "?"
        try:
            remaining = self.failures.get(revision, 0)
            if remaining != 0:
                if remaining > 0:
                    self.failures[revision] = remaining - 1
                raise TransportError(f"connection refused for {revision}")
            return f"summary of {revision}"
        finally:
            if self.after_call is not None:
                self.after_call(revision)


@pytest.fixture
def history():
    return ("a" * 40, "b" * 40, "c" * 40, "d" * 40, "e" * 40)


@pytest.fixture
def fake_repository(history):
    return FakeGitRepository(history)


@pytest.fixture
def fake_agent():
    return FakeLLMAgent()


@pytest.fixture
def token():
    return CancellationToken()


@pytest.fixture
def pipeline(fake_repository, fake_agent, token):
    return AuditPipeline(
        GitService(fake_repository),
        SummarizationService(fake_agent),
        token,
    )
