"""Tests for revision enumeration and description through GitService."""

from pathlib import Path

import pytest

from conftest import FakeGitRepository
from git_audit.git.domain.errors import (
    NotAnAncestorError,
    RepositoryError,
    UnresolvableRevisionError,
)
from git_audit.git.domain.value_objects import RevisionRange
from git_audit.git.services.git_service import GitService

REPO = Path("/repo")


class TestEnumerateRevisions:
    """Test enumeration from HEAD back to the boundary."""

    @pytest.mark.parametrize("boundary_index", [0, 1, 2, 4])
    def test_range_ends_at_boundary(self, history, boundary_index):
        service = GitService(FakeGitRepository(history))

        revisions = service.enumerate_revisions(REPO, history[boundary_index])

        assert revisions == history[: boundary_index + 1]
        assert revisions[0] == history[0]
        assert revisions[-1] == history[boundary_index]

    def test_short_identifier_resolves_to_canonical(self, history):
        repository = FakeGitRepository(history, aliases={"ccc": history[2]})

        revisions = GitService(repository).enumerate_revisions(REPO, "ccc")

        assert revisions == history[:3]

    def test_enumerate_range_value_object(self, history):
        service = GitService(FakeGitRepository(history))

        revisions = service.enumerate_range(
            RevisionRange(repo_path=REPO, boundary=history[1])
        )

        assert revisions == history[:2]

    def test_not_an_ancestor(self, history):
        repository = FakeGitRepository(history, unreachable=["f" * 40])

        with pytest.raises(NotAnAncestorError, match="is not an ancestor"):
            GitService(repository).enumerate_revisions(REPO, "f" * 40)

    def test_unresolvable_boundary(self, history):
        with pytest.raises(UnresolvableRevisionError):
            GitService(FakeGitRepository(history)).enumerate_revisions(REPO, "nope")

    def test_not_a_repository(self, history):
        repository = FakeGitRepository(history, is_repository=False)

        with pytest.raises(RepositoryError):
            GitService(repository).enumerate_revisions(REPO, history[0])


class TestDescribeRevision:
    """Test patch and metadata delegation."""

    def test_changeset_for(self, fake_repository, history):
        changeset = GitService(fake_repository).changeset_for(REPO, history[0])

        assert changeset.revision == history[0]
        assert changeset.content == f"PATCH {history[0]}\n"

    def test_metadata_for(self, fake_repository, history):
        metadata = GitService(fake_repository).metadata_for(REPO, history[3])

        assert metadata.revision == history[3]
        assert metadata.author == f"Author of {history[3]}"
