"""Git service for coordinating Git operations."""

from pathlib import Path

from git_audit.git.domain.errors import NotAnAncestorError
from git_audit.git.domain.value_objects import (
    RevisionChangeset,
    RevisionMetadata,
    RevisionRange,
)
from git_audit.git.repositories.interfaces import GitRepository


class GitService:
    """Service for Git operations."""

    def __init__(self, git_repository: GitRepository) -> None:
        """
        Initialize GitService.

        Args:
            git_repository: Repository implementation for Git operations
        """
        self._git_repository = git_repository

    def enumerate_revisions(self, repo_path: Path, boundary: str) -> tuple[str, ...]:
        """
        List revisions from HEAD back to the boundary revision, inclusive.

        Args:
            repo_path: Path to the git repository
            boundary: Identifier of the oldest revision to include

        Returns:
            Tuple of commit hashes ordered from newest to oldest

        Raises:
            RepositoryError: If repo_path is not a git repository
            UnresolvableRevisionError: If the boundary does not resolve
            NotAnAncestorError: If the boundary is not reachable from HEAD
        """
        return self.enumerate_range(RevisionRange(repo_path=repo_path, boundary=boundary))

    def enumerate_range(self, revision_range: RevisionRange) -> tuple[str, ...]:
        """
        List the revisions of a RevisionRange, newest first.

        Args:
            revision_range: Repository and boundary revision

        Returns:
            Tuple of commit hashes ordered from newest to oldest
        """
        repo_path = revision_range.repo_path
        self._git_repository.check_repository(repo_path)
        resolved_boundary = self._git_repository.resolve_revision(
            repo_path, revision_range.boundary
        )

        revisions: list[str] = []
        for revision in self._git_repository.list_revisions(repo_path):
            revisions.append(revision)
            if revision == resolved_boundary:
                return tuple(revisions)

        raise NotAnAncestorError(
            f"Commit ID {revision_range.boundary} not found in the history of HEAD "
            "or is not an ancestor"
        )

    def changeset_for(self, repo_path: Path, revision: str) -> RevisionChangeset:
        """
        Get the patch for a specific revision.

        Args:
            repo_path: Path to the git repository
            revision: Hash of the revision

        Returns:
            RevisionChangeset containing the original message and diff
        """
        return self._git_repository.get_changeset(repo_path, revision)

    def metadata_for(self, repo_path: Path, revision: str) -> RevisionMetadata:
        """
        Get the hash, author and date of a specific revision.

        Args:
            repo_path: Path to the git repository
            revision: Hash of the revision

        Returns:
            RevisionMetadata for the revision
        """
        return self._git_repository.get_metadata(repo_path, revision)
