"""Repository interfaces for Git operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from git_audit.git.domain.value_objects import RevisionChangeset, RevisionMetadata


class GitRepository(ABC):
    """Interface for the version-control operations needed by an audit."""

    @abstractmethod
    def check_repository(self, repo_path: Path) -> None:
        """
        Ensure the path is inside a git work tree.

        Args:
            repo_path: Path to the git repository

        Raises:
            RepositoryError: If the path is not a git repository
        """
        ...

    @abstractmethod
    def resolve_revision(self, repo_path: Path, revision: str) -> str:
        """
        Resolve a revision identifier to its full commit hash.

        Args:
            repo_path: Path to the git repository
            revision: Any identifier git accepts (short hash, tag, branch...)

        Returns:
            Canonical hash of the revision

        Raises:
            UnresolvableRevisionError: If the identifier does not resolve
        """
        ...

    @abstractmethod
    def list_revisions(self, repo_path: Path) -> tuple[str, ...]:
        """
        List every revision reachable from HEAD.

        Args:
            repo_path: Path to the git repository

        Returns:
            Tuple of commit hashes ordered from newest to oldest
        """
        ...

    @abstractmethod
    def get_changeset(self, repo_path: Path, revision: str) -> RevisionChangeset:
        """
        Get the patch (original message and diff) for a revision.

        Args:
            repo_path: Path to the git repository
            revision: Hash of the revision

        Returns:
            RevisionChangeset containing the patch text

        Raises:
            DescribeError: If git fails to produce the patch
        """
        ...

    @abstractmethod
    def get_metadata(self, repo_path: Path, revision: str) -> RevisionMetadata:
        """
        Get hash, author and date for a revision.

        Args:
            repo_path: Path to the git repository
            revision: Hash of the revision

        Returns:
            RevisionMetadata for the revision

        Raises:
            MetadataError: If git fails
            MalformedMetadataError: If the output does not hold three fields
        """
        ...
