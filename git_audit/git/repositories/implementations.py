"""Concrete implementation of Git repository operations."""

import subprocess
from pathlib import Path

from git_audit.git.domain.errors import (
    DescribeError,
    GitError,
    MalformedMetadataError,
    MetadataError,
    RepositoryError,
    UnresolvableRevisionError,
)
from git_audit.git.domain.value_objects import RevisionChangeset, RevisionMetadata
from git_audit.git.repositories.interfaces import GitRepository

METADATA_FORMAT = "%H%n%an%n%ai"


class GitRepositoryImpl(GitRepository):
    """Concrete implementation of Git repository operations using git commands."""

    def check_repository(self, repo_path: Path) -> None:
        """
        Ensure the path is inside a git work tree.

        Args:
            repo_path: Path to the git repository

        Raises:
            RepositoryError: If the path is not a git repository
        """
        try:
            self._run_git(repo_path, "rev-parse", "--is-inside-work-tree")
        except (subprocess.CalledProcessError, OSError) as e:
            raise RepositoryError(
                f"Path {repo_path} is not a git repository or git command failed: "
                f"{self._describe_failure(e)}"
            ) from e

    def resolve_revision(self, repo_path: Path, revision: str) -> str:
        """
        Resolve a revision identifier to its full commit hash.

        Args:
            repo_path: Path to the git repository
            revision: Any identifier git accepts

        Returns:
            Canonical hash of the revision
        """
        try:
            result = self._run_git(
                repo_path, "rev-parse", "--verify", f"{revision}^{{commit}}"
            )
        except (subprocess.CalledProcessError, OSError) as e:
            raise UnresolvableRevisionError(
                f"Failed to resolve commit ID {revision} in repository {repo_path}: "
                f"{self._describe_failure(e)}"
            ) from e
        return result.stdout.strip()

    def list_revisions(self, repo_path: Path) -> tuple[str, ...]:
        """
        List every revision reachable from HEAD.

        Args:
            repo_path: Path to the git repository

        Returns:
            Tuple of commit hashes ordered from newest to oldest
        """
        try:
            result = self._run_git(repo_path, "rev-list", "HEAD")
        except (subprocess.CalledProcessError, OSError) as e:
            raise GitError(
                f"Failed to execute git rev-list HEAD: {self._describe_failure(e)}"
            ) from e

        return tuple(line for line in result.stdout.strip().split("\n") if line)

    def get_changeset(self, repo_path: Path, revision: str) -> RevisionChangeset:
        """
        Get the patch (original message and diff) for a revision.

        Args:
            repo_path: Path to the git repository
            revision: Hash of the revision

        Returns:
            RevisionChangeset containing the patch text
        """
        try:
            result = self._run_git(repo_path, "show", "--patch", revision)
        except (subprocess.CalledProcessError, OSError) as e:
            raise DescribeError(
                f"Failed to execute git show for commit {revision}: "
                f"{self._describe_failure(e)}"
            ) from e
        return RevisionChangeset(revision=revision, content=result.stdout)

    def get_metadata(self, repo_path: Path, revision: str) -> RevisionMetadata:
        """
        Get hash, author and date for a revision.

        Args:
            repo_path: Path to the git repository
            revision: Hash of the revision

        Returns:
            RevisionMetadata for the revision
        """
        try:
            result = self._run_git(
                repo_path, "show", "-s", f"--format={METADATA_FORMAT}", revision
            )
        except (subprocess.CalledProcessError, OSError) as e:
            raise MetadataError(
                f"Failed to execute git show for metadata on commit {revision}: "
                f"{self._describe_failure(e)}"
            ) from e

        parts = result.stdout.strip().split("\n")
        if len(parts) != 3:
            raise MalformedMetadataError(
                f"Unexpected format from git show for metadata on commit {revision}: "
                f"expected 3 lines, got {len(parts)}. Output: {result.stdout}"
            )

        commit_hash, author, date = parts
        return RevisionMetadata(revision=commit_hash, author=author, date=date)

    @staticmethod
    def _run_git(repo_path: Path, *args: str) -> subprocess.CompletedProcess[str]:
        """Run a git command against the repository and capture its output."""
        return subprocess.run(
            ["git", "-C", str(repo_path), *args],
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
        )

    @staticmethod
    def _describe_failure(error: Exception) -> str:
        """Render a failed git invocation, including its stderr when captured."""
        if isinstance(error, subprocess.CalledProcessError) and error.stderr:
            return f"{error}. Stderr: {error.stderr.strip()}"
        return str(error)
