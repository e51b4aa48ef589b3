"""Errors raised by Git operations."""


class GitError(RuntimeError):
    """Base class for failures of the git tool."""


class RepositoryError(GitError):
    """The given path is not a git repository."""


class UnresolvableRevisionError(GitError):
    """A revision identifier does not resolve to a commit."""


class NotAnAncestorError(GitError):
    """The boundary revision is not reachable from HEAD."""


class DescribeError(GitError):
    """The patch for a revision could not be produced."""


class MetadataError(GitError):
    """The metadata for a revision could not be read."""


class MalformedMetadataError(MetadataError):
    """git returned metadata that does not have the expected three fields."""
