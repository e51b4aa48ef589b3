"""Value objects for Git domain."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RevisionRange:
    """Range of revisions from HEAD back to a boundary revision (inclusive)."""

    repo_path: Path
    boundary: str


@dataclass(frozen=True)
class RevisionChangeset:
    """Patch for a revision: its original message followed by the full diff."""

    revision: str
    content: str


@dataclass(frozen=True)
class RevisionMetadata:
    """Identifying metadata for a revision."""

    revision: str
    author: str
    date: str
