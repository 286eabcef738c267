"""Symlink replacement interface.

Architecture:
- SymlinkManager: Abstract base class defining the interface
- RealSymlinkManager: Production implementation using os calls
- NoopSymlinkManager: Dry-run wrapper that only prints destructive operations
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

# Highest backup index tried before giving up
MAX_BACKUP_INDEX = 999


class LinkState(Enum):
    """What currently occupies the managed path."""

    ABSENT = "absent"
    SYMLINK = "symlink"
    REGULAR = "regular"


@dataclass(frozen=True)
class LinkInfo:
    """Result of inspecting a path without following symlinks.

    target is the raw link target when state is SYMLINK, None otherwise.
    """

    state: LinkState
    target: Path | None = None


def backup_path_for(path: Path, index: int) -> Path:
    """Return the backup name for path at the given index."""
    return path.with_name(f"{path.name}-backup-{index}")


class SymlinkManager(ABC):
    """Abstract interface for repointing the managed symlink.

    All implementations (real, noop and fakes) must implement this interface.
    """

    @abstractmethod
    def inspect(self, path: Path) -> LinkInfo:
        """Report whether path is absent, a symlink, or anything else.

        Raises:
            SymlinkOperationError: If lstat fails for a reason other than absence
        """
        ...

    @abstractmethod
    def replace(self, new_target: Path, symlink_path: Path) -> Path | None:
        """Make symlink_path a symlink pointing at new_target.

        An existing symlink is removed first. Anything else at symlink_path is
        backed up before the new symlink is created.

        Returns:
            Path of the backup that was made, or None if no backup was needed

        Raises:
            SymlinkOperationError: If lstat, remove or symlink creation fails
            BackupExhaustedError: If no free backup name is left
        """
        ...

    @abstractmethod
    def backup(self, path: Path) -> Path:
        """Rename path to the first free '<path>-backup-<n>' name.

        Returns:
            The path the file was renamed to

        Raises:
            SymlinkOperationError: If lstat or rename fails
            BackupExhaustedError: If indices 1 to 999 are all taken
        """
        ...
