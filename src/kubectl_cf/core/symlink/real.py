"""Production SymlinkManager implementation using os calls."""

import logging
import os
import stat
from pathlib import Path

from kubectl_cf.core.errors import BackupExhaustedError, SymlinkOperationError
from kubectl_cf.core.symlink.abc import (
    MAX_BACKUP_INDEX,
    LinkInfo,
    LinkState,
    SymlinkManager,
    backup_path_for,
)

logger = logging.getLogger(__name__)

# ============================================================================
# Production Implementation
# ============================================================================


class RealSymlinkManager(SymlinkManager):
    """Production implementation operating on the real filesystem."""

    def inspect(self, path: Path) -> LinkInfo:
        """Inspect path with lstat, reading the link target for symlinks."""
        try:
            info = os.lstat(path)
        except FileNotFoundError:
            return LinkInfo(state=LinkState.ABSENT)
        except OSError as e:
            raise SymlinkOperationError("lstat", path, e) from e

        if not stat.S_ISLNK(info.st_mode):
            return LinkInfo(state=LinkState.REGULAR)

        try:
            target = os.readlink(path)
        except OSError as e:
            raise SymlinkOperationError("readlink", path, e) from e
        return LinkInfo(state=LinkState.SYMLINK, target=Path(target))

    def replace(self, new_target: Path, symlink_path: Path) -> Path | None:
        """Point symlink_path at new_target, backing up regular files first."""
        current = self.inspect(symlink_path)
        backup: Path | None = None

        if current.state == LinkState.SYMLINK:
            logger.debug("Removing old symlink %s -> %s", symlink_path, current.target)
            try:
                os.unlink(symlink_path)
            except OSError as e:
                raise SymlinkOperationError("remove", symlink_path, e) from e
        elif current.state == LinkState.REGULAR:
            backup = self.backup(symlink_path)

        logger.debug("Creating symlink %s -> %s", symlink_path, new_target)
        try:
            os.symlink(new_target, symlink_path)
        except OSError as e:
            raise SymlinkOperationError("symlink", symlink_path, e) from e
        return backup

    def backup(self, path: Path) -> Path:
        """Rename path to the first free '-backup-<n>' sibling."""
        for index in range(1, MAX_BACKUP_INDEX + 1):
            candidate = backup_path_for(path, index)
            try:
                os.lstat(candidate)
            except FileNotFoundError:
                logger.debug("Renaming %s to %s", path, candidate)
                try:
                    os.rename(path, candidate)
                except OSError as e:
                    raise SymlinkOperationError("rename", path, e) from e
                return candidate
            except OSError as e:
                raise SymlinkOperationError("lstat", candidate, e) from e

        raise BackupExhaustedError(path)
