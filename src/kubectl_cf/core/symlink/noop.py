"""No-op SymlinkManager wrapper for dry-run mode.

Read-only operations are delegated to the wrapped implementation, destructive
ones print what would happen instead.
"""

from pathlib import Path

from kubectl_cf.cli.output import user_output
from kubectl_cf.core.errors import BackupExhaustedError
from kubectl_cf.core.symlink.abc import (
    MAX_BACKUP_INDEX,
    LinkInfo,
    LinkState,
    SymlinkManager,
    backup_path_for,
)

# ============================================================================
# No-op Wrapper
# ============================================================================


class NoopSymlinkManager(SymlinkManager):
    """No-op wrapper that prevents any change to the managed symlink.

    Usage:
        real_manager = RealSymlinkManager()
        noop_manager = NoopSymlinkManager(real_manager)

        # Prints message instead of repointing
        noop_manager.replace(Path("~/.kube/dev.kubeconfig"), Path("~/.kube/config"))
    """

    def __init__(self, wrapped: SymlinkManager) -> None:
        """Create a dry-run wrapper around a SymlinkManager implementation.

        Args:
            wrapped: The implementation to wrap (usually RealSymlinkManager)
        """
        self._wrapped = wrapped

    def inspect(self, path: Path) -> LinkInfo:
        """Inspect path (read-only, delegates to wrapped)."""
        return self._wrapped.inspect(path)

    def replace(self, new_target: Path, symlink_path: Path) -> Path | None:
        """Print the replacement that would happen without doing it."""
        current = self._wrapped.inspect(symlink_path)
        backup: Path | None = None
        if current.state == LinkState.SYMLINK:
            user_output(f"[DRY RUN] Would remove symlink: {symlink_path}")
        elif current.state == LinkState.REGULAR:
            backup = self.backup(symlink_path)
        user_output(f"[DRY RUN] Would create symlink: {symlink_path} -> {new_target}")
        return backup

    def backup(self, path: Path) -> Path:
        """Print the backup rename that would happen without doing it."""
        for index in range(1, MAX_BACKUP_INDEX + 1):
            target = backup_path_for(path, index)
            if self._wrapped.inspect(target).state == LinkState.ABSENT:
                user_output(f"[DRY RUN] Would rename: {path} -> {target}")
                return target
        raise BackupExhaustedError(path)
