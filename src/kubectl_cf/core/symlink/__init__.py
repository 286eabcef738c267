"""Symlink replacement with backup-on-overwrite semantics."""

from kubectl_cf.core.symlink.abc import (
    MAX_BACKUP_INDEX,
    LinkInfo,
    LinkState,
    SymlinkManager,
    backup_path_for,
)
from kubectl_cf.core.symlink.noop import NoopSymlinkManager
from kubectl_cf.core.symlink.real import RealSymlinkManager

__all__ = [
    "MAX_BACKUP_INDEX",
    "LinkInfo",
    "LinkState",
    "NoopSymlinkManager",
    "RealSymlinkManager",
    "SymlinkManager",
    "backup_path_for",
]
