"""Applying a confirmed selection.

switch_to() is the only code path that mutates the managed symlink. The
previous pointer is written before the symlink is touched so that even a failed
switch leaves it naming the config that was really active.
"""

import logging
import shlex
from dataclasses import dataclass
from pathlib import Path

from kubectl_cf.core.context import CfContext
from kubectl_cf.core.environment import KUBECONFIG_ENV

logger = logging.getLogger(__name__)

# Separator kubectl uses between entries of KUBECONFIG
KUBECONFIG_SEPARATOR = ":"


@dataclass(frozen=True)
class SwitchResult:
    """Outcome of a successful switch.

    Attributes:
        previous: Config that was active before the switch
        target: Config the managed symlink now points to
        backup: Where a regular file at the managed path was moved, if anywhere
        kubeconfig_env_stale: True if KUBECONFIG bypasses the managed symlink
    """

    previous: Path
    target: Path
    backup: Path | None
    kubeconfig_env_stale: bool


def switch_to(ctx: CfContext, current: Path, target: Path) -> SwitchResult:
    """Record current as the previous config and point the symlink at target.

    Args:
        ctx: Application context
        current: Config active before the switch
        target: Config to switch to

    Returns:
        SwitchResult describing what changed

    Raises:
        OSError: If the previous pointer cannot be written
        SymlinkOperationError: If a filesystem call fails while replacing
        BackupExhaustedError: If no backup name is free
    """
    ctx.previous_store.save(current)
    backup = ctx.symlinks.replace(target, ctx.env.config_path)
    logger.debug("Switched %s from %s to %s", ctx.env.config_path, current, target)
    return SwitchResult(
        previous=current,
        target=target,
        backup=backup,
        kubeconfig_env_stale=ctx.env.kubeconfig_env_is_stale(),
    )


def build_export_statement(paths: list[Path]) -> str:
    """Build a shell statement that sets KUBECONFIG to the given paths.

    Example:
        >>> build_export_statement([Path("/k/a.kubeconfig"), Path("/k/b.kubeconfig")])
        'export KUBECONFIG=/k/a.kubeconfig:/k/b.kubeconfig'
    """
    value = KUBECONFIG_SEPARATOR.join(str(path) for path in paths)
    return f"export {KUBECONFIG_ENV}={shlex.quote(value)}"
