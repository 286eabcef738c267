"""Runtime environment resolution for kubectl-cf.

initialize_environment() is the single place that reads the home directory and
environment variables, creates the private state directory and turns on debug
logging. It runs once at the CLI entry point; nothing here happens at import.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from kubectl_cf.core.candidates import DEFAULT_CONFIG_NAME

logger = logging.getLogger(__name__)

STATE_DIR_NAME = "kubectl-cf"
PREVIOUS_FILE_NAME = "previous"

KUBECONFIG_ENV = "KUBECONFIG"
DEBUG_ENV_VARS = ("KUBECTL_CF_DEBUG", "DEBUG")

DEBUG_LOG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"


@dataclass(frozen=True)
class CfEnvironment:
    """Immutable paths and environment values for one kubectl-cf run.

    config_path is the managed symlink. It lives directly in kube_dir and is
    the same path as default_config_path.
    """

    kube_dir: Path
    default_config_path: Path
    config_path: Path
    state_dir: Path
    previous_path: Path
    kubeconfig_env: str | None
    debug: bool

    @staticmethod
    def for_kube_dir(
        kube_dir: Path, *, kubeconfig_env: str | None = None, debug: bool = False
    ) -> "CfEnvironment":
        """Build the environment for a kube directory without touching disk."""
        default_config_path = kube_dir / DEFAULT_CONFIG_NAME
        state_dir = kube_dir / STATE_DIR_NAME
        return CfEnvironment(
            kube_dir=kube_dir,
            default_config_path=default_config_path,
            config_path=default_config_path,
            state_dir=state_dir,
            previous_path=state_dir / PREVIOUS_FILE_NAME,
            kubeconfig_env=kubeconfig_env,
            debug=debug,
        )

    def kubeconfig_env_is_stale(self) -> bool:
        """Check whether KUBECONFIG would bypass the managed symlink.

        KUBECONFIG is fine when it names the managed path, or when it is unset
        and the managed path is the one kubectl reads by default.
        """
        if self.kubeconfig_env == str(self.config_path):
            return False
        if not self.kubeconfig_env and self.config_path == self.default_config_path:
            return False
        return True


def debug_requested(environ: Mapping[str, str]) -> bool:
    """Check the debug environment variables."""
    return any(environ.get(name) for name in DEBUG_ENV_VARS)


def configure_logging(debug: bool) -> None:
    """Enable debug logging to stderr when requested."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_LOG_FORMAT)


def initialize_environment(
    *,
    kube_dir: Path | None = None,
    debug: bool = False,
    dry_run: bool = False,
    environ: Mapping[str, str] | None = None,
) -> CfEnvironment:
    """Resolve paths, configure logging and ensure the state directory exists.

    Only the state directory itself is created, never the kube directory above
    it. In dry-run mode nothing is created.

    Args:
        kube_dir: Base directory override (defaults to ~/.kube)
        debug: Force debug logging on (the debug env vars also enable it)
        dry_run: Leave the filesystem untouched
        environ: Environment mapping (defaults to os.environ)

    Returns:
        CfEnvironment for this run

    Raises:
        OSError: If the state directory cannot be created (including when the
            kube directory does not exist)
    """
    env = environ if environ is not None else os.environ
    debug = debug or debug_requested(env)
    configure_logging(debug)

    resolved_kube_dir = kube_dir if kube_dir is not None else Path.home() / ".kube"
    environment = CfEnvironment.for_kube_dir(
        resolved_kube_dir.expanduser().absolute(),
        kubeconfig_env=env.get(KUBECONFIG_ENV),
        debug=debug,
    )

    if dry_run:
        logger.debug("Dry run, not creating state dir %s", environment.state_dir)
    elif not environment.state_dir.exists():
        logger.debug("State dir %s does not exist, creating", environment.state_dir)
        environment.state_dir.mkdir(mode=0o755)

    logger.debug("Path to config symlink: %s", environment.config_path)
    return environment
