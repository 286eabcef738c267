"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from kubectl_cf.core.environment import CfEnvironment, initialize_environment
from kubectl_cf.core.previous_store import NoopPreviousStore, PreviousStore, RealPreviousStore
from kubectl_cf.core.symlink import NoopSymlinkManager, RealSymlinkManager, SymlinkManager
from kubectl_cf.core.terminal import RealTerminal, Terminal
from kubectl_cf.core.user_feedback import InteractiveFeedback, SuppressedFeedback, UserFeedback


@dataclass(frozen=True)
class CfContext:
    """Immutable context holding all dependencies for kubectl-cf operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    symlinks: SymlinkManager
    previous_store: PreviousStore
    terminal: Terminal
    feedback: UserFeedback
    env: CfEnvironment
    dry_run: bool

    @staticmethod
    def for_test(
        kube_dir: Path,
        *,
        symlinks: SymlinkManager | None = None,
        previous_store: PreviousStore | None = None,
        terminal: Terminal | None = None,
        feedback: UserFeedback | None = None,
        kubeconfig_env: str | None = None,
        dry_run: bool = False,
    ) -> "CfContext":
        """Create test context with optional pre-configured dependencies.

        Unspecified dependencies get test defaults: the real symlink manager
        (tests run against tmp_path), an in-memory previous store, a terminal
        with no scripted keys and a recording feedback.

        Args:
            kube_dir: Base directory the test operates on
            symlinks: Optional SymlinkManager. If None, uses RealSymlinkManager.
            previous_store: Optional PreviousStore. If None, uses FakePreviousStore.
            terminal: Optional Terminal. If None, uses FakeTerminal without keys.
            feedback: Optional UserFeedback. If None, uses FakeUserFeedback.
            kubeconfig_env: Value the KUBECONFIG variable should appear to have
            dry_run: Whether to wrap dependencies in noop wrappers

        Example:
            >>> terminal = FakeTerminal(keys=["j", "\\r"])
            >>> ctx = CfContext.for_test(tmp_path, terminal=terminal)
            >>> result = runner.invoke(cli, [], obj=ctx)
        """
        from tests.fakes.previous_store import FakePreviousStore
        from tests.fakes.terminal import FakeTerminal
        from tests.fakes.user_feedback import FakeUserFeedback

        if symlinks is None:
            symlinks = RealSymlinkManager()

        if previous_store is None:
            previous_store = FakePreviousStore()

        if terminal is None:
            terminal = FakeTerminal()

        if feedback is None:
            feedback = FakeUserFeedback()

        # Apply dry-run wrappers if needed (matching production behavior)
        if dry_run:
            symlinks = NoopSymlinkManager(symlinks)
            previous_store = NoopPreviousStore(previous_store)

        return CfContext(
            symlinks=symlinks,
            previous_store=previous_store,
            terminal=terminal,
            feedback=feedback,
            env=CfEnvironment.for_kube_dir(kube_dir, kubeconfig_env=kubeconfig_env),
            dry_run=dry_run,
        )


def create_context(
    *,
    dry_run: bool,
    quiet: bool = False,
    kube_dir: Path | None = None,
    debug: bool = False,
) -> CfContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap destructive dependencies with noop wrappers that
                 print intended actions without executing them
        quiet: If True, use SuppressedFeedback so only warnings and errors show
        kube_dir: Optional base directory override (defaults to ~/.kube)
        debug: Enable debug logging

    Returns:
        CfContext with real implementations
    """
    # 1. Resolve environment (creates the state dir unless dry-run, configures logging)
    env = initialize_environment(kube_dir=kube_dir, debug=debug, dry_run=dry_run)

    # 2. Create integrations
    symlinks: SymlinkManager = RealSymlinkManager()
    previous_store: PreviousStore = RealPreviousStore(env.previous_path)

    # 3. Apply dry-run wrappers if needed
    if dry_run:
        symlinks = NoopSymlinkManager(symlinks)
        previous_store = NoopPreviousStore(previous_store)

    feedback: UserFeedback = SuppressedFeedback() if quiet else InteractiveFeedback()

    return CfContext(
        symlinks=symlinks,
        previous_store=previous_store,
        terminal=RealTerminal(),
        feedback=feedback,
        env=env,
        dry_run=dry_run,
    )
