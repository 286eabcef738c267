"""Tests for applying a confirmed selection."""

from pathlib import Path

import pytest

from kubectl_cf.core.context import CfContext
from kubectl_cf.core.errors import SymlinkOperationError
from kubectl_cf.core.switch import build_export_statement, switch_to
from kubectl_cf.core.symlink.abc import LinkInfo, LinkState
from tests.fakes.previous_store import FakePreviousStore
from tests.fakes.symlink_manager import FakeSymlinkManager

KUBE_DIR = Path("/k")


def test_switch_records_previous_and_repoints() -> None:
    store = FakePreviousStore()
    manager = FakeSymlinkManager(
        links={KUBE_DIR / "config": LinkInfo(LinkState.SYMLINK, KUBE_DIR / "a.kubeconfig")}
    )
    ctx = CfContext.for_test(KUBE_DIR, symlinks=manager, previous_store=store)

    result = switch_to(ctx, KUBE_DIR / "a.kubeconfig", KUBE_DIR / "b.kubeconfig")

    assert store.saved == [KUBE_DIR / "a.kubeconfig"]
    assert manager.replace_calls == [(KUBE_DIR / "b.kubeconfig", KUBE_DIR / "config")]
    assert manager.inspect(KUBE_DIR / "config").target == KUBE_DIR / "b.kubeconfig"
    assert result.previous == KUBE_DIR / "a.kubeconfig"
    assert result.target == KUBE_DIR / "b.kubeconfig"
    assert result.backup is None
    assert not result.kubeconfig_env_stale


def test_switch_saves_previous_even_when_replace_fails() -> None:
    store = FakePreviousStore()
    error = SymlinkOperationError("symlink", KUBE_DIR / "config", PermissionError(13, "denied"))
    ctx = CfContext.for_test(
        KUBE_DIR,
        symlinks=FakeSymlinkManager(replace_error=error),
        previous_store=store,
    )

    with pytest.raises(SymlinkOperationError):
        switch_to(ctx, KUBE_DIR / "config", KUBE_DIR / "b.kubeconfig")

    assert store.saved == [KUBE_DIR / "config"]


def test_switch_does_not_touch_symlink_when_previous_write_fails() -> None:
    manager = FakeSymlinkManager()
    ctx = CfContext.for_test(
        KUBE_DIR,
        symlinks=manager,
        previous_store=FakePreviousStore(save_error=PermissionError(13, "denied")),
    )

    with pytest.raises(OSError):
        switch_to(ctx, KUBE_DIR / "config", KUBE_DIR / "b.kubeconfig")

    assert manager.replace_calls == []


def test_switch_reports_backup_of_regular_file() -> None:
    manager = FakeSymlinkManager(links={KUBE_DIR / "config": LinkInfo(LinkState.REGULAR)})
    ctx = CfContext.for_test(KUBE_DIR, symlinks=manager)

    result = switch_to(ctx, KUBE_DIR / "config", KUBE_DIR / "b.kubeconfig")

    assert result.backup == KUBE_DIR / "config-backup-1"


def test_switch_flags_stale_kubeconfig() -> None:
    ctx = CfContext.for_test(
        KUBE_DIR, symlinks=FakeSymlinkManager(), kubeconfig_env="/elsewhere/config"
    )

    result = switch_to(ctx, KUBE_DIR / "config", KUBE_DIR / "b.kubeconfig")

    assert result.kubeconfig_env_stale


def test_export_statement_joins_with_colon() -> None:
    statement = build_export_statement([Path("/k/a.kubeconfig"), Path("/k/b.kubeconfig")])

    assert statement == "export KUBECONFIG=/k/a.kubeconfig:/k/b.kubeconfig"


def test_export_statement_quotes_unsafe_paths() -> None:
    statement = build_export_statement([Path("/k/my cluster.kubeconfig")])

    assert statement == "export KUBECONFIG='/k/my cluster.kubeconfig'"
