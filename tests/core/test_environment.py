"""Tests for environment resolution and the KUBECONFIG staleness rule."""

from pathlib import Path

import pytest

from kubectl_cf.core.environment import (
    CfEnvironment,
    debug_requested,
    initialize_environment,
)


def test_for_kube_dir_derives_paths() -> None:
    env = CfEnvironment.for_kube_dir(Path("/home/me/.kube"))

    assert env.config_path == Path("/home/me/.kube/config")
    assert env.default_config_path == env.config_path
    assert env.state_dir == Path("/home/me/.kube/kubectl-cf")
    assert env.previous_path == Path("/home/me/.kube/kubectl-cf/previous")


def test_initialize_creates_state_dir(tmp_path: Path) -> None:
    kube_dir = tmp_path / ".kube"
    kube_dir.mkdir()

    env = initialize_environment(kube_dir=kube_dir, environ={})

    assert env.state_dir.is_dir()
    assert env.kube_dir == kube_dir
    assert env.kubeconfig_env is None
    assert not env.debug


def test_initialize_keeps_existing_state_dir(tmp_path: Path) -> None:
    state_dir = tmp_path / "kubectl-cf"
    state_dir.mkdir()
    (state_dir / "previous").write_text("/k/a", encoding="utf-8")

    initialize_environment(kube_dir=tmp_path, environ={})

    assert (state_dir / "previous").read_text(encoding="utf-8") == "/k/a"


def test_initialize_reads_kubeconfig_variable(tmp_path: Path) -> None:
    env = initialize_environment(kube_dir=tmp_path, environ={"KUBECONFIG": "/other/config"})

    assert env.kubeconfig_env == "/other/config"
    assert env.kubeconfig_env_is_stale()


def test_initialize_debug_from_environment(tmp_path: Path) -> None:
    env = initialize_environment(kube_dir=tmp_path, environ={"KUBECTL_CF_DEBUG": "1"})

    assert env.debug


def test_debug_requested() -> None:
    assert debug_requested({"DEBUG": "true"})
    assert debug_requested({"KUBECTL_CF_DEBUG": "1"})
    assert not debug_requested({"DEBUG": ""})
    assert not debug_requested({})


def test_unset_kubeconfig_is_not_stale() -> None:
    env = CfEnvironment.for_kube_dir(Path("/k"), kubeconfig_env=None)

    assert not env.kubeconfig_env_is_stale()


def test_empty_kubeconfig_is_not_stale() -> None:
    env = CfEnvironment.for_kube_dir(Path("/k"), kubeconfig_env="")

    assert not env.kubeconfig_env_is_stale()


def test_kubeconfig_naming_managed_path_is_not_stale() -> None:
    env = CfEnvironment.for_kube_dir(Path("/k"), kubeconfig_env="/k/config")

    assert not env.kubeconfig_env_is_stale()


def test_kubeconfig_naming_other_file_is_stale() -> None:
    env = CfEnvironment.for_kube_dir(Path("/k"), kubeconfig_env="/k/dev.kubeconfig")

    assert env.kubeconfig_env_is_stale()


def test_initialize_dry_run_creates_nothing(tmp_path: Path) -> None:
    env = initialize_environment(kube_dir=tmp_path, dry_run=True, environ={})

    assert not env.state_dir.exists()
    assert list(tmp_path.iterdir()) == []


def test_initialize_does_not_create_missing_kube_dir(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        initialize_environment(kube_dir=tmp_path / "typo", environ={})

    assert not (tmp_path / "typo").exists()
