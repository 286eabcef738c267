"""Helpers for building realistic kube directories in tests.

Usage Pattern:

    ```python
    def test_something(tmp_path: Path) -> None:
        env = KubeDirEnv.create(tmp_path)
        dev = env.add_kubeconfig("dev")
        env.link_config_to(dev)

        ctx = CfContext.for_test(env.kube_dir)
        result = CliRunner().invoke(cli, ["prod"], obj=ctx)
    ```

Directory Structure Created:
    tmp_path/
      └── .kube/
            └── kubectl-cf/   (state dir, initially empty)
"""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class KubeDirEnv:
    """A kube directory under a pytest tmp_path."""

    kube_dir: Path

    @staticmethod
    def create(tmp_path: Path) -> "KubeDirEnv":
        kube_dir = tmp_path / ".kube"
        (kube_dir / "kubectl-cf").mkdir(parents=True)
        return KubeDirEnv(kube_dir=kube_dir)

    @property
    def config_path(self) -> Path:
        return self.kube_dir / "config"

    @property
    def previous_path(self) -> Path:
        return self.kube_dir / "kubectl-cf" / "previous"

    def add_kubeconfig(self, name: str, *, suffix: str = ".kubeconfig", content: str = "") -> Path:
        """Create '<name><suffix>' and return its path."""
        path = self.kube_dir / f"{name}{suffix}"
        path.write_text(content or f"# kubeconfig {name}\n", encoding="utf-8")
        return path

    def link_config_to(self, target: Path) -> None:
        """Make the managed config path a symlink to target."""
        os.symlink(target, self.config_path)

    def write_regular_config(self, content: str) -> None:
        """Make the managed config path a regular file."""
        self.config_path.write_text(content, encoding="utf-8")

    def backups(self) -> list[Path]:
        return sorted(self.kube_dir.glob("config-backup-*"))
