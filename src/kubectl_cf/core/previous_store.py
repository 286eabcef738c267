"""Persistence of the previously active kubeconfig path.

The marker file holds one full path, the config that was active right before
the most recent switch attempt. It backs the "kubectl cf -" shortcut.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from kubectl_cf.cli.output import user_output
from kubectl_cf.core.errors import PreviousNotFoundError

logger = logging.getLogger(__name__)


class PreviousStore(ABC):
    """Abstract interface for reading and writing the previous pointer."""

    @abstractmethod
    def save(self, path: Path) -> None:
        """Record path as the previous kubeconfig, overwriting any prior value.

        Raises:
            OSError: If the marker file cannot be written
        """
        ...

    @abstractmethod
    def load(self) -> Path:
        """Return the recorded previous kubeconfig path.

        Raises:
            PreviousNotFoundError: If nothing has been recorded yet
            OSError: If the marker file exists but cannot be read
        """
        ...


class RealPreviousStore(PreviousStore):
    """Production implementation backed by a plain text marker file."""

    def __init__(self, marker_path: Path) -> None:
        self._marker_path = marker_path

    @property
    def marker_path(self) -> Path:
        return self._marker_path

    def save(self, path: Path) -> None:
        logger.debug("Recording previous kubeconfig %s in %s", path, self._marker_path)
        self._marker_path.write_text(str(path), encoding="utf-8")

    def load(self) -> Path:
        try:
            content = self._marker_path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise PreviousNotFoundError(self._marker_path) from e

        # Tolerate a trailing newline added by hand edits
        previous = content.strip()
        if not previous:
            raise PreviousNotFoundError(self._marker_path)
        logger.debug("Previous kubeconfig: %s", previous)
        return Path(previous)


class NoopPreviousStore(PreviousStore):
    """Dry-run wrapper: reads are delegated, writes are only printed."""

    def __init__(self, wrapped: PreviousStore) -> None:
        self._wrapped = wrapped

    def save(self, path: Path) -> None:
        user_output(f"[DRY RUN] Would record previous kubeconfig: {path}")

    def load(self) -> Path:
        return self._wrapped.load()
