"""Domain errors raised by kubectl-cf operations.

Recoverable errors (no match, ambiguous match, no previous config, managed
path not a symlink, nothing to choose from, a target that is the managed
path itself) are reported as warnings by the CLI. Backup exhaustion and
failed filesystem operations are fatal.
"""

from pathlib import Path


class CfError(Exception):
    """Base class for all kubectl-cf domain errors."""


class NoMatchError(CfError):
    """Raised when no candidate name matches the typed search."""

    def __init__(self, search: str) -> None:
        self.search = search
        super().__init__(f"No match found for '{search}'")


class AmbiguousMatchError(CfError):
    """Raised when a prefix matches more than one candidate name."""

    def __init__(self, search: str, names: list[str]) -> None:
        self.search = search
        self.names = names
        super().__init__(
            f"More than one match found for '{search}': {', '.join(names)}. "
            "Type a longer name to pick one."
        )


class PreviousNotFoundError(CfError):
    """Raised when no previous kubeconfig has been recorded yet."""

    def __init__(self, marker_path: Path) -> None:
        self.marker_path = marker_path
        super().__init__("No previous kubeconfig recorded, switch at least once first")


class NotASymlinkError(CfError):
    """Raised when the managed config path exists but is not a symlink.

    Overwriting it could destroy an unrelated file, so the run stops here.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"{path} is not a symlink. Move it to a '<name>.kubeconfig' file "
            "so it can be managed by kubectl-cf."
        )


class NoCandidatesError(CfError):
    """Raised when the kube directory holds no kubeconfig candidates."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        super().__init__(
            f"No kubeconfig files found in {directory} "
            "(expected 'config', '<name>.kubeconfig' or '<name>.config')"
        )


class SelfLinkError(CfError):
    """Raised when the chosen target is the managed symlink itself.

    The first switch from an absent managed path records that path as the
    previous config, so switching back would link it to itself.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Refusing to point {path} at itself, pick a kubeconfig by name")


class BackupExhaustedError(CfError):
    """Raised when every backup slot from 1 to 999 is already taken."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Too many backup revisions of {path}, clean up old backups first")


class SymlinkOperationError(CfError):
    """Raised when a filesystem call made while switching fails.

    Attributes:
        operation: Name of the failed call ("lstat", "rename", "symlink", "remove")
        path: Path the call was made against
        cause: The underlying OSError
    """

    def __init__(self, operation: str, path: Path, cause: OSError) -> None:
        self.operation = operation
        self.path = path
        self.cause = cause
        detail = cause.strerror or str(cause)
        super().__init__(f"{operation} failed for {path}: {detail}")
