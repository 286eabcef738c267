"""Pydantic models for JSON output schemas.

These models define the validated structure of `kubectl-cf --list --json`.
"""

from pydantic import BaseModel, ConfigDict


class CandidateInfo(BaseModel):
    """One kubeconfig candidate.

    Attributes:
        name: Name used to select the candidate
        path: Absolute path of the kubeconfig file
        active: Whether the managed symlink currently points here
    """

    model_config = ConfigDict(strict=True)

    name: str
    path: str
    active: bool


class ListCommandResponse(BaseModel):
    """JSON response schema for `kubectl-cf --list --json`.

    Attributes:
        config_path: The managed symlink
        current: Kubeconfig currently in use (None if the managed path is not a symlink)
        candidates: Candidates in directory listing order
    """

    model_config = ConfigDict(strict=True)

    config_path: str
    current: str | None
    candidates: list[CandidateInfo]
