"""Kubeconfig selection state machine.

A session starts in RUNNING and ends in exactly one terminal status:
CONFIRMED (targets hold the chosen paths), QUIT, or ERROR (error holds the
reason). transition() is a pure function from (state, event) to the next state;
applying the confirmed switch is left to the caller.

Sessions can also start already terminal: a typed name, the "-" shortcut for
the previous config, or a managed path that is not a symlink all resolve
before any key is read.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from pathlib import Path
from typing import assert_never

from kubectl_cf.core.candidates import Candidate, match_candidates
from kubectl_cf.core.errors import (
    CfError,
    NoCandidatesError,
    NotASymlinkError,
    PreviousNotFoundError,
    SelfLinkError,
)
from kubectl_cf.core.previous_store import PreviousStore
from kubectl_cf.core.symlink.abc import LinkState, SymlinkManager

logger = logging.getLogger(__name__)

# Argument value that switches back to the previous kubeconfig
PREVIOUS_ARGUMENT = "-"


class SessionStatus(Enum):
    RUNNING = auto()
    CONFIRMED = auto()
    QUIT = auto()
    ERROR = auto()


class SelectionEvent(Enum):
    """Input events consumed by transition().

    TOGGLE only has an effect in multi-select (export) sessions.
    """

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    CONFIRM = auto()
    CANCEL = auto()
    TOGGLE = auto()


@dataclass(frozen=True)
class SelectionState:
    """Immutable snapshot of one selection session."""

    candidates: tuple[Candidate, ...]
    current_path: Path
    cursor: int = 0
    status: SessionStatus = SessionStatus.RUNNING
    targets: tuple[Path, ...] = ()
    error: CfError | None = None
    multi_select: bool = False
    marked: frozenset[int] = field(default_factory=frozenset)

    @property
    def is_terminal(self) -> bool:
        return self.status != SessionStatus.RUNNING

    @property
    def target(self) -> Path | None:
        """The single confirmed target, for single-select sessions."""
        if not self.targets:
            return None
        return self.targets[0]

    def confirmed(self, *targets: Path) -> "SelectionState":
        return replace(self, status=SessionStatus.CONFIRMED, targets=tuple(targets))

    def failed(self, error: CfError) -> "SelectionState":
        return replace(self, status=SessionStatus.ERROR, error=error)


def transition(state: SelectionState, event: SelectionEvent) -> SelectionState:
    """Return the state that follows state after event.

    Terminal states absorb every event. Movement wraps around both ends and is
    a no-op on an empty candidate list.
    """
    if state.is_terminal:
        return state

    count = len(state.candidates)
    match event:
        case SelectionEvent.MOVE_UP:
            if count == 0:
                return state
            return replace(state, cursor=(state.cursor - 1) % count)
        case SelectionEvent.MOVE_DOWN:
            if count == 0:
                return state
            return replace(state, cursor=(state.cursor + 1) % count)
        case SelectionEvent.CONFIRM:
            if count == 0:
                return state
            return state.confirmed(*_confirmed_targets(state))
        case SelectionEvent.CANCEL:
            return replace(state, status=SessionStatus.QUIT)
        case SelectionEvent.TOGGLE:
            if not state.multi_select or count == 0:
                return state
            return replace(state, marked=state.marked ^ {state.cursor})
        case _:
            assert_never(event)


def _confirmed_targets(state: SelectionState) -> list[Path]:
    if state.multi_select and state.marked:
        return [state.candidates[i].full_path for i in sorted(state.marked)]
    return [state.candidates[state.cursor].full_path]


def resolve_current_config(
    symlinks: SymlinkManager, config_path: Path, default_config_path: Path
) -> Path:
    """Work out which kubeconfig is active before anything is switched.

    Returns:
        The symlink target, or default_config_path when config_path is absent

    Raises:
        NotASymlinkError: If config_path exists and is not a symlink
        SymlinkOperationError: If config_path cannot be inspected
    """
    info = symlinks.inspect(config_path)
    match info.state:
        case LinkState.ABSENT:
            logger.debug("The symlink does not exist, using default %s", default_config_path)
            return default_config_path
        case LinkState.SYMLINK:
            assert info.target is not None
            logger.debug("The symlink points to %s", info.target)
            return info.target
        case LinkState.REGULAR:
            raise NotASymlinkError(config_path)
        case _:
            assert_never(info.state)


def open_session(
    candidates: list[Candidate],
    *,
    symlinks: SymlinkManager,
    previous_store: PreviousStore,
    config_path: Path,
    default_config_path: Path,
    kube_dir: Path,
    search: str | None = None,
) -> SelectionState:
    """Build the initial state of a single-select session.

    Args:
        candidates: Candidates discovered in kube_dir
        symlinks: Used to inspect the managed path
        previous_store: Read when search is the previous shortcut
        config_path: The managed symlink
        default_config_path: What "current" means while config_path is absent
        kube_dir: Directory the candidates came from (for error reports)
        search: Typed name, prefix, or "-"; None or empty for interactive mode

    Returns:
        RUNNING state for interactive mode, or an already terminal state

    Raises:
        SymlinkOperationError: If the managed path cannot be inspected
        OSError: If the previous pointer exists but cannot be read
    """
    try:
        current_path = resolve_current_config(symlinks, config_path, default_config_path)
    except NotASymlinkError as e:
        return SelectionState(
            candidates=tuple(candidates), current_path=config_path
        ).failed(e)
    logger.debug("Currently using kubeconfig: %s", current_path)

    state = SelectionState(candidates=tuple(candidates), current_path=current_path)

    if search == PREVIOUS_ARGUMENT:
        try:
            previous = previous_store.load()
        except PreviousNotFoundError as e:
            return state.failed(e)
        if previous == config_path:
            return state.failed(SelfLinkError(config_path))
        return state.confirmed(previous)

    if search:
        try:
            chosen = match_candidates(candidates, search)
        except CfError as e:
            return state.failed(e)
        return state.confirmed(chosen.full_path)

    if not candidates:
        return state.failed(NoCandidatesError(kube_dir))
    return replace(state, cursor=cursor_for(candidates, current_path))


def open_export_session(
    candidates: list[Candidate],
    *,
    current_path: Path,
    kube_dir: Path,
    searches: list[str] | None = None,
) -> SelectionState:
    """Build the initial state of a multi-select (export) session.

    Every search must resolve to exactly one candidate. Duplicates collapse,
    keeping the first occurrence.
    """
    state = SelectionState(
        candidates=tuple(candidates), current_path=current_path, multi_select=True
    )

    if searches:
        targets: list[Path] = []
        for search in searches:
            try:
                chosen = match_candidates(candidates, search)
            except CfError as e:
                return state.failed(e)
            if chosen.full_path not in targets:
                targets.append(chosen.full_path)
        return state.confirmed(*targets)

    if not candidates:
        return state.failed(NoCandidatesError(kube_dir))
    return replace(state, cursor=cursor_for(candidates, current_path))


def cursor_for(candidates: list[Candidate], current_path: Path) -> int:
    """Index of the candidate that is currently active, 0 if none is."""
    for index, candidate in enumerate(candidates):
        if candidate.full_path == current_path:
            return index
    return 0
