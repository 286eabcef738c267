"""Interactive selection loop driving the selection state machine."""

import logging

from kubectl_cf.cli.rendering import render_selection
from kubectl_cf.core.selection import SelectionState, transition
from kubectl_cf.core.terminal import Terminal, parse_key

logger = logging.getLogger(__name__)


def run_selection(
    terminal: Terminal, state: SelectionState, meta: list[str] | None = None
) -> SelectionState:
    """Feed key presses into the session until it reaches a terminal status.

    Keys are handled one at a time in arrival order; unbound keys are ignored.
    The screen is redrawn after every handled key.

    Returns:
        The terminal state (CONFIRMED or QUIT)
    """
    terminal.render(render_selection(state, meta))
    while not state.is_terminal:
        key = terminal.read_key()
        event = parse_key(key)
        if event is None:
            logger.debug("Ignoring unbound key %r", key)
            continue
        state = transition(state, event)
        logger.debug(
            "Handled %s, cursor=%d, status=%s", event.name, state.cursor, state.status.name
        )
        if not state.is_terminal:
            terminal.render(render_selection(state, meta))
    return state
