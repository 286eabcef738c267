"""Terminal abstraction for the interactive selection loop.

The selection loop only needs two things from the host terminal: the next key
press and a way to show the current screen. RealTerminal reads raw keys with
click.getchar() and redraws in place on stderr, keeping stdout free for data.
"""

from abc import ABC, abstractmethod

import click

from kubectl_cf.core.selection import SelectionEvent

KEY_UP = "\x1b[A"
KEY_DOWN = "\x1b[B"
KEY_ESCAPE = "\x1b"
KEY_CTRL_C = "\x03"

KEY_BINDINGS: dict[str, SelectionEvent] = {
    KEY_UP: SelectionEvent.MOVE_UP,
    "k": SelectionEvent.MOVE_UP,
    KEY_DOWN: SelectionEvent.MOVE_DOWN,
    "j": SelectionEvent.MOVE_DOWN,
    "\r": SelectionEvent.CONFIRM,
    "\n": SelectionEvent.CONFIRM,
    " ": SelectionEvent.TOGGLE,
    "q": SelectionEvent.CANCEL,
    KEY_ESCAPE: SelectionEvent.CANCEL,
    KEY_CTRL_C: SelectionEvent.CANCEL,
}

# Application cursor mode variants sent by some terminals
KEY_BINDINGS["\x1bOA"] = SelectionEvent.MOVE_UP
KEY_BINDINGS["\x1bOB"] = SelectionEvent.MOVE_DOWN


def parse_key(key: str) -> SelectionEvent | None:
    """Map a raw key string to a selection event, None for unbound keys."""
    return KEY_BINDINGS.get(key)


class Terminal(ABC):
    """Abstract host terminal used by the interactive selection loop."""

    @abstractmethod
    def read_key(self) -> str:
        """Block until the next key press and return it as a raw string.

        Ctrl+C and end of input are reported as KEY_CTRL_C rather than raised.
        """
        ...

    @abstractmethod
    def render(self, screen: str) -> None:
        """Replace whatever was drawn last with screen."""
        ...


class RealTerminal(Terminal):
    """Production terminal: raw key reads and in-place redraw on stderr."""

    def __init__(self) -> None:
        self._drawn_lines = 0

    def read_key(self) -> str:
        try:
            return click.getchar()
        except (KeyboardInterrupt, EOFError):
            return KEY_CTRL_C

    def render(self, screen: str) -> None:
        if self._drawn_lines:
            # Move to the first line drawn last time and clear to end of screen
            click.echo(f"\x1b[{self._drawn_lines}F\x1b[J", nl=False, err=True)
        if not screen.endswith("\n"):
            screen += "\n"
        click.echo(screen, nl=False, err=True)
        self._drawn_lines = screen.count("\n")
