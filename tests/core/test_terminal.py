"""Tests for key parsing."""

import pytest

from kubectl_cf.core.selection import SelectionEvent
from kubectl_cf.core.terminal import KEY_CTRL_C, KEY_DOWN, KEY_ESCAPE, KEY_UP, parse_key


@pytest.mark.parametrize(
    ("key", "event"),
    [
        (KEY_UP, SelectionEvent.MOVE_UP),
        ("k", SelectionEvent.MOVE_UP),
        ("\x1bOA", SelectionEvent.MOVE_UP),
        (KEY_DOWN, SelectionEvent.MOVE_DOWN),
        ("j", SelectionEvent.MOVE_DOWN),
        ("\r", SelectionEvent.CONFIRM),
        ("\n", SelectionEvent.CONFIRM),
        (" ", SelectionEvent.TOGGLE),
        ("q", SelectionEvent.CANCEL),
        (KEY_ESCAPE, SelectionEvent.CANCEL),
        (KEY_CTRL_C, SelectionEvent.CANCEL),
    ],
)
def test_parse_key_bindings(key: str, event: SelectionEvent) -> None:
    assert parse_key(key) == event


def test_parse_key_unbound() -> None:
    assert parse_key("x") is None
    assert parse_key("\x1b[C") is None
