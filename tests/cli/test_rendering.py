"""Tests for selection screen and candidate table rendering."""

from pathlib import Path

import click
from rich.console import Console

from kubectl_cf.cli.rendering import (
    EXPORT_PROMPT,
    SELECT_PROMPT,
    build_candidate_table,
    render_selection,
)
from kubectl_cf.core.candidates import Candidate
from kubectl_cf.core.selection import SelectionState

DEV = Candidate(name="dev", full_path=Path("/k/dev.kubeconfig"))
PRODUCTION = Candidate(name="production", full_path=Path("/k/production.kubeconfig"))


def _rows(screen: str) -> list[str]:
    plain = click.unstyle(screen)
    return [line for line in plain.splitlines() if "/k/" in line]


def test_render_marks_cursor_and_current() -> None:
    state = SelectionState(
        candidates=(DEV, PRODUCTION),
        current_path=PRODUCTION.full_path,
        cursor=0,
    )

    screen = render_selection(state)

    assert SELECT_PROMPT in screen
    assert _rows(screen) == [
        "> dev        /k/dev.kubeconfig",
        "  production /k/production.kubeconfig*",
    ]


def test_render_highlights_current_row() -> None:
    state = SelectionState(candidates=(DEV,), current_path=DEV.full_path)

    screen = render_selection(state)

    assert click.style(" dev /k/dev.kubeconfig*", fg="green") in screen


def test_render_multi_select_shows_checkboxes() -> None:
    state = SelectionState(
        candidates=(DEV, PRODUCTION),
        current_path=Path("/k/config"),
        cursor=1,
        multi_select=True,
        marked=frozenset({0}),
    )

    screen = render_selection(state)

    assert EXPORT_PROMPT in screen
    assert _rows(screen) == [
        "  [x] dev        /k/dev.kubeconfig",
        "> [ ] production /k/production.kubeconfig",
    ]


def test_render_includes_meta_lines_first() -> None:
    state = SelectionState(candidates=(DEV,), current_path=Path("/k/config"))

    screen = render_selection(state, ["[DRY RUN] No files will be changed"])

    assert screen.splitlines()[0] == "[DRY RUN] No files will be changed"
    assert screen.endswith("\n")


def test_candidate_table_marks_active_candidate() -> None:
    console = Console(width=120, record=True, color_system=None)

    console.print(build_candidate_table([DEV, PRODUCTION], DEV.full_path))

    text = console.export_text()
    assert "NAME" in text
    assert "PATH" in text
    dev_line = next(line for line in text.splitlines() if "dev.kubeconfig" in line)
    production_line = next(line for line in text.splitlines() if "production" in line)
    assert "*" in dev_line
    assert "*" not in production_line
