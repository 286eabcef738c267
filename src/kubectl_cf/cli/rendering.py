"""Text rendering of the selection screen and of the candidate table."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from kubectl_cf.core.candidates import Candidate
from kubectl_cf.core.selection import SelectionState

SELECT_PROMPT = "What kubeconfig do you want to use?"
EXPORT_PROMPT = "Which kubeconfigs do you want to export?"

SELECT_HELP = "↑/k up • ↓/j down • enter select • q quit"
EXPORT_HELP = "↑/k up • ↓/j down • space mark • enter export • q quit"


def render_selection(state: SelectionState, meta: list[str] | None = None) -> str:
    """Render a running selection session as a block of text.

    The row under the cursor starts with ">", the active kubeconfig ends with
    "*" and is highlighted. Multi-select sessions show a checkbox per row.

    Args:
        state: Session to render
        meta: Extra lines shown above the prompt

    Returns:
        Screen text ending with a newline
    """
    lines: list[str] = list(meta or [])
    lines.append(EXPORT_PROMPT if state.multi_select else SELECT_PROMPT)
    lines.append("")

    width = max((len(candidate.name) for candidate in state.candidates), default=0)
    for index, candidate in enumerate(state.candidates):
        cursor = ">" if index == state.cursor else " "
        checkbox = ""
        if state.multi_select:
            checkbox = "[x] " if index in state.marked else "[ ] "
        is_current = candidate.full_path == state.current_path
        suffix = "*" if is_current else ""
        row = f" {checkbox}{candidate.name:<{width}} {candidate.full_path}{suffix}"
        if is_current:
            row = click.style(row, fg="green")
        lines.append(cursor + row)

    lines.append("")
    lines.append(click.style(EXPORT_HELP if state.multi_select else SELECT_HELP, dim=True))
    return "\n".join(lines) + "\n"


def build_candidate_table(candidates: list[Candidate], current: Path | None) -> Table:
    """Build a rich table listing candidates, marking the active one."""
    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("", width=1)
    table.add_column("NAME", style="bold")
    table.add_column("PATH", overflow="fold")

    for candidate in candidates:
        is_current = candidate.full_path == current
        marker = Text("*", style="bold green") if is_current else Text("")
        name_cell = Text(candidate.name, style="green" if is_current else "")
        table.add_row(marker, name_cell, Text(str(candidate.full_path)))
    return table


def print_candidate_table(candidates: list[Candidate], current: Path | None) -> None:
    """Print the candidate table to stderr (consistent with user_output convention)."""
    console = Console(stderr=True)
    console.print(build_candidate_table(candidates, current))
