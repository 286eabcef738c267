import logging
from pathlib import Path
from typing import NoReturn

import click

from kubectl_cf.cli.interactive import run_selection
from kubectl_cf.cli.json_output import emit_json, emit_json_error
from kubectl_cf.cli.json_schemas import CandidateInfo, ListCommandResponse
from kubectl_cf.cli.output import machine_output, user_output
from kubectl_cf.cli.rendering import print_candidate_table
from kubectl_cf.core.candidates import Candidate, list_candidates
from kubectl_cf.core.context import CfContext, create_context
from kubectl_cf.core.errors import CfError, NotASymlinkError
from kubectl_cf.core.selection import (
    SelectionState,
    SessionStatus,
    open_export_session,
    open_session,
    resolve_current_config,
)
from kubectl_cf.core.switch import build_export_statement, switch_to

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.command("kubectl-cf", context_settings=CONTEXT_SETTINGS)
@click.argument("names", nargs=-1)
@click.option(
    "--export",
    "export",
    is_flag=True,
    help="Print an 'export KUBECONFIG=...' statement for one or more configs instead of "
    "switching the symlink.",
)
@click.option("--list", "list_only", is_flag=True, help="List kubeconfig candidates and exit.")
@click.option("--json", "output_json", is_flag=True, help="Output JSON format (with --list).")
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Show what would be done without changing any files.",
)
@click.option("--debug", is_flag=True, help="Show debug logging on stderr.")
@click.option(
    "--kube-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    envvar="KUBECTL_CF_KUBE_DIR",
    help="Directory holding kubeconfig files (default: ~/.kube).",
)
@click.version_option(package_name="kubectl-cf")
@click.pass_context
def cli(
    click_ctx: click.Context,
    names: tuple[str, ...],
    export: bool,
    list_only: bool,
    output_json: bool,
    dry_run: bool,
    debug: bool,
    kube_dir: Path | None,
) -> None:
    """Switch the kubeconfig that kubectl uses by repointing ~/.kube/config.

    \b
    Interactive mode:
      kubectl cf

    \b
    Switch directly by name or unique prefix:
      kubectl cf prod

    \b
    Switch back to the previous kubeconfig:
      kubectl cf -

    \b
    Use several configs in the current shell only:
      eval "$(kubectl cf --export dev prod)"

    Candidates are 'config', '<name>.kubeconfig' and '<name>.config' files in
    the kube directory.
    """
    if len(names) > 1 and not export:
        raise click.UsageError("Wrong number of arguments, expected at most 1")
    if output_json and not list_only:
        raise click.UsageError("--json can only be used with --list")

    # Only create context if not already provided (e.g., by tests)
    if click_ctx.obj is None:
        try:
            click_ctx.obj = create_context(
                dry_run=dry_run, quiet=export, kube_dir=kube_dir, debug=debug
            )
        except OSError as e:
            logger.debug("Exception details:", exc_info=True)
            user_output(
                click.style("Error: ", fg="red")
                + f"Cannot create state directory {e.filename}: {e.strerror or e}"
            )
            raise SystemExit(1) from e
    ctx: CfContext = click_ctx.obj

    candidates = _load_candidates(ctx, output_json=output_json)

    if list_only:
        _list_candidates(ctx, candidates, output_json=output_json)
    elif export:
        _export_candidates(ctx, candidates, list(names))
    else:
        _switch(ctx, candidates, names[0] if names else None)


def _load_candidates(ctx: CfContext, *, output_json: bool) -> list[Candidate]:
    try:
        return list_candidates(ctx.env.kube_dir)
    except OSError as e:
        logger.debug("Exception details:", exc_info=True)
        message = f"Cannot read kubeconfig directory {ctx.env.kube_dir}: {e.strerror or e}"
        if output_json:
            emit_json_error(message, type(e).__name__)
        _fail(ctx, message)


def _switch(ctx: CfContext, candidates: list[Candidate], search: str | None) -> None:
    try:
        state = open_session(
            candidates,
            symlinks=ctx.symlinks,
            previous_store=ctx.previous_store,
            config_path=ctx.env.config_path,
            default_config_path=ctx.env.default_config_path,
            kube_dir=ctx.env.kube_dir,
            search=search,
        )
    except (CfError, OSError) as e:
        logger.debug("Exception details:", exc_info=True)
        _fail(ctx, str(e))

    if state.status == SessionStatus.RUNNING:
        state = run_selection(ctx.terminal, state, _meta_lines(ctx))

    _report_terminal_state(ctx, state)
    if state.status != SessionStatus.CONFIRMED:
        return

    target = state.target
    assert target is not None
    try:
        result = switch_to(ctx, state.current_path, target)
    except (CfError, OSError) as e:
        logger.debug("Exception details:", exc_info=True)
        _fail(ctx, str(e))

    if result.backup is not None:
        ctx.feedback.info(f"Backed up {ctx.env.config_path} to {result.backup}")
    ctx.feedback.success(f"Symlink {ctx.env.config_path} now points to {result.target}")
    ctx.feedback.info(f"Previous kubeconfig: {result.previous}")
    if result.kubeconfig_env_stale:
        ctx.feedback.warning(
            f"Warning: KUBECONFIG is set to '{ctx.env.kubeconfig_env}', kubectl will not read "
            f"{ctx.env.config_path}. Run 'export KUBECONFIG={ctx.env.config_path}' to use it."
        )


def _export_candidates(ctx: CfContext, candidates: list[Candidate], searches: list[str]) -> None:
    current = _current_or_none(ctx)
    state = open_export_session(
        candidates,
        current_path=current if current is not None else ctx.env.config_path,
        kube_dir=ctx.env.kube_dir,
        searches=searches,
    )

    if state.status == SessionStatus.RUNNING:
        state = run_selection(ctx.terminal, state, _meta_lines(ctx))

    _report_terminal_state(ctx, state)
    if state.status == SessionStatus.CONFIRMED:
        machine_output(build_export_statement(list(state.targets)))


def _list_candidates(ctx: CfContext, candidates: list[Candidate], *, output_json: bool) -> None:
    current = _current_or_none(ctx)

    if output_json:
        response = ListCommandResponse(
            config_path=str(ctx.env.config_path),
            current=str(current) if current is not None else None,
            candidates=[
                CandidateInfo(
                    name=candidate.name,
                    path=str(candidate.full_path),
                    active=candidate.full_path == current,
                )
                for candidate in candidates
            ],
        )
        emit_json(response.model_dump(mode="json"))
        return

    if not candidates:
        ctx.feedback.info(f"No kubeconfig files found in {ctx.env.kube_dir}")
        return
    print_candidate_table(candidates, current)


def _current_or_none(ctx: CfContext) -> Path | None:
    """Resolve the active kubeconfig for read-only modes.

    A managed path that is not a symlink is only a problem when switching, so
    here it just means there is no active candidate.
    """
    try:
        return resolve_current_config(
            ctx.symlinks, ctx.env.config_path, ctx.env.default_config_path
        )
    except NotASymlinkError:
        return None
    except CfError as e:
        logger.debug("Exception details:", exc_info=True)
        _fail(ctx, str(e))


def _report_terminal_state(ctx: CfContext, state: SelectionState) -> None:
    """Report warnings for ERROR sessions and exit; other states pass through."""
    if state.status != SessionStatus.ERROR:
        return
    assert state.error is not None
    ctx.feedback.warning(f"Warning: {state.error}")
    raise SystemExit(1)


def _meta_lines(ctx: CfContext) -> list[str]:
    if ctx.dry_run:
        return [click.style("[DRY RUN] No files will be changed", fg="yellow"), ""]
    return []


def _fail(ctx: CfContext, message: str) -> NoReturn:
    ctx.feedback.error(f"Error: {message}")
    raise SystemExit(1)


def main() -> None:
    """CLI entry point used by the `kubectl-cf` console script."""
    cli()
