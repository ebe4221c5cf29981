"""CLI entrypoint for kubectl-guard."""

from __future__ import annotations

import click

from kubectl_guard.config.models import GuardConfig
from kubectl_guard.config.setup import run_setup
from kubectl_guard.config.store import ConfigStore
from kubectl_guard.errors import ConfigIOError, ContextLookupError, KubectlNotFoundError
from kubectl_guard.guard.contexts import KubectlContextProvider
from kubectl_guard.guard.engine import Allow, Decision, GuardEngine, RequireConfirmation, SetupRequired
from kubectl_guard.paths import CONFIG_ENV, KUBECTL_ENV, config_path
from kubectl_guard.process import exec_kubectl
from kubectl_guard.runtime_logging import FILE_ENV, LEVEL_ENV, configure_runtime_logging, log_config_load_failed
from kubectl_guard.ui.prompt import confirm, print_info, print_success, print_warning
from kubectl_guard.version import __version__

MANAGEMENT_COMMANDS = frozenset({"setup", "list", "add", "remove", "path"})

DECLINED_EXIT_CODE = 1

HELP_TEXT = """\
kubectl-guard - Protect production clusters from accidental commands

Usage:
  kubectl-guard [kubectl args...]     Run kubectl with protection
  kubectl-guard config <subcommand>   Manage configuration
  kubectl-guard --version             Print version
  kubectl-guard --help                Print this help

Config subcommands:
  setup         Run the setup wizard
  list          List protected contexts
  add <ctx>     Add a context to the protected list
  remove <ctx>  Remove a context from the protected list
  path          Print the config file path

Examples:
  # First run triggers setup wizard
  kubectl-guard get pods

  # Run kubectl commands normally (alias recommended)
  alias kubectl='kubectl-guard'
  kubectl delete pod nginx   # Prompts for confirmation on protected contexts

  # Manage configuration
  kubectl-guard config list
  kubectl-guard config add 'prod-*'
  kubectl-guard config remove staging

Environment:
  Config file: {config_file}
  {config_env}   Override the config file path
  {kubectl_env}  kubectl binary to run (default: kubectl)
  {level_env}  off, error, warning, info or debug
  {file_env}   Runtime log file (JSON lines)"""


def _help_text() -> str:
    return HELP_TEXT.format(
        config_file=config_path(),
        config_env=CONFIG_ENV,
        kubectl_env=KUBECTL_ENV,
        level_env=LEVEL_ENV,
        file_env=FILE_ENV,
    )


def _is_management_invocation(args: list[str]) -> bool:
    """``config setup`` etc. are ours; any other ``config ...`` belongs to kubectl."""
    if not args or args[0] != "config":
        return False
    if len(args) == 1:
        return True
    return args[1] in MANAGEMENT_COMMANDS or args[1] in {"-h", "--help"}


def _load(store: ConfigStore, *, missing_ok: bool = False) -> GuardConfig:
    try:
        return store.load_or_default() if missing_ok else store.load()
    except ConfigIOError as exc:
        raise click.ClickException(str(exc)) from exc


def _save(store: ConfigStore, config: GuardConfig) -> None:
    try:
        store.save(config)
    except ConfigIOError as exc:
        raise click.ClickException(str(exc)) from exc


def _forward(args: list[str]) -> None:
    try:
        exec_kubectl(args)
    except KubectlNotFoundError as exc:
        raise click.ClickException(str(exc)) from exc


def _context_names(provider: KubectlContextProvider) -> list[str]:
    return [context.name for context in provider.list_contexts()]


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "help_option_names": [],
    },
    add_help_option=False,
)
@click.argument("kubectl_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(ctx: click.Context, kubectl_args: tuple[str, ...]) -> None:
    """kubectl-guard: confirm state-altering kubectl commands on protected contexts."""
    configure_runtime_logging()
    args = list(kubectl_args)

    if args and args[0] in {"--version", "-v"}:
        click.echo(f"kubectl-guard {__version__}")
        return
    if args and args[0] in {"--help", "-h"}:
        click.echo(_help_text())
        return
    if _is_management_invocation(args):
        with config_group.make_context("kubectl-guard config", args[1:], parent=ctx) as sub_ctx:
            config_group.invoke(sub_ctx)
        return

    run_guard(ctx, args)


def run_guard(ctx: click.Context, args: list[str]) -> None:
    store = ConfigStore()
    provider = KubectlContextProvider()
    engine = GuardEngine(store, provider)

    decision: Decision
    try:
        decision = engine.check(args)
    except ConfigIOError as exc:
        # A broken config must not lock the user out of kubectl.
        log_config_load_failed(exc.path, exc.reason)
        print_warning(f"Ignoring unreadable config {exc.path}: {exc.reason}", err=True)
        decision = Allow()

    if isinstance(decision, SetupRequired):
        _first_run_setup(store, provider)
        return

    if isinstance(decision, RequireConfirmation):
        message = f"{decision.command_description} on protected context: {decision.context}"
        if not confirm(message):
            click.echo("Aborted.", err=True)
            ctx.exit(DECLINED_EXIT_CODE)

    _forward(args)


def _first_run_setup(store: ConfigStore, provider: KubectlContextProvider) -> None:
    try:
        names = _context_names(provider)
    except ContextLookupError as exc:
        print_warning(f"Could not get kubectl contexts: {exc}")
        print_info("Make sure kubectl is installed and configured.")
        return
    run_setup(store, names)


@click.group("config", context_settings={"help_option_names": ["-h", "--help"]})
def config_group() -> None:
    """Manage kubectl-guard configuration."""


@config_group.command()
def setup() -> None:
    """Run the setup wizard."""
    provider = KubectlContextProvider()
    try:
        names = _context_names(provider)
    except ContextLookupError as exc:
        raise click.ClickException(f"could not get kubectl contexts: {exc}") from exc
    run_setup(ConfigStore(), names)


@config_group.command("list")
def list_command() -> None:
    """List protected contexts."""
    store = ConfigStore()
    if not store.exists():
        print_info("No configuration found. Run 'kubectl-guard config setup' to configure.")
        return

    config = _load(store)
    if not config.protected_contexts:
        print_info("No protected contexts.")
        return

    print_info("Protected contexts:")
    for pattern in config.protected_contexts:
        click.echo(f"  - {pattern}")


@config_group.command()
@click.argument("context")
def add(context: str) -> None:
    """Add a context (or glob pattern) to the protected list."""
    context = context.strip()
    if not context:
        raise click.BadParameter("must not be empty", param_hint="'CONTEXT'")
    store = ConfigStore()
    config = _load(store, missing_ok=True)
    if config.add_context(context):
        _save(store, config)
        print_success(f"Added: {context}")
    else:
        print_info(f"Context already protected: {context}")


@config_group.command()
@click.argument("context")
def remove(context: str) -> None:
    """Remove a context from the protected list."""
    context = context.strip()
    store = ConfigStore()
    if not store.exists():
        print_info("No configuration found.")
        return

    config = _load(store)
    if config.remove_context(context):
        _save(store, config)
        print_success(f"Removed: {context}")
    else:
        print_info(f"Context not in protected list: {context}")


@config_group.command()
def path() -> None:
    """Print the config file path."""
    click.echo(str(ConfigStore().path))


if __name__ == "__main__":
    main()
