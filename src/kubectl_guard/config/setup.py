"""First-run setup wizard."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import click

from kubectl_guard.config.models import GuardConfig
from kubectl_guard.config.store import ConfigStore
from kubectl_guard.errors import ConfigIOError
from kubectl_guard.runtime_logging import log_setup_completed
from kubectl_guard.ui.prompt import print_info, print_success, print_warning

if TYPE_CHECKING:
    from kubectl_guard.ui.checklist import MultiSelectItem

Selector = Callable[[list["MultiSelectItem"]], tuple[list["MultiSelectItem"], bool]]


def run_setup(
    store: ConfigStore,
    context_names: list[str],
    select: Selector | None = None,
) -> bool:
    """Let the user pick contexts to protect and save them.

    Returns True once a configuration has been written, False when there was
    nothing to choose from, the user cancelled, or saving failed.
    """
    if not context_names:
        print_warning("No kubectl contexts found.")
        print_info("Configure kubectl first, then re-run your command.")
        return False

    # textual is only imported when the checklist is actually needed.
    from kubectl_guard.ui.checklist import MultiSelectItem, multi_select

    items = [MultiSelectItem(name=name) for name in context_names]
    selected, confirmed = (select or multi_select)(items)
    if not confirmed:
        click.echo("Setup cancelled.")
        return False

    config = GuardConfig(protected_contexts=[item.name for item in selected if item.selected])
    try:
        store.save(config)
    except ConfigIOError as exc:
        print_warning(f"Failed to save config: {exc.reason}")
        return False

    log_setup_completed(len(config.protected_contexts))
    print_success(f"Saved to {store.path}")
    if config.protected_contexts:
        print_info("Protected: " + ", ".join(config.protected_contexts))
    else:
        print_info("No contexts protected.")

    click.echo()
    print_info("Re-run your command to continue.")
    return True
