"""Per-invocation guard decision."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from kubectl_guard.config.models import GuardConfig
from kubectl_guard.errors import ContextLookupError
from kubectl_guard.guard.commands import extract_command, is_state_altering
from kubectl_guard.guard.matcher import is_protected
from kubectl_guard.runtime_logging import log_context_lookup_failed


@dataclass(frozen=True, slots=True)
class Allow:
    pass


@dataclass(frozen=True, slots=True)
class RequireConfirmation:
    context: str
    command_description: str


@dataclass(frozen=True, slots=True)
class SetupRequired:
    pass


Decision = Allow | RequireConfirmation | SetupRequired


class ConfigSource(Protocol):
    def exists(self) -> bool: ...

    def load(self) -> GuardConfig: ...


class ContextSource(Protocol):
    def current_context(self) -> str: ...


class GuardEngine:
    """Decides whether a kubectl invocation runs, needs confirmation, or needs setup.

    Each :meth:`check` is independent: the config and the current context are
    read fresh, so switching contexts between runs takes effect immediately.
    """

    def __init__(self, config_store: ConfigSource, context_provider: ContextSource) -> None:
        self.config_store = config_store
        self.context_provider = context_provider

    def check(self, args: Sequence[str]) -> Decision:
        if not self.config_store.exists():
            return SetupRequired()

        # ConfigIOError propagates; there is no safe default pattern set.
        config = self.config_store.load()

        try:
            context = self.context_provider.current_context()
        except ContextLookupError as exc:
            # Fail open and let kubectl report its own error.
            log_context_lookup_failed(exc)
            return Allow()

        if not is_protected(context, config.protected_contexts):
            return Allow()

        if not is_state_altering(args):
            return Allow()

        command = extract_command(args)
        return RequireConfirmation(context=context, command_description=command.description)
