"""Best-effort kubectl argument classifier.

Only the command and its first positional argument are extracted. Flags are
skipped without validating kubectl's grammar: an unrecognised flag is assumed to
take no value, so ``--unknown value delete`` classifies ``value`` as the command.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from kubectl_guard.guard.policy import (
    SAFE_COMMANDS,
    SAFE_SUBCOMMAND_OVERRIDES,
    STATE_ALTERING_COMMANDS,
    VALUE_LONG_FLAGS,
    VALUE_SHORT_FLAGS,
)


@dataclass(frozen=True, slots=True)
class KubectlCommand:
    name: str = ""
    subcommand: str = ""

    @property
    def description(self) -> str:
        if self.subcommand:
            return f"{self.name} {self.subcommand}"
        return self.name


def extract_command(args: Sequence[str]) -> KubectlCommand:
    name = ""
    skip_next = False
    for arg in args:
        if skip_next:
            skip_next = False
            continue

        if arg.startswith("--"):
            # --flag=value carries its own value.
            if "=" not in arg and arg in VALUE_LONG_FLAGS:
                skip_next = True
            continue

        if arg.startswith("-"):
            if arg in VALUE_SHORT_FLAGS:
                skip_next = True
            continue

        if not name:
            name = arg
        else:
            return KubectlCommand(name=name, subcommand=arg)

    return KubectlCommand(name=name)


def _is_safe_override(command: KubectlCommand) -> bool:
    return (command.name, command.subcommand) in SAFE_SUBCOMMAND_OVERRIDES


def is_safe_command(args: Sequence[str]) -> bool:
    """Return True for read-only invocations.

    Informational only; confirmation is driven by :func:`is_state_altering`.
    """
    command = extract_command(args)
    if not command.name:
        return True
    if _is_safe_override(command):
        return True
    return command.name in SAFE_COMMANDS


def is_state_altering(args: Sequence[str]) -> bool:
    """Return True when the invocation mutates cluster state.

    Commands missing from both policy tables are treated as not state-altering.
    This is a deliberate fail-open policy: plugins and commands added in newer
    kubectl releases pass through unprompted.
    """
    command = extract_command(args)
    if not command.name:
        return False
    if _is_safe_override(command):
        return False
    return command.name in STATE_ALTERING_COMMANDS


def command_description(args: Sequence[str]) -> str:
    return extract_command(args).description
