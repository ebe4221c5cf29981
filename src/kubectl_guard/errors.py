"""Error types raised across kubectl-guard."""

from __future__ import annotations

from pathlib import Path


class GuardError(Exception):
    """Base class for kubectl-guard errors."""


class ConfigIOError(GuardError):
    """The protected-context store could not be read, parsed or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ContextLookupError(GuardError):
    """kubectl could not report a context."""


class KubectlNotFoundError(GuardError):
    def __init__(self, binary: str) -> None:
        self.binary = binary
        super().__init__(f"kubectl binary not found: {binary}")
