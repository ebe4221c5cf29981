"""Configuration schema for kubectl-guard."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from kubectl_guard.guard.matcher import is_protected


class GuardConfig(BaseModel):
    schema_version: int = Field(default=1)
    protected_contexts: list[str] = Field(
        default_factory=list,
        description="Glob patterns naming contexts that require confirmation",
    )

    @field_validator("protected_contexts")
    @classmethod
    def normalize_patterns(cls, value: list[str]) -> list[str]:
        """Strip patterns, drop blanks and duplicates, keep first-seen order."""
        seen: dict[str, None] = {}
        for pattern in value:
            stripped = pattern.strip()
            if stripped:
                seen.setdefault(stripped, None)
        return list(seen)

    def is_context_protected(self, context: str) -> bool:
        return is_protected(context, self.protected_contexts)

    def add_context(self, pattern: str) -> bool:
        """Append ``pattern`` (stripped); returns False when it is already listed.

        Raises ValueError for a blank pattern.
        """
        pattern = pattern.strip()
        if not pattern:
            raise ValueError("context pattern must not be empty")
        if pattern in self.protected_contexts:
            return False
        self.protected_contexts.append(pattern)
        return True

    def remove_context(self, pattern: str) -> bool:
        """Remove ``pattern`` (stripped); returns False when it was not listed."""
        pattern = pattern.strip()
        if not pattern or pattern not in self.protected_contexts:
            return False
        self.protected_contexts.remove(pattern)
        return True
