"""Load/save the protected-context configuration."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from kubectl_guard.config.models import GuardConfig
from kubectl_guard.errors import ConfigIOError
from kubectl_guard.paths import config_path
from kubectl_guard.runtime_logging import log_config_saved


class ConfigStore:
    def __init__(self, path: Path | None = None) -> None:
        self.path = path or config_path()

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> GuardConfig:
        """Read the config file.

        Unlike a settings file, a broken config is never replaced with defaults:
        guessing an empty pattern set would silently drop protection.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigIOError(self.path, exc.strerror or str(exc)) from exc

        if not raw.strip():
            return GuardConfig()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ConfigIOError(self.path, f"invalid JSON: {exc}") from exc

        if data is None:
            return GuardConfig()
        try:
            return GuardConfig.model_validate(data)
        except ValidationError as exc:
            raise ConfigIOError(self.path, f"invalid configuration: {exc}") from exc

    def load_or_default(self) -> GuardConfig:
        if self.exists():
            return self.load()
        return GuardConfig()

    def save(self, config: GuardConfig) -> None:
        payload = json.dumps(config.model_dump(mode="json"), indent=2, sort_keys=True)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(f"{payload}\n", encoding="utf-8")
        except OSError as exc:
            raise ConfigIOError(self.path, exc.strerror or str(exc)) from exc
        log_config_saved(self.path, len(config.protected_contexts))
