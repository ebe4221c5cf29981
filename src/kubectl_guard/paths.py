"""XDG path helpers and environment overrides."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import PlatformDirs

APP_NAME = "kubectl-guard"

CONFIG_ENV = "KUBECTL_GUARD_CONFIG"
KUBECTL_ENV = "KUBECTL_GUARD_KUBECTL"


def dirs() -> PlatformDirs:
    return PlatformDirs(appname=APP_NAME, appauthor=False, roaming=False)


def config_root() -> Path:
    return Path(dirs().user_config_path)


def state_root() -> Path:
    return Path(dirs().user_state_path)


def config_path() -> Path:
    override = os.getenv(CONFIG_ENV)
    if override:
        return Path(override).expanduser().resolve()
    return config_root() / "config.json"


def kubectl_binary() -> str:
    return os.getenv(KUBECTL_ENV) or "kubectl"
