from __future__ import annotations

import os

import pytest

from kubectl_guard import runtime_logging

os.environ.setdefault("KUBECTL_GUARD_LOG_LEVEL", "off")


@pytest.fixture(autouse=True)
def _reset_runtime_logger():
    yield
    runtime_logging._runtime_logger = None  # noqa: SLF001
