"""Hand the current process over to kubectl."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from collections.abc import Sequence
from typing import NoReturn

from kubectl_guard.errors import KubectlNotFoundError
from kubectl_guard.paths import kubectl_binary
from kubectl_guard.runtime_logging import log_kubectl_exec


def resolve_kubectl(binary: str | None = None) -> str:
    name = binary or kubectl_binary()
    path = shutil.which(name)
    if path is None:
        raise KubectlNotFoundError(name)
    return path


def exit_status(returncode: int) -> int:
    """Map a child's return code to a shell-style exit status."""
    if returncode < 0:
        return 128 + abs(returncode)
    return returncode


def exec_kubectl(args: Sequence[str], binary: str | None = None) -> NoReturn:
    """Replace this process with kubectl, passing ``args`` and the environment through."""
    path = resolve_kubectl(binary)
    argv = [os.path.basename(binary or kubectl_binary()), *args]
    log_kubectl_exec(path, args)

    if sys.platform == "win32":
        # os.execv on Windows detaches the child; spawn and mirror its status instead.
        completed = subprocess.run([path, *args], check=False)
        raise SystemExit(exit_status(completed.returncode))

    sys.stdout.flush()
    sys.stderr.flush()
    os.execv(path, argv)
