"""kubectl context lookups."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass

from kubectl_guard.errors import ContextLookupError
from kubectl_guard.paths import kubectl_binary

_CURRENT_MARKER = "*"


@dataclass(slots=True)
class KubectlContext:
    name: str
    cluster: str = ""
    auth_info: str = ""
    namespace: str = ""
    current: bool = False


def parse_context_line(line: str) -> KubectlContext:
    """Parse one row of ``kubectl config get-contexts --no-headers``.

    Columns are CURRENT NAME CLUSTER AUTHINFO NAMESPACE, where CURRENT is ``*``
    or blank and trailing columns may be missing.
    """
    current = line.startswith(_CURRENT_MARKER)
    if current:
        line = line[len(_CURRENT_MARKER) :]

    fields = line.split()
    fields += [""] * (4 - len(fields))
    name, cluster, auth_info, namespace = fields[:4]
    return KubectlContext(
        name=name,
        cluster=cluster,
        auth_info=auth_info,
        namespace=namespace,
        current=current,
    )


def parse_context_table(output: str) -> list[KubectlContext]:
    contexts: list[KubectlContext] = []
    for line in output.splitlines():
        if not line.strip():
            continue
        context = parse_context_line(line)
        if context.name:
            contexts.append(context)
    return contexts


class KubectlContextProvider:
    """Reads contexts by shelling out to kubectl. Nothing is cached."""

    def __init__(self, kubectl: str | None = None) -> None:
        self.kubectl = kubectl or kubectl_binary()

    def _run(self, *args: str) -> str:
        try:
            completed = subprocess.run(
                [self.kubectl, *args],
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as exc:
            raise ContextLookupError(f"{self.kubectl} not found") from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise ContextLookupError(f"kubectl {' '.join(args)}: {detail}") from exc
        except OSError as exc:
            raise ContextLookupError(str(exc)) from exc
        return completed.stdout

    def current_context(self) -> str:
        name = self._run("config", "current-context").strip()
        if not name:
            raise ContextLookupError("kubectl reported an empty current context")
        return name

    def list_contexts(self) -> list[KubectlContext]:
        return parse_context_table(self._run("config", "get-contexts", "--no-headers"))
