"""Static kubectl command classification tables."""

from __future__ import annotations

# Read-only commands that never modify cluster state.
SAFE_COMMANDS = frozenset(
    {
        "get",
        "describe",
        "logs",
        "top",
        "explain",
        "api-resources",
        "api-versions",
        "version",
        "cluster-info",
        "config",
        "auth",
        "wait",
        "diff",
    }
)

STATE_ALTERING_COMMANDS = frozenset(
    {
        "apply",
        "create",
        "delete",
        "patch",
        "replace",
        "edit",
        "scale",
        "rollout",
        "autoscale",
        "expose",
        "run",
        "set",
        "label",
        "annotate",
        "taint",
        "drain",
        "cordon",
        "uncordon",
        "exec",
        "cp",
        "debug",
        "attach",
    }
)

# (command, subcommand) pairs that only report state although the command
# itself is state-altering.
SAFE_SUBCOMMAND_OVERRIDES = frozenset(
    {
        ("rollout", "status"),
        ("rollout", "history"),
    }
)

# Flags that consume the following token as their value.
VALUE_SHORT_FLAGS = frozenset({"-n", "-l", "-f", "-o", "-c", "-s", "-p", "-k", "-R"})

VALUE_LONG_FLAGS = frozenset(
    {
        "--context",
        "--namespace",
        "--selector",
        "--filename",
        "--output",
        "--container",
        "--kubeconfig",
        "--cluster",
        "--user",
    }
)
