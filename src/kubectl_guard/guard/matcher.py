"""Glob matching of context names against protected patterns."""

from __future__ import annotations

import re
from collections.abc import Iterable
from fnmatch import fnmatchcase


def _normalize_classes(pattern: str) -> str | None:
    """Return ``pattern`` in fnmatch's dialect, or None when a class is malformed.

    Every ``[`` must open a non-empty, terminated character class. ``fnmatch``
    treats an unterminated ``[`` as a literal, which would let a typo such as
    ``prod-[ab`` silently protect a differently named context. A ``^`` directly
    after the opening ``[`` negates the class and is rewritten to fnmatch's ``!``;
    a ``^`` anywhere else is a class member.
    """
    parts: list[str] = []
    index = 0
    length = len(pattern)
    while index < length:
        char = pattern[index]
        if char != "[":
            parts.append(char)
            index += 1
            continue
        parts.append("[")
        index += 1
        if index < length and pattern[index] in "!^":
            parts.append("!")
            index += 1
        # A leading ']' is a member of the class, not its end.
        start = index
        if index < length and pattern[index] == "]":
            index += 1
        closing = pattern.find("]", index)
        if closing == -1:
            return None
        parts.append(pattern[start : closing + 1])
        index = closing + 1
    return "".join(parts)


def matches(pattern: str, name: str) -> bool:
    """Shell-style, case-sensitive, full-string match. Malformed patterns never match.

    Backslash is an ordinary character, not an escape.
    """
    if not pattern:
        return False
    normalized = _normalize_classes(pattern)
    if normalized is None:
        return False
    try:
        return fnmatchcase(name, normalized)
    except re.error:
        return False


def first_match(name: str, patterns: Iterable[str]) -> str | None:
    for pattern in patterns:
        if matches(pattern, name):
            return pattern
    return None


def is_protected(name: str, patterns: Iterable[str]) -> bool:
    return first_match(name, patterns) is not None
