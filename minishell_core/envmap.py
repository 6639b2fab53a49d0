"""Environment variable map used by the shell and its builtins."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

DEFAULT_SHLVL = "1"
DEFAULT_PREVIOUS_DIR = "/home/user/Downloads"


def is_identifier(s: str | None) -> bool:
    """True when ``s`` is a letter or underscore followed by letters, digits or underscores."""
    if not s:
        return False
    first, rest = s[0], s[1:]
    if not (_is_ascii_alpha(first) or first == "_"):
        return False
    return all(_is_ascii_alpha(c) or c.isdigit() and c.isascii() or c == "_" for c in rest)


def _is_ascii_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def split_name_value(string: str, allow_empty_value: bool) -> tuple[str, str | None]:
    """Split ``NAME=VALUE`` at the first ``=``.

    Without ``=`` the whole string is the name and the value is None, which is
    only accepted when ``allow_empty_value`` is true.
    """
    name, sep, value = string.partition("=")
    if not sep:
        if not allow_empty_value:
            raise ValueError(f"missing '=' in {string!r}")
        return string, None
    return name, value


def item_string(name: str, value: str | None) -> str:
    """Render an entry as ``NAME=VALUE``, or just ``NAME`` when it has no value."""
    return name if value is None else f"{name}={value}"


class EnvMap:
    """Ordered map of shell variables.

    Newly added names come first when iterating; updating a name keeps its
    place. A name may be present with no value (exported but unset).
    """

    def __init__(self) -> None:
        # Stored in insertion order; iteration runs newest first.
        self._items: dict[str, str | None] = {}

    def get(self, name: str | None) -> str | None:
        """Value of ``name``, or None when it is absent or has no value."""
        if name is None:
            return None
        return self._items.get(name)

    def set(self, name: str | None, value: str | None) -> None:
        """Add ``name`` or update its value; the name must be a valid identifier."""
        if name is None or not is_identifier(name):
            raise ValueError(f"not a valid identifier: {name!r}")
        self._items[name] = value

    def put(self, string: str, allow_empty_value: bool) -> None:
        """Add or update an entry given as ``NAME=VALUE`` (or ``NAME`` if allowed)."""
        name, value = split_name_value(string, allow_empty_value)
        self.set(name, value)

    def unset(self, name: str | None) -> None:
        """Remove ``name`` if present; the name must be a valid identifier."""
        if name is None or not is_identifier(name):
            raise ValueError(f"not a valid identifier: {name!r}")
        self._items.pop(name, None)

    def size(self, count_null_value: bool) -> int:
        """Number of entries, counting those without a value only if asked."""
        if count_null_value:
            return len(self._items)
        return sum(1 for value in self._items.values() if value is not None)

    def environ(self) -> list[str]:
        """``NAME=VALUE`` strings for every entry that has a value."""
        return [item_string(name, value) for name, value in self if value is not None]

    def __iter__(self) -> Iterator[tuple[str, str | None]]:
        return iter(reversed(list(self._items.items())))

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __len__(self) -> int:
        return len(self._items)


def init_env(envp: Iterable[str], cwd: str | None = None) -> EnvMap:
    """Build the shell's map from ``NAME=VALUE`` strings and fill in defaults.

    Malformed entries are skipped. SHLVL, PWD and OLDPWD are set when missing;
    PWD falls back to ``cwd`` or the process's working directory.
    """
    env = EnvMap()
    for entry in envp:
        try:
            env.put(entry, False)
        except ValueError:
            continue
    if env.get("SHLVL") is None:
        env.set("SHLVL", DEFAULT_SHLVL)
    if env.get("PWD") is None:
        env.set("PWD", cwd if cwd is not None else os.getcwd())
    if env.get("OLDPWD") is None:
        env.set("OLDPWD", DEFAULT_PREVIOUS_DIR)
    return env