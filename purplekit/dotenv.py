"""Loading of ``KEY=value`` environment files."""

from __future__ import annotations

import os
from typing import Dict, Union

_WHITESPACE = " \t\n\r\f\v"
_MISSING = object()
_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", "\\": "\\", '"': '"'}


def unquote_and_unescape(value: str) -> str:
    """Strip matching quotes; in double quotes also resolve escapes."""
    if len(value) < 2 or value[0] != value[-1] or value[0] not in "'\"":
        return value
    quote = value[0]
    inner = value[1:-1]
    if quote == "'":
        return inner

    out = []
    chars = iter(inner)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, None)
        if nxt is None:
            out.append(ch)
        else:
            out.append(_ESCAPES.get(nxt, ch + nxt))
    return "".join(out)


class DotEnv:
    """Variables read from one or more dotenv files."""

    def __init__(self) -> None:
        self._vars: Dict[str, str] = {}

    def load(self, filepath: Union[str, os.PathLike]) -> None:
        """Read ``filepath``, adding or replacing its variables.

        Blank lines, ``#`` comments and lines without ``=`` are skipped.
        """
        with open(filepath, encoding="utf-8") as handle:
            for raw in handle:
                line = raw.strip(_WHITESPACE)
                if not line or line.startswith("#"):
                    continue
                key, sep, value = line.partition("=")
                if not sep:
                    continue
                self._vars[key.strip(_WHITESPACE)] = unquote_and_unescape(
                    value.strip(_WHITESPACE)
                )

    def get(self, key: str, default=_MISSING) -> str:
        """Return the value of ``key``, or ``default`` if given and absent."""
        try:
            return self._vars[key]
        except KeyError:
            if default is _MISSING:
                raise KeyError(f"Environment variable '{key}' not found.") from None
            return default

    def has(self, key: str) -> bool:
        """Return True if ``key`` was loaded."""
        return key in self._vars

    def __contains__(self, key: object) -> bool:
        return key in self._vars