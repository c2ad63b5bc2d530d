"""Escaping for tokens embedded in Ninja files."""

from __future__ import annotations

import re

_SPECIAL_CHARS = re.compile(r"[ :$]")


def escape(value: str) -> str:
    """Prefix every space, colon, and dollar sign in ``value`` with ``$``.

    Escaping is explicit because callers may want Ninja variables such as
    ``$in`` to survive in paths and commands. Apply it once per raw token:
    escaping an already-escaped string doubles the inserted dollars.
    """
    return _SPECIAL_CHARS.sub(lambda match: "$" + match.group(0), value)
