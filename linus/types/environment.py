"""Runtime environment for Linus.

The Environment is the interpreter's single symbol table: a flat mapping from
names to evaluated values. There are no nested scopes; a later `define`
of the same name replaces the earlier value.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from linus import Value
from linus.errors import LinusNameError

logger = logging.getLogger(__name__)


class Environment:
    """Flat mapping from names to Linus values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[str, Value] = {}

    def define(self, name: str, value: Value) -> None:
        """Bind `name` to `value`, replacing any existing binding."""
        logger.debug("define %s = %r", name, value)
        self.vars[name] = value

    def retrieve(self, name: str) -> Optional[Value]:
        """Return the value bound to `name`, or None when it is unbound."""
        return self.vars.get(name)

    def lookup(self, name: str) -> Value:
        """Like `retrieve`, but raises LinusNameError for an unbound name."""
        try:
            return self.vars[name]
        except KeyError:
            raise LinusNameError(f"Variable name not found: {name}") from None

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __repr__(self) -> str:
        return f"Environment({self.vars!r})"
