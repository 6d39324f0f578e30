"""Continuation chain: the closure scopes of the active procedure calls.

Each node carries the environment captured by a closure. A node is pushed when
a procedure with a captured environment is applied and popped on return, so
the body of a closure resolves its free variables against its definition site.
This only threads scope visibility; it is not call/cc.
"""

from __future__ import annotations

from typing import Optional

from parsley.types.environment import Environment


class Cont:
    """A link in the continuation chain."""

    __slots__ = ("parent", "env")

    def __init__(self, parent: Optional[Cont] = None, env: Optional[Environment] = None):
        self.parent: Optional[Cont] = parent
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    def depth(self) -> int:
        """Number of links between this node and the root (root is 0)."""
        n = 0
        node = self.parent
        while node is not None:
            n += 1
            node = node.parent
        return n

    def __repr__(self) -> str:
        return f"<Cont depth={self.depth()} env={self.env}>"
