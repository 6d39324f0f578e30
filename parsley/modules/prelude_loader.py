from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, List

from parsley.config import get_prelude_roots
from parsley.types.environment import Environment

if TYPE_CHECKING:
    from parsley.context import Context

logger = logging.getLogger(__name__)


def prelude_files() -> List[Path]:
    """Every .scm file under the prelude roots, root by root, sorted by name."""
    files: List[Path] = []
    for root in get_prelude_roots():
        if root.is_file():
            files.append(root)
        elif root.is_dir():
            files.extend(sorted(root.glob('*.scm')))
        else:
            logger.debug("Prelude root %s does not exist", root)
    return files


def load_prelude(ctx: Context) -> None:
    """Evaluate the prelude files and promote their definitions into `lang`.

    Prelude definitions then behave like library procedures: user code can
    override them, and clearing the user scopes does not remove them.
    """
    for path in prelude_files():
        ctx.load(path)
    promote_globals(ctx)


def promote_globals(ctx: Context) -> None:
    """Move every global user definition into the context's `lang` environment."""
    global_frame = ctx.user[0]
    for name in list(global_frame):
        ctx.lang.insert(name, global_frame.get(name))
    logger.debug("Promoted %d prelude definitions", len(global_frame))
    ctx.user[0] = Environment()
