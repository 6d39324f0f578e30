"""Environment-variable configuration.

PARSLEY_PRELUDE_PATH     prelude directories or files, separated by os.pathsep
PARSLEY_RECURSION_LIMIT  interpreter recursion limit applied by Context()
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Optional

PRELUDE_PATH_VAR = 'PARSLEY_PRELUDE_PATH'
RECURSION_LIMIT_VAR = 'PARSLEY_RECURSION_LIMIT'

_DEFAULT_PRELUDE_DIRS = [Path(__file__).resolve().parent / 'prelude']


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var, '').strip()
    if not raw:
        return list(defaults)
    return [Path(p.strip()).expanduser() for p in raw.split(os.pathsep) if p.strip()]


def int_from_env(var: str) -> Optional[int]:
    raw = os.environ.get(var, '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_prelude_roots() -> List[Path]:
    return paths_from_env(PRELUDE_PATH_VAR, _DEFAULT_PRELUDE_DIRS)


def get_recursion_limit() -> Optional[int]:
    """The requested recursion limit, or None when unset or not positive."""
    limit = int_from_env(RECURSION_LIMIT_VAR)
    return limit if limit is not None and limit > 0 else None
