from __future__ import annotations
import os
from typing import Iterable, List


# Defaults
_DEFAULT_BUILTIN_GROUPS = ['math']
_DISABLED = {'', 'none'}


def list_from_env(var: str, defaults: Iterable[str]) -> List[str]:
    raw = os.environ.get(var)
    if raw is None:
        return list(defaults)
    if raw.strip().lower() in _DISABLED:
        return []
    return [p.strip() for p in raw.split(',') if p.strip()]


def get_builtin_groups() -> List[str]:
    """Builtin groups the front ends register after building an Expression."""
    return list_from_env('MEXPR_BUILTINS', _DEFAULT_BUILTIN_GROUPS)
