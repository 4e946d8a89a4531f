# src/builderflow/core/config/merge.py
"""
Deep-merge determinístico de configuração.

Política (v1):
    - dict + dict → merge recursivo por chave
    - list        → sobrescrita total
    - escalar     → sobrescrita direta
    - tipos diferentes → ConfigTypeConflictError

Nenhum input é mutado.
"""

from copy import deepcopy
from typing import Any, Dict, Tuple

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any], _path: Tuple[str, ...] = ()) -> Dict[str, Any]:
    """
    Combina `override` sobre `base`, retornando um novo dicionário.

    Raises:
        ConfigTypeConflictError: Se uma mesma chave tiver tipos incompatíveis.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"deep_merge requires dicts, received: {type(base).__name__} vs {type(override).__name__}"
        )

    merged: Dict[str, Any] = deepcopy(base)
    for key, value in override.items():
        path = _path + (str(key),)
        if key not in merged:
            merged[key] = deepcopy(value)
            continue

        current = merged[key]
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value, path)
        elif isinstance(value, list) or current is None or value is None:
            merged[key] = deepcopy(value)
        elif type(current) is not type(value):
            raise ConfigTypeConflictError(
                f"Type conflict at '{'.'.join(path)}': {type(current).__name__} vs {type(value).__name__}"
            )
        else:
            merged[key] = deepcopy(value)

    return merged
