# src/builderflow/core/config/hashing.py
"""
Hash canônico da configuração efetiva.

Serialização JSON com chaves ordenadas, separadores compactos e UTF-8,
seguida de SHA-256. Configurações estruturalmente equivalentes produzem
o mesmo hash; o valor é registrado no ExecutionTrace.
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera o hash SHA-256 (hex, 64 caracteres) da configuração.

    Raises:
        TypeError: Se `config` não for um dicionário.
    """
    if not isinstance(config, dict):
        raise TypeError(f"Config to hash must be dict, received: {type(config).__name__}")

    canonical = json.dumps(config, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
