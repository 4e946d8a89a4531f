# tests/core/config/test_hashing.py
"""
Testes do hash canônico da configuração efetiva.

Invariantes:
    - Configurações equivalentes (ordem de chaves diferente) geram o mesmo hash
    - O hash é SHA-256 hexadecimal sobre JSON canônico
"""

import hashlib
import json

import pytest

from builderflow.core.config.hashing import compute_config_hash


def _canonical_json_bytes(obj: dict) -> bytes:
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def test_hash_matches_canonical_sha256():
    cfg = {"engine": {"strict_target": False}, "flows": {}}
    assert compute_config_hash(cfg) == hashlib.sha256(_canonical_json_bytes(cfg)).hexdigest()


def test_hash_ignores_key_order():
    a = {"engine": {"strict_target": True}, "flows": {"f": {"target": "x"}}}
    b = {"flows": {"f": {"target": "x"}}, "engine": {"strict_target": True}}
    assert compute_config_hash(a) == compute_config_hash(b)
    assert len(compute_config_hash(a)) == 64


def test_hash_changes_with_content():
    assert compute_config_hash({"engine": {"strict_target": True}}) != compute_config_hash(
        {"engine": {"strict_target": False}}
    )


def test_hash_rejects_non_dict():
    with pytest.raises(TypeError):
        compute_config_hash(["not", "a", "dict"])
