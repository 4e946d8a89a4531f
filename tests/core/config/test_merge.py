# tests/core/config/test_merge.py
"""
Testes da política de deep-merge de configuração.

Os testes asseguram que:
- dicts são mesclados recursivamente
- listas são sobrescritas integralmente
- conflitos de tipo são erro explícito
- nenhum input é mutado
"""

import pytest

from builderflow.core.config.errors import ConfigTypeConflictError
from builderflow.core.config.merge import deep_merge


def test_nested_dicts_merge_recursively():
    base = {"engine": {"strict_target": False}, "flows": {"a": {"target": "x"}}}
    override = {"flows": {"a": {"transients": ["t"]}, "b": {"target": "y"}}}

    merged = deep_merge(base, override)

    assert merged == {
        "engine": {"strict_target": False},
        "flows": {"a": {"target": "x", "transients": ["t"]}, "b": {"target": "y"}},
    }


def test_lists_are_replaced():
    merged = deep_merge({"flows": {"a": {"transients": ["t1", "t2"]}}}, {"flows": {"a": {"transients": ["t3"]}}})
    assert merged["flows"]["a"]["transients"] == ["t3"]


def test_inputs_are_not_mutated():
    base = {"engine": {"strict_target": False}}
    override = {"engine": {"strict_target": True}}

    deep_merge(base, override)

    assert base == {"engine": {"strict_target": False}}
    assert override == {"engine": {"strict_target": True}}


def test_type_conflict_raises_with_path():
    with pytest.raises(ConfigTypeConflictError) as exc_info:
        deep_merge({"engine": {"strict_target": False}}, {"engine": {"strict_target": "yes"}})
    assert "engine.strict_target" in str(exc_info.value)


def test_null_values_override_without_conflict():
    assert deep_merge({"flows": None}, {"flows": {"a": {}}}) == {"flows": {"a": {}}}
    assert deep_merge({"engine": {"x": 1}}, {"engine": None}) == {"engine": None}
