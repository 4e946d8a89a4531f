# tests/core/model/test_registry_unique_builder_name.py
"""
Testes do DataBuilderRegistry (BuilderFactory canônica).

Os testes asseguram que:
- nomes duplicados são rejeitados no registro
- a ordem de registro é preservada
- nomes desconhecidos são uma falha detectável
"""

import pytest

from builderflow.core.exceptions import UnknownBuilderError
from builderflow.core.model.registry import (
    BuilderFactory,
    DataBuilderRegistry,
    DuplicateBuilderNameError,
)


def test_registry_rejects_duplicate_names(DummyBuilder):
    reg = DataBuilderRegistry()
    reg.add(DummyBuilder("a", {"x"}, "y"))
    with pytest.raises(DuplicateBuilderNameError):
        reg.add(DummyBuilder("a", {"x"}, "z"))


def test_registry_preserves_order(DummyBuilder):
    reg = DataBuilderRegistry()
    reg.add(DummyBuilder("b", {"x"}, "y")).add(DummyBuilder("a", {"x"}, "z"))

    assert [m.name for m in reg.metas()] == ["b", "a"]
    assert "a" in reg
    assert len(reg) == 2


def test_create_returns_registered_builder(DummyBuilder):
    builder = DummyBuilder("a", {"x"}, "y")
    reg = DataBuilderRegistry().add(builder)
    assert reg.create("a") is builder
    assert isinstance(reg, BuilderFactory)
    assert not hasattr(reg, "get")


def test_unknown_name_raises(DummyBuilder):
    reg = DataBuilderRegistry().add(DummyBuilder("known", {"x"}, "y"))

    with pytest.raises(UnknownBuilderError) as exc_info:
        reg.create("missing")

    assert exc_info.value.details == {"name": "missing", "known": ["known"]}
    assert str(exc_info.value) == "Unknown builder: missing"
    assert isinstance(exc_info.value, KeyError)


def test_registry_requires_builder_meta():
    class _NoMeta:
        def process(self, ctx):
            return None

    with pytest.raises(TypeError):
        DataBuilderRegistry().add(_NoMeta())
