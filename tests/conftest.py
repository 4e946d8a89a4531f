# tests/conftest.py
"""
Fixtures compartilhados para testes do BuilderFlow.

Este módulo define fixtures reutilizáveis que fornecem:
- contexto de invocação determinístico (DataBuilderContext)
- builders dummy com registro de chamadas
- configuração mínima em YAML para testes do loader

Decisões arquiteturais:
    - Builders dummy utilizam duck typing em vez de herança
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture executa fluxo real
    - Nenhuma fixture realiza I/O
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """YAML de defaults semelhante ao uso real: engine + um fluxo declarado."""
    return """\
engine:
  strict_target: false
flows:
  checkout:
    target: order
    transients: [cart_total]
    builders:
      - name: price
        consumes: [cart]
        produces: cart_total
      - name: order
        consumes: [cart_total, address]
        produces: order
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """YAML de override local: liga a validação estrita do alvo."""
    return """\
engine:
  strict_target: true
"""


# =====================================================
# Context + builder fixtures
# =====================================================

@pytest.fixture
def dummy_ctx():
    """
    DataBuilderContext com identidade fixa.

    Invariantes:
        - `run_id` e `created_at` são fixos
        - O contexto inicia sem eventos
    """
    from builderflow.core.model.context import DataBuilderContext

    return DataBuilderContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config={"engine": {"strict_target": False}},
    )


@pytest.fixture
def DummyBuilder():
    """
    Fixture factory que fornece uma classe de builder duck-typed.

    A implementação retornada:
    - expõe `meta` (DataBuilderMeta)
    - em `process`, registra a chamada em `calls` e produz
      `Data(produces, "<name>(<payloads consumidos>)")`
    - com `output=None`, não produz saída
    - com `fail=<exceção>`, levanta a exceção

    Limites explícitos:
        - Não representa lógica de domínio real
    """
    from builderflow.core.model.data import Data
    from builderflow.core.model.meta import DataBuilderMeta

    _unset = object()

    class _DummyBuilder:
        def __init__(self, name, consumes=(), produces=None, *, output=_unset, fail=None):
            self.meta = DataBuilderMeta.of(name, consumes, produces)
            self.output = output
            self.fail = fail
            self.calls = []

        def process(self, ctx):
            self.calls.append(sorted(ctx.data_set.keys()))
            if self.fail is not None:
                raise self.fail
            if self.output is not _unset:
                return self.output
            inputs = ",".join(str(ctx.get(k)) for k in sorted(self.meta.consumes))
            return Data(self.meta.produces, f"{self.meta.name}({inputs})")

    return _DummyBuilder


@pytest.fixture
def registry_of():
    """Retorna uma função que monta um DataBuilderRegistry a partir de builders."""
    from builderflow.core.model.registry import DataBuilderRegistry

    def _make(*builders):
        registry = DataBuilderRegistry()
        for b in builders:
            registry.add(b)
        return registry

    return _make
