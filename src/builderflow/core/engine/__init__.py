# src/builderflow/core/engine/__init__.py
"""
Engine do BuilderFlow.

Este pacote contém o nivelamento do grafo de builders e o executor
incremental que avança um FlowInstance a partir de um DataDelta.

Componentes principais:
    - planner  → nivelamento determinístico e validações estruturais
    - executor → varredura por gerações, disparo incremental e terminação

Invariantes:
    - Builders só executam com todas as chaves consumidas presentes
    - Cada builder executa no máximo uma vez por invocação
    - O DataSet durável só muda ao final de uma invocação bem-sucedida
"""

from .executor import DataFlowExecutor
from .planner import CycleDetectedError, DuplicateProducerError, build_flow, plan_levels

__all__ = [
    "DataFlowExecutor",
    "CycleDetectedError",
    "DuplicateProducerError",
    "build_flow",
    "plan_levels",
]
