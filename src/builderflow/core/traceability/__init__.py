# src/builderflow/core/traceability/__init__.py
"""
Pacote de rastreabilidade do BuilderFlow — ExecutionTrace v1.

API pública:
    - ExecutionTrace  → estrutura do trace
    - create_trace    → criação explícita
    - add_event       → registro explícito no Event Log
    - TracingListener → listener que preenche o trace durante a execução
    - save_trace / load_trace → persistência JSON determinística
"""

from .trace import (
    ExecutionTrace,
    TracingListener,
    add_event,
    create_trace,
    load_trace,
    save_trace,
)

__all__ = [
    "ExecutionTrace",
    "TracingListener",
    "add_event",
    "create_trace",
    "load_trace",
    "save_trace",
]
