# src/builderflow/__init__.py
"""
BuilderFlow — executor incremental de grafos de builders.

Dado um grafo estático de builders (unidades de cálculo que consomem
chaves e produzem um Data) e um lote de dados novos, o executor decide
quais builders estão aptos, executa-os em ordem de dependência,
realimenta suas saídas no conjunto de dados e repete até produzir a
chave alvo ou até não haver mais progresso.

Arquitetura em alto nível:
    - core.model        → dados, metadados, contratos de builder/factory/listener
    - core.engine       → planner (níveis) e DataFlowExecutor
    - core.config       → configuração YAML/JSON e declaração de fluxos
    - core.traceability → ExecutionTrace e TracingListener

Limites explícitos:
    - Sem execução distribuída, retries ou checkpoints intermediários
    - Persistência do FlowInstance é responsabilidade do chamador
"""

from .core.errors import FlowErrorPayload
from .core.exceptions import (
    BuilderError,
    BuilderExecutionError,
    FlowDefinitionError,
    FlowException,
    UnknownBuilderError,
)
from .core.model import (
    Data,
    DataBuilder,
    DataBuilderContext,
    DataBuilderMeta,
    DataBuilderRegistry,
    DataDelta,
    DataSet,
    ExecutionGraph,
    ExecutionListener,
    ExecutionResponse,
    FlowDefinition,
    FlowInstance,
    FunctionDataBuilder,
)
from .core.engine import DataFlowExecutor, build_flow, plan_levels

__version__ = "0.1.0"

__all__ = [
    "BuilderError",
    "BuilderExecutionError",
    "Data",
    "DataBuilder",
    "DataBuilderContext",
    "DataBuilderMeta",
    "DataBuilderRegistry",
    "DataDelta",
    "DataFlowExecutor",
    "DataSet",
    "ExecutionGraph",
    "ExecutionListener",
    "ExecutionResponse",
    "FlowDefinition",
    "FlowDefinitionError",
    "FlowErrorPayload",
    "FlowException",
    "FlowInstance",
    "FunctionDataBuilder",
    "UnknownBuilderError",
    "build_flow",
    "plan_levels",
]
