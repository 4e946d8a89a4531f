# src/builderflow/core/model/__init__.py
"""
# Model Core — BuilderFlow

Este pacote define os **contratos canônicos** e as **estruturas
fundamentais** consumidas pelo executor.

## Componentes

- **data**: `Data`, `DataSet`, `DataDelta`
- **meta**: `DataBuilderMeta` (descrição estática, imutável)
- **builder**: `DataBuilder` (Protocol) e `FunctionDataBuilder`
- **context**: `DataBuilderContext` (conjunto de trabalho + log estruturado)
- **registry**: `BuilderFactory` (Protocol) e `DataBuilderRegistry`
- **graph**: `ExecutionGraph`, `FlowDefinition`, `FlowInstance`, `ExecutionResponse`
- **listener**: `ExecutionListener` (Protocol)

## Princípios Fundamentais

- Builders **não conhecem** o executor nem o planner
- Builders **não mutam** o conjunto de trabalho
- Nenhum estado de execução é guardado no grafo compartilhado
"""

from .data import Data, DataDelta, DataSet
from .meta import DataBuilderMeta
from .builder import DataBuilder, FunctionDataBuilder
from .context import DataBuilderContext
from .registry import BuilderFactory, DataBuilderRegistry, DuplicateBuilderNameError
from .graph import ExecutionGraph, ExecutionResponse, FlowDefinition, FlowInstance
from .listener import ExecutionListener, NoOpExecutionListener

__all__ = [
    "Data",
    "DataDelta",
    "DataSet",
    "DataBuilderMeta",
    "DataBuilder",
    "FunctionDataBuilder",
    "DataBuilderContext",
    "BuilderFactory",
    "DataBuilderRegistry",
    "DuplicateBuilderNameError",
    "ExecutionGraph",
    "ExecutionResponse",
    "FlowDefinition",
    "FlowInstance",
    "ExecutionListener",
    "NoOpExecutionListener",
]
