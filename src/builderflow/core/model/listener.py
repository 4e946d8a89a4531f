# src/builderflow/core/model/listener.py
"""
Contrato de observadores de execução.

Um `ExecutionListener` recebe notificações do executor antes de cada
builder, depois de cada builder (com a saída, possivelmente None) e em
caso de falha (com a exceção). Listeners são invocados na ordem de
registro; qualquer exceção levantada por um listener é registrada no log
do contexto e descartada pelo executor, sem alterar o resultado.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional, Protocol, runtime_checkable

from .data import Data, DataDelta
from .meta import DataBuilderMeta

if TYPE_CHECKING:
    from .graph import FlowInstance


@runtime_checkable
class ExecutionListener(Protocol):

    def before_execute(
        self,
        instance: "FlowInstance",
        meta: DataBuilderMeta,
        delta: DataDelta,
        responses: Dict[str, Data],
    ) -> None:
        ...

    def after_execute(
        self,
        instance: "FlowInstance",
        meta: DataBuilderMeta,
        delta: DataDelta,
        responses: Dict[str, Data],
        result: Optional[Data],
    ) -> None:
        ...

    def after_exception(
        self,
        instance: "FlowInstance",
        meta: DataBuilderMeta,
        delta: DataDelta,
        responses: Dict[str, Data],
        error: BaseException,
    ) -> None:
        ...


class NoOpExecutionListener:
    """Base conveniente: implementa os três hooks sem efeito."""

    def before_execute(self, instance, meta, delta, responses) -> None:
        return None

    def after_execute(self, instance, meta, delta, responses, result) -> None:
        return None

    def after_exception(self, instance, meta, delta, responses, error) -> None:
        return None
