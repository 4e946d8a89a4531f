# src/builderflow/core/engine/executor.py
"""
Executor incremental de fluxos do BuilderFlow.

Uma invocação de `DataFlowExecutor.run`:
    1. copia o DataSet durável da instância e aplica o delta
    2. varre os níveis do grafo em gerações sucessivas, executando cada
       builder disparado (consome alguma chave ativa) e pronto (todas as
       chaves consumidas presentes)
    3. encerra quando a chave alvo é produzida ou quando uma geração não
       produz nenhuma chave nova não transiente
    4. remove as chaves transientes e grava o resultado de volta na instância

Falhas de builder abortam a invocação inteira com `BuilderExecutionError`;
o DataSet durável da instância só é substituído no final de um run
bem-sucedido. Falhas de listeners são registradas no log do contexto e
nunca alteram o resultado.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Set

from builderflow.core.errors import MESSAGE_KEY
from builderflow.core.exceptions import BuilderError, BuilderExecutionError
from builderflow.core.model.context import DataBuilderContext
from builderflow.core.model.data import Data, DataDelta
from builderflow.core.model.graph import ExecutionResponse, FlowInstance
from builderflow.core.model.listener import ExecutionListener
from builderflow.core.model.meta import DataBuilderMeta
from builderflow.core.model.registry import BuilderFactory


class DataFlowExecutor:
    """Executor canônico (THE CORE) de um FlowInstance."""

    def __init__(self, factory: BuilderFactory, *, listeners: Iterable[ExecutionListener] = ()):
        self.factory = factory
        self.listeners: List[ExecutionListener] = list(listeners)

    def register_execution_listener(self, listener: ExecutionListener) -> None:
        """Registra um listener; listeners são chamados na ordem de registro."""
        self.listeners.append(listener)

    # ------------------------------------------------------------------
    # Listeners (best-effort)
    # ------------------------------------------------------------------
    def _notify(
        self,
        ctx: DataBuilderContext,
        meta: DataBuilderMeta,
        hook: str,
        call: Callable[[ExecutionListener], None],
    ) -> None:
        for listener in self.listeners:
            try:
                call(listener)
            except Exception as e:  # noqa: BLE001
                ctx.log(
                    builder=meta.name,
                    level="ERROR",
                    message=f"Error running {hook} listener",
                    listener=listener.__class__.__name__,
                    exc_type=e.__class__.__name__,
                    exc_message=str(e),
                )

    # ------------------------------------------------------------------
    # Falhas de builder
    # ------------------------------------------------------------------
    def _builder_failure(
        self,
        meta: DataBuilderMeta,
        exc: Exception,
        responses: Dict[str, Data],
    ) -> BuilderExecutionError:
        if isinstance(exc, BuilderError):
            message = f"Error running builder: {meta.name}"
            details = dict(exc.details or {})
            structured = True
        else:
            message = f"Error running builder: {meta.name}: {exc}"
            details = {MESSAGE_KEY: str(exc)}
            structured = False

        return BuilderExecutionError(
            message,
            details,
            builder=meta.name,
            structured=structured,
            responses=dict(responses),
        )

    # ------------------------------------------------------------------
    # Execução
    # ------------------------------------------------------------------
    def run(
        self,
        instance: FlowInstance,
        delta: DataDelta,
        ctx: Optional[DataBuilderContext] = None,
    ) -> ExecutionResponse:
        """
        Avança o DataSet da instância a partir do delta.

        Args:
            instance (FlowInstance): Instância a executar; seu DataSet é
                substituído ao final de um run bem-sucedido.
            delta (DataDelta): Dados novos/alterados desta invocação.
            ctx (Optional[DataBuilderContext]): Contexto da invocação; criado
                quando omitido.

        Returns:
            ExecutionResponse: Saídas produzidas nesta invocação, por builder.

        Raises:
            BuilderExecutionError: Se algum builder falhar.
            UnknownBuilderError: Se a factory não conhecer um builder disparado.
        """
        ctx = ctx if ctx is not None else DataBuilderContext()
        flow = instance.flow
        transients = flow.transients

        data_set = instance.data_set.copy()
        data_set.merge(delta)
        ctx.data_set = data_set

        responses: Dict[str, Data] = {}
        active: Set[str] = set(delta.keys())
        newly_generated: Set[str] = set()
        fired: Set[str] = set()
        generation = 0

        while True:
            generation += 1
            for level in flow.graph.levels:
                for meta in level:
                    if meta.name in fired:
                        continue
                    if not meta.is_triggered_by(active):
                        continue

                    builder = self.factory.create(meta.name)
                    if not data_set.check_for_data(builder.meta.consumes):
                        # níveis em ordem topológica: o restante do nível também não está pronto
                        break

                    self._notify(
                        ctx, meta, "pre-execution",
                        lambda l: l.before_execute(instance, meta, delta, responses),
                    )
                    try:
                        response = builder.process(ctx)
                        if response is not None and not isinstance(response, Data):
                            raise TypeError(
                                f"Builder must return Data or None, received: {type(response).__name__}"
                            )
                        if response is not None:
                            data_set.merge(response)
                            responses[meta.name] = response
                            active.add(response.key)
                            if response.key not in transients:
                                newly_generated.add(response.key)
                    except Exception as e:  # noqa: BLE001
                        ctx.log(
                            builder=meta.name,
                            level="ERROR",
                            message=f"Error running builder: {meta.name}",
                            exc_type=e.__class__.__name__,
                        )
                        self._notify(
                            ctx, meta, "exception",
                            lambda l: l.after_exception(instance, meta, delta, responses, e),
                        )
                        raise self._builder_failure(meta, e, responses) from e

                    fired.add(meta.name)
                    ctx.log(builder=meta.name, level="INFO", message=f"Ran {meta.name}", generation=generation)
                    self._notify(
                        ctx, meta, "post-execution",
                        lambda l: l.after_execute(instance, meta, delta, responses, response),
                    )

            if flow.target is not None and flow.target in newly_generated:
                ctx.log(builder=None, level="INFO", message="Target produced, finished running flow", generation=generation)
                break
            if not newly_generated:
                ctx.log(builder=None, level="INFO", message="Nothing generated in this generation, exiting", generation=generation)
                break

            active = set(newly_generated)
            newly_generated = set()

        instance.data_set = data_set.copy(exclude=transients)
        return ExecutionResponse(responses=responses)
