# src/builderflow/core/engine/planner.py
"""
Planejador de níveis do grafo de builders.

Este módulo valida um conjunto de `DataBuilderMeta` e produz um
`ExecutionGraph` nivelado a partir das chaves consumidas e produzidas.

Regra de nivelamento:
    - chaves que nenhum builder produz são entrada externa
    - o nível de um builder é 1 + o nível mais profundo entre os
      produtores das chaves que ele consome (0 se não houver produtor)

Decisões arquiteturais:
    - Variação do algoritmo de Kahn por camadas
    - Empates dentro de um nível são resolvidos pela ordem lexicográfica
      do nome do builder
    - Erros estruturais são tratados como falhas fatais

Invariantes:
    - Todos os builders aparecem exatamente uma vez no grafo
    - Um builder nunca aparece antes dos produtores de seus insumos
    - A mesma entrada sempre produz o mesmo grafo

Limites explícitos:
    - Não executa builders
    - O executor aceita qualquer grafo já nivelado; este módulo é opcional
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set

from builderflow.core.errors import flow_definition_error
from builderflow.core.exceptions import FlowDefinitionError
from builderflow.core.model.graph import ExecutionGraph, FlowDefinition
from builderflow.core.model.meta import DataBuilderMeta
from builderflow.core.model.registry import DuplicateBuilderNameError


class DuplicateProducerError(ValueError):
    """Dois builders declaram a mesma chave produzida."""


class CycleDetectedError(ValueError):
    """
    Exceção levantada quando as dependências entre builders formam um ciclo.

    Invariantes:
        - Nenhum grafo parcial é produzido em presença de ciclos
    """


def plan_levels(metas: Iterable[DataBuilderMeta]) -> ExecutionGraph:
    """
    Valida e nivela um conjunto de builders em um ExecutionGraph.

    Args:
        metas (Iterable[DataBuilderMeta]): Metadados dos builders do fluxo.

    Returns:
        ExecutionGraph: Níveis em ordem topológica determinística.

    Raises:
        ValueError: Se algum meta possuir nome inválido.
        DuplicateBuilderNameError: Se dois builders compartilharem o nome.
        DuplicateProducerError: Se duas chaves de saída colidirem.
        CycleDetectedError: Se houver ciclo entre builders.
    """
    by_name: Dict[str, DataBuilderMeta] = {}
    for m in metas:
        name = getattr(m, "name", None)
        if not isinstance(name, str) or not name.strip():
            raise ValueError("builder.name must be a non-empty string")
        if name in by_name:
            raise DuplicateBuilderNameError(f"Duplicate builder name: {name}")
        by_name[name] = m

    producer: Dict[str, str] = {}
    for name, m in by_name.items():
        if m.produces is None:
            continue
        if m.produces in producer:
            raise DuplicateProducerError(
                f"Key '{m.produces}' produced by both '{producer[m.produces]}' and '{name}'"
            )
        producer[m.produces] = name

    # builder -> builders dos quais depende (produtores dos insumos)
    deps: Dict[str, Set[str]] = {
        name: {producer[k] for k in m.consumes if k in producer and producer[k] != name}
        for name, m in by_name.items()
    }
    for name, m in by_name.items():
        if m.produces is not None and m.produces in m.consumes:
            raise CycleDetectedError(f"Builder '{name}' consumes its own output '{m.produces}'")

    incoming_count: Dict[str, int] = {name: len(d) for name, d in deps.items()}
    outgoing: Dict[str, Set[str]] = {name: set() for name in by_name}
    for name, d in deps.items():
        for dep in d:
            outgoing[dep].add(name)

    levels: List[List[DataBuilderMeta]] = []
    ready: List[str] = sorted(name for name, c in incoming_count.items() if c == 0)
    placed = 0
    while ready:
        levels.append([by_name[name] for name in ready])
        placed += len(ready)
        next_ready: List[str] = []
        for name in ready:
            for child in outgoing[name]:
                incoming_count[child] -= 1
                if incoming_count[child] == 0:
                    next_ready.append(child)
        ready = sorted(next_ready)

    if placed != len(by_name):
        stuck = sorted(name for name, c in incoming_count.items() if c > 0)
        raise CycleDetectedError(f"Cycle detected among builders: {', '.join(stuck)}")

    return ExecutionGraph.of(levels)


def build_flow(
    name: str,
    metas: Iterable[DataBuilderMeta],
    *,
    target: Optional[str],
    transients: Iterable[str] = (),
    strict_target: bool = False,
) -> FlowDefinition:
    """
    Constrói uma FlowDefinition a partir dos metadados dos builders.

    Com `strict_target=True`, um alvo declarado transiente é rejeitado:
    sua produção nunca encerraria a invocação pelo ramo de sucesso.
    """
    transient_keys = frozenset(transients or ())
    if strict_target and target is not None and target in transient_keys:
        payload = flow_definition_error(
            message=f"Target key '{target}' must not be transient",
            details={"flow": name, "target": target, "transients": sorted(transient_keys)},
        )
        raise FlowDefinitionError(payload.message, payload.details, payload.hint)

    return FlowDefinition(
        name=name,
        graph=plan_levels(metas),
        target=target,
        transients=transient_keys,
    )
