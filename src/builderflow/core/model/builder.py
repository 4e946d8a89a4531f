# src/builderflow/core/model/builder.py
"""
Contrato canônico de builder do BuilderFlow.

Um builder é a menor unidade executável de um fluxo: consome um conjunto
fixo de chaves e pode produzir um único Data.

Responsabilidades de um builder:
    - expor seus metadados estáticos (`meta`)
    - calcular sua saída lendo exclusivamente o DataBuilderContext
    - sinalizar falhas conhecidas via `BuilderError`

Princípios fundamentais:
    - Builders não conhecem o executor nem o planner
    - Builders não mutam o conjunto de trabalho
    - Conformidade é garantida por duck typing (@runtime_checkable)

Limites explícitos:
    - Não contém lógica de ordenação ou terminação
    - Não registra eventos de rastreabilidade
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from .context import DataBuilderContext
from .data import Data
from .meta import DataBuilderMeta


@runtime_checkable
class DataBuilder(Protocol):
    """
    Contrato mínimo de um builder.

    Atributos obrigatórios:
        - meta: DataBuilderMeta com nome e chaves consumidas

    Invariantes:
        - `process` retorna um Data ou None ("sem saída nesta rodada")
        - `process` não muta `ctx.data_set`
    """

    meta: DataBuilderMeta

    def process(self, ctx: DataBuilderContext) -> Optional[Data]:
        """Calcula a saída do builder a partir do contexto."""
        ...


@dataclass
class FunctionDataBuilder:
    """
    Adapter que transforma uma função simples em builder.

    A função recebe o contexto e pode retornar:
        - None → sem saída
        - Data → usado como está
        - qualquer outro valor → encapsulado em `Data(meta.produces, valor)`
    """

    meta: DataBuilderMeta
    fn: Callable[[DataBuilderContext], Any]

    def process(self, ctx: DataBuilderContext) -> Optional[Data]:
        result = self.fn(ctx)
        if result is None or isinstance(result, Data):
            return result
        if self.meta.produces is None:
            raise TypeError(
                f"Builder '{self.meta.name}' returned a payload but declares no produced key"
            )
        return Data(self.meta.produces, result)
