# src/builderflow/core/model/meta.py
"""
Metadados estáticos de um builder.

O `DataBuilderMeta` descreve um builder para o planner e para o executor:
nome, chaves consumidas e chave produzida. É imutável: o controle de
"já executou" pertence à invocação do executor, nunca ao grafo
compartilhado entre instâncias.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional


@dataclass(frozen=True)
class DataBuilderMeta:
    """
    Descrição estática de um builder.

    Campos:
        - name: identificador único do builder no grafo
        - consumes: conjunto de chaves consumidas
        - produces: chave produzida (None quando o builder não declara saída)

    Invariantes:
        - `name` é uma string não vazia
        - `consumes` é sempre um frozenset
    """

    name: str
    consumes: FrozenSet[str] = field(default_factory=frozenset)
    produces: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("builder.name must be a non-empty string")
        # aceita qualquer iterável de chaves na construção
        object.__setattr__(self, "consumes", frozenset(self.consumes or ()))

    @classmethod
    def of(cls, name: str, consumes: Iterable[str], produces: Optional[str] = None) -> "DataBuilderMeta":
        return cls(name=name, consumes=frozenset(consumes), produces=produces)

    def is_triggered_by(self, active: Iterable[str]) -> bool:
        """True se alguma chave consumida está no conjunto ativo."""
        return not self.consumes.isdisjoint(active)
