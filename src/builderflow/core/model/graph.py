# src/builderflow/core/model/graph.py
"""
Estruturas estáticas e de instância de um fluxo.

    - ExecutionGraph    → partição ordenada de builders em níveis topológicos
    - FlowDefinition    → grafo + chave alvo + chaves transientes
    - FlowInstance      → definição + DataSet durável entre invocações
    - ExecutionResponse → saídas produzidas em uma invocação

Invariantes:
    - Um builder do nível i depende apenas de builders de níveis < i
      ou de dados externos
    - Nomes de builder são únicos no grafo
    - O grafo é imutável após construído e pode ser compartilhado
      entre instâncias e invocações concorrentes
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Sequence, Tuple
import uuid

from .data import Data, DataSet
from .meta import DataBuilderMeta


@dataclass(frozen=True)
class ExecutionGraph:
    """Sequência ordenada de níveis; cada nível é uma tupla de metadados."""

    levels: Tuple[Tuple[DataBuilderMeta, ...], ...] = ()

    def __post_init__(self) -> None:
        levels = tuple(tuple(level) for level in (self.levels or ()))
        seen = set()
        for level in levels:
            for meta in level:
                if meta.name in seen:
                    raise ValueError(f"Duplicate builder name in graph: {meta.name}")
                seen.add(meta.name)
        object.__setattr__(self, "levels", levels)

    @classmethod
    def of(cls, levels: Sequence[Iterable[DataBuilderMeta]]) -> "ExecutionGraph":
        return cls(levels=tuple(tuple(level) for level in levels))

    def metas(self) -> List[DataBuilderMeta]:
        return [meta for level in self.levels for meta in level]

    def names(self) -> List[str]:
        return [meta.name for meta in self.metas()]

    def __iter__(self) -> Iterator[Tuple[DataBuilderMeta, ...]]:
        return iter(self.levels)

    def __len__(self) -> int:
        return len(self.levels)


@dataclass(frozen=True)
class FlowDefinition:
    """
    Definição estática de um fluxo.

    Campos:
        - name: nome do fluxo
        - graph: ExecutionGraph já nivelado
        - target: chave cuja produção (não transiente) encerra a invocação
        - transients: chaves de trabalho removidas do resultado durável

    Nota:
        Se `target` também for transiente, o encerramento por alvo nunca
        ocorre; a invocação termina apenas por ausência de progresso.
        Use `build_flow(..., strict_target=True)` para rejeitar esse caso.
    """

    name: str
    graph: ExecutionGraph
    target: Optional[str] = None
    transients: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "transients", frozenset(self.transients or ()))

    def is_transient(self, key: str) -> bool:
        return key in self.transients


@dataclass
class FlowInstance:
    """Par (FlowDefinition, DataSet durável); o DataSet é substituído a cada run bem-sucedido."""

    flow: FlowDefinition
    data_set: DataSet = field(default_factory=DataSet)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


@dataclass(frozen=True)
class ExecutionResponse:
    """Saídas produzidas em uma invocação, indexadas pelo nome do builder."""

    responses: Dict[str, Data] = field(default_factory=dict)

    def __getitem__(self, name: str) -> Data:
        return self.responses[name]

    def __contains__(self, name: object) -> bool:
        return name in self.responses

    def __len__(self) -> int:
        return len(self.responses)

    def builders(self) -> List[str]:
        return list(self.responses)

    def to_dict(self) -> Dict[str, object]:
        """Mapa builder → payload produzido."""
        return {name: data.payload for name, data in self.responses.items()}
