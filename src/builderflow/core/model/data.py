# src/builderflow/core/model/data.py
"""
Dados canônicos do BuilderFlow: Data, DataSet e DataDelta.

Este módulo define as estruturas de dados que circulam entre o executor
e os builders:

    - Data      → valor nomeado (chave + payload opaco), imutável
    - DataSet   → mapa chave → Data com merge por upsert
    - DataDelta → lote ordenado de Data fornecido pelo chamador

Política de merge (v1):
    - merge é upsert por chave (o último merge vence)
    - `copy(exclude=...)` produz um novo DataSet sem as chaves excluídas,
      sem mutar a origem

Invariantes:
    - Toda chave é uma string não vazia
    - Data nunca é alterado após criado
    - DataDelta é somente leitura para o executor

Limites explícitos:
    - Não persiste dados
    - Não interpreta payloads
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, KeysView, Optional, Tuple, Union


@dataclass(frozen=True)
class Data:
    """
    Valor nomeado produzido por um builder ou fornecido externamente.

    Campos:
        - key: identificador do dado (string não vazia)
        - payload: conteúdo opaco, não interpretado pelo executor
    """

    key: str
    payload: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key.strip():
            raise ValueError("data.key must be a non-empty string")


class DataDelta:
    """Lote ordenado de Data novos/alterados para uma invocação."""

    def __init__(self, *data: Data):
        for d in data:
            if not isinstance(d, Data):
                raise TypeError(f"DataDelta accepts only Data, received: {type(d).__name__}")
        self._delta: Tuple[Data, ...] = tuple(data)

    @classmethod
    def of(cls, data: Iterable[Data]) -> "DataDelta":
        return cls(*list(data))

    @property
    def delta(self) -> Tuple[Data, ...]:
        return self._delta

    def keys(self) -> list:
        return [d.key for d in self._delta]

    def __iter__(self) -> Iterator[Data]:
        return iter(self._delta)

    def __len__(self) -> int:
        return len(self._delta)

    def __repr__(self) -> str:
        return f"DataDelta({', '.join(self.keys())})"


MergeSource = Union[Data, DataDelta, Iterable[Data]]


class DataSet:
    """
    Mapa chave → Data utilizado como conjunto de trabalho e como estado durável.

    Decisões arquiteturais:
        - Mutação apenas via `merge`
        - Remoção de chaves apenas via cópia (`copy(exclude=...)`)
        - Data é imutável, portanto cópias rasas são suficientes

    Invariantes:
        - Chaves são únicas
        - Em conflito, o último merge vence
    """

    def __init__(self, data: Optional[Iterable[Data]] = None):
        self._data: Dict[str, Data] = {}
        if data is not None:
            self.merge(data)

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "DataSet":
        """Constrói um DataSet a partir de um mapa chave → payload."""
        return cls(Data(key, payload) for key, payload in values.items())

    # -----------------------------
    # Merge / consulta
    # -----------------------------
    def merge(self, source: MergeSource) -> "DataSet":
        items = [source] if isinstance(source, Data) else list(source)
        for d in items:
            if not isinstance(d, Data):
                raise TypeError(f"DataSet.merge expects Data, received: {type(d).__name__}")
            self._data[d.key] = d
        return self

    def check_for_data(self, keys: Iterable[str]) -> bool:
        return all(k in self._data for k in keys)

    def copy(self, exclude: Iterable[str] = ()) -> "DataSet":
        excluded = set(exclude or ())
        clone = DataSet()
        clone._data = {k: v for k, v in self._data.items() if k not in excluded}
        return clone

    def get(self, key: str, default: Optional[Data] = None) -> Optional[Data]:
        return self._data.get(key, default)

    def keys(self) -> KeysView[str]:
        return self._data.keys()

    def to_dict(self) -> Dict[str, Any]:
        """Retorna o mapa chave → payload (cópia rasa)."""
        return {k: d.payload for k, d in self._data.items()}

    # -----------------------------
    # Protocolo de mapeamento
    # -----------------------------
    def __getitem__(self, key: str) -> Data:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataSet):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"DataSet({sorted(self._data)})"
