# src/builderflow/core/model/context.py
"""
Contexto de execução de uma invocação do executor.

Este módulo define o `DataBuilderContext`, a estrutura passada a todos
os builders durante uma invocação de `DataFlowExecutor.run`.

O contexto atua como o único meio permitido de:
    - leitura do conjunto de trabalho (DataSet privado da invocação)
    - troca de valores auxiliares por chave explícita (context data)
    - registro de logs estruturados de execução

Princípios fundamentais:
    - Isolamento por invocação (cada run possui seu próprio contexto)
    - Builders não mutam o conjunto de trabalho; o executor faz todos os merges
    - Logs são eventos estruturados, não texto livre

Invariantes:
    - Logs sempre incluem `run_id` e `builder`
    - `data_set` é ligado pelo executor no início da invocação

Limites explícitos:
    - Não executa builders
    - Não decide terminação
    - Não persiste dados automaticamente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import uuid

from .data import DataSet


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class DataBuilderContext:
    """
    Contexto compartilhado de uma invocação.

    Campos canônicos:
    - run_id: identificador único da invocação
    - created_at: timestamp UTC de criação do contexto
    - config: configuração efetiva (defaults + local deep-merge)
    - data_set: conjunto de trabalho privado da invocação
    - events: log estruturado de eventos
    - _values: valores auxiliares por chave (key -> value)
    """

    run_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=_utcnow)
    config: Dict[str, Any] = field(default_factory=dict)
    data_set: DataSet = field(default_factory=DataSet)

    events: List[Dict[str, Any]] = field(default_factory=list)
    _values: Dict[str, Any] = field(default_factory=dict, repr=False)

    # -----------------------------
    # Conjunto de trabalho
    # -----------------------------
    def get(self, key: str, default: Any = None) -> Any:
        """Retorna o payload de `key` no conjunto de trabalho."""
        data = self.data_set.get(key)
        if data is None:
            return default
        return data.payload

    def require(self, key: str) -> Any:
        if key not in self.data_set:
            raise KeyError(key)
        return self.data_set[key].payload

    # -----------------------------
    # Context data
    # -----------------------------
    def set_value(self, key: str, value: Any) -> None:
        self._values[key] = value

    def has_value(self, key: str) -> bool:
        return key in self._values

    def get_value(self, key: str) -> Any:
        if key not in self._values:
            raise KeyError(key)
        return self._values[key]

    # -----------------------------
    # Logging
    # -----------------------------
    def log(self, *, builder: Optional[str], level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "builder": builder,
            "level": level,
            "message": message,
            "timestamp": _utcnow().isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def events_at(self, level: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["level"] == level]
