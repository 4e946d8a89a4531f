# src/builderflow/core/traceability/trace.py
"""
ExecutionTrace v1 — rastreabilidade de invocações do executor.

Este módulo define o registro forense de uma ou mais invocações:
    - metadados da execução (flow, instância, hash de configuração)
    - estado incremental de cada builder (running / finished / failed)
    - Event Log ordenado de eventos explícitos

O `TracingListener` implementa os três hooks de ExecutionListener e
preenche o trace; como todo listener, é best-effort e nunca altera o
resultado da execução.

Decisões arquiteturais:
    - UTC é o timezone canônico para todos os timestamps
    - O formato de persistência é JSON determinístico (chaves ordenadas)
    - Payloads de Data não são copiados para o trace, apenas chaves

Invariantes:
    - `events` é sempre uma lista na ordem real de chamada
    - `builders` é sempre um dicionário indexado pelo nome do builder
    - `from_dict(to_dict())` reconstrói um trace equivalente
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from builderflow.core.exceptions import FlowException


def _ensure_tzaware_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _iso(dt: datetime) -> str:
    return _ensure_tzaware_utc(dt).isoformat()


def _ms_between(start: datetime, end: datetime) -> int:
    """Duração em milissegundos, nunca negativa."""
    s = _ensure_tzaware_utc(start)
    e = _ensure_tzaware_utc(end)
    return max(0, int((e - s).total_seconds() * 1000))


@dataclass
class ExecutionTrace:
    """
    Registro de rastreabilidade de execuções.

    Campos:
        - run: metadados (flow, instance_id, started_at, config_hash)
        - builders: estado incremental por builder
        - events: Event Log ordenado
    """

    run: Dict[str, Any]
    builders: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "run": dict(self.run),
            "builders": {k: dict(v) for k, v in self.builders.items()},
            "events": [dict(e) for e in self.events],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExecutionTrace":
        return cls(
            run=dict(data.get("run", {})),
            builders={k: dict(v) for k, v in (data.get("builders", {}) or {}).items()},
            events=[dict(e) for e in (data.get("events", []) or [])],
        )

    def event_types(self) -> List[str]:
        return [e["event_type"] for e in self.events]


def create_trace(
    *,
    flow: str,
    started_at: datetime,
    instance_id: Optional[str] = None,
    config_hash: Optional[str] = None,
) -> ExecutionTrace:
    """Cria um trace vazio; nenhum evento é emitido implicitamente."""
    return ExecutionTrace(
        run={
            "flow": flow,
            "instance_id": instance_id,
            "started_at": _iso(started_at),
            "config_hash": config_hash,
        },
    )


def add_event(
    trace: ExecutionTrace,
    *,
    event_type: str,
    ts: datetime,
    builder: Optional[str] = None,
    payload: Optional[Dict[str, Any]] = None,
) -> None:
    ev: Dict[str, Any] = {"event_type": event_type, "timestamp": _iso(ts)}
    if builder is not None:
        ev["builder"] = builder
    if payload is not None:
        ev["payload"] = payload
    trace.events.append(ev)


def save_trace(trace: ExecutionTrace, path: Union[str, Path]) -> None:
    """Persiste o trace em JSON determinístico (UTF-8, chaves ordenadas)."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(
        json.dumps(trace.to_dict(), ensure_ascii=False, indent=2, sort_keys=True, default=str),
        encoding="utf-8",
    )


def load_trace(path: Union[str, Path]) -> ExecutionTrace:
    p = Path(path)
    return ExecutionTrace.from_dict(json.loads(p.read_text(encoding="utf-8")))


class TracingListener:
    """
    ExecutionListener que registra a execução de cada builder em um ExecutionTrace.

    Eventos emitidos:
        - builder_started  → antes de `process`
        - builder_finished → após `process` (com a chave produzida, se houver)
        - builder_failed   → quando `process` falha (classe e mensagem da exceção)
    """

    def __init__(self, trace: ExecutionTrace, *, clock: Optional[Callable[[], datetime]] = None):
        self.trace = trace
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._started: Dict[str, datetime] = {}

    def before_execute(self, instance, meta, delta, responses) -> None:
        ts = self._clock()
        self._started[meta.name] = ts
        self.trace.builders[meta.name] = {
            "status": "running",
            "started_at": _iso(ts),
            "consumes": sorted(meta.consumes),
        }
        add_event(self.trace, event_type="builder_started", ts=ts, builder=meta.name)

    def after_execute(self, instance, meta, delta, responses, result) -> None:
        ts = self._clock()
        produced = result.key if result is not None else None
        state = self.trace.builders.setdefault(meta.name, {})
        state.update(
            {
                "status": "finished",
                "finished_at": _iso(ts),
                "duration_ms": _ms_between(self._started.pop(meta.name, ts), ts),
                "produced": produced,
            }
        )
        add_event(
            self.trace,
            event_type="builder_finished",
            ts=ts,
            builder=meta.name,
            payload={"produced": produced},
        )

    def after_exception(self, instance, meta, delta, responses, error) -> None:
        ts = self._clock()
        error_info: Dict[str, Any] = {
            "exc_type": error.__class__.__name__,
            "message": str(error),
        }
        if isinstance(error, FlowException):
            error_info["details"] = dict(error.details or {})

        state = self.trace.builders.setdefault(meta.name, {})
        state.update(
            {
                "status": "failed",
                "failed_at": _iso(ts),
                "duration_ms": _ms_between(self._started.pop(meta.name, ts), ts),
                "error": error_info,
            }
        )
        add_event(self.trace, event_type="builder_failed", ts=ts, builder=meta.name, payload=error_info)
