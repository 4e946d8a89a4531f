"""
BuilderFlow — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do BuilderFlow.
Erros são artefatos do contrato operacional do executor e devem ser:

- explícitos
- serializáveis
- inspecionáveis pelo chamador

As duas falhas fatais de uma invocação (falha reportada pelo builder e falha
inesperada) compartilham o mesmo payload, distinguidas por `details["structured"]`.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FlowErrorPayload:
    """
    Payload canônico de erro do BuilderFlow.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta e objetiva
    - details: payload de diagnóstico (mapa str -> valor)
    - hint: ação sugerida ao operador
    """

    type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Execução de builders
BUILDER_EXECUTION_ERROR = "BUILDER_EXECUTION_ERROR"

# Resolução de builders
UNKNOWN_BUILDER = "UNKNOWN_BUILDER"

# Definição do fluxo
FLOW_DEFINITION_ERROR = "FLOW_DEFINITION_ERROR"

# Chave do payload sintetizado para falhas não estruturadas
MESSAGE_KEY = "MESSAGE"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def builder_execution_error(
    *,
    builder: str,
    message: str,
    payload: Optional[Dict[str, Any]] = None,
    structured: bool = True,
    hint: str = "Corrija a entrada ou o builder e reexecute o fluxo. Nenhum retry é aplicado automaticamente.",
) -> FlowErrorPayload:
    details: Dict[str, Any] = dict(payload or {})
    details.setdefault("builder", builder)
    details.setdefault("structured", structured)
    return FlowErrorPayload(
        type=BUILDER_EXECUTION_ERROR,
        message=message,
        details=details,
        hint=hint,
    )


def unknown_builder(
    *,
    name: str,
    known: Optional[list] = None,
    hint: str = "Registre o builder na factory antes de executar o fluxo.",
) -> FlowErrorPayload:
    return FlowErrorPayload(
        type=UNKNOWN_BUILDER,
        message=f"Unknown builder: {name}",
        details={"name": name, "known": sorted(known or [])},
        hint=hint,
    )


def flow_definition_error(
    *,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    hint: str = "Revise a declaração do fluxo (target, transients e builders).",
) -> FlowErrorPayload:
    return FlowErrorPayload(
        type=FLOW_DEFINITION_ERROR,
        message=message,
        details=dict(details or {}),
        hint=hint,
    )
