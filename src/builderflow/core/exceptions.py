"""
BuilderFlow — Canonical Exceptions (v1)

Este módulo define as exceções tipadas do BuilderFlow.

Objetivo:
- Permitir que builders sinalizem falhas conhecidas com payload de diagnóstico
- Encapsular qualquer falha de builder em um único erro fatal inspecionável
- Mapear exceções de forma determinística para FlowErrorPayload

Regras:
- Exceções carregam apenas dados estruturados em `details`
- Mensagens são curtas e humanas
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import (
    BUILDER_EXECUTION_ERROR,
    FLOW_DEFINITION_ERROR,
    UNKNOWN_BUILDER,
    FlowErrorPayload,
    builder_execution_error,
)


@dataclass(eq=False)
class FlowException(Exception):
    """Base class para exceções internas do BuilderFlow.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message

    @property
    def code(self) -> str:
        return self.__class__.__name__

    def to_payload(self) -> FlowErrorPayload:
        return FlowErrorPayload(
            type=self.code,
            message=self.message,
            details=dict(self.details or {}),
            hint=self.hint,
        )


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class BuilderError(FlowException):
    """Falha conhecida sinalizada por um builder; `details` é o payload de diagnóstico."""


@dataclass(eq=False)
class BuilderExecutionError(FlowException):
    """Erro fatal de uma invocação do executor.

    Cobre tanto falhas reportadas pelo builder (`structured=True`, payload
    preservado) quanto falhas inesperadas (`structured=False`, payload
    sintetizado com a mensagem da falha).

    `responses` é o snapshot das saídas produzidas na invocação antes da falha.
    """

    builder: str = ""
    structured: bool = True
    responses: Dict[str, Any] = field(default_factory=dict)

    @property
    def code(self) -> str:
        return BUILDER_EXECUTION_ERROR

    @property
    def payload(self) -> Dict[str, Any]:
        return self.details

    def to_payload(self) -> FlowErrorPayload:
        kwargs = {"hint": self.hint} if self.hint else {}
        return builder_execution_error(
            builder=self.builder,
            message=self.message,
            payload=self.details,
            structured=self.structured,
            **kwargs,
        )


# ---------------------------------------------------------------------------
# Resolução / Definição
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class UnknownBuilderError(FlowException, KeyError):
    """A factory não conhece o nome de builder solicitado."""

    @property
    def code(self) -> str:
        return UNKNOWN_BUILDER


@dataclass(eq=False)
class FlowDefinitionError(FlowException, ValueError):
    """Declaração de fluxo inválida ou inconsistente."""

    @property
    def code(self) -> str:
        return FLOW_DEFINITION_ERROR
