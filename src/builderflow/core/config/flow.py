# src/builderflow/core/config/flow.py
"""
Construção de FlowDefinition a partir da configuração.

Formato esperado (YAML):

    engine:
      strict_target: false
    flows:
      checkout:
        target: order
        transients: [cart_total]
        builders:
          - name: price
            consumes: [cart]
            produces: cart_total
          - name: order
            consumes: [cart_total, address]
            produces: order

Os builders declarados aqui são apenas metadados; as instâncias
executáveis são resolvidas pela BuilderFactory na execução.
"""

from __future__ import annotations

from typing import Any, Dict, List

from builderflow.core.engine.planner import build_flow
from builderflow.core.model.graph import FlowDefinition
from builderflow.core.model.meta import DataBuilderMeta

from .errors import InvalidFlowConfigError


def _as_str_list(value: Any, *, where: str) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InvalidFlowConfigError(f"{where} must be a list of strings")
    return list(value)


def _meta_from_config(flow_name: str, raw: Any) -> DataBuilderMeta:
    if not isinstance(raw, dict) or not raw.get("name"):
        raise InvalidFlowConfigError(f"flows.{flow_name}.builders entries require a 'name'")
    name = raw["name"]
    produces = raw.get("produces")
    if produces is not None and not isinstance(produces, str):
        raise InvalidFlowConfigError(f"flows.{flow_name}.builders.{name}.produces must be a string")
    return DataBuilderMeta.of(
        name,
        _as_str_list(raw.get("consumes"), where=f"flows.{flow_name}.builders.{name}.consumes"),
        produces,
    )


def flow_from_config(config: Dict[str, Any], name: str) -> FlowDefinition:
    """
    Lê `flows.<name>` e constrói a FlowDefinition correspondente.

    Raises:
        InvalidFlowConfigError: Se a declaração estiver ausente ou malformada.
        FlowDefinitionError: Se `engine.strict_target` estiver ativo e o alvo for transiente.
        CycleDetectedError / DuplicateProducerError: Erros estruturais do grafo.
    """
    flows = (config or {}).get("flows") or {}
    raw = flows.get(name)
    if not isinstance(raw, dict):
        raise InvalidFlowConfigError(f"Flow not declared in config: flows.{name}")

    builders = raw.get("builders") or []
    if not isinstance(builders, list):
        raise InvalidFlowConfigError(f"flows.{name}.builders must be a list")

    engine_cfg = (config or {}).get("engine", {}) or {}
    return build_flow(
        name,
        [_meta_from_config(name, b) for b in builders],
        target=raw.get("target"),
        transients=_as_str_list(raw.get("transients"), where=f"flows.{name}.transients"),
        strict_target=bool(engine_cfg.get("strict_target", False)),
    )
