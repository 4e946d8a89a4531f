# src/builderflow/core/model/registry.py
"""
Registro de builders e contrato de factory.

Este módulo define o `BuilderFactory`, o contrato que o executor consome
para resolver um nome de builder em uma instância executável, e o
`DataBuilderRegistry`, sua implementação canônica em memória.

Decisões arquiteturais:
    - Nomes desconhecidos são uma falha detectável (`UnknownBuilderError`)
    - A ordem de registro é preservada explicitamente
    - O registro não planeja nem executa builders

Invariantes:
    - Cada builder registrado possui um `meta.name` único
    - Nenhum builder inválido é aceito
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Protocol, runtime_checkable

from builderflow.core.errors import unknown_builder
from builderflow.core.exceptions import UnknownBuilderError

from .builder import DataBuilder
from .meta import DataBuilderMeta


class DuplicateBuilderNameError(ValueError):
    """
    Exceção levantada quando dois builders compartilham o mesmo nome.

    Decisões arquiteturais:
        - Nomes de builder devem ser únicos no fluxo
        - A duplicidade é tratada como erro fatal de configuração
    """


@runtime_checkable
class BuilderFactory(Protocol):
    """Resolve um nome de builder em uma instância pronta para execução."""

    def create(self, name: str) -> DataBuilder:
        ...


@dataclass
class DataBuilderRegistry:
    """
    Registro canônico de builders (implementa `BuilderFactory`).

    A mesma instância de builder é devolvida a cada `create`; builders
    devem portanto ser livres de estado entre invocações.
    """

    _builders: Dict[str, DataBuilder] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, builder: DataBuilder) -> "DataBuilderRegistry":
        meta = getattr(builder, "meta", None)
        if not isinstance(meta, DataBuilderMeta):
            raise TypeError("builder.meta must be a DataBuilderMeta")

        if meta.name in self._builders:
            raise DuplicateBuilderNameError(f"Duplicate builder name: {meta.name}")

        self._builders[meta.name] = builder
        self._order.append(meta.name)
        return self

    def create(self, name: str) -> DataBuilder:
        if name not in self._builders:
            payload = unknown_builder(name=name, known=self._order)
            raise UnknownBuilderError(payload.message, payload.details, payload.hint)
        return self._builders[name]

    def list(self) -> List[DataBuilder]:
        return [self._builders[n] for n in self._order]

    def metas(self) -> List[DataBuilderMeta]:
        return [b.meta for b in self.list()]

    def __contains__(self, name: object) -> bool:
        return name in self._builders

    def __len__(self) -> int:
        return len(self._builders)
