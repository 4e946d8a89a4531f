# src/builderflow/core/config/loader.py
"""
Loader de configuração do BuilderFlow.

A configuração efetiva é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional; ignorado se não existir)

Formatos suportados: YAML (.yaml, .yml) e JSON (.json). O resultado é
sempre um dicionário puro; o override local nunca muta os defaults.

Seções reconhecidas pelo core:
    - engine.strict_target → rejeita alvo transiente na construção do fluxo
    - flows.<nome>         → declaração de fluxo (ver `config.flow`)
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union
import json

import yaml  # PyYAML

from .errors import (
    ConfigFileNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge


PathLike = Union[str, Path]


def _parse(text: str, suffix: str) -> Any:
    if suffix in {".yaml", ".yml"}:
        return yaml.safe_load(text)
    if suffix == ".json":
        return json.loads(text)
    raise UnsupportedConfigFormatError(f"Unsupported config format: {suffix}")


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Lê um arquivo de configuração e valida o tipo raiz.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        InvalidConfigRootTypeError: Se a raiz não for um dicionário.
    """
    if not path.exists():
        raise ConfigFileNotFoundError(f"Config file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise UnsupportedConfigFormatError(f"Unsupported config format: {path.suffix}")

    data = _parse(path.read_text(encoding="utf-8"), suffix)
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(f"Config root must be dict, received: {type(data).__name__}")

    return data


def load_config(*, defaults_path: PathLike, local_path: Optional[PathLike] = None) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva.

    Args:
        defaults_path: Caminho do arquivo de defaults (obrigatório).
        local_path: Caminho opcional de overrides locais.

    Returns:
        Dict[str, Any]: Configuração resolvida (defaults + local).

    Raises:
        ConfigFileNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se algum formato não for suportado.
        InvalidConfigRootTypeError: Se alguma raiz não for dicionário.
        ConfigTypeConflictError: Se ocorrer conflito de tipos no merge.
    """
    effective = _load_file(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    return effective
