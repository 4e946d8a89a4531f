# src/builderflow/core/config/errors.py
"""
Exceções da camada de configuração do BuilderFlow.

Todas herdam de `ConfigError`, permitindo captura genérica de falhas
de carregamento, merge e leitura de declarações de fluxo.
"""


class ConfigError(Exception):
    """Exceção base para erros de configuração."""


class ConfigFileNotFoundError(ConfigError):
    """O arquivo de configuração base (defaults) não existe."""


class UnsupportedConfigFormatError(ConfigError):
    """
    Extensão de arquivo não suportada.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz da configuração não é um dicionário."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo:
        - base:     {"engine": {"strict_target": true}}
        - override: {"engine": "strict"}
    """


class InvalidFlowConfigError(ConfigError):
    """A seção `flows.<nome>` está ausente ou malformada."""
