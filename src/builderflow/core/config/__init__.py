# src/builderflow/core/config/__init__.py
"""
Camada de configuração do BuilderFlow.

Responsabilidades do pacote:
    - Carregamento de arquivos (defaults + overrides locais) em YAML ou JSON
    - Resolução via deep-merge determinístico
    - Hash canônico para rastreabilidade
    - Leitura de declarações de fluxo (`flows.<nome>`)

Limites explícitos:
    - Não executa fluxos
    - Não resolve builders executáveis (responsabilidade da factory)
"""
