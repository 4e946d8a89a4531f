# src/builderflow/core/__init__.py
"""
Core do BuilderFlow.

Componentes principais:
    - model        → Data/DataSet/DataDelta, metadados, contratos de builder e listener
    - engine       → nivelamento do grafo e executor incremental
    - config       → carregamento, merge, hashing e declaração de fluxos
    - traceability → ExecutionTrace e TracingListener

Princípios fundamentais:
    - Cada invocação trabalha sobre uma cópia privada dos dados
    - Nenhum estado de execução vive no grafo compartilhado
    - Falhas de observadores nunca alteram o resultado da execução
"""
