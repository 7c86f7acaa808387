# src/batchflow/core/__init__.py
"""
Core do batchflow.

Componentes principais:
    - item      → contrato Reader / Processor / Writer e colaboradores em memória
    - pipeline  → status, StepExecution, buffer de chunk e protocolo de Step
    - engine    → Job (sequenciamento de Steps e agregação de execuções)
    - config    → carregamento de configuração e parâmetros de Step
    - errors / exceptions → exceções tipadas e payloads de erro serializáveis
    - logging   → instalação de sinks do loguru

Limites explícitos:
    - Não contém readers/writers de formatos específicos
    - Não executa Steps em paralelo
    - Não persiste histórico de execução
"""
