# src/svcconfig/core/config/errors.py
"""
Exceções canônicas das configurações do run do svcconfig.

Este módulo define a hierarquia de exceções usada durante o carregamento
e o merge das configurações de execução (raiz de busca dos sidecars,
política de cobertura obrigatória, parâmetros do oráculo).

Não confundir com erros de *service config*: estes vivem em
`svcconfig.core.exceptions` e descrevem documentos gRPC inválidos. Os
erros aqui descrevem a configuração da própria ferramenta.

Invariantes:
    - Todas as exceções desta camada herdam de `ConfigError`
    - Erros estruturais são fatais; não existe fallback silencioso
"""


class ConfigError(Exception):
    """
    Exceção base para erros de configuração do run.

    Permite captura genérica de falhas de carregamento, merge e leitura
    de chaves tipadas (`ValidationSettings.from_config`).
    """


class DefaultsNotFoundError(ConfigError):
    """
    Arquivo de defaults não encontrado no caminho especificado.

    Decisões arquiteturais:
        - Quando um caminho de defaults é informado, ele é obrigatório
        - Sem caminho explícito, os defaults empacotados são usados
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato de arquivo de configuração não suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """Conteúdo raiz da configuração não é um dicionário (`dict`)."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"oracle": {"dial_timeout_seconds": 5.0}}
        - override: {"oracle": "localhost"}
    """


class InvalidSettingError(ConfigError):
    """Chave conhecida presente com tipo ou valor inválido (ex.: timeout negativo)."""
