# src/cleanconfig/core/config/errors.py
"""
Exceções canônicas da camada de settings do cleanconfig.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, a resolução e a interpretação dos settings do engine.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro nomeiam o arquivo ou a chave ofensiva

Invariantes:
    - Todas as exceções de settings herdam de `ConfigError`
    - Nenhuma exceção representa falha de validação de propriedades

Limites explícitos:
    - Não realiza fallback ou recovery
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados aos settings do cleanconfig.

    Permite:
        - captura genérica de erros de settings
        - distinção clara entre falhas de settings e falhas de schema
    """


class SettingsNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de settings explicitamente
    solicitado não existe.

    Decisões arquiteturais:
        - O arquivo de defaults, quando informado, é obrigatório
        - O arquivo local é opcional e sua ausência é ignorada
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo não é suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz do arquivo não é um `dict`.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"cache": {"enabled": true}}
        - override: {"cache": "off"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidSettingsError(ConfigError):
    """
    Exceção levantada quando um valor de settings resolvido é inválido
    (tipo incorreto, fora do intervalo ou opção desconhecida).

    A mensagem sempre inclui o caminho da chave (ex.: `cache.max_size`).
    """
