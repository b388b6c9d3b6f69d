# src/cleanconfig/core/log.py
"""
Configuração de logging estruturado (structlog sobre o logging padrão).

Os módulos do cleanconfig apenas obtêm loggers com
`structlog.get_logger(__name__)` e emitem eventos chave/valor. A
configuração é responsabilidade da aplicação: a biblioteca nunca
configura logging durante o import.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from .config.settings import LoggingSettings


def configure_logging(level: str = "INFO", json: bool = True, stream=None, cache: bool = True) -> None:
    """
    Configura structlog com timestamp ISO, nível e renderer JSON ou console.

    Args:
        level (str): Nome do nível do logging padrão (ex.: "DEBUG").
        json (bool): `True` para JSON por linha; `False` para saída legível.
        stream: Destino dos logs (padrão: stdout).
        cache (bool): Repassado a `cache_logger_on_first_use`.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )
    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=cache,
    )


def configure_from_settings(settings: Optional[LoggingSettings] = None) -> None:
    settings = settings or LoggingSettings()
    configure_logging(level=settings.level, json=settings.json)


def get_logger(name: Optional[str] = None):
    return structlog.get_logger(name)
