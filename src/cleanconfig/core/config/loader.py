# src/cleanconfig/core/config/loader.py
"""
Loader canônico de settings do cleanconfig.

Os settings efetivos são resolvidos a partir de:
    - `DEFAULT_SETTINGS` embutido (sempre presente)
    - um arquivo de defaults (opcional; obrigatório se informado)
    - um arquivo local de overrides (opcional; ignorado se ausente)

Princípios fundamentais:
    - Configuração é declarativa e explícita
    - A mesma entrada sempre produz os mesmos settings
    - Erros estruturais são tratados como falhas fatais

Decisões arquiteturais:
    - YAML é lido com `yaml.safe_load` (PyYAML); JSON com a stdlib
    - O hash canônico do dicionário efetivo acompanha os settings
    - Um evento `settings.loaded` registra origem e hash

Limites explícitos:
    - Não lê variáveis de ambiente
    - Não configura logging (ver `cleanconfig.core.log`)
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import structlog
import yaml  # PyYAML

from ..hashing import canonical_json
from .errors import (
    InvalidConfigRootTypeError,
    SettingsNotFoundError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge
from .settings import DEFAULT_SETTINGS, EngineSettings

logger = structlog.get_logger(__name__)

PathLike = Union[str, Path]


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de settings e valida sua estrutura básica.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Decisões arquiteturais:
        - Arquivos vazios são interpretados como dicionários vazios
        - O conteúdo raiz deve ser um dicionário (`dict`)

    Raises:
        SettingsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise SettingsNotFoundError(f"Arquivo de settings não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def compute_settings_hash(settings: Dict[str, Any]) -> str:
    """SHA-256 hexadecimal do JSON canônico dos settings."""
    if not isinstance(settings, dict):
        raise TypeError(
            f"Settings para hashing devem ser dict, recebido: {type(settings).__name__}"
        )
    return hashlib.sha256(canonical_json(settings).encode("utf-8")).hexdigest()


def load_settings_dict(
    *,
    defaults_path: Optional[PathLike] = None,
    local_path: Optional[PathLike] = None,
) -> Dict[str, Any]:
    """
    Resolve o dicionário de settings efetivo.

    Política de resolução:
        - `DEFAULT_SETTINGS` ← arquivo de defaults ← arquivo local
        - Cada camada é aplicada com `deep_merge`

    Raises:
        SettingsNotFoundError: Se `defaults_path` for informado e não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """
    effective: Dict[str, Any] = deep_merge(DEFAULT_SETTINGS, {})

    if defaults_path is not None:
        effective = deep_merge(effective, _load_file(Path(defaults_path)))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    return effective


def load_settings(
    *,
    defaults_path: Optional[PathLike] = None,
    local_path: Optional[PathLike] = None,
) -> EngineSettings:
    """
    Carrega, resolve e interpreta os settings do engine.

    Returns:
        EngineSettings: Settings imutáveis com `config_hash` preenchido.

    Raises:
        ConfigError: Qualquer falha estrutural ou de conteúdo.
    """
    effective = load_settings_dict(defaults_path=defaults_path, local_path=local_path)
    config_hash = compute_settings_hash(effective)
    settings = EngineSettings.from_dict(effective, config_hash=config_hash)

    logger.info(
        "settings.loaded",
        defaults_path=str(defaults_path) if defaults_path is not None else None,
        local_path=str(local_path) if local_path is not None else None,
        config_hash=config_hash,
    )
    return settings
