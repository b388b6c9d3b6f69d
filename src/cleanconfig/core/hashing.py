"""
Fingerprint canônico de mapas de propriedades.

Este módulo gera a identidade estrutural de um mapa de propriedades,
utilizada como chave pelos caches do cleanconfig (validação e defaults
computados).

Princípios fundamentais:
    - Hashing determinístico e reprodutível
    - Independente da ordem original das chaves
    - Baseado em serialização JSON canônica
    - Algoritmo criptográfico estável (SHA-256)

Invariantes:
    - Mapas estruturalmente equivalentes produzem o mesmo fingerprint
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
    - Nenhuma mutação ocorre sobre o input

Limites explícitos:
    - Não armazena resultados
    - Não valida semântica de domínio
"""

import hashlib
import json
from typing import Any, Mapping, Optional


def canonical_json(payload: Any) -> str:
    """Serialização JSON canônica: chaves ordenadas e separadores compactos."""
    return json.dumps(
        payload,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )


def compute_fingerprint(
    properties: Mapping[str, Any],
    *,
    scope: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    Gera o fingerprint SHA-256 de um mapa de propriedades.

    Política de hashing (v1):
        - Serialização JSON canônica do mapa (chaves ordenadas)
        - `scope` opcional (ex.: tipo de contexto, metadata) entra no
          documento sob uma chave própria, separado das propriedades
        - Codificação UTF-8

    Decisões arquiteturais:
        - O fingerprint completo é a chave de cache; mapas distintos nunca
          compartilham entrada
        - Valores não serializáveis são convertidos com `str`

    Args:
        properties (Mapping[str, Any]): Mapa de propriedades.
        scope (Optional[Mapping[str, Any]]): Dados adicionais que
            diferenciam chamadas com as mesmas propriedades.

    Returns:
        str: Hash SHA-256 hexadecimal.

    Raises:
        TypeError: Se `properties` não for um mapeamento.
    """
    if not isinstance(properties, Mapping):
        raise TypeError(
            f"Properties para fingerprint devem ser Mapping, recebido: {type(properties).__name__}"
        )

    document = {"properties": dict(properties)}
    if scope:
        document["scope"] = dict(scope)

    return hashlib.sha256(canonical_json(document).encode("utf-8")).hexdigest()
