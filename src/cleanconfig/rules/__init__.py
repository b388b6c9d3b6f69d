"""
Catálogo de regras prontas do cleanconfig.

Uso típico:

    from cleanconfig.rules import numeric, string

    rule = numeric.port()
    name_rule = string.not_blank() & string.max_length(64)

Submódulos:
    - string        → regras sobre `str`
    - numeric       → regras sobre números
    - general       → regras independentes de tipo
    - file          → regras sobre caminhos
    - multiproperty → famílias para `PropertyGroup`
"""

from . import file, general, multiproperty, numeric, string

__all__ = ["file", "general", "multiproperty", "numeric", "string"]
