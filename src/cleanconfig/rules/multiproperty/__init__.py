"""
Famílias de regras multi-propriedade para uso em `PropertyGroup`.

    - numeric     → less_than, less_than_or_equal, greater_than, greater_than_or_equal
    - exclusivity → mutually_exclusive, at_least_one_required, exactly_one_required
    - conditional → if_then, all_or_nothing
    - resources   → cpu_request_limit, memory_request_limit, valid_range
"""

from .conditional import all_or_nothing, if_then
from .exclusivity import at_least_one_required, exactly_one_required, is_set, mutually_exclusive
from .numeric import greater_than, greater_than_or_equal, less_than, less_than_or_equal
from .resources import cpu_request_limit, memory_request_limit, valid_range

__all__ = [
    "all_or_nothing",
    "at_least_one_required",
    "cpu_request_limit",
    "exactly_one_required",
    "greater_than",
    "greater_than_or_equal",
    "if_then",
    "is_set",
    "less_than",
    "less_than_or_equal",
    "memory_request_limit",
    "mutually_exclusive",
    "valid_range",
]
