from human_names.names import (
    HumanName,
    HumanNameConfig,
    HumanNameParser,
    consistent_with,
    parse,
    surname_hash,
)
from human_names.parsing import ParseResult

__all__ = [
    "HumanName",
    "HumanNameConfig",
    "HumanNameParser",
    "ParseResult",
    "consistent_with",
    "parse",
    "surname_hash",
]
