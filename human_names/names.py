"""
Parsed human names and the parser service.

Usage:
    >>> from human_names import parse
    >>> name = parse("Doe, John A. Kenneth III")
    >>> name.given_name, name.middle_names, name.middle_initials, name.suffix
    ('John', ('Kenneth',), 'AK', 'III')
    >>> name.display_full
    'John A. Kenneth Doe, III'

`parse` returns None for anything that cannot be read as a name; it only raises
for non-string input. `HumanName` equality is the non-transitive
`consistent_with` relation and its hash is the surname hash, so parsed names
can be bucketed in sets and dicts, with the caveat that set membership is not
an equivalence.
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from human_names import comparison
from human_names.parsing import GivenPart, NameComponents, ParseResult, parse_components

# ════════════════════════════════════════════════════════════════════════════════
# CONFIGURATION
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class HumanNameConfig:
    """Immutable parser limits."""

    # Inputs at least this long are rejected outright
    max_input_length: int
    # Longer whitespace-separated words are dropped as junk
    max_word_length: int
    # More spelled-out given/middle names than this fails the parse
    max_given_words: int
    # Width of the surname hash in bytes
    hash_digest_size: int

    @classmethod
    def create_default(cls) -> "HumanNameConfig":
        return cls(
            max_input_length=1000,
            max_word_length=255,
            max_given_words=5,
            hash_digest_size=comparison.DEFAULT_DIGEST_SIZE,
        )

    def with_limits(
        self,
        max_input_length: Optional[int] = None,
        max_word_length: Optional[int] = None,
        max_given_words: Optional[int] = None,
    ) -> "HumanNameConfig":
        """Immutable update of the parsing limits; omitted limits keep their value."""
        return replace(
            self,
            max_input_length=self.max_input_length if max_input_length is None else max_input_length,
            max_word_length=self.max_word_length if max_word_length is None else max_word_length,
            max_given_words=self.max_given_words if max_given_words is None else max_given_words,
        )


# ════════════════════════════════════════════════════════════════════════════════
# PARSED NAME
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, eq=False)
class HumanName:
    """An immutable parsed name. Built only by the parser."""

    given_parts: Tuple[GivenPart, ...]
    surnames: Tuple[str, ...]
    suffix: Optional[str] = None
    generation: Optional[int] = None
    honorific_prefix: Optional[str] = None

    @classmethod
    def from_components(cls, components: NameComponents) -> "HumanName":
        return cls(
            given_parts=components.given_parts,
            surnames=components.surnames,
            suffix=components.suffix,
            generation=components.generation,
            honorific_prefix=components.honorific_prefix,
        )

    @property
    def surname(self) -> str:
        return " ".join(self.surnames)

    @property
    def given_name(self) -> Optional[str]:
        return self.given_parts[0].word

    @property
    def middle_names(self) -> Tuple[str, ...]:
        return tuple(part.word for part in self.given_parts[1:] if part.word is not None)

    @property
    def middle_name(self) -> Optional[str]:
        return " ".join(self.middle_names) or None

    @property
    def initials(self) -> str:
        return "".join(part.initials for part in self.given_parts)

    @property
    def first_initial(self) -> str:
        return self.initials[0]

    @property
    def middle_initials(self) -> Optional[str]:
        return self.initials[1:] or None

    @property
    def goes_by_middle_name(self) -> bool:
        """True for names like "H. Manuel Alperin", known by their middle name."""
        return self.given_name is None and bool(self.middle_names)

    # Display ------------------------------------------------------------------

    @property
    def display_short(self) -> str:
        if self.given_name is not None:
            return f"{self.given_name} {self.surname}"
        return self.display_initial_surname

    @property
    def display_initial_surname(self) -> str:
        return f"{self.first_initial}. {self.surname}"

    @property
    def display_first_last(self) -> str:
        if self.given_name is not None:
            return f"{self.given_name} {self.surname}"
        if self.goes_by_middle_name:
            return f"{self.middle_names[0]} {self.surname}"
        return self.display_initial_surname

    @property
    def display_full(self) -> str:
        words = []
        for part in self.given_parts:
            if part.word is not None:
                words.append(part.word)
            else:
                words.extend(f"{letter}." for letter in part.initials)
        words.append(self.surname)

        text = " ".join(words)
        if self.suffix is None:
            return text
        if len(self.suffix) == 1:
            # After a comma a lone "V" reads as an initial ("Ma, V")
            return f"{text} {self.suffix}"
        return f"{text}, {self.suffix}"

    # Serialization -----------------------------------------------------------

    def to_dict(self) -> Dict[str, str]:
        """Accessor values keyed by accessor name, omitting absent fields."""
        fields = {
            "surname": self.surname,
            "given_name": self.given_name,
            "middle_names": self.middle_name,
            "first_initial": self.first_initial,
            "middle_initials": self.middle_initials,
            "suffix": self.suffix,
            "honorific_prefix": self.honorific_prefix,
        }
        return {key: value for key, value in fields.items() if value is not None}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    # Comparison --------------------------------------------------------------

    def consistent_with(self, other: "HumanName") -> bool:
        return comparison.consistent_with(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HumanName):
            return NotImplemented
        return comparison.consistent_with(self, other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, HumanName):
            return NotImplemented
        return not comparison.consistent_with(self, other)

    def __hash__(self) -> int:
        return comparison.surname_hash(self)

    def __str__(self) -> str:
        return self.display_full


# ════════════════════════════════════════════════════════════════════════════════
# PARSER SERVICE
# ════════════════════════════════════════════════════════════════════════════════


class HumanNameParser:
    """Parses raw strings into `HumanName` objects under a fixed configuration."""

    def __init__(self, config: Optional[HumanNameConfig] = None):
        self._config = config or HumanNameConfig.create_default()

    @property
    def config(self) -> HumanNameConfig:
        return self._config

    def parse_result(self, text: str) -> ParseResult:
        """
        Parse `text`, reporting why it failed if it did.

        Returns ParseResult with:
        - success=True, result=HumanName if a name was recognized
        - success=False, error_message=reason otherwise
        """
        result = parse_components(
            text,
            max_input_length=self._config.max_input_length,
            max_word_length=self._config.max_word_length,
            max_given_words=self._config.max_given_words,
        ).map(HumanName.from_components)

        if not result.success:
            logging.debug(f"Rejected name {text[:80]!r}: {result.error_message}")
        return result

    def parse(self, text: str) -> Optional[HumanName]:
        result = self.parse_result(text)
        return result.result if result.success else None

    def consistent_with(self, a: HumanName, b: HumanName) -> bool:
        return comparison.consistent_with(a, b)

    def surname_hash(self, name: HumanName) -> int:
        return comparison.surname_hash(name, self._config.hash_digest_size)


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

# Global parser instance for module-level functions
_global_parser: Optional[HumanNameParser] = None


def _get_global_parser() -> HumanNameParser:
    global _global_parser
    if _global_parser is None:
        _global_parser = HumanNameParser()
    return _global_parser


def parse(text: str) -> Optional[HumanName]:
    """
    Module-level convenience function for name parsing.

    Args:
        text: Raw name string

    Returns:
        The parsed name, or None if the text cannot be read as a name
    """
    return _get_global_parser().parse(text)


def consistent_with(a: HumanName, b: HumanName) -> bool:
    return _get_global_parser().consistent_with(a, b)


def surname_hash(name: HumanName) -> int:
    return _get_global_parser().surname_hash(name)
