"""
Tokenization of raw name strings.

Turns one comma-free segment of input into classified `NamePart` tokens:

- bracketed and quoted asides ("Robert 'Bob' Smith", "Jane (Janie) Doe") are
  removed before splitting, as is an unterminated bracket running to the end
- words are split on whitespace and after inner periods ("J.Q." -> "J.", "Q.")
- words without letters are dropped, apart from "&" which the parser needs to
  recognize "& Co."
- runs of Han ideographs are split into one word per character

Each word is then classified by shape alone (letter counts, case, periods,
vowels, position). The positional classifier in `human_names.parsing` later
re-tags some of these tokens as honorifics, suffixes, postfix titles or
particles.
"""

from __future__ import annotations
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, List, Optional

from human_names.names_data import (
    BRACKET_DELIMITERS,
    QUOTE_DELIMITERS,
    TWO_LETTER_GIVEN_NAMES,
    VOWELLESS_SURNAMES,
)
from human_names.normalization import (
    CharacterCounts,
    categorize_chars,
    dictionary_key,
    has_no_vowels,
    has_sequential_alphas,
    namecase,
    starts_with_uppercase,
)

_HAN_RANGES = "\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff"
_HAN_PATTERN = re.compile(f"[{_HAN_RANGES}]")
_HAN_SEGMENT_PATTERN = re.compile(f"[{_HAN_RANGES}]|[^{_HAN_RANGES}]+")


class Location(Enum):
    START = "start"
    MIDDLE = "middle"
    END = "end"


class TokenCategory(Enum):
    """Closed set of token classes.

    The first four are assigned from shape alone; the rest are assigned by the
    positional classifier once a token's role in the name is known.
    """

    NAMEPART = "namepart"
    INITIAL_RUN = "initial_run"
    ABBREVIATION = "abbreviation"
    JUNK = "junk"
    PARTICLE = "particle"
    HONORIFIC = "honorific"
    SUFFIX = "suffix"
    POSTFIX_TITLE = "postfix_title"


@dataclass(frozen=True)
class NamePart:
    """A single classified word of a name."""

    word: str
    counts: CharacterCounts
    category: TokenCategory
    trusted: bool
    location: Location

    @classmethod
    def from_word(cls, word: str, trust_capitalization: bool, location: Location) -> "NamePart":
        counts = categorize_chars(word)
        category = classify_shape(word, counts, trust_capitalization, location)
        return cls(word=word, counts=counts, category=category, trusted=trust_capitalization, location=location)

    @property
    def key(self) -> str:
        return dictionary_key(self.word)

    @property
    def is_namelike(self) -> bool:
        return self.category in (TokenCategory.NAMEPART, TokenCategory.PARTICLE)

    @property
    def is_initials(self) -> bool:
        return self.category is TokenCategory.INITIAL_RUN

    def with_category(self, category: TokenCategory) -> "NamePart":
        return replace(self, category=category)

    def namecased(self, might_be_particle: bool = False) -> str:
        """Display form of the word, verbatim when mixed-case input already capitalized it."""
        shouting = self.counts.alpha > 1 and self.counts.upper == self.counts.alpha
        if self.trusted and starts_with_uppercase(self.word) and not shouting:
            return self.word
        return namecase(self.word, might_be_particle)

    def initials(self) -> str:
        """Uppercase initial letters this part contributes to the name's initials."""
        if self.is_namelike:
            first = next((c for c in self.namecased() if c.isalpha()), "")
            return first.upper()[:1]
        return "".join(c.upper()[0] for c in self.word if c.isalpha())


def classify_shape(word: str, counts: CharacterCounts, trust_capitalization: bool, location: Location) -> TokenCategory:
    """Classify a word by its shape: namepart, initials, abbreviation or junk."""
    if counts.chars == 1:
        if counts.ascii_alpha == 1:
            return TokenCategory.INITIAL_RUN
        if counts.alpha > 0:
            return TokenCategory.NAMEPART
        return TokenCategory.JUNK

    if word.endswith("."):
        if counts.alpha >= 2 and has_sequential_alphas(word):
            return TokenCategory.ABBREVIATION
        return TokenCategory.INITIAL_RUN

    if counts.non_alpha > 2 and counts.non_alpha - counts.combining > 2:
        return TokenCategory.JUNK

    if trust_capitalization and counts.alpha == counts.upper:
        # All-caps word in otherwise mixed-case input: short ones are initials
        # ("JM", "JEM"), except a trailing word with a vowel that is long enough
        # to be a surname written in capitals ("Neto John SMITH")
        if counts.ascii_alpha > 0 and has_no_vowels(word):
            return TokenCategory.INITIAL_RUN
        if counts.chars <= 3 or (counts.chars <= 5 and location is not Location.END):
            return TokenCategory.INITIAL_RUN
        return TokenCategory.NAMEPART

    if counts.ascii_alpha > 0 and has_no_vowels(word):
        if location is Location.END and _is_vowelless_surname(word, trust_capitalization):
            return TokenCategory.NAMEPART
        if counts.chars <= 5:
            return TokenCategory.INITIAL_RUN
        return TokenCategory.JUNK

    if counts.chars == 2 and not trust_capitalization and dictionary_key(word) not in TWO_LETTER_GIVEN_NAMES:
        return TokenCategory.INITIAL_RUN

    return TokenCategory.NAMEPART


def _is_vowelless_surname(word: str, trust_capitalization: bool) -> bool:
    key = dictionary_key(word)
    if key not in VOWELLESS_SURNAMES:
        return False
    # With meaningful capitalization, "NG" is initials and only "Ng" is a surname
    return not trust_capitalization or word == key.capitalize()


# ════════════════════════════════════════════════════════════════════════════════
# NICKNAME AND JUNK STRIPPING
# ════════════════════════════════════════════════════════════════════════════════


def _is_boundary(text: str, index: int) -> bool:
    return index < 0 or index >= len(text) or text[index].isspace() or text[index] == ","


def _find_closing_quote(text: str, closer: str, start: int) -> int:
    end = text.find(closer, start)
    while end != -1 and not _is_boundary(text, end + 1):
        end = text.find(closer, end + 1)
    return end


def strip_nickname(text: str) -> str:
    """Remove bracketed or quoted asides, and an unterminated bracket at the end.

    Quotes only open an aside at the start of a word and close one at the end of
    a word, so apostrophes inside names are never mistaken for quotes. If
    nothing alphabetic would be left, the delimiters are blanked out instead and
    the aside is kept as the name.
    """
    if not any(c in BRACKET_DELIMITERS or c in QUOTE_DELIMITERS for c in text):
        return text

    result = []
    i = 0
    while i < len(text):
        c = text[i]
        if c in BRACKET_DELIMITERS:
            end = text.find(BRACKET_DELIMITERS[c], i + 1)
            if end == -1:
                # Unterminated aside at the end of the input is junk
                break
            result.append(" ")
            i = end + 1
            continue

        if c in QUOTE_DELIMITERS and _is_boundary(text, i - 1):
            end = _find_closing_quote(text, QUOTE_DELIMITERS[c], i + 1)
            if end != -1:
                result.append(" ")
                i = end + 1
                continue

        result.append(c)
        i += 1

    stripped = "".join(result)
    if any(c.isalpha() for c in stripped):
        return stripped

    delimiters = set(BRACKET_DELIMITERS) | set(BRACKET_DELIMITERS.values())
    delimiters |= set(QUOTE_DELIMITERS) | set(QUOTE_DELIMITERS.values())
    return "".join(" " if c in delimiters else c for c in text)


# ════════════════════════════════════════════════════════════════════════════════
# SEGMENTATION
# ════════════════════════════════════════════════════════════════════════════════


def _split_inner_periods(word: str) -> Iterator[str]:
    start = 0
    for i, c in enumerate(word):
        if c == ".":
            yield word[start : i + 1]
            start = i + 1
    if start < len(word):
        yield word[start:]


def segment_words(text: str, max_word_length: int = 255) -> Iterator[str]:
    """Split text into candidate words, skipping anything without letters."""
    for raw in text.split():
        if len(raw) > max_word_length:
            continue

        for word in _split_inner_periods(raw):
            if word == "&":
                yield word
                continue

            if not any(c.isalpha() for c in word):
                continue

            has_ascii_letters = any(c.isascii() and c.isalpha() for c in word)
            if not has_ascii_letters and _HAN_PATTERN.search(word):
                for piece in _HAN_SEGMENT_PATTERN.findall(word):
                    if any(c.isalpha() for c in piece):
                        yield piece
                continue

            yield word


def all_from_text(
    text: str,
    trust_capitalization: bool,
    location: Location,
    max_word_length: int = 255,
) -> List[NamePart]:
    """Classify every word of a comma-free segment.

    With `location=START` the first word is at the start of the name; with
    `location=END` the segment ends the name and its first word is treated as
    mid-name. The last word of a multi-word segment is always at the end.
    """
    words = list(segment_words(text, max_word_length))
    parts = []

    for i, word in enumerate(words):
        if i == 0 and location is Location.START:
            word_location = Location.START
        elif i == len(words) - 1:
            word_location = Location.END
        else:
            word_location = Location.MIDDLE
        parts.append(NamePart.from_word(word, trust_capitalization, word_location))

    return parts


def reclassify_ignoring_case(part: NamePart) -> Optional[NamePart]:
    """Re-read a part as if capitalization were meaningless, if that makes it a name."""
    candidate = NamePart.from_word(part.word, False, Location.END)
    return candidate if candidate.is_namelike else None
