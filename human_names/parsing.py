"""
Positional classification and assembly of parsed names.

`parse_components` is the single entry point: it takes raw text and returns a
`ParseResult` holding `NameComponents` (display-ready given parts, surname
words, suffix and honorific) or a failure reason.

The input is split on commas. The first part is either a full name ("John
Smith") or just the surname ("Smith, John"); which one is decided by whether a
given name can be found in it. Later parts either supply the given names (after
a bare surname) or carry suffixes and postfix titles ("Smith, John, Jr., PhD").
Within each part, prefix titles are stripped from the front, suffixes and
postfix titles from the back, and the surname anchor is located among what
remains.
"""

from __future__ import annotations
import re
from dataclasses import dataclass, replace
from typing import Any, Callable, List, Optional, Tuple

from human_names.names_data import (
    CAPITALIZATION_SENSITIVE_PARTICLES,
    GENERATION_BY_SUFFIX,
    POSTFIX_TITLES,
    PREFIX_TITLE_PARTS,
    ROMAN_NUMERALS_BY_GENERATION,
    SUFFIX_DISPLAY_FORMS,
    SURNAME_CONJUNCTIONS,
    SURNAME_PARTICLES,
    TITLE_CONNECTIVES,
    TWO_CHAR_TITLES,
)
from human_names.normalization import (
    has_no_vowels,
    is_mixed_case,
    normalize_nfkd_whitespace,
    recompose,
    starts_with_uppercase,
)
from human_names.tokenization import (
    Location,
    NamePart,
    TokenCategory,
    all_from_text,
    reclassify_ignoring_case,
    strip_nickname,
)

_FAST_PATH_PATTERN = re.compile(r"([A-Z][a-z]+) ([A-Z][a-z]+)")


# ════════════════════════════════════════════════════════════════════════════════
# RESULT TYPES
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ParseResult:
    """Result of a parse: either a value or the reason parsing gave up."""

    success: bool
    result: Any = None
    error_message: Optional[str] = None

    @classmethod
    def success_with(cls, value: Any) -> "ParseResult":
        return cls(success=True, result=value, error_message=None)

    @classmethod
    def failure(cls, error_message: str) -> "ParseResult":
        return cls(success=False, result=None, error_message=error_message)

    def map(self, f: Callable[[Any], Any]) -> "ParseResult":
        """Transform a successful result, passing failures through untouched."""
        if self.success:
            return ParseResult.success_with(f(self.result))
        return self


@dataclass(frozen=True)
class GivenPart:
    """One given-side token: a spelled-out name or a run of initials."""

    word: Optional[str]
    initials: str


@dataclass(frozen=True)
class NameComponents:
    given_parts: Tuple[GivenPart, ...]
    surnames: Tuple[str, ...]
    suffix: Optional[str] = None
    generation: Optional[int] = None
    honorific_prefix: Optional[str] = None


# ════════════════════════════════════════════════════════════════════════════════
# DICTIONARY PREDICATES
# ════════════════════════════════════════════════════════════════════════════════


def generation_from_suffix(part: NamePart, expect_initials: bool) -> Optional[int]:
    """Generation number if `part` reads as a generational suffix.

    A lone letter ("V", "I") only counts when initials are not expected at this
    position, so "Smith, V." keeps V as an initial.
    """
    if part.is_namelike or part.category is TokenCategory.ABBREVIATION:
        return GENERATION_BY_SUFFIX.get(part.key)
    if part.is_initials and (part.counts.alpha > 1 or not expect_initials):
        return GENERATION_BY_SUFFIX.get(part.key)
    return None


def is_postfix_title(part: NamePart, expect_initials: bool) -> bool:
    if part.is_namelike:
        return part.key in POSTFIX_TITLES
    if part.is_initials:
        return not expect_initials and part.counts.alpha > 1
    return True


def _might_be_title_part(part: NamePart) -> bool:
    if part.counts.chars < 3 or not part.is_namelike:
        return True
    return part.key in PREFIX_TITLE_PARTS


def _might_be_last_title_part(part: NamePart) -> bool:
    # Lone letters and most two-letter words are more likely initials
    if part.counts.chars == 1:
        return False
    if part.counts.chars == 2:
        return part.key in TWO_CHAR_TITLES
    return _might_be_title_part(part)


def _is_prefix_title(words: List[NamePart]) -> bool:
    if not words or not _might_be_last_title_part(words[-1]):
        return False
    return all(_might_be_title_part(word) for word in words[:-1])


def strip_prefix_title(words: List[NamePart], try_to_keep_two_words: bool = True) -> List[NamePart]:
    """Remove the longest leading title ("Dr.", "Rt. Hon.", "Lt. Gen.") in place and return it."""
    for prefix_len in range(len(words) - 1, 0, -1):
        next_word = words[prefix_len]
        if try_to_keep_two_words and len(words) - prefix_len <= 1 and words[prefix_len - 1].is_initials:
            # "DR DOE": with a single word left, an initials-shaped "title" is more
            # likely to be initials
            continue
        if (next_word.is_namelike or next_word.is_initials) and _is_prefix_title(words[:prefix_len]):
            prefix = words[:prefix_len]
            del words[:prefix_len]
            return prefix
    return []


def is_particle(part: NamePart) -> bool:
    key = part.key
    if key not in SURNAME_PARTICLES:
        return False
    if key in CAPITALIZATION_SENSITIVE_PARTICLES:
        # "Ben" and "Santa" are given names too; only trust them as particles
        # when written lowercase, or when case carries no information
        return not part.trusted or not starts_with_uppercase(part.word)
    return True


def find_surname_index(words: List[NamePart]) -> int:
    """Index of the first surname word, assuming `words` holds a whole name."""
    if len(words) < 2:
        return 0
    if len(words) == 2:
        return 1

    for i in range(1, len(words) - 1):
        if is_particle(words[i]):
            return i

    # "Romero y Galdámez", "Dato e Iradier"
    for i in range(2, len(words) - 1):
        if words[i].key in SURNAME_CONJUNCTIONS:
            if not words[i - 1].is_initials and not words[i + 1].is_initials:
                return i - 1

    return len(words) - 1


def suffix_display_form(part: NamePart, generation: int) -> str:
    return SUFFIX_DISPLAY_FORMS.get(part.key) or ROMAN_NUMERALS_BY_GENERATION[generation - 1]


def _restore_as_name(part: Optional[NamePart]) -> Optional[NamePart]:
    """Re-read a remembered title word as part of the name, if it can be one."""
    # Generational suffixes ("III", "Junior") never stand in for a missing name word
    if part is None or generation_from_suffix(part, False) is not None:
        return None
    if part.is_namelike:
        return part
    if part.counts.alpha >= 2 and not part.word.endswith("."):
        return replace(part, category=TokenCategory.NAMEPART, trusted=False)
    return part


def _display_title(prefix: List[NamePart]) -> str:
    words = []
    for i, part in enumerate(prefix):
        if i > 0 and part.key in TITLE_CONNECTIVES:
            words.append(part.word.lower())
        else:
            words.append(part.namecased())
    return " ".join(words)


# ════════════════════════════════════════════════════════════════════════════════
# PARSE STATE
# ════════════════════════════════════════════════════════════════════════════════


class NameParseOperation:
    """Mutable working state for one parse; discarded once components are built."""

    def __init__(self, trust_capitalization: bool, max_word_length: int):
        self.trust_capitalization = trust_capitalization
        self.max_word_length = max_word_length
        self.words: List[NamePart] = []
        self.surname_index = 0
        # Set once given names arrive after the surname ("Smith, John")
        self.surname_first = False
        self.suffix_part: Optional[NamePart] = None
        self.generation: Optional[int] = None
        self.honorific_prefix: Optional[str] = None
        self.maybe_not_prefix: Optional[NamePart] = None
        self.maybe_not_postfix: Optional[NamePart] = None

    def run(self, text: str) -> None:
        for part in text.split(","):
            if not self.words:
                # Either the whole name ("John Smith, Esq.") or only the surname ("Smith, John")
                self.handle_before_comma(part)
            elif self.surname_index == 0:
                self.handle_after_comma(part)
            else:
                self.handle_after_surname(part)

        # With too few words left, ambiguous titles like "MA" in "JOHN MA" are
        # more likely to be part of the name
        if self.fixably_invalid():
            restored = _restore_as_name(self.maybe_not_postfix)
            if restored is not None:
                self.words.append(restored)
            else:
                restored = _restore_as_name(self.maybe_not_prefix)
                if restored is not None:
                    self.words.insert(0, restored)
                    if self.surname_first:
                        self.surname_index += 1

            if restored is not None and not self.surname_first:
                # "John A. Ma": the surname now starts at the restored word
                self.surname_index = 0

        # Anything trailing that isn't a name is a stray postfix ("John Smith M.D.")
        while self.words and not self.words[-1].is_namelike:
            removed = self.words.pop()
            self.surname_index = 0

            if generation_from_suffix(removed, False) is not None:
                continue
            if self.trust_capitalization and self.fixably_invalid():
                as_name = reclassify_ignoring_case(removed)
                if as_name is not None:
                    self.words.append(as_name)
                    break

        if self.surname_index == 0 and len(self.words) > 1:
            self.surname_index = find_surname_index(self.words)

    def fixably_invalid(self) -> bool:
        return len(self.words) < 2 or not any(word.is_namelike for word in self.words[self.surname_index :])

    def parts_from_text(self, text: str, location: Location) -> List[NamePart]:
        return all_from_text(text, self.trust_capitalization, location, self.max_word_length)

    def handle_before_comma(self, part: str) -> None:
        words = self.parts_from_text(part, Location.END)
        if not words:
            return

        prefix = strip_prefix_title(words) if len(words) > 1 else []
        self.strip_postfixes(words, after_comma=False)
        self.words = words

        if prefix:
            # After a prefix title the next word is a given name or initial
            self.found_prefix_title(prefix)
            self.surname_index = find_surname_index(words)
        elif is_particle(words[0]):
            # "de la Hoya, Oscar": a leading particle can only start a surname
            self.surname_index = 0
        else:
            # Might only be the surname; revisited if no given name ever follows
            self.surname_index = find_surname_index(words)

    def handle_after_comma(self, part: str) -> None:
        given_words = self.parts_from_text(part, Location.START)
        if not given_words:
            return

        if len(given_words) > 1:
            prefix = strip_prefix_title(given_words)
            if prefix:
                self.found_prefix_title(prefix)

        self.strip_postfixes(given_words, after_comma=True)

        if given_words:
            self.surname_index = len(given_words)
            self.surname_first = True
            self.words = given_words + self.words

    def handle_after_surname(self, part: str) -> None:
        for word in self.parts_from_text(part, Location.END):
            generation = generation_from_suffix(word, False)
            if generation is not None:
                self.found_suffix(word, generation)
            else:
                self.found_postfix_title(word)

    def strip_postfixes(self, words: List[NamePart], after_comma: bool) -> None:
        """Cut the first postfix-looking word and everything after it.

        The first word before a comma is never cut, it has to be a name.
        """
        skip = 0 if after_comma else 1
        expect_initials = after_comma and self.surname_index == 0

        first_postfix_index = skip
        for i in range(len(words) - 1, skip - 1, -1):
            word = words[i]
            if generation_from_suffix(word, expect_initials) is None and not is_postfix_title(word, expect_initials):
                first_postfix_index = i + 1
                break

        for i in range(skip, len(words)):
            if not words[i].is_namelike and not words[i].is_initials:
                first_postfix_index = min(first_postfix_index, i)
                break

        if first_postfix_index >= len(words):
            return

        for word in words[first_postfix_index:]:
            generation = generation_from_suffix(word, expect_initials)
            if generation is not None:
                self.found_suffix(word, generation)
            else:
                self.found_postfix_title(word)
        del words[first_postfix_index:]

    def found_suffix(self, part: NamePart, generation: int) -> None:
        if self.generation is None:
            self.generation = generation
            self.suffix_part = part
        self.found_postfix_title(part)

    def found_postfix_title(self, part: NamePart) -> None:
        # Kept in case it turns out by elimination to be the surname
        if self.maybe_not_postfix is None and (part.is_namelike or part.is_initials):
            self.maybe_not_postfix = part

    def found_prefix_title(self, prefix: List[NamePart]) -> None:
        if self.honorific_prefix is None:
            self.honorific_prefix = recompose(_display_title(prefix))
        if self.maybe_not_prefix is None:
            for word in reversed(prefix):
                if word.is_namelike or word.is_initials:
                    self.maybe_not_prefix = word
                    break

    def failure_reason(self, max_given_words: int) -> Optional[str]:
        if len(self.words) < 2:
            return "fewer than two name words"
        if not all(word.is_namelike or word.is_initials for word in self.words):
            return "unparseable token sequence"
        if self.surname_index == 0:
            return "no given name or initial found"
        if sum(1 for word in self.words[: self.surname_index] if word.is_namelike) > max_given_words:
            return "too many given names"
        if not any(word.is_namelike for word in self.words[self.surname_index :]):
            return "no surname found"
        return None

    def build_components(self) -> NameComponents:
        given_parts = []
        for word in self.words[: self.surname_index]:
            if word.is_namelike:
                given_parts.append(GivenPart(word=recompose(word.namecased()), initials=word.initials()))
            else:
                given_parts.append(GivenPart(word=None, initials=recompose(word.initials())))

        surname_words = self.words[self.surname_index :]
        surnames = []
        for i, word in enumerate(surname_words):
            is_last = i == len(surname_words) - 1
            if not is_last and (is_particle(word) or word.key in SURNAME_CONJUNCTIONS):
                word = word.with_category(TokenCategory.PARTICLE)
            surnames.append(recompose(word.namecased(might_be_particle=not is_last)))

        suffix = None
        if self.suffix_part is not None and self.generation is not None:
            suffix = suffix_display_form(self.suffix_part, self.generation)

        return NameComponents(
            given_parts=tuple(given_parts),
            surnames=tuple(surnames),
            suffix=suffix,
            generation=self.generation,
            honorific_prefix=self.honorific_prefix,
        )


# ════════════════════════════════════════════════════════════════════════════════
# ENTRY POINT
# ════════════════════════════════════════════════════════════════════════════════


def fast_path_components(text: str) -> Optional[NameComponents]:
    """Components for plain "Given Surname" input that no dictionary could affect."""
    match = _FAST_PATH_PATTERN.fullmatch(text)
    if match is None:
        return None

    given, surname = match.groups()
    if has_no_vowels(given) or has_no_vowels(surname):
        return None

    given_key = given.lower()
    surname_key = surname.lower()
    if given_key in PREFIX_TITLE_PARTS or given_key in TWO_CHAR_TITLES:
        return None
    if surname_key in POSTFIX_TITLES or surname_key in GENERATION_BY_SUFFIX:
        return None

    return NameComponents(given_parts=(GivenPart(word=given, initials=given[0]),), surnames=(surname,))


def parse_components(
    text: str, max_input_length: int = 1000, max_word_length: int = 255, max_given_words: int = 5
) -> ParseResult:
    """Parse raw text into `NameComponents`, wrapped in a `ParseResult`."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    if len(text) >= max_input_length:
        return ParseResult.failure("input too long")
    if not any(c.isalpha() for c in text):
        return ParseResult.failure("no alphabetic characters")

    fast = fast_path_components(text)
    if fast is not None:
        return ParseResult.success_with(fast)

    text = strip_nickname(normalize_nfkd_whitespace(text))

    operation = NameParseOperation(is_mixed_case(text), max_word_length)
    operation.run(text)

    reason = operation.failure_reason(max_given_words)
    if reason is not None:
        return ParseResult.failure(reason)

    return ParseResult.success_with(operation.build_components())
