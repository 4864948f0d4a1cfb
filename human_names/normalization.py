"""
Character-level normalization for personal names.

Three concerns live here, all pure functions over strings:

1. **Shape features** used by the word classifier: letter, uppercase, ASCII and
   combining-mark counts, vowel checks, and whether an input is mixed-case (the
   signal that tells us capitalization can be trusted at all).
2. **Name casing**: Unicode-aware re-capitalization of a single word, with the
   Mac/Mc rule, lowercase particles, and independent capitalization of each
   hyphen- or apostrophe-joined segment ("Doe-Ray", "O'Connor").
3. **Folding** for comparison keys and initials: NFKD decomposition, combining
   marks dropped, anything still non-ASCII transliterated with `unidecode`,
   lowercased, letters only. Folding never feeds display text.

Display text is decomposed on the way in (`normalize_nfkd_whitespace`) and
recomposed on the way out (`recompose`), so ligatures such as "ﬁ" expand to
their base letters before casing while accented letters survive intact.
"""

from __future__ import annotations
import re
import unicodedata
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from unidecode import unidecode

from human_names.names_data import MAC_EXCEPTION_PREFIXES, UNCAPITALIZED_PARTICLES

_VOWELS = frozenset("aeiouyAEIOUY")
_NONASCII_HYPHENS = frozenset("‐‑‒–—―−－﹘﹣")
_NON_SPACE_WHITESPACE_PATTERN = re.compile(r"[^\S ]")
_MC_PATTERN = re.compile(r"^mc[a-z]")
_MAC_PATTERN = re.compile(r"^mac[a-z]{2,}[^aciozj]$")


@dataclass(frozen=True)
class CharacterCounts:
    """Per-word character statistics used to classify a token by shape."""

    chars: int
    alpha: int
    upper: int
    ascii_alpha: int
    combining: int

    @property
    def non_alpha(self) -> int:
        return self.chars - self.alpha


def categorize_chars(word: str) -> CharacterCounts:
    chars = alpha = upper = ascii_alpha = combining = 0

    for c in word:
        chars += 1
        if "a" <= c <= "z":
            alpha += 1
            ascii_alpha += 1
        elif "A" <= c <= "Z":
            alpha += 1
            ascii_alpha += 1
            upper += 1
        elif c.isalpha():
            alpha += 1
            if c.isupper():
                upper += 1
        elif unicodedata.combining(c):
            combining += 1

    return CharacterCounts(chars=chars, alpha=alpha, upper=upper, ascii_alpha=ascii_alpha, combining=combining)


def has_no_vowels(word: str) -> bool:
    return not any(c in _VOWELS for c in word)


def starts_with_uppercase(word: str) -> bool:
    return bool(word) and word[0].isupper()


def has_sequential_alphas(word: str) -> bool:
    """True when two letters appear next to each other ("Dr." but not "M.D.")."""
    prev_alpha = False
    for c in word:
        alpha = c.isalpha()
        if prev_alpha and alpha:
            return True
        prev_alpha = alpha
    return False


def is_mixed_case(text: str) -> bool:
    has_upper = has_lower = False
    for c in text:
        if c.isupper():
            has_upper = True
        elif c.islower():
            has_lower = True
        if has_upper and has_lower:
            return True
    return False


def is_combining(c: str) -> bool:
    return unicodedata.combining(c) > 0


def normalize_nfkd_whitespace(text: str) -> str:
    """Decompose compatibility characters and turn every kind of whitespace into a plain space."""
    if unicodedata.is_normalized("NFKD", text) and not _NON_SPACE_WHITESPACE_PATTERN.search(text):
        return text
    return unicodedata.normalize("NFKD", _NON_SPACE_WHITESPACE_PATTERN.sub(" ", text))


def recompose(text: str) -> str:
    if text.isascii():
        return text
    return unicodedata.normalize("NFC", text)


def dictionary_key(word: str) -> str:
    """Lookup key for the lexical dictionaries: lowercase, composed, without periods."""
    return recompose(word).lower().replace(".", "")


# ════════════════════════════════════════════════════════════════════════════════
# FOLDING (comparison keys, initials, hashing)
# ════════════════════════════════════════════════════════════════════════════════


@lru_cache(maxsize=8192)
def fold(text: str) -> str:
    """Fold text to lowercase ASCII letters, dropping accents, case and punctuation.

    >>> fold("Núñez-Gómez")
    'nunezgomez'
    """
    if text.isascii():
        return "".join(c for c in text.lower() if "a" <= c <= "z")

    decomposed = unicodedata.normalize("NFKD", text)
    without_marks = "".join(c for c in decomposed if not unicodedata.combining(c))
    return "".join(c for c in unidecode(without_marks).lower() if "a" <= c <= "z")


def to_ascii_initial(c: str) -> Optional[str]:
    """Uppercase ASCII letter standing for the character `c`, if there is one."""
    if "A" <= c <= "Z":
        return c
    folded = fold(c)
    return folded[0].upper() if folded else None


# ════════════════════════════════════════════════════════════════════════════════
# NAME CASING
# ════════════════════════════════════════════════════════════════════════════════


def capitalize_word(word: str) -> str:
    """Uppercase the first letter of each segment, lowercase the rest.

    A segment starts after any character that is neither alphanumeric nor a
    combining mark, so "o'connor" becomes "O'Connor" and "doe-ray" becomes
    "Doe-Ray". Non-ASCII dashes are replaced by a plain hyphen.
    """
    if not word:
        return word

    if word.isascii() and word.isalpha():
        return word[0].upper() + word[1:].lower()

    capitalize_next = True
    result = []

    for c in word:
        if c.isalpha():
            result.append(c.title() if capitalize_next else c.lower())
            capitalize_next = False
        else:
            capitalize_next = not c.isalnum() and not is_combining(c)
            if capitalize_next and c in _NONASCII_HYPHENS:
                result.append("-")
            else:
                result.append(c)

    return "".join(result)


def _capitalize_mac_segment(segment: str) -> str:
    lower = segment.lower()
    if _MC_PATTERN.match(lower):
        return segment[:2] + segment[2].upper() + segment[3:]
    if _MAC_PATTERN.match(lower) and not lower.startswith(MAC_EXCEPTION_PREFIXES):
        return segment[:3] + segment[3].upper() + segment[4:]
    return segment


def namecase(word: str, might_be_particle: bool = False) -> str:
    """Re-case a single word for display.

    Particles ("de", "van", "y") stay lowercase when `might_be_particle` is set,
    i.e. when the word sits inside a surname rather than at its end.
    """
    if might_be_particle and dictionary_key(word) in UNCAPITALIZED_PARTICLES:
        return word.lower()

    capitalized = capitalize_word(word)
    lower = capitalized.lower()
    if "mc" not in lower and "mac" not in lower:
        return capitalized

    return "-".join(_capitalize_mac_segment(segment) for segment in capitalized.split("-"))
