"""
Consistency checking and surname hashing for parsed names.

`consistent_with` answers "could these two parsed names denote the same
person?". Missing information never contradicts: "J. Doe" is consistent with
both "Jane Doe" and "John Doe", which are not consistent with each other, so
the relation is reflexive and symmetric but not transitive.

`surname_hash` depends only on the folded surname, so consistent names always
hash alike and names with different surnames almost never do. It is safe to
bucket names by hash before running the full comparison.
"""

from __future__ import annotations
import hashlib
from functools import lru_cache
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from human_names.normalization import fold, to_ascii_initial

if TYPE_CHECKING:
    from human_names.names import HumanName

# (initial, spelled-out word or None), one per given-side initial
Slot = Tuple[str, Optional[str]]

DEFAULT_DIGEST_SIZE = 8


def surname_key(name: "HumanName") -> str:
    """Case- and accent-folded surname used for equality and hashing."""
    return fold(name.surname) or name.surname.lower()


@lru_cache(maxsize=8192)
def _hash_key(key: str, digest_size: int) -> int:
    digest = hashlib.blake2b(key.encode("utf-8"), digest_size=digest_size).digest()
    return int.from_bytes(digest, "big")


def surname_hash(name: "HumanName", digest_size: int = DEFAULT_DIGEST_SIZE) -> int:
    return _hash_key(surname_key(name), digest_size)


def _ascii_initial(letter: str) -> str:
    return to_ascii_initial(letter) or letter


def given_slots(name: "HumanName") -> List[Slot]:
    """Given and middle parts as aligned slots: one per word, one per bare initial."""
    slots: List[Slot] = []
    for part in name.given_parts:
        if part.word is not None:
            slots.append((_ascii_initial(part.initials[:1]), part.word))
        else:
            slots.extend((_ascii_initial(letter), None) for letter in part.initials)
    return slots


def _slots_compatible(a: Sequence[Slot], b: Sequence[Slot]) -> bool:
    for (initial_a, word_a), (initial_b, word_b) in zip(a, b):
        if initial_a != initial_b:
            return False
        if word_a is not None and word_b is not None and fold(word_a) != fold(word_b):
            return False
    return True


def consistent_with(a: "HumanName", b: "HumanName") -> bool:
    if a is b:
        return True

    if surname_hash(a) != surname_hash(b) or surname_key(a) != surname_key(b):
        return False

    if a.generation is not None and b.generation is not None and a.generation != b.generation:
        return False

    slots_a = given_slots(a)
    slots_b = given_slots(b)
    if _slots_compatible(slots_a, slots_b):
        return True

    # "H. Manuel Alperin" may be known simply as "Manuel Alperin"
    if a.goes_by_middle_name and _slots_compatible(slots_a[1:], slots_b):
        return True
    if b.goes_by_middle_name and _slots_compatible(slots_a, slots_b[1:]):
        return True

    return False
