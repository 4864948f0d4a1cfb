import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import human_names
sys.path.insert(0, str(Path(__file__).parent.parent))

from human_names.normalization import (
    capitalize_word,
    categorize_chars,
    dictionary_key,
    fold,
    has_sequential_alphas,
    is_mixed_case,
    namecase,
    normalize_nfkd_whitespace,
    recompose,
    to_ascii_initial,
)


@pytest.mark.parametrize(
    "word, might_be_particle, expected",
    [
        ("smith", False, "Smith"),
        ("SMITH", False, "Smith"),
        ("o'connor", False, "O'Connor"),
        ("doe-ray", False, "Doe-Ray"),
        ("jean–luc", False, "Jean-Luc"),
        ("mcdonald", False, "McDonald"),
        ("MCDONALD", False, "McDonald"),
        ("macdonald", False, "MacDonald"),
        ("smith-macdonald", False, "Smith-MacDonald"),
        ("machado", False, "Machado"),
        ("mackie", False, "Mackie"),
        ("mack", False, "Mack"),
        ("macy", False, "Macy"),
        ("de", True, "de"),
        ("DE", True, "de"),
        ("de", False, "De"),
        ("van", True, "van"),
        ("hoya", True, "Hoya"),
        ("josé", False, "José"),
    ],
)
def test_namecase(word, might_be_particle, expected):
    assert namecase(word, might_be_particle) == expected


def test_capitalize_word_keeps_combining_marks_inside_words():
    decomposed = normalize_nfkd_whitespace("núñez")
    assert recompose(capitalize_word(decomposed)) == "Núñez"


def test_fold():
    assert fold("Núñez-Gómez") == "nunezgomez"
    assert fold("O'Connor") == "oconnor"
    assert fold("Straße") == "strasse"
    assert fold("Æsir") == "aesir"
    assert fold("Øster") == "oster"
    assert fold("和") == "he"
    assert fold("...") == ""


def test_to_ascii_initial():
    assert to_ascii_initial("J") == "J"
    assert to_ascii_initial("É") == "E"
    assert to_ascii_initial("鄭") == "Z"
    assert to_ascii_initial("-") is None


def test_dictionary_key():
    assert dictionary_key("Dr.") == "dr"
    assert dictionary_key("M.D.") == "md"
    assert dictionary_key("JR") == "jr"


def test_normalize_nfkd_whitespace():
    assert normalize_nfkd_whitespace("Jane Doe") == "Jane Doe"
    assert normalize_nfkd_whitespace("Jane\tDoe Smith") == "Jane Doe Smith"
    assert normalize_nfkd_whitespace("ﬁona") == "fiona"
    assert normalize_nfkd_whitespace("Jos\u00e9") == "Jose\u0301"


def test_is_mixed_case():
    assert is_mixed_case("Jane Doe")
    assert is_mixed_case("jane DOE")
    assert not is_mixed_case("JANE DOE")
    assert not is_mixed_case("jane doe")
    assert not is_mixed_case("鄭和")


def test_categorize_chars():
    counts = categorize_chars("O'Neil")
    assert (counts.chars, counts.alpha, counts.upper, counts.ascii_alpha) == (6, 5, 2, 5)
    assert counts.non_alpha == 1

    counts = categorize_chars(normalize_nfkd_whitespace("Émile"))
    assert (counts.chars, counts.alpha, counts.upper, counts.ascii_alpha, counts.combining) == (6, 5, 1, 5, 1)


def test_has_sequential_alphas():
    assert has_sequential_alphas("Dr.")
    assert not has_sequential_alphas("M.D.")
    assert not has_sequential_alphas("J")
