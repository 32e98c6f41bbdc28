import pytest

from recipe_finder.ingredients.config import NormalizerConfig
from recipe_finder.ingredients.normalizer import depluralize, fold_accents, normalize


def test_empty_and_blank_input():
    assert normalize("") == ""
    assert normalize("   ") == ""


def test_lowercases_and_trims():
    assert normalize("  Chicken  ") == "chicken"


def test_parentheses_are_unwrapped_not_dropped():
    assert normalize("Tomato (cherry)") == "tomato cherry"
    assert normalize("Tomato (fresh)") == "tomato"


def test_commas_and_ampersands_become_spaces():
    assert normalize("Salt & Pepper") == "salt pepper"
    assert normalize("Garlic, minced") == "garlic"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Cherries", "cherry"),
        ("Leaves", "leaf"),
        ("Tomatoes", "tomato"),
        ("eggs", "egg"),
        ("Cheeses", "cheese"),
        ("glass", "glass"),
    ],
)
def test_plurals(raw, expected):
    assert normalize(raw) == expected


def test_depluralize_suffix_rules():
    assert depluralize("berries") == "berry"
    assert depluralize("halves") == "half"
    assert depluralize("potatoes") == "potato"
    assert depluralize("carrots") == "carrot"
    # too short for the suffix rules
    assert depluralize("as") == "as"
    assert depluralize("oz") == "oz"


def test_abbreviations_expand_as_whole_words():
    assert normalize("2 tbsp olive oil") == "tablespoon olive oil"
    assert normalize("1 tsp salt") == "teaspoon salt"
    assert normalize("8 oz cream cheese") == "ounce cream cheese"
    assert normalize("2 lbs potatoes") == "pound potato"


def test_cooking_terms_removed():
    assert normalize("1 lb ground beef") == "pound beef"
    assert normalize("Boneless Skinless Chicken Breasts") == "chicken breast"
    assert normalize("Diced Tomatoes (canned)") == "tomato canned"


def test_cooking_term_kept_when_it_is_the_only_word():
    assert normalize("Fresh") == "fresh"
    assert normalize("fresh minced") == "fresh"


def test_descriptor_phrases_removed():
    assert normalize("Extra Virgin Olive Oil") == "olive oil"
    assert normalize("Organic Spinach") == "spinach"
    assert normalize("Tomatoes from Italy") == "tomato"
    assert normalize("cold pressed canola oil") == "canola oil"


def test_numbers_and_percentages_stripped():
    assert normalize("2% milk") == "milk"
    assert normalize("1/2 cup flour") == "cup flour"
    assert normalize("3 eggs") == "egg"


def test_accents_folded():
    assert normalize("Jalapeños") == "jalapeno"
    assert normalize("Crème Fraîche") == "creme fraiche"
    assert fold_accents("façade") == "facade"


def test_accents_folded_after_term_removal():
    assert normalize("Frésh Basil") == "fresh basil"
    assert normalize("fresh basil") == "basil"


def test_injected_tables():
    config = NormalizerConfig(abbreviations={"c": "cup"}, cooking_terms=("sliced",), descriptors=())
    assert normalize("2 c flour, sliced", config) == "cup flour"
    # the injected tables replace the defaults
    assert normalize("2 tbsp organic sugar", config) == "tbsp organic sugar"


@pytest.mark.parametrize(
    "raw",
    [
        "Tomato (fresh)",
        "Garlic, minced",
        "2 cloves garlic, minced",
        "Boneless Skinless Chicken Breasts",
        "Extra Virgin Olive Oil from Italy",
        "2 tbsp olive oil",
        "Cheeses",
        "Glasses",
        "Jalapeños",
        "1/2 cup parmesan cheese, grated",
        "Salt & Pepper",
        "fresh minced",
        "2% milk",
    ],
)
def test_normalize_is_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once
