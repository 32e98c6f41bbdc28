import pytest

from recipe_finder.search.config import ScoringConfig
from recipe_finder.search.models import Recipe
from recipe_finder.search.scoring import best_ingredient_match, calculate_score

STIR_FRY_INGREDIENTS = [
    "chicken breast",
    "bell peppers",
    "onion",
    "garlic",
    "soy sauce",
    "vegetable oil",
]


def _recipe(ingredients, cooking_time=20, difficulty="easy", recipe_id="recipe-1"):
    return Recipe(
        id=recipe_id,
        title="Test Recipe",
        description="A recipe for scoring tests",
        cooking_time=cooking_time,
        difficulty=difficulty,
        ingredients=ingredients,
        instructions=["Cook everything"],
    )


def test_empty_search_scores_zero():
    assert calculate_score(_recipe(STIR_FRY_INGREDIENTS), []) == 0


def test_recipe_without_ingredients_scores_zero():
    recipe = Recipe.model_construct(
        id="empty", title="Empty", description="No ingredients",
        cooking_time=10, difficulty="easy", ingredients=[], instructions=["Nothing"],
    )
    assert calculate_score(recipe, ["chicken"]) == 0


def test_partial_search_is_boosted_by_quick_easy_recipe():
    # Both search terms match, so the base is 1.0 before the easy boost and clamp
    score = calculate_score(_recipe(STIR_FRY_INGREDIENTS), ["chicken breast", "bell peppers"])
    assert score > 0.33
    assert score == pytest.approx(1.0)


def test_base_score_is_share_of_search_terms_matched():
    score = calculate_score(
        _recipe(STIR_FRY_INGREDIENTS), ["chicken breast", "bell peppers", "beef", "pork"]
    )
    assert score == pytest.approx(2 / 4 * 1.1)


def test_full_search_is_clamped():
    score = calculate_score(_recipe(STIR_FRY_INGREDIENTS), list(STIR_FRY_INGREDIENTS))
    assert score == pytest.approx(1.0)


def test_unrelated_search_scores_zero():
    assert calculate_score(_recipe(STIR_FRY_INGREDIENTS), ["beef", "pork"]) == 0


def test_quick_easy_short_recipe_weights():
    recipe = _recipe(["flour", "milk", "egg"], cooking_time=10, difficulty="easy")
    assert calculate_score(recipe, ["flour", "sugar"]) == pytest.approx(0.5 * 1.1 * 1.1 * 1.05)


def test_medium_recipe_weights():
    ingredients = ["flour"] + [f"item {i}" for i in range(7)]
    recipe = _recipe(ingredients, cooking_time=45, difficulty="medium")
    assert calculate_score(recipe, ["flour", "sugar"]) == pytest.approx(0.5 * 0.9 * 1.0 * 1.0)


def test_slow_hard_long_recipe_weights():
    ingredients = ["flour"] + [f"item {i}" for i in range(11)]
    recipe = _recipe(ingredients, cooking_time=90, difficulty="hard")
    assert calculate_score(recipe, ["flour", "sugar"]) == pytest.approx(0.5 * 0.8 * 0.9 * 0.95)


def test_adding_true_ingredients_never_lowers_score():
    recipe = _recipe(STIR_FRY_INGREDIENTS, cooking_time=90, difficulty="hard")
    search = ["beef"]
    previous = calculate_score(recipe, search)
    for ingredient in STIR_FRY_INGREDIENTS:
        search = search + [ingredient]
        current = calculate_score(recipe, search)
        assert current >= previous
        previous = current


def test_exact_match_tier():
    assert best_ingredient_match("Onion", ["onion"]) == 1.0


def test_substring_tier():
    assert best_ingredient_match("onion", ["1 onion, sliced"]) == 0.9


def test_simplified_substring_tier():
    assert best_ingredient_match("salt&pepper", ["salt pepper mix"]) == 0.8


def test_plural_counterpart_tier():
    assert best_ingredient_match("tomatoes", ["tomato sauce"]) == 0.7
    assert best_ingredient_match("vegetables", ["vegetable oil"]) == 0.7


def test_vegetable_category_tier():
    assert best_ingredient_match("vegetables", ["broccoli"]) == 0.6
    assert best_ingredient_match("vegetables", ["chicken"]) == 0


def test_best_match_across_recipe_ingredients():
    assert best_ingredient_match("garlic", ["garlic powder", "garlic"]) == 1.0


def test_blank_search_term_never_matches():
    assert best_ingredient_match("  ", ["onion"]) == 0


def test_injected_plural_pairs():
    config = ScoringConfig(plural_pairs=(("leaf", "leaves"),))
    assert best_ingredient_match("leaves", ["leaf lettuce"], config) == 0.7
    assert best_ingredient_match("leaves", ["leaf lettuce"]) == 0


def test_scores_stay_in_unit_interval():
    recipe = _recipe(["flour"], cooking_time=5, difficulty="easy")
    assert 0 <= calculate_score(recipe, ["flour"]) <= 1
