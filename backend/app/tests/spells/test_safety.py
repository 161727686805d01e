import pytest

from app.core.errors import BannedTermError
from app.spells.safety import BANNED_TERMS, check_ingredients, find_banned_term


@pytest.mark.parametrize("ingredients", [None, "", "a white candle, sea salt and a river stone"])
def test_benign_ingredients_pass(ingredients):
    assert find_banned_term(ingredients) is None
    check_ingredients(ingredients)


def test_match_is_case_insensitive():
    assert find_banned_term("A pinch of ARSENIC") == "arsenic"


def test_rejection_names_the_term_and_suggests_alternatives():
    with pytest.raises(BannedTermError) as excinfo:
        check_ingredients("rose petals and a knife")

    assert excinfo.value.term == "knife"
    assert excinfo.value.status_code == 400
    assert '"knife"' in excinfo.value.message
    assert "candle" in excinfo.value.message


def test_earliest_match_is_reported():
    assert find_banned_term("bleach then cyanide") == "bleach"
    assert find_banned_term("cyanide then bleach") == "cyanide"


def test_longest_term_wins_at_same_position():
    assert find_banned_term("gunpowder") == "gunpowder"


def test_partial_word_collision_is_rejected():
    # Known edge case: plain substring matching flags "meth" inside "method".
    assert find_banned_term("my grandmother's method for drying lavender") == "meth"


def test_banned_terms_are_lowercase():
    assert all(term == term.lower() for term in BANNED_TERMS)
