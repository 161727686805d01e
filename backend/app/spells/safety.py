from typing import Any

from app.core.errors import BannedTermError

# Lowercase substrings that may not appear in a spell's ingredients.
BANNED_TERMS: frozenset[str] = frozenset(
    {
        # weapons
        "gun",
        "firearm",
        "rifle",
        "pistol",
        "bullet",
        "ammunition",
        "knife",
        "dagger",
        "machete",
        "bomb",
        "explosive",
        "grenade",
        "gunpowder",
        # hazardous substances
        "poison",
        "arsenic",
        "cyanide",
        "bleach",
        "ammonia",
        "mercury",
        "gasoline",
        "lighter fluid",
        "antifreeze",
        "lye",
        "belladonna",
        "hemlock",
        "nightshade",
        # controlled substances
        "cocaine",
        "heroin",
        "meth",
        "fentanyl",
        "opium",
        "lsd",
        "ketamine",
        # hate symbols
        "swastika",
        "noose",
        "confederate flag",
    }
)


def find_banned_term(text: Any) -> str | None:
    """
    Return the banned term that occurs earliest in ``text``, or None.
    Matching is plain case-insensitive substring containment.
    """
    if not isinstance(text, str) or not text:
        return None
    lowered = text.lower()
    hits = [(lowered.find(term), -len(term), term) for term in BANNED_TERMS if term in lowered]
    if not hits:
        return None
    return min(hits)[2]


def check_ingredients(ingredients: Any) -> None:
    """Raise BannedTermError if the ingredients mention anything on the banned list."""
    term = find_banned_term(ingredients)
    if term is not None:
        raise BannedTermError(term)
