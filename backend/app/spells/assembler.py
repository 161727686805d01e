from pydantic import BaseModel

from app.spells.presets import LengthPreset
from app.spells.prompts.ritual import (
    RITUAL_INGREDIENTS_LINE,
    RITUAL_SYSTEM_PROMPT,
    RITUAL_USER_PROMPT,
)


class RitualPrompt(BaseModel):
    system: str
    user: str


def assemble_ritual_prompt(
    intent: str,
    preset: LengthPreset,
    ingredients: str | None = None,
) -> RitualPrompt:
    """
    Build the system and user blocks for a spell.
    User strings are inserted verbatim; the safety filter has already run on ingredients.
    """
    lines = [RITUAL_USER_PROMPT.format(intent=intent)]
    if ingredients and ingredients.strip():
        lines.append(RITUAL_INGREDIENTS_LINE.format(ingredients=ingredients.strip()))
    lines.append(preset.guideline)
    return RitualPrompt(system=RITUAL_SYSTEM_PROMPT, user="\n".join(lines))
