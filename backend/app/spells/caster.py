import logging
from typing import Any

from pydantic import BaseModel

from app.core.errors import MissingIntentError
from app.spells.assembler import assemble_ritual_prompt
from app.spells.llm_client import LLMClient
from app.spells.presets import LengthPreset, resolve_length_preset
from app.spells.safety import check_ingredients

logger = logging.getLogger(__name__)


class SpellResult(BaseModel):
    text: str
    intent: str
    preset: LengthPreset


class SpellCaster:
    """
    Runs a spell request through the pipeline:
    safety filter, length preset, prompt assembly, then one completion call.
    """

    def __init__(self, llm: LLMClient | None = None, default_length: str | None = None):
        self.llm = llm or LLMClient()
        self.default_length = default_length

    async def cast(self, intent: Any, length: Any = None, ingredients: Any = None) -> SpellResult:
        cleaned_intent = intent.strip() if isinstance(intent, str) else ""
        if not cleaned_intent:
            raise MissingIntentError()

        check_ingredients(ingredients)
        preset = resolve_length_preset(length, default=self.default_length)
        prompt = assemble_ritual_prompt(
            cleaned_intent,
            preset,
            ingredients if isinstance(ingredients, str) else None,
        )

        logger.info("Casting %s spell", preset.name)
        text = await self.llm.generate_text(
            system_prompt=prompt.system,
            user_prompt=prompt.user,
            max_tokens=preset.token_cap,
        )
        return SpellResult(text=text, intent=cleaned_intent, preset=preset)


_spell_caster_instance = None


def get_spell_caster() -> SpellCaster:
    """Lazily builds the caster so the OpenAI client is created on first use."""
    global _spell_caster_instance
    if _spell_caster_instance is None:
        _spell_caster_instance = SpellCaster()
    return _spell_caster_instance
