from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from app.core.config import settings

LengthName = Literal["short", "medium", "long"]


class LengthPreset(BaseModel):
    """Token budget plus the word-count guidance handed to the model."""

    model_config = ConfigDict(frozen=True)

    name: LengthName
    token_cap: int = Field(gt=0)
    guideline: str


LENGTH_PRESETS: dict[str, LengthPreset] = {
    "long": LengthPreset(name="long", token_cap=260, guideline="Length about 150 to 220 words."),
    "medium": LengthPreset(name="medium", token_cap=140, guideline="Length about 75 to 110 words."),
    "short": LengthPreset(name="short", token_cap=80, guideline="Length about 35 to 55 words."),
}


def _normalize(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip().lower()


def resolve_length_preset(value: Any, default: str | None = None) -> LengthPreset:
    """
    Map a requested size category to its preset.
    Anything unrecognized, including a missing value, resolves to the default preset.
    """
    preset = LENGTH_PRESETS.get(_normalize(value)) or LENGTH_PRESETS.get(_normalize(default))
    if preset is not None:
        return preset
    return LENGTH_PRESETS[settings.DEFAULT_SPELL_LENGTH]
