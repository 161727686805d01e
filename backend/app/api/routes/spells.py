from typing import Any

from fastapi import APIRouter, BackgroundTasks, Request

from app.api.deps import CasterDep, RecorderDep
from app.core.security import hash_client_address
from app.models import (
    USER_AGENT_MAX_LENGTH,
    ErrorResponse,
    SpellRecordCreate,
    SpellRequest,
    SpellResponse,
)

router = APIRouter(tags=["spells"])


@router.post(
    "/cast-spell",
    response_model=SpellResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def cast_spell(
    *,
    request: Request,
    spell_in: SpellRequest | None = None,
    background_tasks: BackgroundTasks,
    caster: CasterDep,
    recorder: RecorderDep,
) -> Any:
    """
    Turn an intention into a ritual. The spell is recorded after the response is sent.
    """
    spell_in = spell_in or SpellRequest()
    result = await caster.cast(spell_in.intent, spell_in.length, spell_in.ingredients)

    client_host = request.client.host if request.client else None
    user_agent = request.headers.get("user-agent") or ""
    record_in = SpellRecordCreate(
        intent=result.intent,
        length=result.preset.name,
        spell_text=result.text,
        user_agent=user_agent[:USER_AGENT_MAX_LENGTH] or None,
        ip_hash=hash_client_address(client_host),
    )
    background_tasks.add_task(recorder.record, record_in)

    return SpellResponse(spell=result.text)
