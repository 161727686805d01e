from typing import Annotated

from fastapi import Depends

from app.spells.caster import SpellCaster, get_spell_caster
from app.spells.recorder import SpellRecorder, get_spell_recorder
from app.subscriptions.store import SubscriberStore, get_subscriber_store

CasterDep = Annotated[SpellCaster, Depends(get_spell_caster)]
RecorderDep = Annotated[SpellRecorder, Depends(get_spell_recorder)]
SubscriberStoreDep = Annotated[SubscriberStore, Depends(get_subscriber_store)]
