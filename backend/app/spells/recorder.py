import logging

from sqlalchemy.engine import Engine
from sqlmodel import Session

from app.core.db import engine as default_engine
from app.crud import create_spell_record
from app.models import SpellRecordCreate

logger = logging.getLogger(__name__)


class SpellRecorder:
    """Best-effort sink for cast spells. Runs detached from the response."""

    def __init__(self, bind: Engine | None = None):
        self.bind = bind or default_engine

    def record(self, record_in: SpellRecordCreate) -> None:
        # At most once: failures are logged and dropped, never retried.
        try:
            with Session(self.bind) as session:
                record = create_spell_record(session=session, record_in=record_in)
                logger.info("Recorded %s spell %s", record_in.length, record.id)
        except Exception:
            logger.exception("Failed to record %s spell", record_in.length)


_spell_recorder_instance = None


def get_spell_recorder() -> SpellRecorder:
    global _spell_recorder_instance
    if _spell_recorder_instance is None:
        _spell_recorder_instance = SpellRecorder()
    return _spell_recorder_instance
