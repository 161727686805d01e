from sqlmodel import Session

from app.models import SpellRecord, SpellRecordCreate


def create_spell_record(*, session: Session, record_in: SpellRecordCreate) -> SpellRecord:
    db_record = SpellRecord.model_validate(record_in)
    session.add(db_record)
    session.commit()
    session.refresh(db_record)
    return db_record
