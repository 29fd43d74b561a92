import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models

logger = logging.getLogger(__name__)


def split_fields(fields: str) -> List[str]:
    """Turns ``"name, pronouns,,site"`` into ``["name", "pronouns", "site"]``."""
    return [field.strip() for field in fields.split(",") if field.strip()]


class FritFormCollection:

    @staticmethod
    def add_one(db: Session, user_id: int, fields: List[str]) -> models.FritForm:
        fritform = models.FritForm(user_id=user_id, fields=list(fields))
        db.add(fritform)
        db.commit()
        db.refresh(fritform)
        logger.info("Created fritform %s for user %s", fritform.id, user_id)
        return fritform

    @staticmethod
    def find_one_by_form_id(db: Session, form_id: int) -> Optional[models.FritForm]:
        return db.query(models.FritForm).filter(models.FritForm.id == form_id).first()

    @staticmethod
    def find_one_by_user_id(db: Session, user_id: int) -> Optional[models.FritForm]:
        return db.query(models.FritForm).filter(models.FritForm.user_id == user_id).first()

    @staticmethod
    def update_one(db: Session, form_id: int, fields: Optional[str] = None) -> Optional[models.FritForm]:
        fritform = FritFormCollection.find_one_by_form_id(db, form_id)
        if fritform is None:
            return None
        if fields:
            fritform.fields = split_fields(fields)
        db.commit()
        db.refresh(fritform)
        return fritform

    @staticmethod
    def delete_one(db: Session, form_id: int) -> bool:
        deleted = db.query(models.FritForm).filter(models.FritForm.id == form_id).delete()
        db.commit()
        return deleted > 0
