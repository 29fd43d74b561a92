import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models
from .users import UserCollection

logger = logging.getLogger(__name__)


class FreetCollection:
    """
    Adding, finding, updating and deleting freets.

    Every write that changes who owns a freet is followed by a second write
    to the author's ``freets`` set. The two are committed separately, so a
    failure in between leaves the author's set out of date.
    """

    @staticmethod
    def add_one(db: Session, author_id: int, content: str) -> models.Freet:
        date = datetime.now()
        freet = models.Freet(
            author_id=author_id,
            content=content,
            date_created=date,
            date_modified=date,
            highlight=False,
        )
        db.add(freet)
        db.commit()
        db.refresh(freet)
        logger.info("Created freet %s by user %s", freet.id, author_id)

        UserCollection.add_freet(db, author_id, freet.id)
        return freet

    @staticmethod
    def find_one(db: Session, freet_id: int) -> Optional[models.Freet]:
        return db.query(models.Freet).filter(models.Freet.id == freet_id).first()

    @staticmethod
    def find_all(db: Session) -> List[models.Freet]:
        # Most recently edited first
        return db.query(models.Freet)\
            .order_by(models.Freet.date_modified.desc(), models.Freet.id.desc())\
            .all()

    @staticmethod
    def find_all_by_username(db: Session, username: str) -> List[models.Freet]:
        author = UserCollection.find_one_by_username(db, username)
        if author is None:
            return []
        return db.query(models.Freet)\
            .filter(models.Freet.author_id == author.id)\
            .order_by(models.Freet.date_modified.desc(), models.Freet.id.desc())\
            .all()

    @staticmethod
    def update_one(db: Session, freet_id: int, content: Optional[str] = None) -> Optional[models.Freet]:
        freet = FreetCollection.find_one(db, freet_id)
        if freet is None:
            return None
        if content:
            freet.content = content
        freet.date_modified = datetime.now()
        db.commit()
        db.refresh(freet)
        return freet

    @staticmethod
    def delete_one(db: Session, freet_id: int) -> bool:
        freet = FreetCollection.find_one(db, freet_id)
        if freet is None:
            return False
        UserCollection.delete_freet(db, freet.author_id, freet_id)
        db.query(models.Freet).filter(models.Freet.id == freet_id).delete()
        db.commit()
        logger.info("Deleted freet %s", freet_id)
        return True

    @staticmethod
    def delete_many(db: Session, author_id: int) -> None:
        """Deletes every freet by the author and empties their freets set."""
        count = db.query(models.Freet).filter(models.Freet.author_id == author_id).delete()
        db.commit()
        UserCollection.delete_many_freet(db, author_id)
        logger.info("Deleted %d freets by user %s", count, author_id)
